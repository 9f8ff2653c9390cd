"""Group boundary searches.

Every strategy works on a `Cursor` and an absolute window `[lo, hi)` with `lo < hi`.

- `forward` returns the end of the group starting at **lo**, in `(lo, hi]`.
- `backward` returns the start of the group ending at **hi**, in `[lo, hi)`.

The predicate is always called with the earlier element first.

Binary and exponential searches assume the predicate is monotonic against the first (forward) or last (backward) element of the window.
If it is not, they still return a position inside the window that leaves a non-empty group, but the group may not be the maximal run a linear scan would find.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal

from ._core import SEARCH_NAMES, SearchName, get_config

if TYPE_CHECKING:
    from ._types import Cursor, Predicate

type End = Literal["front", "back"]


class BoundarySearch(ABC):
    """Locate where the current group ends, from either end of a window."""

    __slots__ = ()

    name: str

    @abstractmethod
    def forward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        """Return the end of the group starting at **lo**."""
        ...

    @abstractmethod
    def backward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        """Return the start of the group ending at **hi**."""
        ...

    def locate[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T], end: End
    ) -> int:
        """Run the search from **end**, clamping the result to a legal, non-empty group.

        Args:
            cursor (Cursor[T]): Element access over the buffer.
            lo (int): Start of the remaining window.
            hi (int): End of the remaining window (exclusive). Must be greater than **lo**.
            predicate (Predicate[T]): Adjacency test.
            end (End): `"front"` to find the end of the first group, `"back"` to find the start of the last one.

        Returns:
            int: The absolute boundary position.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> from operator import eq
        >>> data = [1, 1, 1, 3, 3, 2, 2, 2]
        >>> cursor = pg.ItemCursor(data)
        >>> pg.EXPONENTIAL.locate(cursor, 0, len(data), eq, "front")
        3
        >>> pg.BINARY.locate(cursor, 3, len(data), eq, "back")
        5

        ```
        """
        if end == "front":
            pos = self.forward(cursor, lo, hi, predicate)
            return min(max(pos, cursor.step(lo)), hi)
        pos = self.backward(cursor, lo, hi, predicate)
        return min(max(pos, lo), cursor.step_back(hi))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Linear(BoundarySearch):
    """Sequential scan of adjacent pairs.

    O(k) per group of length k. Works with any predicate, monotonic or not.
    """

    __slots__ = ()

    name = "linear"

    def forward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        at, step = cursor.at, cursor.step
        a = lo
        prev = at(a)
        while (b := step(a)) < hi:
            cur = at(b)
            if not predicate(prev, cur):
                return b
            a, prev = b, cur
        return hi

    def backward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        at, step_back = cursor.at, cursor.step_back
        b = step_back(hi)
        nxt = at(b)
        while b > lo:
            a = step_back(b)
            cur = at(a)
            if not predicate(cur, nxt):
                return b
            b, nxt = a, cur
        return lo


def _first_false[T](
    cursor: Cursor[T], low: int, high: int, first: T, predicate: Predicate[T]
) -> int:
    """Partition point in `[low, high]`: first position whose element breaks the run started by **first**."""
    at = cursor.at
    while low < high:
        mid = (low + high) // 2
        if predicate(first, at(mid)):
            low = mid + 1
        else:
            high = mid
    return cursor.ceil(low)


def _first_true[T](
    cursor: Cursor[T], low: int, high: int, last: T, predicate: Predicate[T]
) -> int:
    """Partition point in `[low, high]`: first position whose element joins the run ended by **last**."""
    at = cursor.at
    while low < high:
        mid = (low + high) // 2
        if predicate(at(mid), last):
            high = mid
        else:
            low = mid + 1
    return cursor.ceil(low)


class Binary(BoundarySearch):
    """Partition-point binary search over the whole remaining window.

    O(log n) per group, n being the length of the remaining window.
    """

    __slots__ = ()

    name = "binary"

    def forward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        return _first_false(cursor, cursor.step(lo), hi, cursor.at(lo), predicate)

    def backward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        last_start = cursor.step_back(hi)
        return _first_true(cursor, lo, last_start, cursor.at(last_start), predicate)


class Exponential(BoundarySearch):
    """Galloping search: probe at distances 1, 2, 4, 8... then binary search the last gap.

    O(log k) per group of length k, which beats `Binary` when groups are short compared to the window.
    """

    __slots__ = ()

    name = "exponential"

    def forward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        at = cursor.at
        first = at(lo)
        # probes start past the first element, never inside it
        base = cursor.step(lo)
        bound = 1
        while base + bound - 1 < hi and predicate(first, at(base + bound - 1)):
            bound *= 2
        low = base + bound // 2
        high = min(base + bound - 1, hi)
        return _first_false(cursor, low, high, first, predicate)

    def backward[T](
        self, cursor: Cursor[T], lo: int, hi: int, predicate: Predicate[T]
    ) -> int:
        at = cursor.at
        last_start = cursor.step_back(hi)
        last = at(last_start)
        bound = 1
        while last_start - bound >= lo and predicate(at(last_start - bound), last):
            bound *= 2
        low = max(lo, last_start - bound + 1)
        high = last_start - bound // 2
        return _first_true(cursor, low, max(high, low), last, predicate)


LINEAR = Linear()
BINARY = Binary()
EXPONENTIAL = Exponential()

_BY_NAME: dict[str, BoundarySearch] = {s.name: s for s in (LINEAR, BINARY, EXPONENTIAL)}


def get_search(search: SearchName | BoundarySearch | None = None) -> BoundarySearch:
    """Resolve a strategy name (or `None` for the configured default) into a `BoundarySearch`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> pg.get_search("binary")
    Binary()
    >>> pg.get_search(pg.EXPONENTIAL) is pg.EXPONENTIAL
    True
    >>> pg.get_search("quadratic")
    Traceback (most recent call last):
        ...
    ValueError: unknown search strategy: 'quadratic', expected one of binary, exponential, linear

    ```
    """
    match search:
        case BoundarySearch():
            return search
        case None:
            return _BY_NAME[get_config().default_search]
        case str() if search in SEARCH_NAMES:
            return _BY_NAME[search]
        case _:
            msg = f"unknown search strategy: {search!r}, expected one of {', '.join(sorted(SEARCH_NAMES))}"
            raise ValueError(msg)
