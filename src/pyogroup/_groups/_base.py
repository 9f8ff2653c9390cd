from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Self

import more_itertools as mit

from .._core import Pipeable
from .._results import NONE, Option, Some

if TYPE_CHECKING:
    from .._search import BoundarySearch
    from .._types import Cursor, KeyFn, Predicate
    from .._views import BaseView

logger = logging.getLogger(__name__)


def _key_predicate[T, K](key: KeyFn[T, K]) -> Predicate[T]:
    def _same_key(a: T, b: T) -> bool:
        return key(a) == key(b)

    return _same_key


class GroupIterator[T, V: BaseView](Pipeable, Iterator[V]):
    """Double-ended iterator over the groups of a window.

    The iterator owns a single view over the part of the buffer not yielded yet.

    Every step runs the boundary search on that view, then splits it in two: one part is yielded, the other becomes the new remaining view.

    Groups can be pulled from the front (`__next__`, `next()`) and from the back (`next_back()`, `reversed()`), in any interleaving.

    Both ends only ever search inside the remaining view, so they never cross, and never yield the same element twice.

    Once the remaining view is empty, every call returns `NONE` (or raises `StopIteration`), forever.

    Subclasses choose the search strategy with the `_search` class attribute, and the view type through their constructor.
    """

    _cursor: Cursor[T]
    _predicate: Predicate[T]
    _rest: V

    __slots__ = ("_cursor", "_predicate", "_rest")

    _search: ClassVar[BoundarySearch]

    def __init__(self, rest: V, predicate: Predicate[T]) -> None:
        self._rest = rest
        self._cursor = rest._cursor()
        self._predicate = predicate
        logger.debug(
            "%s created over %d positions with %r",
            type(self).__name__,
            rest._stop - rest._start,
            self._search,
        )

    @classmethod
    def from_key[K](cls, data: Any, key: Callable[[T], K]) -> Self:
        """Group adjacent elements sharing the same **key**.

        Args:
            data (Any): The buffer to group, as accepted by the constructor.
            key (Callable[[T], K]): Function computing the key of an element.

        Returns:
            Self: A new iterator using `key(a) == key(b)` as predicate.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> [list(g) for g in pg.LinearGroupBy.from_key([1, 3, 2, 4, 5], lambda x: x % 2)]
        [[1, 3], [2, 4], [5]]

        ```
        """
        return cls(data, _key_predicate(key))

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> V:
        group = self._pop_front()
        if group is None:
            raise StopIteration
        return group

    def __reversed__(self) -> Rev[T, V]:
        return Rev(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rest!r})"

    def _pop_front(self) -> V | None:
        rest = self._rest
        lo, hi = rest._start, rest._stop
        if lo >= hi:
            return None
        pos = self._search.locate(self._cursor, lo, hi, self._predicate, "front")
        group, self._rest = rest.split_at(pos - lo)
        return group

    def _pop_back(self) -> V | None:
        rest = self._rest
        lo, hi = rest._start, rest._stop
        if lo >= hi:
            return None
        pos = self._search.locate(self._cursor, lo, hi, self._predicate, "back")
        self._rest, group = rest.split_at(pos - lo)
        return group

    def _remaining[W: BaseView](self, kind: type[W]) -> W:
        rest = self._rest
        if rest._consumes_on_split:
            return rest._lend(kind)
        return kind._from_parts(rest._base, rest._start, rest._stop)

    @property
    def is_exhausted(self) -> bool:
        """Whether every group has been yielded."""
        return self._rest._start >= self._rest._stop

    def next(self) -> Option[V]:
        """Return the next group from the front.

        Returns:
            Option[V]: `Some(group)`, or `NONE` once exhausted.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearGroupBy([1, 1, 1, 3, 3, 2, 2, 2])
        >>> it.next()
        Some(SliceView(1, 1, 1))
        >>> it.next()
        Some(SliceView(3, 3))
        >>> it.next()
        Some(SliceView(2, 2, 2))
        >>> it.next()
        NONE
        >>> it.next_back()
        NONE

        ```
        """
        group = self._pop_front()
        return NONE if group is None else Some(group)

    def next_back(self) -> Option[V]:
        """Return the next group from the back.

        Returns:
            Option[V]: `Some(group)`, or `NONE` once exhausted.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.BinaryGroupBy([1, 1, 1, 3, 3, 2, 2, 2])
        >>> it.next_back()
        Some(SliceView(2, 2, 2))
        >>> it.next()
        Some(SliceView(1, 1, 1))
        >>> it.next_back()
        Some(SliceView(3, 3))
        >>> it.next()
        NONE

        ```
        """
        group = self._pop_back()
        return NONE if group is None else Some(group)

    def last(self) -> Option[V]:
        """Consume the iterator, returning only its last group.

        Runs a single search from the back instead of walking every group from the front.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.ExponentialGroupBy([1, 1, 1, 3, 3, 2, 2, 2])
        >>> it.last()
        Some(SliceView(2, 2, 2))
        >>> it.is_exhausted
        True

        ```
        """
        group = self._pop_back()
        rest = self._rest
        self._rest = rest._from_parts(rest._base, rest._stop, rest._stop)
        rest.release()
        return NONE if group is None else Some(group)

    def count(self) -> int:
        """Consume the iterator, returning the number of remaining groups.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> pg.LinearStrGroupBy("aaaabbbbbaacccc").count()
        4

        ```
        """
        return mit.ilen(self)


class Rev[T, V: BaseView](Pipeable, Iterator[V]):
    """Reversed view of a `GroupIterator`, sharing its state.

    Pulling from a `Rev` pulls from the back of the wrapped iterator, and `next_back()` pulls from its front.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> [str(g) for g in reversed(pg.LinearStrGroupBy("aaaabbbbbaacccc"))]
    ['cccc', 'aa', 'bbbbb', 'aaaa']

    ```
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: GroupIterator[T, V]) -> None:
        self._inner = inner

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> V:
        group = self._inner._pop_back()
        if group is None:
            raise StopIteration
        return group

    def __reversed__(self) -> GroupIterator[T, V]:
        return self._inner

    def __repr__(self) -> str:
        return f"Rev({self._inner!r})"

    def next(self) -> Option[V]:
        """Return the next group from the back of the wrapped iterator."""
        return self._inner.next_back()

    def next_back(self) -> Option[V]:
        """Return the next group from the front of the wrapped iterator."""
        return self._inner.next()
