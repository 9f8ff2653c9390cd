from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from .._core import get_config
from .._types import SupportsItemAccess, SupportsItemAssign
from ._base import BaseView


class ItemCursor[T]:
    """`Cursor` over an indexable buffer, one element per position."""

    __slots__ = ("at",)

    def __init__(self, base: SupportsItemAccess[T]) -> None:
        self.at = base.__getitem__

    @staticmethod
    def step(pos: int) -> int:
        return pos + 1

    @staticmethod
    def step_back(pos: int) -> int:
        return pos - 1

    @staticmethod
    def ceil(pos: int) -> int:
        return pos


def _check_indexable(data: object) -> None:
    if not (hasattr(data, "__getitem__") and hasattr(data, "__len__")):
        msg = f"expected an indexable sequence, got {type(data).__name__}"
        raise TypeError(msg)


class SliceView[T](BaseView, Sequence[T]):
    """An immutable, zero-copy window over a `Sequence`.

    This is the group type yielded by `LinearGroupBy`, `BinaryGroupBy` and `ExponentialGroupBy`.

    Implements the `Sequence` Protocol from `collections.abc`, and compares equal to any `Sequence` holding the same elements.

    Slicing with a step of 1 returns another `SliceView` over the same buffer, without copying.

    Args:
        data (Sequence[T]): The buffer to look at. Passing a `SliceView` narrows the existing window.
            A read-only view over a `SliceMut` is released together with it, when it is split or released.
        start (int): Start of the window, relative to **data**. Defaults to 0.
        stop (int | None): End of the window (exclusive), relative to **data**. Defaults to `len(data)`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> data = [1, 1, 2, 3, 3]
    >>> view = pg.SliceView(data, 1, 4)
    >>> view
    SliceView(1, 2, 3)
    >>> view == [1, 2, 3]
    True
    >>> view[1:]
    SliceView(2, 3)
    >>> view[1:].range
    range(2, 4)

    ```
    """

    __slots__ = ()

    def __init__(
        self, data: Sequence[T], start: int = 0, stop: int | None = None
    ) -> None:
        if isinstance(data, BaseView):
            data._check()
            base, offset, length = data._base, data._start, data._stop - data._start
        else:
            _check_indexable(data)
            base, offset, length = self._prepare(data), 0, len(data)
        stop = length if stop is None else stop
        if not 0 <= start <= stop <= length:
            msg = f"window [{start}, {stop}) out of range for length {length}"
            raise IndexError(msg)
        self._base = base
        self._start = offset + start
        self._stop = offset + stop
        self._released = False
        self._borrows = None
        self._owner = None
        if isinstance(data, BaseView):
            self._narrowed_from(data)

    @staticmethod
    def _prepare(data: Any) -> Any:
        return data

    def _index(self, index: int) -> int:
        length = self._stop - self._start
        if index < 0:
            index += length
        if not 0 <= index < length:
            msg = f"{type(self).__name__} index out of range"
            raise IndexError(msg)
        return self._start + index

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        self._check()
        if isinstance(index, slice):
            start, stop, step = index.indices(self._stop - self._start)
            if step == 1:
                return self._subview(self._start + start, self._start + max(start, stop))
            return tuple(self._base[self._start + i] for i in range(start, stop, step))
        return self._base[self._index(index)]

    def _subview(self, start: int, stop: int) -> Sequence[T]:
        return SliceView._from_parts(self._base, start, stop)

    def __iter__(self) -> Iterator[T]:
        self._check()
        return map(self._base.__getitem__, range(self._start, self._stop))

    def __reversed__(self) -> Iterator[T]:
        self._check()
        return map(self._base.__getitem__, reversed(range(self._start, self._stop)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other, strict=True))

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._released:
            return f"<released {name}>"
        return f"{name}({get_config().view_repr(self, len(self))})"

    def _cursor(self) -> ItemCursor[T]:
        return ItemCursor(self._base)


class SliceMut[T](SliceView[T]):
    """A mutable, zero-copy window over a mutable sequence.

    This is the group type yielded by `LinearGroupByMut`, `BinaryGroupByMut` and `ExponentialGroupByMut`.

    Writes go straight to the underlying buffer, but only inside the window: a `SliceMut` can never be resized, and never reaches outside of its range.

    `split_at` consumes the view: the original is released and the two disjoint halves are returned.

    Slicing a `SliceMut` copies, like slicing a `list`, so that no second live window over the same memory can be obtained.

    A `bytearray` buffer is wrapped in a `memoryview`, which makes the interpreter refuse to resize it while any view is alive.

    Args:
        data (SupportsItemAssign[T]): The buffer to write through, or a `SliceMut` to narrow.
        start (int): Start of the window. Defaults to 0.
        stop (int | None): End of the window (exclusive). Defaults to `len(data)`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> data = [1, 2, 3, 4, 5]
    >>> left, right = pg.SliceMut(data).split_at(2)
    >>> right[0] = 30
    >>> left.fill(0)
    >>> data
    [0, 0, 30, 4, 5]

    ```
    """

    __slots__ = ()

    _consumes_on_split = True

    def __init__(
        self, data: SupportsItemAssign[T], start: int = 0, stop: int | None = None
    ) -> None:
        if not isinstance(data, BaseView) and not hasattr(data, "__setitem__"):
            msg = f"{type(data).__name__} does not support item assignment"
            raise TypeError(msg)
        if isinstance(data, memoryview) and data.readonly:
            raise TypeError("cannot write through a read-only memoryview")
        if isinstance(data, BaseView) and not isinstance(data, SliceMut):
            msg = f"cannot build a SliceMut from an immutable {type(data).__name__}"
            raise TypeError(msg)
        super().__init__(data, start, stop)  # pyright: ignore[reportArgumentType]
        if isinstance(data, SliceMut):
            data.release()

    @staticmethod
    def _prepare(data: Any) -> Any:
        return memoryview(data) if isinstance(data, bytearray) else data

    def _subview(self, start: int, stop: int) -> list[T]:
        return [self._base[i] for i in range(start, stop)]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...
    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...
    def __setitem__(self, index: int | slice, value: Any) -> None:
        self._check()
        if not isinstance(index, slice):
            self._base[self._index(index)] = value
            return
        positions = range(*index.indices(self._stop - self._start))
        values = list(value)
        if len(values) != len(positions):
            msg = (
                f"{type(self).__name__} cannot be resized: "
                f"assigning {len(values)} items to {len(positions)} positions"
            )
            raise ValueError(msg)
        for pos, item in zip(positions, values, strict=True):
            self._base[self._start + pos] = item

    def fill(self, value: T) -> None:
        """Overwrite every element of the window with **value**."""
        self._check()
        for pos in range(self._start, self._stop):
            self._base[pos] = value

    def swap(self, a: int, b: int) -> None:
        """Swap the elements at positions **a** and **b** of the window."""
        self._check()
        i, j = self._index(a), self._index(b)
        self._base[i], self._base[j] = self._base[j], self._base[i]

    def reverse(self) -> None:
        """Reverse the window in place.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> data = [1, 2, 3, 4]
        >>> pg.SliceMut(data, 1).reverse()
        >>> data
        [1, 4, 3, 2]

        ```
        """
        self._check()
        i, j = self._start, self._stop - 1
        while i < j:
            self._base[i], self._base[j] = self._base[j], self._base[i]
            i += 1
            j -= 1
