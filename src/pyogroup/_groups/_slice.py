from __future__ import annotations

from collections.abc import Sequence
from operator import eq
from typing import TYPE_CHECKING

from .._search import BINARY, EXPONENTIAL, LINEAR
from .._views import SliceMut, SliceView
from ._base import GroupIterator

if TYPE_CHECKING:
    from .._types import Predicate, SupportsItemAssign


class _SliceGroups[T](GroupIterator[T, SliceView[T]]):
    __slots__ = ()

    def __init__(self, data: Sequence[T], predicate: Predicate[T] = eq) -> None:
        super().__init__(SliceView(data), predicate)

    def as_slice(self) -> SliceView[T]:
        """Return a view over the elements not yielded yet.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearGroupBy([1, 1, 2, 2, 3])
        >>> it.next()
        Some(SliceView(1, 1))
        >>> it.next_back()
        Some(SliceView(3))
        >>> it.as_slice()
        SliceView(2, 2)

        ```
        """
        return self._remaining(SliceView)


class _SliceGroupsMut[T](GroupIterator[T, SliceMut[T]]):
    __slots__ = ()

    def __init__(
        self, data: SupportsItemAssign[T], predicate: Predicate[T] = eq
    ) -> None:
        super().__init__(SliceMut(data), predicate)

    def as_slice(self) -> SliceView[T]:
        """Borrow a read-only view over the elements not yielded yet.

        The view is released as soon as the iterator advances, in either direction, or lends another view.
        """
        return self._remaining(SliceView)

    def as_slice_mut(self) -> SliceMut[T]:
        """Borrow a mutable view over the elements not yielded yet.

        The view is released as soon as the iterator advances, in either direction, so it never overlaps a yielded group.
        Each call also releases the views lent by earlier `as_slice` and `as_slice_mut` calls.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> data = [1, 1, 2, 2]
        >>> it = pg.LinearGroupByMut(data)
        >>> rest = it.as_slice_mut()
        >>> rest[-1] = 9
        >>> it.next_back()
        Some(SliceMut(9))
        >>> rest[0]
        Traceback (most recent call last):
            ...
        ValueError: operation forbidden on released SliceMut

        ```
        """
        return self._remaining(SliceMut)


class LinearGroupBy[T](_SliceGroups[T]):
    """Iterator over the groups of a sequence, using a linear scan.

    Yields `SliceView`s: zero-copy windows over **data**.

    The predicate receives two adjacent elements, and may be any relation: monotonic or not, stateful or not.

    Args:
        data (Sequence[T]): The sequence to group.
        predicate (Predicate[T]): Whether two adjacent elements belong to the same group. Defaults to `operator.eq`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> [list(g) for g in pg.LinearGroupBy([1, 1, 1, 3, 3, 2, 2, 2])]
    [[1, 1, 1], [3, 3], [2, 2, 2]]
    >>> [list(g) for g in pg.LinearGroupBy([1, 2, 3, 2, 1], lambda a, b: a < b)]
    [[1, 2, 3], [2], [1]]

    ```
    """

    __slots__ = ()

    _search = LINEAR


class BinaryGroupBy[T](_SliceGroups[T]):
    """Iterator over the groups of a sorted sequence, using a binary search.

    Each group costs O(log n) predicate calls, n being the number of elements left.

    The predicate must be monotonic: for the first element of the remaining window it must hold for a prefix, then fail for the rest.
    Sorted data with an equality (or ordering) relation satisfies this.
    Otherwise the groups stay in bounds and non-empty, but may be wrong.

    Args:
        data (Sequence[T]): The sequence to group.
        predicate (Predicate[T]): Whether two elements belong to the same group. Defaults to `operator.eq`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> [list(g) for g in pg.BinaryGroupBy([1, 1, 2, 2, 2, 2, 2, 2, 2, 7])]
    [[1, 1], [2, 2, 2, 2, 2, 2, 2], [7]]

    ```
    """

    __slots__ = ()

    _search = BINARY


class ExponentialGroupBy[T](_SliceGroups[T]):
    """Iterator over the groups of a sorted sequence, using a galloping search.

    Each group costs O(log k) predicate calls, k being the length of the group: the best choice when there are many small groups in a large sequence.

    Same monotonicity requirement as `BinaryGroupBy`.

    Args:
        data (Sequence[T]): The sequence to group.
        predicate (Predicate[T]): Whether two elements belong to the same group. Defaults to `operator.eq`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> it = pg.ExponentialGroupBy([0, 1, 1, 2, 2, 2, 2, 2])
    >>> [list(g) for g in reversed(it)]
    [[2, 2, 2, 2, 2], [1, 1], [0]]

    ```
    """

    __slots__ = ()

    _search = EXPONENTIAL


class LinearGroupByMut[T](_SliceGroupsMut[T]):
    """Iterator over mutable groups of a sequence, using a linear scan.

    Yields `SliceMut`s: disjoint, writable windows over **data**.

    No two groups ever overlap, so writing to one can never be observed through another.

    Args:
        data (SupportsItemAssign[T]): The mutable sequence to group. It must not be resized while the iterator or its groups are alive.
        predicate (Predicate[T]): Whether two adjacent elements belong to the same group. Defaults to `operator.eq`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> data = [1, 1, 4, 4, 4, 2]
    >>> for group in pg.LinearGroupByMut(data):
    ...     group.fill(len(group))
    >>> data
    [2, 2, 3, 3, 3, 1]

    ```
    """

    __slots__ = ()

    _search = LINEAR


class BinaryGroupByMut[T](_SliceGroupsMut[T]):
    """Iterator over mutable groups of a sorted sequence, using a binary search.

    See `BinaryGroupBy` for the monotonicity requirement, and `LinearGroupByMut` for the mutability guarantees.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> data = [3, 3, 1, 1, 1]
    >>> it = pg.BinaryGroupByMut(data)
    >>> it.next_back().unwrap().fill(0)
    >>> data
    [3, 3, 0, 0, 0]

    ```
    """

    __slots__ = ()

    _search = BINARY


class ExponentialGroupByMut[T](_SliceGroupsMut[T]):
    """Iterator over mutable groups of a sorted sequence, using a galloping search.

    See `ExponentialGroupBy` for the cost model, and `LinearGroupByMut` for the mutability guarantees.
    """

    __slots__ = ()

    _search = EXPONENTIAL
