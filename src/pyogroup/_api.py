"""Constructors picking the iterator class from a strategy name."""

from __future__ import annotations

from collections.abc import Sequence
from operator import eq
from typing import TYPE_CHECKING

from ._groups import (
    BinaryGroupBy,
    BinaryGroupByMut,
    BinaryStrGroupBy,
    BinaryStrGroupByMut,
    ExponentialGroupBy,
    ExponentialGroupByMut,
    ExponentialStrGroupBy,
    ExponentialStrGroupByMut,
    LinearGroupBy,
    LinearGroupByMut,
    LinearStrGroupBy,
    LinearStrGroupByMut,
)
from ._search import get_search

if TYPE_CHECKING:
    from ._core import SearchName
    from ._groups import GroupIterator
    from ._search import BoundarySearch
    from ._types import Predicate, SupportsItemAssign
    from ._views import BytesLike, Utf8View, Utf8ViewMut

_SLICE: dict[str, type[GroupIterator]] = {
    "linear": LinearGroupBy,
    "binary": BinaryGroupBy,
    "exponential": ExponentialGroupBy,
}
_SLICE_MUT: dict[str, type[GroupIterator]] = {
    "linear": LinearGroupByMut,
    "binary": BinaryGroupByMut,
    "exponential": ExponentialGroupByMut,
}
_STR: dict[str, type[GroupIterator]] = {
    "linear": LinearStrGroupBy,
    "binary": BinaryStrGroupBy,
    "exponential": ExponentialStrGroupBy,
}
_STR_MUT: dict[str, type[GroupIterator]] = {
    "linear": LinearStrGroupByMut,
    "binary": BinaryStrGroupByMut,
    "exponential": ExponentialStrGroupByMut,
}


def _pick(
    table: dict[str, type[GroupIterator]], search: SearchName | BoundarySearch | None
) -> type[GroupIterator]:
    strategy = get_search(search)
    try:
        return table[strategy.name]
    except KeyError:
        msg = f"no iterator registered for {strategy!r}, subclass one and set `_search` instead"
        raise ValueError(msg) from None


def group_by[T](
    data: Sequence[T],
    predicate: Predicate[T] | None = None,
    *,
    search: SearchName | BoundarySearch | None = None,
) -> GroupIterator:
    """Group **data** with the strategy named by **search**.

    Args:
        data (Sequence[T]): The sequence to group.
        predicate (Predicate[T] | None): Adjacency test. Defaults to `operator.eq`.
        search (SearchName | BoundarySearch | None): Strategy to use. Defaults to `get_config().default_search`.

    Returns:
        GroupIterator: One of `LinearGroupBy`, `BinaryGroupBy`, `ExponentialGroupBy`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> pg.group_by([1, 1, 2], search="exponential")
    ExponentialGroupBy(SliceView(1, 1, 2))
    >>> [list(g) for g in pg.group_by([1, 1, 2])]
    [[1, 1], [2]]

    ```
    """
    return _pick(_SLICE, search)(data, predicate or eq)


def group_by_mut[T](
    data: SupportsItemAssign[T],
    predicate: Predicate[T] | None = None,
    *,
    search: SearchName | BoundarySearch | None = None,
) -> GroupIterator:
    """Group a mutable sequence into disjoint `SliceMut`s, see `group_by`."""
    return _pick(_SLICE_MUT, search)(data, predicate or eq)


def str_group_by(
    text: str | Utf8View | BytesLike,
    predicate: Predicate[str] | None = None,
    *,
    search: SearchName | BoundarySearch | None = None,
) -> GroupIterator:
    """Group the characters of **text** into `Utf8View`s, see `group_by`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> def is_cjk(c: str) -> bool:
    ...     return "\\u4e00" <= c <= "\\u9fff"
    >>> it = pg.str_group_by("abc包包bbccdd饰饰", lambda a, b: is_cjk(a) == is_cjk(b))
    >>> [str(g) for g in it]
    ['abc', '包包', 'bbccdd', '饰饰']

    ```
    """
    return _pick(_STR, search)(text, predicate or eq)


def str_group_by_mut(
    text: bytearray | memoryview | Utf8ViewMut,
    predicate: Predicate[str] | None = None,
    *,
    search: SearchName | BoundarySearch | None = None,
) -> GroupIterator:
    """Group writable UTF-8 text into disjoint `Utf8ViewMut`s, see `group_by`."""
    return _pick(_STR_MUT, search)(text, predicate or eq)
