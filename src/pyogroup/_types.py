from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

type Predicate[T] = Callable[[T, T], bool]
"""Binary test over two adjacent elements, earlier element first.

May carry mutable state, it is called once per comparison the search needs."""

type KeyFn[T, K] = Callable[[T], K]
"""Function computing a grouping key, see `from_key` constructors."""


class Cursor[T](Protocol):
    """Element access over a whole buffer, used by the boundary searches.

    Positions are absolute offsets into the buffer.

    For plain sequences an element spans one position; for UTF-8 text an element is a character spanning 1 to 4 byte positions, and `at` reads the character containing the given position.
    """

    def at(self, pos: int, /) -> T: ...
    def step(self, pos: int, /) -> int: ...
    def step_back(self, pos: int, /) -> int: ...
    def ceil(self, pos: int, /) -> int: ...


class SupportsItemAccess[T](Protocol):
    def __getitem__(self, index: int, /) -> T: ...
    def __len__(self) -> int: ...


class SupportsItemAssign[T](SupportsItemAccess[T], Protocol):
    def __setitem__(self, index: int, value: T, /) -> None: ...
