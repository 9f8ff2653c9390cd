from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Either `Some(value)` or `NONE`.

    Returned by the `next()`, `next_back()` and `last()` methods of every group iterator, so that exhaustion is a value rather than an exception.

    Supports structural pattern matching:
    ```python
    >>> import pyogroup as pg
    >>> match pg.LinearGroupBy([7, 7, 8]).next():
    ...     case pg.Some(group):
    ...         print(list(group))
    ...     case _:
    ...         print("exhausted")
    [7, 7]

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearGroupBy([1])
        >>> it.next().is_some()
        True
        >>> it.next().is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> bool:
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearGroupBy("aab")
        >>> it.next().unwrap()
        SliceView('a', 'a')
        >>> it.next_back().unwrap()
        SliceView('b')
        >>> it.next().unwrap()
        Traceback (most recent call last):
            ...
        pyogroup._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises `OptionUnwrapError` with **msg**.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or **default**.
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **f**."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: `Some(f(value))`, or `NONE` untouched.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearGroupBy([3, 3, 3, 4])
        >>> it.next().map(len)
        Some(3)
        >>> it.next().map(len)
        Some(1)
        >>> it.next().map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
