from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, Self

if TYPE_CHECKING:
    from .._results import Option, Result


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> pg.LinearGroupBy([1, 1, 2, 3, 3]).into(lambda it: [len(g) for g in it])
        [2, 1, 2]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Handy to peek at the remaining window of an iterator without breaking a chain.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearGroupBy([1, 1, 2])
        >>> it.inspect(lambda i: print(i.as_slice())).next()
        SliceView(1, 1, 2)
        Some(SliceView(1, 1))

        ```
        """
        func(self, *args, **kwargs)
        return self


class Checkable:
    """Mixin class providing conditional wrapping based on truthiness.

    Views are falsy when empty, so these methods turn "maybe empty" windows into `Option` or `Result` values.
    """

    __slots__ = ()

    def then_some(self) -> Option[Self]:
        """Wraps `Self` in an `Option[Self]` based on its truthiness.

        Returns:
            Option[Self]: `Some(self)` if self is truthy, `NONE` otherwise.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> pg.SliceView([1, 2, 3]).then_some()
        Some(SliceView(1, 2, 3))
        >>> pg.SliceView([]).then_some()
        NONE

        ```
        """
        from .._results import NONE, Some

        return Some(self) if self else NONE

    def ok_or[E](self, err: E) -> Result[Self, E]:
        """Wrap `Self` in a `Result[Self, E]` based on its truthiness.

        Args:
            err (E): The error value to wrap in Err if self is falsy.

        Returns:
            Result[Self, E]: `Ok(self)` if self is truthy, `Err(err)` otherwise.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> pg.SliceView([1, 2, 3]).ok_or("empty")
        Ok(SliceView(1, 2, 3))
        >>> pg.SliceView([]).ok_or("empty")
        Err('empty')

        ```
        """
        from .._results import Err, Ok

        return Ok(self) if self else Err(err)
