from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self

from .._core import Checkable, Pipeable

if TYPE_CHECKING:
    from .._types import Cursor


class BaseView(Pipeable, Checkable):
    """A `[start, stop)` window over a caller-owned buffer.

    Views never copy the underlying data: they hold a reference to the buffer and two offsets.

    Like `memoryview`, a view can be released, either explicitly with `release()` (or by leaving a `with` block), or implicitly when a consuming view type is split with `split_at`.

    Any access to a released view raises `ValueError`.

    Views can lend other views over their own window (see `GroupIterator.as_slice_mut()`): every lent view, and everything split from it, is released together with the lender.
    """

    _base: Any
    _start: int
    _stop: int
    _released: bool
    _borrows: list[BaseView] | None
    _owner: BaseView | None

    __slots__ = ("_base", "_borrows", "_owner", "_released", "_start", "_stop")

    _consumes_on_split: ClassVar[bool] = False

    @classmethod
    def _from_parts(cls, base: Any, start: int, stop: int) -> Self:
        view = cls.__new__(cls)
        view._base = base
        view._start = start
        view._stop = stop
        view._released = False
        view._borrows = None
        view._owner = None
        return view

    def __enter__(self) -> Self:
        self._check()
        return self

    def __exit__(self, *_: object) -> None:
        self.release()

    def __len__(self) -> int:
        self._check()
        return self._stop - self._start

    def _check(self) -> None:
        if self._released:
            msg = f"operation forbidden on released {type(self).__name__}"
            raise ValueError(msg)

    def _check_split(self, mid: int) -> None:  # noqa: ARG002
        return None

    @property
    def released(self) -> bool:
        """Whether the view has been released."""
        return self._released

    @property
    def range(self) -> range:
        """The offsets covered by the view, in the underlying buffer.

        Two views over the same buffer share memory if and only if their ranges intersect.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> pg.SliceView([0, 1, 2, 3, 4], 1, 3).range
        range(1, 3)

        ```
        """
        self._check()
        return range(self._start, self._stop)

    def release(self) -> None:
        """Release the view, and every view it has lent.

        Idempotent.
        """
        self._released = True
        self._release_borrows()

    def _release_borrows(self) -> None:
        borrows, self._borrows = self._borrows, None
        if borrows is not None:
            for view in borrows:
                view.release()

    def split_at(self, mid: int) -> tuple[Self, Self]:
        """Divide the view into `[0, mid)` and `[mid, len)`.

        The two parts are disjoint and together cover exactly the original window.

        For mutable views, the original view is released: only the two parts remain usable.

        Args:
            mid (int): Split position, relative to the start of the view.

        Returns:
            tuple[Self, Self]: The left and right parts.

        Raises:
            IndexError: If **mid** is outside `[0, len(self)]`.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> left, right = pg.SliceView([1, 2, 3, 4, 5]).split_at(2)
        >>> left, right
        (SliceView(1, 2), SliceView(3, 4, 5))

        ```
        """
        self._check()
        if not 0 <= mid <= self._stop - self._start:
            msg = f"split position {mid} out of range for view of length {self._stop - self._start}"
            raise IndexError(msg)
        self._check_split(mid)
        pos = self._start + mid
        left = self._from_parts(self._base, self._start, pos)
        right = self._from_parts(self._base, pos, self._stop)
        if self._owner is not None:
            self._owner._adopt(left)
            self._owner._adopt(right)
        if self._consumes_on_split:
            self.release()
        return left, right

    def _adopt(self, view: BaseView) -> None:
        view._owner = self
        if self._borrows is None:
            self._borrows = []
        self._borrows.append(view)

    def _narrowed_from(self, source: BaseView) -> None:
        # read-only views over a mutable one live under it, others under its lender
        if source._consumes_on_split and not self._consumes_on_split:
            lender = source
        else:
            lender = source._owner
        if lender is not None:
            lender._adopt(self)

    def _lend[V: BaseView](self, kind: type[V]) -> V:
        """Lend a view over the whole window, revoking every earlier loan."""
        self._check()
        self._release_borrows()
        view = kind._from_parts(self._base, self._start, self._stop)
        self._adopt(view)
        return view

    def _cursor(self) -> Cursor[Any]:
        raise NotImplementedError
