from __future__ import annotations

from operator import eq
from typing import TYPE_CHECKING

from .._search import BINARY, EXPONENTIAL, LINEAR
from .._views import Utf8View, Utf8ViewMut
from ._base import GroupIterator

if TYPE_CHECKING:
    from .._types import Predicate
    from .._views import BytesLike


def _text_view(text: str | Utf8View | BytesLike) -> Utf8View:
    match text:
        case str() | Utf8View():
            return Utf8View(text)
        case _:
            return Utf8View._from_bytes(text)


class _StrGroups(GroupIterator[str, Utf8View]):
    __slots__ = ()

    def __init__(
        self, text: str | Utf8View | BytesLike, predicate: Predicate[str] = eq
    ) -> None:
        super().__init__(_text_view(text), predicate)

    def as_str(self) -> Utf8View:
        """Return a view over the text not yielded yet.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> it = pg.LinearStrGroupBy("aabbcc")
        >>> it.next()
        Some(Utf8View('aa'))
        >>> it.as_str()
        Utf8View('bbcc')

        ```
        """
        return self._remaining(Utf8View)


class _StrGroupsMut(GroupIterator[str, Utf8ViewMut]):
    __slots__ = ()

    def __init__(
        self, text: bytearray | memoryview | Utf8ViewMut, predicate: Predicate[str] = eq
    ) -> None:
        super().__init__(Utf8ViewMut(text), predicate)

    def as_str(self) -> Utf8View:
        """Borrow a read-only view over the text not yielded yet, released when the iterator advances or lends again."""
        return self._remaining(Utf8View)

    def as_str_mut(self) -> Utf8ViewMut:
        """Borrow a mutable view over the text not yielded yet, released when the iterator advances or lends again."""
        return self._remaining(Utf8ViewMut)


class LinearStrGroupBy(_StrGroups):
    """Iterator over the groups of a text, using a linear scan over its characters.

    The predicate receives two adjacent characters, as one-character `str`s.

    Groups are `Utf8View`s: windows over the UTF-8 encoding of the text, always cut on character boundaries.

    Args:
        text (str | Utf8View | BytesLike): The text to group. Bytes-like objects must hold valid UTF-8 and are not copied.
        predicate (Predicate[str]): Whether two adjacent characters belong to the same group. Defaults to `operator.eq`.

    Raises:
        UnicodeDecodeError: If **text** is bytes-like and not valid UTF-8.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> [str(g) for g in pg.LinearStrGroupBy("aaaabbbbbaacccc")]
    ['aaaa', 'bbbbb', 'aa', 'cccc']
    >>> [str(g) for g in pg.LinearStrGroupBy("包包饰饰与与")]
    ['包包', '饰饰', '与与']
    >>> same_case = lambda a, b: a.isupper() == b.isupper()
    >>> [str(g) for g in pg.LinearStrGroupBy("ABcdEf", same_case)]
    ['AB', 'cd', 'E', 'f']

    ```
    """

    __slots__ = ()

    _search = LINEAR


class BinaryStrGroupBy(_StrGroups):
    """Iterator over the groups of a text, using a binary search over its bytes.

    Probes landing inside a multi-byte character read that whole character, and every boundary is aligned on a character start.

    See `BinaryGroupBy` for the monotonicity requirement.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> [str(g) for g in pg.BinaryStrGroupBy("aaaaééééébbb")]
    ['aaaa', 'ééééé', 'bbb']

    ```
    """

    __slots__ = ()

    _search = BINARY


class ExponentialStrGroupBy(_StrGroups):
    """Iterator over the groups of a text, using a galloping search over its bytes.

    See `ExponentialGroupBy` for the cost model, and `BinaryStrGroupBy` for character alignment.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> [str(g) for g in reversed(pg.ExponentialStrGroupBy("xx饰饰饰yy"))]
    ['yy', '饰饰饰', 'xx']

    ```
    """

    __slots__ = ()

    _search = EXPONENTIAL


class LinearStrGroupByMut(_StrGroupsMut):
    """Iterator over mutable groups of UTF-8 text, using a linear scan.

    Yields `Utf8ViewMut`s: disjoint windows over **text**, which only accept encoding-preserving writes.

    Args:
        text (bytearray | memoryview | Utf8ViewMut): Writable buffer holding UTF-8 text. It cannot be resized while the iterator or its groups are alive.
        predicate (Predicate[str]): Whether two adjacent characters belong to the same group. Defaults to `operator.eq`.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> buf = bytearray(b"aaBBcc")
    >>> for i, group in enumerate(pg.LinearStrGroupByMut(buf, lambda a, b: a.lower() == b.lower())):
    ...     if i % 2 == 0:
    ...         group.make_ascii_uppercase()
    >>> buf.decode()
    'AABBCC'

    ```
    """

    __slots__ = ()

    _search = LINEAR


class BinaryStrGroupByMut(_StrGroupsMut):
    """Iterator over mutable groups of UTF-8 text, using a binary search."""

    __slots__ = ()

    _search = BINARY


class ExponentialStrGroupByMut(_StrGroupsMut):
    """Iterator over mutable groups of UTF-8 text, using a galloping search."""

    __slots__ = ()

    _search = EXPONENTIAL
