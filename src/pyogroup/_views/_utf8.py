from __future__ import annotations

import codecs
from collections.abc import Iterator
from typing import Any, Self

from .._results import Err, Ok, Result
from ._base import BaseView

type BytesLike = bytes | bytearray | memoryview


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _char_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


class Utf8Cursor:
    """`Cursor` over a valid UTF-8 buffer, one character per element.

    `at` decodes the character *containing* the given byte position, so that binary and exponential probes may land anywhere.
    """

    __slots__ = ("_buf",)

    def __init__(self, buf: memoryview) -> None:
        self._buf = buf

    def floor(self, pos: int) -> int:
        buf = self._buf
        while pos > 0 and _is_continuation(buf[pos]):
            pos -= 1
        return pos

    def ceil(self, pos: int) -> int:
        buf = self._buf
        end = len(buf)
        while pos < end and _is_continuation(buf[pos]):
            pos += 1
        return pos

    def at(self, pos: int) -> str:
        start = self.floor(pos)
        return str(self._buf[start : start + _char_width(self._buf[start])], "utf-8")

    def step(self, pos: int) -> int:
        return pos + _char_width(self._buf[pos])

    def step_back(self, pos: int) -> int:
        return self.floor(pos - 1)


def _validated(data: Any, *, writable: bool) -> memoryview:
    buf = memoryview(data).cast("B")
    if writable and buf.readonly:
        msg = f"cannot write through a read-only {type(data).__name__}"
        raise TypeError(msg)
    codecs.decode(buf, "utf-8")
    return buf


class Utf8View(BaseView):
    """An immutable, zero-copy window over UTF-8 encoded text.

    This is the group type yielded by `LinearStrGroupBy`, `BinaryStrGroupBy` and `ExponentialStrGroupBy`.

    Offsets and `len()` are counted in bytes, and always fall on character boundaries.

    Compares equal to a `str` with the same characters, and to bytes-like objects with the same encoding.

    A `str` is encoded once at construction. To group caller-owned bytes without any copy, use `from_utf8`.

    Args:
        text (str | Utf8View): The text to look at. A view over a `Utf8ViewMut` is released together with it.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> view = pg.Utf8View("包包bb")
    >>> len(view)
    8
    >>> view.split_at(6)
    (Utf8View('包包'), Utf8View('bb'))
    >>> view.split_at(1)
    Traceback (most recent call last):
        ...
    ValueError: byte index 1 is not a char boundary

    ```
    """

    __slots__ = ()

    def __init__(self, text: str | Utf8View) -> None:
        if isinstance(text, Utf8View):
            text._check()
            base, start, stop = text._base, text._start, text._stop
        elif isinstance(text, str):
            base = memoryview(text.encode("utf-8"))
            start, stop = 0, len(base)
        else:
            msg = f"expected str or Utf8View, got {type(text).__name__}, use from_utf8 for bytes"
            raise TypeError(msg)
        self._base = base
        self._start = start
        self._stop = stop
        self._released = False
        self._borrows = None
        self._owner = None
        if isinstance(text, Utf8View):
            self._narrowed_from(text)

    @classmethod
    def from_utf8(cls, data: BytesLike) -> Result[Self, UnicodeDecodeError]:
        """Build a view over caller-owned bytes, validating the encoding.

        The bytes are not copied.

        Args:
            data (BytesLike): Buffer holding UTF-8 encoded text.

        Returns:
            Result[Self, UnicodeDecodeError]: `Ok(view)`, or `Err` with the decoding error.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> pg.Utf8View.from_utf8(b"abc")
        Ok(Utf8View('abc'))
        >>> pg.Utf8View.from_utf8(b"\\xe5\\x8c").is_err()
        True

        ```
        """
        try:
            buf = _validated(data, writable=cls._consumes_on_split)
        except UnicodeDecodeError as e:
            return Err(e)
        return Ok(cls._from_parts(buf, 0, len(buf)))

    @classmethod
    def _from_bytes(cls, data: BytesLike) -> Self:
        buf = _validated(data, writable=cls._consumes_on_split)
        return cls._from_parts(buf, 0, len(buf))

    def _check_split(self, mid: int) -> None:
        pos = self._start + mid
        if pos < len(self._base) and _is_continuation(self._base[pos]):
            msg = f"byte index {mid} is not a char boundary"
            raise ValueError(msg)

    def is_char_boundary(self, index: int) -> bool:
        """Whether byte **index** (relative to the view) starts a character, or is the end of the view."""
        self._check()
        if not 0 <= index <= self._stop - self._start:
            return False
        pos = self._start + index
        return pos == self._stop or not _is_continuation(self._base[pos])

    def as_str(self) -> str:
        """Decode the window into a new `str`."""
        self._check()
        return str(self._base[self._start : self._stop], "utf-8")

    def __str__(self) -> str:
        return self.as_str()

    def as_bytes(self) -> memoryview:
        """Read-only `memoryview` over the encoded window, without copying."""
        self._check()
        return self._base[self._start : self._stop].toreadonly()

    def chars(self) -> Iterator[str]:
        """Iterate over the characters of the window."""
        return iter(self.as_str())

    def __eq__(self, other: object) -> bool:
        match other:
            case str():
                return self.as_str() == other
            case Utf8View():
                return self.as_bytes() == other.as_bytes()
            case bytes() | bytearray() | memoryview():
                return self.as_bytes() == other
            case _:
                return NotImplemented

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._released:
            return f"<released {name}>"
        return f"{name}({self.as_str()!r})"

    def _cursor(self) -> Utf8Cursor:
        return Utf8Cursor(self._base)


class Utf8ViewMut(Utf8View):
    """A mutable, zero-copy window over UTF-8 text held in a writable buffer.

    This is the group type yielded by the `...StrGroupByMut` iterators.

    Only encoding-preserving writes are offered, so the buffer stays valid UTF-8 whatever the caller does.

    `split_at` consumes the view and refuses offsets inside a multi-byte character.

    Args:
        data (bytearray | memoryview | Utf8ViewMut): Writable buffer holding UTF-8 encoded text.

    Raises:
        UnicodeDecodeError: If **data** is not valid UTF-8.
        TypeError: If **data** is read-only.

    Example:
    ```python
    >>> import pyogroup as pg
    >>> buf = bytearray("abc包".encode())
    >>> head, tail = pg.Utf8ViewMut(buf).split_at(2)
    >>> head.make_ascii_uppercase()
    >>> tail.overwrite("z饰")
    >>> buf.decode()
    'ABz饰'

    ```
    """

    __slots__ = ()

    _consumes_on_split = True

    def __init__(self, data: bytearray | memoryview | Utf8ViewMut) -> None:  # pyright: ignore[reportMissingSuperCall]
        if isinstance(data, Utf8ViewMut):
            data._check()
            base, start, stop = data._base, data._start, data._stop
            source = data
        else:
            base = _validated(data, writable=True)
            start, stop = 0, len(base)
            source = None
        self._base = base
        self._start = start
        self._stop = stop
        self._released = False
        self._borrows = None
        self._owner = None
        if source is not None:
            self._narrowed_from(source)
            source.release()

    def _map_ascii(self, low: int, high: int, delta: int) -> None:
        self._check()
        buf = self._base
        for pos in range(self._start, self._stop):
            byte = buf[pos]
            if low <= byte <= high:
                buf[pos] = byte + delta

    def make_ascii_uppercase(self) -> None:
        """Convert ASCII letters of the window to uppercase, in place."""
        self._map_ascii(0x61, 0x7A, -0x20)

    def make_ascii_lowercase(self) -> None:
        """Convert ASCII letters of the window to lowercase, in place."""
        self._map_ascii(0x41, 0x5A, 0x20)

    def overwrite(self, text: str) -> None:
        """Replace the content of the window with **text**.

        Args:
            text (str): Replacement, whose UTF-8 encoding must have exactly the length of the window.

        Raises:
            ValueError: If the encoded length differs.
        """
        self._check()
        encoded = text.encode("utf-8")
        if len(encoded) != self._stop - self._start:
            msg = f"{type(self).__name__} cannot be resized: {len(encoded)} bytes for a window of {self._stop - self._start}"
            raise ValueError(msg)
        self._base[self._start : self._stop] = encoded
