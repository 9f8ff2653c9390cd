"""Tests for the zero-copy views, used on their own."""

from __future__ import annotations

import pytest

import pyogroup as pg


class TestSliceView:
    """Immutable sequence windows."""

    def test_sequence_protocol(self) -> None:
        """Indexing, iteration, membership and search behave like a `Sequence`."""
        view = pg.SliceView([5, 6, 7, 8, 9], 1, 4)
        assert len(view) == 3
        assert view[0] == 6
        assert view[-1] == 8
        assert list(view) == [6, 7, 8]
        assert list(reversed(view)) == [8, 7, 6]
        assert 7 in view
        assert 9 not in view
        assert view.index(8) == 2
        assert view.count(6) == 1

    def test_index_out_of_range(self) -> None:
        """Indices are checked against the window, not the buffer."""
        view = pg.SliceView([1, 2, 3, 4], 1, 3)
        with pytest.raises(IndexError):
            view[2]
        with pytest.raises(IndexError):
            view[-3]

    def test_slicing(self) -> None:
        """Unit-step slices are views, other steps are tuples."""
        data = [0, 1, 2, 3, 4, 5]
        view = pg.SliceView(data, 1)
        sub = view[1:3]
        assert isinstance(sub, pg.SliceView)
        assert sub.range == range(2, 4)
        assert view[::2] == (1, 3, 5)
        assert view[3:1] == []

    def test_narrowing(self) -> None:
        """Building a view from a view narrows the window, relative to it."""
        outer = pg.SliceView(list(range(10)), 2, 8)
        inner = pg.SliceView(outer, 1, 3)
        assert inner == [3, 4]
        assert inner.range == range(3, 5)

    def test_read_only_view_of_mutable_view(self) -> None:
        """A `SliceView` over a `SliceMut` does not outlive it."""
        data = [1, 2, 3]
        source = pg.SliceMut(data)
        frozen = pg.SliceView(source, 1)
        assert frozen == [2, 3]
        source.split_at(1)
        assert frozen.released
        other = pg.SliceMut(data)
        with pg.SliceView(other) as kept:
            other.release()
            assert kept.released

    def test_bad_window(self) -> None:
        """Windows must fit inside the data."""
        with pytest.raises(IndexError, match="out of range"):
            pg.SliceView([1, 2], 1, 3)
        with pytest.raises(IndexError, match="out of range"):
            pg.SliceView([1, 2], 2, 1)

    def test_split_at(self) -> None:
        """`split_at` gives two adjacent windows, and keeps the original usable."""
        view = pg.SliceView([1, 2, 3])
        left, right = view.split_at(3)
        assert left == [1, 2, 3]
        assert right == []
        assert not view.released
        with pytest.raises(IndexError, match="split position"):
            view.split_at(4)

    def test_release(self) -> None:
        """A released view refuses every access."""
        view = pg.SliceView([1, 2])
        view.release()
        view.release()
        assert view.released
        assert repr(view) == "<released SliceView>"
        with pytest.raises(ValueError, match="released SliceView"):
            list(view)
        with pytest.raises(ValueError, match="released SliceView"):
            view.split_at(0)

    def test_truthiness(self) -> None:
        """Empty views are falsy, which drives `then_some` and `ok_or`."""
        assert not pg.SliceView([])
        assert pg.SliceView([0])
        assert pg.SliceView([]).then_some().is_none()
        assert pg.SliceView([1]).ok_or("empty").unwrap() == [1]

    def test_equality(self) -> None:
        """Views compare equal to any sequence with the same elements."""
        assert pg.SliceView((1, 2)) == [1, 2]
        assert pg.SliceView([1, 2]) == pg.SliceView([0, 1, 2], 1)
        assert pg.SliceView([1, 2]) != [1, 2, 3]
        assert pg.SliceView([1, 2]) != {1, 2}


class TestRepr:
    """View reprs honour the configured truncation."""

    def test_truncated(self, config: pg.Config) -> None:
        """Long views only show the first items."""
        config.update(repr_max_items=3)
        assert repr(pg.SliceView(list(range(10)))) == "SliceView(0, 1, 2, ...)"
        assert repr(pg.SliceView([0, 1, 2])) == "SliceView(0, 1, 2)"

    def test_empty(self) -> None:
        """An empty view shows no items."""
        assert repr(pg.SliceView([])) == "SliceView()"


class TestUtf8View:
    """Immutable text windows."""

    def test_lengths_are_bytes(self) -> None:
        """`len` counts encoded bytes."""
        assert len(pg.Utf8View("aé包😀")) == 10

    def test_char_boundaries(self) -> None:
        """Only character starts and the end are boundaries."""
        view = pg.Utf8View("a包")
        assert [view.is_char_boundary(i) for i in range(6)] == [
            True,
            True,
            False,
            False,
            True,
            False,
        ]

    def test_split_inside_char(self) -> None:
        """Splitting inside a character is refused."""
        with pytest.raises(ValueError, match="not a char boundary"):
            pg.Utf8View("包").split_at(2)

    def test_chars_and_bytes(self) -> None:
        """Characters and encoded bytes of the window."""
        _, tail = pg.Utf8View("ab饰与").split_at(2)
        assert list(tail.chars()) == ["饰", "与"]
        assert tail.as_bytes() == "饰与".encode()
        assert tail.as_bytes().readonly

    def test_equality(self) -> None:
        """Views compare equal to `str`, bytes-like objects and other views."""
        view = pg.Utf8View("éa")
        assert view == "éa"
        assert view == "éa".encode()
        assert view == pg.Utf8View.from_utf8(bytearray("éa".encode())).unwrap()
        assert view != "ae"
        assert view != 42

    def test_from_utf8(self) -> None:
        """`from_utf8` wraps the outcome of the validation in a `Result`."""
        data = bytearray(b"abc")
        view = pg.Utf8View.from_utf8(data).unwrap()
        data[0] = ord("x")
        assert view == "xbc"
        err = pg.Utf8View.from_utf8(b"a\xff").err().unwrap()
        assert isinstance(err, UnicodeDecodeError)
        assert err.start == 1

    def test_rejects_other_types(self) -> None:
        """Only `str` and views go through the constructor."""
        with pytest.raises(TypeError, match="use from_utf8"):
            pg.Utf8View(b"abc")  # type: ignore[arg-type]


class TestUtf8ViewMut:
    """Mutable text windows."""

    def test_split_consumes(self) -> None:
        """Splitting releases the original, and refuses to cut a character."""
        view = pg.Utf8ViewMut(bytearray("é!".encode()))
        with pytest.raises(ValueError, match="not a char boundary"):
            view.split_at(1)
        assert not view.released
        left, right = view.split_at(2)
        assert view.released
        assert (left, right) == ("é", "!")

    def test_case_mapping_ignores_non_ascii(self) -> None:
        """Case conversion only touches ASCII letters."""
        buf = bytearray("aÉz".encode())
        pg.Utf8ViewMut(buf).make_ascii_uppercase()
        assert buf.decode() == "AÉZ"
        pg.Utf8ViewMut(buf).make_ascii_lowercase()
        assert buf.decode() == "aÉz"

    def test_read_only_view_is_tied(self) -> None:
        """A `Utf8View` built from a `Utf8ViewMut` is released with it."""
        source = pg.Utf8ViewMut(bytearray("ab包".encode()))
        frozen = pg.Utf8View(source)
        assert frozen == "ab包"
        _, tail = source.split_at(2)
        assert frozen.released
        assert tail == "包"

    def test_read_only_text_groups_are_tied(self) -> None:
        """Grouping a `Utf8ViewMut` read-only ties every group to it."""
        source = pg.Utf8ViewMut(bytearray(b"aab"))
        groups = list(pg.LinearStrGroupBy(source))
        assert groups == ["aa", "b"]
        source.release()
        assert all(g.released for g in groups)

    def test_memoryview_input(self) -> None:
        """A writable `memoryview` is accepted."""
        buf = bytearray(b"ab")
        pg.Utf8ViewMut(memoryview(buf)).overwrite("cd")
        assert buf == b"cd"

    def test_from_utf8_requires_writable(self) -> None:
        """Mutable views cannot be built over read-only bytes."""
        with pytest.raises(TypeError, match="read-only"):
            pg.Utf8ViewMut.from_utf8(b"ab")
        assert pg.Utf8ViewMut.from_utf8(bytearray(b"ab")).is_ok()
