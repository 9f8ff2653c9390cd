"""Tests for the immutable sequence iterators."""

from __future__ import annotations

import random
from collections.abc import Callable
from operator import eq

import more_itertools as mit
import pytest

import pyogroup as pg

type Factory = Callable[..., pg.GroupIterator]

ITERATORS: list[Factory] = [pg.LinearGroupBy, pg.BinaryGroupBy, pg.ExponentialGroupBy]
SAMPLE = [1, 1, 1, 3, 3, 2, 2, 2]


def _ids(cls: type) -> str:
    return cls.__name__


def _reference(data: list[int], predicate: Callable[[int, int], bool]) -> list[list[int]]:
    return list(mit.split_when(data, lambda a, b: not predicate(a, b)))


def _interleaved(it: pg.GroupIterator, rng: random.Random) -> list[list[int]]:
    front: list[list[int]] = []
    back: list[list[int]] = []
    while not it.is_exhausted:
        if rng.random() < 0.5:
            front.append(list(it.next().unwrap()))
        else:
            back.append(list(it.next_back().unwrap()))
    return front + back[::-1]


@pytest.mark.parametrize("cls", ITERATORS, ids=_ids)
class TestScenarios:
    """Fixed inputs with known groups, for every strategy."""

    def test_forward(self, cls: Factory) -> None:
        """Groups come out in order from the front."""
        assert [list(g) for g in cls(SAMPLE)] == [[1, 1, 1], [3, 3], [2, 2, 2]]

    def test_backward(self, cls: Factory) -> None:
        """`reversed` yields the same groups, last one first."""
        assert [list(g) for g in reversed(cls(SAMPLE))] == [[2, 2, 2], [3, 3], [1, 1, 1]]

    def test_interleaved(self, cls: Factory) -> None:
        """Front and back pulls share the remaining window and never overlap."""
        it = cls(SAMPLE)
        assert it.next_back().unwrap() == [2, 2, 2]
        assert it.next().unwrap() == [1, 1, 1]
        assert it.next().unwrap() == [3, 3]
        assert it.next_back().is_none()
        assert it.next().is_none()

    def test_empty(self, cls: Factory) -> None:
        """An empty sequence yields nothing, from both ends."""
        it = cls([])
        assert it.is_exhausted
        assert it.next().is_none()
        assert it.next_back().is_none()
        assert list(it) == []

    def test_singleton(self, cls: Factory) -> None:
        """A single element is a single group."""
        assert [list(g) for g in cls([5])] == [[5]]

    def test_all_equal(self, cls: Factory) -> None:
        """A constant sequence is one group."""
        assert [list(g) for g in cls([4] * 50)] == [[4] * 50]

    def test_all_distinct(self, cls: Factory) -> None:
        """Strictly increasing data gives one group per element."""
        assert [list(g) for g in cls(list(range(6)))] == [[i] for i in range(6)]

    def test_ordering_predicate(self, cls: Factory) -> None:
        """With `<=` on sorted data, the whole sequence is one group."""
        assert cls([1, 2, 2, 3], lambda a, b: a <= b).count() == 1

    def test_exhaustion_is_sticky(self, cls: Factory) -> None:
        """Once exhausted, every pull keeps returning nothing."""
        it = cls(SAMPLE)
        mit.consume(it)
        for _ in range(3):
            assert it.next().is_none()
            assert it.next_back().is_none()
            with pytest.raises(StopIteration):
                next(it)

    def test_groups_are_views(self, cls: Factory) -> None:
        """Groups look at the caller's buffer instead of copying it."""
        data = list(SAMPLE)
        groups = list(cls(data))
        assert all(isinstance(g, pg.SliceView) for g in groups)
        assert [g.range for g in groups] == [range(0, 3), range(3, 5), range(5, 8)]
        data[0] = 100
        assert groups[0][0] == 100

    def test_tuple_and_bytes(self, cls: Factory) -> None:
        """Any indexable sequence is accepted."""
        assert [bytes(g) for g in cls(b"aabccc")] == [b"aa", b"b", b"ccc"]
        assert [tuple(g) for g in cls(("x", "x", "y"))] == [("x", "x"), ("y",)]


@pytest.mark.parametrize("cls", ITERATORS, ids=_ids)
@pytest.mark.parametrize("seed", range(25))
def test_partition_on_sorted_data(cls: Factory, seed: int) -> None:
    """Concatenating the groups gives back the input, and matches a plain adjacent-pairs split."""
    rng = random.Random(seed)
    data = sorted(rng.randrange(10) for _ in range(rng.randrange(60)))
    groups = [list(g) for g in cls(data)]
    assert list(mit.flatten(groups)) == data
    assert all(groups)
    assert groups == _reference(data, eq)


@pytest.mark.parametrize("cls", ITERATORS, ids=_ids)
@pytest.mark.parametrize("seed", range(25))
def test_forward_backward_and_interleaved_agree(cls: Factory, seed: int) -> None:
    """Whatever the order of pulls, the same groups come out."""
    rng = random.Random(seed)
    data = sorted(rng.randrange(8) for _ in range(rng.randrange(1, 50)))
    forward = [list(g) for g in cls(data)]
    backward = [list(g) for g in reversed(cls(data))][::-1]
    assert forward == backward
    assert _interleaved(cls(data), rng) == forward


@pytest.mark.parametrize("seed", range(25))
def test_linear_with_arbitrary_predicate(seed: int) -> None:
    """Linear grouping honours any relation, not only monotonic ones."""
    rng = random.Random(seed)
    data = [rng.randrange(20) for _ in range(rng.randrange(40))]

    def close(a: int, b: int) -> bool:
        return abs(a - b) <= 5

    assert [list(g) for g in pg.LinearGroupBy(data, close)] == _reference(data, close)
    assert [list(g) for g in reversed(pg.LinearGroupBy(data, close))][::-1] == _reference(
        data, close
    )


@pytest.mark.parametrize("cls", ITERATORS, ids=_ids)
@pytest.mark.parametrize("seed", range(10))
def test_non_monotonic_predicate_still_partitions(cls: Factory, seed: int) -> None:
    """A random predicate may give odd groups, but they are non-empty and cover the input exactly once."""
    rng = random.Random(seed)
    data = list(range(rng.randrange(1, 40)))
    it = cls(data, lambda _a, _b: rng.random() < 0.5)
    groups = _interleaved(it, rng)
    assert all(groups)
    assert list(mit.flatten(groups)) == data


class TestLastAndCount:
    """Consuming shortcuts."""

    @pytest.mark.parametrize("cls", ITERATORS, ids=_ids)
    def test_last(self, cls: Factory) -> None:
        """`last` returns the final group and leaves the iterator exhausted."""
        it = cls(SAMPLE)
        assert it.next().unwrap() == [1, 1, 1]
        assert it.last().unwrap() == [2, 2, 2]
        assert it.is_exhausted
        assert it.next().is_none()
        assert it.last().is_none()

    def test_last_searches_from_the_back_only(self) -> None:
        """A single backward search is enough to find the last group."""
        calls = 0

        def counting_eq(a: int, b: int) -> bool:
            nonlocal calls
            calls += 1
            return a == b

        pg.LinearGroupBy(list(range(1000)) + [7, 7], counting_eq).last()
        assert calls == 2

    @pytest.mark.parametrize("cls", ITERATORS, ids=_ids)
    def test_count(self, cls: Factory) -> None:
        """`count` consumes what is left."""
        it = cls(SAMPLE)
        it.next_back()
        assert it.count() == 2
        assert it.count() == 0


class TestIntrospection:
    """Remaining window, keys and reversal."""

    def test_as_slice(self) -> None:
        """`as_slice` shows what has not been yielded, from both ends."""
        it = pg.ExponentialGroupBy(SAMPLE)
        assert it.as_slice() == SAMPLE
        it.next()
        it.next_back()
        assert it.as_slice() == [3, 3]
        assert it.as_slice().range == range(3, 5)

    def test_as_slice_survives_iteration(self) -> None:
        """Immutable remaining views are not invalidated by later pulls."""
        it = pg.LinearGroupBy(SAMPLE)
        rest = it.as_slice()
        mit.consume(it)
        assert rest == SAMPLE

    def test_from_key(self) -> None:
        """`from_key` groups on a derived key."""
        words = ["apple", "avocado", "banana", "blueberry", "cherry"]
        it = pg.BinaryGroupBy.from_key(words, lambda w: w[0])
        assert [list(g) for g in it] == [["apple", "avocado"], ["banana", "blueberry"], ["cherry"]]

    def test_reversed_twice(self) -> None:
        """Reversing a `Rev` gives back the original iterator."""
        it = pg.LinearGroupBy(SAMPLE)
        assert reversed(reversed(it)) is it

    def test_rev_swaps_ends(self) -> None:
        """`Rev.next` pulls from the back, `Rev.next_back` from the front."""
        rev = reversed(pg.LinearGroupBy(SAMPLE))
        assert rev.next().unwrap() == [2, 2, 2]
        assert rev.next_back().unwrap() == [1, 1, 1]
        assert list(rev) == [[3, 3]]

    def test_repr(self) -> None:
        """The repr shows the remaining window."""
        it = pg.LinearGroupBy([1, 1, 2])
        assert repr(it) == "LinearGroupBy(SliceView(1, 1, 2))"
        it.next()
        assert repr(it) == "LinearGroupBy(SliceView(2))"
        assert repr(reversed(it)) == "Rev(LinearGroupBy(SliceView(2)))"

    def test_pipeable(self) -> None:
        """Iterators can be piped into plain callables."""
        assert pg.LinearGroupBy(SAMPLE).into(lambda it: [len(g) for g in it]) == [3, 2, 3]


class TestConstructors:
    """The `group_by` family of functions."""

    @pytest.mark.parametrize(
        ("search", "cls"),
        [
            ("linear", pg.LinearGroupBy),
            ("binary", pg.BinaryGroupBy),
            ("exponential", pg.ExponentialGroupBy),
            (pg.BINARY, pg.BinaryGroupBy),
        ],
    )
    def test_search_selects_class(self, search: pg.SearchName | pg.BoundarySearch, cls: type) -> None:
        """The strategy name maps to the matching iterator class."""
        assert type(pg.group_by(SAMPLE, search=search)) is cls

    def test_default_predicate(self) -> None:
        """Without a predicate, equality is used."""
        assert [list(g) for g in pg.group_by(SAMPLE)] == [[1, 1, 1], [3, 3], [2, 2, 2]]

    def test_unknown_search(self) -> None:
        """Unknown strategies are rejected before any iteration."""
        with pytest.raises(ValueError, match="unknown search strategy"):
            pg.group_by(SAMPLE, search="bogo")  # type: ignore[arg-type]

    def test_not_a_sequence(self) -> None:
        """Non-indexable inputs are rejected."""
        with pytest.raises(TypeError, match="expected an indexable sequence"):
            pg.LinearGroupBy(iter(SAMPLE))  # type: ignore[arg-type]
