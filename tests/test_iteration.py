from itertools import islice

import pytest

from myna import SPACE_SIZE, Myna, MynaIterator, iter_mynas


def test_starts_at_zero_ascending() -> None:
    first = [str(m) for m in islice(MynaIterator(), 4)]
    assert first == ["000000000000", "000000000019", "000000000027", "000000000035"]


def test_yields_independent_values() -> None:
    it = MynaIterator()
    a = next(it)
    b = next(it)
    assert a.is_zero
    assert int(b) == 1


def test_stops_at_wraparound() -> None:
    start = Myna.from_int(SPACE_SIZE - 3)
    values = [int(m) for m in MynaIterator(start)]
    assert values == [SPACE_SIZE - 3, SPACE_SIZE - 2, SPACE_SIZE - 1]


def test_exhausted_iterator_stays_exhausted() -> None:
    it = MynaIterator(Myna.from_int(SPACE_SIZE - 1))
    assert int(next(it)) == SPACE_SIZE - 1
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_start_is_not_mutated() -> None:
    start = Myna.from_int(10)
    list(islice(MynaIterator(start), 5))
    assert int(start) == 10


def test_iter_mynas_limit() -> None:
    values = [int(m) for m in iter_mynas(Myna.from_int(98), limit=3)]
    assert values == [98, 99, 100]
    assert list(iter_mynas(limit=0)) == []
    with pytest.raises(ValueError):
        iter_mynas(limit=-1)


def test_fresh_iterators_agree() -> None:
    assert list(map(str, islice(MynaIterator(), 50))) == list(
        map(str, islice(MynaIterator(), 50))
    )
