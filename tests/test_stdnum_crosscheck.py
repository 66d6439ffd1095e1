"""Cross-check the check digit against python-stdnum's Japanese IN module."""

from itertools import islice

import pytest

from myna import Myna, MynaIterator, is_valid

jp_in = pytest.importorskip("stdnum.jp.in_")


def test_check_digit_agrees() -> None:
    for myna in islice(MynaIterator(Myna.from_int(12345678000)), 2000):
        assert str(jp_in.calc_check_digit(str(myna)[:11])) == str(myna)[11]


@pytest.mark.parametrize("text", ["123456789018", "123456789010", "987654321098"])
def test_validity_agrees(text: str) -> None:
    assert is_valid(text) == jp_in.is_valid(text)
