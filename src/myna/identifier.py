"""Myna number value type.

A Myna number is 12 ASCII digits: 11 payload digits followed by a check
digit.  :class:`Myna` stores only the payload; the check digit is recomputed
whenever the value is formatted or validated.

Check digit
-----------
With weights ``(6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)`` applied to the payload
from left to right, ``r = sum(d * w) % 11``.  The check digit is ``0`` when
``r`` is 0 or 1 and ``11 - r`` otherwise.

Instances are mutated only by :meth:`Myna.increment`, which the enumerator in
:mod:`myna.iteration` uses to advance its cursor.  For that reason instances
are not hashable.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import total_ordering
from typing import Final

from .errors import InvalidInputError, ParseError

PAYLOAD_LENGTH: Final = 11
NUMBER_LENGTH: Final = 12
WEIGHTS: Final = (6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

_DIGITS: Final = frozenset("0123456789")


def calc_check_digit(digits: Iterable[int]) -> int:
    """Return the check digit for 11 payload ``digits``."""

    remainder = sum(d * w for d, w in zip(digits, WEIGHTS, strict=True)) % 11
    if remainder <= 1:
        return 0
    return 11 - remainder


def _to_digits(text: str) -> list[int]:
    # ASCII only; str.isdigit() also accepts "１" and "٣"
    for ch in text:
        if ch not in _DIGITS:
            raise ParseError(f"Invalid character {ch!r}", reason="character")
    return [ord(ch) - 48 for ch in text]


@total_ordering
class Myna:
    """An 11 digit payload with a derived check digit."""

    __slots__ = ("_digits",)

    def __init__(self) -> None:
        self._digits = [0] * PAYLOAD_LENGTH

    @classmethod
    def zero(cls) -> Myna:
        """Return a fresh all-zero value, the start of the enumeration."""

        return cls()

    # -- Construction -----------------------------------------------------

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> Myna:
        """Build a value from exactly 11 integers in ``0..9``."""

        values = list(digits)
        if len(values) != PAYLOAD_LENGTH:
            raise InvalidInputError(f"Expected {PAYLOAD_LENGTH} digits, got {len(values)}")
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
                raise InvalidInputError(f"Digit out of range: {value!r}")
        myna = cls()
        myna._digits = values
        return myna

    @classmethod
    def from_int(cls, number: int) -> Myna:
        """Build a value whose payload reads as ``number`` (zero padded)."""

        if not 0 <= number < 10**PAYLOAD_LENGTH:
            raise InvalidInputError(f"Payload must be in [0, 10**{PAYLOAD_LENGTH}), got {number}")
        return cls.from_digits(int(ch) for ch in f"{number:0{PAYLOAD_LENGTH}d}")

    @classmethod
    def from_payload(cls, text: str) -> Myna:
        """Build a value from an 11 digit payload string without check digit."""

        text = text.strip()
        if len(text) != PAYLOAD_LENGTH:
            raise InvalidInputError(f"Payload must be {PAYLOAD_LENGTH} characters long")
        return cls.from_digits(_to_digits(text))

    @classmethod
    def parse(cls, text: str) -> Myna:
        """Parse a 12 digit Myna number.

        Surrounding whitespace is ignored.  Raises :class:`InvalidInputError`
        when the trimmed input is not 12 characters long and
        :class:`ParseError` for non-digit characters or a wrong check digit.
        """

        text = text.strip()
        if len(text) != NUMBER_LENGTH:
            raise InvalidInputError(f"Input must be {NUMBER_LENGTH} characters long")
        values = _to_digits(text)
        myna = cls.from_digits(values[:PAYLOAD_LENGTH])
        if myna.check_digit != values[PAYLOAD_LENGTH]:
            raise ParseError("Invalid check digit", reason="check_digit")
        return myna

    # -- Views ------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return not any(self._digits)

    @property
    def digits(self) -> tuple[int, ...]:
        return tuple(self._digits)

    @property
    def check_digit(self) -> int:
        return calc_check_digit(self._digits)

    def format(self) -> str:
        """Return the 12 digit form: payload followed by the check digit."""

        return "".join(map(str, self._digits)) + str(self.check_digit)

    def copy(self) -> Myna:
        return Myna.from_digits(self._digits)

    # -- Mutation ---------------------------------------------------------

    def increment(self) -> None:
        """Add one to the payload in place, wrapping 99999999999 to zero."""

        digits = self._digits
        for i in range(PAYLOAD_LENGTH - 1, -1, -1):
            if digits[i] < 9:
                digits[i] += 1
                return
            digits[i] = 0

    # -- Dunder -----------------------------------------------------------

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Myna('{self.format()}')"

    def __int__(self) -> int:
        return int("".join(map(str, self._digits)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Myna):
            return NotImplemented
        return self._digits == other._digits

    def __lt__(self, other: Myna) -> bool:
        if not isinstance(other, Myna):
            return NotImplemented
        return self._digits < other._digits

    __hash__ = None  # type: ignore[assignment]


def is_valid(text: str) -> bool:
    """Return ``True`` when ``text`` parses as a Myna number."""

    try:
        Myna.parse(text)
    except (InvalidInputError, ParseError):
        return False
    return True


__all__ = [
    "PAYLOAD_LENGTH",
    "NUMBER_LENGTH",
    "WEIGHTS",
    "Myna",
    "calc_check_digit",
    "is_valid",
]
