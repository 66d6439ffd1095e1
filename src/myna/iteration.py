"""Lazy enumeration over the whole Myna payload space.

:class:`MynaIterator` walks every 11 digit payload in ascending order using a
single mutable cursor.  Values are not filtered by check digit; each yielded
:class:`~myna.identifier.Myna` formats with its own freshly computed check
digit.  Iteration ends the first time the cursor wraps back to all zeros, so
a fresh iterator yields exactly ``SPACE_SIZE`` values.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import Final

from .identifier import PAYLOAD_LENGTH, Myna

SPACE_SIZE: Final = 10**PAYLOAD_LENGTH


class MynaIterator:
    """Single-pass iterator from ``start`` (default all zeros) to the top of the space."""

    def __init__(self, start: Myna | None = None) -> None:
        self._cursor = Myna.zero() if start is None else start.copy()
        self._exhausted = False

    def __iter__(self) -> MynaIterator:
        return self

    def __next__(self) -> Myna:
        if self._exhausted:
            raise StopIteration
        current = self._cursor.copy()
        self._cursor.increment()
        if self._cursor.is_zero:
            self._exhausted = True
        return current


def iter_mynas(start: Myna | None = None, limit: int | None = None) -> Iterator[Myna]:
    """Yield values from ``start`` in ascending order, at most ``limit`` of them."""

    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")
    return itertools.islice(MynaIterator(start), limit)


__all__ = ["SPACE_SIZE", "MynaIterator", "iter_mynas"]
