"""Validate, enumerate and pseudonymize Japanese Myna (individual) numbers.

A Myna number is 11 payload digits followed by a weighted mod-11 check digit.
:class:`Myna` models the number, :class:`MynaIterator` walks the whole payload
space and :class:`Pseudonymizer` maps numbers to stable, secret-keyed,
UUID-shaped tokens.
"""

from .errors import ConfigError, InvalidInputError, MynaError, ParseError
from .identifier import Myna, calc_check_digit, is_valid
from .iteration import SPACE_SIZE, MynaIterator, iter_mynas
from .pseudonym import Pseudonymizer

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "InvalidInputError",
    "Myna",
    "MynaError",
    "MynaIterator",
    "ParseError",
    "Pseudonymizer",
    "SPACE_SIZE",
    "calc_check_digit",
    "is_valid",
    "iter_mynas",
    "__version__",
]
