"""Typed exceptions for identifier parsing and configuration."""

from __future__ import annotations


class MynaError(ValueError):
    """Base class for all errors raised by the package."""


class InvalidInputError(MynaError):
    """Raised when input has the wrong shape (length or digit range)."""


class ParseError(MynaError):
    """Raised when input contains a non-digit or a wrong check digit.

    ``reason`` is ``"character"`` or ``"check_digit"``.
    """

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class ConfigError(MynaError):
    """Raised when the configuration cannot provide a usable secret."""


__all__ = ["MynaError", "InvalidInputError", "ParseError", "ConfigError"]
