"""Logging utilities.

All loggers live under the ``myna`` namespace.  The library itself never
configures handlers; :func:`configure_logging` is called by the CLI and is
idempotent.  Secrets, identifiers and tokens are never logged.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "myna"
_HANDLER_ATTR = "_myna_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``myna`` namespace for ``name``."""

    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``myna`` logger and set ``level``."""

    logger = logging.getLogger(ROOT_LOGGER)
    handlers = [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]
    if handlers:
        # stderr may have been swapped since the first call (e.g. by a test runner)
        handlers[0].stream = sys.stderr  # type: ignore[attr-defined]
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
