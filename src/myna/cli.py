"""Typer-based command line interface.

``myna get`` reads one Myna number from stdin and prints it together with its
token.  ``myna list`` prints a line for every payload in ascending order,
optionally starting at ``--start`` and stopping after ``--limit`` lines.

The secret is taken from the positional argument when given, else from the
environment variable named in the configuration (``MYNA_SECRET`` by default).

Exit codes
----------
0 success
2 usage error
3 invalid Myna number on input
4 configuration error (bad config file, missing secret)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .config.schema import with_secret
from .errors import ConfigError, MynaError
from .identifier import Myna
from .iteration import iter_mynas
from .pseudonym import Pseudonymizer
from .utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(
    name="myna",
    help="Validate Myna numbers and derive keyed UUID-shaped pseudonyms.",
)

EXIT_INPUT = 3
EXIT_CONFIG = 4


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _pseudonymizer(cfg: ConfigModel, secret: str | None) -> Pseudonymizer:
    if secret is not None:
        cfg = with_secret(cfg, secret)
        log.debug("Using secret from command line")
    else:
        log.debug("Using secret from $%s", cfg.pseudonyms.seed.secret_env)
    try:
        return Pseudonymizer.from_config(cfg, require=True)
    except ConfigError as exc:
        _safe_exit(EXIT_CONFIG, str(exc))


def _parse_start(value: Optional[str]) -> Optional[Myna]:
    """Accept an 11 digit payload or a full 12 digit number."""

    if value is None:
        return None
    try:
        if len(value.strip()) == 12:
            return Myna.parse(value)
        return Myna.from_payload(value)
    except MynaError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main() -> None:
    """Entry point for the myna command group."""
    pass


@app.command()
def get(
    secret: Optional[str] = typer.Argument(  # noqa: B008
        None, help="HMAC secret; defaults to $MYNA_SECRET", show_default=False
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Read one Myna number from stdin and print it with its token."""

    cfg = _load(config_path, verbose)
    db = _pseudonymizer(cfg, secret)
    text = sys.stdin.read()
    try:
        myna = Myna.parse(text)
    except MynaError as exc:
        _safe_exit(EXIT_INPUT, f"{type(exc).__name__}: {exc}")
    typer.echo(db.get_line(myna), nl=False)


@app.command("list")
def list_(  # noqa: PLR0913
    secret: Optional[str] = typer.Argument(  # noqa: B008
        None, help="HMAC secret; defaults to $MYNA_SECRET", show_default=False
    ),
    start: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--start",
        help="First payload (11 digits) or full number (12 digits); defaults to all zeros",
    ),
    limit: Optional[int] = typer.Option(  # noqa: B008
        None, "--limit", min=0, help="Stop after this many lines"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Print every Myna number with its token in ascending order."""

    first = _parse_start(start)
    cfg = _load(config_path, verbose)
    db = _pseudonymizer(cfg, secret)
    out = sys.stdout
    try:
        for line in db.lines(iter_mynas(first, limit)):
            out.write(line)
        out.flush()
    except BrokenPipeError:  # pragma: no cover - e.g. `myna list | head`
        # Python flushes stdout again at exit; point it at devnull first
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        _safe_exit(0)


__all__ = ["app"]
