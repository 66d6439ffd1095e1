"""Tests for packaging metadata."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("myna") == "myna.cli:app"


def test_runtime_dependencies() -> None:
    deps = " ".join(_load_pyproject()["project"]["dependencies"])
    for name in ("pydantic", "PyYAML", "typer"):
        assert name in deps


def test_defaults_shipped_as_package_data() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in data["myna.config"]
