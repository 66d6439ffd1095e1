from __future__ import annotations

from typer.testing import CliRunner

from myna.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "get" in result.stdout
    assert "list" in result.stdout


def test_list_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["list", "--help"])
    assert "--start" in result.stdout
    assert "--limit" in result.stdout
    assert "--config" in result.stdout
