from __future__ import annotations

from typer.testing import CliRunner

from storyexport.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    for command in ("export", "preview", "slug"):
        assert command in result.stdout


def test_export_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["export", "--help"])
    assert "--in" in result.stdout
    assert "--format" in result.stdout
    assert "--out-dir" in result.stdout
    assert "--config" in result.stdout
