from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from storyexport.cli import app
from storyexport.render import pdf as pdf_module
from storyexport.utils.errors import BackendUnavailableError


def _story_file(tmp_path: Path) -> Path:
    path = tmp_path / "story.json"
    path.write_text(json.dumps({"title": "T", "author_name": "A"}), encoding="utf-8")
    return path


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"
    runner = CliRunner()
    result = runner.invoke(app, ["export", "--in", str(missing), "--out-dir", str(tmp_path)])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "story.bin"
    in_path.write_text("data", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["export", "--in", str(in_path), "--out-dir", str(tmp_path)])
    assert result.exit_code == 3


def test_malformed_story(tmp_path: Path) -> None:
    in_path = tmp_path / "story.json"
    in_path.write_text("[1, 2, 3]", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["export", "--in", str(in_path), "--out-dir", str(tmp_path)])
    assert result.exit_code == 3


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "export",
            "--in",
            str(_story_file(tmp_path)),
            "--out-dir",
            str(tmp_path / "out"),
            "--config",
            str(bad_cfg),
        ],
    )
    assert result.exit_code == 4


def test_backend_unavailable(tmp_path: Path, monkeypatch: Any) -> None:
    def unavailable() -> None:
        raise BackendUnavailableError("reportlab missing")

    monkeypatch.setattr(pdf_module, "acquire_backend", unavailable)
    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["export", "--in", str(_story_file(tmp_path)), "--out-dir", str(out_dir), "-f", "pdf"],
    )
    assert result.exit_code == 5
    assert "reportlab missing" in result.stderr
    assert not out_dir.exists() or list(out_dir.iterdir()) == []


def test_malformed_config_yaml(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "broken.yml"
    bad_cfg.write_text("page: [unclosed\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["export", "--in", str(_story_file(tmp_path)), "--config", str(bad_cfg)],
    )
    assert result.exit_code == 4


def test_undecodable_story(tmp_path: Path) -> None:
    in_path = tmp_path / "story.json"
    in_path.write_bytes(b'{"title": "\xff\xfe", "author_name": "A"}')
    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(app, ["export", "--in", str(in_path), "--out-dir", str(out_dir)])
    assert result.exit_code == 3
    assert str(in_path) in result.stderr
    assert not out_dir.exists()
