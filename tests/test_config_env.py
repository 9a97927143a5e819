from pathlib import Path
from typing import Any

from storyexport.config import load_config


def test_env_output_directory(monkeypatch: Any) -> None:
    monkeypatch.setenv("STORYEXPORT_OUTPUT_DIR", "/tmp/exports")
    cfg = load_config()
    assert cfg.output.directory == "/tmp/exports"


def test_explicit_env_mapping_wins_over_process_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("STORYEXPORT_OUTPUT_DIR", "/tmp/ignored")
    cfg = load_config(env={})
    assert cfg.output.directory == "."


def test_custom_env_name(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('output:\n  env: "CUSTOM_OUT"\n')
    cfg = load_config(cfg_file, env={"CUSTOM_OUT": "out"})
    assert cfg.output.env == "CUSTOM_OUT"
    assert cfg.output.directory == "out"


def test_user_file_overrides_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("page:\n  size: letter\nfonts:\n  family: times\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.page.size == "letter"
    assert cfg.page.margin == 20
    assert cfg.fonts.family == "times"
    assert cfg.fonts.body_size == 11
