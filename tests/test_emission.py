from __future__ import annotations

from pathlib import Path

import pytest

from storyexport.io.emission import MIME_PDF, MIME_TEXT, emit_file, staged_file
from storyexport.utils.errors import EmissionError


def test_emit_text_as_utf8(tmp_path: Path) -> None:
    emitted = emit_file("naïve • text", "story.txt", MIME_TEXT, tmp_path)
    assert emitted.path == tmp_path / "story.txt"
    assert emitted.mime_type == "text/plain"
    assert emitted.path.read_bytes() == "naïve • text".encode("utf-8")
    assert emitted.size == len("naïve • text".encode("utf-8"))
    assert [p.name for p in tmp_path.iterdir()] == ["story.txt"]


def test_emit_bytes_into_new_directory(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out"
    emitted = emit_file(b"%PDF-1.4", "story.pdf", MIME_PDF, target)
    assert emitted.path.read_bytes() == b"%PDF-1.4"
    assert emitted.mime_type == "application/pdf"


def test_emit_replaces_existing_file(tmp_path: Path) -> None:
    (tmp_path / "story.txt").write_text("old", encoding="utf-8")
    emit_file("new", "story.txt", MIME_TEXT, tmp_path)
    assert (tmp_path / "story.txt").read_text(encoding="utf-8") == "new"


def test_emit_empty_payload_leaves_no_temp_files(tmp_path: Path) -> None:
    emitted = emit_file("", "empty.txt", MIME_TEXT, tmp_path)
    assert emitted.size == 0
    assert [p.name for p in tmp_path.iterdir()] == ["empty.txt"]


@pytest.mark.parametrize("name", ["", "../escape.txt", "sub/dir.txt"])
def test_invalid_filename(tmp_path: Path, name: str) -> None:
    with pytest.raises(EmissionError):
        emit_file("x", name, MIME_TEXT, tmp_path)


def test_unwritable_destination(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(EmissionError):
        emit_file("x", "story.txt", MIME_TEXT, blocker)


def test_staged_file_released_on_failure(tmp_path: Path) -> None:
    destination = tmp_path / "story.pdf"
    with pytest.raises(RuntimeError):
        with staged_file(destination) as handle:
            handle.write(b"partial")
            raise RuntimeError("render failed")
    assert list(tmp_path.iterdir()) == []


def test_staged_file_moves_into_place(tmp_path: Path) -> None:
    destination = tmp_path / "story.pdf"
    with staged_file(destination) as handle:
        handle.write(b"complete")
    assert destination.read_bytes() == b"complete"
    assert list(tmp_path.iterdir()) == [destination]
