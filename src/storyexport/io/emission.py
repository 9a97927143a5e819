"""Delivery of rendered artifacts as named files.

A payload is first written to a transient file next to its destination and
only moved into place once fully written, so callers either get the complete
artifact or nothing.  The transient file is released on every exit path.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from ..utils.errors import EmissionError
from ..utils.logging import get_logger

__all__ = ["MIME_TEXT", "MIME_PDF", "EmittedFile", "staged_file", "emit_file"]

MIME_TEXT = "text/plain"
MIME_PDF = "application/pdf"

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class EmittedFile:
    """A file delivered to its destination."""

    path: Path
    filename: str
    mime_type: str
    size: int


@contextmanager
def staged_file(destination: Path) -> Iterator[IO[bytes]]:
    """Yield a binary handle whose contents replace ``destination`` on success.

    The transient file is closed and removed if the body raises, and after a
    successful move nothing is left behind.
    """

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".part", dir=destination.parent
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, destination)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def emit_file(
    payload: str | bytes,
    filename: str,
    mime_type: str,
    directory: str | os.PathLike[str] = ".",
) -> EmittedFile:
    """Write ``payload`` to ``directory/filename``.

    Parameters
    ----------
    payload:
        Text (encoded as UTF-8) or raw bytes.
    filename:
        Target file name; must not contain directory components.
    mime_type:
        MIME type recorded on the returned :class:`EmittedFile`.
    directory:
        Destination directory, created when missing.

    Raises
    ------
    EmissionError
        If the destination cannot be written.  No partial file remains.
    """

    if not filename or Path(filename).name != filename:
        raise EmissionError(f"invalid artifact filename: {filename!r}")
    data = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    dest_dir = Path(directory)
    destination = dest_dir / filename
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        with staged_file(destination) as handle:
            handle.write(data)
    except OSError as exc:
        raise EmissionError(f"failed to write {destination}: {exc}") from exc
    logger.info("wrote %s (%s, %d bytes)", destination, mime_type, len(data))
    return EmittedFile(path=destination, filename=filename, mime_type=mime_type, size=len(data))
