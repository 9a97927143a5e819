"""Extension based registry for story input and artifact output.

Readers for ``.json``, ``.yml`` and ``.yaml`` story files are registered by
default.  ``UnsupportedFormatError`` is raised when reading a file whose
extension has no registered reader.  Rendered artifacts leave through
:func:`emit_file`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..document.story import Story
from ..utils.errors import UnsupportedFormatError
from .emission import MIME_PDF, MIME_TEXT, EmittedFile, emit_file
from .readers.story_reader import read_json_story, read_yaml_story

ReaderFunc = Callable[..., Story]

_READERS: dict[str, ReaderFunc] = {}


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Register a story reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".json"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a :class:`Story`.
    """

    _READERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def supported_extensions() -> list[str]:
    return sorted(_READERS)


def read_story(path: str | os.PathLike[str], **kwargs: Any) -> Story:
    """Read a story from ``path`` using the reader registered for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


register_reader(".json", read_json_story)
register_reader(".yml", read_yaml_story)
register_reader(".yaml", read_yaml_story)

__all__ = [
    "MIME_PDF",
    "MIME_TEXT",
    "EmittedFile",
    "ReaderFunc",
    "emit_file",
    "get_extension",
    "read_story",
    "register_reader",
    "supported_extensions",
]
