"""High-level export entry points.

Each function renders a story and emits it as ``<slug(title)>.<ext>`` in the
requested directory (the configured output directory by default).  Rendering
completes before anything is written, so a failing render emits no file.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from .config.schema import ExportConfig, load_config
from .document.story import Story
from .io.emission import MIME_PDF, MIME_TEXT, EmittedFile, emit_file
from .render.pdf import render_pdf
from .render.text import render_text
from .utils.logging import get_logger
from .utils.slug import artifact_name

__all__ = ["FORMATS", "export_pdf", "export_story", "export_txt"]

logger = get_logger(__name__)


def _target_dir(directory: str | os.PathLike[str] | None, cfg: ExportConfig) -> str | os.PathLike[str]:
    return directory if directory is not None else cfg.output.directory


def export_txt(
    story: Story,
    directory: str | os.PathLike[str] | None = None,
    *,
    config: ExportConfig | None = None,
) -> EmittedFile:
    """Write the plain-text transcript of ``story``."""

    cfg = config if config is not None else load_config()
    content = render_text(story, bullet=cfg.text.bullet)
    filename = artifact_name(story.title, ".txt", default_stem=cfg.output.default_stem)
    return emit_file(content, filename, MIME_TEXT, _target_dir(directory, cfg))


def export_pdf(
    story: Story,
    directory: str | os.PathLike[str] | None = None,
    *,
    config: ExportConfig | None = None,
) -> EmittedFile:
    """Write the paginated PDF rendering of ``story``.

    Raises
    ------
    BackendUnavailableError
        If reportlab cannot be loaded; no file is written.
    """

    cfg = config if config is not None else load_config()
    data = render_pdf(story, config=cfg)
    filename = artifact_name(story.title, ".pdf", default_stem=cfg.output.default_stem)
    return emit_file(data, filename, MIME_PDF, _target_dir(directory, cfg))


FORMATS = {"txt": export_txt, "pdf": export_pdf}


def export_story(
    story: Story,
    formats: Iterable[str] = ("txt", "pdf"),
    directory: str | os.PathLike[str] | None = None,
    *,
    config: ExportConfig | None = None,
) -> list[EmittedFile]:
    """Export ``story`` in each of ``formats`` in order."""

    cfg = config if config is not None else load_config()
    emitted: list[EmittedFile] = []
    for fmt in formats:
        try:
            exporter = FORMATS[fmt]
        except KeyError:
            raise ValueError(f"unknown export format: {fmt!r}") from None
        emitted.append(exporter(story, directory, config=cfg))
    logger.debug("exported %r as %s", story.title, ", ".join(e.filename for e in emitted))
    return emitted
