"""Typer-based command line interface for the story exporters.

Exit codes
----------
0 success
3 I/O error (missing or unsupported input, malformed story, write failure)
4 configuration error
5 rendering error (PDF backend unavailable)
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ExportConfig, load_config
from .document import Story
from .export import FORMATS
from .io import read_story
from .render.text import render_text
from .utils.errors import (
    BackendUnavailableError,
    EmissionError,
    StoryFormatError,
    UnsupportedFormatError,
)
from .utils.logging import configure_logging
from .utils.slug import slugify

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="storyexport",
    help="Export block-based stories. Use 'storyexport export' to write .txt/.pdf files.",
)


class ExportFormat(str, Enum):
    txt = "txt"
    pdf = "pdf"
    all = "all"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


class Timing:
    """Time one artifact export; ``ms`` is set when the block exits."""

    def __init__(self) -> None:
        self._started = 0.0
        self.ms = 0.0

    def __enter__(self) -> "Timing":
        self._started = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.ms = (perf_counter() - self._started) * 1000.0


def _load_config_or_exit(config_path: Path | None) -> ExportConfig:
    try:
        return load_config(config_path)
    except (ValidationError, yaml.YAMLError, ValueError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _read_story_or_exit(in_path: Path) -> Story:
    try:
        return read_story(in_path)
    except (FileNotFoundError, UnsupportedFormatError, StoryFormatError, OSError) as exc:
        _safe_exit(3, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the storyexport command group."""
    pass


@app.command()
def export(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Story file (.json, .yml or .yaml)"
    ),
    fmt: ExportFormat = typer.Option(  # noqa: B008
        ExportFormat.all, "--format", "-f", help="Artifact format to write"
    ),
    out_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out-dir", help="Destination directory (defaults to output.directory)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> list[str]:
    """Render the story in ``in_path`` and write the requested artifacts."""

    configure_logging(verbose)
    cfg = _load_config_or_exit(config_path)
    if verbose:
        typer.echo("Loaded config", err=True)

    story = _read_story_or_exit(in_path)
    if verbose:
        typer.echo(f"Read story '{story.title}' with {len(story.blocks)} blocks", err=True)

    formats = list(FORMATS) if fmt is ExportFormat.all else [fmt.value]
    written: list[str] = []
    for name in formats:
        try:
            with Timing() as t_export:
                emitted = FORMATS[name](story, out_dir, config=cfg)
        except BackendUnavailableError as exc:
            _safe_exit(5, str(exc))
        except EmissionError as exc:
            _safe_exit(3, str(exc))
        written.append(str(emitted.path))
        if verbose:
            typer.echo(
                f"Wrote {emitted.path} ({emitted.size} bytes) in {t_export.ms:.1f} ms",
                err=True,
            )
        typer.echo(str(emitted.path))
    return written


@app.command()
def preview(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Story file (.json, .yml or .yaml)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print the plain-text transcript of a story to stdout."""

    cfg = _load_config_or_exit(config_path)
    story = _read_story_or_exit(in_path)
    typer.echo(render_text(story, bullet=cfg.text.bullet), nl=False)


@app.command()
def slug(title: str = typer.Argument(..., help="Title to slugify")) -> None:  # noqa: B008
    """Print the file name slug derived from ``title``."""

    typer.echo(slugify(title))
