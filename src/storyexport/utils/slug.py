"""Filename slugs derived from story titles."""

from __future__ import annotations

import re

__all__ = ["SLUG_MAX_LENGTH", "slugify", "artifact_name"]

SLUG_MAX_LENGTH: int = 50

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(text: str, *, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Return a lowercase ASCII slug of ``text``.

    Runs of characters outside ``[a-z0-9]`` collapse to a single ``-`` and
    leading/trailing dashes are removed.  The result is cut to ``max_length``
    characters; a dash exposed by the cut is trimmed as well.
    """

    slug = _NON_SLUG.sub("-", text.lower()).strip("-")
    return slug[:max_length].rstrip("-")


def artifact_name(title: str, extension: str, *, default_stem: str = "story") -> str:
    """Return ``<slug(title)><extension>`` falling back to ``default_stem``."""

    stem = slugify(title) or default_stem
    if not extension.startswith("."):
        extension = "." + extension
    return stem + extension
