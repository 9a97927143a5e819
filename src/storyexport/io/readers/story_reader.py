"""Story file readers.

Both readers parse the file into a plain mapping and hand it to
:func:`storyexport.document.story_from_dict`.  ``FileNotFoundError`` and
other I/O errors propagate to the caller; malformed content raises
:class:`~storyexport.utils.errors.StoryFormatError`.
"""

from __future__ import annotations

import json
import os

import yaml

from ...document.story import Story, story_from_dict
from ...utils.errors import StoryFormatError

PathLikeStr = os.PathLike[str]

__all__ = ["read_json_story", "read_yaml_story"]


def read_json_story(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> Story:
    """Read a story stored as editor JSON."""

    with open(path, "r", encoding=encoding) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise StoryFormatError(f"{path}: invalid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise StoryFormatError(f"{path}: not valid {encoding}: {exc}") from exc
    return story_from_dict(data)


def read_yaml_story(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> Story:
    """Read a story stored as YAML with the same shape as the editor JSON."""

    with open(path, "r", encoding=encoding) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise StoryFormatError(f"{path}: invalid YAML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise StoryFormatError(f"{path}: not valid {encoding}: {exc}") from exc
    return story_from_dict(data if data is not None else {})
