"""Story value type and conversion from/to editor-shaped mappings.

The editor hands over JSON such as::

    {"title": "...", "author_name": "...", "summary": "...",
     "content": {"blocks": [{"type": "paragraph", "text": "..."}, ...]}}

Only the overall shape is checked.  Absent fields mean "omit this section"
and never raise; a story or block that is not a mapping does.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..utils.errors import StoryFormatError
from .blocks import (
    Bold,
    ContentBlock,
    Heading,
    Image,
    Link,
    ListBlock,
    ListType,
    Paragraph,
    Separator,
    UnknownBlock,
    YouTube,
)

__all__ = ["Story", "StoryContent", "block_from_dict", "story_from_dict", "story_to_dict"]


@dataclass(slots=True, frozen=True)
class StoryContent:
    blocks: tuple[ContentBlock, ...] = ()


@dataclass(slots=True, frozen=True)
class Story:
    """Immutable document handed to the exporters."""

    title: str = ""
    author_name: str = ""
    summary: str | None = None
    content: StoryContent | None = None

    @property
    def blocks(self) -> tuple[ContentBlock, ...]:
        """Return the body blocks, or an empty tuple when content is absent."""

        return self.content.blocks if self.content is not None else ()


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _optional_text(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else str(value)


def _list_block(data: Mapping[str, Any]) -> ListBlock:
    raw_items = data.get("items")
    items: tuple[str, ...] | None = None
    if isinstance(raw_items, Sequence) and not isinstance(raw_items, str):
        items = tuple("" if item is None else str(item) for item in raw_items)
    raw_type = data.get("listType", data.get("list_type"))
    list_type = ListType.ORDERED if raw_type == ListType.ORDERED.value else ListType.UNORDERED
    return ListBlock(items=items, list_type=list_type)


_BLOCK_BUILDERS: dict[str, Callable[[Mapping[str, Any]], ContentBlock]] = {
    "paragraph": lambda d: Paragraph(_text(d, "text")),
    "heading": lambda d: Heading(_text(d, "text")),
    "bold": lambda d: Bold(_text(d, "text")),
    "separator": lambda d: Separator(),
    "list": _list_block,
    "image": lambda d: Image(_optional_text(d, "caption")),
    "youtube": lambda d: YouTube(_text(d, "url")),
    "link": lambda d: Link(_text(d, "text"), _text(d, "url")),
}


def block_from_dict(data: Mapping[str, Any]) -> ContentBlock:
    """Build a single block from its editor mapping."""

    if not isinstance(data, Mapping):
        raise StoryFormatError(f"block must be a mapping, got {type(data).__name__}")
    tag = _text(data, "type")
    builder = _BLOCK_BUILDERS.get(tag)
    if builder is None:
        return UnknownBlock(type=tag, data=dict(data))
    return builder(data)


def story_from_dict(data: Mapping[str, Any]) -> Story:
    """Build a :class:`Story` from an editor-shaped mapping.

    Raises
    ------
    StoryFormatError
        If ``data`` (or one of its blocks) is not a mapping, or ``blocks`` is
        not a list.
    """

    if not isinstance(data, Mapping):
        raise StoryFormatError(f"story must be a mapping, got {type(data).__name__}")

    content: StoryContent | None = None
    raw_content = data.get("content")
    if raw_content is not None:
        if not isinstance(raw_content, Mapping):
            raise StoryFormatError("story content must be a mapping")
        raw_blocks = raw_content.get("blocks")
        if raw_blocks is not None:
            if isinstance(raw_blocks, (str, bytes)) or not isinstance(raw_blocks, Sequence):
                raise StoryFormatError("content.blocks must be a list")
            content = StoryContent(blocks=tuple(block_from_dict(b) for b in raw_blocks))

    return Story(
        title=_text(data, "title"),
        author_name=_text(data, "author_name"),
        summary=_optional_text(data, "summary"),
        content=content,
    )


def _block_to_dict(block: ContentBlock) -> dict[str, Any]:
    if isinstance(block, UnknownBlock):
        return dict(block.data) or {"type": block.type}
    if isinstance(block, ListBlock):
        out: dict[str, Any] = {"type": block.type.value, "listType": block.list_type.value}
        if block.items is not None:
            out["items"] = list(block.items)
        return out
    out = {"type": block.type.value}
    for name in ("text", "caption", "url"):
        if hasattr(block, name):
            value = getattr(block, name)
            if value is not None:
                out[name] = value
    return out


def story_to_dict(story: Story) -> dict[str, Any]:
    """Return the editor-shaped mapping for ``story``."""

    out: dict[str, Any] = {"title": story.title, "author_name": story.author_name}
    if story.summary is not None:
        out["summary"] = story.summary
    if story.content is not None:
        out["content"] = {"blocks": [_block_to_dict(b) for b in story.content.blocks]}
    return out
