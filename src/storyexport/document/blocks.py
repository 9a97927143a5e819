"""Content block variants.

A story body is an ordered tuple of blocks.  The set of variants is closed:
every ``type`` tag known to the editor maps to one frozen dataclass below and
any other tag is carried by :class:`UnknownBlock` so renderers can treat it
as an explicit no-op instead of failing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

__all__ = [
    "BlockType",
    "ListType",
    "Paragraph",
    "Heading",
    "Bold",
    "Separator",
    "ListBlock",
    "Image",
    "YouTube",
    "Link",
    "UnknownBlock",
    "ContentBlock",
]


class BlockType(str, Enum):
    """Discriminator values used by the editor."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BOLD = "bold"
    SEPARATOR = "separator"
    LIST = "list"
    IMAGE = "image"
    YOUTUBE = "youtube"
    LINK = "link"


class ListType(str, Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(slots=True, frozen=True)
class Paragraph:
    """Body copy rendered at normal weight."""

    text: str = ""
    type: BlockType = field(default=BlockType.PARAGRAPH, init=False)


@dataclass(slots=True, frozen=True)
class Heading:
    """Section heading rendered larger and bold."""

    text: str = ""
    type: BlockType = field(default=BlockType.HEADING, init=False)


@dataclass(slots=True, frozen=True)
class Bold:
    """A single emphasized run."""

    text: str = ""
    type: BlockType = field(default=BlockType.BOLD, init=False)


@dataclass(slots=True, frozen=True)
class Separator:
    """Horizontal divider without payload."""

    type: BlockType = field(default=BlockType.SEPARATOR, init=False)


@dataclass(slots=True, frozen=True)
class ListBlock:
    """Ordered or unordered list.

    ``items`` is ``None`` when the editor omitted the field entirely, which
    renders as nothing; an empty tuple still renders the block terminator.
    """

    items: tuple[str, ...] | None = None
    list_type: ListType = ListType.UNORDERED
    type: BlockType = field(default=BlockType.LIST, init=False)

    @property
    def ordered(self) -> bool:
        return self.list_type is ListType.ORDERED


@dataclass(slots=True, frozen=True)
class Image:
    """Caption-only image placeholder; raster data is never embedded."""

    caption: str | None = None
    type: BlockType = field(default=BlockType.IMAGE, init=False)


@dataclass(slots=True, frozen=True)
class YouTube:
    """Reference to an embedded video."""

    url: str = ""
    type: BlockType = field(default=BlockType.YOUTUBE, init=False)


@dataclass(slots=True, frozen=True)
class Link:
    """Inline hyperlink reference."""

    text: str = ""
    url: str = ""
    type: BlockType = field(default=BlockType.LINK, init=False)


@dataclass(slots=True, frozen=True)
class UnknownBlock:
    """Block whose ``type`` tag is not recognised.

    The raw mapping is kept in ``data`` so that newer documents survive a
    load/dump cycle unchanged.
    """

    type: str
    data: Mapping[str, Any] = field(default_factory=dict)


ContentBlock = Union[
    Paragraph,
    Heading,
    Bold,
    Separator,
    ListBlock,
    Image,
    YouTube,
    Link,
    UnknownBlock,
]
