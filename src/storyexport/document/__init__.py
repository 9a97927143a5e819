"""Read-only document model consumed by the exporters."""

from .blocks import (
    BlockType,
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
from .story import Story, StoryContent, block_from_dict, story_from_dict, story_to_dict

__all__ = [
    "BlockType",
    "Bold",
    "ContentBlock",
    "Heading",
    "Image",
    "Link",
    "ListBlock",
    "ListType",
    "Paragraph",
    "Separator",
    "UnknownBlock",
    "YouTube",
    "Story",
    "StoryContent",
    "block_from_dict",
    "story_from_dict",
    "story_to_dict",
]
