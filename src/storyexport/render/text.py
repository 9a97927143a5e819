"""Plain-text transcript renderer.

The transcript is Markdown-flavoured: headings get a ``## `` prefix, bold runs
are wrapped in ``**`` and separators become ``---``.  Every block contributes
its own trailing blank line.  Rendering is a pure function of the story.
"""

from __future__ import annotations

from functools import singledispatch

from ..document.blocks import (
    Bold,
    ContentBlock,
    Heading,
    Image,
    Link,
    ListBlock,
    Paragraph,
    Separator,
    YouTube,
)
from ..document.story import Story

__all__ = ["BULLET", "HEADER_RULE_WIDTH", "block_to_text", "render_header", "render_text"]

BULLET = "•"
HEADER_RULE_WIDTH = 40


@singledispatch
def block_to_text(block: ContentBlock, *, bullet: str = BULLET) -> str:
    """Return the transcript contribution of ``block``.

    Blocks of an unrecognised variant contribute nothing.
    """

    return ""


@block_to_text.register
def _(block: Paragraph, *, bullet: str = BULLET) -> str:
    return f"{block.text}\n\n"


@block_to_text.register
def _(block: Heading, *, bullet: str = BULLET) -> str:
    return f"\n## {block.text}\n\n"


@block_to_text.register
def _(block: Bold, *, bullet: str = BULLET) -> str:
    return f"**{block.text}**\n\n"


@block_to_text.register
def _(block: Separator, *, bullet: str = BULLET) -> str:
    return "\n---\n\n"


@block_to_text.register
def _(block: ListBlock, *, bullet: str = BULLET) -> str:
    if block.items is None:
        return ""
    if block.ordered:
        lines = [f"{i}. {item}" for i, item in enumerate(block.items, start=1)]
    else:
        lines = [f"{bullet} {item}" for item in block.items]
    return "\n".join(lines) + "\n\n"


@block_to_text.register
def _(block: Image, *, bullet: str = BULLET) -> str:
    if block.caption:
        return f"[Image: {block.caption}]\n\n"
    return "[Image]\n\n"


@block_to_text.register
def _(block: YouTube, *, bullet: str = BULLET) -> str:
    return f"[YouTube: {block.url}]\n\n"


@block_to_text.register
def _(block: Link, *, bullet: str = BULLET) -> str:
    return f"{block.text} ({block.url})\n\n"


def render_header(story: Story) -> str:
    """Return the title, byline and rule that open every transcript."""

    return f"{story.title}\nBy {story.author_name}\n{'=' * HEADER_RULE_WIDTH}\n\n"


def render_text(story: Story, *, bullet: str = BULLET) -> str:
    """Render ``story`` as a plain-text transcript.

    Parameters
    ----------
    story:
        Story to render.  Missing summary or content sections are omitted.
    bullet:
        Marker used for unordered list items.
    """

    parts = [render_header(story)]
    if story.summary:
        parts.append(f"{story.summary}\n\n")
    parts.extend(block_to_text(block, bullet=bullet) for block in story.blocks)
    return "".join(parts)
