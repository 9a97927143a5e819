"""Paginated PDF renderer.

Draws the title, byline, a divider rule, the optional summary and then every
body block through a :class:`~storyexport.render.layout.LayoutEngine`.  Block
display text is the transcript text of the block (see
:func:`storyexport.render.text.block_to_text`) stripped of surrounding
whitespace; blocks whose display text is empty are skipped outright.
"""

from __future__ import annotations

from ..config.schema import ExportConfig, load_config
from ..document.blocks import Bold, ContentBlock, Heading, Separator
from ..document.story import Story
from ..utils.logging import get_logger
from .backend import acquire_backend
from .layout import Font, LayoutEngine, MeasureFunc, PageSink
from .text import block_to_text

__all__ = ["layout_story", "render_pdf"]

logger = get_logger(__name__)


def _draw_front_matter(story: Story, engine: LayoutEngine, cfg: ExportConfig) -> None:
    fonts, spacing, colors = cfg.fonts, cfg.spacing, cfg.colors
    geometry = engine.geometry

    engine.set_font(weight="bold", size=fonts.title_size)
    title_lines = engine.wrap(story.title)
    engine.draw_lines(title_lines, spacing.title_line_height)
    engine.advance(len(title_lines) * spacing.title_line_height + spacing.title_gap)

    engine.set_font(weight="normal", size=fonts.byline_size, color=colors.byline)
    engine.draw_lines([f"By {story.author_name}"], spacing.byline_advance)
    engine.advance(spacing.byline_advance)

    engine.rule(geometry.margin, geometry.width - geometry.margin, colors.rule)
    engine.advance(spacing.rule_advance)

    engine.set_font(color=colors.text)

    if story.summary:
        engine.set_font(weight="italic", size=fonts.summary_size)
        summary_lines = engine.wrap(story.summary)
        engine.draw_lines(summary_lines, spacing.summary_line_height)
        engine.advance(len(summary_lines) * spacing.summary_line_height + spacing.summary_gap)

    engine.set_font(weight="normal", size=fonts.body_size)


def _draw_block(block: ContentBlock, engine: LayoutEngine, cfg: ExportConfig) -> bool:
    """Draw one block, returning ``False`` when it was skipped."""

    fonts, spacing = cfg.fonts, cfg.spacing
    text = block_to_text(block, bullet=cfg.text.bullet).strip()
    # Empty blocks return before ensure_room so they never open a page.
    if not text:
        return False

    engine.ensure_room()

    if isinstance(block, Heading):
        engine.set_font(weight="bold", size=fonts.heading_size)
    elif isinstance(block, Bold):
        engine.set_font(weight="bold")
    else:
        engine.set_font(weight="normal", size=fonts.body_size)

    if isinstance(block, Separator):
        center = engine.geometry.center_x
        half = spacing.separator_half_width
        engine.rule(center - half, center + half, cfg.colors.separator)
        engine.advance(spacing.separator_advance)
        return True

    lines = engine.wrap(text)
    engine.draw_lines(lines, spacing.body_line_height)
    engine.advance(len(lines) * spacing.body_line_height + spacing.block_gap)
    return True


def layout_story(story: Story, engine: LayoutEngine, cfg: ExportConfig) -> LayoutEngine:
    """Lay out ``story`` onto ``engine`` without finishing the document."""

    _draw_front_matter(story, engine, cfg)
    drawn = skipped = 0
    for block in story.blocks:
        if _draw_block(block, engine, cfg):
            drawn += 1
        else:
            skipped += 1
    logger.debug(
        "laid out %d block(s), skipped %d empty, %d page(s)", drawn, skipped, engine.page
    )
    return engine


def render_pdf(
    story: Story,
    *,
    config: ExportConfig | None = None,
    sink: PageSink | None = None,
    measure: MeasureFunc | None = None,
) -> bytes:
    """Render ``story`` to PDF bytes.

    Parameters
    ----------
    story:
        Story to render.
    config:
        Export configuration; package defaults when omitted.
    sink, measure:
        Drawing sink and text measurement.  Both default to the reportlab
        backend, which is acquired only when one of them is missing.

    Raises
    ------
    BackendUnavailableError
        If the reportlab backend is needed but cannot be loaded.
    """

    cfg = config if config is not None else load_config()
    geometry = cfg.page.geometry()

    if sink is None or measure is None:
        backend = acquire_backend()
        if measure is None:
            measure = backend.measure()
        if sink is None:
            sink = backend.sink(
                geometry,
                title=story.title,
                author=story.author_name,
                creator=cfg.metadata.creator,
            )

    engine = LayoutEngine(
        geometry,
        measure,
        sink,
        font=Font(family=cfg.fonts.family, size=cfg.fonts.body_size, color=cfg.colors.text),
    )
    layout_story(story, engine, cfg)
    return engine.finish()
