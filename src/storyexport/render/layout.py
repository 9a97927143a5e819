"""Layout engine for the paginated renderer.

Coordinates are millimetres measured from the top-left corner of the page;
``cursor_y`` grows downwards.  Typographic state lives in an immutable
:class:`LayoutState` value, and every operation returns an updated copy.
Text measurement and drawing are injected: a ``measure(text, font)``
callable returning a width in millimetres and a :class:`PageSink` receiving
draw calls.  This keeps the layout logic free of any PDF backend.

Page breaks are requested by :func:`check_page_break` once per block, before
the block is drawn.  A block is never split across pages; a block taller than
a page runs past the bottom margin.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from ..utils.logging import get_logger

__all__ = [
    "Font",
    "PageGeometry",
    "LayoutState",
    "MeasureFunc",
    "PageSink",
    "RecordingSink",
    "DrawCall",
    "LayoutEngine",
    "set_font",
    "wrap_text",
    "advance",
    "check_page_break",
    "fixed_width_measure",
]

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Font:
    """Font descriptor.

    ``weight`` is one of ``normal``, ``bold``, ``italic`` or ``bolditalic``;
    ``size`` is in points and ``color`` is a gray level from 0 (black) to 255.
    """

    family: str = "helvetica"
    weight: str = "normal"
    size: float = 11.0
    color: int = 0


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Page dimensions and margins in millimetres."""

    width: float = 210.0
    height: float = 297.0
    margin: float = 20.0
    page_bottom: float = 270.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.margin

    @property
    def center_x(self) -> float:
        return self.width / 2


@dataclass(slots=True, frozen=True)
class LayoutState:
    """Cursor position, active font and current page number (1-based)."""

    cursor_y: float
    font: Font = field(default_factory=Font)
    page: int = 1


MeasureFunc = Callable[[str, Font], float]


def set_font(
    state: LayoutState,
    *,
    weight: str | None = None,
    size: float | None = None,
    family: str | None = None,
    color: int | None = None,
) -> LayoutState:
    """Return ``state`` with the given font attributes replaced."""

    changes: dict[str, object] = {}
    if weight is not None:
        changes["weight"] = weight
    if size is not None:
        changes["size"] = size
    if family is not None:
        changes["family"] = family
    if color is not None:
        changes["color"] = color
    if not changes:
        return state
    return replace(state, font=replace(state.font, **changes))


def advance(state: LayoutState, delta: float) -> LayoutState:
    """Move the cursor down by ``delta``."""

    return replace(state, cursor_y=state.cursor_y + delta)


def check_page_break(state: LayoutState, geometry: PageGeometry) -> tuple[LayoutState, bool]:
    """Return ``(state, broke)`` starting a new page past the bottom threshold."""

    if state.cursor_y > geometry.page_bottom:
        return replace(state, cursor_y=geometry.top, page=state.page + 1), True
    return state, False


def wrap_text(text: str, content_width: float, font: Font, measure: MeasureFunc) -> list[str]:
    """Greedy word wrap of ``text`` at ``font``.

    Each source line (``text`` split on ``\\n``) is wrapped independently.
    A line takes as many whitespace-separated tokens as fit within
    ``content_width``; a token wider than the content width is placed alone
    on its own line without being broken.  The empty string yields one empty
    line.
    """

    lines: list[str] = []
    for source_line in text.split("\n"):
        current = ""
        for token in source_line.split():
            trial = f"{current} {token}" if current else token
            if not current or measure(trial, font) <= content_width:
                current = trial
            else:
                lines.append(current)
                current = token
        lines.append(current)
    return lines


def fixed_width_measure(char_width: float = 2.0) -> MeasureFunc:
    """Return a measure function giving every character ``char_width`` mm.

    Useful for backend-independent layout.
    """

    def measure(text: str, font: Font) -> float:
        return len(text) * char_width

    return measure


@runtime_checkable
class PageSink(Protocol):
    """Receiver of draw operations issued by :class:`LayoutEngine`."""

    def set_font(self, font: Font) -> None: ...

    def draw_text(self, x: float, y: float, text: str) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, gray: int) -> None: ...

    def new_page(self) -> None: ...

    def finish(self) -> bytes: ...


@dataclass(slots=True, frozen=True)
class DrawCall:
    """One recorded draw operation."""

    op: str
    page: int
    args: tuple[object, ...]


class RecordingSink:
    """Sink that records draw calls instead of producing a document."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []
        self.page = 1
        self.font = Font()

    def set_font(self, font: Font) -> None:
        self.font = font
        self.calls.append(DrawCall("font", self.page, (font,)))

    def draw_text(self, x: float, y: float, text: str) -> None:
        self.calls.append(DrawCall("text", self.page, (x, y, text, self.font)))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, gray: int) -> None:
        self.calls.append(DrawCall("line", self.page, (x1, y1, x2, y2, gray)))

    def new_page(self) -> None:
        self.page += 1
        self.calls.append(DrawCall("page", self.page, ()))

    def finish(self) -> bytes:
        return b""

    @property
    def page_count(self) -> int:
        return self.page

    def texts(self) -> list[DrawCall]:
        """Return the recorded text draws in order."""

        return [c for c in self.calls if c.op == "text"]


class LayoutEngine:
    """Threads one :class:`LayoutState` through a single render call.

    Instances are not shared between renders.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        measure: MeasureFunc,
        sink: PageSink,
        *,
        font: Font | None = None,
    ) -> None:
        self.geometry = geometry
        self.measure = measure
        self.sink = sink
        self.state = LayoutState(cursor_y=geometry.top, font=font or Font())
        self.sink.set_font(self.state.font)

    @property
    def y(self) -> float:
        return self.state.cursor_y

    @property
    def font(self) -> Font:
        return self.state.font

    @property
    def page(self) -> int:
        return self.state.page

    def set_font(
        self,
        *,
        weight: str | None = None,
        size: float | None = None,
        family: str | None = None,
        color: int | None = None,
    ) -> None:
        new_state = set_font(self.state, weight=weight, size=size, family=family, color=color)
        if new_state.font != self.state.font:
            self.sink.set_font(new_state.font)
        self.state = new_state

    def wrap(self, text: str) -> list[str]:
        return wrap_text(text, self.geometry.content_width, self.state.font, self.measure)

    def advance(self, delta: float) -> None:
        self.state = advance(self.state, delta)

    def ensure_room(self) -> bool:
        """Start a new page if the cursor is past the bottom threshold."""

        self.state, broke = check_page_break(self.state, self.geometry)
        if broke:
            logger.debug("page break -> page %d", self.state.page)
            self.sink.new_page()
            self.sink.set_font(self.state.font)
        return broke

    def draw_lines(self, lines: list[str], line_height: float) -> None:
        """Draw ``lines`` at the left margin starting at the cursor.

        The cursor itself is not moved.
        """

        for i, line in enumerate(lines):
            self.sink.draw_text(self.geometry.margin, self.y + i * line_height, line)

    def rule(self, x1: float, x2: float, gray: int) -> None:
        self.sink.draw_line(x1, self.y, x2, self.y, gray)

    def finish(self) -> bytes:
        return self.sink.finish()
