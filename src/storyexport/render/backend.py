"""reportlab drawing backend.

reportlab is imported on first use so that the plain-text path never pays
for it.  :func:`acquire_backend` raises :class:`BackendUnavailableError` when
the library cannot be loaded; nothing is written in that case.

The layout engine works in millimetres from the top of the page while
reportlab uses points from the bottom; :class:`ReportlabSink` converts.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from ..utils.errors import BackendUnavailableError
from ..utils.logging import get_logger
from .layout import Font, MeasureFunc, PageGeometry

__all__ = ["Backend", "ReportlabSink", "acquire_backend", "font_name"]

logger = get_logger(__name__)

_FONT_NAMES: dict[str, dict[str, str]] = {
    "helvetica": {
        "normal": "Helvetica",
        "bold": "Helvetica-Bold",
        "italic": "Helvetica-Oblique",
        "bolditalic": "Helvetica-BoldOblique",
    },
    "times": {
        "normal": "Times-Roman",
        "bold": "Times-Bold",
        "italic": "Times-Italic",
        "bolditalic": "Times-BoldItalic",
    },
    "courier": {
        "normal": "Courier",
        "bold": "Courier-Bold",
        "italic": "Courier-Oblique",
        "bolditalic": "Courier-BoldOblique",
    },
}


def font_name(font: Font) -> str:
    """Return the standard PDF font name for ``font``."""

    styles = _FONT_NAMES.get(font.family.lower(), _FONT_NAMES["helvetica"])
    return styles.get(font.weight, styles["normal"])


@dataclass(slots=True, frozen=True)
class Backend:
    """Handles on the reportlab modules used for one render."""

    canvas: ModuleType
    pdfmetrics: ModuleType
    mm: float

    def measure(self) -> MeasureFunc:
        """Return a measure function giving string widths in millimetres."""

        stringWidth = self.pdfmetrics.stringWidth
        mm = self.mm

        def measure(text: str, font: Font) -> float:
            return stringWidth(text, font_name(font), font.size) / mm

        return measure

    def sink(self, geometry: PageGeometry, *, title: str, author: str, creator: str) -> "ReportlabSink":
        return ReportlabSink(self, geometry, title=title, author=author, creator=creator)


def acquire_backend() -> Backend:
    """Import reportlab and return a :class:`Backend`.

    Raises
    ------
    BackendUnavailableError
        If reportlab is not installed or fails to import.
    """

    try:
        from reportlab.lib.units import mm
        from reportlab.pdfbase import pdfmetrics
        from reportlab.pdfgen import canvas
    except ImportError as exc:
        raise BackendUnavailableError(
            "Cannot render PDF: 'reportlab' is not available. Install it with: pip install reportlab"
        ) from exc
    return Backend(canvas=canvas, pdfmetrics=pdfmetrics, mm=mm)


class ReportlabSink:
    """Page sink drawing onto an in-memory reportlab canvas.

    The canvas is created with ``invariant=1`` so the same drawing sequence
    always produces the same bytes.
    """

    def __init__(
        self,
        backend: Backend,
        geometry: PageGeometry,
        *,
        title: str = "",
        author: str = "",
        creator: str = "",
    ) -> None:
        self._mm = backend.mm
        self._geometry = geometry
        self._buffer = io.BytesIO()
        page_size = (geometry.width * self._mm, geometry.height * self._mm)
        self._canvas: Any = backend.canvas.Canvas(self._buffer, pagesize=page_size, invariant=1)
        self._canvas.setTitle(title)
        self._canvas.setAuthor(author)
        self._canvas.setCreator(creator)
        self._font = Font()
        self.page_count = 1

    def _x(self, x: float) -> float:
        return x * self._mm

    def _y(self, y: float) -> float:
        return (self._geometry.height - y) * self._mm

    def _apply_font(self) -> None:
        self._canvas.setFont(font_name(self._font), self._font.size)
        self._canvas.setFillGray(self._font.color / 255.0)

    def set_font(self, font: Font) -> None:
        self._font = font
        self._apply_font()

    def draw_text(self, x: float, y: float, text: str) -> None:
        self._canvas.drawString(self._x(x), self._y(y), text)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, gray: int) -> None:
        self._canvas.setStrokeGray(gray / 255.0)
        self._canvas.line(self._x(x1), self._y(y1), self._x(x2), self._y(y2))

    def new_page(self) -> None:
        # reportlab resets graphics state on showPage
        self._canvas.showPage()
        self.page_count += 1
        self._apply_font()

    def finish(self) -> bytes:
        self._canvas.save()
        data = self._buffer.getvalue()
        logger.debug("reportlab produced %d bytes over %d page(s)", len(data), self.page_count)
        return data
