"""Story renderers.

:mod:`.text` produces the plain-text transcript and :mod:`.pdf` the paginated
document; :mod:`.layout` holds the backend-independent layout engine.  The
PDF renderer is imported from its own module so that loading this package
does not pull in the configuration layer.
"""

from .layout import Font, LayoutEngine, LayoutState, PageGeometry, RecordingSink, wrap_text
from .text import block_to_text, render_text

__all__ = [
    "Font",
    "LayoutEngine",
    "LayoutState",
    "PageGeometry",
    "RecordingSink",
    "wrap_text",
    "block_to_text",
    "render_text",
]
