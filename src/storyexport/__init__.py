"""Story exporter.

Turns block-based stories into a plain-text transcript or a paginated PDF.
The command line interface lives in :mod:`storyexport.cli`.
"""

from .document import Story, StoryContent, story_from_dict, story_to_dict
from .export import export_pdf, export_story, export_txt
from .io import EmittedFile, emit_file, read_story
from .render.pdf import render_pdf
from .render.text import render_text
from .utils.slug import slugify

__version__ = "0.1.0"

__all__ = [
    "Story",
    "StoryContent",
    "story_from_dict",
    "story_to_dict",
    "export_pdf",
    "export_story",
    "export_txt",
    "EmittedFile",
    "emit_file",
    "read_story",
    "render_pdf",
    "render_text",
    "slugify",
    "__version__",
]
