"""Typed exceptions for story loading, rendering and file emission."""


class StoryExportError(Exception):
    """Base class for all errors raised by the package."""


class StoryFormatError(StoryExportError, ValueError):
    """Raised when a story mapping does not have the expected shape."""


class IOFormatError(StoryExportError, ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader is registered for a file format."""


class BackendUnavailableError(StoryExportError, RuntimeError):
    """Raised when the PDF drawing backend cannot be acquired."""


class EmissionError(StoryExportError, OSError):
    """Raised when an export artifact could not be written to its destination."""
