"""Logging utilities.

All loggers live under the ``storyexport`` namespace.  Library code only
obtains loggers through :func:`get_logger`; handlers are installed by the
command line interface through :func:`configure_logging`, which may be called
repeatedly without stacking handlers.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "storyexport"
_HANDLER_NAME = "storyexport-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace.

    ``name`` may be a module ``__name__`` (already namespaced) or a short
    suffix such as ``"render"``.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Parameters
    ----------
    verbose:
        Emit ``DEBUG`` records when true, ``WARNING`` and above otherwise.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    # The previous stream may already be closed, so drop it without flushing.
    for stale in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
