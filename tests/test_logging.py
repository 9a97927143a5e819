from __future__ import annotations

import io
import logging
from typing import Any

from storyexport.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("render").name == "storyexport.render"
    assert get_logger("storyexport.cli").name == "storyexport.cli"


def test_reconfigure_after_stream_closed(monkeypatch: Any) -> None:
    first = io.StringIO()
    monkeypatch.setattr("sys.stderr", first)
    configure_logging(verbose=False)
    first.close()

    second = io.StringIO()
    monkeypatch.setattr("sys.stderr", second)
    logger = configure_logging(verbose=True)
    get_logger("render").debug("laid out")

    handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
    assert "storyexport.render: laid out" in second.getvalue()
    logging.getLogger(ROOT_LOGGER_NAME).removeHandler(handlers[0])
