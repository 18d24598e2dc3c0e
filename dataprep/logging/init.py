from __future__ import annotations

import logging
import sys
from typing import TextIO

"""Application logger for dataprep.

Lines look like ``<LABEL> <message>``. The label is the level name, except
WARNING which prints as ``WARN``, plus a custom SUMMARY level (25) reserved
for the one end-of-run metrics line. Modules log through
``logging.getLogger(__name__)``; records from the ``dataprep.*`` hierarchy end
up on the single handler installed by :func:`setup_logging`.
"""

__all__ = [
    "APP_LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "set_level",
    "get_logger",
    "log_summary",
    "reset_logging",
]

APP_LOGGER_NAME = "dataprep"
SUMMARY_LEVEL = 25

_LABEL_OVERRIDES = {logging.WARNING: "WARN"}

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """``<LABEL> <message>``, with any traceback on the following lines."""

    def format(self, record: logging.LogRecord) -> str:
        label = _LABEL_OVERRIDES.get(record.levelno, record.levelname)
        line = f"{label} {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Install the labeled handler on the ``dataprep`` logger once per process.

    Later calls return the same logger untouched; use :func:`set_level` to
    change verbosity afterwards.
    """
    global _logger
    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.handlers.clear()
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(LabeledFormatter())
    app_logger.addHandler(handler)
    app_logger.propagate = False

    _logger = app_logger
    set_level(level)
    return app_logger


def set_level(level: int) -> None:
    """Apply ``level`` to the app logger and to every handler on it."""
    app_logger = get_logger()
    app_logger.setLevel(level)
    for handler in app_logger.handlers:
        handler.setLevel(level)


def get_logger() -> logging.Logger:
    return _logger if _logger is not None else setup_logging()


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger so the next setup starts over (tests)."""
    global _logger
    _logger = None
