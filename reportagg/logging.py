"""Logging setup for reportagg runs.

Diagnostics go to stderr so stdout only carries the success line or the
dry-run summary. An optional log file always records DEBUG detail, one line
per load step, whatever the console verbosity.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "reportagg"
_CONSOLE_FORMAT = "reportagg: %(levelname)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``reportagg`` or one of its children."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the console handler and, when requested, a DEBUG file sink.

    Calling this again replaces the handlers from the previous call.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.propagate = False
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file))
    return logger


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


__all__ = ["configure_logging", "get_logger"]
