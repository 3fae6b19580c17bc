"""Logging setup shared by the library and the command-line entry point."""

from __future__ import annotations

import logging
import sys

from values2md.config import VALUES2MD_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ROOT_LOGGER = "values2md"


def configure_logging(level: str | int = VALUES2MD_LOG_LEVEL) -> logging.Logger:
    """Send package logs to the current stderr at ``level``.

    A handler installed by an earlier call is replaced, so repeated CLI
    invocations in one process neither duplicate output nor write to a
    stale stream.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_values2md", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._values2md = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
