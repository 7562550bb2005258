"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``randparams`` namespace.
    - Allow an optional stream handler for command line use.

Inputs/Outputs:
    - Inputs: module name, level name and an optional stream.
    - Outputs: `logging.Logger` instances.

Public contracts:
    - `get_logger(name)`: Return a logger below the package logger.
    - `configure_logging(level, stream=None)`: Set the package level and attach
      at most one stream handler.
    - `ensure_level(level)`: Set the package level only if none is set yet.
    - `reset_logging()`: Remove that handler again.

Notes/Edge cases:
    - Logging configuration is idempotent and never touches the root logger.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
from typing import TextIO

PACKAGE_LOGGER = "randparams"
_HANDLER_MARK = "_randparams_handler"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger named ``name`` inside the package namespace."""

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "INFO", *, stream: TextIO | None = None) -> logging.Logger:
    """Configure the package logger.

    Parameters
    ----------
    level:
        Level name or number applied to the package logger.
    stream:
        When given, records are also written to ``stream``.  Repeated calls
        replace the stream of the previously installed handler rather than
        adding another one.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if stream is None:
        return logger

    for handler in logger.handlers:
        if getattr(handler, _HANDLER_MARK, False) and isinstance(handler, logging.StreamHandler):
            handler.setStream(stream)
            return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)
    return logger


def ensure_level(level: str | int = "INFO") -> logging.Logger:
    """Set the package level unless a level is already configured.

    A level chosen by the host application, or by an earlier call, is left
    untouched.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    return logger


def reset_logging() -> None:
    """Remove the stream handler installed by :func:`configure_logging`."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()


__all__ = [
    "PACKAGE_LOGGER",
    "get_logger",
    "configure_logging",
    "ensure_level",
    "reset_logging",
]
