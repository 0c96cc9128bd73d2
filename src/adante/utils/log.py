"""Structured logging for adante.

Events are emitted through :mod:`structlog` bound loggers that wrap
standard-library loggers under the ``adante`` namespace.  The package
logger carries a :class:`logging.NullHandler`, so nothing is printed
until the application opts in via :func:`configure_logging` (or its own
``logging`` setup).
"""

from __future__ import annotations

import logging
import os
from typing import IO, Any

import structlog
from structlog.stdlib import BoundLogger

ROOT_LOGGER_NAME = "adante"
LOG_LEVEL_ENV = "ADANTE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]

_handler: logging.Handler | None = None


def get_logger(name: str = ROOT_LOGGER_NAME) -> BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=BoundLogger,
    )


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str | int | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Send adante log events to *stream* (stderr by default).

    *level* falls back to ``$ADANTE_LOG_LEVEL``, then ``WARNING``.
    Calling this again replaces the handler installed previously.
    """
    global _handler

    resolved = _resolve_level(level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(resolved)
    return logger
