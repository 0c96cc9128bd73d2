"""Shared pytest fixtures and configuration for the adante test suite.

Guidelines
----------
* Core tests must be pure, with no side effects.
* Tests must not depend on OS state; ``sys.argv`` is always patched.
* Logging is left unconfigured unless a test opts in via ``caplog``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from adante.utils import log


@pytest.fixture(autouse=True)
def _reset_adante_logging() -> Iterator[None]:
    """Undo any handler or level set by ``configure_logging``."""
    yield
    logger = logging.getLogger(log.ROOT_LOGGER_NAME)
    if log._handler is not None:
        logger.removeHandler(log._handler)
        log._handler = None
    logger.setLevel(logging.NOTSET)
