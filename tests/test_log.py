"""Tests for structured logging setup (utils/log.py)."""

from __future__ import annotations

import io
import logging

import pytest

from adante.utils.log import LOG_LEVEL_ENV, ROOT_LOGGER_NAME, configure_logging, get_logger


class TestConfigureLogging:
    def test_writes_events_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging("debug", stream)
        get_logger("adante.test").info("something_happened", count=2)
        line = stream.getvalue()
        assert line.startswith("event='something_happened'")
        assert "count=2" in line
        assert "level='info'" in line

    def test_level_filters_events(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream)
        get_logger("adante.test").debug("hidden")
        assert stream.getvalue() == ""

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        logger = configure_logging(stream=io.StringIO())
        assert logger.level == logging.ERROR

    def test_default_level_is_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        logger = configure_logging(stream=io.StringIO())
        assert logger.level == logging.WARNING

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")

    def test_reconfigure_replaces_handler(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        configure_logging("info", first)
        configure_logging("info", second)
        get_logger("adante.test").info("once")
        assert first.getvalue() == ""
        assert "once" in second.getvalue()

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
