"""Tests for the logging configuration module."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

import scriptlens.config as config_module
from scriptlens.config import ScriptLensSettings
from scriptlens.config.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Reset logging state before each test to ensure isolation."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def debug_logging():
    """Configure debug logging before the test body runs."""
    configure_logging(ScriptLensSettings(log_level="DEBUG"))


class TestConfigureLogging:
    """Test the main configure_logging function."""

    @pytest.mark.parametrize(
        ("level_str", "level_const"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_log_level_configuration(self, level_str, level_const):
        """Test log levels are applied to the root logger."""
        configure_logging(ScriptLensSettings(log_level=level_str))
        assert logging.getLogger().level == level_const

    def test_invalid_level_raises(self):
        """Test an unknown level name is rejected."""
        settings = ScriptLensSettings().model_copy(update={"log_level": "LOUD"})
        with pytest.raises(ValueError, match="Invalid log level 'LOUD'"):
            configure_logging(settings)

    def test_console_handler_only_by_default(self):
        """Test no file handler is installed without a log file."""
        configure_logging(ScriptLensSettings())
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    @pytest.mark.parametrize("log_format", ["console", "json", "structured"])
    def test_log_file(self, tmp_path, log_format):
        """Test events reach the rotating log file in every format."""
        log_file = tmp_path / "logs" / "scriptlens.log"
        configure_logging(
            ScriptLensSettings(
                log_level="INFO", log_format=log_format, log_file=log_file
            )
        )

        assert any(
            isinstance(handler, RotatingFileHandler)
            for handler in logging.getLogger().handlers
        )

        get_logger("tests.logging").info("file event", scene_count=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "file event" in content

    def test_events_below_level_are_dropped(self, tmp_path):
        """Test filtering by the configured level."""
        log_file = tmp_path / "scriptlens.log"
        configure_logging(ScriptLensSettings(log_level="ERROR", log_file=log_file))

        get_logger("tests.logging").info("quiet event")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "quiet event" not in log_file.read_text(encoding="utf-8")

    def test_caplog_sees_events(self, debug_logging, caplog):
        """Test structlog events are visible to pytest's caplog."""
        with caplog.at_level(logging.DEBUG):
            get_logger("tests.logging").debug("captured event")
        assert "captured event" in caplog.text


class TestGetLogger:
    """Test the cached logger accessor."""

    def test_loggers_are_cached(self):
        """Test the same name returns the same logger object."""
        assert config_module.get_logger("a.b") is config_module.get_logger("a.b")

    def test_reset_clears_cache(self):
        """Test reset_settings forgets cached loggers."""
        config_module.get_logger("a.b")
        config_module.reset_settings()
        assert "a.b" not in config_module._logger_cache
