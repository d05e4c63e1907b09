"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging

import pytest

from bankcompare.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop the handlers setup_logging installed and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


def _console_handler() -> logging.Handler:
    return next(
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    )


def _file_handler():
    return next((h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)), None)


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        """Test setup_logging configures correct log level."""
        setup_logging(log_level=log_level, enable_file=False)

        assert _console_handler().level == expected_level

    def test_setup_logging_default_level_from_settings(self, monkeypatch):
        from bankcompare.core.config import settings

        monkeypatch.setattr(settings, "log_level", "WARNING")

        setup_logging(enable_file=False)

        assert _console_handler().level == logging.WARNING

    def test_setup_logging_file_from_settings(self, monkeypatch, tmp_path):
        from bankcompare.core.config import settings

        monkeypatch.setattr(settings, "enable_file_logging", True)
        monkeypatch.setattr(settings, "log_file_dir", str(tmp_path))

        setup_logging(log_level="INFO")

        assert any(type(h) is logging.FileHandler for h in logging.getLogger().handlers)
        assert (tmp_path / "bankcompare.log").exists()

    def test_root_captures_everything(self):
        setup_logging(log_level="ERROR", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        """Test setup_logging configures correct format."""
        setup_logging(log_format=log_format, enable_file=False)

        formatter = _console_handler().formatter
        assert formatter._fmt == expected_format
        assert formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_file_handler_created_in_directory(self, tmp_path):
        log_dir = tmp_path / "new_logs"

        setup_logging(log_level="ERROR", enable_file=True, log_file_dir=str(log_dir))

        file_handler = _file_handler()
        assert file_handler is not None
        assert file_handler.level == logging.DEBUG
        assert (log_dir / LOG_FILE_NAME).exists()

    def test_file_handler_disabled(self):
        setup_logging(enable_file=False)

        assert _file_handler() is None

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1


class TestModuleLevels:
    """Test per-module log levels."""

    def test_module_levels_applied(self):
        setup_logging(enable_file=False)

        for module_name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == logging.getLevelName(level)

    def test_sqlalchemy_quietened(self):
        assert MODULE_LOG_LEVELS["sqlalchemy"] == "WARNING"


class TestGetLogger:
    """Test get_logger."""

    def test_returns_named_logger(self):
        logger = get_logger("bankcompare.core.database.repositories.banks")

        assert logger.name == "bankcompare.core.database.repositories.banks"
        assert logger is logging.getLogger("bankcompare.core.database.repositories.banks")
