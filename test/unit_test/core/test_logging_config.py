"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
log levels, formats, and file logging options.
"""

import logging
from pathlib import Path

import pytest

from sampling_gate.core import logging_config
from sampling_gate.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler() -> logging.Handler:
    root_logger = logging.getLogger()
    return next(
        h
        for h in root_logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    setup_logging(enable_file=False)


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),  # Test lowercase
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)

        assert _console_handler().level == expected_level

    def test_root_logger_captures_everything(self):
        setup_logging(log_level="ERROR", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_does_not_stack_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        stream_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1


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
        setup_logging(log_format=log_format, enable_file=False)

        assert _console_handler().formatter._fmt == expected_format

    def test_setup_logging_format_with_timestamp(self):
        setup_logging(log_format="detailed", enable_file=False)

        assert _console_handler().formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_file_handler_is_added_when_enabled(self, tmp_path: Path, monkeypatch):
        log_dir = tmp_path / "logs"
        monkeypatch.setattr(logging_config, "ENABLE_FILE_LOGGING", True)
        monkeypatch.setattr(logging_config, "LOG_FILE_DIR", str(log_dir))

        setup_logging(enable_file=True)

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert Path(file_handlers[0].baseFilename) == log_dir / "sampling_gate.log"

    def test_no_file_handler_or_directory_when_disabled(self, tmp_path: Path, monkeypatch):
        log_dir = tmp_path / "logs"
        monkeypatch.setattr(logging_config, "ENABLE_FILE_LOGGING", False)
        monkeypatch.setattr(logging_config, "LOG_FILE_DIR", str(log_dir))

        setup_logging(enable_file=True)

        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
        assert not log_dir.exists()


class TestModuleLogLevels:
    def test_module_levels_are_applied(self):
        setup_logging(enable_file=False)

        for module_name, module_level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == logging.getLevelName(module_level)

    def test_third_party_noise_is_reduced(self):
        assert MODULE_LOG_LEVELS["httpx"] == "WARNING"
        assert MODULE_LOG_LEVELS["httpcore"] == "WARNING"


def test_get_logger_returns_named_logger():
    logger = get_logger("sampling_gate.sampling.service")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "sampling_gate.sampling.service"
