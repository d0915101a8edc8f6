"""
Unit tests for logger_module.

Tests cover:
- Handler attachment on the yandex_geo package logger
- Log level configuration and fallback
- Idempotency of initialization
- Convenience logging methods and propagation
"""

import logging
from unittest.mock import patch, MagicMock
import pytest

import yandex_geo.config.logger_module as logger_module
from .logger_module import (
    PACKAGE_LOGGER,
    get_logger,
    initialize_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Reset the package logger and the initialization flag around each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger_module._logger_initialized = False
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger_module._logger_initialized = False


def _flush(logger):
    for handler in logger.handlers:
        handler.flush()


class TestInitializeLogger:
    """Test cases for initialize_logger function."""

    def test_console_only_by_default(self):
        logger = initialize_logger()

        assert logger is get_logger()
        assert logger.name == "yandex_geo"
        assert logger.level == logging.INFO
        assert [type(h).__name__ for h in logger.handlers] == ["StreamHandler"]

    def test_file_handler(self, tmp_path):
        """Test a file handler is attached and parent directories created."""
        log_file = tmp_path / "logs" / "nested" / "geocoder.log"

        logger = initialize_logger(log_file=str(log_file))

        handler_types = sorted(type(h).__name__ for h in logger.handlers)
        assert handler_types == ["FileHandler", "StreamHandler"]
        assert log_file.exists()

    def test_root_logger_untouched(self, tmp_path):
        root_handlers = list(logging.getLogger().handlers)

        initialize_logger(log_file=str(tmp_path / "geocoder.log"))

        assert logging.getLogger().handlers == root_handlers

    def test_invalid_level_defaults_to_info(self):
        assert initialize_logger(log_level="LOUD").level == logging.INFO

    def test_idempotency(self, tmp_path):
        """Test repeated initialization does not add handlers."""
        log_file = str(tmp_path / "geocoder.log")

        initialize_logger(log_file=log_file)
        logger = initialize_logger(log_level="DEBUG", log_file=log_file)

        assert len(logger.handlers) == 2
        assert logger.level == logging.INFO

    def test_handler_levels(self, tmp_path):
        logger = initialize_logger(log_file=str(tmp_path / "geocoder.log"))

        levels = {type(h).__name__: h.level for h in logger.handlers}
        assert levels["StreamHandler"] == logging.INFO
        assert levels["FileHandler"] == logging.DEBUG


class TestConvenienceMethods:
    """Test cases for convenience logging methods."""

    def test_messages_reach_file(self, tmp_path):
        log_file = tmp_path / "geocoder.log"
        logger = initialize_logger(log_level="DEBUG", log_file=str(log_file))

        log_debug("Request URL built")
        log_info("Parsed 3 results")
        log_warning("Unparseable position")
        log_error("HTTP 502 from geocoder")
        _flush(logger)

        content = log_file.read_text()
        assert "yandex_geo - DEBUG" in content and "Request URL built" in content
        assert "INFO" in content and "Parsed 3 results" in content
        assert "WARNING" in content and "Unparseable position" in content
        assert "ERROR" in content and "HTTP 502 from geocoder" in content

    def test_level_filtering(self, tmp_path):
        log_file = tmp_path / "geocoder.log"
        logger = initialize_logger(log_level="WARNING", log_file=str(log_file))

        log_info("hidden info")
        log_warning("visible warning")
        _flush(logger)

        content = log_file.read_text()
        assert "hidden info" not in content
        assert "visible warning" in content

    def test_messages_propagate_to_root(self, caplog):
        with caplog.at_level(logging.WARNING):
            log_warning("Geocoder warning")

        assert [r.name for r in caplog.records] == ["yandex_geo"]
        assert "Geocoder warning" in caplog.text

    @patch('logging.getLogger')
    def test_convenience_methods_use_package_logger(self, mock_get_logger):
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        log_debug("debug message")
        log_info("info message")
        log_warning("warning message")
        log_error("error message")

        assert all(c.args == ("yandex_geo",) for c in mock_get_logger.call_args_list)
        mock_logger.debug.assert_called_once_with("debug message")
        mock_logger.info.assert_called_once_with("info message")
        mock_logger.warning.assert_called_once_with("warning message")
        mock_logger.error.assert_called_once_with("error message")
