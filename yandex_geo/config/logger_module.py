"""
Logging utilities for the Yandex geocoder client.

All library messages go through the ``yandex_geo`` package logger, so
applications can tune or silence the geocoder without touching their
own root logger configuration.
"""

import logging
from pathlib import Path


PACKAGE_LOGGER = "yandex_geo"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Flag to track if logger has been initialized to ensure idempotency
_logger_initialized = False


def get_logger() -> logging.Logger:
    """Return the package logger used by every geocoder module."""
    return logging.getLogger(PACKAGE_LOGGER)


def initialize_logger(log_level: str = "INFO", log_file: str = None) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Console output is at INFO; when ``log_file`` is given a file handler
    records everything down to DEBUG. Records still propagate to the
    root logger.

    Args:
        log_level: Level of the package logger (DEBUG, INFO, WARNING, ...)
        log_file: Optional path of a log file; parent directories are created

    Returns:
        The configured package logger
    """
    global _logger_initialized

    logger = get_logger()
    if _logger_initialized:
        return logger

    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    _logger_initialized = True

    logger.info(f"Geocoder logging initialized at {log_level}" + (f", file: {log_file}" if log_file else ""))
    return logger


def log_debug(message: str) -> None:
    """Log a debug message on the package logger."""
    logging.getLogger(PACKAGE_LOGGER).debug(message)


def log_info(message: str) -> None:
    """Log an info message on the package logger."""
    logging.getLogger(PACKAGE_LOGGER).info(message)


def log_warning(message: str) -> None:
    """Log a warning on the package logger."""
    logging.getLogger(PACKAGE_LOGGER).warning(message)


def log_error(message: str) -> None:
    """Log an error on the package logger."""
    logging.getLogger(PACKAGE_LOGGER).error(message)
