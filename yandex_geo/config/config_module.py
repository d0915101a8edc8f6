"""
Configuration for the Yandex geocoder client.

Settings come from YANDEX_GEOCODER_* environment variables, optionally
seeded from a .env file, and are gathered into a GeocoderSettings
object that the request builder reads once at construction.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Iterable, Optional
from dotenv import load_dotenv


API_KEY_ENV = "YANDEX_GEOCODER_API_KEY"
VERSION_ENV = "YANDEX_GEOCODER_VERSION"
TIMEOUT_ENV = "YANDEX_GEOCODER_TIMEOUT"

DEFAULT_VERSION = "1.x"
DEFAULT_TIMEOUT = 30

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when geocoder settings are missing or malformed."""
    pass


@dataclass
class GeocoderSettings:
    """Settings for the geocoder request builder."""

    api_key: Optional[str] = None
    version: str = DEFAULT_VERSION
    request_timeout: float = DEFAULT_TIMEOUT


def load_config(env_path: str = ".env") -> bool:
    """
    Seed the environment from a .env file, overriding existing values.

    Args:
        env_path: Path to the .env file

    Returns:
        True if the file existed and was loaded
    """
    if not os.path.isfile(env_path):
        logger.warning(f"No geocoder .env file at {env_path}, reading process environment only")
        return False

    load_dotenv(env_path, override=True)
    logger.info(f"Loaded geocoder settings from {env_path}")
    return True


def get_config(key: str, default: Any = None) -> Any:
    """
    Read one environment variable, logging when it falls back.

    Args:
        key: Environment variable name
        default: Value returned when the variable is unset

    Returns:
        The variable's value or ``default``
    """
    if key in os.environ:
        return os.environ[key]

    if default is None:
        logger.debug(f"{key} is not set")
    else:
        logger.debug(f"{key} is not set, using {default!r}")
    return default


def validate_config(required_keys: Iterable[str]) -> None:
    """
    Check that every key in ``required_keys`` is set to a non-blank value.

    Raises:
        ConfigError: Naming each missing or blank key
    """
    missing = [key for key in required_keys if key not in os.environ]
    blank = [key for key in required_keys if key in os.environ and not os.environ[key].strip()]

    if missing or blank:
        problems = []
        if missing:
            problems.append(f"missing {', '.join(missing)}")
        if blank:
            problems.append(f"blank {', '.join(blank)}")
        message = f"Geocoder configuration invalid: {'; '.join(problems)}"
        logger.error(message)
        raise ConfigError(message)


def get_geocoder_settings(env_path: str = None, require_api_key: bool = False) -> GeocoderSettings:
    """
    Build geocoder settings from the environment.

    Args:
        env_path: Optional .env file loaded before reading the environment
        require_api_key: Fail when YANDEX_GEOCODER_API_KEY is missing or blank

    Returns:
        GeocoderSettings populated from YANDEX_GEOCODER_* variables

    Raises:
        ConfigError: If a required key is absent or the timeout is not
            a positive number
    """
    if env_path:
        load_config(env_path)
    if require_api_key:
        validate_config([API_KEY_ENV])

    raw_timeout = get_config(TIMEOUT_ENV, str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError):
        raise ConfigError(f"{TIMEOUT_ENV} must be a number, got '{raw_timeout}'")
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {timeout}")

    return GeocoderSettings(
        api_key=get_config(API_KEY_ENV) or None,
        version=get_config(VERSION_ENV) or DEFAULT_VERSION,
        request_timeout=timeout,
    )
