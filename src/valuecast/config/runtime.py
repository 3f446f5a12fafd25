from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import logging
import os

from .errors import ConfigurationError

_LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

LOG_LEVEL_ENV = "VALUECAST_LOG_LEVEL"
DESCRIBE_MAX_LENGTH_ENV = "VALUECAST_DESCRIBE_MAX_LENGTH"


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        return or_value
    return value


def env_int(name: str, or_value: int | None = None) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def resolve_log_level(raw: str | int) -> int:
    """Translate a level name or number into a ``logging`` level."""

    if isinstance(raw, int):
        return raw
    token = raw.strip().upper()
    if token.isascii() and token.isdigit():
        return int(token)
    if token not in _LOG_LEVEL_NAMES:
        raise ConfigurationError.invalid_format("log level", raw, "one of " + ", ".join(_LOG_LEVEL_NAMES))
    return logging.getLevelName(token)


def env_log_level(name: str = LOG_LEVEL_ENV, or_value: int = logging.WARNING) -> int:
    """Fetch a logging level from the environment."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        return or_value
    return resolve_log_level(raw)


def describe_max_length(or_value: int = 120) -> int:
    """Maximum length of value descriptions embedded in error messages."""

    value = env_int(DESCRIBE_MAX_LENGTH_ENV, or_value=or_value)
    if value is None or value < 4:
        raise ConfigurationError.invalid_value(DESCRIBE_MAX_LENGTH_ENV, value, "Must be an integer >= 4")
    return value
