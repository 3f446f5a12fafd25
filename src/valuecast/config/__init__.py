"""Shared configuration helpers."""

from .errors import ConfigurationError
from .runtime import (
    DESCRIBE_MAX_LENGTH_ENV,
    LOG_LEVEL_ENV,
    describe_max_length,
    env_int,
    env_log_level,
    env_str,
    resolve_log_level,
)

__all__ = [
    "ConfigurationError",
    "DESCRIBE_MAX_LENGTH_ENV",
    "LOG_LEVEL_ENV",
    "describe_max_length",
    "env_int",
    "env_log_level",
    "env_str",
    "resolve_log_level",
]
