"""
Centralized logging configuration.

Library modules only create loggers; applications (and the command line entry
point) call setup_logging once to attach a console handler to the root logger.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Optional, Union

from .config import env_log_level, resolve_log_level

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"

TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
TECHNICAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_root_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger, root_logger.name)
    root_logger.handlers = []


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(TECHNICAL_FORMAT, TECHNICAL_DATE_FORMAT)

    # stdout carries conversion output on the command line
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    return console_handler


def setup_logging(level: Union[str, int, None] = None, user_friendly: bool = False) -> int:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Level name or number; defaults to ``VALUECAST_LOG_LEVEL`` or WARNING
        user_friendly: Emit bare messages instead of the timestamped technical format

    Returns:
        The effective numeric level

    Raises:
        ConfigurationError: If the level (argument or environment) is not recognised
    """
    resolved = env_log_level() if level is None else resolve_log_level(level)

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_root_handlers(root_logger)
        root_logger.addHandler(_build_console_handler(user_friendly))
        root_logger.setLevel(resolved)

    return resolved


__all__ = ["TECHNICAL_DATE_FORMAT", "TECHNICAL_FORMAT", "setup_logging"]
