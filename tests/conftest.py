"""Shared fixtures for valuecast tests."""

from __future__ import annotations

import logging

import pytest

from valuecast.config import DESCRIBE_MAX_LENGTH_ENV, LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def clean_valuecast_env(monkeypatch):
    """Tests start without any VALUECAST_* overrides from the host environment."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(DESCRIBE_MAX_LENGTH_ENV, raising=False)


@pytest.fixture
def isolated_root_logger():
    """Detach root handlers for the duration of a test and restore them afterwards."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = []

    yield root

    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.handlers = saved_handlers
    root.setLevel(saved_level)
