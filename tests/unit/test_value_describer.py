"""Tests for the error-message value describer."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from valuecast import describe_value
from valuecast.config import DESCRIBE_MAX_LENGTH_ENV, ConfigurationError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("abc", "'abc'"),
        ("it's", "'it\\'s'"),
        ("", "''"),
        (None, "None"),
        (42, "42"),
        (1.5, "1.5"),
        (True, "True"),
        ({"a": 1}, '{"a":1}'),
        ([1, "x"], '[1,"x"]'),
        (b"\x0a\xff", "<bytes: 0a ff>"),
        (b"", "<bytes: empty>"),
        (datetime(2020, 1, 1, tzinfo=timezone.utc), "2020-01-01T00:00:00.000Z"),
    ],
)
def test_describe_value(value, expected):
    assert describe_value(value) == expected


def test_long_byte_sequences_are_previewed():
    text = describe_value(bytes(range(20)))
    assert text.startswith("<bytes: 00 01 02")
    assert text.endswith("0f ...>")


def test_unknown_objects_use_repr():
    class Opaque:
        def __repr__(self) -> str:
            return "<Opaque>"

    assert describe_value(Opaque()) == "<Opaque>"


def test_descriptions_are_truncated(monkeypatch):
    monkeypatch.setenv(DESCRIBE_MAX_LENGTH_ENV, "10")
    text = describe_value("abcdefghijkl")
    assert text == "'abcdef..."
    assert len(text) == 10


def test_default_limit_is_120():
    assert len(describe_value("x" * 500)) == 120


@pytest.mark.parametrize("raw", ["abc", "2"])
def test_invalid_limit_is_a_configuration_error(monkeypatch, raw):
    monkeypatch.setenv(DESCRIBE_MAX_LENGTH_ENV, raw)
    with pytest.raises(ConfigurationError):
        describe_value("x")
