"""Tests for the converter registry."""

from __future__ import annotations

import pytest

from valuecast import CONVERTERS, UnsupportedFormatError, convert, supported_formats


def test_supported_formats_lists_every_name():
    assert supported_formats() == (
        "binary",
        "boolean",
        "byte",
        "date",
        "date-time",
        "dateTime",
        "integer",
        "number",
        "string",
    )


@pytest.mark.parametrize(
    "format_name, value, expected",
    [
        ("binary", True, "00000001"),
        ("boolean", "", False),
        ("byte", False, "AA=="),
        ("date", "2020-01-01T12:30:00.000Z", "2020-01-01"),
        ("date-time", "2020-01-01", "2020-01-01T00:00:00.000Z"),
        ("dateTime", 0, "1970-01-01T00:00:00.000Z"),
        ("integer", "4.5", 5),
        ("number", "2.5", 2.5),
        ("string", {"a": 1}, '{"a":1}'),
    ],
)
def test_convert_dispatches_by_name(format_name, value, expected):
    assert convert(format_name, value).value == expected


def test_convert_matches_direct_call():
    for name, converter in CONVERTERS.items():
        assert convert(name, "2020-01-01") == converter("2020-01-01")


def test_unknown_format_raises():
    with pytest.raises(UnsupportedFormatError, match="Unsupported format 'uuid'") as excinfo:
        convert("uuid", "x")
    assert excinfo.value.format_name == "uuid"
