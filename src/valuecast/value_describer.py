"""Human-readable rendering of arbitrary values for error messages."""

from __future__ import annotations

from datetime import date
from typing import Any

import numpy as np
import orjson

from .config import describe_max_length
from .numeric import is_boolean, is_byte_sequence, is_number
from .time_helpers import format_iso_utc

_BYTES_PREVIEW = 16
_ELLIPSIS = "..."


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _describe_bytes(value: bytes | bytearray | memoryview) -> str:
    data = bytes(value)
    preview = " ".join(f"{octet:02x}" for octet in data[:_BYTES_PREVIEW])
    if len(data) > _BYTES_PREVIEW:
        preview += " " + _ELLIPSIS
    return f"<bytes: {preview}>" if preview else "<bytes: empty>"


def _describe_date(value: date) -> str:
    try:
        return format_iso_utc(value)
    except OverflowError:  # aware datetime near year 1 or 9999
        return value.isoformat()


def _describe_container(value: Any) -> str:
    try:
        return orjson.dumps(value, default=str, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")
    except orjson.JSONEncodeError:
        return repr(value)


def _render(value: Any) -> str:
    if isinstance(value, str):
        return _quote(value)
    if value is None or is_boolean(value) or is_number(value):
        return str(value)
    if isinstance(value, date):
        return _describe_date(value)
    if isinstance(value, np.datetime64):
        return str(value)
    if is_byte_sequence(value):
        return _describe_bytes(value)
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return _describe_container(list(value) if isinstance(value, (set, frozenset)) else value)
    return repr(value)


def describe_value(value: Any) -> str:
    """
    Render a value for inclusion in an error message.

    Strings are single-quoted so that empty and whitespace-only inputs stay visible,
    dates use the ISO-8601 UTC form, containers are shown as JSON. Long renderings
    are cut at ``VALUECAST_DESCRIBE_MAX_LENGTH`` characters.

    Examples:
        >>> describe_value("abc")
        "'abc'"
        >>> describe_value({"a": 1})
        '{"a":1}'
        >>> describe_value(None)
        'None'
    """
    text = _render(value)
    limit = describe_max_length()
    if len(text) > limit:
        return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return text


__all__ = ["describe_value"]
