"""Regular expressions that classify date and date-time strings."""

from __future__ import annotations

import re

DATE_PATTERN = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$", re.ASCII)

DATE_TIME_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$",
    re.IGNORECASE | re.ASCII,
)


def is_date_string(value: object) -> bool:
    """Return True for ``YYYY-MM-DD`` strings."""
    return isinstance(value, str) and DATE_PATTERN.match(value) is not None


def is_date_time_string(value: object) -> bool:
    """Return True for full RFC 3339 date-time strings."""
    return isinstance(value, str) and DATE_TIME_PATTERN.match(value) is not None


__all__ = ["DATE_PATTERN", "DATE_TIME_PATTERN", "is_date_string", "is_date_time_string"]
