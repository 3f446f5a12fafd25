from __future__ import annotations

"""Shared timestamp parsing helpers."""

import math
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import numpy as np

from ..patterns import DATE_PATTERN, DATE_TIME_PATTERN
from .timestamp_formatter import date_to_utc_midnight, to_utc

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)
_MILLISECOND_DIGITS = 3


def parse_date_time_string(text: str) -> datetime:
    """
    Parse an RFC 3339 date-time string into an aware UTC datetime.

    Fractional seconds are truncated to milliseconds.

    Raises:
        ValueError: If the text does not match the date-time pattern or names an
            impossible calendar instant
        OverflowError: If the offset pushes the instant outside years 1-9999
    """
    match = DATE_TIME_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Not a date-time string: {text!r}")

    fraction = match.group("fraction") or ""
    millis = int(fraction[:_MILLISECOND_DIGITS].ljust(_MILLISECOND_DIGITS, "0"))
    moment = datetime(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
        millis * 1000,
        tzinfo=_parse_offset(match.group("offset")),
    )
    return moment.astimezone(timezone.utc)


def _parse_offset(token: str) -> timezone:
    if token.upper() == "Z":
        return timezone.utc
    sign = -1 if token[0] == "-" else 1
    hours, minutes = token[1:].split(":")
    if int(minutes) > 59:
        raise ValueError(f"Offset minutes out of range in {token!r}")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))


def parse_date_string(text: str) -> datetime:
    """
    Parse a ``YYYY-MM-DD`` string as midnight UTC of that day.

    Raises:
        ValueError: If the text is not a date string or names an impossible date
    """
    match = DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Not a date string: {text!r}")
    return datetime(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        tzinfo=timezone.utc,
    )


def from_epoch_millis(value: Any) -> datetime:
    """
    Interpret a number as milliseconds since the Unix epoch.

    The fractional part is truncated toward zero.

    Raises:
        ValueError: If the number is NaN or infinite
        OverflowError: If the instant falls outside years 1-9999
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Non-finite timestamp value: {value!r}")
    elif not math.isfinite(value):
        raise ValueError(f"Non-finite timestamp value: {value!r}")
    return EPOCH + timedelta(milliseconds=int(value))


def to_epoch_millis(value: datetime | date) -> int:
    """Milliseconds since the Unix epoch, floored; naive datetimes are UTC."""
    if isinstance(value, datetime):
        moment = to_utc(value)
    else:
        moment = date_to_utc_midnight(value)
    return (moment - EPOCH) // _ONE_MILLISECOND


def datetime64_to_epoch_millis(value: np.datetime64) -> int:
    """
    Milliseconds since the Unix epoch for a numpy ``datetime64``.

    Raises:
        ValueError: If the value is NaT
    """
    if np.isnat(value):
        raise ValueError("NaT has no epoch offset")
    return int(value.astype("datetime64[ms]").astype(np.int64))


def date_value_to_utc(value: datetime | date | np.datetime64) -> datetime:
    """
    Normalize a native date value to an aware UTC datetime.

    Raises:
        ValueError: If a numpy value is NaT
        OverflowError: If the UTC instant falls outside years 1-9999
    """
    if isinstance(value, np.datetime64):
        return from_epoch_millis(datetime64_to_epoch_millis(value))
    if isinstance(value, datetime):
        return to_utc(value)
    return date_to_utc_midnight(value)


__all__ = [
    "EPOCH",
    "date_value_to_utc",
    "datetime64_to_epoch_millis",
    "from_epoch_millis",
    "parse_date_string",
    "parse_date_time_string",
    "to_epoch_millis",
]
