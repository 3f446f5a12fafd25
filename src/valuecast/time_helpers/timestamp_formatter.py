"""ISO-8601 rendering in the ``YYYY-MM-DDTHH:MM:SS.mmmZ`` shape."""

from __future__ import annotations

from datetime import date, datetime, timezone


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC, adding timezone if naive."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def date_to_utc_midnight(value: date) -> datetime:
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def format_iso_utc(value: datetime | date) -> str:
    """
    Render a date or datetime as a millisecond-precision UTC timestamp.

    Naive datetimes are taken to be UTC already; plain dates map to midnight UTC.
    Sub-millisecond precision is truncated.

    Raises:
        OverflowError: If moving an aware datetime to UTC leaves the supported year range
    """
    if isinstance(value, datetime):
        moment = to_utc(value)
    else:
        moment = date_to_utc_midnight(value)
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


__all__ = ["date_to_utc_midnight", "format_iso_utc", "to_utc"]
