"""Timestamp parsing and ISO-8601 formatting helpers."""

from .timestamp_formatter import date_to_utc_midnight, format_iso_utc, to_utc
from .timestamp_parser import (
    EPOCH,
    date_value_to_utc,
    datetime64_to_epoch_millis,
    from_epoch_millis,
    parse_date_string,
    parse_date_time_string,
    to_epoch_millis,
)

__all__ = [
    "EPOCH",
    "date_to_utc_midnight",
    "date_value_to_utc",
    "datetime64_to_epoch_millis",
    "format_iso_utc",
    "from_epoch_millis",
    "parse_date_string",
    "parse_date_time_string",
    "to_epoch_millis",
    "to_utc",
]
