"""
Format converters.

Each converter takes one loosely-typed value and returns a ConversionResult;
bad input never raises. The registry maps OpenAPI format names onto the
converters, with ``date-time`` and ``dateTime`` naming the same function.
"""

from __future__ import annotations

import base64
import logging
import math
import numbers
from datetime import date as date_type
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

import numpy as np
import orjson

from .conversion_result import ConversionResult, format_result
from .exceptions import ConversionError, UnsupportedFormatError
from .numeric import (
    binary_to_octets,
    decimal_to_binary,
    is_boolean,
    is_byte_sequence,
    is_date_value,
    is_finite,
    is_nan,
    is_number,
    round_half_up,
    to_number,
)
from .patterns import is_date_string, is_date_time_string
from .time_helpers import (
    date_value_to_utc,
    format_iso_utc,
    from_epoch_millis,
    parse_date_string,
    parse_date_time_string,
)

logger = logging.getLogger(__name__)

Converter = Callable[[Any], ConversionResult]

_BASE64_TRUE = "AQ=="
_BASE64_FALSE = "AA=="
_ISO_DATE_LENGTH = 10
_JSON_OPTIONS = orjson.OPT_NON_STR_KEYS | orjson.OPT_PASSTHROUGH_DATETIME


def _utf8(text: str) -> bytes:
    # lone surrogates become U+FFFD instead of failing the encode
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode("utf-8")


def _base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def binary(value: Any) -> ConversionResult:
    """Convert a boolean, number, string or byte sequence into a string of binary octets."""
    if is_boolean(value):
        return format_result(None, "0000000" + ("1" if value else "0"))
    if is_number(value) and is_finite(value):
        return format_result(None, decimal_to_binary(value))
    if isinstance(value, str) or is_byte_sequence(value):
        data = _utf8(value) if isinstance(value, str) else bytes(value)
        return format_result(None, "".join(f"{octet:08b}" for octet in data))
    return format_result(ConversionError.for_binary(value))


def _is_truthy(value: Any) -> bool:
    if value is None:
        return False
    if is_boolean(value):
        return bool(value)
    if is_number(value):
        return not (is_nan(value) or value == 0)
    if isinstance(value, str):
        return value != ""
    return True


def boolean(value: Any) -> ConversionResult:
    """
    Convert any value to a boolean. Never fails.

    None, False, numeric zero, NaN and the empty string are false; everything
    else, empty containers included, is true.
    """
    return format_result(None, _is_truthy(value))


def byte(value: Any) -> ConversionResult:
    """Convert a boolean, number, string or byte sequence to a base64 string."""
    if is_boolean(value):
        return format_result(None, _BASE64_TRUE if value else _BASE64_FALSE)
    if is_number(value) and is_finite(value):
        return format_result(None, _base64(binary_to_octets(decimal_to_binary(value))))
    if isinstance(value, str):
        return format_result(None, _base64(_utf8(value)))
    if is_byte_sequence(value):
        return format_result(None, _base64(bytes(value)))
    return format_result(ConversionError.for_byte(value))


def _to_moment(value: Any) -> Optional[datetime]:
    if is_date_time_string(value):
        return parse_date_time_string(value)
    if is_date_string(value):
        return parse_date_string(value)
    if is_date_value(value):
        return date_value_to_utc(value)
    if is_number(value):
        return from_epoch_millis(value)
    return None


def date_time(value: Any) -> ConversionResult:
    """
    Convert a date-time string, date string, date value or epoch milliseconds
    into an ISO-8601 UTC timestamp such as ``2020-01-01T00:00:00.000Z``.
    """
    try:
        moment = _to_moment(value)
    except (ValueError, OverflowError) as exc:
        logger.debug("Rejected date-time candidate %r: %s", value, exc)
        moment = None
    if moment is None:
        return format_result(ConversionError.for_date(value))
    return format_result(None, format_iso_utc(moment))


def date(value: Any) -> ConversionResult:
    """Convert like ``date_time`` and keep only the ``YYYY-MM-DD`` part."""
    result = date_time(value)
    if not result.ok:
        return result
    return format_result(None, result.value[:_ISO_DATE_LENGTH])


def integer(value: Any) -> ConversionResult:
    """Coerce to a number and round to the nearest integer, halves toward positive infinity."""
    numeric = to_number(value)
    if numeric is None or not is_finite(numeric):
        return format_result(ConversionError.for_integer(value))
    return format_result(None, round_half_up(numeric))


def number(value: Any) -> ConversionResult:
    """Coerce to a finite number."""
    numeric = to_number(value)
    if numeric is None or not is_finite(numeric):
        return format_result(ConversionError.for_number(value))
    return format_result(None, numeric)


def _format_number(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, numbers.Integral):
        return str(int(value))
    as_float = float(value)
    if math.isnan(as_float):
        return "NaN"
    if math.isinf(as_float):
        return "Infinity" if as_float > 0 else "-Infinity"
    if as_float == 0:
        return "0"
    return _shortest_decimal_text(as_float)


def _shortest_decimal_text(value: float) -> str:
    """
    Render a finite non-zero float with JavaScript's number-to-text rules.

    Plain notation is used for magnitudes in ``[1e-6, 1e21)``, exponent
    notation outside it.

    Examples:
        >>> _shortest_decimal_text(0.00001)
        '0.00001'
        >>> _shortest_decimal_text(1e-7)
        '1e-7'
        >>> _shortest_decimal_text(1.5e21)
        '1.5e+21'
    """
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # the value is 0.<digits> * 10**point
    point = exponent + len(digits)

    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    mantissa = digits[0] if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    power = point - 1
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def _json_default(obj: Any) -> Any:
    if isinstance(obj, date_type):
        return format_iso_utc(obj)
    if isinstance(obj, np.datetime64):
        try:
            return format_iso_utc(date_value_to_utc(obj))
        except (ValueError, OverflowError) as exc:
            raise TypeError(f"datetime64 value has no UTC timestamp: {obj}") from exc
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if not callable(obj) and not is_byte_sequence(obj) and hasattr(obj, "__dict__"):
        return {key: item for key, item in vars(obj).items() if not key.startswith("_")}
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def _to_json(value: Any) -> Optional[str]:
    try:
        return orjson.dumps(value, default=_json_default, option=_JSON_OPTIONS).decode("utf-8")
    except (orjson.JSONEncodeError, OverflowError) as exc:
        logger.debug("JSON serialization failed for %s: %s", type(value).__name__, exc)
        return None


def string(value: Any) -> ConversionResult:
    """
    Convert a value to its textual form.

    Booleans render as ``true``/``false``, numbers without a trailing ``.0``,
    dates as ISO-8601 UTC timestamps and other objects as compact JSON.
    """
    if is_boolean(value):
        return format_result(None, "true" if value else "false")
    if isinstance(value, str):
        return format_result(None, value)
    if is_number(value):
        return format_result(None, _format_number(value))
    if is_date_value(value):
        try:
            return format_result(None, format_iso_utc(date_value_to_utc(value)))
        except (ValueError, OverflowError):
            return format_result(ConversionError.for_string(value))
    if value is None or is_byte_sequence(value) or callable(value):
        return format_result(ConversionError.for_string(value))

    text = _to_json(value)
    if text is None:
        return format_result(ConversionError.for_string(value))
    return format_result(None, text)


CONVERTERS: Mapping[str, Converter] = {
    "binary": binary,
    "boolean": boolean,
    "byte": byte,
    "date": date,
    "date-time": date_time,
    "dateTime": date_time,
    "integer": integer,
    "number": number,
    "string": string,
}


def supported_formats() -> tuple[str, ...]:
    return tuple(sorted(CONVERTERS))


def convert(format_name: str, value: Any) -> ConversionResult:
    """
    Convert a value with the converter registered under ``format_name``.

    Raises:
        UnsupportedFormatError: If no converter is registered under that name
    """
    converter = CONVERTERS.get(format_name)
    if converter is None:
        raise UnsupportedFormatError.for_format(format_name, CONVERTERS)
    logger.debug("Converting %s value to %s", type(value).__name__, format_name)
    return converter(value)


__all__ = [
    "CONVERTERS",
    "Converter",
    "binary",
    "boolean",
    "byte",
    "convert",
    "date",
    "date_time",
    "integer",
    "number",
    "string",
    "supported_formats",
]
