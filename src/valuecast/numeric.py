"""
Numeric classification and loose coercion utilities.

All converters classify their inputs through the predicates here so that
``bool`` (an ``int`` subclass) and numpy scalars are treated consistently.
"""

from __future__ import annotations

import math
import numbers
import re
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Union

import numpy as np

from .time_helpers import datetime64_to_epoch_millis, to_epoch_millis

Number = Union[int, float, Decimal, numbers.Real]

UINT32_MODULUS = 2**32
OCTET_WIDTH = 8

_DECIMAL_LITERAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_INTEGER_LITERAL = re.compile(r"^[+-]?\d+$", re.ASCII)
_PREFIXED_LITERAL = re.compile(r"^0(?P<radix>[xXoObB])(?P<digits>[0-9a-fA-F]+)$")
_INFINITY_LITERAL = re.compile(r"^(?P<sign>[+-]?)Infinity$")
_RADIX_BY_PREFIX = {"x": 16, "o": 8, "b": 2}


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_number(value: Any) -> bool:
    """True for real numbers and ``Decimal``; booleans are excluded."""
    if is_boolean(value):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_finite(value: Any) -> bool:
    """True when a number (as classified by ``is_number``) is neither NaN nor infinite."""
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


def is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Integral):
        return False
    return math.isnan(value)


def is_byte_sequence(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def is_date_value(value: Any) -> bool:
    """True for ``datetime``/``date`` objects and numpy ``datetime64`` scalars."""
    return isinstance(value, (date, np.datetime64))


def _parse_numeric_string(text: str) -> Optional[Number]:
    """Parse a numeric literal, returning None when the text is not one."""
    token = text.strip()
    if not token:
        return 0
    if _INTEGER_LITERAL.match(token):
        return int(token)
    if _DECIMAL_LITERAL.match(token):
        return float(token)

    prefixed = _PREFIXED_LITERAL.match(token)
    if prefixed:
        radix = _RADIX_BY_PREFIX[prefixed.group("radix").lower()]
        try:
            return int(prefixed.group("digits"), radix)
        except ValueError:  # digits outside the radix, e.g. "0b12"
            return None

    infinity = _INFINITY_LITERAL.match(token)
    if infinity:
        return -math.inf if infinity.group("sign") == "-" else math.inf
    return None


def to_number(value: Any) -> Optional[Number]:
    """
    Loosely coerce a value to a number.

    Returns None where no numeric reading exists (the NaN case). Numeric inputs are
    returned unchanged, so a NaN float also comes back as NaN; callers check
    ``is_finite`` on the result.

    Examples:
        >>> to_number("4.5")
        4.5
        >>> to_number(" 12 ")
        12
        >>> to_number("")
        0
        >>> to_number(True)
        1
        >>> to_number("abc") is None
        True
    """
    if is_boolean(value):
        return 1 if value else 0
    if is_number(value):
        return value
    if isinstance(value, str):
        return _parse_numeric_string(value)
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return None
        return datetime64_to_epoch_millis(value)
    if isinstance(value, date):
        try:
            return to_epoch_millis(value)
        except OverflowError:  # aware datetime that leaves the range once moved to UTC
            return None
    if isinstance(value, (list, tuple)):
        if not value:
            return 0
        if len(value) == 1:
            return to_number(value[0])
    return None


def round_half_up(value: Number) -> int:
    """
    Round to the nearest integer with halves going toward positive infinity.

    Examples:
        >>> round_half_up(4.5)
        5
        >>> round_half_up(-4.5)
        -4
        >>> round_half_up(0.49999999999999994)
        0
    """
    if isinstance(value, numbers.Integral):
        return int(value)
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def to_uint32(value: Number) -> int:
    """Truncate toward zero and wrap into the unsigned 32-bit range."""
    return int(value) % UINT32_MODULUS


def decimal_to_binary(value: Number) -> str:
    """
    Render a number as unsigned 32-bit binary padded to whole octets.

    Examples:
        >>> decimal_to_binary(5)
        '00000101'
        >>> decimal_to_binary(256)
        '0000000100000000'
        >>> decimal_to_binary(-1)
        '11111111111111111111111111111111'
    """
    digits = format(to_uint32(value), "b")
    remainder = len(digits) % OCTET_WIDTH
    if remainder == 0:
        return digits
    return "0" * (OCTET_WIDTH - remainder) + digits


def binary_to_octets(digits: str) -> bytes:
    """Split a binary digit string into 8-bit groups and pack them into bytes."""
    return bytes(int(digits[index : index + OCTET_WIDTH], 2) for index in range(0, len(digits), OCTET_WIDTH))


__all__ = [
    "Number",
    "binary_to_octets",
    "decimal_to_binary",
    "is_boolean",
    "is_byte_sequence",
    "is_date_value",
    "is_finite",
    "is_nan",
    "is_number",
    "round_half_up",
    "to_number",
    "to_uint32",
]
