"""
Type coercion for loosely-typed values.

Each converter turns a value into one OpenAPI format representation and reports
the outcome as a ConversionResult instead of raising:

    >>> from valuecast import integer
    >>> integer("4.5").value
    5
    >>> integer("abc").error
    "Cannot convert to integer. The value must be numeric. Received: 'abc'"
"""

from .conversion_result import ConversionResult, format_result
from .converters import (
    CONVERTERS,
    binary,
    boolean,
    byte,
    convert,
    date,
    date_time,
    integer,
    number,
    string,
    supported_formats,
)
from .exceptions import ApplicationError, ConversionError, UnsupportedFormatError
from .value_describer import describe_value

__version__ = "1.0.0"

__all__ = [
    "ApplicationError",
    "CONVERTERS",
    "ConversionError",
    "ConversionResult",
    "UnsupportedFormatError",
    "binary",
    "boolean",
    "byte",
    "convert",
    "date",
    "date_time",
    "describe_value",
    "format_result",
    "integer",
    "number",
    "string",
    "supported_formats",
]
