"""Exception classes for value conversion.

Converters never raise for bad input; they report failures through
``ConversionResult``. These exceptions surface when a caller asks for a raising
API (``ConversionResult.unwrap``) or misuses the registry (``convert`` with an
unknown format name).

Exception classes support two patterns:
1. No-argument raise: raise ConversionError()
2. Contextual attributes: err = ConversionError(target="integer", value="abc"); raise err
"""

from __future__ import annotations

from typing import Any, Iterable

from .value_describer import describe_value


class ApplicationError(Exception):
    """Base exception for all valuecast errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConversionError(ApplicationError):
    """Value could not be converted to the requested format."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value could not be converted to the requested format"
        super().__init__(message, **kwargs)

    @classmethod
    def _build(cls, target: str, expectation: str, value: Any) -> "ConversionError":
        msg = f"Cannot convert to {target}. {expectation} Received: {describe_value(value)}"
        return cls(msg, target=target, value=value)

    @classmethod
    def for_binary(cls, value: Any) -> "ConversionError":
        """Create error for a value with no binary octet representation."""
        return cls._build("binary", "The value must be a boolean, number, string, or bytes.", value)

    @classmethod
    def for_byte(cls, value: Any) -> "ConversionError":
        """Create error for a value with no base64 representation."""
        return cls._build("byte", "The value must be a boolean, number, string, or bytes.", value)

    @classmethod
    def for_date(cls, value: Any) -> "ConversionError":
        """Create error for a value that does not name an instant in time."""
        return cls._build("date", "The value must be a date, a number, or a date string.", value)

    @classmethod
    def for_integer(cls, value: Any) -> "ConversionError":
        """Create error for a non-numeric integer candidate."""
        return cls._build("integer", "The value must be numeric.", value)

    @classmethod
    def for_number(cls, value: Any) -> "ConversionError":
        """Create error for a non-numeric number candidate."""
        return cls._build("number", "The value must be numeric.", value)

    @classmethod
    def for_string(cls, value: Any) -> "ConversionError":
        """Create error for a value with no textual representation."""
        return cls._build(
            "string",
            "The value must be a string, a number, a boolean, an object, or a date.",
            value,
        )


class UnsupportedFormatError(ApplicationError):
    """Requested format has no registered converter."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Requested format has no registered converter"
        super().__init__(message, **kwargs)

    @classmethod
    def for_format(cls, format_name: str, available: Iterable[str]) -> "UnsupportedFormatError":
        """Create error for an unknown format name."""
        known = ", ".join(sorted(available))
        return cls(f"Unsupported format {format_name!r}. Expected one of: {known}", format_name=format_name)


__all__ = ["ApplicationError", "ConversionError", "UnsupportedFormatError"]
