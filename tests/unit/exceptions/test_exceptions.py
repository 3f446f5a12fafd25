"""Tests for valuecast exception classes."""

from __future__ import annotations

import pytest

from valuecast.exceptions import ApplicationError, ConversionError, UnsupportedFormatError


class TestApplicationError:
    def test_default_message_is_class_docstring(self) -> None:
        assert str(ApplicationError()).startswith("Base exception for all valuecast errors.")

    def test_keyword_arguments_become_attributes(self) -> None:
        err = ApplicationError("boom", field="x", value=123)
        assert err.field == "x"
        assert err.value == 123


class TestConversionError:
    def test_inherits_from_application_error(self) -> None:
        assert issubclass(ConversionError, ApplicationError)

    def test_default_message(self) -> None:
        assert str(ConversionError()) == "Value could not be converted to the requested format"

    @pytest.mark.parametrize(
        "factory, expected",
        [
            (
                ConversionError.for_binary,
                "Cannot convert to binary. The value must be a boolean, number, string, or bytes. Received: None",
            ),
            (
                ConversionError.for_byte,
                "Cannot convert to byte. The value must be a boolean, number, string, or bytes. Received: None",
            ),
            (
                ConversionError.for_date,
                "Cannot convert to date. The value must be a date, a number, or a date string. Received: None",
            ),
            (ConversionError.for_integer, "Cannot convert to integer. The value must be numeric. Received: None"),
            (ConversionError.for_number, "Cannot convert to number. The value must be numeric. Received: None"),
            (
                ConversionError.for_string,
                "Cannot convert to string. The value must be a string, a number, a boolean, an object, or a date. "
                "Received: None",
            ),
        ],
    )
    def test_factory_messages(self, factory, expected) -> None:
        err = factory(None)
        assert str(err) == expected
        assert err.value is None

    def test_factory_records_target(self) -> None:
        assert ConversionError.for_integer("abc").target == "integer"


def test_unsupported_format_lists_known_names():
    err = UnsupportedFormatError.for_format("uuid", ["string", "binary"])
    assert str(err) == "Unsupported format 'uuid'. Expected one of: binary, string"
    assert err.format_name == "uuid"
