"""Tests for the integer and number converters."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal

import numpy as np
import pytest

from valuecast import integer, number


class TestInteger:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("4.5", 5),
            ("-4.5", -4),
            (4.4, 4),
            (4.5, 5),
            (-0.5, 0),
            ("  7 ", 7),
            ("", 0),
            (True, 1),
            (False, 0),
            ("0x1A", 26),
            ([3], 3),
            ([], 0),
            (Decimal("2.5"), 3),
            (np.float64(2.5), 3),
            (10**30, 10**30),
        ],
    )
    def test_rounds_half_toward_positive_infinity(self, value, expected) -> None:
        result = integer(value)
        assert result.error is None
        assert result.value == expected
        assert isinstance(result.value, int) and not isinstance(result.value, bool)

    @pytest.mark.parametrize(
        "value",
        [
            "abc",
            None,
            "Infinity",
            math.nan,
            math.inf,
            [1, 2],
            {"a": 1},
            "1_000",
            "4.5.6",
            "\u0661\u0662",
            "\uff11\uff12",
            "\u0661.5",
        ],
    )
    def test_non_numeric_values_report_error(self, value) -> None:
        result = integer(value)
        assert result.value is None
        assert result.error.startswith("Cannot convert to integer. The value must be numeric.")


class TestNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("4.5", 4.5),
            ("12", 12),
            (3.25, 3.25),
            ("1e3", 1000.0),
            ("-.5", -0.5),
            (False, 0),
            ("0b101", 5),
            ("0o17", 15),
            (["8"], 8),
        ],
    )
    def test_coerces_to_finite_number(self, value, expected) -> None:
        assert number(value).value == expected

    def test_numeric_input_is_returned_unchanged(self) -> None:
        amount = Decimal("1.10")
        assert number(amount).value is amount

    def test_datetime_is_epoch_milliseconds(self) -> None:
        assert number(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)).value == 1000

    def test_error_message_includes_rendered_input(self) -> None:
        assert number("abc").error == "Cannot convert to number. The value must be numeric. Received: 'abc'"

    @pytest.mark.parametrize(
        "value",
        [math.inf, -math.inf, "-Infinity", "0b12", None, object(), "\u0661\u0662", "\uff11\uff12", "1e\u0663"],
    )
    def test_non_finite_or_non_numeric_report_error(self, value) -> None:
        assert not number(value).ok
