from __future__ import annotations

import pytest

from valuecast.patterns import is_date_string, is_date_time_string


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2020-01-01", True),
        ("2020-1-01", False),
        ("2020-01-01T00:00:00Z", False),
        (" 2020-01-01", False),
        ("\u0662\u0660\u0662\u0660-\u0660\u0661-\u0660\u0661", False),
        ("\uff12\uff10\uff12\uff10-01-01", False),
        (20200101, False),
        (None, False),
    ],
)
def test_is_date_string(value, expected):
    assert is_date_string(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2020-01-01T00:00:00Z", True),
        ("2020-01-01T00:00:00.1+05:30", True),
        ("2020-01-01t00:00:00z", True),
        ("2020-01-01T00:00:00", False),
        ("2020-01-01T00:00Z", False),
        ("2020-01-01T00:00:00+0530", False),
        ("\u0662\u0660\u0662\u0660-01-01T00:00:00Z", False),
        ("2020-01-01T00:00:\u0660\u0660.\u0661Z", False),
        ("2020-01-01", False),
        (b"2020-01-01T00:00:00Z", False),
    ],
)
def test_is_date_time_string(value, expected):
    assert is_date_time_string(value) is expected
