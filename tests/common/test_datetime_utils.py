from datetime import date

import pytest

from src.attendance_reconciler.attendance_reconciler.common.datetime_utils import (
    format_duration,
    iter_days,
    parse_clock_duration,
    parse_iso_date,
    parse_observed_date,
)
from src.attendance_reconciler.attendance_reconciler.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "text, hours",
    [
        ("9:00", 9.0),
        ("09:30", 9.5),
        ("7:45:36", 7.76),
        ("0:15", 0.25),
    ],
)
def test_parse_clock_duration_accepts_clock_shapes(text, hours):
    assert parse_clock_duration(text) == pytest.approx(hours)


@pytest.mark.parametrize("text", ["", "-", None, "9", "9h30", "123:00", "9:5", "abc"])
def test_parse_clock_duration_falls_back_to_zero(text):
    assert parse_clock_duration(text) == 0.0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2025-01-02", date(2025, 1, 2)),
        ("01/02/2025", date(2025, 1, 2)),
        ("1/2/25", date(2025, 1, 2)),
        ("Jan 2, 2025", date(2025, 1, 2)),
        ("02-Jan-2025", date(2025, 1, 2)),
        ("01-02-25", date(2025, 1, 2)),
        ("12-31-2024", date(2024, 12, 31)),
        ("Jan 2 2025", date(2025, 1, 2)),
        ("1/2/2025 09:00", date(2025, 1, 2)),
        ("2025-01-02 9:00 AM", date(2025, 1, 2)),
        ("Thursday, January 2, 2025", date(2025, 1, 2)),
        ("2 January, 2025", date(2025, 1, 2)),
    ],
)
def test_parse_observed_date_formats(text, expected):
    assert parse_observed_date(text) == expected


@pytest.mark.parametrize("text", ["", "  ", "-", None, "Total", "13-45-25", "not a date"])
def test_parse_observed_date_absent(text):
    assert parse_observed_date(text) is None


def test_format_duration_rounds_to_minute():
    assert format_duration(9.5) == "09:30"
    assert format_duration(8) == "08:00"
    assert format_duration(7.999) == "08:00"
    assert format_duration(0.125) == "00:08"


@pytest.mark.parametrize("value", [-1, float("nan")])
def test_format_duration_invalid_values(value):
    assert format_duration(value) == "0:00"


def test_duration_round_trip():
    assert format_duration(parse_clock_duration("9:30")) == "09:30"
    assert format_duration(parse_clock_duration("10:05")) == "10:05"


def test_iter_days_is_inclusive():
    days = list(iter_days(date(2024, 12, 30), date(2025, 1, 2)))
    assert days == [date(2024, 12, 30), date(2024, 12, 31), date(2025, 1, 1), date(2025, 1, 2)]
    assert list(iter_days(date(2025, 1, 2), date(2025, 1, 1))) == []


def test_parse_iso_date_rejects_garbage():
    assert parse_iso_date("2025-06-05") == date(2025, 6, 5)
    with pytest.raises(ValidationError):
        parse_iso_date("05/06/2025")
