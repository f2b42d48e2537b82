from datetime import date

import pytest

from src.timesheet_engine.timesheet_engine.common.datetime_utils import (
    format_clock_time,
    format_hours,
    parse_clock_time,
    parse_duration,
    parse_sheet_date,
    weekday_name,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("10:45 AM", 645),
        ("10:45am", 645),
        ("12:00 AM", 0),
        ("12:30 PM", 750),
        ("1:05 pm", 785),
        ("22:10", 1330),
        ("9:05:30", 545),
    ],
)
def test_parse_clock_time(value, expected):
    assert parse_clock_time(value) == expected


@pytest.mark.parametrize("value", ["", "-", "  ", None, "late", "10h"])
def test_parse_clock_time_no_value(value):
    assert parse_clock_time(value) is None


def test_midnight_is_not_missing():
    assert parse_clock_time("0:00") == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        ("8h", 8.0),
        ("30m", 0.5),
        ("8h 30m", 8.5),
        ("8h 15m", 8.25),
        ("", 0.0),
        ("-", 0.0),
        ("abc 15m", 0.25),
        ("eight", 0.0),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == pytest.approx(expected)


def test_format_hours():
    assert format_hours(0) == "-"
    assert format_hours(8) == "8h"
    assert format_hours(8.5) == "8h 30m"
    assert format_hours(7.75) == "7h 45m"
    assert format_hours(7.9999) == "8h"


def test_format_clock_time():
    assert format_clock_time(0) == "12:00 AM"
    assert format_clock_time(720) == "12:00 PM"
    assert format_clock_time(645) == "10:45 AM"
    assert format_clock_time(1330) == "10:10 PM"


def test_format_clock_time_inverts_parse():
    for minutes in (0, 59, 600, 719, 720, 781, 1439):
        assert parse_clock_time(format_clock_time(minutes)) == minutes


def test_parse_sheet_date():
    assert parse_sheet_date("2025-11-03") == date(2025, 11, 3)
    assert parse_sheet_date("November 3, 2025") == date(2025, 11, 3)
    assert parse_sheet_date("garbage") is None
    assert parse_sheet_date("") is None


def test_labels_without_year_order_consistently():
    assert parse_sheet_date("Nov 02") < parse_sheet_date("Nov 10")


def test_weekday_name():
    assert weekday_name("2025-11-02") == "Sunday"
    assert weekday_name("2025-11-03") == "Monday"
    assert weekday_name("garbage") == ""
