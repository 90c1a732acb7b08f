"""
Tests for date and time parsing.
"""

import pendulum
import pytest

from officehours.domain.models import ClockTime
from officehours.domain.time_parsing import parse_calendar_date, parse_clock_time


class TestParseCalendarDate:
    """Tests for parse_calendar_date."""

    def test_valid_date(self):
        assert parse_calendar_date("2025-11-17") == pendulum.date(2025, 11, 17)

    def test_leap_day(self):
        assert parse_calendar_date("2024-02-29") == pendulum.date(2024, 2, 29)

    @pytest.mark.parametrize(
        "text",
        ["2025-13-40", "2025-13-45", "2025-02-30", "2023-02-29", "17.11.2025", "2025-1-5", "", "tomorrow", "２０２５-１１-１７"],
    )
    def test_invalid_dates(self, text):
        """Malformed strings and impossible days both fail."""
        assert parse_calendar_date(text) is None

    def test_non_string_input(self):
        assert parse_calendar_date(None) is None


class TestParseClockTime:
    """Tests for parse_clock_time."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("9:00", ClockTime(9, 0)),
            ("09:00", ClockTime(9, 0)),
            ("17:45", ClockTime(17, 45)),
            ("0:00", ClockTime(0, 0)),
            ("23:59", ClockTime(23, 59)),
            (" 10:30 ", ClockTime(10, 30)),
        ],
    )
    def test_24_hour_times(self, text, expected):
        assert parse_clock_time(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2:00 PM", ClockTime(14, 0)),
            ("2:00pm", ClockTime(14, 0)),
            ("10:30 AM", ClockTime(10, 30)),
            ("11:59 pm", ClockTime(23, 59)),
            ("1:15 Am", ClockTime(1, 15)),
        ],
    )
    def test_12_hour_times(self, text, expected):
        assert parse_clock_time(text) == expected

    def test_noon_is_hour_12(self):
        """12 PM is noon, neither 0 nor 24."""
        assert parse_clock_time("12:00 PM") == ClockTime(12, 0)

    def test_midnight_is_hour_0(self):
        """12 AM is midnight."""
        assert parse_clock_time("12:00 AM") == ClockTime(0, 0)

    @pytest.mark.parametrize(
        "text",
        ["9", "garbage", "25:99", "24:00", "9:60", "13:00 PM", "0:30 AM", "9:5", "9:00 XM", "at 9:00", "", "１０:００", "١٠:٠٠"],
    )
    def test_invalid_times(self, text):
        assert parse_clock_time(text) is None
