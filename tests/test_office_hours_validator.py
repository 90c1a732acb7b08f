"""
Tests for the office hours validator.
"""

import pytest

from officehours.domain.models import OfficeHoursPolicy, ProposedSlot, RejectionReason
from officehours.domain.office_hours_validator import OfficeHoursValidator


MONDAY = "2025-11-17"
SATURDAY = "2025-11-15"
SUNDAY = "2025-11-16"

WEEKDAY_MESSAGE = "Interviews can only be scheduled on weekdays (Monday-Friday)"
WINDOW_MESSAGE = "Interview time must be within office hours (09:00 - 18:00)"


@pytest.fixture
def validator():
    return OfficeHoursValidator(OfficeHoursPolicy(start_hour=9, end_hour=18))


class TestBoundaries:
    """Boundary cases of the default 09:00-18:00, Monday-Friday policy."""

    def test_start_at_opening_is_valid(self, validator):
        verdict = validator.validate(MONDAY, "09:00", 60)

        assert verdict.is_valid
        assert verdict.message == "Time slot is available"
        assert verdict.reason is None

    def test_end_exactly_at_closing_is_valid(self, validator):
        """17:00 + 60 minutes ends at 18:00, which is allowed."""
        assert validator.validate(MONDAY, "17:00", 60).is_valid

    def test_end_one_minute_past_closing_is_invalid(self, validator):
        verdict = validator.validate(MONDAY, "17:01", 60)

        assert not verdict.is_valid
        assert verdict.reason == RejectionReason.END_EXCEEDS_WINDOW
        assert "duration is too long" in verdict.message
        assert "18:01" in verdict.message
        assert "18:00" in verdict.message

    def test_start_at_closing_is_invalid(self, validator):
        verdict = validator.validate(MONDAY, "18:00", 15)

        assert not verdict.is_valid
        assert verdict.reason == RejectionReason.START_OUTSIDE_WINDOW
        assert verdict.message == WINDOW_MESSAGE

    def test_start_before_opening_is_invalid(self, validator):
        verdict = validator.validate(MONDAY, "06:00", 30)

        assert not verdict.is_valid
        assert verdict.reason == RejectionReason.START_OUTSIDE_WINDOW
        assert verdict.message == WINDOW_MESSAGE

    def test_one_minute_before_opening_is_invalid(self, validator):
        assert validator.validate(MONDAY, "08:59", 30).reason == RejectionReason.START_OUTSIDE_WINDOW

    def test_multi_hour_duration_carries_hours(self, validator):
        """09:45 + 480 minutes ends at 17:45."""
        assert validator.validate(MONDAY, "09:45", 480).is_valid

    def test_multi_hour_duration_past_closing(self, validator):
        verdict = validator.validate(MONDAY, "09:45", 540)

        assert verdict.reason == RejectionReason.END_EXCEEDS_WINDOW
        assert "18:45" in verdict.message

    def test_ninety_minutes_in_12_hour_form(self, validator):
        """2:00 PM for 90 minutes runs 14:00-15:30."""
        assert validator.validate(MONDAY, "2:00 PM", 90).is_valid
        assert validator.validate(MONDAY, "2:00pm", 90).is_valid


class TestTwelveHourClock:
    """AM/PM conversion as seen through the window rules."""

    def test_noon_is_inside_office_hours(self, validator):
        assert validator.validate(MONDAY, "12:00 PM", 60).is_valid

    def test_midnight_is_outside_office_hours(self, validator):
        verdict = validator.validate(MONDAY, "12:00 AM", 60)

        assert verdict.reason == RejectionReason.START_OUTSIDE_WINDOW

    def test_evening_pm_is_outside_office_hours(self, validator):
        assert validator.validate(MONDAY, "9:00 PM", 30).reason == RejectionReason.START_OUTSIDE_WINDOW

    def test_morning_am_is_inside_office_hours(self, validator):
        assert validator.validate(MONDAY, "9:00 AM", 30).is_valid


class TestWeekdays:
    """Weekday restriction."""

    @pytest.mark.parametrize("date", [SATURDAY, SUNDAY])
    def test_weekend_is_rejected(self, validator, date):
        verdict = validator.validate(date, "10:00", 60)

        assert not verdict.is_valid
        assert verdict.reason == RejectionReason.OUTSIDE_WEEKDAY
        assert verdict.message == WEEKDAY_MESSAGE

    def test_weekend_rejected_regardless_of_time(self, validator):
        """The weekday rule is checked before the time is parsed."""
        assert validator.validate(SATURDAY, "garbage", 30).message == WEEKDAY_MESSAGE
        assert validator.validate(SUNDAY, "06:00", 30).message == WEEKDAY_MESSAGE


class TestMalformedInput:
    """Format errors."""

    def test_invalid_date(self, validator):
        verdict = validator.validate("2025-13-40", "10:00", 30)

        assert not verdict.is_valid
        assert verdict.message == "Invalid date format"
        assert verdict.reason == RejectionReason.INVALID_DATE_FORMAT

    def test_invalid_time(self, validator):
        verdict = validator.validate(MONDAY, "garbage", 30)

        assert not verdict.is_valid
        assert verdict.message == "Invalid time format"
        assert verdict.reason == RejectionReason.INVALID_TIME_FORMAT

    @pytest.mark.parametrize("time", ["9", "25:99", "13:00 PM"])
    def test_times_outside_grammar(self, validator, time):
        assert validator.validate(MONDAY, time, 30).message == "Invalid time format"

    def test_full_width_digits_are_rejected(self, validator):
        """Only ASCII digits are accepted in dates and times."""
        assert validator.validate("２０２５-１１-１７", "10:00", 30).message == "Invalid date format"
        assert validator.validate(MONDAY, "１０:００", 30).message == "Invalid time format"

    def test_date_error_takes_precedence(self, validator):
        """When both values are malformed the date is reported."""
        assert validator.validate("2025-13-45", "9", 30).message == "Invalid date format"

    @pytest.mark.parametrize("duration", [0, -30, "60", 1.5, True])
    def test_invalid_duration(self, validator, duration):
        verdict = validator.validate(MONDAY, "10:00", duration)

        assert not verdict.is_valid
        assert verdict.reason == RejectionReason.INVALID_DURATION


class TestProperties:
    """General properties of validation."""

    CASES = [
        (MONDAY, "09:00", 60),
        (MONDAY, "17:01", 60),
        (SATURDAY, "10:00", 60),
        (MONDAY, "06:00", 30),
        ("2025-13-40", "10:00", 30),
        (MONDAY, "garbage", 30),
        (MONDAY, "10:00", 0),
    ]

    @pytest.mark.parametrize("date, time, duration", CASES)
    def test_validation_is_deterministic(self, validator, date, time, duration):
        assert validator.validate(date, time, duration) == validator.validate(date, time, duration)

    @pytest.mark.parametrize("date, time, duration", CASES)
    def test_rejections_carry_exactly_one_reason(self, validator, date, time, duration):
        verdict = validator.validate(date, time, duration)

        assert verdict.message
        assert (verdict.reason is None) == verdict.is_valid

    def test_validate_slot(self, validator):
        slot = ProposedSlot(date=MONDAY, start_time="2:00 PM", duration_minutes=90)

        assert validator.validate_slot(slot) == validator.validate(MONDAY, "2:00 PM", 90)

    def test_default_policy(self):
        """Without an explicit policy, 09:00-18:00 Monday-Friday applies."""
        validator = OfficeHoursValidator()

        assert validator.validate(MONDAY, "17:00", 60).is_valid
        assert validator.validate(SATURDAY, "10:00", 60).message == WEEKDAY_MESSAGE


class TestAlternativePolicies:
    """Policies other than the default."""

    def test_around_the_clock_policy(self):
        """A 24/7 policy accepts any day and slots ending at midnight."""
        validator = OfficeHoursValidator(
            OfficeHoursPolicy(start_hour=0, end_hour=24, allowed_weekdays=range(1, 8))
        )

        assert validator.validate(SATURDAY, "12:00 AM", 60).is_valid
        assert validator.validate(SUNDAY, "23:00", 60).is_valid

        verdict = validator.validate(SUNDAY, "23:30", 60)
        assert verdict.reason == RejectionReason.END_EXCEEDS_WINDOW
        assert "24:30" in verdict.message
        assert "24:00" in verdict.message

    def test_six_day_policy(self):
        """Saturday opens, Sunday stays closed with a matching message."""
        validator = OfficeHoursValidator(OfficeHoursPolicy(allowed_weekdays={1, 2, 3, 4, 5, 6}))

        assert validator.validate(SATURDAY, "10:00", 60).is_valid

        verdict = validator.validate(SUNDAY, "10:00", 60)
        assert verdict.reason == RejectionReason.OUTSIDE_WEEKDAY
        assert verdict.message == "Interviews can only be scheduled on Monday-Saturday"

    def test_short_day_policy(self):
        validator = OfficeHoursValidator(OfficeHoursPolicy(start_hour=8, end_hour=12))

        assert validator.validate(MONDAY, "08:00", 240).is_valid
        assert validator.validate(MONDAY, "11:30", 31).reason == RejectionReason.END_EXCEEDS_WINDOW
        assert validator.validate(MONDAY, "12:00 PM", 15).message == (
            "Interview time must be within office hours (08:00 - 12:00)"
        )
