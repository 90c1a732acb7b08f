"""
Office hours validation for proposed interview slots.

Pure domain logic: no I/O, no logging and no shared mutable state, so a single
validator can be shared freely between requests and threads.
"""

from .models import (
    MINUTES_PER_HOUR,
    OfficeHoursPolicy,
    ProposedSlot,
    RejectionReason,
    ValidationVerdict,
    format_minutes,
)
from .time_parsing import parse_calendar_date, parse_clock_time


INVALID_DATE_MESSAGE = "Invalid date format"
INVALID_TIME_MESSAGE = "Invalid time format"
INVALID_DURATION_MESSAGE = "Interview duration must be a positive number of minutes"
AVAILABLE_MESSAGE = "Time slot is available"


class OfficeHoursValidator:
    """
    Decides whether a proposed interview slot fits the office hours policy.

    Rules are checked in a fixed order and the first failing rule is reported:
    1. The date must be a real YYYY-MM-DD calendar date
    2. The date must fall on an allowed weekday
    3. The start time must match the accepted time grammar
    4. The duration must be a positive number of minutes
    5. The start must lie in [opening, closing)
    6. The end must not be later than closing
    """

    def __init__(self, policy: OfficeHoursPolicy | None = None):
        self.policy = policy or OfficeHoursPolicy()

    def validate(self, date: str, start_time: str, duration_minutes: int) -> ValidationVerdict:
        """
        Validate a proposed slot.

        Args:
            date: Calendar date as YYYY-MM-DD
            start_time: Time as H:MM or HH:MM, optionally with AM/PM
            duration_minutes: Length of the interview

        Returns:
            ValidationVerdict with a specific message for the failed rule,
            or "Time slot is available" when every rule passes
        """
        policy = self.policy

        calendar_date = parse_calendar_date(date)
        if calendar_date is None:
            return ValidationVerdict.reject(RejectionReason.INVALID_DATE_FORMAT, INVALID_DATE_MESSAGE)

        if not policy.is_allowed_day(calendar_date):
            return ValidationVerdict.reject(
                RejectionReason.OUTSIDE_WEEKDAY,
                f"Interviews can only be scheduled on {policy.describe_days()}",
            )

        start = parse_clock_time(start_time)
        if start is None:
            return ValidationVerdict.reject(RejectionReason.INVALID_TIME_FORMAT, INVALID_TIME_MESSAGE)

        if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int) or duration_minutes <= 0:
            return ValidationVerdict.reject(RejectionReason.INVALID_DURATION, INVALID_DURATION_MESSAGE)

        start_minutes = start.minutes_since_midnight()
        end_minutes = start_minutes + duration_minutes

        if start.hour < policy.start_hour or start.hour >= policy.end_hour:
            return ValidationVerdict.reject(
                RejectionReason.START_OUTSIDE_WINDOW,
                f"Interview time must be within office hours ({policy.window_label()})",
            )

        if end_minutes > policy.closing_minutes:
            return ValidationVerdict.reject(
                RejectionReason.END_EXCEEDS_WINDOW,
                f"Interview duration is too long: it would end at {format_minutes(end_minutes)}, "
                f"after office hours close at {policy.end_hour:02d}:00",
            )

        return ValidationVerdict.accept(AVAILABLE_MESSAGE)

    def validate_slot(self, slot: ProposedSlot) -> ValidationVerdict:
        """Validate a ProposedSlot value."""
        return self.validate(slot.date, slot.start_time, slot.duration_minutes)

    def fits_window(self, start_minutes: int, duration_minutes: int) -> bool:
        """
        Check the window rules alone for a start given in minutes since midnight.
        """
        start_hour = start_minutes // MINUTES_PER_HOUR
        if start_hour < self.policy.start_hour or start_hour >= self.policy.end_hour:
            return False
        return start_minutes + duration_minutes <= self.policy.closing_minutes
