"""
Domain models for office hours validation and interview scheduling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from pendulum import Date


MINUTES_PER_HOUR = 60

DEFAULT_INTERVIEW_MINUTES = 30

WEEKDAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}

MONDAY_TO_FRIDAY: FrozenSet[int] = frozenset({1, 2, 3, 4, 5})


def format_minutes(total_minutes: int) -> str:
    """
    Format minutes since midnight as HH:MM.

    Hours are not wrapped at midnight, so an end time of 25:00 stays visible
    as such in rejection messages.
    """
    hour, minute = divmod(total_minutes, MINUTES_PER_HOUR)
    return f"{hour:02d}:{minute:02d}"


@dataclass(frozen=True)
class ClockTime:
    """
    A wall-clock time in 24-hour form.

    Invariant: 0 <= hour <= 23 and 0 <= minute <= 59.
    """
    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Minute must be between 0 and 59, got {self.minute}")

    @classmethod
    def from_minutes(cls, total_minutes: int) -> "ClockTime":
        """Build a clock time from minutes since midnight."""
        hour, minute = divmod(total_minutes, MINUTES_PER_HOUR)
        return cls(hour=hour, minute=minute)

    def minutes_since_midnight(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    def format_24h(self) -> str:
        return format_minutes(self.minutes_since_midnight())

    def format_12h(self) -> str:
        """Format as e.g. '9:00 AM' or '12:30 PM'."""
        meridiem = "PM" if self.hour >= 12 else "AM"
        display_hour = self.hour % 12 or 12
        return f"{display_hour}:{self.minute:02d} {meridiem}"

    def __str__(self) -> str:
        return self.format_24h()


@dataclass(frozen=True)
class OfficeHoursPolicy:
    """
    Weekly office hours during which interviews may take place.

    start_hour is inclusive, end_hour closes the window: a slot may not start
    at end_hour but may end exactly at end_hour:00. Weekdays use ISO numbering
    (1=Monday, 7=Sunday).
    """
    start_hour: int = 9
    end_hour: int = 18
    allowed_weekdays: FrozenSet[int] = MONDAY_TO_FRIDAY

    def __post_init__(self):
        if not 0 <= self.start_hour <= 23:
            raise ValueError(f"start_hour must be between 0 and 23, got {self.start_hour}")
        if not 1 <= self.end_hour <= 24:
            raise ValueError(f"end_hour must be between 1 and 24, got {self.end_hour}")
        if self.end_hour <= self.start_hour:
            raise ValueError(
                f"end_hour ({self.end_hour}) must be later than start_hour ({self.start_hour})"
            )

        weekdays = frozenset(self.allowed_weekdays)
        if not weekdays:
            raise ValueError("allowed_weekdays must contain at least one day")
        invalid_days = sorted(day for day in weekdays if day not in WEEKDAY_NAMES)
        if invalid_days:
            raise ValueError(f"allowed_weekdays must be between 1 and 7, got {invalid_days}")
        # Accept any iterable but store an immutable set
        object.__setattr__(self, "allowed_weekdays", weekdays)

    @property
    def opening_minutes(self) -> int:
        return self.start_hour * MINUTES_PER_HOUR

    @property
    def closing_minutes(self) -> int:
        return self.end_hour * MINUTES_PER_HOUR

    def is_allowed_day(self, date: Date) -> bool:
        """Check if interviews may be scheduled on the given date."""
        return date.isoweekday() in self.allowed_weekdays

    def window_label(self) -> str:
        """Office hours as 'HH:MM - HH:MM'."""
        return f"{format_minutes(self.opening_minutes)} - {format_minutes(self.closing_minutes)}"

    def describe_days(self) -> str:
        """
        Human-readable description of the allowed weekdays.

        Monday to Friday reads as 'weekdays (Monday-Friday)', any other
        consecutive run as 'Monday-Saturday', and scattered days are listed.
        """
        days = sorted(self.allowed_weekdays)

        if self.allowed_weekdays == MONDAY_TO_FRIDAY:
            return "weekdays (Monday-Friday)"
        if len(days) == 1:
            return WEEKDAY_NAMES[days[0]]
        if days == list(range(days[0], days[-1] + 1)):
            return f"{WEEKDAY_NAMES[days[0]]}-{WEEKDAY_NAMES[days[-1]]}"
        return ", ".join(WEEKDAY_NAMES[day] for day in days)


class RejectionReason(str, Enum):
    """The rule a proposed slot failed."""
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_TIME_FORMAT = "invalid_time_format"
    OUTSIDE_WEEKDAY = "outside_weekday"
    INVALID_DURATION = "invalid_duration"
    START_OUTSIDE_WINDOW = "start_outside_window"
    END_EXCEEDS_WINDOW = "end_exceeds_window"


@dataclass(frozen=True)
class ValidationVerdict:
    """
    Outcome of validating a proposed slot.

    The message is always populated; reason is None only for accepted slots.
    """
    is_valid: bool
    message: str
    reason: Optional[RejectionReason] = None

    @classmethod
    def accept(cls, message: str = "Time slot is available") -> "ValidationVerdict":
        return cls(is_valid=True, message=message)

    @classmethod
    def reject(cls, reason: RejectionReason, message: str) -> "ValidationVerdict":
        return cls(is_valid=False, message=message, reason=reason)


@dataclass(frozen=True)
class ProposedSlot:
    """Raw scheduling input as collected from a booking form."""
    date: str
    start_time: str
    duration_minutes: int


INTERVIEW_TYPES = ("hr", "technical", "behavioral", "panel")
INTERVIEW_STATUSES = ("scheduled", "completed", "cancelled", "no_show")


@dataclass
class ScheduledInterview:
    """
    An interview booked on the calendar.
    """
    application_id: int
    date: Date
    start: ClockTime
    duration_minutes: int
    candidate_name: str = ""
    interview_type: str = "hr"
    interviewer: str = ""
    location: str = ""
    status: str = "scheduled"
    notes: Optional[str] = None
    cancellation_reason: Optional[str] = None
    interview_id: Optional[int] = None

    def __post_init__(self):
        if self.duration_minutes <= 0:
            raise ValueError(f"duration_minutes must be positive, got {self.duration_minutes}")
        if self.interview_type not in INTERVIEW_TYPES:
            raise ValueError(f"Unknown interview type: {self.interview_type}")
        if self.status not in INTERVIEW_STATUSES:
            raise ValueError(f"Unknown interview status: {self.status}")

    @property
    def occupies_calendar(self) -> bool:
        """Cancelled interviews free their slot."""
        return self.status != "cancelled"

    def start_minutes(self) -> int:
        return self.start.minutes_since_midnight()

    def end_minutes(self) -> int:
        return self.start_minutes() + self.duration_minutes

    def overlaps(self, other: "ScheduledInterview") -> bool:
        """
        Check if two interviews overlap on the wall clock.

        Ranges are half-open [start, end) in minutes since midnight, so
        back-to-back interviews do not overlap.
        """
        if self.date != other.date:
            return False
        return self.start_minutes() < other.end_minutes() and other.start_minutes() < self.end_minutes()
