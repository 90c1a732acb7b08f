"""
Free start times and conflict detection for interviews on a single day.

Like the validator, this is pure domain logic without external dependencies.
"""

from typing import Iterable, List, Optional

from pendulum import Date

from .models import ClockTime, OfficeHoursPolicy, ScheduledInterview
from .office_hours_validator import OfficeHoursValidator


class AvailabilityCalculator:
    """
    Calculates which interview start times are still free on a given day.

    Algorithm:
    1. Skip days outside the allowed weekdays
    2. Step through candidate start times from opening until closing
    3. Keep candidates whose slot fits office hours
    4. Drop candidates overlapping an active interview on that date
    """

    def __init__(self, policy: OfficeHoursPolicy | None = None):
        self.validator = OfficeHoursValidator(policy)

    @property
    def policy(self) -> OfficeHoursPolicy:
        return self.validator.policy

    def has_conflict(self, first: ScheduledInterview, second: ScheduledInterview) -> bool:
        """
        Check if two interviews overlap.

        Compared on wall-clock minutes, so clock changes on the day do not
        hide overlaps. Back-to-back interviews do not conflict.
        """
        return first.overlaps(second)

    def find_conflict(
        self,
        date: Date,
        start: ClockTime,
        duration_minutes: int,
        interviews: Iterable[ScheduledInterview],
        exclude_interview_id: Optional[int] = None,
    ) -> Optional[ScheduledInterview]:
        """
        Find the first active interview overlapping the proposed slot.
        Returns None if the slot is free.

        An interview being moved is passed as exclude_interview_id so that it
        does not conflict with its own current slot.
        """
        proposed = ScheduledInterview(
            application_id=0,
            date=date,
            start=start,
            duration_minutes=duration_minutes,
        )

        for interview in self._active_on(date, interviews):
            if exclude_interview_id is not None and interview.interview_id == exclude_interview_id:
                continue
            if self.has_conflict(proposed, interview):
                return interview
        return None

    def find_available_times(
        self,
        date: Date,
        interviews: Iterable[ScheduledInterview],
        duration_minutes: int = 30,
        step_minutes: int = 30,
    ) -> List[ClockTime]:
        """
        List the start times at which an interview of the given length still fits.

        Args:
            date: Day to inspect
            interviews: Interviews already booked (any date, filtered here)
            duration_minutes: Length of the interview to place
            step_minutes: Distance between candidate start times

        Returns:
            Free start times in ascending order
        """
        if duration_minutes <= 0:
            raise ValueError(f"duration_minutes must be positive, got {duration_minutes}")
        if step_minutes <= 0:
            raise ValueError(f"step_minutes must be positive, got {step_minutes}")

        if not self.policy.is_allowed_day(date):
            return []

        day_interviews = self._active_on(date, interviews)
        available: List[ClockTime] = []

        for start_minutes in range(self.policy.opening_minutes, self.policy.closing_minutes, step_minutes):
            if not self.validator.fits_window(start_minutes, duration_minutes):
                continue

            start = ClockTime.from_minutes(start_minutes)
            if self.find_conflict(date, start, duration_minutes, day_interviews) is None:
                available.append(start)

        return available

    def has_available_times(
        self,
        date: Date,
        interviews: Iterable[ScheduledInterview],
        duration_minutes: int = 30,
    ) -> bool:
        """Check if at least one start time is free on the given day."""
        return bool(self.find_available_times(date, interviews, duration_minutes=duration_minutes))

    @staticmethod
    def _active_on(date: Date, interviews: Iterable[ScheduledInterview]) -> List[ScheduledInterview]:
        return [
            interview for interview in interviews
            if interview.date == date and interview.occupies_calendar
        ]
