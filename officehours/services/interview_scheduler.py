"""
Application services for booking interviews.

The service validates a booking request against office hours, checks it
against the interviews already on the calendar via a repository adapter, and
stores it. Depending on a protocol rather than a concrete repository keeps the
CLI thin and lets tests plug in a stub.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Literal, Optional, Protocol, Tuple, Union

from pendulum import Date
from pydantic import BaseModel, Field

from ..domain.availability import AvailabilityCalculator
from ..domain.models import DEFAULT_INTERVIEW_MINUTES, ClockTime, ScheduledInterview
from ..domain.office_hours_validator import OfficeHoursValidator
from ..domain.time_parsing import parse_calendar_date, parse_clock_time

logger = logging.getLogger(__name__)


SCHEDULED_MESSAGE = "Interview scheduled successfully"
RESCHEDULED_MESSAGE = "Interview rescheduled successfully"
CANCELLED_MESSAGE = "Interview cancelled successfully"
COMPLETED_MESSAGE = "Interview marked as completed"
NOT_FOUND_MESSAGE = "Interview not found"
PAST_DATE_MESSAGE = "Interview date must be after today"

MAX_CANCELLATION_REASON_LENGTH = 500


class InterviewRepositoryProtocol(Protocol):
    """Protocol describing the interview storage needed by the service."""

    async def get_interviews(self, date: Date) -> List[ScheduledInterview]:
        """Return the interviews booked on the given date."""

    async def get_interview(self, interview_id: int) -> Optional[ScheduledInterview]:
        """Return the interview with the given id, or None."""

    async def add_interview(self, interview: ScheduledInterview) -> ScheduledInterview:
        """Store an interview and return it with its assigned id."""

    async def update_interview(self, interview: ScheduledInterview) -> ScheduledInterview:
        """Replace the stored interview carrying the same id."""


class ScheduleInterviewRequest(BaseModel):
    """Booking form input for a new interview."""
    application_id: int
    candidate_name: str = ""
    interview_type: Literal["hr", "technical", "behavioral", "panel"] = "hr"
    interview_date: str
    interview_time: str
    duration_minutes: int = DEFAULT_INTERVIEW_MINUTES
    interviewer: str = ""
    location: str = Field(min_length=1, max_length=255)
    notes: Optional[str] = None


@dataclass
class SchedulingResult:
    """
    Outcome of a booking attempt.

    Failures carry field errors keyed by form field, e.g. {"time": "..."}.
    """
    success: bool
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    interview: Optional[ScheduledInterview] = None

    @classmethod
    def failed(cls, field_name: str, message: str) -> "SchedulingResult":
        return cls(success=False, message=message, errors={field_name: message})


class InterviewSchedulingService:
    """
    Orchestrates office hours validation, conflict checks and storage.
    """

    def __init__(
        self,
        repository: InterviewRepositoryProtocol,
        validator: OfficeHoursValidator | None = None,
        today: Date | None = None,
    ) -> None:
        self._repository = repository
        self._validator = validator or OfficeHoursValidator()
        self._availability = AvailabilityCalculator(self._validator.policy)
        # When set, bookings must fall after this date
        self._today = today

    async def schedule(self, request: ScheduleInterviewRequest) -> SchedulingResult:
        """
        Validate and book an interview.

        Office hours rejections and conflicts are reported against the
        "time" field, mirroring the booking form.
        """
        checked = await self._check_slot(
            request.interview_date,
            request.interview_time,
            request.duration_minutes,
        )
        if isinstance(checked, SchedulingResult):
            logger.info(
                "Rejected interview for application %s on %s at %s: %s",
                request.application_id,
                request.interview_date,
                request.interview_time,
                checked.message,
            )
            return checked

        date, start = checked
        interview = await self._repository.add_interview(
            ScheduledInterview(
                application_id=request.application_id,
                date=date,
                start=start,
                duration_minutes=request.duration_minutes,
                candidate_name=request.candidate_name,
                interview_type=request.interview_type,
                interviewer=request.interviewer,
                location=request.location,
                notes=request.notes,
            )
        )
        logger.info(
            "Scheduled interview %s for application %s on %s at %s",
            interview.interview_id,
            interview.application_id,
            interview.date.to_date_string(),
            interview.start,
        )
        return SchedulingResult(success=True, message=SCHEDULED_MESSAGE, interview=interview)

    async def reschedule(
        self,
        interview_id: int,
        interview_date: str,
        interview_time: str,
        duration_minutes: int | None = None,
    ) -> SchedulingResult:
        """
        Move a scheduled interview to a new slot.

        The new slot goes through the same checks as a fresh booking, except
        that the interview does not conflict with its own current slot. The
        duration is kept unless a new one is given.
        """
        interview = await self._repository.get_interview(interview_id)
        if interview is None:
            return SchedulingResult.failed("interview", NOT_FOUND_MESSAGE)
        if interview.status != "scheduled":
            return SchedulingResult.failed("status", f"Cannot reschedule a {interview.status} interview")

        minutes = interview.duration_minutes if duration_minutes is None else duration_minutes
        checked = await self._check_slot(interview_date, interview_time, minutes, exclude_interview_id=interview_id)
        if isinstance(checked, SchedulingResult):
            logger.info("Rejected rescheduling of interview %s: %s", interview_id, checked.message)
            return checked

        date, start = checked
        moved = await self._repository.update_interview(
            replace(interview, date=date, start=start, duration_minutes=minutes)
        )
        logger.info(
            "Rescheduled interview %s to %s at %s",
            interview_id,
            moved.date.to_date_string(),
            moved.start,
        )
        return SchedulingResult(success=True, message=RESCHEDULED_MESSAGE, interview=moved)

    async def cancel(self, interview_id: int, reason: str) -> SchedulingResult:
        """Cancel a scheduled interview, freeing its slot. A reason is required."""
        reason = (reason or "").strip()
        if not reason:
            return SchedulingResult.failed("cancellation_reason", "A cancellation reason is required")
        if len(reason) > MAX_CANCELLATION_REASON_LENGTH:
            return SchedulingResult.failed(
                "cancellation_reason",
                f"Cancellation reason must be at most {MAX_CANCELLATION_REASON_LENGTH} characters",
            )

        interview = await self._repository.get_interview(interview_id)
        if interview is None:
            return SchedulingResult.failed("interview", NOT_FOUND_MESSAGE)
        if interview.status != "scheduled":
            return SchedulingResult.failed("status", f"Cannot cancel a {interview.status} interview")

        cancelled = await self._repository.update_interview(
            replace(interview, status="cancelled", cancellation_reason=reason)
        )
        logger.info("Cancelled interview %s: %s", interview_id, reason)
        return SchedulingResult(success=True, message=CANCELLED_MESSAGE, interview=cancelled)

    async def mark_completed(self, interview_id: int) -> SchedulingResult:
        """Mark a scheduled interview as held."""
        interview = await self._repository.get_interview(interview_id)
        if interview is None:
            return SchedulingResult.failed("interview", NOT_FOUND_MESSAGE)
        if interview.status != "scheduled":
            return SchedulingResult.failed("status", f"Cannot complete a {interview.status} interview")

        completed = await self._repository.update_interview(replace(interview, status="completed"))
        logger.info("Marked interview %s as completed", interview_id)
        return SchedulingResult(success=True, message=COMPLETED_MESSAGE, interview=completed)

    async def available_times(
        self,
        date: str,
        duration_minutes: int = DEFAULT_INTERVIEW_MINUTES,
        step_minutes: int = 30,
    ) -> List[ClockTime]:
        """Free start times on a date. Unparseable dates have none."""
        calendar_date = parse_calendar_date(date)
        if calendar_date is None:
            logger.debug("Cannot list free times for malformed date %r", date)
            return []

        interviews = await self._repository.get_interviews(calendar_date)
        return self._availability.find_available_times(
            calendar_date,
            interviews,
            duration_minutes=duration_minutes,
            step_minutes=step_minutes,
        )

    async def _check_slot(
        self,
        interview_date: str,
        interview_time: str,
        duration_minutes: int,
        exclude_interview_id: Optional[int] = None,
    ) -> Union[SchedulingResult, Tuple[Date, ClockTime]]:
        """Return the parsed slot, or a failed result naming the rejected field."""
        verdict = self._validator.validate(interview_date, interview_time, duration_minutes)
        if not verdict.is_valid:
            return SchedulingResult.failed("time", verdict.message)

        # The validator has already accepted both values
        date = parse_calendar_date(interview_date)
        start = parse_clock_time(interview_time)

        if self._today is not None and date <= self._today:
            return SchedulingResult.failed("date", PAST_DATE_MESSAGE)

        existing = await self._repository.get_interviews(date)
        conflict = self._availability.find_conflict(
            date,
            start,
            duration_minutes,
            existing,
            exclude_interview_id=exclude_interview_id,
        )
        if conflict is not None:
            return SchedulingResult.failed(
                "time",
                "Time slot conflicts with an existing interview "
                f"({conflict.candidate_name or 'unnamed candidate'} at {conflict.start.format_12h()})",
            )
        return date, start
