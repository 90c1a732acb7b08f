"""
In-memory interview repository for running without a database.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pendulum import Date

from ..domain.exceptions import InterviewDataError
from ..domain.models import ScheduledInterview
from ..domain.time_parsing import parse_calendar_date, parse_clock_time

logger = logging.getLogger(__name__)


DEFAULT_DATA_FILE = Path(__file__).parent / "mock_interview_data.json"


class MockInterviewRepository:
    """
    Repository that keeps interviews in a per-instance list.

    Optionally seeded with sample interviews from mock_interview_data.json, so
    conflict checks and free-time listings have realistic data to work with.
    Nothing is written back to disk.
    """

    def __init__(self, data_file: Optional[Path] = DEFAULT_DATA_FILE):
        """
        Initialize the repository.

        Args:
            data_file: JSON file with sample interviews, or None to start empty
        """
        self.interviews: List[ScheduledInterview] = []
        if data_file is not None:
            self._load_interviews(data_file)

    def _load_interviews(self, data_file: Path) -> None:
        """Load sample interviews from a JSON file."""
        if not data_file.exists():
            logger.warning("Mock interview data not found at %s, starting empty", data_file)
            return

        try:
            with open(data_file, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise InterviewDataError(f"Could not read interview data from {data_file}: {exc}") from exc

        if not isinstance(records, list):
            raise InterviewDataError(f"Interview data in {data_file} must be a list of records")

        self.interviews = [self._parse_record(record) for record in records]
        logger.debug("Loaded %d mock interviews from %s", len(self.interviews), data_file)

    @staticmethod
    def _parse_record(record: Dict[str, Any]) -> ScheduledInterview:
        """Convert a JSON record into a ScheduledInterview."""
        if not isinstance(record, dict):
            raise InterviewDataError(f"Interview record must be an object, got {record!r}")

        date = parse_calendar_date(record.get("interview_date", ""))
        start = parse_clock_time(record.get("interview_time", ""))
        if date is None or start is None:
            raise InterviewDataError(f"Invalid date or time in interview record: {record}")

        try:
            return ScheduledInterview(
                interview_id=record.get("id"),
                application_id=int(record["application_id"]),
                date=date,
                start=start,
                duration_minutes=int(record.get("duration_minutes", 30)),
                candidate_name=record.get("candidate_name", ""),
                interview_type=record.get("interview_type", "hr"),
                interviewer=record.get("interviewer", ""),
                location=record.get("location", ""),
                status=record.get("status", "scheduled"),
                notes=record.get("notes"),
                cancellation_reason=record.get("cancellation_reason"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InterviewDataError(f"Invalid interview record {record}: {exc}") from exc

    def _next_id(self) -> int:
        ids = [interview.interview_id for interview in self.interviews if interview.interview_id is not None]
        return max(ids, default=0) + 1

    async def get_interviews(self, date: Date) -> List[ScheduledInterview]:
        """Return all interviews on the given date, in start order."""
        return sorted(
            (interview for interview in self.interviews if interview.date == date),
            key=lambda interview: interview.start.minutes_since_midnight(),
        )

    async def get_interview(self, interview_id: int) -> Optional[ScheduledInterview]:
        for interview in self.interviews:
            if interview.interview_id == interview_id:
                return interview
        return None

    async def add_interview(self, interview: ScheduledInterview) -> ScheduledInterview:
        """Store the interview, assigning the next free id."""
        interview.interview_id = self._next_id()
        self.interviews.append(interview)
        return interview

    async def update_interview(self, interview: ScheduledInterview) -> ScheduledInterview:
        """Replace the stored interview with the same id."""
        for index, stored in enumerate(self.interviews):
            if stored.interview_id == interview.interview_id:
                self.interviews[index] = interview
                return interview
        raise InterviewDataError(f"No interview with id {interview.interview_id} to update")
