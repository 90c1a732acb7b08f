"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .interview_scheduler import (
    InterviewRepositoryProtocol,
    InterviewSchedulingService,
    ScheduleInterviewRequest,
    SchedulingResult,
)

__all__ = [
    "InterviewRepositoryProtocol",
    "InterviewSchedulingService",
    "ScheduleInterviewRequest",
    "SchedulingResult",
]
