"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability import AvailabilityCalculator
from .models import (
    ClockTime,
    OfficeHoursPolicy,
    ProposedSlot,
    RejectionReason,
    ScheduledInterview,
    ValidationVerdict,
)
from .office_hours_validator import OfficeHoursValidator

__all__ = [
    "AvailabilityCalculator",
    "ClockTime",
    "OfficeHoursPolicy",
    "OfficeHoursValidator",
    "ProposedSlot",
    "RejectionReason",
    "ScheduledInterview",
    "ValidationVerdict",
]
