"""
Domain-specific exception hierarchy for the office hours application.

Slot validation never raises; these cover configuration and data problems.
"""


class OfficeHoursError(Exception):
    """Base class for all application-level errors."""


class ConfigurationError(OfficeHoursError):
    """Raised when the configuration file is missing or cannot be parsed."""


class InterviewDataError(OfficeHoursError):
    """Raised when stored interview data cannot be read or parsed."""
