"""
Parsing of booking form dates and times.

Both parsers return None instead of raising so that callers can turn a parse
failure into a specific rejection message.
"""

import re
from typing import Optional

import pendulum
from pendulum import Date

from .models import ClockTime


DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)

# H:MM or HH:MM, optionally followed by whitespace and AM/PM
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?:\s*([AaPp][Mm]))?$", re.ASCII)


def parse_calendar_date(text: str) -> Optional[Date]:
    """
    Parse a YYYY-MM-DD string into a calendar date.

    Returns None if the string is malformed or names a day that does not
    exist (e.g. 2025-13-40 or 2025-02-30).
    """
    if not isinstance(text, str):
        return None

    match = DATE_PATTERN.match(text.strip())
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return pendulum.date(year, month, day)
    except ValueError:
        return None


def parse_clock_time(text: str) -> Optional[ClockTime]:
    """
    Parse a time string into a 24-hour ClockTime.

    Accepted forms are "9:00", "09:00", "2:00 PM" and "2:00pm". With an AM/PM
    marker the hour must be 1-12: 12 AM is midnight, 12 PM is noon and other
    PM hours get 12 added. Without a marker the hour is already 24-hour.
    """
    if not isinstance(text, str):
        return None

    match = TIME_PATTERN.match(text.strip())
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3)

    if minute > 59:
        return None

    if meridiem:
        if not 1 <= hour <= 12:
            return None
        if meridiem.upper() == "PM" and hour != 12:
            hour += 12
        elif meridiem.upper() == "AM" and hour == 12:
            hour = 0
    elif hour > 23:
        return None

    return ClockTime(hour=hour, minute=minute)
