"""
Time modules для simcore

Время в наносекундах от J2000, промежутки и календарные конверсии.
"""

# Duration
from src.simcore.time.duration import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Duration,
)

# Calendar
from src.simcore.time.calendar import (
    InvalidCalendarError,
    UtcCalendar,
    calendar_from_ns_since_j2000,
    utc_to_jd,
    validate_utc_calendar,
)

# Time
from src.simcore.time.time import (
    INT64_MAX,
    INT64_MIN,
    JD_J2000,
    MJD_OFFSET,
    Time,
    TimeOverflowError,
    seconds_to_ns,
)

__all__ = [
    # Duration — Constants
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Duration — Types
    "Duration",
    # Calendar — Exceptions
    "InvalidCalendarError",
    # Calendar — Types
    "UtcCalendar",
    # Calendar — Functions
    "calendar_from_ns_since_j2000",
    "utc_to_jd",
    "validate_utc_calendar",
    # Time — Constants
    "INT64_MAX",
    "INT64_MIN",
    "JD_J2000",
    "MJD_OFFSET",
    # Time — Exceptions
    "TimeOverflowError",
    # Time — Types
    "Time",
    # Time — Functions
    "seconds_to_ns",
]
