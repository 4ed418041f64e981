"""
simcore — numeric building blocks for simulation code.

Contains value types independent of any simulation loop or integrator:
3D vectors and J2000-based time with calendar conversion.
"""

from src.simcore.math import Vec3
from src.simcore.time import (
    Duration,
    InvalidCalendarError,
    Time,
    TimeOverflowError,
    UtcCalendar,
)

__all__ = [
    "Vec3",
    "Duration",
    "Time",
    "UtcCalendar",
    "InvalidCalendarError",
    "TimeOverflowError",
]
