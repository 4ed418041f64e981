"""
Time — Момент времени в наносекундах от J2000

Абсолютный момент хранится как целое число наносекунд от эпохи J2000
(2000-01-01 12:00:00, JD 2451545.0) на непрерывной UTC-like шкале без
leap seconds. Целочисленное хранение исключает накопление float-дрейфа
при многократном сложении.

Конверсии:
- секунды от J2000 ↔ наносекунды (округление к ближайшему)
- Julian Date / Modified Julian Date
- григорианский календарь (UtcCalendar)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ns_since_j2000 всегда в диапазоне signed int64
2. Выход за int64 → TimeOverflowError (без clamp, без частичного объекта)
3. Невалидный календарь → InvalidCalendarError (отдельно от overflow)
4. Полный порядок по ns_since_j2000

ФОРМУЛЫ:
    ns = round(seconds × 1e9)
    seconds = (JD − 2451545.0) × 86400
    JD = 2451545.0 + seconds / 86400
    MJD = JD − 2400000.5
"""

import logging
from typing import Final

from pydantic import BaseModel, Field

from src.simcore.math.numerical_safeguards import is_valid_float, round_half_even_to_int
from src.simcore.time.calendar import (
    NS_PER_SECOND,
    UtcCalendar,
    calendar_from_ns_since_j2000,
    utc_to_jd,
)
from src.simcore.time.duration import SECONDS_PER_DAY, Duration

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Julian Date эпохи J2000 (2000-01-01 12:00:00)
JD_J2000: Final[float] = 2451545.0

# MJD = JD - MJD_OFFSET (сутки начинаются в полночь)
MJD_OFFSET: Final[float] = 2400000.5

# Диапазон signed int64
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TimeOverflowError(OverflowError):
    """
    Переполнение при переводе в наносекунды: результат вне signed int64.

    Бросается при конструировании или арифметике; Time с усечённым
    значением никогда не создаётся.
    """

    pass


# =============================================================================
# КОНВЕРСИЯ СЕКУНД В НАНОСЕКУНДЫ
# =============================================================================


def _check_int64(ns: int) -> int:
    if ns < INT64_MIN or ns > INT64_MAX:
        logger.debug("Nanosecond value %d outside int64 range", ns)
        raise TimeOverflowError(f"Time overflow: {ns} ns outside signed 64-bit range")
    return ns


def seconds_to_ns(seconds: float) -> int:
    """
    Перевод секунд в наносекунды с округлением к ближайшему.

    Args:
        seconds: Секунды (float)

    Returns:
        round(seconds × 1e9) как int

    Raises:
        TimeOverflowError: Если результат вне signed int64 или seconds NaN/Inf

    Examples:
        >>> seconds_to_ns(1.5)
        1500000000
        >>> seconds_to_ns(1e-10)
        0
    """
    ns = seconds * 1e9

    if not is_valid_float(ns):
        logger.debug("Cannot convert non-finite seconds %r to ns", seconds)
        raise TimeOverflowError(
            f"Time overflow converting seconds to nanoseconds: {seconds} is not finite"
        )

    return _check_int64(round_half_even_to_int(ns))


# =============================================================================
# TIME MODEL
# =============================================================================


class Time(BaseModel):
    """
    Момент времени: наносекунды от J2000.

    Immutable модель (frozen=True). Time() соответствует эпохе J2000.
    Создавайте экземпляры через from_* конструкторы: они проверяют
    переполнение и бросают TimeOverflowError.
    """

    ns_since_j2000: int = Field(
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Наносекунды от J2000 (signed int64)",
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_seconds_since_j2000(cls, sec: float) -> "Time":
        return cls(ns_since_j2000=seconds_to_ns(sec))

    @classmethod
    def from_ns_since_j2000(cls, ns: int) -> "Time":
        return cls(ns_since_j2000=_check_int64(ns))

    @classmethod
    def from_julian_date(cls, jd: float) -> "Time":
        """
        Конструктор из Julian Date.

        seconds = (jd − 2451545.0) × 86400, далее как from_seconds_since_j2000.

        Raises:
            TimeOverflowError: Если момент не помещается в int64 наносекунд
        """
        days = jd - JD_J2000
        return cls.from_seconds_since_j2000(days * SECONDS_PER_DAY)

    @classmethod
    def from_modified_julian_date(cls, mjd: float) -> "Time":
        return cls.from_julian_date(mjd + MJD_OFFSET)

    @classmethod
    def from_utc_calendar(cls, utc: UtcCalendar) -> "Time":
        """
        Конструктор из календарной даты (UTC-like, без leap seconds).

        Raises:
            InvalidCalendarError: Если поля календаря вне диапазонов
            TimeOverflowError: Если момент не помещается в int64 наносекунд
        """
        return cls.from_julian_date(utc_to_jd(utc))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def seconds_since_j2000(self) -> float:
        return float(self.ns_since_j2000) * 1e-9

    def julian_date(self) -> float:
        return JD_J2000 + self.seconds_since_j2000() / SECONDS_PER_DAY

    def modified_julian_date(self) -> float:
        return self.julian_date() - MJD_OFFSET

    def to_utc_calendar(self) -> UtcCalendar:
        """Обратная конверсия в календарную запись (точная для целых секунд)."""
        return calendar_from_ns_since_j2000(self.ns_since_j2000)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, d: Duration) -> "Time":
        if not isinstance(d, Duration):
            return NotImplemented
        return Time.from_ns_since_j2000(self.ns_since_j2000 + seconds_to_ns(d.seconds))

    def __radd__(self, d: Duration) -> "Time":
        return self.__add__(d)

    def __sub__(self, other: "Time | Duration") -> "Time | Duration":
        """
        Time − Duration → Time; Time − Time → Duration.

        Разность двух Time считается по точной целочисленной разности
        наносекунд, а не вычитанием float-секунд.
        """
        if isinstance(other, Time):
            diff_ns = self.ns_since_j2000 - other.ns_since_j2000
            return Duration(seconds=float(diff_ns) * 1e-9)
        if isinstance(other, Duration):
            return Time.from_ns_since_j2000(self.ns_since_j2000 - seconds_to_ns(other.seconds))
        return NotImplemented

    # -------------------------------------------------------------------------
    # Сравнения (полный порядок по ns_since_j2000)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.ns_since_j2000 == other.ns_since_j2000

    def __hash__(self) -> int:
        return hash(self.ns_since_j2000)

    def __lt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.ns_since_j2000 < other.ns_since_j2000

    def __le__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.ns_since_j2000 <= other.ns_since_j2000

    def __gt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.ns_since_j2000 > other.ns_since_j2000

    def __ge__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.ns_since_j2000 >= other.ns_since_j2000

    def __str__(self) -> str:
        cal = self.to_utc_calendar()
        whole = int(cal.second)
        frac_ns = self.ns_since_j2000 % NS_PER_SECOND
        return (
            f"{cal.year:04d}-{cal.month:02d}-{cal.day:02d}"
            f"T{cal.hour:02d}:{cal.minute:02d}:{whole:02d}.{frac_ns:09d}"
        )
