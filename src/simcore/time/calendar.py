"""
UtcCalendar — Григорианский календарь ↔ Julian Date

Календарное представление момента времени (UTC-like шкала, без leap seconds)
и конверсии:
- UtcCalendar → Julian Date (алгоритм Fliegel–Van Flandern)
- наносекунды от J2000 → UtcCalendar (обратная конверсия)

ПОЛИТИКА ВАЛИДАЦИИ:
1. month ∈ [1, 12], day ∈ [1, 31]
2. day НЕ сверяется с длиной месяца (31 апреля принимается)
3. hour ∈ [0, 23], minute ∈ [0, 59]
4. second ∈ [0, 60), 60.0 отклоняется (leap seconds не моделируются)

Сама модель UtcCalendar проверяет только типы полей, диапазоны
проверяются в validate_utc_calendar при конверсии.
"""

import logging
import math
from typing import Final

from pydantic import BaseModel, Field

from src.simcore.math.numerical_safeguards import validate_in_range

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Смещение Julian Date в алгоритме Fliegel–Van Flandern
JD_CALENDAR_OFFSET: Final[float] = 1524.5

NS_PER_SECOND: Final[int] = 1_000_000_000
NS_PER_DAY: Final[int] = 86_400 * NS_PER_SECOND

# J2000 (2000-01-01 12:00) отстоит на полдня от полуночи 2000-01-01
NS_J2000_FROM_MIDNIGHT: Final[int] = 12 * 3600 * NS_PER_SECOND

# Дней от 0000-03-01 до 2000-01-01 (пролептический григорианский календарь)
DAYS_0000_03_01_TO_2000_01_01: Final[int] = 730_425


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidCalendarError(ValueError):
    """
    Невалидное календарное поле (month, day, hour, minute, second).

    Отличается от переполнения (TimeOverflowError): входные данные
    некорректны, а не слишком велики. Частичный объект не создаётся.
    """

    pass


# =============================================================================
# UTC CALENDAR MODEL
# =============================================================================


class UtcCalendar(BaseModel):
    """
    Календарная дата и время (UTC-like, без leap seconds).

    Immutable модель (frozen=True). Диапазоны полей не проверяются
    моделью, только конверсией (validate_utc_calendar).
    """

    year: int = Field(..., description="Год (например, 2026)")
    month: int = Field(..., description="Месяц, 1-12")
    day: int = Field(..., description="День месяца, 1-31")
    hour: int = Field(default=0, description="Час, 0-23")
    minute: int = Field(default=0, description="Минута, 0-59")
    second: float = Field(default=0.0, description="Секунда, [0, 60)")

    model_config = {"frozen": True}  # Immutable

    def day_fraction(self) -> float:
        """Доля суток от полуночи: (hour + (minute + second/60)/60)/24."""
        return (self.hour + (self.minute + self.second / 60.0) / 60.0) / 24.0


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_utc_calendar(utc: UtcCalendar) -> None:
    """
    Проверка диапазонов календарных полей.

    Args:
        utc: Календарная запись

    Raises:
        InvalidCalendarError: Если дата или время суток вне допустимых диапазонов
    """
    try:
        validate_in_range(utc.month, "month", 1, 12)
        validate_in_range(utc.day, "day", 1, 31)
    except ValueError as e:
        logger.debug("Rejected calendar date %s: %s", utc, e)
        raise InvalidCalendarError(f"Invalid UTC calendar date: {e}") from e

    try:
        validate_in_range(utc.hour, "hour", 0, 23)
        validate_in_range(utc.minute, "minute", 0, 59)
        validate_in_range(utc.second, "second", 0.0, 60.0, max_exclusive=True)
    except ValueError as e:
        logger.debug("Rejected calendar time %s: %s", utc, e)
        raise InvalidCalendarError(f"Invalid UTC calendar time: {e}") from e


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def utc_to_jd(utc: UtcCalendar) -> float:
    """
    Конверсия григорианской даты в Julian Date.

    Алгоритм Fliegel–Van Flandern:
        Январь/февраль → месяцы 13/14 предыдущего года
        A = floor(Y / 100)
        B = 2 - A + floor(A / 4)
        JD = floor(365.25·(Y + 4716)) + floor(30.6001·(M + 1))
             + D + day_fraction + B - 1524.5

    floor применяется к double-выражениям, как в формуле.

    Args:
        utc: Календарная запись (валидируется)

    Returns:
        Julian Date (float)

    Raises:
        InvalidCalendarError: Если поля вне допустимых диапазонов

    Examples:
        >>> utc_to_jd(UtcCalendar(year=2000, month=1, day=1, hour=12))
        2451545.0
    """
    validate_utc_calendar(utc)

    year = utc.year
    month = utc.month

    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + a // 4

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + float(utc.day)
        + utc.day_fraction()
        + float(b)
        - JD_CALENDAR_OFFSET
    )


def calendar_from_ns_since_j2000(ns: int) -> UtcCalendar:
    """
    Конверсия наносекунд от J2000 в календарную запись.

    Целочисленная арифметика по дням (пролептический григорианский
    календарь, эры по 400 лет), поэтому целые секунды восстанавливаются
    точно.

    Args:
        ns: Наносекунды от J2000

    Returns:
        UtcCalendar; second содержит дробную часть (наносекунды)

    Examples:
        >>> calendar_from_ns_since_j2000(0)
        UtcCalendar(year=2000, month=1, day=1, hour=12, minute=0, second=0.0)
    """
    days, ns_of_day = divmod(ns + NS_J2000_FROM_MIDNIGHT, NS_PER_DAY)

    # Дни от 0000-03-01: год начинается с марта, февраль последний
    z = days + DAYS_0000_03_01_TO_2000_01_01
    era, day_of_era = divmod(z, 146_097)
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36_524 - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    mp = (5 * day_of_year + 2) // 153

    day = day_of_year - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)

    seconds_of_day, ns_of_second = divmod(ns_of_day, NS_PER_SECOND)
    hour, rem = divmod(seconds_of_day, 3600)
    minute, second = divmod(rem, 60)

    return UtcCalendar(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second + ns_of_second / NS_PER_SECOND,
    )
