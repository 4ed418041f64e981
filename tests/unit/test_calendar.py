"""
Тесты для UtcCalendar и календарных конверсий

Проверяет:
1. Валидацию полей (включая намеренно мягкую проверку дня месяца)
2. Алгоритм Fliegel–Van Flandern (UtcCalendar → Julian Date)
3. Обратную конверсию наносекунд от J2000 в календарь
"""

import math

import pytest

from src.simcore.time.calendar import (
    InvalidCalendarError,
    UtcCalendar,
    calendar_from_ns_since_j2000,
    utc_to_jd,
    validate_utc_calendar,
)

NS_PER_DAY = 86_400 * 1_000_000_000


def make_calendar(**overrides) -> UtcCalendar:
    """2000-01-01 12:00:00 с переопределёнными полями"""
    fields = dict(year=2000, month=1, day=1, hour=12, minute=0, second=0.0)
    fields.update(overrides)
    return UtcCalendar(**fields)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidateUtcCalendar:
    """Тесты для validate_utc_calendar"""

    def test_valid_calendar_passes(self) -> None:
        validate_utc_calendar(make_calendar())
        validate_utc_calendar(make_calendar(month=12, day=31, hour=23, minute=59, second=59.999))

    def test_model_does_not_validate_ranges(self) -> None:
        """Сама модель принимает любые значения, проверяет только конверсия"""
        cal = make_calendar(month=13)
        assert cal.month == 13

    def test_month_out_of_range(self) -> None:
        with pytest.raises(InvalidCalendarError, match="Invalid UTC calendar date"):
            validate_utc_calendar(make_calendar(month=13))

        with pytest.raises(InvalidCalendarError, match="Invalid UTC calendar date"):
            validate_utc_calendar(make_calendar(month=0))

    def test_day_out_of_range(self) -> None:
        with pytest.raises(InvalidCalendarError, match="day must be"):
            validate_utc_calendar(make_calendar(day=0))

        with pytest.raises(InvalidCalendarError, match="day must be"):
            validate_utc_calendar(make_calendar(day=32))

    def test_day_not_checked_against_month_length(self) -> None:
        """31 апреля и 30 февраля принимаются (мягкая проверка дня месяца)"""
        validate_utc_calendar(make_calendar(month=4, day=31))
        validate_utc_calendar(make_calendar(month=2, day=30))

    def test_hour_and_minute_out_of_range(self) -> None:
        with pytest.raises(InvalidCalendarError, match="Invalid UTC calendar time"):
            validate_utc_calendar(make_calendar(hour=24))

        with pytest.raises(InvalidCalendarError, match="Invalid UTC calendar time"):
            validate_utc_calendar(make_calendar(hour=-1))

        with pytest.raises(InvalidCalendarError, match="Invalid UTC calendar time"):
            validate_utc_calendar(make_calendar(minute=60))

    def test_second_upper_bound_exclusive(self) -> None:
        """second = 60.0 отклоняется (leap seconds не моделируются)"""
        with pytest.raises(InvalidCalendarError, match="second must be < 60.0"):
            validate_utc_calendar(make_calendar(second=60.0))

        validate_utc_calendar(make_calendar(second=59.999999))

    def test_negative_and_nan_second_rejected(self) -> None:
        with pytest.raises(InvalidCalendarError):
            validate_utc_calendar(make_calendar(second=-0.001))

        with pytest.raises(InvalidCalendarError):
            validate_utc_calendar(make_calendar(second=math.nan))

    def test_error_is_value_error(self) -> None:
        """InvalidCalendarError: подкласс ValueError, не OverflowError"""
        assert issubclass(InvalidCalendarError, ValueError)
        assert not issubclass(InvalidCalendarError, OverflowError)


# =============================================================================
# UTC → JULIAN DATE
# =============================================================================


class TestUtcToJd:
    """Тесты алгоритма Fliegel–Van Flandern"""

    def test_j2000_epoch(self) -> None:
        """2000-01-01 12:00:00 → ровно 2451545.0"""
        assert utc_to_jd(make_calendar()) == 2451545.0

    def test_midnight_is_half_day_earlier(self) -> None:
        assert utc_to_jd(make_calendar(hour=0)) == 2451544.5

    def test_unix_epoch(self) -> None:
        """1970-01-01 00:00:00 → JD 2440587.5"""
        cal = UtcCalendar(year=1970, month=1, day=1)
        assert utc_to_jd(cal) == 2440587.5

    def test_march_after_leap_february(self) -> None:
        """2000 високосный: 1 марта на 60 дней позже 1 января"""
        jan1 = utc_to_jd(UtcCalendar(year=2000, month=1, day=1))
        mar1 = utc_to_jd(UtcCalendar(year=2000, month=3, day=1))
        assert mar1 - jan1 == 60.0

    def test_century_non_leap_year(self) -> None:
        """1900 не високосный (григорианская поправка B)"""
        feb28 = utc_to_jd(UtcCalendar(year=1900, month=2, day=28))
        mar1 = utc_to_jd(UtcCalendar(year=1900, month=3, day=1))
        assert mar1 - feb28 == 1.0

    def test_known_date(self) -> None:
        """1957-10-04 19:26:24 (Meeus, пример 7.a) → JD 2436116.31"""
        cal = UtcCalendar(year=1957, month=10, day=4, hour=19, minute=26, second=24.0)
        assert utc_to_jd(cal) == pytest.approx(2436116.31, abs=1e-6)

    def test_time_of_day_fraction(self) -> None:
        cal = make_calendar(hour=18, minute=0, second=0.0)
        assert utc_to_jd(cal) == 2451545.25

    def test_invalid_calendar_raises(self) -> None:
        with pytest.raises(InvalidCalendarError):
            utc_to_jd(make_calendar(month=13))

    def test_lenient_day_rolls_forward(self) -> None:
        """31 апреля считается как 1 мая"""
        apr31 = utc_to_jd(UtcCalendar(year=2024, month=4, day=31))
        may1 = utc_to_jd(UtcCalendar(year=2024, month=5, day=1))
        assert apr31 == may1


# =============================================================================
# НАНОСЕКУНДЫ → КАЛЕНДАРЬ
# =============================================================================


class TestCalendarFromNs:
    """Тесты обратной конверсии"""

    def test_epoch(self) -> None:
        cal = calendar_from_ns_since_j2000(0)
        assert cal == make_calendar()

    def test_midnight_before_epoch(self) -> None:
        cal = calendar_from_ns_since_j2000(-NS_PER_DAY // 2)
        assert (cal.year, cal.month, cal.day, cal.hour) == (2000, 1, 1, 0)

    def test_previous_year(self) -> None:
        """Отрицательные значения уходят в 1999 год"""
        cal = calendar_from_ns_since_j2000(-NS_PER_DAY)
        assert (cal.year, cal.month, cal.day, cal.hour) == (1999, 12, 31, 12)

    def test_leap_day(self) -> None:
        """59 суток после J2000 → 29 февраля 2000"""
        cal = calendar_from_ns_since_j2000(59 * NS_PER_DAY)
        assert (cal.year, cal.month, cal.day) == (2000, 2, 29)

    def test_fractional_second(self) -> None:
        cal = calendar_from_ns_since_j2000(1_500_000_000)
        assert cal.second == 1.5
        assert (cal.hour, cal.minute) == (12, 0)

    def test_roundtrip_through_jd(self) -> None:
        """Календарь → JD → наносекунды → календарь (целые секунды)"""
        for original in (
            UtcCalendar(year=2026, month=10, day=19, hour=8, minute=30, second=15.0),
            UtcCalendar(year=1999, month=2, day=28, hour=23, minute=59, second=59.0),
            UtcCalendar(year=2100, month=3, day=1, hour=0, minute=0, second=0.0),
        ):
            jd = utc_to_jd(original)
            ns = round((jd - 2451545.0) * 86400.0) * 1_000_000_000
            assert calendar_from_ns_since_j2000(ns) == original
