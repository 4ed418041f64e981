"""
Duration — Промежуток времени в секундах

Immutable Pydantic модель для знакового промежутка времени.
Не привязана к эпохе (в отличие от Time), валидации значения нет:
допустимы отрицательные, нулевые и очень большие значения.
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# КОНСТАНТЫ ЕДИНИЦ
# =============================================================================

SECONDS_PER_MINUTE: Final[float] = 60.0
SECONDS_PER_HOUR: Final[float] = 3600.0
SECONDS_PER_DAY: Final[float] = 86400.0


# =============================================================================
# DURATION MODEL
# =============================================================================


class Duration(BaseModel):
    """
    Знаковый промежуток времени (секунды, float).

    Immutable модель (frozen=True). Арифметика создаёт новые экземпляры.
    """

    seconds: float = Field(default=0.0, description="Длительность в секундах (знаковая)")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Именованные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_seconds(cls, s: float) -> "Duration":
        return cls(seconds=s)

    @classmethod
    def from_minutes(cls, m: float) -> "Duration":
        return cls(seconds=SECONDS_PER_MINUTE * m)

    @classmethod
    def from_hours(cls, h: float) -> "Duration":
        return cls(seconds=SECONDS_PER_HOUR * h)

    @classmethod
    def from_days(cls, d: float) -> "Duration":
        return cls(seconds=SECONDS_PER_DAY * d)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @property
    def minutes(self) -> float:
        return self.seconds / SECONDS_PER_MINUTE

    @property
    def hours(self) -> float:
        return self.seconds / SECONDS_PER_HOUR

    @property
    def days(self) -> float:
        return self.seconds / SECONDS_PER_DAY

    # -------------------------------------------------------------------------
    # Арифметика промежутков
    # -------------------------------------------------------------------------

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(seconds=self.seconds + other.seconds)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(seconds=self.seconds - other.seconds)

    def __neg__(self) -> "Duration":
        return Duration(seconds=-self.seconds)

    def __mul__(self, factor: float) -> "Duration":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Duration(seconds=self.seconds * factor)

    def __rmul__(self, factor: float) -> "Duration":
        return self.__mul__(factor)

    # -------------------------------------------------------------------------
    # Сравнения (по seconds)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds == other.seconds

    def __hash__(self) -> int:
        return hash(self.seconds)

    def __lt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds < other.seconds

    def __le__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds <= other.seconds

    def __gt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds > other.seconds

    def __ge__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds >= other.seconds
