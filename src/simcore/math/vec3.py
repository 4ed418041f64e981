"""
Vec3 — Трёхмерный вектор двойной точности

Value-тип для физических величин (позиция, скорость, ускорение):
- Покомпонентное сложение/вычитание
- Умножение и деление на скаляр (v * s и s * v дают одинаковый результат)
- Compound-присваивания (+=, -=, *=, /=) мутируют объект in place
- Нормы, нормализация, скалярное и векторное произведения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции тотальны на области float (никаких исключений)
2. Деление на нулевой скаляр даёт ±inf / nan по IEEE-754
3. normalized() нулевого вектора возвращает нулевой вектор
4. cross(a, b) == -cross(b, a) (правая тройка)
"""

import math
from dataclasses import dataclass

from src.simcore.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
)
from src.simcore.math.numerical_safeguards import is_close as _is_close


@dataclass
class Vec3:
    """
    3D вектор (x, y, z).

    Изменяемый value-тип: compound-операторы мутируют экземпляр и
    возвращают его же для цепочек. Бинарные операторы всегда создают
    новый экземпляр.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vec3":
        # scalar * vector
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(
            ieee_divide(self.x, scalar),
            ieee_divide(self.y, scalar),
            ieee_divide(self.z, scalar),
        )

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x = ieee_divide(self.x, scalar)
        self.y = ieee_divide(self.y, scalar)
        self.z = ieee_divide(self.z, scalar)
        return self

    # -------------------------------------------------------------------------
    # Нормы
    # -------------------------------------------------------------------------

    def norm(self) -> float:
        """Евклидова длина sqrt(x² + y² + z²)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def norm_squared(self) -> float:
        """Сумма квадратов компонент (без sqrt, для сравнений длин)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> "Vec3":
        """
        Единичный вектор того же направления.

        Returns:
            self / norm() если norm() > 0, иначе нулевой вектор
        """
        n = self.norm()
        return self / n if n > 0.0 else Vec3()

    # -------------------------------------------------------------------------
    # Произведения
    # -------------------------------------------------------------------------

    @staticmethod
    def dot(a: "Vec3", b: "Vec3") -> float:
        """Скалярное произведение a·b."""
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: "Vec3", b: "Vec3") -> "Vec3":
        """
        Векторное произведение a × b (правая тройка).

        Формула:
            (a.y·b.z − a.z·b.y, a.z·b.x − a.x·b.z, a.x·b.y − a.y·b.x)

        Examples:
            >>> Vec3.cross(Vec3(1, 2, 3), Vec3(4, 5, 6))
            Vec3(x=-3, y=6, z=-3)
        """
        return Vec3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    # -------------------------------------------------------------------------
    # Утилиты
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "Vec3",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью."""
        return (
            _is_close(self.x, other.x, rel_tol, abs_tol)
            and _is_close(self.y, other.y, rel_tol, abs_tol)
            and _is_close(self.z, other.z, rel_tol, abs_tol)
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        # Отладочный вывод, не парсируемый формат
        return f"[{self.x:g}, {self.y:g}, {self.z:g}]"
