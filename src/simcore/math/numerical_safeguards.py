"""
Numerical Safeguards — Float Primitives

Модуль обеспечивает детерминированное поведение float-операций для
value-типов simcore:
- Деление по правилам IEEE-754 (±inf / nan вместо ZeroDivisionError)
- Округление до ближайшего целого (ties-to-even) для перевода в наносекунды
- Epsilon-сравнения float с учётом машинной точности
- Валидация диапазонов с понятными сообщениями об ошибках

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не бросает исключение (результат по IEEE-754)
2. Округление всегда к ближайшему, никогда не truncation
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float с семантикой IEEE-754.

    Python бросает ZeroDivisionError при делении на 0.0, тогда как
    IEEE-754 определяет результат:
    - x / ±0 → ±inf (знак = произведение знаков, включая знаковый ноль)
    - 0 / 0 → nan
    - nan / 0 → nan

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator по правилам IEEE-754

    Examples:
        >>> ieee_divide(1.0, 2.0)
        0.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_even_to_int(value: float) -> int:
    """
    Округление float до ближайшего целого (ties-to-even).

    Используется для перевода секунд в наносекунды: результат всегда
    ближайший, а не усечённый, что делает арифметику времени детерминированной.

    Args:
        value: Исходное значение

    Returns:
        Ближайшее целое (при равном удалении чётное)

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> round_half_even_to_int(1.4)
        1
        >>> round_half_even_to_int(2.5)
        2
        >>> round_half_even_to_int(-0.6)
        -1
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot round non-finite value to int: {value}")

    return round(value)


# =============================================================================
# NaN/Inf ПРОВЕРКИ И EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
    max_exclusive: bool = False,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional, включительно)
        max_value: Максимальное допустимое значение (optional)
        max_exclusive: Если True, max_value не входит в диапазон

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None:
        if max_exclusive and value >= max_value:
            raise ValueError(f"{name} must be < {max_value}, got {value}")
        if not max_exclusive and value > max_value:
            raise ValueError(f"{name} must be <= {max_value}, got {value}")
