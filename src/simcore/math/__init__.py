"""
Core math modules для simcore

Математические примитивы с детерминированным поведением float.
"""

# Numerical Safeguards
from src.simcore.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE division / rounding
    ieee_divide,
    round_half_even_to_int,
    # Comparisons
    is_close,
    is_valid_float,
    # Validation
    validate_in_range,
)

# Vec3
from src.simcore.math.vec3 import Vec3

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE division / rounding
    "ieee_divide",
    "round_half_even_to_int",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_in_range",
    # Vec3
    "Vec3",
]
