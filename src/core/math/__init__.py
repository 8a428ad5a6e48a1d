"""
Core math modules для InfiniteInt

Десятичная арифметика произвольной точности на DigitSequence.
"""

# Native int range
from src.core.math.native_int import (
    DEFAULT_NATIVE_INT_BITS,
    DEFAULT_NATIVE_INT_RANGE,
    NativeIntRange,
    NativeIntRangeError,
)

# Unsigned magnitude core
from src.core.math.magnitude import (
    DECIMAL_BASE,
    InvalidDigitError,
    add_magnitudes,
    compare_magnitudes,
    is_decimal_digit,
    is_zero_magnitude,
    multiply_by_digit,
    multiply_magnitudes,
    strip_leading_zeros,
    subtract_magnitudes,
    validate_digits,
)

# InfiniteInt
from src.core.math.infinite_int import InfiniteInt

__all__ = [
    # Native int range — Constants
    "DEFAULT_NATIVE_INT_BITS",
    "DEFAULT_NATIVE_INT_RANGE",
    # Native int range — Types
    "NativeIntRange",
    "NativeIntRangeError",
    # Magnitude — Constants
    "DECIMAL_BASE",
    # Magnitude — Exceptions
    "InvalidDigitError",
    # Magnitude — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "is_decimal_digit",
    "is_zero_magnitude",
    "multiply_by_digit",
    "multiply_magnitudes",
    "strip_leading_zeros",
    "subtract_magnitudes",
    "validate_digits",
    # InfiniteInt
    "InfiniteInt",
]
