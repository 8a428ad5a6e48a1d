"""
NativeIntRange — диапазон "нативного" знакового целого

Python int не ограничен по размеру, поэтому границы нативного целого задаются
явно: знаковое целое фиксированной ширины в битах (по умолчанию 32, как C int).
Используется InfiniteInt при конструировании из int и при обратной конверсии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min_value == -(2 ** (bits - 1)), max_value == 2 ** (bits - 1) - 1
2. abs(min_value) > max_value (асимметрия дополнительного кода)
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Ширина нативного целого по умолчанию (C int)
DEFAULT_NATIVE_INT_BITS: Final[int] = 32

# Допустимые границы ширины
NATIVE_INT_BITS_MIN: Final[int] = 2
NATIVE_INT_BITS_MAX: Final[int] = 512


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NativeIntRangeError(OverflowError):
    """
    Значение не помещается в нативное целое.

    Возникает при конверсии InfiniteInt → int и при создании InfiniteInt
    из int вне диапазона. Исходный InfiniteInt при этом не изменяется.
    """

    pass


# =============================================================================
# RANGE MODEL
# =============================================================================


class NativeIntRange(BaseModel):
    """
    Диапазон знакового целого фиксированной ширины.

    Immutable модель (frozen=True).
    """

    bits: int = Field(
        DEFAULT_NATIVE_INT_BITS,
        ge=NATIVE_INT_BITS_MIN,
        le=NATIVE_INT_BITS_MAX,
        description="Ширина знакового целого в битах",
    )

    model_config = {"frozen": True}

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что value лежит в [min_value, max_value]."""
        return self.min_value <= value <= self.max_value

    def check(self, value: int) -> int:
        """
        Вернуть value, если оно в диапазоне.

        Raises:
            NativeIntRangeError: Если value вне диапазона
        """
        if not self.contains(value):
            raise NativeIntRangeError(
                f"Value {value} outside range representable by int{self.bits} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value


DEFAULT_NATIVE_INT_RANGE: Final[NativeIntRange] = NativeIntRange()
