"""
InfiniteInt — знаковое целое произвольной точности

Значение хранится как DigitSequence десятичных цифр (старшая первой) плюс
флаг знака. Арифметика — школьные алгоритмы из magnitude; операторы здесь
только выбирают знак и беззнаковую операцию.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Всегда есть хотя бы одна цифра, каждая цифра в [0, 9]
2. Нет ведущих нулей, кроме нуля, который хранится как [0]
3. Ноль никогда не отрицателен
4. Операторы не изменяют операнды, результат — новый экземпляр

ПРАВИЛО ЗНАКА ВЫЧИТАНИЯ (a - b при одинаковых знаках, a + b при разных):
    результат отрицателен, если
        (a отрицательно И |a| >= |b|) ИЛИ (a неотрицательно И |a| < |b|)
    нулевой результат всегда положителен
"""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import Iterable, Optional, Tuple, Union

from src.core.containers.digit_sequence import DigitSequence
from src.core.math.magnitude import (
    DECIMAL_BASE,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
    strip_leading_zeros,
    validate_digits,
)
from src.core.math.native_int import (
    DEFAULT_NATIVE_INT_RANGE,
    NativeIntRange,
    NativeIntRangeError,
)

logger = logging.getLogger(__name__)

IntLike = Union[int, "InfiniteInt"]


def _push_magnitude(digits: DigitSequence, num: int) -> None:
    """Дописать десятичные цифры неотрицательного num в начало digits."""
    # do/while: ноль даёт ровно одну цифру
    while True:
        digits.push_front(num % DECIMAL_BASE)
        num //= DECIMAL_BASE
        if num == 0:
            break


@total_ordering
class InfiniteInt:
    """
    Целое число с произвольным количеством десятичных цифр.

    Examples:
        >>> str(InfiniteInt(123) * InfiniteInt(456))
        '56088'
        >>> InfiniteInt(-5) + InfiniteInt(5) == InfiniteInt(0)
        True
    """

    __slots__ = ("_digits", "_negative")

    def __init__(
        self,
        value: IntLike = 0,
        native: NativeIntRange = DEFAULT_NATIVE_INT_RANGE,
    ) -> None:
        """
        Args:
            value: Нативное целое в диапазоне native или другой InfiniteInt
            native: Диапазон нативного целого (default: int32)

        Raises:
            TypeError: Если value не int/InfiniteInt (bool не принимается)
            NativeIntRangeError: Если int вне диапазона native
        """
        if isinstance(value, InfiniteInt):
            self._digits = value._digits.copy()
            self._negative = value._negative
            return

        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"InfiniteInt() expects int or InfiniteInt, got {type(value).__name__}"
            )

        native.check(value)

        self._digits = DigitSequence()
        num = value

        if num == native.min_value and num <= -DECIMAL_BASE:
            # |min_value| > max_value: отделяем разряд единиц до смены знака.
            # Однозначный минимум (int2..int4) меняет знак без переполнения.
            # Остаток и частное с усечением к нулю.
            remainder = num % -DECIMAL_BASE
            self._digits.push_front(-remainder)
            num = (num - remainder) // DECIMAL_BASE

        if num < 0:
            self._negative = True
            num = -num
        else:
            self._negative = False

        _push_magnitude(self._digits, num)

    @classmethod
    def _from_parts(cls, digits: DigitSequence, negative: bool) -> InfiniteInt:
        """Собрать значение из готовых нормализованных цифр (без копирования)."""
        result = cls.__new__(cls)
        result._digits = digits
        result._negative = negative and not is_zero_magnitude(digits)
        return result

    @classmethod
    def from_digits(cls, digits: Iterable[int], negative: bool = False) -> InfiniteInt:
        """
        Значение из последовательности цифр (старшая первой).

        Ведущие нули отбрасываются; пустая последовательность даёт ноль.

        Raises:
            InvalidDigitError: Если есть значение вне [0, 9]
        """
        digits = tuple(digits)
        validate_digits(digits)
        sequence = strip_leading_zeros(DigitSequence(digits))
        if sequence.num_entries() == 0:
            sequence.push_back(0)
        return cls._from_parts(sequence, negative)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    def num_digits(self) -> int:
        """Количество десятичных цифр (>= 1)."""
        return self._digits.num_entries()

    def digits(self) -> Tuple[int, ...]:
        """Снапшот цифр, старшая первой."""
        return tuple(self._digits)

    def set_negative(self, negative: bool) -> None:
        """
        Установить знак.

        Для нуля флаг игнорируется: ноль никогда не отрицателен.
        """
        self._negative = bool(negative) and not self.is_zero()

    def copy(self) -> InfiniteInt:
        return InfiniteInt(self)

    def __copy__(self) -> InfiniteInt:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> InfiniteInt:
        return self.copy()

    # -------------------------------------------------------------------------
    # Конверсия в нативное целое
    # -------------------------------------------------------------------------

    def to_native(self, native: NativeIntRange = DEFAULT_NATIVE_INT_RANGE) -> int:
        """
        Конверсия в нативное целое с проверкой диапазона.

        Args:
            native: Диапазон нативного целого (default: int32)

        Returns:
            Значение как int

        Raises:
            NativeIntRangeError: Если значение вне [native.min_value, native.max_value]
        """
        if InfiniteInt(native.max_value, native) < self or self < InfiniteInt(
            native.min_value, native
        ):
            logger.debug("InfiniteInt %s outside int%d range", self, native.bits)
            raise NativeIntRangeError(
                f"InfiniteInt {self} outside range representable by int{native.bits}"
            )

        return self._accumulate()

    def _accumulate(self) -> int:
        result = 0
        for digit in self._digits:
            result = result * DECIMAL_BASE + digit
        return -result if self._negative else result

    def __int__(self) -> int:
        return self.to_native()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> Optional[InfiniteInt]:
        if isinstance(other, InfiniteInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            # Операнд-int не ограничен диапазоном native
            digits = DigitSequence()
            _push_magnitude(digits, abs(other))
            return InfiniteInt._from_parts(digits, other < 0)
        return None

    @staticmethod
    def _subtract_signed(lhs: InfiniteInt, rhs: InfiniteInt) -> InfiniteInt:
        """
        Вычитание абсолютных величин с правилом знака (см. docstring модуля).

        При равных абсолютных величинах "большим" считается lhs.
        """
        lhs_is_larger = compare_magnitudes(lhs._digits, rhs._digits) >= 0
        if lhs_is_larger:
            difference = subtract_magnitudes(lhs._digits, rhs._digits)
        else:
            difference = subtract_magnitudes(rhs._digits, lhs._digits)

        negative = (lhs._negative and lhs_is_larger) or (
            not lhs._negative and not lhs_is_larger
        )
        return InfiniteInt._from_parts(difference, negative)

    def __add__(self, other: object) -> InfiniteInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self._negative == rhs._negative:
            return InfiniteInt._from_parts(
                add_magnitudes(self._digits, rhs._digits), self._negative
            )
        return self._subtract_signed(self, rhs)

    def __radd__(self, other: object) -> InfiniteInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> InfiniteInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self._negative != rhs._negative:
            return InfiniteInt._from_parts(
                add_magnitudes(self._digits, rhs._digits), self._negative
            )
        return self._subtract_signed(self, rhs)

    def __rsub__(self, other: object) -> InfiniteInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other: object) -> InfiniteInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        return InfiniteInt._from_parts(
            multiply_magnitudes(self._digits, rhs._digits),
            self._negative != rhs._negative,
        )

    def __rmul__(self, other: object) -> InfiniteInt:
        return self.__mul__(other)

    def __neg__(self) -> InfiniteInt:
        return InfiniteInt._from_parts(self._digits.copy(), not self._negative)

    def __pos__(self) -> InfiniteInt:
        return self.copy()

    def __abs__(self) -> InfiniteInt:
        return InfiniteInt._from_parts(self._digits.copy(), False)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self.num_digits() != rhs.num_digits() or self._negative != rhs._negative:
            return False

        lhs_cur, lhs_end = self._digits.begin(), self._digits.end()
        rhs_cur = rhs._digits.begin()
        while lhs_cur != lhs_end:
            if lhs_cur.value != rhs_cur.value:
                return False
            lhs_cur.advance()
            rhs_cur.advance()
        return True

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        # Разные знаки: отрицательное меньше неотрицательного (включая ноль)
        if self._negative != rhs._negative:
            return self._negative

        # Одинаковый знак: для отрицательных порядок абсолютных величин обратный
        order = compare_magnitudes(self._digits, rhs._digits)
        if self._negative:
            return order > 0
        return order < 0

    def __hash__(self) -> int:
        # Совпадает с hash(int) для равных значений
        return hash(self._accumulate())

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        sign = "-" if self._negative else ""
        return sign + "".join(str(digit) for digit in self._digits)

    def __repr__(self) -> str:
        return f"InfiniteInt('{self}')"
