"""
Magnitude — беззнаковое ядро десятичной арифметики

Все операции работают с абсолютными величинами, записанными как DigitSequence
десятичных цифр (старшая цифра первой). Знак выбирает вызывающий код
(InfiniteInt), здесь его нет.

Обход цифр: от last() (единицы) к end() через DigitIterator.retreat(),
результат строится push_front() по одной цифре.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды никогда не изменяются, результат — всегда новая DigitSequence
2. subtract_magnitudes требует larger >= smaller по абсолютной величине
3. Результат subtract_magnitudes нормализован (без ведущих нулей, >= 1 цифры)
"""

from typing import Final, Iterable

from src.core.containers.digit_sequence import DigitSequence

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

DECIMAL_BASE: Final[int] = 10


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitError(ValueError):
    """Значение не является десятичной цифрой [0, 9]."""

    pass


# =============================================================================
# ВАЛИДАЦИЯ ЦИФР
# =============================================================================


def is_decimal_digit(value: int) -> bool:
    return 0 <= value < DECIMAL_BASE


def validate_digits(digits: Iterable[int]) -> None:
    """
    Проверка, что все значения — десятичные цифры.

    Raises:
        InvalidDigitError: Если найдено значение вне [0, 9]
    """
    for position, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int) or not is_decimal_digit(digit):
            raise InvalidDigitError(
                f"Digit at position {position} must be in [0, {DECIMAL_BASE - 1}], got {digit!r}"
            )


def is_zero_magnitude(digits: DigitSequence) -> bool:
    """Нормализованный ноль — ровно одна цифра 0."""
    return digits.num_entries() == 1 and digits.front() == 0


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_leading_zeros(digits: DigitSequence) -> DigitSequence:
    """
    Удалить ведущие нули на месте, оставив как минимум разряд единиц.

    Returns:
        Та же digits (для цепочек вызовов)
    """
    while digits.num_entries() > 1 and digits.front() == 0:
        digits.pop_front()
    return digits


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(lhs: DigitSequence, rhs: DigitSequence) -> int:
    """
    Сравнение абсолютных величин нормализованных операндов.

    Сначала по количеству цифр, затем поцифрово от старшего разряда.

    Returns:
        -1 если |lhs| < |rhs|, 0 если равны, 1 если |lhs| > |rhs|
    """
    if lhs.num_entries() != rhs.num_entries():
        return -1 if lhs.num_entries() < rhs.num_entries() else 1

    lhs_cur = lhs.begin()
    rhs_cur = rhs.begin()
    lhs_end = lhs.end()
    while lhs_cur != lhs_end:
        if lhs_cur.value != rhs_cur.value:
            return -1 if lhs_cur.value < rhs_cur.value else 1
        lhs_cur.advance()
        rhs_cur.advance()

    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitudes(lhs: DigitSequence, rhs: DigitSequence) -> DigitSequence:
    """
    Сумма абсолютных величин.

    Цифры складываются от единиц к старшим разрядам с переносом; после
    исчерпания короткого операнда перенос проходит по оставшимся цифрам
    длинного. Остаточный перенос даёт дополнительную старшую цифру.

    Examples:
        >>> list(add_magnitudes(DigitSequence([9, 9]), DigitSequence([1])))
        [1, 0, 0]
    """
    result = DigitSequence()
    carry = 0
    lhs_cur, lhs_end = lhs.last(), lhs.end()
    rhs_cur, rhs_end = rhs.last(), rhs.end()

    while lhs_cur != lhs_end and rhs_cur != rhs_end:
        partial_sum = lhs_cur.value + rhs_cur.value + carry
        result.push_front(partial_sum % DECIMAL_BASE)
        carry = partial_sum // DECIMAL_BASE
        lhs_cur.retreat()
        rhs_cur.retreat()

    # Остаток длинного операнда (не более одного из циклов выполнится)
    for cur, end in ((lhs_cur, lhs_end), (rhs_cur, rhs_end)):
        while cur != end:
            partial_sum = cur.value + carry
            result.push_front(partial_sum % DECIMAL_BASE)
            carry = partial_sum // DECIMAL_BASE
            cur.retreat()

    if carry > 0:
        result.push_front(carry)

    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_magnitudes(larger: DigitSequence, smaller: DigitSequence) -> DigitSequence:
    """
    Разность абсолютных величин |larger| - |smaller|.

    Поцифровое вычитание с заёмом от единиц к старшим разрядам:
    diff = large - small - borrow; если diff < 0, то diff += 10, borrow = 1.
    Результат нормализуется.

    Args:
        larger: Уменьшаемое, |larger| >= |smaller|
        smaller: Вычитаемое

    Raises:
        ValueError: Если |larger| < |smaller|

    Examples:
        >>> list(subtract_magnitudes(DigitSequence([1, 0, 0]), DigitSequence([1])))
        [9, 9]
    """
    if compare_magnitudes(larger, smaller) < 0:
        raise ValueError("subtract_magnitudes requires |larger| >= |smaller|")

    result = DigitSequence()
    borrow = 0
    larger_cur, larger_end = larger.last(), larger.end()
    smaller_cur, smaller_end = smaller.last(), smaller.end()

    while larger_cur != larger_end:
        partial_diff = larger_cur.value - borrow
        if smaller_cur != smaller_end:
            partial_diff -= smaller_cur.value
            smaller_cur.retreat()

        if partial_diff < 0:
            partial_diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0

        result.push_front(partial_diff)
        larger_cur.retreat()

    return strip_leading_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_digit(digits: DigitSequence, digit: int, shift: int = 0) -> DigitSequence:
    """
    Частичное произведение: |digits| * digit * 10 ** shift.

    Перенос распространяется внутри произведения, остаточный перенос даёт
    старшую цифру; затем добавляется shift нулей в конец.
    """
    partial = DigitSequence()
    carry = 0
    cur, end = digits.last(), digits.end()

    while cur != end:
        digit_result = cur.value * digit + carry
        partial.push_front(digit_result % DECIMAL_BASE)
        carry = digit_result // DECIMAL_BASE
        cur.retreat()

    if carry > 0:
        partial.push_front(carry)

    for _ in range(shift):
        partial.push_back(0)

    return partial


def multiply_magnitudes(multiplicand: DigitSequence, multiplier: DigitSequence) -> DigitSequence:
    """
    Произведение абсолютных величин (умножение столбиком).

    Если один из операндов ноль — результат [0]. Иначе для каждой цифры
    multiplier (от единиц) строится частичное произведение со сдвигом на
    её разряд и добавляется к накопленной сумме.

    Examples:
        >>> str(multiply_magnitudes(DigitSequence([1, 2, 3]), DigitSequence([4, 5, 6])))
        '5 6 0 8 8 '
    """
    if is_zero_magnitude(multiplicand) or is_zero_magnitude(multiplier):
        return DigitSequence([0])

    total = DigitSequence()
    shift = 0
    cur, end = multiplier.last(), multiplier.end()

    while cur != end:
        partial = multiply_by_digit(multiplicand, cur.value, shift)
        total = add_magnitudes(total, partial)
        shift += 1
        cur.retreat()

    return strip_leading_zeros(total)
