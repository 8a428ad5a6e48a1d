"""
Text Format — текстовый ввод/вывод InfiniteInt

Вывод: '-' только для отрицательных значений, затем цифры от старшей,
без разделителей и ведущих нулей ("0" для нуля).

Ввод (read_infinite_int):
1. Пропуск ведущих пробельных символов
2. Необязательный '-' (извлекается предварительно)
3. Ведущие '0' извлекаются и не сохраняются
4. Последовательные цифры '0'-'9' сохраняются в порядке чтения;
   первый не-цифровой символ не извлекается
5. Нет ни одной сохранённой цифры → ноль; прочитанный '-' возвращается
   в источник (putback) и остаётся неизвлечённым

Seekable текстовый поток после чтения стоит сразу после последней
извлечённой цифры; непрочитанный lookahead и возвращённый '-' остаются в нём.

Examples:
    >>> parse_infinite_int("  -007")
    InfiniteInt('-7')
    >>> format_infinite_int(InfiniteInt(-120))
    '-120'
"""

import logging
from typing import TextIO, Union

from src.core.containers.digit_sequence import DigitSequence
from src.core.io.cursor import CharCursor
from src.core.math.infinite_int import InfiniteInt

logger = logging.getLogger(__name__)

_DIGIT_CHARS = "0123456789"


# =============================================================================
# ВЫВОД
# =============================================================================


def format_infinite_int(value: InfiniteInt) -> str:
    """Текстовое представление значения."""
    return str(value)


def write_infinite_int(stream: TextIO, value: InfiniteInt) -> TextIO:
    """Записать значение в текстовый поток и вернуть поток."""
    stream.write(format_infinite_int(value))
    return stream


# =============================================================================
# ВВОД
# =============================================================================


class UnseekableStreamError(ValueError):
    """Поток без seek(): непрочитанные символы нельзя вернуть в источник."""

    pass


def _read_from_cursor(cursor: CharCursor) -> InfiniteInt:
    digits = DigitSequence()
    negative = False

    cursor.skip_whitespace()

    if cursor.peek() == "-":
        negative = True
        cursor.get()

    while cursor.peek() == "0":
        cursor.get()

    while True:
        ch = cursor.peek()
        if not ch or ch not in _DIGIT_CHARS:
            break
        digits.push_back(ord(cursor.get()) - ord("0"))

    if digits.num_entries() == 0:
        digits.push_back(0)
        if negative:
            logger.debug("No digits after '-', putting the sign back")
            cursor.putback("-")
            negative = False

    return InfiniteInt.from_digits(digits, negative)


def read_infinite_int(source: Union[CharCursor, str, TextIO]) -> InfiniteInt:
    """
    Прочитать InfiniteInt из курсора или текстового потока.

    Args:
        source: CharCursor (остаётся сразу после последней цифры), строка,
            или seekable текстовый поток. Поток после чтения стоит сразу
            после последней цифры: терминатор и возвращённый '-' остаются
            в потоке.

    Returns:
        Прочитанное значение; ноль, если цифр нет

    Raises:
        UnseekableStreamError: Поток не поддерживает seek(); такой поток
            нужно обернуть в CharCursor и читать через него
    """
    if isinstance(source, CharCursor):
        return _read_from_cursor(source)
    if isinstance(source, str):
        return _read_from_cursor(CharCursor(source))

    if not source.seekable():
        raise UnseekableStreamError(
            "read_infinite_int() needs a seekable stream; wrap the stream in a CharCursor"
        )

    start = source.tell()
    cursor = CharCursor(source)
    value = _read_from_cursor(cursor)
    # Lookahead уже извлечён из потока: перечитываем ровно consumed символов.
    source.seek(start)
    source.read(cursor.consumed)
    return value


def parse_infinite_int(text: str) -> InfiniteInt:
    """Прочитать InfiniteInt из начала строки; остаток строки игнорируется."""
    return read_infinite_int(CharCursor(text))
