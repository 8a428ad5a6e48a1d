"""
Тесты для текстового ввода/вывода InfiniteInt

Проверяет:
1. CharCursor: peek/get/putback, пропуск пробелов, строка и поток
2. Формат вывода (знак, отсутствие ведущих нулей)
3. Разбор: пробелы, '-', ведущие нули, остановка на не-цифре
4. Возврат неиспользованного '-' в источник
5. Round-trip форматирование → разбор
"""

import io

import pytest

from src.core.io import (
    CharCursor,
    UnseekableStreamError,
    format_infinite_int,
    parse_infinite_int,
    read_infinite_int,
    write_infinite_int,
)
from src.core.math import DEFAULT_NATIVE_INT_RANGE, InfiniteInt

# =============================================================================
# ТЕСТЫ КУРСОРА
# =============================================================================


class TestCharCursor:
    """Тесты CharCursor"""

    def test_get_and_peek(self) -> None:
        """peek не извлекает символ"""
        cursor = CharCursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.get() == "a"
        assert cursor.get() == "b"
        assert cursor.get() == ""
        assert cursor.at_end()

    def test_putback_is_lifo(self) -> None:
        """Возвращённые символы читаются первыми, в обратном порядке"""
        cursor = CharCursor("c")
        cursor.putback("b")
        cursor.putback("a")
        assert cursor.remaining() == "abc"

    def test_putback_rejects_multiple_chars(self) -> None:
        """putback принимает ровно один символ"""
        with pytest.raises(ValueError):
            CharCursor("").putback("ab")

    def test_skip_whitespace(self) -> None:
        """Пропуск пробелов, табуляций и переводов строк"""
        cursor = CharCursor(" \t\n x")
        assert cursor.skip_whitespace() == 4
        assert cursor.get() == "x"

    def test_stream_source(self) -> None:
        """Источник — текстовый поток"""
        cursor = CharCursor(io.StringIO("xy"))
        assert cursor.peek() == "x"
        assert cursor.remaining() == "xy"

    def test_consumed_counts_net_of_putback(self) -> None:
        """consumed: извлечённые символы минус возвращённые"""
        cursor = CharCursor("abc")
        cursor.peek()
        assert cursor.consumed == 0
        cursor.get()
        cursor.get()
        assert cursor.consumed == 2
        cursor.putback("b")
        assert cursor.consumed == 1


# =============================================================================
# ТЕСТЫ ВЫВОДА
# =============================================================================


class TestFormat:
    """Тесты format_infinite_int/write_infinite_int"""

    @pytest.mark.parametrize(
        "num, text",
        [
            (0, "0"),
            (5, "5"),
            (-5, "-5"),
            (1000, "1000"),
            (-2147483648, "-2147483648"),
        ],
    )
    def test_format(self, num: int, text: str) -> None:
        """'-' только для отрицательных, без ведущих нулей"""
        assert format_infinite_int(InfiniteInt(num)) == text

    def test_zero_never_has_sign(self) -> None:
        """Ноль после вычитания печатается без знака"""
        assert format_infinite_int(InfiniteInt(-3) - InfiniteInt(-3)) == "0"

    def test_write_to_stream(self) -> None:
        """write_infinite_int пишет в поток и возвращает его"""
        stream = io.StringIO()
        assert write_infinite_int(stream, InfiniteInt(-42)) is stream
        write_infinite_int(stream, InfiniteInt(7))
        assert stream.getvalue() == "-427"


# =============================================================================
# ТЕСТЫ ВВОДА
# =============================================================================


class TestParse:
    """Тесты разбора текста"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("42", 42),
            ("-42", -42),
            ("  -007", -7),
            ("\n\t15", 15),
            ("000", 0),
            ("12abc", 12),
            ("-3-4", -3),
            ("", 0),
            ("   ", 0),
            ("abc", 0),
        ],
    )
    def test_parse(self, text: str, expected: int) -> None:
        """Разбор начала строки"""
        assert parse_infinite_int(text) == InfiniteInt(expected)

    def test_leading_zeros_not_stored(self) -> None:
        """Ведущие нули не сохраняются"""
        value = parse_infinite_int("000120")
        assert value.digits() == (1, 2, 0)

    def test_large_value(self) -> None:
        """Значения за пределами int32"""
        value = parse_infinite_int("-123456789012345678901234567890")
        assert str(value) == "-123456789012345678901234567890"
        assert value.num_digits() == 30

    def test_lone_minus_is_put_back(self) -> None:
        """'-' без цифр: ноль, '-' остаётся в источнике"""
        cursor = CharCursor("-")
        value = read_infinite_int(cursor)
        assert value == InfiniteInt(0)
        assert not value.is_negative
        assert cursor.remaining() == "-"

    def test_minus_followed_by_non_digit(self) -> None:
        """'-x': ноль, '-' и 'x' не извлечены"""
        cursor = CharCursor("  -x")
        assert read_infinite_int(cursor) == InfiniteInt(0)
        assert cursor.remaining() == "-x"

    def test_negative_zero_text(self) -> None:
        """'-0': положительный ноль, '-' возвращается в источник"""
        cursor = CharCursor("-0 rest")
        value = read_infinite_int(cursor)
        assert value == InfiniteInt(0)
        assert not value.is_negative
        assert cursor.remaining() == "- rest"

    def test_terminator_not_consumed(self) -> None:
        """Первый не-цифровой символ не извлекается"""
        cursor = CharCursor("123 456")
        assert read_infinite_int(cursor) == InfiniteInt(123)
        assert cursor.peek() == " "
        assert read_infinite_int(cursor) == InfiniteInt(456)
        assert cursor.at_end()

    def test_non_ascii_digits_stop_scan(self) -> None:
        """Только ASCII цифры '0'-'9'"""
        assert parse_infinite_int("12٣") == InfiniteInt(12)

    def test_read_from_stream(self) -> None:
        """Чтение из текстового потока"""
        assert read_infinite_int(io.StringIO(" -98")) == InfiniteInt(-98)

    def test_stream_terminator_stays_unread(self) -> None:
        """Поток стоит сразу после последней цифры"""
        stream = io.StringIO("12 34")
        assert read_infinite_int(stream) == InfiniteInt(12)
        assert stream.read() == " 34"

    def test_stream_consecutive_reads(self) -> None:
        """Повторное чтение из того же потока"""
        stream = io.StringIO("7\n-8\n")
        assert read_infinite_int(stream) == InfiniteInt(7)
        assert read_infinite_int(stream) == InfiniteInt(-8)
        assert stream.read() == "\n"

    @pytest.mark.parametrize(
        "text, rest",
        [
            ("-x", "-x"),
            ("  -", "-"),
        ],
    )
    def test_stream_minus_put_back(self, text: str, rest: str) -> None:
        """'-' без цифр остаётся в потоке"""
        stream = io.StringIO(text)
        value = read_infinite_int(stream)
        assert value == InfiniteInt(0)
        assert not value.is_negative
        assert stream.read() == rest

    def test_stream_negative_zero_rewinds_net_consumed(self) -> None:
        """'-0' в потоке: откат на число чистых извлечений, '0' остаётся"""
        stream = io.StringIO("-0 rest")
        assert read_infinite_int(stream) == InfiniteInt(0)
        assert stream.read() == "0 rest"

    def test_unseekable_stream_rejected(self) -> None:
        """Поток без seek() → UnseekableStreamError, через CharCursor — можно"""

        class _PipeLike(io.StringIO):
            def seekable(self) -> bool:
                return False

        with pytest.raises(UnseekableStreamError, match="CharCursor"):
            read_infinite_int(_PipeLike("5"))

        cursor = CharCursor(_PipeLike("5 6"))
        assert read_infinite_int(cursor) == InfiniteInt(5)
        assert cursor.remaining() == " 6"


class TestRoundTrip:
    """Форматирование → разбор"""

    @pytest.mark.parametrize(
        "num",
        [
            0,
            1,
            -1,
            987654321,
            -987654321,
            DEFAULT_NATIVE_INT_RANGE.min_value,
            DEFAULT_NATIVE_INT_RANGE.max_value,
        ],
    )
    def test_round_trip(self, num: int) -> None:
        """parse(format(x)) == x"""
        value = InfiniteInt(num)
        assert parse_infinite_int(format_infinite_int(value)) == value
