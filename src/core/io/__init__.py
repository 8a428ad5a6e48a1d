"""
Text I/O для InfiniteInt.

Курсор по символам с возвратом (putback) и текстовый формат значений.
"""

from src.core.io.cursor import CharCursor
from src.core.io.text_format import (
    UnseekableStreamError,
    format_infinite_int,
    parse_infinite_int,
    read_infinite_int,
    write_infinite_int,
)

__all__ = [
    "CharCursor",
    "UnseekableStreamError",
    "format_infinite_int",
    "parse_infinite_int",
    "read_infinite_int",
    "write_infinite_int",
]
