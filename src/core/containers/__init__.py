"""
Контейнеры.

DigitSequence — двусвязная двусторонняя очередь для цифр InfiniteInt.
"""

from src.core.containers.digit_sequence import (
    DigitIterator,
    DigitSequence,
    EmptySequenceError,
    InvalidPositionError,
    StaleIteratorError,
)

__all__ = [
    "DigitSequence",
    "DigitIterator",
    # Exceptions
    "EmptySequenceError",
    "InvalidPositionError",
    "StaleIteratorError",
]
