"""
CharCursor — посимвольное чтение с lookahead и возвратом символов

Источник — строка или текстовый поток (любой объект с read(1)).
Возвращённые через putback() символы читаются раньше источника, в порядке
LIFO, как у istream::putback.
"""

from typing import List, TextIO, Union


class CharCursor:
    """
    Курсор по символам источника.

    Examples:
        >>> cursor = CharCursor("-x")
        >>> cursor.get()
        '-'
        >>> cursor.putback("-")
        >>> cursor.remaining()
        '-x'
    """

    def __init__(self, source: Union[str, TextIO]) -> None:
        if isinstance(source, str):
            self._text = source
            self._stream = None
        else:
            self._text = ""
            self._stream = source
        self._pos = 0
        self._pushed: List[str] = []
        self._consumed = 0

    def _read_source(self) -> str:
        if self._stream is not None:
            return self._stream.read(1)
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def get(self) -> str:
        """Извлечь следующий символ; пустая строка — конец источника."""
        ch = self._pushed.pop() if self._pushed else self._read_source()
        if ch:
            self._consumed += 1
        return ch

    def peek(self) -> str:
        """Следующий символ без извлечения; пустая строка — конец источника."""
        ch = self.get()
        if ch:
            self.putback(ch)
        return ch

    def putback(self, ch: str) -> None:
        """
        Вернуть символ: он будет прочитан следующим.

        Raises:
            ValueError: Если ch не ровно один символ
        """
        if len(ch) != 1:
            raise ValueError(f"putback() expects a single character, got {ch!r}")
        self._pushed.append(ch)
        self._consumed -= 1

    @property
    def consumed(self) -> int:
        """Сколько символов извлечено за вычетом возвращённых putback()."""
        return self._consumed

    def skip_whitespace(self) -> int:
        """Пропустить пробельные символы, вернуть их количество."""
        skipped = 0
        while self.peek().isspace():
            self.get()
            skipped += 1
        return skipped

    def at_end(self) -> bool:
        return self.peek() == ""

    def remaining(self) -> str:
        """Извлечь и вернуть весь непрочитанный остаток."""
        chunks = []
        while True:
            ch = self.get()
            if not ch:
                break
            chunks.append(ch)
        return "".join(chunks)
