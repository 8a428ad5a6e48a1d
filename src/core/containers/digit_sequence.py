"""
DigitSequence — двусвязная двусторонняя очередь целых чисел

Контейнер на связанных узлах, хранящий по одному int в узле.
Используется арифметическим слоем (InfiniteInt) для хранения десятичных цифр,
но сам по себе не ограничивает значения диапазоном [0, 9].

Поддерживает:
- push/pop с обоих концов за O(1)
- front/back без извлечения
- двунаправленный обход через DigitIterator (begin/last/end)
- value semantics: copy() и assign() создают полностью независимую цепочку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. _size == количество связанных узлов
2. Цепочка ацикличная и согласованная: node.next.prev is node
3. _head/_tail равны None тогда и только тогда, когда _size == 0
4. Узлом владеет только контейнер: next — владеющая ссылка, prev — weakref
5. Любое структурное изменение увеличивает version; старые итераторы
   становятся недействительными (StaleIteratorError)
"""

from __future__ import annotations

import weakref
from typing import Iterable, Iterator, Optional, TextIO

# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptySequenceError(LookupError):
    """
    Обращение к front/back/pop на пустом контейнере.

    Логическая ошибка вызывающего кода: перед обращением нужно проверить
    num_entries().
    """

    pass


class InvalidPositionError(IndexError):
    """Итератор разыменован или сдвинут с недопустимой позиции (end sentinel)."""

    pass


class StaleIteratorError(InvalidPositionError):
    """Итератор использован после структурного изменения своего контейнера."""

    pass


# =============================================================================
# NODE
# =============================================================================


class _Node:
    """Узел цепочки. next владеет следующим узлом, prev — слабая ссылка."""

    __slots__ = ("value", "next", "_prev", "__weakref__")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Optional[_Node] = None
        self._prev: Optional[weakref.ReferenceType[_Node]] = None

    @property
    def prev(self) -> Optional[_Node]:
        if self._prev is None:
            return None
        return self._prev()

    @prev.setter
    def prev(self, node: Optional[_Node]) -> None:
        self._prev = weakref.ref(node) if node is not None else None


# =============================================================================
# DIGIT SEQUENCE
# =============================================================================


class DigitSequence:
    """
    Двусвязная двусторонняя очередь целых чисел.

    Examples:
        >>> seq = DigitSequence()
        >>> seq.push_front(1)
        >>> seq.push_front(2)
        >>> str(seq)
        '2 1 '
    """

    __slots__ = ("_head", "_tail", "_size", "_version")

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        """
        Args:
            values: Начальные значения (добавляются в конец по порядку)
        """
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        self._version = 0

        if values is not None:
            for value in values:
                self.push_back(value)

    # -------------------------------------------------------------------------
    # Добавление
    # -------------------------------------------------------------------------

    def push_front(self, value: int) -> None:
        """Добавить значение в начало очереди."""
        node = _Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1
        self._version += 1

    def push_back(self, value: int) -> None:
        """Добавить значение в конец очереди."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1
        self._version += 1

    # -------------------------------------------------------------------------
    # Доступ и удаление
    # -------------------------------------------------------------------------

    def front(self) -> int:
        """
        Первое значение очереди.

        Raises:
            EmptySequenceError: Если очередь пуста
        """
        if self._head is None:
            raise EmptySequenceError("front() called on an empty DigitSequence")
        return self._head.value

    def back(self) -> int:
        """
        Последнее значение очереди.

        Raises:
            EmptySequenceError: Если очередь пуста
        """
        if self._tail is None:
            raise EmptySequenceError("back() called on an empty DigitSequence")
        return self._tail.value

    def pop_front(self) -> None:
        """
        Удалить первое значение.

        Raises:
            EmptySequenceError: Если очередь пуста
        """
        if self._head is None:
            raise EmptySequenceError("pop_front() called on an empty DigitSequence")

        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        removed.next = None
        self._size -= 1
        self._version += 1

    def pop_back(self) -> None:
        """
        Удалить последнее значение.

        Raises:
            EmptySequenceError: Если очередь пуста
        """
        if self._tail is None:
            raise EmptySequenceError("pop_back() called on an empty DigitSequence")

        removed = self._tail
        self._tail = removed.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        removed.prev = None
        self._size -= 1
        self._version += 1

    def num_entries(self) -> int:
        """Количество элементов, O(1)."""
        return self._size

    def clear(self) -> None:
        """
        Удалить все элементы.

        Каждый узел отвязывается от соседей, чтобы ни один фрагмент цепочки
        не оставался достижимым. Для пустой очереди — no-op.
        """
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            node.prev = None
            node = following

        self._head = None
        self._tail = None
        if self._size:
            self._version += 1
        self._size = 0

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def copy(self) -> DigitSequence:
        """Глубокая копия: новая цепочка без общих узлов."""
        duplicate = DigitSequence()
        duplicate._copy_from(self)
        return duplicate

    def assign(self, other: DigitSequence) -> DigitSequence:
        """
        Присваивание копированием.

        Присваивание самому себе ничего не меняет. Иначе текущие узлы
        освобождаются, затем копируются узлы other. Если копирование
        прервано исключением, очередь остаётся пустой и исключение
        пробрасывается дальше.

        Returns:
            self
        """
        if other is self:
            return self

        self.clear()
        try:
            self._copy_from(other)
        except BaseException:
            self.clear()
            raise
        return self

    def _copy_from(self, other: DigitSequence) -> None:
        node = other._head
        while node is not None:
            self.push_back(node.value)
            node = node.next

    def __copy__(self) -> DigitSequence:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> DigitSequence:
        duplicate = self.copy()
        memo[id(self)] = duplicate
        return duplicate

    # -------------------------------------------------------------------------
    # Итераторы
    # -------------------------------------------------------------------------

    @property
    def version(self) -> int:
        """Счётчик структурных изменений (push/pop/clear/assign)."""
        return self._version

    def begin(self) -> DigitIterator:
        """Итератор на первый элемент (или end() для пустой очереди)."""
        return DigitIterator(self, self._head)

    def last(self) -> DigitIterator:
        """Итератор на последний элемент (или end() для пустой очереди)."""
        return DigitIterator(self, self._tail)

    def end(self) -> DigitIterator:
        """Итератор-sentinel, не ссылающийся ни на один элемент."""
        return DigitIterator(self, None)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    # -------------------------------------------------------------------------
    # Печать
    # -------------------------------------------------------------------------

    def format_entries(self) -> str:
        """Элементы от начала к концу, после каждого — один пробел."""
        return "".join(f"{value} " for value in self)

    def write_to(self, stream: TextIO) -> TextIO:
        """Записать format_entries() в текстовый поток и вернуть поток."""
        stream.write(self.format_entries())
        return stream

    def __str__(self) -> str:
        return self.format_entries()

    def __repr__(self) -> str:
        return f"DigitSequence([{', '.join(str(value) for value in self)}])"


# =============================================================================
# ITERATOR
# =============================================================================


class DigitIterator:
    """
    Двунаправленный итератор DigitSequence.

    Пара (контейнер, узел). Узел None означает позицию end: "за концом"
    с любой стороны. Итератор не владеет узлами.

    retreat() из end на непустом контейнере переходит на последний элемент,
    поэтому обход last() → end() и begin() → end() симметричен.
    """

    __slots__ = ("_container", "_node", "_version")

    def __init__(self, container: DigitSequence, node: Optional[_Node]) -> None:
        self._container = container
        self._node = node
        self._version = container.version

    def _check_valid(self) -> None:
        if self._version != self._container.version:
            raise StaleIteratorError(
                "DigitIterator used after its DigitSequence was modified"
            )

    @property
    def container(self) -> DigitSequence:
        return self._container

    @property
    def is_end(self) -> bool:
        return self._node is None

    @property
    def value(self) -> int:
        """
        Значение в текущей позиции.

        Raises:
            InvalidPositionError: Если итератор в позиции end
        """
        self._check_valid()
        if self._node is None:
            raise InvalidPositionError("Cannot dereference an end DigitIterator")
        return self._node.value

    @value.setter
    def value(self, new_value: int) -> None:
        self._check_valid()
        if self._node is None:
            raise InvalidPositionError("Cannot dereference an end DigitIterator")
        self._node.value = new_value

    def advance(self) -> DigitIterator:
        """
        Prefix increment: перейти к следующему элементу.

        После последнего элемента итератор переходит в позицию end.

        Raises:
            InvalidPositionError: Если итератор уже в позиции end
        """
        self._check_valid()
        if self._node is None:
            raise InvalidPositionError("Cannot advance a DigitIterator past the end")
        self._node = self._node.next
        return self

    def retreat(self) -> DigitIterator:
        """
        Prefix decrement: перейти к предыдущему элементу.

        Перед первым элементом итератор переходит в позицию end.
        Из позиции end переходит на последний элемент непустого контейнера.

        Raises:
            InvalidPositionError: Если контейнер пуст и итератор в позиции end
        """
        self._check_valid()
        if self._node is None:
            tail = self._container.last()._node
            if tail is None:
                raise InvalidPositionError(
                    "Cannot retreat a DigitIterator over an empty DigitSequence"
                )
            self._node = tail
        else:
            self._node = self._node.prev
        return self

    def post_advance(self) -> DigitIterator:
        """Postfix increment: сдвиг вперёд, возвращает копию позиции до сдвига."""
        previous = self.copy()
        self.advance()
        return previous

    def post_retreat(self) -> DigitIterator:
        """Postfix decrement: сдвиг назад, возвращает копию позиции до сдвига."""
        previous = self.copy()
        self.retreat()
        return previous

    def copy(self) -> DigitIterator:
        duplicate = DigitIterator(self._container, self._node)
        duplicate._version = self._version
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitIterator):
            return NotImplemented
        return self._container is other._container and self._node is other._node

    def __hash__(self) -> int:
        return hash((id(self._container), id(self._node)))

    def __repr__(self) -> str:
        position = "end" if self._node is None else repr(self._node.value)
        return f"DigitIterator(at={position})"
