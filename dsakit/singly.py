"""A singly linked list with insertion and deletion at either end or at a position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.doubly import _LinkedSequence, _Node


class SinglyLinkedList(_LinkedSequence):
    """A list of nodes, each linked to the one after it.

    The list is built with :meth:`append`. The ``insert_*`` operations act on
    a list that already holds elements and raise :class:`EmptyError` when it
    holds none.
    """

    _separator = " -> "
    _end = "NULL"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        super().__init__(values)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node; works on an empty list too."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_first(self, value: Any) -> None:
        """Put ``value`` before the first node."""
        self._require_items()
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_last(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        self._require_items()
        self.append(value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        position = self._checked_position(position, self._size + 1)
        if position == 1:
            self.insert_first(value)
        elif position == self._size + 1:
            self.append(value)
        else:
            prev = self._walk(self._head, position - 2)
            prev.next = _Node(value, prev.next)
            self._size += 1

    def _unlink_after(self, prev: _Node) -> Any:
        node = prev.next
        prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1
        return node.data

    def delete_first(self) -> Any:
        """Remove and return the first value."""
        self._require_items()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def delete_last(self) -> Any:
        """Remove and return the last value."""
        self._require_items()
        if self._size == 1:
            return self.delete_first()
        return self._unlink_after(self._walk(self._head, self._size - 2))

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        position = self._checked_position(position, self._size)
        if position == 1:
            return self.delete_first()
        return self._unlink_after(self._walk(self._head, position - 2))

    def search(self, value: Any) -> bool:
        """Tell whether ``value`` is in the list; an empty list is an error."""
        self._require_items()
        return value in self

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}{self._separator}" for value in self) + self._end