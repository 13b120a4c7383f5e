"""A doubly linked list, plus the node type and base class shared by the linked lists."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from dsakit.errors import EmptyError, InvalidPositionError


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = field(default=None, repr=False)


@dataclass(eq=False)
class _DoubleNode(_Node):
    prev: Optional["_DoubleNode"] = field(default=None, repr=False)


class _LinkedSequence:
    """Size, traversal, position checks and display shared by the linked lists.

    Subclasses provide ``append`` and either a ``_head`` attribute or their own
    ``_first`` method. Traversal stops at a missing link or on coming back to
    the first node, so it serves both open and circular chains.
    """

    _separator = "->"
    _end = ""

    def __init__(self, values: Iterable[Any]) -> None:
        self._size = 0
        for value in values:
            self.append(value)

    def _first(self) -> Optional[_Node]:
        return self._head

    def _nodes(self) -> Iterator[_Node]:
        first = node = self._first()
        while node is not None:
            yield node
            node = node.next
            if node is first:
                return

    @staticmethod
    def _walk(node: _Node, steps: int) -> _Node:
        for _ in range(steps):
            node = node.next
        return node

    def _require_items(self) -> None:
        if not self._size:
            raise EmptyError("list is empty")

    def _checked_position(self, position: int, highest: int) -> int:
        """Return ``position`` if the list has items and 1 <= position <= highest."""
        self._require_items()
        position = operator.index(position)
        if not 1 <= position <= highest:
            raise InvalidPositionError(f"invalid position: {position}")
        return position

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}{self._separator}" for value in self) + self._end

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList(_LinkedSequence):
    """A list of nodes linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        super().__init__(values)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _DoubleNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def delete_first(self) -> Any:
        """Remove and return the first value."""
        self._require_items()
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove and return the last value."""
        self._require_items()
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        position = self._checked_position(position, self._size)
        return self._unlink(self._walk(self._head, position - 1))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev