"""A circular singly linked list: the last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.doubly import _LinkedSequence, _Node


class CircularLinkedList(_LinkedSequence):
    """A ring of nodes; only the last node is held, its successor is the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        super().__init__(values)

    def _first(self) -> Optional[_Node]:
        return None if self._tail is None else self._tail.next

    def _node_at(self, position: int) -> _Node:
        """Return the node at 1-based ``position``; position 0 is the last node."""
        return self._walk(self._tail, position)

    def _link_after(self, prev: Optional[_Node], value: Any) -> _Node:
        node = _Node(value)
        if prev is None:
            node.next = node
        else:
            node.next = prev.next
            prev.next = node
        self._size += 1
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        self._tail = self._link_after(self._tail, value)

    def insert_first(self, value: Any) -> None:
        """Put ``value`` before the first node."""
        node = self._link_after(self._tail, value)
        if self._tail is None:
            self._tail = node

    def insert_last(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        self.append(value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` right after the node at 1-based ``position``."""
        position = self._checked_position(position, self._size)
        if position == self._size:
            self.append(value)
        else:
            self._link_after(self._node_at(position), value)

    def _unlink_after(self, prev: _Node) -> Any:
        node = prev.next
        if node is prev:
            self._tail = None
        else:
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        node.next = None
        self._size -= 1
        return node.data

    def delete_first(self) -> Any:
        """Remove and return the first value."""
        self._require_items()
        return self._unlink_after(self._tail)

    def delete_last(self) -> Any:
        """Remove and return the last value."""
        self._require_items()
        return self._unlink_after(self._node_at(self._size - 1))

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        position = self._checked_position(position, self._size)
        return self._unlink_after(self._node_at(position - 1))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}{self._separator}" for value in self) + self._end