"""A first-in, first-out queue over a fixed number of slots."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterator
from typing import Any

from dsakit.errors import CapacityError, EmptyError


class BoundedQueue:
    """A linear queue with ``capacity`` slots.

    Slots are used from front to back and are not reused while the queue
    holds anything: once every slot has been filled, the queue reports full
    until it has been drained completely, after which all slots are free.
    """

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque[Any] = deque()
        self._slots_used = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the queue."""
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise CapacityError("queue overflow")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front of the queue."""
        if self.is_empty():
            raise EmptyError("queue underflow")
        value = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._slots_used >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self)!r})"