"""A last-in, first-out stack with a fixed capacity."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

from dsakit.errors import CapacityError, EmptyError


class BoundedStack:
    """A stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of elements the stack can hold."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise CapacityError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise EmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise EmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self)!r})"