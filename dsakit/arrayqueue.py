"""A first-in, first-out queue kept in a dynamic array."""

from __future__ import annotations

from typing import Any

from dsakit.dynarray import DynamicArray

INITIAL_CAPACITY = 4


class ArrayQueue:
    """A FIFO queue whose front is the first element of a dynamic array."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items = DynamicArray(INITIAL_CAPACITY)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return len(self._items) == 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._items.insert(value)

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("front of an empty queue")
        return self._items.get(0)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        return self._items.remove(0)