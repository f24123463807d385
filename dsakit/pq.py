"""A min-priority queue kept as a binary heap in a dynamic array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dsakit.dynarray import DynamicArray

INITIAL_CAPACITY = 8


@dataclass(slots=True)
class _Entry:
    priority: Any
    value: Any


class PriorityQueue:
    """A priority queue in which the lowest priority value comes out first."""

    __slots__ = ("_heap",)

    def __init__(self) -> None:
        self._heap = DynamicArray(INITIAL_CAPACITY)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        pairs = [(entry.value, entry.priority) for entry in self._heap]
        return f"PriorityQueue({pairs!r})"

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return len(self._heap) == 0

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        heap[a], heap[b] = heap[b], heap[a]

    def insert(self, value: Any, priority: Any) -> None:
        """Insert value with the given priority; a value of None is ignored."""
        if value is None:
            return
        heap = self._heap
        heap.insert(_Entry(priority, value))
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority < heap[parent].priority:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _peek(self) -> _Entry:
        if self.is_empty():
            raise IndexError("priority queue is empty")
        return self._heap[0]

    def first(self) -> Any:
        """Return the value with the lowest priority value."""
        return self._peek().value

    def first_priority(self) -> Any:
        """Return the lowest priority value in the queue."""
        return self._peek().priority

    def remove_first(self) -> Any:
        """Remove and return the value with the lowest priority value."""
        first = self._peek()
        heap = self._heap
        last = heap.remove(len(heap) - 1)
        if len(heap) == 0:
            return first.value
        heap[0] = last
        index = 0
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child].priority < heap[smallest].priority:
                    smallest = child
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest
        return first.value