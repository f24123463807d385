"""A growable array that doubles its storage when it runs out of room."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 2


class DynamicArray:
    """An array of arbitrary values, appended at the end, with doubling growth."""

    __slots__ = ("_slots", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError("capacity must be an integer")
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for position in range(self._size):
            yield self._slots[position]

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"

    def capacity(self) -> int:
        """Return the number of values the array can hold before it grows."""
        return len(self._slots)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("index must be an integer")
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        return index

    def _grow(self, new_capacity: int) -> None:
        self._slots = self._slots[: self._size] + [None] * (new_capacity - self._size)

    def insert(self, value: Any) -> None:
        """Append a value after the current last element."""
        if self._size == len(self._slots):
            self._grow(2 * len(self._slots))
        self._slots[self._size] = value
        self._size += 1

    def remove(self, index: int) -> Any:
        """Remove and return the value at index, shifting later values forward."""
        index = self._check_index(index)
        removed = self._slots[index]
        self._slots[index : self._size - 1] = self._slots[index + 1 : self._size]
        self._size -= 1
        self._slots[self._size] = None
        return removed

    def get(self, index: int) -> Any:
        """Return the value stored at index."""
        return self._slots[self._check_index(index)]

    def set(self, index: int, value: Any) -> None:
        """Overwrite the value stored at index."""
        self._slots[self._check_index(index)] = value

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)