"""A last-in, first-out stack kept in a singly-linked list."""

from __future__ import annotations

from typing import Any

from dsakit.linkedlist import LinkedList


class Stack:
    """A LIFO stack whose top is the head of a linked list."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True if the stack holds no values."""
        return self._items.is_empty()

    def push(self, value: Any) -> None:
        """Push a value onto the top of the stack."""
        self._items.insert(value)

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._items.is_empty():
            raise IndexError("top of an empty stack")
        return self._items.head()

    def pop(self) -> Any:
        """Remove and return the top value."""
        value = self.top()
        self._items.remove_head()
        return value