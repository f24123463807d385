"""A first-in, first-out queue built from two stacks."""

from __future__ import annotations

from typing import Any

from dsakit.stack import Stack


class StackQueue:
    """A FIFO queue: values go onto an inbox stack and leave from an outbox stack."""

    __slots__ = ("_inbox", "_outbox")

    def __init__(self) -> None:
        self._inbox = Stack()
        self._outbox = Stack()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def is_empty(self) -> bool:
        """Return True if both stacks are empty."""
        return self._inbox.is_empty() and self._outbox.is_empty()

    def enqueue(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._inbox.push(value)

    def _refill(self) -> None:
        if self._outbox.is_empty():
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        if self._outbox.is_empty():
            raise IndexError("queue is empty")

    def front(self) -> Any:
        """Return the front value without removing it."""
        self._refill()
        return self._outbox.top()

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        self._refill()
        return self._outbox.pop()