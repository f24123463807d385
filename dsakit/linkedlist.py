"""A singly-linked list that grows at its head."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Equality = Callable[[Any, Any], bool]


def _default_eq(a: Any, b: Any) -> bool:
    return a == b


@dataclass(slots=True)
class _Link:
    value: Any
    next: Optional[_Link] = None


class LinkedList:
    """A singly-linked list of arbitrary values, inserted at the head."""

    __slots__ = ("_head", "_size")

    def __init__(self) -> None:
        self._head: Optional[_Link] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert(self, value: Any) -> None:
        """Insert a value as the new head of the list."""
        self._head = _Link(value, self._head)
        self._size += 1

    def remove(self, value: Any, eq: Optional[Equality] = None) -> bool:
        """Remove the first value equal to ``value``; return whether one was removed.

        ``eq(value, item)`` decides equality and defaults to ``==``.
        """
        eq = eq or _default_eq
        previous: Optional[_Link] = None
        link = self._head
        while link is not None:
            if eq(value, link.value):
                if previous is None:
                    self._head = link.next
                else:
                    previous.next = link.next
                self._size -= 1
                return True
            previous, link = link, link.next
        return False

    def position(self, value: Any, eq: Optional[Equality] = None) -> int:
        """Return the 0-based position of the first value equal to ``value``, or -1."""
        eq = eq or _default_eq
        for index, item in enumerate(self):
            if eq(value, item):
                return index
        return -1

    def reverse(self) -> None:
        """Reverse the order of the links in place."""
        previous: Optional[_Link] = None
        link = self._head
        while link is not None:
            following = link.next
            link.next = previous
            previous, link = link, following
        self._head = previous

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._head is None

    def head(self) -> Any:
        """Return the value at the head, or None if the list is empty."""
        return None if self._head is None else self._head.value

    def remove_head(self) -> None:
        """Drop the head value; does nothing on an empty list."""
        if self._head is not None:
            self._head = self._head.next
            self._size -= 1