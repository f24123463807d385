"""A binary search tree keyed on orderable keys, with an in-order iterator."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsakit.stack import Stack


@dataclass(slots=True)
class _Node:
    key: Any
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """A binary search tree mapping keys to values; inserting a present key replaces its value."""

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> InOrderIterator:
        return InOrderIterator(self)

    def __repr__(self) -> str:
        return f"BinarySearchTree({dict(self)!r})"

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def insert(self, key: Any, value: Any) -> None:
        """Store value under key, replacing any value already stored there."""
        if self._root is None:
            self._root = _Node(key, value)
            self._size += 1
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    self._size += 1
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key, value)
                    self._size += 1
                    return
                node = node.right
            else:
                node.value = value
                return

    def remove(self, key: Any) -> None:
        """Remove key and its value; does nothing if key is absent."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Replace with the in-order successor, then unlink the successor.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key = successor.key
            node.value = successor.value
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def get(self, key: Any) -> Any:
        """Return the value stored under key, or None if key is absent."""
        node = self._find(key)
        return None if node is None else node.value

    def height(self) -> int:
        """Return the number of edges on the longest root-to-node path; -1 when empty."""
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def path_sum(self, total: Any) -> bool:
        """Return True if the keys on some root-to-leaf path add up to total."""
        if self._root is None:
            return total == 0
        pending = [(self._root, total)]
        while pending:
            node, remaining = pending.pop()
            remaining -= node.key
            if node.left is None and node.right is None:
                if remaining == 0:
                    return True
                continue
            for child in (node.left, node.right):
                if child is not None:
                    pending.append((child, remaining))
        return False

    def range_sum(self, lower: Any, upper: Any) -> Any:
        """Return the sum of keys between lower and upper, both inclusive."""
        total = 0
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            if lower <= node.key <= upper:
                total += node.key
            if node.key > lower and node.left is not None:
                pending.append(node.left)
            if node.key < upper and node.right is not None:
                pending.append(node.right)
        return total


class InOrderIterator:
    """Yields (key, value) pairs of a tree in ascending key order."""

    __slots__ = ("_stack",)

    def __init__(self, tree: BinarySearchTree) -> None:
        self._stack = Stack()
        self._push_left(tree._root)

    def _push_left(self, node: Optional[_Node]) -> None:
        while node is not None:
            self._stack.push(node)
            node = node.left

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._stack.is_empty():
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.key, node.value

    def has_next(self) -> bool:
        """Return True if at least one more pair remains."""
        return not self._stack.is_empty()