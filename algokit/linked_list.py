"""A singly linked list with positional insertion and removal."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_INDEX_MESSAGE = "list - index must be between 0 and the list size"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list addressed by position."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def add(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if index < 0 or index > self._size:
            raise IndexError(_INDEX_MESSAGE)
        if index == 0:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def get(self, index: int) -> Any:
        """Return the value at position ``index``."""
        if index < 0 or index >= self._size:
            raise IndexError(_INDEX_MESSAGE)
        return self._node_at(index).value

    def delete(self, index: int) -> Any:
        """Remove and return the value at position ``index``."""
        if index < 0 or index >= self._size:
            raise IndexError(_INDEX_MESSAGE)
        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(index - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"