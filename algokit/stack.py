"""A LIFO stack backed by a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from algokit.linked_list import LinkedList


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""

    def __init__(self) -> None:
        super().__init__("stack - empty stack")


class Stack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.add(0, value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        try:
            return self._items.delete(0)
        except IndexError:
            raise EmptyStackError() from None

    def peek(self) -> Any:
        """Return the top value without removing it."""
        try:
            return self._items.get(0)
        except IndexError:
            raise EmptyStackError() from None

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)