"""A FIFO queue built from two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from algokit.stack import EmptyStackError, Stack


class EmptyQueueError(IndexError):
    """Raised when reading from an empty queue."""

    def __init__(self) -> None:
        super().__init__("queue - empty queue")


class Queue:
    """First-in, first-out queue using an inbound and an outbound stack."""

    def __init__(self) -> None:
        self._inbound = Stack()
        self._outbound = Stack()

    def _move_to_outbound(self) -> None:
        while not self._inbound.is_empty():
            self._outbound.push(self._inbound.pop())

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        while not self._outbound.is_empty():
            self._inbound.push(self._outbound.pop())
        self._inbound.push(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        self._move_to_outbound()
        try:
            return self._outbound.pop()
        except EmptyStackError:
            raise EmptyQueueError() from None

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise EmptyQueueError()
        self._move_to_outbound()
        return self._outbound.peek()

    def is_empty(self) -> bool:
        return self._inbound.is_empty() and self._outbound.is_empty()

    def __len__(self) -> int:
        return len(self._inbound) + len(self._outbound)

    def _front_to_back(self) -> Iterator[Any]:
        yield from self._outbound
        yield from reversed(list(self._inbound))

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._front_to_back()) + "]"