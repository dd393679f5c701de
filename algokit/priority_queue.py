"""A priority queue of weighted graph nodes, lowest weight first."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class NodeQueueItem:
    """A node paired with its weight."""

    node: int
    weight: int


class PriorityQueue:
    """Sorted queue; items of equal weight keep their insertion order."""

    def __init__(self) -> None:
        self._items: list[NodeQueueItem] = []

    def push(self, node: int, weight: int) -> None:
        """Insert ``node`` after every item whose weight is not greater."""
        bisect.insort_right(
            self._items, NodeQueueItem(node, weight), key=attrgetter("weight")
        )

    def pop(self) -> tuple[int, int]:
        """Remove and return the lightest ``(node, weight)`` pair."""
        if not self._items:
            raise IndexError("priority queue - empty queue")
        item = self._items.pop(0)
        return item.node, item.weight

    def get(self, index: int) -> tuple[int, int]:
        """Return the ``(node, weight)`` pair at position ``index``."""
        item = self._items[index]
        return item.node, item.weight

    def __len__(self) -> int:
        return len(self._items)