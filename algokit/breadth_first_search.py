"""Breadth-first search over a tree of integer values."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class Node:
    """A tree node holding a value and its child nodes."""

    value: int
    leaves: list[Node] = field(default_factory=list)

    def insert(self, value: int) -> Node:
        """Add a child holding ``value`` and return this node."""
        self.leaves.append(Node(value))
        return self

    def search(self, value: int) -> bool:
        """Tell whether ``value`` is held by this node or any descendant."""
        pending = deque([self])
        while pending:
            current = pending.popleft()
            if current.value == value:
                return True
            pending.extend(current.leaves)
        return False