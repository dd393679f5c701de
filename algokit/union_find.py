"""A union-find (disjoint set) forest."""

from __future__ import annotations


class UnionFindTree:
    """Disjoint sets over the nodes ``0 .. num_of_nodes - 1``."""

    def __init__(self, num_of_nodes: int) -> None:
        self.parents = list(range(num_of_nodes))

    def merge(self, x: int, y: int) -> None:
        """Join ``y`` to the set containing ``x``."""
        if self.root(x) != self.root(y):
            self.parents[y] = self.root(x)

    def root(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        node = x
        while self.parents[node] != node:
            node = self.parents[node]
        return node

    def is_same(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.root(x) == self.root(y)