"""Shortest path costs on a weighted directed graph."""

from __future__ import annotations

from algokit.priority_queue import PriorityQueue


class Graph:
    """Directed graph stored as an adjacency matrix of positive weights.

    A weight of zero means there is no edge.
    """

    def __init__(self, num_of_vertex: int) -> None:
        self.num_of_vertex = num_of_vertex
        self.edges = [[0] * num_of_vertex for _ in range(num_of_vertex)]

    def append_edge(self, source: int, target: int, weight: int) -> None:
        """Set the weight of the edge from ``source`` to ``target``."""
        self.edges[source][target] = weight

    def shortest_path(self, source: int, target: int) -> int:
        """Return the lowest cost from ``source`` to ``target``.

        Returns 0 when ``target`` cannot be reached or equals ``source``.
        """
        fixed = [False] * self.num_of_vertex
        queue = PriorityQueue()
        queue.push(source, 0)

        while len(queue) > 0:
            node, cost = queue.pop()
            if node == target:
                return cost
            if fixed[node]:
                continue
            for neighbour, weight in enumerate(self.edges[node]):
                if weight > 0:
                    queue.push(neighbour, cost + weight)
            fixed[node] = True

        return 0