"""Travelling salesman tour cost by dynamic programming over subsets."""

from __future__ import annotations

_NO_ROUTE = 10000


class Graph:
    """Undirected graph with positive edge weights; zero means no edge."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.edges = [[0] * n for _ in range(n)]

    def append_edge(self, source: int, target: int, weight: int) -> None:
        """Set the weight of the edge between ``source`` and ``target``."""
        self.edges[source][target] = weight
        self.edges[target][source] = weight

    def tsp(self, start: int) -> int:
        """Return the cost of the cheapest tour that visits every node.

        The tour begins at ``start`` and must end at node 0 once every
        node has been visited. Returns 10000 when no such tour exists.
        """
        full = (1 << self.n) - 1
        memo: dict[tuple[int, int], int] = {}

        def best(visited: int, stayed: int) -> int:
            key = (visited, stayed)
            if key in memo:
                return memo[key]
            if visited == full and stayed == 0:
                return 0
            cost = _NO_ROUTE
            for node, weight in enumerate(self.edges[stayed]):
                if not (visited >> node) & 1 and weight > 0:
                    cost = min(cost, best(visited | (1 << node), node) + weight)
            memo[key] = cost
            return cost

        return best(0, start)