import pytest

from algokit.dijkstra import Graph


@pytest.fixture
def graph():
    g = Graph(5)
    g.append_edge(0, 1, 3)
    g.append_edge(1, 3, 2)
    g.append_edge(3, 4, 9)
    g.append_edge(0, 2, 8)
    g.append_edge(2, 4, 3)
    g.append_edge(1, 2, 3)
    return g


def test_shortest_path_from_source(graph):
    assert graph.shortest_path(0, 4) == 9


def test_shortest_path_to_intermediate_node(graph):
    assert graph.shortest_path(0, 3) == 5


def test_unreachable_target_costs_zero(graph):
    assert graph.shortest_path(4, 0) == 0


def test_path_to_self_costs_zero(graph):
    assert graph.shortest_path(2, 2) == 0


def test_edges_are_directed():
    g = Graph(2)
    g.append_edge(0, 1, 7)
    assert g.shortest_path(0, 1) == 7
    assert g.shortest_path(1, 0) == 0