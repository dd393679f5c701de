import pytest

from algokit.breadth_first_search import Node

CASES = {
    -1: True,
    2: True,
    20: False,
    5: True,
    15: True,
    7: True,
    13: False,
    18: False,
    -22: False,
    3: True,
    19: True,
    21: False,
}


@pytest.fixture
def root():
    node = Node(0)
    for value, exists in CASES.items():
        if exists:
            node.insert(value)
    return node


@pytest.mark.parametrize("value,expected", sorted(CASES.items()))
def test_search(root, value, expected):
    assert root.search(value) is expected


def test_root_value_is_found(root):
    assert root.search(0) is True


def test_insert_returns_self_and_adds_leaf():
    node = Node(1)
    assert node.insert(2) is node
    assert [leaf.value for leaf in node.leaves] == [2]


def test_search_reaches_deeper_levels():
    node = Node(0)
    node.insert(1)
    node.leaves[0].insert(42)
    assert node.search(42) is True
    assert node.search(43) is False