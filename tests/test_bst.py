import pytest

from algokit.bst import Node


@pytest.mark.parametrize("key, expected", [(6, True), (16, False), (3, True)])
def test_search(key, expected):
    tree = Node(6, left=Node(3))
    assert tree.search(key) is expected


def build_tree():
    tree = Node(8)
    for key in [3, 10, 1, 6, 14, 4, 7, 13]:
        tree.insert(key)
    return tree


def test_insert_places_keys():
    tree = build_tree()
    assert tree.left.key == 3
    assert tree.right.key == 10
    assert tree.left.right.left.key == 4
    assert tree.right.right.left.key == 13


def test_min_and_max():
    tree = build_tree()
    assert tree.min() == 1
    assert tree.max() == 14


def test_insert_duplicate_is_ignored():
    tree = build_tree()
    tree.insert(6)
    tree = tree.delete(6)
    assert tree.search(6) is False


def test_delete_leaf():
    tree = build_tree()
    tree = tree.delete(13)
    assert tree.search(13) is False
    assert tree.right.right.left is None


def test_delete_node_with_two_children():
    tree = build_tree()
    tree = tree.delete(3)
    assert tree.left.key == 4
    assert tree.search(3) is False
    assert all(tree.search(k) for k in [1, 4, 6, 7])


def test_delete_root_with_single_child_returns_child():
    tree = Node(5, right=Node(9))
    new_root = tree.delete(5)
    assert new_root.key == 9


def test_delete_only_node_returns_none():
    assert Node(5).delete(5) is None


def test_delete_missing_key_raises():
    tree = build_tree()
    with pytest.raises(KeyError):
        tree.delete(99)
    assert tree.max() == 14