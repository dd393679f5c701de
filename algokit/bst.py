"""An unbalanced binary search tree of integer keys."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Node:
    """A tree node; smaller keys go left, larger keys go right."""

    key: int
    left: Node | None = None
    right: Node | None = None

    def search(self, key: int) -> bool:
        """Tell whether ``key`` is in the tree rooted here."""
        node: Node | None = self
        while node is not None:
            if node.key < key:
                node = node.right
            elif node.key > key:
                node = node.left
            else:
                return True
        return False

    def delete(self, key: int) -> Node | None:
        """Remove ``key`` and return the new root of this subtree.

        Raises KeyError when ``key`` is not in the tree.
        """
        if self.key < key:
            if self.right is None:
                raise KeyError(key)
            self.right = self.right.delete(key)
        elif self.key > key:
            if self.left is None:
                raise KeyError(key)
            self.left = self.left.delete(key)
        else:
            if self.left is None:
                return self.right
            if self.right is None:
                return self.left
            successor = self.right.min()
            self.key = successor
            self.right = self.right.delete(successor)
        return self

    def min(self) -> int:
        """Return the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.key

    def max(self) -> int:
        """Return the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.key

    def insert(self, key: int) -> None:
        """Add ``key``; keys already present are left alone."""
        node = self
        while True:
            if node.key < key:
                if node.right is None:
                    node.right = Node(key)
                    return
                node = node.right
            elif node.key > key:
                if node.left is None:
                    node.left = Node(key)
                    return
                node = node.left
            else:
                return