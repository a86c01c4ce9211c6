"""Binary search trees without duplicate values."""

from __future__ import annotations

from typing import Iterable, Optional

from .nodes import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a valid binary search tree with unique values."""
    if tree is None:
        return False

    def check(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        return check(node.left, low, node.value) and check(node.right, node.value, high)

    return check(tree, None, None)


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value`` in a search tree, or None."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """A binary search tree rooted at ``root``."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return its new node.

        Raises ValueError if the value is already present.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                raise ValueError(f"{value} is already in the tree")

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None."""
        return bst_search(self.root, value)

    def remove(self, value: int) -> Optional[Node]:
        """Remove ``value`` and return the new root.

        A node with two children takes its in-order successor's value and the
        successor is removed instead. Raises KeyError if the value is absent.
        """
        node = bst_search(self.root, value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = _leftmost(node.right)
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        return self.root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting ``values`` in order, skipping repeats."""
        tree = cls()
        seen: set[int] = set()
        for value in values:
            if value not in seen:
                seen.add(value)
                tree.insert(value)
        return tree