"""Self-balancing AVL search trees."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .bst import bst_search
from .metrics import balance
from .nodes import Node
from .rotate import rotate_left, rotate_right


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a search tree whose nodes all have balance within 1."""
    if tree is None:
        return False

    def check(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if abs(balance(node)) > 1:
            return False
        return check(node.left, low, node.value) and check(node.right, node.value, high)

    return check(tree, None, None)


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values by taking middles recursively."""
    if not values:
        return None

    def build(parent: Optional[Node], begin: int, last: int) -> Optional[Node]:
        if begin > last:
            return None
        mid = (begin + last) // 2
        node = Node(values[mid], parent)
        node.left = build(node, begin, mid - 1)
        node.right = build(node, mid + 1, last)
        return node

    return build(None, 0, len(values) - 1)


def _rebalance(node: Node) -> Node:
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if balance(node.right) > 0:
            rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTree:
    """An AVL tree rooted at ``root``."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def insert(self, value: int) -> Node:
        """Insert ``value``, rebalance, and return the new node.

        Raises ValueError if the value is already present.
        """

        def insert_at(node: Optional[Node], parent: Optional[Node]) -> tuple[Node, Node]:
            if node is None:
                created = Node(value, parent)
                return created, created
            if value < node.value:
                node.left, created = insert_at(node.left, node)
            elif value > node.value:
                node.right, created = insert_at(node.right, node)
            else:
                raise ValueError(f"{value} is already in the tree")

            factor = balance(node)
            if factor > 1 and value < node.left.value:
                return rotate_right(node), created
            if factor < -1 and value > node.right.value:
                return rotate_left(node), created
            if factor > 1 and value > node.left.value:
                node.left = rotate_left(node.left)
                return rotate_right(node), created
            if factor < -1 and value < node.right.value:
                node.right = rotate_right(node.right)
                return rotate_left(node), created
            return node, created

        self.root, created = insert_at(self.root, None)
        return created

    def remove(self, value: int) -> Optional[Node]:
        """Remove ``value`` if present, rebalance, and return the new root."""
        node = bst_search(self.root, value)
        if node is None:
            return self.root
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
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

        current = parent
        while current is not None:
            current = _rebalance(current)
            if current.parent is None:
                self.root = current
            current = current.parent
        return self.root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> AVLTree:
        """Build a tree by inserting ``values`` in order, skipping repeats."""
        tree = cls()
        seen: set[int] = set()
        for value in values:
            if value not in seen:
                seen.add(value)
                tree.insert(value)
        return tree

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> AVLTree:
        """Build a balanced tree from already sorted values."""
        return cls(sorted_array_to_avl(values))