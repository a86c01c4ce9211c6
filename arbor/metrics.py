"""Measurements and shape predicates for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .nodes import Node, is_leaf


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path (0 for None)."""
    if tree is None:
        return 0
    children = [child for child in (tree.left, tree.right) if child is not None]
    return max((1 + height(child) for child in children), default=0)


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def count_leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if is_leaf(tree):
        return 1
    return count_leaves(tree.left) + count_leaves(tree.right)


def count_internal(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or is_leaf(tree):
        return 0
    return 1 + count_internal(tree.left) + count_internal(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's (0 for None)."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False

    def check(node: Optional[Node]) -> bool:
        if node is None:
            return True
        if (node.left is None) != (node.right is None):
            return False
        return check(node.left) and check(node.right)

    return check(tree)


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every internal node has two children and all leaves share a level."""
    if tree is None:
        return False

    leaf_level = 0
    node = tree
    while not is_leaf(node):
        node = node.left if node.left is not None else node.right
        leaf_level += 1

    def check(node: Node, level: int) -> bool:
        if is_leaf(node):
            return level == leaf_level
        if node.left is None or node.right is None:
            return False
        return check(node.left, level + 1) and check(node.right, level + 1)

    return check(tree, 0)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled, except possibly the last from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True