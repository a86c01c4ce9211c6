"""Binary tree nodes and the operations that relate one node to another."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


def binary_tree_node(parent: Optional[Node], value: int) -> Node:
    """Create a detached node whose parent link points at ``parent``."""
    return Node(value, parent)


def _require_parent(parent: Optional[Node]) -> Node:
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    return parent


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    parent = _require_parent(parent)
    new = binary_tree_node(parent, value)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    parent = _require_parent(parent)
    new = binary_tree_node(parent, value)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete_tree(tree: Optional[Node]) -> None:
    """Break every link in the subtree rooted at ``tree``."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def _lineage(node: Optional[Node]) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.parent


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between ``node`` and its root (0 for None)."""
    return max(sum(1 for _ in _lineage(node)) - 1, 0)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    ancestors = set(_lineage(first))
    return next((node for node in _lineage(second) if node in ancestors), None)