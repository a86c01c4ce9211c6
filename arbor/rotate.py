"""Single left and right rotations that keep parent links consistent."""

from __future__ import annotations

from typing import Optional

from .nodes import Node


def _relink(old_root: Node, pivot: Node) -> None:
    parent = old_root.parent
    old_root.parent = pivot
    pivot.parent = parent
    if parent is not None:
        if parent.left is old_root:
            parent.left = pivot
        else:
            parent.right = pivot


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate ``tree`` to the left and return the new subtree root.

    Returns None when the tree is missing or has no right child.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    _relink(tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate ``tree`` to the right and return the new subtree root.

    Returns None when the tree is missing or has no left child.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    _relink(tree, pivot)
    return pivot