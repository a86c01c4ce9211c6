"""Depth-first and breadth-first walks over a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterator, Optional

from .nodes import Node

Visitor = Callable[[int], object]


def _preorder_nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _inorder_nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _postorder_nodes(tree: Optional[Node]) -> Iterator[Node]:
    reversed_order = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    yield from reversed(reversed_order)


def _levelorder_nodes(tree: Optional[Node]) -> Iterator[Node]:
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(child for child in (node.left, node.right) if child is not None)


def _visit(nodes: Iterator[Node], func: Optional[Visitor]) -> None:
    if func is None:
        return
    for node in nodes:
        func(node.value)


def preorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value: node, then left subtree, then right subtree."""
    _visit(_preorder_nodes(tree), func)


def inorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value: left subtree, node, then right subtree."""
    _visit(_inorder_nodes(tree), func)


def postorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value: left subtree, right subtree, then node."""
    _visit(_postorder_nodes(tree), func)


def levelorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value level by level, left to right."""
    _visit(_levelorder_nodes(tree), func)