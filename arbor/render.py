"""Text rendering of a binary tree as boxed values joined by branch lines."""

from __future__ import annotations

from typing import Optional

from .metrics import height
from .nodes import Node


def _put(rows: list[list[str]], row: int, col: int, char: str) -> None:
    line = rows[row]
    if col >= len(line):
        line.extend(" " * (col + 1 - len(line)))
    line[col] = char


def _draw(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    box = f"({node.value:03d})"
    width = len(box)
    left = _draw(node.left, offset, level + 1, rows)
    right = _draw(node.right, offset + left + width, level + 1, rows)
    start = offset + left
    for i, char in enumerate(box):
        _put(rows, level, start + i, char)
    if level:
        if is_left:
            for i in range(width + right):
                _put(rows, level - 1, start + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(rows, level - 1, offset - width // 2 + i, "-")
        _put(rows, level - 1, start + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, one line per level (empty for None)."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Optional[Node]) -> None:
    """Print the drawing of ``tree``; print nothing for None."""
    if tree is None:
        return
    print(render(tree))