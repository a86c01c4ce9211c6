"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from .metrics import is_complete, size
from .nodes import Node


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is complete and no child exceeds its parent."""
    if not is_complete(tree):
        return False

    def ordered(node: Optional[Node]) -> bool:
        if node is None:
            return True
        if node.parent is not None and node.value > node.parent.value:
            return False
        return ordered(node.left) and ordered(node.right)

    return ordered(tree.left) and ordered(tree.right)


class MaxHeap:
    """A max binary heap rooted at ``root``."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def __len__(self) -> int:
        return size(self.root)

    def _open_slot(self) -> Node:
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.left is None or node.right is None:
                return node
            queue.extend((node.left, node.right))
        raise AssertionError("a finite tree always has an open slot")

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node where it settles after sifting up."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        parent = self._open_slot()
        node = Node(value, parent)
        if parent.left is None:
            parent.left = node
        else:
            parent.right = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        The larger child's value is promoted level by level and the node it
        leaves at the bottom is removed. Raises IndexError on an empty heap.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        node = self.root
        while node.left is not None or node.right is not None:
            best = node.left
            if best is None or (
                node.right is not None and node.right.value > best.value
            ):
                best = node.right
            node.value = best.value
            node = best
        parent = node.parent
        if parent is None:
            self.root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None
        node.parent = None
        return top

    @classmethod
    def from_values(cls, values: Iterable[int]) -> MaxHeap:
        """Build a heap by inserting ``values`` in order."""
        heap = cls()
        for value in values:
            heap.insert(value)
        return heap

    def to_sorted_list(self) -> list[int]:
        """Extract every value, largest first; the heap is left empty."""
        return [self.extract() for _ in range(len(self))]