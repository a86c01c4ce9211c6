"""Command that prints worked examples of trees and heaps."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .heap import MaxHeap
from .nodes import Node, binary_tree_node
from .render import print_tree

SAMPLE = (79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95)
INSERTIONS = (98, 402, 12, 46, 128, 256, 512, 50)


def _format_values(values: Sequence[int]) -> str:
    return ", ".join(str(value) for value in values)


def _demo_tree() -> None:
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 12)
    root.left.left = binary_tree_node(root.left, 6)
    root.left.right = binary_tree_node(root.left, 16)
    root.right = binary_tree_node(root, 402)
    root.right.left = binary_tree_node(root.right, 256)
    root.right.right = binary_tree_node(root.right, 512)
    print_tree(root)


def _demo_insert() -> None:
    heap = MaxHeap()
    for position, value in enumerate(INSERTIONS):
        node: Node = heap.insert(value)
        prefix = "\n" if position else ""
        print(f"{prefix}Inserted: {node.value}")
        print_tree(heap.root)


def _demo_build() -> None:
    print_tree(MaxHeap.from_values(SAMPLE).root)


def _demo_extract() -> None:
    heap = MaxHeap.from_values(SAMPLE)
    print_tree(heap.root)
    for _ in range(3):
        print(f"Extracted: {heap.extract()}")
        print_tree(heap.root)


def _demo_sort() -> None:
    print(_format_values(SAMPLE))
    heap = MaxHeap.from_values(SAMPLE)
    print_tree(heap.root)
    print(_format_values(heap.to_sorted_list()))


DEMOS = {
    "tree": _demo_tree,
    "insert": _demo_insert,
    "build": _demo_build,
    "extract": _demo_extract,
    "sort": _demo_sort,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named demonstration, or all of them in turn."""
    parser = argparse.ArgumentParser(prog="arbor", description=__doc__)
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*DEMOS, "all"],
        help="which example to print (default: all)",
    )
    args = parser.parse_args(argv)
    selected = DEMOS.values() if args.demo == "all" else [DEMOS[args.demo]]
    for demo in selected:
        demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())