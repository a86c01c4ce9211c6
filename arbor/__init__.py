"""Linked binary trees: traversal, metrics, rotations, BST, AVL, max heaps and rendering."""

__version__ = "0.1.0"