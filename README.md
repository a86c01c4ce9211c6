# arbor

Binary trees of integers built from linked nodes that know their parent, and
the usual algorithms on them: traversals, measurements, rotations, binary
search trees, AVL trees and max heaps, plus a plain-text renderer.

## Installing

```
pip install .
```

## Modules

- `arbor.nodes` — the `Node` dataclass (`value`, `parent`, `left`, `right`)
  and node-level helpers:
  - `binary_tree_node(parent, value)` creates a node whose parent link is set;
    it does not attach it to the parent.
  - `insert_left(parent, value)` / `insert_right(parent, value)` put a new node
    in that child slot; an existing child moves down under the new node.
    A missing parent raises `ValueError`.
  - `delete_tree(tree)` detaches a subtree from its parent and clears every
    link inside it.
  - `is_leaf`, `is_root`, `depth` (edges up to the root, 0 for `None`),
    `sibling`, `uncle`, `lowest_common_ancestor(first, second)`.
- `arbor.traversal` — `preorder`, `inorder`, `postorder` and `levelorder`,
  each taking a tree and a function that is called with every node's value.
  A `None` tree or function does nothing.
- `arbor.metrics` — `height` (edges on the longest downward path), `size`,
  `count_leaves`, `count_internal` (nodes with at least one child), `balance`
  (left height minus right height), and the shape tests `is_full`,
  `is_perfect` and `is_complete`, all of which are false for an empty tree.
- `arbor.rotate` — `rotate_left` and `rotate_right` return the new subtree
  root, keep parent links consistent, and return `None` when the rotation is
  impossible.
- `arbor.bst` — `is_bst`, `bst_search`, and `BinarySearchTree` with `insert`
  (raises `ValueError` on a duplicate), `search`, `remove` (returns the new
  root; raises `KeyError` if the value is absent) and `from_values` (skips
  repeated values).
- `arbor.avl` — `is_avl`, `sorted_array_to_avl(values)`, and `AVLTree` with
  `insert` (rebalances; raises `ValueError` on a duplicate), `remove`
  (rebalances and returns the new root; an absent value leaves the tree
  unchanged), `from_values` and `from_sorted`.
- `arbor.heap` — `is_heap`, and `MaxHeap` with `insert` (returns the node where
  the value settles), `extract` (raises `IndexError` when empty), `len()`,
  `from_values`, and `to_sorted_list` (largest first, leaving the heap empty).
- `arbor.render` — `render(tree)` returns the drawing as a string,
  `print_tree(tree)` prints it. Values appear as zero-padded three-digit
  numbers in parentheses, with dashed branches and a `.` above each child.

## Example

```python
from arbor.heap import MaxHeap
from arbor.render import print_tree

heap = MaxHeap.from_values([79, 47, 68, 87, 84, 91, 21, 32])
print_tree(heap.root)
print(heap.to_sorted_list())  # [91, 87, 84, 79, 68, 47, 32, 21]
```

## Demonstration

```
arbor-demo
```

prints every worked example in turn. Name one to print only that:

- `arbor-demo tree` — a hand-built seven-node tree
- `arbor-demo insert` — a heap growing one insertion at a time
- `arbor-demo build` — a heap built from a sample list
- `arbor-demo extract` — three extractions from that heap
- `arbor-demo sort` — the sample list, its heap, and the values sorted largest first

## Limits

Nodes hold integers only, and trees live in memory: there is no saving,
loading or other serialisation. The renderer is meant for small trees of
values that fit in three digits.

## Tests

```
pip install .[test]
pytest
```