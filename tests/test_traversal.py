import pytest
from hypothesis import given, strategies as st

from arbor.nodes import binary_tree_node
from arbor.traversal import inorder, levelorder, postorder, preorder

LEVEL_VALUES = [98, 12, 402, 6, 16, 256, 512]


def build_level_order(values):
    nodes = []
    for index, value in enumerate(values):
        parent = nodes[(index - 1) // 2] if index else None
        node = binary_tree_node(parent, value)
        if parent is not None:
            if index % 2:
                parent.left = node
            else:
                parent.right = node
        nodes.append(node)
    return nodes[0] if nodes else None


def collect(walk, tree):
    seen = []
    walk(tree, seen.append)
    return seen


def mirror(node, parent=None):
    if node is None:
        return None
    copy = binary_tree_node(parent, node.value)
    copy.left = mirror(node.right, copy)
    copy.right = mirror(node.left, copy)
    return copy


def test_preorder_sample():
    assert collect(preorder, build_level_order(LEVEL_VALUES)) == [
        98, 12, 6, 16, 402, 256, 512
    ]


def test_inorder_of_search_tree_is_sorted():
    assert collect(inorder, build_level_order(LEVEL_VALUES)) == sorted(LEVEL_VALUES)


def test_postorder_sample():
    assert collect(postorder, build_level_order(LEVEL_VALUES)) == [
        6, 16, 12, 256, 512, 402, 98
    ]


def test_levelorder_follows_build_order():
    assert collect(levelorder, build_level_order(LEVEL_VALUES)) == LEVEL_VALUES


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_empty_tree_visits_nothing(walk):
    assert collect(walk, None) == []


def test_lopsided_tree_orders():
    root = binary_tree_node(None, 1)
    root.right = binary_tree_node(root, 2)
    root.right.right = binary_tree_node(root.right, 3)
    assert collect(preorder, root) == [1, 2, 3]
    assert collect(inorder, root) == [1, 2, 3]
    assert collect(postorder, root) == [3, 2, 1]
    assert collect(levelorder, root) == [1, 2, 3]


@given(st.lists(st.integers(), max_size=60))
def test_every_walk_visits_every_value_once(values):
    tree = build_level_order(values)
    for walk in (preorder, inorder, postorder, levelorder):
        assert sorted(collect(walk, tree)) == sorted(values)


@given(st.lists(st.integers(), min_size=1, max_size=60))
def test_preorder_is_reversed_postorder_of_mirror(values):
    tree = build_level_order(values)
    assert collect(preorder, tree) == list(reversed(collect(postorder, mirror(tree))))
    assert collect(preorder, tree)[0] == values[0]
    assert collect(postorder, tree)[-1] == values[0]


@given(st.lists(st.integers(), max_size=60))
def test_inorder_is_reversed_by_mirror(values):
    tree = build_level_order(values)
    assert collect(inorder, mirror(tree)) == list(reversed(collect(inorder, tree)))