from arbor.nodes import Node, binary_tree_node, insert_left, insert_right
from arbor.rotate import rotate_left, rotate_right
from arbor.traversal import inorder


def _values(tree):
    out = []
    inorder(tree, out.append)
    return out


def _links_ok(node):
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and child.parent is not node:
            return False
    return _links_ok(node.left) and _links_ok(node.right)


def _right_chain():
    root = binary_tree_node(None, 98)
    root.right = binary_tree_node(root, 128)
    root.right.right = binary_tree_node(root.right, 402)
    return root


def test_rotate_left_chain():
    root = _right_chain()
    new_root = rotate_left(root)
    assert new_root.value == 128
    assert new_root.parent is None
    assert new_root.left is root
    assert new_root.right.value == 402
    assert root.parent is new_root
    assert _links_ok(new_root)


def test_rotate_right_chain():
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 64)
    root.left.left = binary_tree_node(root.left, 32)
    new_root = rotate_right(root)
    assert new_root.value == 64
    assert new_root.right is root
    assert new_root.left.value == 32
    assert new_root.parent is None
    assert _links_ok(new_root)


def test_rotation_preserves_inorder_and_moves_inner_subtree():
    root = binary_tree_node(None, 50)
    left = insert_left(root, 20)
    right = insert_right(root, 80)
    inner = insert_left(right, 60)
    insert_right(right, 90)
    insert_left(left, 10)
    before = _values(root)
    new_root = rotate_left(root)
    assert _values(new_root) == before
    assert inner.parent is root
    assert root.right is inner
    assert _links_ok(new_root)
    back = rotate_right(new_root)
    assert back is root
    assert _values(back) == before
    assert _links_ok(back)


def test_rotation_updates_grandparent_link():
    top = Node(100)
    sub = insert_left(top, 50)
    insert_right(sub, 70)
    pivot = rotate_left(sub)
    assert top.left is pivot
    assert pivot.parent is top
    assert _links_ok(top)


def test_rotation_without_child_returns_none():
    leaf = Node(1)
    assert rotate_left(leaf) is None
    assert rotate_right(leaf) is None
    assert rotate_left(None) is None
    assert rotate_right(None) is None