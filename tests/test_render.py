from arbor.metrics import height
from arbor.nodes import Node, binary_tree_node, insert_left, insert_right
from arbor.render import print_tree, render

EXAMPLE = (
    "       .-------(098)-------.\n"
    "  .--(012)--.         .--(402)--.\n"
    "(006)     (016)     (256)     (512)"
)


def _example_tree():
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 12)
    root.left.left = binary_tree_node(root.left, 6)
    root.left.right = binary_tree_node(root.left, 16)
    root.right = binary_tree_node(root, 402)
    root.right.left = binary_tree_node(root.right, 256)
    root.right.right = binary_tree_node(root.right, 512)
    return root


def test_render_example_tree():
    assert render(_example_tree()) == EXAMPLE


def test_print_tree_writes_lines(capsys):
    print_tree(_example_tree())
    assert capsys.readouterr().out == EXAMPLE + "\n"


def test_render_single_node():
    assert render(Node(98)) == "(098)"


def test_render_none_is_empty(capsys):
    assert render(None) == ""
    print_tree(None)
    assert capsys.readouterr().out == ""


def test_line_count_matches_height():
    root = Node(1)
    node = insert_right(root, 2)
    node = insert_left(node, 3)
    insert_right(node, 4)
    lines = render(root).split("\n")
    assert len(lines) == height(root) + 1
    assert all(line == line.rstrip() for line in lines)
    assert all("(" in line for line in lines)


def test_every_value_appears_once():
    root = _example_tree()
    text = render(root)
    for value in (98, 12, 6, 16, 402, 256, 512):
        assert text.count(f"({value:03d})") == 1