from dsakit.tree import Node, build_tree


def test_empty_listing_gives_no_tree():
    assert build_tree([]) is None


def test_leading_none_gives_no_tree():
    assert build_tree([None, 1, 2]) is None


def test_node_defaults_to_no_children():
    node = Node(7)
    assert node.data == 7
    assert node.left is None
    assert node.right is None


def test_node_with_children():
    left, right = Node(2), Node(3)
    root = Node(1, left, right)
    assert root.left is left
    assert root.right is right


def test_complete_levels():
    root = build_tree([1, 2, 3, 4, 5])
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left.data == 4
    assert root.left.right.data == 5
    assert root.right.left is None
    assert root.right.right is None


def test_missing_children_are_skipped():
    root = build_tree([1, None, 2, 3])
    assert root.left is None
    assert root.right.data == 2
    assert root.right.left.data == 3
    assert root.right.right is None


def test_children_of_missing_node_take_no_places():
    root = build_tree([1, 2, None, None, 4, 5])
    assert root.right is None
    assert root.left.left is None
    assert root.left.right.data == 4
    assert root.left.right.left.data == 5


def test_single_value():
    root = build_tree([9])
    assert root.data == 9
    assert root.left is None and root.right is None


def test_children_can_be_attached_after_construction():
    root = Node(1)
    root.left = Node(2)
    root.right = Node(3)
    root.left.right = Node(4)
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left is None
    assert root.left.right.data == 4
    assert root.left.right.left is None
    assert root.left.right.right is None