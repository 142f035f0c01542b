from hypothesis import given, strategies as st

from dsakit.tree import TreeNode, inorder, level_order, postorder, preorder


def _demo_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def test_inorder_demo():
    assert list(inorder(_demo_tree())) == [4, 2, 5, 1, 6, 3, 7]


def test_preorder_demo():
    assert list(preorder(_demo_tree())) == [1, 2, 4, 5, 3, 6, 7]


def test_postorder_demo():
    assert list(postorder(_demo_tree())) == [4, 5, 2, 6, 7, 3, 1]


def test_level_order_demo():
    assert list(level_order(_demo_tree())) == list(range(1, 8))


def test_empty_tree():
    assert list(inorder(None)) == []
    assert list(preorder(None)) == []
    assert list(postorder(None)) == []
    assert list(level_order(None)) == []


def _bst_insert(root, value):
    if root is None:
        return TreeNode(value)
    if value < root.data:
        root.left = _bst_insert(root.left, value)
    else:
        root.right = _bst_insert(root.right, value)
    return root


def _build_bst(values):
    root = None
    for value in values:
        root = _bst_insert(root, value)
    return root


def _mirror(root):
    if root is None:
        return None
    return TreeNode(root.data, _mirror(root.right), _mirror(root.left))


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_inorder_of_search_tree_is_sorted(values):
    assert list(inorder(_build_bst(values))) == sorted(values)


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_every_traversal_visits_every_node(values):
    root = _build_bst(values)
    for traversal in (inorder, preorder, postorder, level_order):
        assert sorted(traversal(root)) == sorted(values)


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_root_position(values):
    root = _build_bst(values)
    assert next(preorder(root)) == values[0]
    assert list(postorder(root))[-1] == values[0]
    assert next(level_order(root)) == values[0]


@given(st.lists(st.integers(), max_size=40))
def test_postorder_is_reversed_preorder_of_mirror(values):
    root = _build_bst(values)
    assert list(postorder(root)) == list(preorder(_mirror(root)))[::-1]