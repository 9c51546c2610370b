import pytest

from bintree.node import BinaryTreeNode


def _sample_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(128, root)
    root.left.right = BinaryTreeNode(54, root.left)
    root.right.right = BinaryTreeNode(402, root.right)
    root.left.left = BinaryTreeNode(10, root.left)
    root.right.left = BinaryTreeNode(110, root.right)
    root.right.right.left = BinaryTreeNode(200, root.right.right)
    root.right.right.right = BinaryTreeNode(512, root.right.right)
    return root


def test_new_node_is_not_attached_to_parent():
    root = BinaryTreeNode(98)
    child = BinaryTreeNode(12, root)
    assert child.parent is root
    assert child.value == 12
    assert root.left is None and root.right is None


def test_insert_left_on_empty_slot():
    root = BinaryTreeNode(98)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.value == 54
    assert new.left is None and new.right is None


def test_insert_left_pushes_existing_child_down():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    old = root.left
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = BinaryTreeNode(98)
    root.right = BinaryTreeNode(402, root)
    old = root.right
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


@pytest.mark.parametrize("method", ["insert_left", "insert_right"])
def test_insert_zero_is_rejected(method):
    root = BinaryTreeNode(98)
    with pytest.raises(ValueError):
        getattr(root, method)(0)
    assert root.left is None and root.right is None


def test_is_leaf_and_is_root():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_root() is True
    assert root.is_leaf() is False
    assert root.right.is_root() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True


def test_depth_of_root_is_zero():
    root = _sample_tree()
    assert root.depth() == 0


def test_depth_grows_by_one_per_level():
    root = _sample_tree()
    for node in (root.left, root.right, root.right.right, root.right.right.left):
        assert node.depth() == node.parent.depth() + 1


def test_sibling():
    root = _sample_tree()
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_sibling_missing_when_only_child():
    root = BinaryTreeNode(98)
    only = root.insert_left(12)
    assert only.sibling() is None


def test_uncle():
    root = _sample_tree()
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_delete_detaches_subtree():
    root = _sample_tree()
    sub = root.right
    grandchild = sub.right
    sub.delete()
    assert root.right is None
    assert root.left is not None and root.left.value == 12
    assert sub.parent is None and sub.left is None and sub.right is None
    assert grandchild.parent is None
    assert grandchild.left is None and grandchild.right is None


def test_delete_root_unlinks_all():
    root = _sample_tree()
    leaf = root.left.left
    root.delete()
    assert root.is_leaf() is True
    assert leaf.is_root() is True