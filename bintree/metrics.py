"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from bintree.node import BinaryTreeNode


def height(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def _levels(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def nodes(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return 1 + nodes(tree.left) + nodes(tree.right)


def balance(tree: Optional[BinaryTreeNode]) -> int:
    """Return the left subtree's level count minus the right's; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if the tree is full and balanced at its root."""
    if tree is None:
        return False
    return is_full(tree) and balance(tree) == 0