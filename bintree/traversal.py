"""Depth-first traversals yielding node values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from bintree.node import BinaryTreeNode


def preorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value