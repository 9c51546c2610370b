"""Binary tree nodes that link to their parent and children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class BinaryTreeNode:
    """A node holding an integer, linked to its parent and two children.

    Creating a node with a parent does not attach it to that parent; the
    caller decides which side it goes on.
    """

    value: int
    parent: Optional[BinaryTreeNode] = field(default=None, repr=False)
    left: Optional[BinaryTreeNode] = None
    right: Optional[BinaryTreeNode] = None

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; an existing left child becomes its left child."""
        if value == 0:
            raise ValueError("value must be non-zero")
        new_node = BinaryTreeNode(value, self)
        if self.left is not None:
            new_node.left = self.left
            new_node.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; an existing right child becomes its right child."""
        if value == 0:
            raise ValueError("value must be non-zero")
        new_node = BinaryTreeNode(value, self)
        if self.right is not None:
            new_node.right = self.right
            new_node.right.parent = new_node
        self.right = new_node
        return new_node

    def _subtree(self) -> Iterator[BinaryTreeNode]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in (node.right, node.left) if child is not None)

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink all of its nodes."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        for node in list(self._subtree()):
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Optional[BinaryTreeNode]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[BinaryTreeNode]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()