# bintree

A small binary tree of integers in which every node has a link to its parent.
With it you can insert children, walk the tree and measure its shape.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.node import BinaryTreeNode

root = BinaryTreeNode(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)
```

`BinaryTreeNode` is a dataclass with the fields `value`, `parent`, `left` and
`right`. If you create a node with `BinaryTreeNode(value, parent)`, it is not
attached to that parent. To attach it, assign it to `parent.left` or
`parent.right` yourself.

`insert_left(value)` and `insert_right(value)` create a child, attach it and
return it. If a child already sits on that side, it moves down and becomes the
same-side child of the new node. A value of `0` raises `ValueError`.

A node can also tell you about its own position:

- `is_leaf()`: `True` when the node has no children.
- `is_root()`: `True` when the node has no parent.
- `depth()`: the number of edges between the node and the root.
- `sibling()`: the other child of the node's parent, or `None`.
- `uncle()`: the sibling of the node's parent, or `None`.
- `delete()`: detaches the node from its parent and clears the parent and child
  links of every node in its subtree.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402, 128]
list(inorder(root))    # [12, 54, 98, 402, 128]
list(postorder(root))  # [54, 12, 128, 402, 98]
```

Each traversal is a generator that yields node values. An empty tree (`None`)
yields nothing.

## Metrics

```python
from bintree.metrics import height, size, leaves, nodes, balance, is_full, is_perfect
```

| Function | Returns |
| --- | --- |
| `height(tree)` | The number of edges on the longest downward path. A leaf gives `0`. |
| `size(tree)` | The total number of nodes. |
| `leaves(tree)` | The number of nodes with no children. |
| `nodes(tree)` | The number of nodes with at least one child. |
| `balance(tree)` | The number of levels in the left subtree minus the number in the right subtree. An empty subtree has zero levels and a single node has one. |
| `is_full(tree)` | `True` when every node has either zero or two children. |
| `is_perfect(tree)` | `True` when the tree is full and `balance` at the root is `0`. |

Every metric accepts `None`. For `None`, the counts and `balance` return `0`,
and `is_full` and `is_perfect` return `False`.

## What it does not do

The package is a library only. It has no command-line program, and it cannot
draw or print a tree as text. Use the traversals or the node fields to inspect a
tree.

## Running the tests

```
pip install .[test]
pytest
```