"""Binary trees of integers with parent links, traversals and structural metrics."""

__version__ = "0.1.0"
__all__ = ["metrics", "node", "traversal"]