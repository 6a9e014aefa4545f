"""
node.py — BST Node
===================
A single node of the binary search tree.

Ownership:
  Each node exclusively owns its `left` / `right` children.  There is no
  parent back-reference; operations that need the parent (remove) keep it
  as local descent state.
"""

from typing import Optional


class TreeNode:
    """
    Attributes:
        value : Unique integer key.
        left  : Left child (all values < value) or None.
        right : Right child (all values > value) or None.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: int):
        self.value: int                   = value
        self.left:  Optional["TreeNode"]  = None
        self.right: Optional["TreeNode"]  = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"TreeNode({self.value})"
