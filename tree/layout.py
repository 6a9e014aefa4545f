"""
layout.py — Coordinate Provider
================================
Assigns every value in the tree a 2-D canvas position.  The frame
generator only ever sees the value → Point mapping produced here.

Placement:
  - root at the horizontal centre of the canvas
  - each child centred in its half of the parent's horizontal interval
  - y grows by `vertical_spacing` per level
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple

from tree.bst import BinarySearchTree
from tree.node import TreeNode


CANVAS_WIDTH     = 800
VERTICAL_SPACING = 70
TOP_MARGIN       = 50


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class NodeLayout:
    value: int
    x:     float
    y:     float
    left:  Optional[int] = None
    right: Optional[int] = None

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict:
        return {"value": self.value, "x": self.x, "y": self.y, "left": self.left, "right": self.right}


def compute_layout(
    tree: BinarySearchTree,
    width: float = CANVAS_WIDTH,
    vertical_spacing: float = VERTICAL_SPACING,
    top_margin: float = TOP_MARGIN,
) -> List[NodeLayout]:
    """Return one NodeLayout per node, in preorder."""
    nodes: List[NodeLayout] = []
    if tree.root is None:
        return nodes

    # (node, depth, left bound, right bound)
    stack: List[Tuple[TreeNode, int, float, float]] = [(tree.root, 0, 0.0, float(width))]
    while stack:
        node, depth, lo, hi = stack.pop()
        x = (lo + hi) / 2
        y = top_margin + depth * vertical_spacing
        nodes.append(NodeLayout(
            value=node.value,
            x=x,
            y=y,
            left=node.left.value if node.left else None,
            right=node.right.value if node.right else None,
        ))
        # right pushed first so the left subtree is laid out first
        if node.right is not None:
            stack.append((node.right, depth + 1, x, hi))
        if node.left is not None:
            stack.append((node.left, depth + 1, lo, x))

    return nodes


def coordinates(layout: List[NodeLayout]) -> Dict[int, Point]:
    """value → Point lookup for the frame generator."""
    return {n.value: n.point for n in layout}


def layout_edges(layout: List[NodeLayout]) -> List[Tuple[int, int]]:
    """(parent_value, child_value) pairs, left child first."""
    edges: List[Tuple[int, int]] = []
    for n in layout:
        if n.left is not None:
            edges.append((n.value, n.left))
        if n.right is not None:
            edges.append((n.value, n.right))
    return edges
