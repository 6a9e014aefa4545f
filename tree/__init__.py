"""
tree/
-----
Core data layer.  Public API:

    from tree import BinarySearchTree, TreeNode
    from tree import compute_layout, coordinates, Point
"""

from tree.node    import TreeNode
from tree.results import (
    InsertResult,
    SearchResult,
    RemoveResult,
    ExtremumResult,
    ClearResult,
    TraversalResult,
    DetailedTraversalResult,
    TraversalEvent,
    TraversalAction,
)
from tree.bst     import BinarySearchTree, PRESETS, TRAVERSAL_ORDERS
from tree.layout  import Point, NodeLayout, compute_layout, coordinates, layout_edges

__all__ = [
    "TreeNode",
    "BinarySearchTree",
    "PRESETS",
    "TRAVERSAL_ORDERS",
    "InsertResult",
    "SearchResult",
    "RemoveResult",
    "ExtremumResult",
    "ClearResult",
    "TraversalResult",
    "DetailedTraversalResult",
    "TraversalEvent",
    "TraversalAction",
    "Point",
    "NodeLayout",
    "compute_layout",
    "coordinates",
    "layout_edges",
]
