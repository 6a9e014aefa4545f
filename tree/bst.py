"""
bst.py — Binary Search Tree Engine
===================================
Single source of truth for the tree.  The animation layer never touches
this structure directly; it only consumes the paths and event logs the
operations return.

Responsibilities:
  1. Mutations                    (insert / remove / clear)
  2. Queries with descent paths   (search / find_min / find_max)
  3. Traversals                   (plain + detailed enter/visit/exit logs)
  4. Metrics                      (height, size)
  5. Serialisation round-trip     (to_dict / from_dict)
  6. Preset factories             (perfect, random, skewed, …)

Design decisions:
  - Every operation returns a result record; duplicates, missing values and
    empty trees are outcomes, not exceptions.
  - remove() tracks the parent and side as local descent state.  There is
    no stored parent pointer.
  - Traversals and height use explicit stacks so a fully skewed tree never
    hits the Python recursion limit.
  - The two-children removal overwrites the removed node's value with the
    successor's and excises the successor node.  The animation references
    values, so the surviving node must keep its slot.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple, Iterable

from tree.node import TreeNode
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

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Traversal orders — the per-node schedule the walker follows
# ---------------------------------------------------------------------------
_ENTER, _LEFT, _VISIT, _RIGHT, _EXIT = "enter", "left", "visit", "right", "exit"

TRAVERSAL_ORDERS: Dict[str, Tuple[str, ...]] = {
    "inorder":   (_ENTER, _LEFT, _VISIT, _RIGHT, _EXIT),
    "preorder":  (_ENTER, _VISIT, _LEFT, _RIGHT, _EXIT),
    "postorder": (_ENTER, _LEFT, _RIGHT, _VISIT, _EXIT),
}

_TRAVERSAL_LABELS = {
    "inorder":   "Inorder",
    "preorder":  "Preorder",
    "postorder": "Postorder",
}


# ---------------------------------------------------------------------------
# Preset trees
# ---------------------------------------------------------------------------
PRESETS: Dict[str, str] = {
    "empty":        "Empty",
    "perfect":      "Perfect BST",
    "random":       "Random BST",
    "skewed_right": "Skewed Right",
    "skewed_left":  "Skewed Left",
}


class BinarySearchTree:
    """
    Attributes:
        root : The root TreeNode, or None for an empty tree.
    """

    def __init__(self):
        self.root: Optional[TreeNode] = None

    # ==================================================================
    # MUTATIONS
    # ==================================================================
    def insert(self, value: int) -> InsertResult:
        path: List[int] = []

        if self.root is None:
            self.root = TreeNode(value)
            path.append(value)
            logger.debug("insert %s: new root", value)
            return InsertResult(success=True, path=path, message=f"Inserted {value} as root")

        current = self.root
        while True:
            path.append(current.value)

            if value == current.value:
                logger.debug("insert %s: duplicate after %d comparisons", value, len(path))
                return InsertResult(
                    success=False,
                    path=path,
                    message=f"Duplicate value {value} not allowed",
                )

            if value < current.value:
                if current.left is None:
                    current.left = TreeNode(value)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(value)
                    break
                current = current.right

        path.append(value)
        logger.debug("insert %s: attached under %s", value, current.value)
        return InsertResult(success=True, path=path, message=f"Inserted {value}")

    def remove(self, value: int) -> RemoveResult:
        path: List[int] = []
        parent: Optional[TreeNode] = None
        current = self.root
        is_left_child = False

        # -- locate the target --
        while current is not None and current.value != value:
            path.append(current.value)
            parent = current
            if value < current.value:
                current = current.left
                is_left_child = True
            else:
                current = current.right
                is_left_child = False

        if current is None:
            logger.debug("remove %s: not found", value)
            return RemoveResult(success=False, path=path, message=f"Value {value} not found")

        path.append(current.value)

        # -- case 1: leaf --
        if current.is_leaf:
            self._replace_child(parent, is_left_child, None)
            logger.debug("remove %s: leaf", value)
            return RemoveResult(success=True, path=path, message=f"Removed leaf node {value}")

        # -- case 2: one child (child is spliced in, not added to the path) --
        if current.left is None or current.right is None:
            child = current.left if current.left is not None else current.right
            self._replace_child(parent, is_left_child, child)
            logger.debug("remove %s: one child", value)
            return RemoveResult(success=True, path=path, message=f"Removed {value} (one child)")

        # -- case 3: two children → in-order successor --
        successor_parent = current
        successor = current.right
        assert successor is not None, "two-children node without a right subtree"

        while successor.left is not None:
            path.append(successor.value)
            successor_parent = successor
            successor = successor.left
        path.append(successor.value)

        current.value = successor.value

        # the successor has at most a right child
        if successor_parent is current:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right

        logger.debug("remove %s: two children, replaced with %s", value, successor.value)
        return RemoveResult(
            success=True,
            path=path,
            message=f"Removed {value} (two children, replaced with {successor.value})",
        )

    def clear(self) -> ClearResult:
        self.root = None
        logger.debug("tree cleared")
        return ClearResult()

    def _replace_child(self, parent: Optional[TreeNode], is_left_child: bool, child: Optional[TreeNode]) -> None:
        if parent is None:
            self.root = child
        elif is_left_child:
            parent.left = child
        else:
            parent.right = child

    # ==================================================================
    # QUERIES
    # ==================================================================
    def search(self, value: int) -> SearchResult:
        path: List[int] = []
        current = self.root

        while current is not None:
            path.append(current.value)
            if value == current.value:
                return SearchResult(found=True, path=path, message=f"Found {value}")
            current = current.left if value < current.value else current.right

        return SearchResult(found=False, path=path, message=f"Value {value} not found")

    def find_min(self) -> ExtremumResult:
        return self._find_extremum(go_left=True)

    def find_max(self) -> ExtremumResult:
        return self._find_extremum(go_left=False)

    def _find_extremum(self, go_left: bool) -> ExtremumResult:
        path: List[int] = []
        if self.root is None:
            return ExtremumResult(value=None, path=path, message="Tree is empty")

        current = self.root
        while True:
            path.append(current.value)
            nxt = current.left if go_left else current.right
            if nxt is None:
                break
            current = nxt

        label = "Minimum" if go_left else "Maximum"
        return ExtremumResult(value=current.value, path=path, message=f"{label} value is {current.value}")

    def height(self) -> int:
        """-1 for an empty tree, otherwise 1 + max(child heights)."""
        if self.root is None:
            return -1

        heights: Dict[TreeNode, int] = {}
        stack: List[Tuple[TreeNode, bool]] = [(self.root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                left_h  = heights.pop(node.left)  if node.left  else -1
                right_h = heights.pop(node.right) if node.right else -1
                heights[node] = 1 + max(left_h, right_h)
                continue
            stack.append((node, True))
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, False))

        return heights[self.root]

    # ==================================================================
    # TRAVERSALS
    # ==================================================================
    def inorder(self) -> TraversalResult:
        return self._plain("inorder")

    def preorder(self) -> TraversalResult:
        return self._plain("preorder")

    def postorder(self) -> TraversalResult:
        return self._plain("postorder")

    def inorder_detailed(self) -> DetailedTraversalResult:
        return self._detailed("inorder")

    def preorder_detailed(self) -> DetailedTraversalResult:
        return self._detailed("preorder")

    def postorder_detailed(self) -> DetailedTraversalResult:
        return self._detailed("postorder")

    def _plain(self, kind: str) -> TraversalResult:
        values, _ = self._walk(TRAVERSAL_ORDERS[kind])
        return TraversalResult(values=values, message=_traversal_message(kind, values))

    def _detailed(self, kind: str) -> DetailedTraversalResult:
        values, steps = self._walk(TRAVERSAL_ORDERS[kind])
        return DetailedTraversalResult(values=values, steps=steps, message=_traversal_message(kind, values))

    def _walk(self, order: Tuple[str, ...]) -> Tuple[List[int], List[TraversalEvent]]:
        """
        Iterative depth-first walk.  Each stack entry is (node, stage) where
        stage indexes into `order`; the continuation is pushed before the
        child so the child's whole subtree runs first.
        """
        values: List[int] = []
        steps:  List[TraversalEvent] = []
        if self.root is None:
            return values, steps

        stack: List[Tuple[TreeNode, int]] = [(self.root, 0)]
        while stack:
            node, stage = stack.pop()
            if stage + 1 < len(order):
                stack.append((node, stage + 1))

            op = order[stage]
            if op == _ENTER:
                steps.append(TraversalEvent(node.value, TraversalAction.ENTER))
            elif op == _VISIT:
                values.append(node.value)
                steps.append(TraversalEvent(node.value, TraversalAction.VISIT))
            elif op == _EXIT:
                steps.append(TraversalEvent(node.value, TraversalAction.EXIT))
            elif op == _LEFT and node.left is not None:
                stack.append((node.left, 0))
            elif op == _RIGHT and node.right is not None:
                stack.append((node.right, 0))

        return values, steps

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        # re-inserting a preorder sequence rebuilds the identical shape
        return {"values": self.preorder().values}

    @classmethod
    def from_dict(cls, data: dict) -> "BinarySearchTree":
        return cls.from_values(data.get("values", []))

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "BinarySearchTree":
        """Batch insert; duplicates are ignored like any other insert."""
        t = cls()
        for v in values:
            t.insert(v)
        return t

    # ==================================================================
    # PRESETS
    # ==================================================================
    @classmethod
    def generate_preset(cls, name: str, seed: Optional[int] = None) -> "BinarySearchTree":
        if name not in PRESETS:
            raise ValueError(f"Unknown preset: {name}")

        if name == "perfect":
            values = [15, 6, 23, 4, 7, 20, 50]
        elif name == "random":
            rng = random.Random(seed)
            values = rng.sample(range(1, 100), 8)
        elif name == "skewed_right":
            values = [10, 20, 30, 40, 50]
        elif name == "skewed_left":
            values = [50, 40, 30, 20, 10]
        else:
            values = []

        logger.debug("preset %s: %s", name, values)
        return cls.from_values(values)

    # ==================================================================
    # UTILITY
    # ==================================================================
    def values(self) -> List[int]:
        return self.inorder().values

    def __len__(self) -> int:
        return len(self.values())

    def __contains__(self, value: int) -> bool:
        return self.search(value).found

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={len(self)}, height={self.height()})"


def _traversal_message(kind: str, values: List[int]) -> str:
    joined = " → ".join(str(v) for v in values)
    return f"{_TRAVERSAL_LABELS[kind]}: {joined or 'Empty tree'}"
