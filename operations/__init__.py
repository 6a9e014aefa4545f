"""
operations/__init__.py — Operation Registry
============================================
Single source of truth for every operation the visualizer can animate.

    from operations import REGISTRY, get_operation

REGISTRY is a dict:
    {
        "insert": OperationInfo(key, label, fn, kind, pseudocode, …),
        …
    }

The recorder and UI both consume OperationInfo, so adding an operation is:
add the engine method, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from tree import BinarySearchTree


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------
KIND_PATH      = "path"        # result carries a descent path
KIND_TRAVERSAL = "traversal"   # result carries an enter/visit/exit log

# final-highlight policies
HIGHLIGHT_NONE   = ""
HIGHLIGHT_FOUND  = "found"     # highlight the searched value when found
HIGHLIGHT_RESULT = "result"    # highlight result.value (min / max)


# ---------------------------------------------------------------------------
# OperationInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OperationInfo:
    key:              str                     # registry key, e.g. "insert"
    label:            str                     # human label, e.g. "Insert"
    fn:               Callable[..., Any]      # unbound BinarySearchTree method
    kind:             str                     # KIND_PATH / KIND_TRAVERSAL
    pseudocode:       List[str] = field(default_factory=list)
    needs_value:      bool      = False       # fn(tree, value) vs fn(tree)
    mutates:          bool      = False
    snapshot_before:  bool      = False       # take the layout before running fn
    highlight:        str       = HIGHLIGHT_NONE
    complexity_time:  str       = "O(h)"
    description:      str       = ""

    def final_highlight(self, result: Any, value: Optional[int]) -> Optional[int]:
        """The value the last frame should highlight, if any."""
        if self.highlight == HIGHLIGHT_FOUND and getattr(result, "found", False):
            return value
        if self.highlight == HIGHLIGHT_RESULT:
            return getattr(result, "value", None)
        return None


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, OperationInfo] = {

    "insert": OperationInfo(
        key="insert", label="Insert", fn=BinarySearchTree.insert, kind=KIND_PATH,
        needs_value=True, mutates=True,
        pseudocode=[
            "Insert(v):",
            "  if tree is empty, create root(v)",
            "  else, compare v with current node:",
            "    if v < current, go left",
            "    if v > current, go right",
            "  insert when a null child is reached",
        ],
        description="Descends like a search and attaches a new leaf. Duplicates are rejected.",
    ),

    "search": OperationInfo(
        key="search", label="Search", fn=BinarySearchTree.search, kind=KIND_PATH,
        needs_value=True, highlight=HIGHLIGHT_FOUND,
        pseudocode=[
            "Search(v):",
            "  if current is null, return not found",
            "  if v == current, return found",
            "  if v < current, search left",
            "  if v > current, search right",
        ],
        description="Compares and discards half of the remaining subtree at every step.",
    ),

    "remove": OperationInfo(
        key="remove", label="Remove", fn=BinarySearchTree.remove, kind=KIND_PATH,
        needs_value=True, mutates=True, snapshot_before=True,
        pseudocode=[
            "Remove(v):",
            "  search for v",
            "  if v is a leaf: detach v",
            "  if v has 1 child: replace v with the child",
            "  if v has 2 children: replace v with its successor",
        ],
        description="Leaf, one-child and two-children cases; the successor is the leftmost right descendant.",
    ),

    "find_min": OperationInfo(
        key="find_min", label="Find Min", fn=BinarySearchTree.find_min, kind=KIND_PATH,
        highlight=HIGHLIGHT_RESULT,
        pseudocode=[
            "FindMin:",
            "  start at root",
            "  go left until node.left is null",
            "  return node.value",
        ],
        description="The minimum is the leftmost node.",
    ),

    "find_max": OperationInfo(
        key="find_max", label="Find Max", fn=BinarySearchTree.find_max, kind=KIND_PATH,
        highlight=HIGHLIGHT_RESULT,
        pseudocode=[
            "FindMax:",
            "  start at root",
            "  go right until node.right is null",
            "  return node.value",
        ],
        description="The maximum is the rightmost node.",
    ),

    "inorder": OperationInfo(
        key="inorder", label="Inorder", fn=BinarySearchTree.inorder_detailed, kind=KIND_TRAVERSAL,
        complexity_time="O(n)",
        pseudocode=[
            "Inorder(node):",
            "  if node is null return",
            "  Inorder(node.left)",
            "  Print node.value",
            "  Inorder(node.right)",
        ],
        description="Left, root, right. Yields the values in ascending order.",
    ),

    "preorder": OperationInfo(
        key="preorder", label="Preorder", fn=BinarySearchTree.preorder_detailed, kind=KIND_TRAVERSAL,
        complexity_time="O(n)",
        pseudocode=[
            "Preorder(node):",
            "  if node is null return",
            "  Print node.value",
            "  Preorder(node.left)",
            "  Preorder(node.right)",
        ],
        description="Root, left, right. Re-inserting this order rebuilds the same tree.",
    ),

    "postorder": OperationInfo(
        key="postorder", label="Postorder", fn=BinarySearchTree.postorder_detailed, kind=KIND_TRAVERSAL,
        complexity_time="O(n)",
        pseudocode=[
            "Postorder(node):",
            "  if node is null return",
            "  Postorder(node.left)",
            "  Postorder(node.right)",
            "  Print node.value",
        ],
        description="Left, right, root. Children are always output before their parent.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(key: str) -> Optional[OperationInfo]:
    """Return OperationInfo by key, or None."""
    return REGISTRY.get(key)


def list_operations() -> List[OperationInfo]:
    """Return all registered operations in insertion order."""
    return list(REGISTRY.values())


def operations_by_kind(kind: str) -> List[OperationInfo]:
    return [op for op in REGISTRY.values() if op.kind == kind]


__all__ = [
    "OperationInfo",
    "REGISTRY",
    "KIND_PATH",
    "KIND_TRAVERSAL",
    "get_operation",
    "list_operations",
    "operations_by_kind",
]
