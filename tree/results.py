"""
results.py — Operation Result Records
======================================
Every engine operation returns one of these instead of raising.

    DuplicateValue  →  InsertResult(success=False, ...)
    NotFound        →  SearchResult(found=False, ...) / RemoveResult(success=False, ...)
    EmptyTree       →  ExtremumResult(value=None, path=[]) / empty traversal values

`to_dict()` gives the JSON shape the web layer returns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any


# ---------------------------------------------------------------------------
# Traversal events
# ---------------------------------------------------------------------------
class TraversalAction(Enum):
    ENTER = "enter"   # node reached going down
    VISIT = "visit"   # value emitted in traversal order
    EXIT  = "exit"    # returning from node to its caller


@dataclass(frozen=True)
class TraversalEvent:
    value:  int
    action: TraversalAction

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "action": self.action.value}


# ---------------------------------------------------------------------------
# Path-producing operations
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class InsertResult:
    success: bool
    path:    List[int] = field(default_factory=list)
    message: str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "path": list(self.path), "message": self.message}


@dataclass(frozen=True)
class SearchResult:
    found:   bool
    path:    List[int] = field(default_factory=list)
    message: str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"found": self.found, "path": list(self.path), "message": self.message}


@dataclass(frozen=True)
class RemoveResult:
    success: bool
    path:    List[int] = field(default_factory=list)
    message: str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "path": list(self.path), "message": self.message}


@dataclass(frozen=True)
class ExtremumResult:
    value:   Optional[int]
    path:    List[int] = field(default_factory=list)
    message: str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "path": list(self.path), "message": self.message}


@dataclass(frozen=True)
class ClearResult:
    success: bool = True
    message: str  = "Tree cleared"

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "message": self.message}


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraversalResult:
    values:  List[int] = field(default_factory=list)
    message: str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"values": list(self.values), "message": self.message}


@dataclass(frozen=True)
class DetailedTraversalResult:
    values:  List[int]            = field(default_factory=list)
    steps:   List[TraversalEvent] = field(default_factory=list)
    message: str                  = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values":  list(self.values),
            "steps":   [e.to_dict() for e in self.steps],
            "message": self.message,
        }
