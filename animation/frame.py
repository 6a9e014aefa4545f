"""
frame.py — Animation Frame Snapshot
====================================
Every generator returns an ordered list of Frame objects.
A Frame is a frozen-in-time picture of everything the canvas needs to
render one animation step:

    • Which value is highlighted and where the pointer sits
    • Which values have been visited so far (insertion order)
    • The in-progress path stack (traversals only)
    • Which edges have been traced so far
    • A short plain-English explanation (learning panel)

Design decisions:
  - Frame is a frozen dataclass with tuple fields, so a frame can be
    compared, hashed and replayed in any order.  Seeking to frame i never
    needs frames 0..i-1.
  - FrameBuilder is the generators' only mutable state; build() copies
    the accumulators into a fresh Frame.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, List, Dict, Any

from tree.layout import Point


@dataclass(frozen=True)
class ConnectedEdge:
    from_value: int
    from_point: Point
    to_value:   int
    to_point:   Point

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": {"x": self.from_point.x, "y": self.from_point.y, "value": self.from_value},
            "to":   {"x": self.to_point.x,   "y": self.to_point.y,   "value": self.to_value},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConnectedEdge":
        src, dst = data["from"], data["to"]
        return cls(
            from_value=src["value"],
            from_point=Point(src["x"], src["y"]),
            to_value=dst["value"],
            to_point=Point(dst["x"], dst["y"]),
        )


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        step_number     : 0-based index of this frame in its sequence.
        highlighted     : Value under the pointer (None = nothing current).
        pointer         : Canvas coordinate of the pointer (None = hidden).
        visited         : Values visited so far, in visiting order.
        path_nodes      : Entered-but-not-exited values (bottom → top of stack).
        connected_edges : Edges traced so far, in tracing order.
        explanation     : Human-readable text for the learning panel.
        is_final        : True on the last frame of the sequence.
    """

    step_number:     int                        = 0
    highlighted:     Optional[int]              = None
    pointer:         Optional[Point]            = None
    visited:         Tuple[int, ...]            = ()
    path_nodes:      Tuple[int, ...]            = ()
    connected_edges: Tuple[ConnectedEdge, ...]  = ()
    explanation:     str                        = ""
    is_final:        bool                       = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "highlighted":     self.highlighted,
            "pointer":         {"x": self.pointer.x, "y": self.pointer.y} if self.pointer else None,
            "visited":         list(self.visited),
            "path_nodes":      list(self.path_nodes),
            "connected_edges": [e.to_dict() for e in self.connected_edges],
            "explanation":     self.explanation,
            "is_final":        self.is_final,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Frame":
        ptr = data.get("pointer")
        return cls(
            step_number=data.get("step_number", 0),
            highlighted=data.get("highlighted"),
            pointer=Point(ptr["x"], ptr["y"]) if ptr else None,
            visited=tuple(data.get("visited", [])),
            path_nodes=tuple(data.get("path_nodes", [])),
            connected_edges=tuple(ConnectedEdge.from_dict(e) for e in data.get("connected_edges", [])),
            explanation=data.get("explanation", ""),
            is_final=data.get("is_final", False),
        )


# ---------------------------------------------------------------------------
# Builder so generators don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class FrameBuilder:
    """
    Mutable scratch-pad the generators accumulate into.

    Usage inside a generator:
        fb = FrameBuilder()
        fb.move_to(15, Point(400, 50))
        fb.visit(15)
        fb.explanation = "Compare with 15."
        frames.append(fb.build())
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.highlighted:     Optional[int]        = None
        self.pointer:         Optional[Point]      = None
        self.visited:         List[int]            = []
        self.path_nodes:      List[int]            = []
        self.connected_edges: List[ConnectedEdge]  = []
        self.explanation:     str                  = ""
        self._step_no:        int                  = 0

    # -- helpers --
    def move_to(self, value: Optional[int], point: Optional[Point]):
        self.highlighted = value
        self.pointer = point

    def clear_pointer(self):
        self.highlighted = None
        self.pointer = None

    def visit(self, value: int):
        self.visited.append(value)

    def push(self, value: int):
        self.path_nodes.append(value)

    def pop(self) -> Optional[int]:
        return self.path_nodes.pop() if self.path_nodes else None

    def connect(self, from_value: int, from_point: Point, to_value: int, to_point: Point):
        self.connected_edges.append(ConnectedEdge(from_value, from_point, to_value, to_point))

    def build(self, is_final: bool = False) -> Frame:
        frame = Frame(
            step_number=self._step_no,
            highlighted=self.highlighted,
            pointer=self.pointer,
            visited=tuple(self.visited),
            path_nodes=tuple(self.path_nodes),
            connected_edges=tuple(self.connected_edges),
            explanation=self.explanation,
            is_final=is_final,
        )
        self._step_no += 1
        return frame


def mark_final(frames: List[Frame]) -> List[Frame]:
    """Return `frames` with the last one flagged is_final."""
    if frames and not frames[-1].is_final:
        frames[-1] = replace(frames[-1], is_final=True)
    return frames
