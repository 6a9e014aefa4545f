"""
recorder.py — Operation Recorder & Analytics
=============================================
Runs one operation end-to-end and keeps everything the UI needs to play
it back:

    engine call  →  layout snapshot  →  frames  →  metrics

Usage:
    rec = Recorder()
    rec.run("search", tree, value=20)   # returns RunMetrics
    rec.frames                          # the animation
    rec.export()                        # serialisable snapshot for the session

Snapshot timing:
    The layout is captured once per run.  Operations flagged
    `snapshot_before` (remove) are laid out before the mutation so every
    value on the descent path still has a coordinate; all others are laid
    out afterwards so an inserted value is on the canvas.
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from animation import Frame, frames_from_path, frames_from_events
from engine.stepper import Stepper
from operations import OperationInfo, get_operation, KIND_TRAVERSAL
from tree import BinarySearchTree, NodeLayout, compute_layout, coordinates

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    op_key:        str   = ""
    op_label:      str   = ""
    value:         Optional[int] = None
    success:       bool  = False       # inserted / found / removed / non-empty
    nodes_visited: int   = 0           # distinct values on the path or visited by the traversal
    path_length:   int   = 0           # entries in the descent path (or traversal values)
    edges_traced:  int   = 0           # connected edges on the final frame
    total_frames:  int   = 0
    tree_size:     int   = 0           # after the operation
    tree_height:   int   = -1          # after the operation
    wall_time_ms:  float = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames  : Frame sequence of the last run.
        layout  : Layout snapshot the frames were generated against.
        result  : Raw engine result of the last run.
        metrics : RunMetrics of the last run.
        stepper : A Stepper loaded with `frames`.
    """

    def __init__(self):
        self.frames:   List[Frame]          = []
        self.layout:   List[NodeLayout]     = []
        self.result:   Any                  = None
        self.metrics:  Optional[RunMetrics] = None
        self.stepper:  Optional[Stepper]    = None

        self._op:     Optional[OperationInfo] = None
        self._value:  Optional[int]           = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(self, op_key: str, tree: BinarySearchTree, value: Optional[int] = None) -> RunMetrics:
        info = get_operation(op_key)
        if info is None:
            raise ValueError(f"Unknown operation: {op_key}")
        if info.needs_value and value is None:
            raise ValueError(f"Operation '{op_key}' needs a value")

        self._op    = info
        self._value = value if info.needs_value else None

        start = time.monotonic()

        if info.snapshot_before:
            self.layout = compute_layout(tree)
        self.result = info.fn(tree, value) if info.needs_value else info.fn(tree)
        if not info.snapshot_before:
            self.layout = compute_layout(tree)

        coords = coordinates(self.layout)
        if info.kind == KIND_TRAVERSAL:
            self.frames = frames_from_events(self.result.steps, coords)
        else:
            self.frames = frames_from_path(
                self.result.path,
                coords,
                final_highlight=info.final_highlight(self.result, value),
            )

        wall_ms = (time.monotonic() - start) * 1000
        self.metrics = self._compute_metrics(tree, wall_ms)

        self.stepper = Stepper()
        self.stepper.load(self.frames)

        logger.debug(
            "%s(%s): %s (%d frames)",
            info.key, "" if self._value is None else self._value,
            getattr(self.result, "message", ""), len(self.frames),
        )
        return self.metrics

    @property
    def operation(self) -> Optional[OperationInfo]:
        return self._op

    @property
    def value(self) -> Optional[int]:
        return self._value

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self._op is None:
            raise RuntimeError("Call run() first.")
        return {
            "op_key":  self._op.key,
            "value":   self._value,
            "result":  self.result.to_dict(),
            "layout":  [n.to_dict() for n in self.layout],
            "metrics": asdict(self.metrics) if self.metrics else {},
            "frames":  [f.to_dict() for f in self.frames],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, tree: BinarySearchTree, wall_ms: float) -> RunMetrics:
        info = self._op
        res  = self.result
        last = self.frames[-1] if self.frames else None

        if info.kind == KIND_TRAVERSAL:
            trace = res.values
            success = bool(res.values)
        else:
            trace = res.path
            success = _succeeded(res)

        return RunMetrics(
            op_key=info.key,
            op_label=info.label,
            value=self._value,
            success=success,
            nodes_visited=len(set(trace)),
            path_length=len(trace),
            edges_traced=len(last.connected_edges) if last else 0,
            total_frames=len(self.frames),
            tree_size=len(tree),
            tree_height=tree.height(),
            wall_time_ms=round(wall_ms, 2),
        )


def _succeeded(result: Any) -> bool:
    for attr in ("success", "found"):
        if hasattr(result, attr):
            return bool(getattr(result, attr))
    # min / max
    return getattr(result, "value", None) is not None
