"""
path_frames.py — Descent Path → Frames
=======================================
Used by insert / search / remove / find_min / find_max.

Emits a frame at:
  1. The blank starting state
  2. Arrival at each path value        →  pointer moves, value VISITED
  3. Growth of the edge to the next value (its own step, after arrival)
  4. Optional final highlight          →  found / min / max target

Path values missing from `coords` are skipped; a stale layout never
crashes the generator.
"""

from typing import List, Mapping, Optional, Sequence

from animation.frame import Frame, FrameBuilder, mark_final
from tree.layout import Point


def frames_from_path(
    path: Sequence[int],
    coords: Mapping[int, Point],
    final_highlight: Optional[int] = None,
) -> List[Frame]:
    fb = FrameBuilder()
    frames: List[Frame] = []

    fb.explanation = "Start at the root." if path else "Nothing to traverse."
    frames.append(fb.build())

    for i, value in enumerate(path):
        pos = coords.get(value)
        if pos is None:
            continue

        # -- arrive --
        fb.visit(value)
        fb.move_to(value, pos)
        fb.explanation = f"Visit {value}."
        frames.append(fb.build())

        # -- grow edge towards the next value --
        if i < len(path) - 1:
            nxt = path[i + 1]
            nxt_pos = coords.get(nxt)
            if nxt_pos is not None:
                fb.connect(value, pos, nxt, nxt_pos)
                direction = "left" if nxt < value else "right"
                fb.explanation = f"Go {direction}: follow edge {value} → {nxt}."
                frames.append(fb.build())

    if final_highlight is not None:
        pos = coords.get(final_highlight)
        if pos is not None:
            fb.move_to(final_highlight, pos)
            fb.explanation = f"Target {final_highlight} reached."
            frames.append(fb.build())

    return mark_final(frames)
