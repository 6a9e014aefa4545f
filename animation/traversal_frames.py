"""
traversal_frames.py — Traversal Event Log → Frames
===================================================
Used by the detailed inorder / preorder / postorder traversals.

State machine per event:
  ENTER  →  push value on the path stack, pointer moves to it
  VISIT  →  value appended to VISITED, pointer stays on it
  EXIT   →  pop; pointer snaps back to the new stack top (the parent),
            or clears when the root is exited

A trailing completion frame (no pointer, empty stack) marks the end so
the last EXIT is distinguishable from "done".  Events whose value has no
coordinate are skipped without touching the accumulators.
"""

from typing import List, Mapping, Sequence

from animation.frame import Frame, FrameBuilder
from tree.layout import Point
from tree.results import TraversalEvent, TraversalAction


def frames_from_events(
    events: Sequence[TraversalEvent],
    coords: Mapping[int, Point],
) -> List[Frame]:
    fb = FrameBuilder()
    frames: List[Frame] = []

    fb.explanation = "Start the traversal at the root." if events else "Nothing to traverse."
    frames.append(fb.build())

    for event in events:
        value = event.value
        pos = coords.get(value)
        if pos is None:
            continue

        if event.action is TraversalAction.ENTER:
            fb.push(value)
            fb.move_to(value, pos)
            fb.explanation = f"Enter {value}."

        elif event.action is TraversalAction.VISIT:
            fb.visit(value)
            fb.move_to(value, pos)
            fb.explanation = f"Visit {value}: output it."

        elif event.action is TraversalAction.EXIT:
            fb.pop()
            if fb.path_nodes:
                parent = fb.path_nodes[-1]
                fb.move_to(parent, coords.get(parent))
                fb.explanation = f"Exit {value}, return to {parent}."
            else:
                fb.clear_pointer()
                fb.explanation = f"Exit {value}, leaving the root."

        frames.append(fb.build())

    # -- completion --
    fb.clear_pointer()
    fb.path_nodes = []
    fb.explanation = f"Traversal complete: {len(fb.visited)} value(s) visited."
    frames.append(fb.build(is_final=True))
    return frames
