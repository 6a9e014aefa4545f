"""
animation/
----------
Trace → frame conversion.

    from animation import frames_from_path, frames_from_events, Frame
"""

from animation.frame            import Frame, FrameBuilder, ConnectedEdge
from animation.path_frames      import frames_from_path
from animation.traversal_frames import frames_from_events

__all__ = [
    "Frame",
    "FrameBuilder",
    "ConnectedEdge",
    "frames_from_path",
    "frames_from_events",
]
