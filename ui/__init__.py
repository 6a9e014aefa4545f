"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import operation_panel, playback_controls, …
"""

from ui.canvas import render_canvas, CanvasConfig

from ui.controls import (
    operation_panel,
    preset_selector,
    playback_controls,
    pseudocode_viewer,
    explanation_panel,
    analytics_panel,
    tree_summary,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "operation_panel",
    "preset_selector",
    "playback_controls",
    "pseudocode_viewer",
    "explanation_panel",
    "analytics_panel",
    "tree_summary",
]
