"""
canvas.py — SVG Tree Renderer
==============================
Pure rendering function: layout + Frame → SVG string.

The renderer consumes:
  • layout  – NodeLayout list (positions + child references)
  • frame   – the current Frame snapshot (or None for a static tree)
  • config  – visual config (canvas size, colors, fonts, …)

Design decisions:
  - NO mutation.  The caller passes in everything and gets back a string.
  - Node colouring precedence: visited > current > on-path > default.
  - Traced edges are drawn over the base edge in a highlight colour, so
    edge growth is visible as its own step.
  - The pointer is a small triangle hovering above its coordinate.
"""

from typing import Dict, List, Optional, Set, Tuple

from animation.frame import Frame
from tree.layout import NodeLayout, layout_edges, CANVAS_WIDTH


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = CANVAS_WIDTH
    height: int = 600
    bg:     str = "#ffffff"
    grid:   str = "#f1f5f9"

    # node fill (state → color)
    node_colors: Dict[str, str] = {
        "default": "#06b6d4",   # cyan
        "path":    "#06b6d4",   # cyan, yellow border marks the call stack
        "current": "#fbbf24",   # yellow
        "visited": "#f97316",   # orange
    }

    # node border (state → color)
    node_borders: Dict[str, str] = {
        "default": "#22d3ee",
        "path":    "#fbbf24",
        "current": "#fbbf24",
        "visited": "#fb923c",
    }

    # edges
    edge_color:        str = "#64748b"
    edge_width:        int = 2
    traced_color:      str = "#f59e0b"
    traced_glow:       str = "#fbbf24"
    traced_width:      int = 4

    # node
    node_radius:       int = 22
    node_border_width: int = 3
    node_border_width_active: int = 4
    node_label_color:  str = "#ffffff"
    node_label_size:   int = 14

    # pointer
    pointer_color:     str = "#fbbf24"
    pointer_gap:       int = 10
    pointer_size:      int = 18

    placeholder_color: str = "#94a3b8"
    placeholder_text:  str = "Insert values to visualize the BST"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    layout: List[NodeLayout],
    frame: Optional[Frame] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """Returns an SVG string."""
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        '<defs><pattern id="grid" width="40" height="40" patternUnits="userSpaceOnUse">'
        f'<path d="M 40 0 L 0 0 0 40" fill="none" stroke="{config.grid}" stroke-width="1"/>'
        '</pattern></defs>',
        f'<rect width="{config.width}" height="{config.height}" fill="url(#grid)"/>',
    ]

    if not layout:
        svg_parts.append(
            f'<text x="50%" y="50%" text-anchor="middle" dominant-baseline="middle" '
            f'fill="{config.placeholder_color}" font-size="18" font-family="system-ui">'
            f'{config.placeholder_text}</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    by_value = {n.value: n for n in layout}
    traced: Set[Tuple[int, int]] = set()
    if frame:
        traced = {(e.from_value, e.to_value) for e in frame.connected_edges}

    # -- base edges (draw first so nodes sit on top) --
    for parent, child in layout_edges(layout):
        if (parent, child) in traced:
            continue
        svg_parts.append(_render_edge(by_value[parent], by_value[child], config))

    # -- traced edges --
    if frame:
        for e in frame.connected_edges:
            svg_parts.append(_render_traced_edge(e.from_point, e.to_point, config))

    # -- nodes --
    for node in layout:
        svg_parts.append(_render_node(node, frame, config))

    # -- pointer --
    if frame and frame.pointer:
        svg_parts.append(_render_pointer(frame.pointer.x, frame.pointer.y, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def node_state(value: int, frame: Optional[Frame]) -> str:
    """Visual state key for a value under the given frame."""
    if frame is None:
        return "default"
    if value in frame.visited:
        return "visited"
    if frame.highlighted == value:
        return "current"
    if value in frame.path_nodes:
        return "path"
    return "default"


def _render_node(node: NodeLayout, frame: Optional[Frame], config: CanvasConfig) -> str:
    state = node_state(node.value, frame)
    fill = config.node_colors[state]
    border = config.node_borders[state]
    width = config.node_border_width if state == "default" else config.node_border_width_active

    return "\n".join([
        f'<g class="node {state}" data-value="{node.value}">',
        f'  <circle cx="{node.x}" cy="{node.y}" r="{config.node_radius}" '
        f'fill="{fill}" stroke="{border}" stroke-width="{width}"/>',
        f'  <text x="{node.x}" y="{node.y}" text-anchor="middle" dominant-baseline="central" '
        f'font-size="{config.node_label_size}" font-family="system-ui" font-weight="bold" '
        f'fill="{config.node_label_color}">{node.value}</text>',
        '</g>',
    ])


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(parent: NodeLayout, child: NodeLayout, config: CanvasConfig) -> str:
    return (
        f'<line class="edge" x1="{parent.x}" y1="{parent.y}" x2="{child.x}" y2="{child.y}" '
        f'stroke="{config.edge_color}" stroke-width="{config.edge_width}" stroke-linecap="round"/>'
    )


def _render_traced_edge(a, b, config: CanvasConfig) -> str:
    return "\n".join([
        '<g class="edge traced">',
        f'  <line x1="{a.x}" y1="{a.y}" x2="{b.x}" y2="{b.y}" stroke="{config.traced_glow}" '
        f'stroke-width="{config.traced_width + 2}" stroke-linecap="round" opacity="0.4"/>',
        f'  <line x1="{a.x}" y1="{a.y}" x2="{b.x}" y2="{b.y}" stroke="{config.traced_color}" '
        f'stroke-width="{config.traced_width}" stroke-linecap="round"/>',
        '</g>',
    ])


def _render_pointer(x: float, y: float, config: CanvasConfig) -> str:
    """Downward triangle just above the node circle."""
    tip_y = y - config.node_radius - config.pointer_gap
    base_y = tip_y - config.pointer_size
    half = config.pointer_size * 0.55
    return (
        f'<polygon class="pointer" points="{x},{tip_y} {x - half},{base_y} {x + half},{base_y}" '
        f'fill="{config.pointer_color}"/>'
    )
