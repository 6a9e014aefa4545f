"""
controls.py — UI Control Panels
================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • operation_panel     – value input + insert/search/remove, min/max, clear, traversals
  • preset_selector     – empty / perfect / random / skewed trees
  • playback_controls   – rewind/prev/play/next/end, progress, speed slider
  • pseudocode_viewer   – pseudocode of the selected operation
  • explanation_panel   – what the current frame shows
  • analytics_panel     – path length, frames, tree size/height, …
  • tree_summary        – size, height and inorder listing of the tree

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings; the main app stitches them together.
"""

from html import escape
from typing import List, Optional

from config import CONFIG
from engine import RunMetrics
from operations import OperationInfo, KIND_PATH, KIND_TRAVERSAL, operations_by_kind
from tree import PRESETS


# ---------------------------------------------------------------------------
# Operation Panel
# ---------------------------------------------------------------------------
def operation_panel(value: str = "") -> str:
    path_ops = operations_by_kind(KIND_PATH)
    value_buttons = "".join(
        f'<button class="op-btn" data-op="{op.key}" data-needs-value="1">{op.label}</button>'
        for op in path_ops if op.needs_value
    )
    plain_buttons = "".join(
        f'<button class="op-btn btn-secondary" data-op="{op.key}">{op.label}</button>'
        for op in path_ops if not op.needs_value
    )
    traversal_buttons = "".join(
        f'<button class="op-btn btn-secondary" data-op="{op.key}">{op.label}</button>'
        for op in operations_by_kind(KIND_TRAVERSAL)
    )

    return f"""
    <div class="panel operation-panel">
      <h3>Operations</h3>
      <label>Enter Value ({CONFIG.VALUE_MIN}-{CONFIG.VALUE_MAX})</label>
      <input type="number" id="value-input" min="{CONFIG.VALUE_MIN}" max="{CONFIG.VALUE_MAX}" value="{escape(value)}">
      <div class="button-row">{value_buttons}</div>
      <div class="button-row">{plain_buttons}
        <button id="btn-clear" class="btn-danger">Clear</button>
      </div>
      <h3>Traversals</h3>
      <div class="button-row">{traversal_buttons}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Preset Selector
# ---------------------------------------------------------------------------
def preset_selector() -> str:
    options = ['<option value="" disabled selected>Select a preset...</option>']
    for key, label in PRESETS.items():
        options.append(f'<option value="{key}">{label}</option>')
    return f"""
    <div class="panel preset-selector">
      <h3>Preset Trees</h3>
      <select id="preset-selector">
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: float = CONFIG.DEFAULT_SPEED,
    is_finished: bool = False,
    title: str = "",
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"
    last = max(total_steps - 1, 0)
    progress = round(current_step / last * 100) if last else 0

    return f"""
    <div class="panel playback-controls">
      <h3>{escape(title) or 'Playback'}</h3>
      <div class="progress"><div class="progress-bar" style="width: {progress}%"></div></div>
      <div class="button-row">
        <button id="btn-rewind" title="Reset">⏮</button>
        <button id="btn-prev" title="Step backward">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Step forward">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
        <button id="btn-close" class="btn-secondary" title="Close">✕</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> of <span id="total-steps">{last}</span>
        {' <span class="finished-badge">COMPLETE</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed: <span id="speed-value">{speed}x</span></label>
        <input type="range" id="speed-slider" min="{CONFIG.SPEED_MIN}" max="{CONFIG.SPEED_MAX}" step="0.25" value="{speed}">
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(op: Optional[OperationInfo] = None) -> str:
    if op is None:
        return """
        <div class="code-block">
          <div class="placeholder">Select an operation to see details.</div>
        </div>
        """

    lines_html = "".join(
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(op.pseudocode)
    )
    return f"""
    <div class="code-block">
      <div class="code-title">{escape(op.label)} — {escape(op.complexity_time)}</div>
      {lines_html}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "", message: str = "") -> str:
    if not explanation and not message:
        return '<div class="explanation-text">Insert a value or pick a preset to get started.</div>'
    status = f'<div class="status">{escape(message)}</div>' if message else ""
    return f'<div class="explanation-text">{status}{escape(explanation)}</div>'


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>Analytics</h3>
          <p class="placeholder">Run an operation to see metrics.</p>
        </div>
        """

    outcome = "✅ Yes" if metrics.success else "❌ No"
    title = metrics.op_label if metrics.value is None else f"{metrics.op_label}({metrics.value})"
    return f"""
    <div class="panel analytics-panel">
      <h3>Analytics — {escape(title)}</h3>
      <table>
        <tr><td>Succeeded:</td><td><strong>{outcome}</strong></td></tr>
        <tr><td>Nodes Visited:</td><td><strong>{metrics.nodes_visited}</strong></td></tr>
        <tr><td>Path Length:</td><td><strong>{metrics.path_length}</strong></td></tr>
        <tr><td>Edges Traced:</td><td><strong>{metrics.edges_traced}</strong></td></tr>
        <tr><td>Frames:</td><td><strong>{metrics.total_frames}</strong></td></tr>
        <tr><td>Tree Size:</td><td><strong>{metrics.tree_size}</strong></td></tr>
        <tr><td>Tree Height:</td><td><strong>{metrics.tree_height}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Tree Summary
# ---------------------------------------------------------------------------
def tree_summary(values: List[int], height: int) -> str:
    listing = ", ".join(str(v) for v in values) or "—"
    return f"""
    <div class="panel tree-summary">
      <h3>Tree</h3>
      <table>
        <tr><td>Nodes:</td><td><strong>{len(values)}</strong></td></tr>
        <tr><td>Height:</td><td><strong>{height}</strong></td></tr>
      </table>
      <p class="hint">Sorted: {listing}</p>
    </div>
    """
