"""
main.py — BST Visualizer Flask App
===================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/op/<key>           – run an operation (insert/search/remove/…)
  POST /api/tree/clear         – drop every node
  POST /api/tree/preset        – replace the tree with a preset
  POST /api/step/next          – advance one frame
  POST /api/step/prev          – rewind one frame
  POST /api/step/goto          – jump to frame N
  POST /api/step/play          – toggle play/pause
  POST /api/config/speed       – playback multiplier (0.25x … 2x)
  POST /api/animation/close    – leave playback, show the current tree
  GET  /api/state              – current app state (for polling)

State management:
  Everything lives in the Flask session.  Each user's session holds:
    • tree          – serialised BinarySearchTree (preorder values)
    • animation     – {op_key, value, tree_before} of the last operation
    • current_step / is_playing / speed
  Frames are NOT stored: they are regenerated from `tree_before` on each
  playback request.  Generation is deterministic, so the replay yields
  the exact same frames the operation produced.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, render_template_string, request, session

from config import CONFIG
from engine import Recorder, Stepper
from operations import get_operation, list_operations
from tree import BinarySearchTree, compute_layout
from ui import (
    render_canvas,
    operation_panel,
    preset_selector,
    playback_controls,
    pseudocode_viewer,
    explanation_panel,
    analytics_panel,
    tree_summary,
)

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)
    app.secret_key = CONFIG.SECRET_KEY
    app.config.from_prefixed_env("BST_VISUALIZER")
    register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_tree() -> BinarySearchTree:
    """Deserialise the tree from the session, or start empty."""
    return BinarySearchTree.from_dict(session.get("tree", {}))


def save_tree(tree: BinarySearchTree):
    session["tree"] = tree.to_dict()


def get_state() -> Dict[str, Any]:
    anim = session.get("animation")
    return {
        "tree":          session.get("tree", {}).get("values", []),
        "animation":     anim,
        "current_step":  session.get("current_step", 0),
        "is_playing":    session.get("is_playing", False),
        "speed":         session.get("speed", CONFIG.DEFAULT_SPEED),
        "message":       session.get("message", ""),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def load_playback() -> Optional[Tuple[Recorder, Stepper]]:
    """Replay the last operation against its saved pre-operation tree."""
    anim = session.get("animation")
    if not anim:
        return None
    rec = Recorder()
    rec.run(anim["op_key"], BinarySearchTree.from_dict(anim["tree_before"]), anim["value"])
    stepper = rec.stepper
    stepper.set_speed(session.get("speed", CONFIG.DEFAULT_SPEED))
    stepper.resume_at(session.get("current_step", 0), playing=session.get("is_playing", False))
    return rec, stepper


def save_playback(stepper: Stepper):
    set_state(current_step=stepper.current_idx, is_playing=stepper.is_playing)


def parse_value(data: Dict[str, Any]) -> Tuple[Optional[int], Optional[str]]:
    """Validate the user-supplied value.  Returns (value, error)."""
    raw = data.get("value")
    if isinstance(raw, bool) or raw is None or raw == "":
        return None, "A value is required"
    try:
        value = int(str(raw).strip())
    except ValueError:
        return None, f"Not an integer: {raw!r}"
    if not (CONFIG.VALUE_MIN <= value <= CONFIG.VALUE_MAX):
        return None, f"Value must be between {CONFIG.VALUE_MIN} and {CONFIG.VALUE_MAX}"
    return value, None


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def static_payload(tree: BinarySearchTree) -> Dict[str, Any]:
    return {
        "svg":     render_canvas(compute_layout(tree)),
        "summary": tree_summary(tree.values(), tree.height()),
    }


def frame_payload(rec: Recorder, stepper: Stepper) -> Dict[str, Any]:
    frame = stepper.current_frame
    op = rec.operation
    title = op.label if rec.value is None else f"{op.label} {rec.value}"
    return {
        "svg":          render_canvas(rec.layout, frame),
        "frame":        frame.to_dict() if frame else None,
        "explanation":  explanation_panel(frame.explanation if frame else "", session.get("message", "")),
        "playback":     playback_controls(
            is_playing=stepper.is_playing,
            current_step=stepper.current_idx,
            total_steps=stepper.total_frames,
            speed=stepper.speed,
            is_finished=bool(frame and frame.is_final),
            title=title,
        ),
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_frames,
        "is_playing":   stepper.is_playing,
        "is_final":     bool(frame and frame.is_final),
        "interval_ms":  round(CONFIG.BASE_INTERVAL_MS / stepper.speed),
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        tree = get_tree()
        state = get_state()
        html = render_template_string(
            INDEX_TEMPLATE,
            svg=render_canvas(compute_layout(tree)),
            operations=operation_panel(),
            presets=preset_selector(),
            playback=playback_controls(speed=state["speed"]),
            pseudocode=pseudocode_viewer(None),
            explanation=explanation_panel(),
            analytics=analytics_panel(),
            summary=tree_summary(tree.values(), tree.height()),
        )
        return html

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    @app.route("/api/op/<key>", methods=["POST"])
    def api_operation(key: str):
        info = get_operation(key)
        if info is None:
            return jsonify({"error": f"Unknown operation: {key}"}), 404

        data = request.get_json(silent=True) or {}
        value = None
        if info.needs_value:
            value, error = parse_value(data)
            if error:
                logger.warning("%s rejected: %s", key, error)
                return jsonify({"error": error}), 400

        tree = get_tree()
        before = tree.to_dict()

        rec = Recorder()
        metrics = rec.run(key, tree, value)
        if info.mutates:
            save_tree(tree)

        message = rec.result.message
        logger.info("%s: %s", info.label, message)
        set_state(
            animation={"op_key": key, "value": value, "tree_before": before},
            current_step=0,
            is_playing=True,   # animations auto-start
            message=message,
        )
        stepper = rec.stepper
        stepper.play()

        payload = frame_payload(rec, stepper)
        payload.update({
            "result":     rec.result.to_dict(),
            "message":    message,
            "pseudocode": pseudocode_viewer(info),
            "analytics":  analytics_panel(metrics),
            "summary":    tree_summary(tree.values(), tree.height()),
        })
        return jsonify(payload)

    @app.route("/api/tree/clear", methods=["POST"])
    def api_tree_clear():
        tree = get_tree()
        result = tree.clear()
        save_tree(tree)
        set_state(animation=None, current_step=0, is_playing=False, message=result.message)
        logger.info("tree cleared")
        payload = static_payload(tree)
        payload.update({"result": result.to_dict(), "message": result.message})
        return jsonify(payload)

    @app.route("/api/tree/preset", methods=["POST"])
    def api_tree_preset():
        data = request.get_json(silent=True) or {}
        name = data.get("preset", "")
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            logger.warning("preset rejected: invalid seed %r", seed)
            return jsonify({"error": f"Invalid seed: {seed!r}"}), 400
        try:
            tree = BinarySearchTree.generate_preset(name, seed=seed)
        except ValueError as e:
            logger.warning("preset rejected: %s", e)
            return jsonify({"error": str(e)}), 400

        save_tree(tree)
        message = f"Generated {name.replace('_', ' ')} tree"
        set_state(animation=None, current_step=0, is_playing=False, message=message)
        logger.info(message)
        payload = static_payload(tree)
        payload.update({"values": tree.to_dict()["values"], "message": message})
        return jsonify(payload)

    # ------------------------------------------------------------------
    # Step navigation
    # ------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        loaded = load_playback()
        if loaded is None:
            return jsonify({"error": "No animation loaded"}), 400
        rec, stepper = loaded
        if not stepper.next_step():
            save_playback(stepper)
            return jsonify({"error": "Already at last step"}), 400
        save_playback(stepper)
        return jsonify(frame_payload(rec, stepper))

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        loaded = load_playback()
        if loaded is None:
            return jsonify({"error": "No animation loaded"}), 400
        rec, stepper = loaded
        stepper.pause()
        if not stepper.prev_step():
            save_playback(stepper)
            return jsonify({"error": "Already at first step"}), 400
        save_playback(stepper)
        return jsonify(frame_payload(rec, stepper))

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        loaded = load_playback()
        if loaded is None:
            return jsonify({"error": "No animation loaded"}), 400
        rec, stepper = loaded
        idx = (request.get_json(silent=True) or {}).get("index", 0)
        if idx == -1:
            stepper.jump_to_end()
        else:
            stepper.pause()
            if isinstance(idx, bool) or not isinstance(idx, int) or not stepper.goto_step(idx):
                return jsonify({"error": "Invalid step index"}), 400
        save_playback(stepper)
        return jsonify(frame_payload(rec, stepper))

    @app.route("/api/step/play", methods=["POST"])
    def api_step_play():
        loaded = load_playback()
        if loaded is None:
            return jsonify({"error": "No animation loaded"}), 400
        rec, stepper = loaded
        stepper.toggle_play()
        save_playback(stepper)
        return jsonify(frame_payload(rec, stepper))

    # ------------------------------------------------------------------
    # Config / lifecycle
    # ------------------------------------------------------------------
    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        raw = (request.get_json(silent=True) or {}).get("speed", CONFIG.DEFAULT_SPEED)
        try:
            speed = float(raw)
        except (TypeError, ValueError):
            return jsonify({"error": f"Invalid speed: {raw!r}"}), 400
        stepper = Stepper()
        stepper.set_speed(speed)
        set_state(speed=stepper.speed)
        return jsonify({"speed": stepper.speed, "interval_ms": round(CONFIG.BASE_INTERVAL_MS / stepper.speed)})

    @app.route("/api/animation/close", methods=["POST"])
    def api_animation_close():
        set_state(animation=None, current_step=0, is_playing=False, message="Ready")
        payload = static_payload(get_tree())
        payload["explanation"] = explanation_panel("", "Ready")
        return jsonify(payload)

    @app.route("/api/state")
    def api_state():
        state = get_state()
        state["operations"] = [op.key for op in list_operations()]
        return jsonify(state)


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>BST Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0f172a;
      --bg-darker: #020617;
      --bg-panel: #1e293b;
      --border: #334155;
      --text-primary: #f1f5f9;
      --text-secondary: #94a3b8;
      --accent-cyan: #06b6d4;
      --accent-amber: #f59e0b;
      --accent-orange: #f97316;
      --accent-rose: #f43f5e;
    }

    body {
      font-family: system-ui, -apple-system, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
      overflow: auto;
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 220px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin: 6px 0 12px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-row { display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 12px; }

    button {
      background: var(--accent-cyan);
      color: #fff;
      border: none;
      padding: 8px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
    }

    .btn-secondary { background: var(--bg-darker); border: 1px solid var(--border); }
    .btn-danger { background: var(--accent-rose); }

    select, input[type="number"], input[type="range"] {
      width: 100%;
      padding: 8px 10px;
      margin: 6px 0 12px;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }

    label { display: block; font-size: 12px; color: var(--text-secondary); text-transform: uppercase; }

    .progress { height: 6px; background: var(--bg-darker); border-radius: 3px; margin-bottom: 12px; }
    .progress-bar { height: 100%; background: linear-gradient(90deg, var(--accent-amber), var(--accent-orange)); border-radius: 3px; }

    .step-info { font-family: monospace; font-size: 13px; color: var(--text-secondary); margin: 8px 0; }
    .finished-badge { background: #10b981; color: #fff; padding: 2px 8px; border-radius: 6px; font-size: 11px; }

    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; }
    .code-title { color: var(--accent-cyan); margin-bottom: 8px; }
    .code-line { padding: 2px 8px; white-space: pre; }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text .status { color: var(--accent-orange); font-weight: 600; }

    table { width: 100%; font-size: 13px; }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: monospace; }
    .hint, .placeholder { font-size: 12px; color: var(--text-secondary); margin-top: 8px; }

    #error-toast {
      position: fixed; top: 16px; right: 16px; display: none;
      background: var(--accent-rose); color: #fff; padding: 10px 16px; border-radius: 8px;
    }
  </style>
</head>
<body>
  <div id="error-toast"></div>
  <div id="sidebar">
    <div id="operations">{{ operations|safe }}</div>
    <div id="presets">{{ presets|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="summary">{{ summary|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="bottom-panel">
      <div class="panel">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div class="panel">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let timer = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      if (!res.ok && body.error) showError(body.error);
      return body;
    }

    function showError(msg) {
      const el = document.getElementById('error-toast');
      el.textContent = msg;
      el.style.display = 'block';
      setTimeout(() => el.style.display = 'none', 3000);
    }

    function apply(data) {
      const set = (id, key) => { if (data[key] !== undefined) document.getElementById(id).innerHTML = data[key]; };
      set('canvas-svg', 'svg');
      set('playback', 'playback');
      set('explanation', 'explanation');
      set('pseudocode', 'pseudocode');
      set('analytics', 'analytics');
      set('summary', 'summary');
      bindPlayback();
      schedule(data);
    }

    function schedule(data) {
      if (timer) { clearTimeout(timer); timer = null; }
      if (data.is_playing && !data.is_final) {
        timer = setTimeout(async () => {
          const next = await post('/api/step/next');
          if (!next.error) apply(next);
        }, data.interval_ms || 800);
      }
    }

    function bindPlayback() {
      const on = (id, fn) => document.getElementById(id)?.addEventListener('click', fn);
      on('btn-next',   async () => apply(await post('/api/step/next')));
      on('btn-prev',   async () => apply(await post('/api/step/prev')));
      on('btn-play',   async () => apply(await post('/api/step/play')));
      on('btn-rewind', async () => apply(await post('/api/step/goto', {index: 0})));
      on('btn-end',    async () => apply(await post('/api/step/goto', {index: -1})));
      on('btn-close',  async () => apply(await post('/api/animation/close')));
      document.getElementById('speed-slider')?.addEventListener('change', async (e) => {
        const data = await post('/api/config/speed', {speed: +e.target.value});
        document.getElementById('speed-value').textContent = data.speed + 'x';
      });
    }

    document.querySelectorAll('.op-btn').forEach(btn => {
      btn.addEventListener('click', async () => {
        const body = {};
        if (btn.dataset.needsValue) body.value = document.getElementById('value-input').value;
        const data = await post('/api/op/' + btn.dataset.op, body);
        if (!data.error) apply(data);
      });
    });

    document.getElementById('btn-clear')?.addEventListener('click', async () => {
      apply(await post('/api/tree/clear'));
    });

    document.getElementById('preset-selector')?.addEventListener('change', async (e) => {
      const data = await post('/api/tree/preset', {preset: e.target.value});
      if (!data.error) apply(data);
    });

    bindPlayback();
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=CONFIG.LOG_LEVEL, format=CONFIG.LOG_FORMAT)
    logger.info("BST Visualizer on http://%s:%s", CONFIG.HOST, CONFIG.PORT)
    app.run(host=CONFIG.HOST, port=int(CONFIG.PORT), debug=CONFIG.DEBUG)
