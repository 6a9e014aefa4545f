from animation import frames_from_path
from engine import Recorder
from operations import get_operation
from tree import BinarySearchTree, compute_layout
from ui import (
    analytics_panel,
    explanation_panel,
    operation_panel,
    playback_controls,
    preset_selector,
    pseudocode_viewer,
    render_canvas,
    tree_summary,
)
from ui.canvas import node_state


def test_empty_canvas_shows_placeholder():
    svg = render_canvas([])
    assert svg.startswith("<svg")
    assert "Insert values to visualize the BST" in svg


def test_canvas_draws_every_node_and_edge(sample_tree):
    svg = render_canvas(compute_layout(sample_tree))
    for v in sample_tree.values():
        assert f'data-value="{v}"' in svg
    assert svg.count('class="edge"') == 6
    assert 'class="pointer"' not in svg


def test_traced_edges_replace_base_edges(sample_tree, coords):
    frames = frames_from_path([15, 23, 20], coords)
    svg = render_canvas(compute_layout(sample_tree), frames[-1])
    assert svg.count('class="edge traced"') == 2
    assert svg.count('class="edge"') == 4
    assert 'class="pointer"' in svg


def test_node_state_precedence(coords):
    frame = frames_from_path([15, 6], coords)[-1]
    assert node_state(15, frame) == "visited"
    assert node_state(6, frame) == "visited"
    assert node_state(50, frame) == "default"
    assert node_state(15, None) == "default"


def test_operation_panel_lists_operations():
    html = operation_panel()
    for key in ("insert", "search", "remove", "find_min", "inorder", "postorder"):
        assert f'data-op="{key}"' in html


def test_preset_selector():
    html = preset_selector()
    assert 'value="skewed_left"' in html


def test_playback_controls():
    html = playback_controls(is_playing=True, current_step=3, total_steps=7, title="Search <20>")
    assert "Pause" in html
    assert "Search &lt;20&gt;" in html
    assert "width: 50%" in html
    assert "COMPLETE" not in html
    assert "COMPLETE" in playback_controls(current_step=6, total_steps=7, is_finished=True)


def test_pseudocode_viewer():
    assert "Select an operation" in pseudocode_viewer()
    html = pseudocode_viewer(get_operation("search"))
    assert "Search(v):" in html
    assert "O(h)" in html


def test_explanation_panel_escapes():
    assert "get started" in explanation_panel()
    assert "&lt;b&gt;" in explanation_panel("<b>", "ok")


def test_analytics_panel(sample_tree):
    assert "Run an operation" in analytics_panel()
    m = Recorder().run("search", sample_tree, 20)
    html = analytics_panel(m)
    assert "Search(20)" in html
    assert "Yes" in html


def test_tree_summary():
    html = tree_summary([1, 2, 3], 1)
    assert "1, 2, 3" in html
    assert "—" in tree_summary([], -1)
    assert BinarySearchTree().height() == -1
