from hypothesis import given, strategies as st

from animation import frames_from_events
from tree import (
    BinarySearchTree,
    Point,
    TraversalAction,
    TraversalEvent,
    compute_layout,
    coordinates,
)

E, V, X = TraversalAction.ENTER, TraversalAction.VISIT, TraversalAction.EXIT


def test_no_events_gives_blank_and_completion():
    frames = frames_from_events([], {})
    assert len(frames) == 2
    assert frames[0].explanation == "Nothing to traverse."
    assert frames[-1].is_final
    assert frames[-1].visited == ()


def test_inorder_three_nodes():
    t = BinarySearchTree.from_values([2, 1, 3])
    coords = coordinates(compute_layout(t))
    frames = frames_from_events(t.inorder_detailed().steps, coords)

    # blank + 9 events + completion
    assert len(frames) == 11
    assert [f.highlighted for f in frames] == [None, 2, 1, 1, 2, 2, 3, 3, 2, None, None]
    assert [f.path_nodes for f in frames] == [
        (), (2,), (2, 1), (2, 1), (2,), (2,), (2, 3), (2, 3), (2,), (), (),
    ]
    assert frames[-1].visited == (1, 2, 3)
    assert frames[4].explanation == "Exit 1, return to 2."
    assert frames[9].explanation == "Exit 2, leaving the root."
    assert frames[9].pointer is None


def test_completion_frame(sample_tree, coords):
    frames = frames_from_events(sample_tree.preorder_detailed().steps, coords)
    last = frames[-1]
    assert last.is_final
    assert last.pointer is None and last.highlighted is None
    assert last.path_nodes == ()
    assert last.visited == (15, 6, 4, 7, 23, 20, 50)
    assert last.explanation == "Traversal complete: 7 value(s) visited."
    assert not any(f.is_final for f in frames[:-1])


def test_exit_returns_pointer_to_parent(sample_tree, coords):
    frames = frames_from_events(sample_tree.postorder_detailed().steps, coords)
    exit_four = next(f for f in frames if f.explanation == "Exit 4, return to 6.")
    assert exit_four.highlighted == 6
    assert exit_four.pointer == coords[6]


def test_events_without_coordinates_are_skipped():
    events = [
        TraversalEvent(1, E),
        TraversalEvent(9, E),
        TraversalEvent(9, V),
        TraversalEvent(9, X),
        TraversalEvent(1, V),
        TraversalEvent(1, X),
    ]
    frames = frames_from_events(events, {1: Point(5, 5)})
    assert len(frames) == 1 + 3 + 1
    assert all(9 not in f.path_nodes for f in frames)
    assert frames[-1].visited == (1,)


def test_deterministic(sample_tree, coords):
    steps = sample_tree.inorder_detailed().steps
    assert frames_from_events(steps, coords) == frames_from_events(steps, coords)


@given(st.lists(st.integers(min_value=1, max_value=99), max_size=20))
def test_stack_never_underflows(values):
    t = BinarySearchTree.from_values(values)
    coords = coordinates(compute_layout(t))
    for detailed in (t.inorder_detailed, t.preorder_detailed, t.postorder_detailed):
        steps = detailed().steps
        frames = frames_from_events(steps, coords)
        assert len(frames) == len(steps) + 2
        assert frames[-2].path_nodes == ()
        assert frames[-1].visited == tuple(s.value for s in steps if s.action is V)
        depth = 0
        for prev, cur in zip(frames, frames[1:]):
            assert abs(len(cur.path_nodes) - len(prev.path_nodes)) <= 1
            depth = len(cur.path_nodes)
            assert depth >= 0
        assert depth == 0
