from animation import Frame, frames_from_path
from tree import Point


def test_empty_path_yields_single_final_blank_frame():
    frames = frames_from_path([], {})
    assert len(frames) == 1
    f = frames[0]
    assert f.highlighted is None and f.pointer is None
    assert f.visited == () and f.connected_edges == ()
    assert f.is_final
    assert f.explanation == "Nothing to traverse."


def test_search_sequence(sample_tree, coords):
    path = sample_tree.search(20).path            # [15, 23, 20]
    frames = frames_from_path(path, coords, final_highlight=20)

    # blank, 3 arrivals, 2 edges, final highlight
    assert len(frames) == 7
    assert [f.step_number for f in frames] == list(range(7))
    assert [f.highlighted for f in frames] == [None, 15, 15, 23, 23, 20, 20]
    assert [len(f.connected_edges) for f in frames] == [0, 0, 1, 1, 2, 2, 2]
    assert [f.visited for f in frames] == [
        (), (15,), (15,), (15, 23), (15, 23), (15, 23, 20), (15, 23, 20),
    ]
    assert [f.is_final for f in frames] == [False] * 6 + [True]


def test_edge_frames_carry_endpoints(coords):
    frames = frames_from_path([15, 6], coords)
    edge = frames[2].connected_edges[0]
    assert (edge.from_value, edge.to_value) == (15, 6)
    assert edge.from_point == coords[15]
    assert edge.to_point == coords[6]
    assert frames[2].explanation == "Go left: follow edge 15 → 6."
    # edge growth does not move the pointer
    assert frames[2].pointer == coords[15]


def test_arrival_moves_pointer(coords):
    frames = frames_from_path([15, 23], coords)
    assert frames[1].pointer == coords[15]
    assert frames[3].pointer == coords[23]
    assert frames[1].explanation == "Visit 15."
    assert frames[2].explanation == "Go right: follow edge 15 → 23."


def test_without_final_highlight_last_arrival_is_final(coords):
    frames = frames_from_path([15, 6, 4], coords)
    assert len(frames) == 1 + 3 + 2
    assert frames[-1].highlighted == 4
    assert frames[-1].is_final
    assert sum(f.is_final for f in frames) == 1


def test_final_highlight_only_moves_pointer(coords):
    frames = frames_from_path([15, 6, 4], coords, final_highlight=4)
    before, last = frames[-2], frames[-1]
    assert last.highlighted == 4
    assert last.visited == before.visited
    assert last.connected_edges == before.connected_edges
    assert last.explanation == "Target 4 reached."


def test_missing_coordinates_are_skipped():
    coords = {1: Point(0, 0), 3: Point(10, 10)}
    frames = frames_from_path([1, 2, 3], coords)
    # 2 has no position: no arrival, and no edge from 1 to 2
    assert [f.highlighted for f in frames] == [None, 1, 3]
    assert frames[-1].visited == (1, 3)
    assert frames[-1].connected_edges == ()


def test_final_highlight_without_coordinate_is_ignored(coords):
    frames = frames_from_path([15], coords, final_highlight=99)
    assert len(frames) == 2
    assert frames[-1].highlighted == 15


def test_deterministic_and_serialisable(sample_tree, coords):
    path = sample_tree.remove(15).path
    a = frames_from_path(path, coords)
    b = frames_from_path(path, coords)
    assert a == b
    assert [Frame.from_dict(f.to_dict()) for f in a] == a
