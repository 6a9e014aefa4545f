from hypothesis import given, strategies as st

from tree import BinarySearchTree, TraversalAction, TraversalEvent

E, V, X = TraversalAction.ENTER, TraversalAction.VISIT, TraversalAction.EXIT


def _actions(steps):
    return [(s.value, s.action) for s in steps]


def test_plain_orders(sample_tree):
    assert sample_tree.preorder().values == [15, 6, 4, 7, 23, 20, 50]
    assert sample_tree.postorder().values == [4, 7, 6, 20, 50, 23, 15]


def test_messages(sample_tree):
    assert sample_tree.inorder().message == "Inorder: 4 → 6 → 7 → 15 → 20 → 23 → 50"
    assert BinarySearchTree().postorder().message == "Postorder: Empty tree"


def test_inorder_detailed_small_tree():
    t = BinarySearchTree.from_values([2, 1, 3])
    r = t.inorder_detailed()
    assert r.values == [1, 2, 3]
    assert _actions(r.steps) == [
        (2, E), (1, E), (1, V), (1, X), (2, V), (3, E), (3, V), (3, X), (2, X),
    ]


def test_preorder_detailed_small_tree():
    t = BinarySearchTree.from_values([2, 1, 3])
    assert _actions(t.preorder_detailed().steps) == [
        (2, E), (2, V), (1, E), (1, V), (1, X), (3, E), (3, V), (3, X), (2, X),
    ]


def test_postorder_detailed_small_tree():
    t = BinarySearchTree.from_values([2, 1, 3])
    assert _actions(t.postorder_detailed().steps) == [
        (2, E), (1, E), (1, V), (1, X), (3, E), (3, V), (3, X), (2, V), (2, X),
    ]


def test_detailed_on_empty_tree():
    r = BinarySearchTree().preorder_detailed()
    assert r.values == []
    assert r.steps == []


def test_event_to_dict():
    ev = TraversalEvent(7, TraversalAction.EXIT)
    assert ev.to_dict() == {"value": 7, "action": "exit"}


@given(st.lists(st.integers(min_value=1, max_value=99), max_size=25))
def test_event_log_is_well_nested(values):
    t = BinarySearchTree.from_values(values)
    for detailed in (t.inorder_detailed, t.preorder_detailed, t.postorder_detailed):
        r = detailed()
        n = len(set(values))
        assert len(r.steps) == 3 * n
        assert [s.value for s in r.steps if s.action is V] == r.values

        stack = []
        for s in r.steps:
            if s.action is E:
                stack.append(s.value)
            elif s.action is X:
                assert stack and stack[-1] == s.value
                stack.pop()
            else:
                assert stack[-1] == s.value
        assert stack == []
