from operations import (
    KIND_PATH,
    KIND_TRAVERSAL,
    REGISTRY,
    get_operation,
    list_operations,
    operations_by_kind,
)
from tree import BinarySearchTree


def test_registry_keys():
    assert list(REGISTRY) == [
        "insert", "search", "remove", "find_min", "find_max",
        "inorder", "preorder", "postorder",
    ]
    assert [op.key for op in list_operations()] == list(REGISTRY)


def test_lookup():
    assert get_operation("remove").snapshot_before
    assert get_operation("nope") is None


def test_kinds():
    assert {op.key for op in operations_by_kind(KIND_TRAVERSAL)} == {"inorder", "preorder", "postorder"}
    assert all(op.complexity_time == "O(h)" for op in operations_by_kind(KIND_PATH))


def test_only_insert_and_remove_mutate():
    assert {op.key for op in list_operations() if op.mutates} == {"insert", "remove"}


def test_every_op_has_pseudocode():
    for op in list_operations():
        assert op.pseudocode
        assert op.label


def test_final_highlight_policies(sample_tree):
    search = get_operation("search")
    assert search.final_highlight(sample_tree.search(7), 7) == 7
    assert search.final_highlight(sample_tree.search(8), 8) is None

    fmax = get_operation("find_max")
    assert fmax.final_highlight(sample_tree.find_max(), None) == 50
    assert fmax.final_highlight(BinarySearchTree().find_max(), None) is None

    assert get_operation("insert").final_highlight(sample_tree.insert(1), 1) is None
