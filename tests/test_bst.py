import pytest

from dsakit import bst

VALUES = [10, 5, 20, 15]


def build(values, allow_duplicates=False):
    root = None
    for value in values:
        root = bst.insert(root, value, allow_duplicates)
    return root


def test_inorder_is_sorted():
    root = build(VALUES)
    assert bst.inorder(root) == sorted(VALUES)


def test_height_of_sample_tree():
    assert bst.height(build(VALUES)) == 3


def test_height_of_empty_tree():
    assert bst.height(None) == 0


def test_search_found_and_missing():
    root = build(VALUES)
    assert bst.search(root, 15).data == 15
    assert bst.search(root, 99) is None


def test_minimum():
    assert bst.minimum(build(VALUES)) == min(VALUES)


def test_minimum_empty_raises():
    with pytest.raises(ValueError):
        bst.minimum(None)


def test_mirror_reverses_inorder_and_keeps_original():
    root = build(VALUES)
    before = bst.preorder(root)
    mirrored = bst.mirror(root)
    assert bst.inorder(mirrored) == sorted(VALUES, reverse=True)
    assert bst.preorder(root) == before
    assert bst.minimum(mirrored) == min(VALUES)


def test_dfs_matches_preorder():
    root = build([8, 3, 10, 1, 6, 14, 4, 7, 13])
    assert bst.dfs(root) == bst.preorder(root)


def test_bfs_starts_at_root_and_covers_all():
    root = build(VALUES)
    order = bst.bfs(root)
    assert order[0] == VALUES[0]
    assert sorted(order) == sorted(VALUES)


def test_bfs_of_chain():
    assert bst.bfs(build([1, 2, 3])) == [1, 2, 3]


def test_duplicates_ignored_by_default():
    assert bst.inorder(build([5, 3, 5, 3])) == [3, 5]


def test_duplicates_kept_when_allowed():
    assert bst.inorder(build([5, 3, 5, 3], allow_duplicates=True)) == [3, 3, 5, 5]


def test_empty_traversals():
    assert bst.bfs(None) == []
    assert bst.dfs(None) == []
    assert bst.inorder(None) == []