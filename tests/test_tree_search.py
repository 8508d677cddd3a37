import pytest

from drillbook.tree_search import bst_contains, deepest_leaves_by_side
from drillbook.trees import TreeNode, inorder, parse_level_order

SAMPLE = "10 5 15 2 6 12 16 -1 3 -1 -1 -1 -1 -1 -1 -1 -1"


@pytest.fixture
def bst():
    return parse_level_order(SAMPLE)


def test_sample_search_misses(bst):
    assert bst_contains(bst, 512) is False


def test_every_stored_value_is_found(bst):
    assert all(bst_contains(bst, value) for value in inorder(bst))


@pytest.mark.parametrize("value", [0, 1, 4, 7, 11, 13, 14, 17, 100])
def test_absent_values_are_not_found(bst, value):
    assert bst_contains(bst, value) is False


def test_sample_is_a_search_tree(bst):
    values = inorder(bst)
    assert values == sorted(values)


def test_empty_tree_contains_nothing():
    assert bst_contains(None, 10) is False


def test_deepest_leaves_of_sample(bst):
    assert deepest_leaves_by_side(bst) == (6, 16)


def test_deepest_leaves_of_single_chains():
    root = parse_level_order("1 2 3 4 -1 -1 5 -1 -1 -1 -1")
    assert deepest_leaves_by_side(root) == (4, 5)


def test_missing_subtree_gives_none():
    root = TreeNode(1, left=TreeNode(2))
    assert deepest_leaves_by_side(root) == (2, None)


def test_empty_tree_gives_none_on_both_sides():
    assert deepest_leaves_by_side(None) == (None, None)