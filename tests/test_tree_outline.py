import io

import pytest

from drillbook.trees import count_leaves, parse_level_order
from drillbook.tree_outline import (
    NO_SUBTREE_MESSAGE,
    leaf_values,
    main,
    outer_boundary,
    outermost_leaves,
    right_spine_echo,
    same_tree,
)

SAMPLE = "10 5 15 2 6 12 16 -1 3 -1 -1 -1 -1 -1 -1 -1 -1"


@pytest.fixture
def sample():
    return parse_level_order(SAMPLE)


def test_outer_boundary_sample(sample):
    assert outer_boundary(sample) == [3, 2, 5, 10, 15, 12]


def test_outer_boundary_single_node():
    assert outer_boundary(parse_level_order("7 -1 -1")) == [7]


def test_outer_boundary_empty():
    assert outer_boundary(parse_level_order("-1")) == []


def test_right_spine_echo_is_palindrome(sample):
    echo = right_spine_echo(sample)
    assert echo == echo[::-1]
    assert echo[0] == sample.val
    assert len(echo) % 2 == 0


def test_right_spine_echo_sample(sample):
    assert right_spine_echo(sample) == [10, 15, 16, 16, 15, 10]


def test_same_tree_identical_inputs():
    assert same_tree(parse_level_order(SAMPLE), parse_level_order(SAMPLE))


def test_same_tree_differs_in_value():
    assert not same_tree(
        parse_level_order("1 2 3 -1 -1 -1 -1"), parse_level_order("1 2 4 -1 -1 -1 -1")
    )


def test_same_tree_differs_in_shape():
    assert not same_tree(
        parse_level_order("1 2 -1 -1 -1"), parse_level_order("1 -1 2 -1 -1")
    )


def test_same_tree_empty():
    assert same_tree(None, None)
    assert not same_tree(None, parse_level_order("1 -1 -1"))


def test_leaf_values_count_matches(sample):
    leaves = leaf_values(sample)
    assert len(leaves) == count_leaves(sample)
    assert set(leaves) <= {3, 6, 12, 16, 2, 5, 10, 15}


def test_leaf_values_sample(sample):
    assert leaf_values(sample) == [3, 6, 12, 16]


def test_outermost_leaves_without_subtrees():
    assert outermost_leaves(parse_level_order("4 -1 -1")) == (None, None)


def test_outermost_leaves_are_leaves(sample):
    left, right = outermost_leaves(sample)
    leaves = leaf_values(sample)
    assert left in leaves
    assert right in leaves
    assert left == leaves[0]
    assert right == leaves[-1]


def test_main_same(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE + " " + SAMPLE))
    assert main(["same"]) == 0
    assert capsys.readouterr().out.strip() == "YES"


def test_main_same_different(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 -1 -1 2 -1 -1"))
    assert main(["same"]) == 0
    assert capsys.readouterr().out.strip() == "NO"


def test_main_outermost_missing_side(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 -1 -1 -1"))
    assert main(["outermost"]) == 0
    assert capsys.readouterr().out.strip() == NO_SUBTREE_MESSAGE


def test_main_outer_matches_function(monkeypatch, capsys, sample):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    assert main(["outer"]) == 0
    printed = [int(token) for token in capsys.readouterr().out.split()]
    assert printed == outer_boundary(sample)


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2"))
    assert main(["outer"]) == 1
    assert "error" in capsys.readouterr().err