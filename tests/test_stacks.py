import pytest

from drillbook.stacks import (
    MinStack,
    is_balanced,
    remove_adjacent_duplicates,
    run_min_stack,
    score_operations,
)


def test_min_stack_tracks_minimum_through_pops():
    stack = MinStack()
    for value in [5, 3, 7, 3, 8]:
        stack.push(value)
    assert stack.minimum() == 3
    assert stack.pop() == 8
    assert stack.pop() == 3
    assert stack.minimum() == 3
    assert stack.pop() == 7
    assert stack.pop() == 3
    assert stack.minimum() == 5
    assert stack.top() == 5


def test_min_stack_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.minimum()


def test_min_stack_len_follows_pushes_and_pops():
    stack = MinStack()
    stack.push(1)
    stack.push(2)
    stack.pop()
    assert len(stack) == 1


def test_run_min_stack_reports_queries():
    operations = [(1, 5), (1, 3), (4,), (3,), (2,), (4,), (3,)]
    assert run_min_stack(operations) == [3, 3, 5, 5]


def test_run_min_stack_empty_replies_and_ignored_pop():
    assert run_min_stack([(2,), (3,), (4,)]) == [-1, -1]


def test_run_min_stack_ignores_unknown_codes():
    assert run_min_stack([(1, 9), (7,), (3,)]) == [9]


def test_remove_adjacent_duplicates():
    assert remove_adjacent_duplicates("abbaca") == "ca"


@pytest.mark.parametrize("word", ["abc", "a", "", "xyzxyz"])
def test_remove_adjacent_duplicates_keeps_words_without_pairs(word):
    assert remove_adjacent_duplicates(word) == word


def test_remove_adjacent_duplicates_result_has_no_pairs():
    result = remove_adjacent_duplicates("aabccbddeffeg")
    assert all(a != b for a, b in zip(result, result[1:]))


def test_score_operations():
    assert score_operations("52CD+") == 30


def test_score_operations_plain_digits_sum():
    assert score_operations("123") == sum([1, 2, 3])


def test_score_operations_ignores_operations_without_records():
    assert score_operations("+DC7") == 7


def test_score_cancel_everything_is_zero():
    assert score_operations("12CC") == 0


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[()]}", ""])
def test_balanced(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", "(]", "([)]", "a", "(a)"])
def test_unbalanced(text):
    assert is_balanced(text) is False