"""Puzzles on plain sequences used as lists, stacks, queues and sets."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate

REVERSED_PREFIX_LENGTH = 4
"""Number of leading items reverse_prefix turns around by default."""


def _check_position(position: int, length: int) -> None:
    if not 1 <= position <= length:
        raise IndexError(f"position {position} is outside 1..{length}")


def max_with_position(values: Iterable[int]) -> tuple[int, int]:
    """Return the largest value and the 1-based position of its first occurrence."""
    items = list(values)
    if not items:
        raise ValueError("max_with_position() of an empty sequence")
    index = max(range(len(items)), key=items.__getitem__)
    return items[index], index + 1


def max_even_sum(values: Iterable[int]) -> int:
    """Return the largest even number that is an element or a sum of two elements.

    Two elements give an even sum only when both are odd or both are even,
    so the candidates are the largest even element and the sums of the two
    largest odd and of the two largest even elements. Raises ValueError when
    there is no candidate at all.
    """
    items = list(values)
    evens = [value for value in items if value % 2 == 0]
    odds = [value for value in items if value % 2 != 0]
    candidates: list[int] = []
    if evens:
        candidates.append(max(evens))
    for group in (odds, evens):
        if len(group) >= 2:
            candidates.append(sum(heapq.nlargest(2, group)))
    if not candidates:
        raise ValueError("no even element and no pair with an even sum")
    return max(candidates)


def merge_between_zeros(values: Sequence[int]) -> list[int]:
    """Return the sum of each run of values closed by a zero.

    The first value is taken to be the opening zero and is skipped; values
    after the last zero are dropped.
    """
    merged: list[int] = []
    total = 0
    for value in list(values)[1:]:
        if value == 0:
            merged.append(total)
            total = 0
        total += value
    return merged


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest value."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return min(items), max(items)


def is_palindrome(values: Iterable[int]) -> bool:
    """Return True if the values read the same backwards."""
    items = list(values)
    return items == items[::-1]


def range_sums(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the sum of each inclusive, 1-based range (left, right) of values."""
    prefix = list(accumulate(values, initial=0))
    length = len(prefix) - 1
    sums: list[int] = []
    for left, right in queries:
        if not 1 <= left <= right <= length:
            raise IndexError(f"range ({left}, {right}) is outside 1..{length}")
        sums.append(prefix[right] - prefix[left - 1])
    return sums


def unique_sorted(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def remove_nth_from_end(values: Iterable[int], position: int) -> list[int]:
    """Return the values without the one at the given 1-based position from the end."""
    items = list(values)
    _check_position(position, len(items))
    del items[len(items) - position]
    return items


def remove_value(values: Iterable[int], value: int) -> list[int]:
    """Return the values with every occurrence of value removed."""
    return [item for item in values if item != value]


def reversed_items(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    items = list(values)
    items.reverse()
    return items


def reverse_prefix(
    values: Iterable[int], count: int = REVERSED_PREFIX_LENGTH
) -> list[int]:
    """Return the values with the first count of them reversed."""
    if count < 0:
        raise ValueError("count must not be negative")
    items = list(values)
    return items[:count][::-1] + items[count:]


def contains(values: Iterable[int], target: int) -> bool:
    """Return True if target is among the values."""
    return target in values


def descending(values: Iterable[int]) -> list[int]:
    """Return the distinct values from largest to smallest."""
    return sorted(set(values), reverse=True)


def same_stacks(first: Sequence[int], second: Sequence[int]) -> bool:
    """Return True if two stacks, listed bottom to top, hold the same values."""
    return list(first) == list(second)


def stack_matches_queue(
    stack_items: Sequence[int], queue_items: Sequence[int]
) -> bool:
    """Return True if popping the stack gives the same values as draining the queue.

    Both are listed in the order their values were added.
    """
    return list(reversed(stack_items)) == list(queue_items)


def swap_nth_from_ends(values: Iterable[int], position: int) -> list[int]:
    """Swap the value at the 1-based position from the start with the one from the end."""
    items = list(values)
    _check_position(position, len(items))
    left, right = position - 1, len(items) - position
    items[left], items[right] = items[right], items[left]
    return items


def distinct_suffix_counts(
    values: Sequence[int], positions: Iterable[int]
) -> list[int]:
    """For each 1-based position, count the distinct values from there to the end."""
    items = list(values)
    seen: set[int] = set()
    counts = [0] * len(items)
    for index in range(len(items) - 1, -1, -1):
        seen.add(items[index])
        counts[index] = len(seen)
    answers: list[int] = []
    for position in positions:
        _check_position(position, len(items))
        answers.append(counts[position - 1])
    return answers