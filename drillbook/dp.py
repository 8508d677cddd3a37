"""Subset-sum and knapsack style dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _non_negative(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError(f"{what} must not be negative")
    return items


def min_subset_sum_difference(values: Iterable[int]) -> int:
    """Split values into two groups and return the smallest difference of their sums."""
    items = _non_negative(values, "values")
    total = sum(items)
    reachable = {0}
    for value in items:
        reachable |= {s + value for s in reachable}
    return min(abs(total - 2 * s) for s in reachable)


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items picked within the weight capacity (0/1)."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    memo: dict[tuple[int, int], int] = {}

    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        key = (count, room)
        if key not in memo:
            weight, value = weights[count - 1], values[count - 1]
            result = best(count - 1, room)
            if weight <= room:
                result = max(result, best(count - 1, room - weight) + value)
            memo[key] = result
        return memo[key]

    return best(len(weights), capacity)


def subset_sum_table(values: Iterable[int], target: int) -> list[list[bool]]:
    """Return the table where row i, column j says whether the first i values can sum to j."""
    items = _non_negative(values, "values")
    if target < 0:
        raise ValueError("target must not be negative")
    table = [[j == 0 for j in range(target + 1)]]
    for value in items:
        previous = table[-1]
        table.append(
            [
                previous[j] or (value <= j and previous[j - value])
                for j in range(target + 1)
            ]
        )
    return table


def has_subset_sum(values: Iterable[int], target: int) -> bool:
    """Return True if some subset of values sums to target."""
    return subset_sum_table(values, target)[-1][target]


def target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Return how many ways signs can be given to nums so that they add to target."""
    items = _non_negative(nums, "nums")
    total = sum(items)
    if target > total or (target + total) < 0 or (target + total) % 2 == 1:
        return 0
    goal = (target + total) // 2
    ways = [1] + [0] * goal
    for value in items:
        for amount in range(goal, value - 1, -1):
            ways[amount] += ways[amount - value]
    return ways[goal]