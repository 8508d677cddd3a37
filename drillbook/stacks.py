"""Stack-based puzzles: a minimum-tracking stack and string reductions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EMPTY_REPLY = -1
"""Value reported by run_min_stack when a query finds the stack empty."""

_PAIRS = {")": "(", "}": "{", "]": "["}


class MinStack:
    """A stack of integers that also reports its smallest element."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        """Push value onto the stack."""
        self._items.append(value)
        if not self._minimums or value <= self._minimums[-1]:
            self._minimums.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        value = self._items.pop()
        if value == self._minimums[-1]:
            self._minimums.pop()
        return value

    def top(self) -> int:
        """Return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def minimum(self) -> int:
        """Return the smallest value; raise IndexError when empty."""
        if not self._minimums:
            raise IndexError("minimum of an empty stack")
        return self._minimums[-1]


def run_min_stack(operations: Iterable[Sequence[int]]) -> list[int]:
    """Run numbered operations on a MinStack and return what the queries report.

    1 x pushes x, 2 pops (nothing when empty), 3 reports the top and 4 the
    minimum, -1 when the stack is empty. Other codes are ignored.
    """
    stack = MinStack()
    replies: list[int] = []
    for operation in operations:
        code = operation[0]
        if code == 1:
            stack.push(operation[1])
        elif code == 2:
            if stack:
                stack.pop()
        elif code == 3:
            replies.append(stack.top() if stack else EMPTY_REPLY)
        elif code == 4:
            replies.append(stack.minimum() if stack else EMPTY_REPLY)
    return replies


def remove_adjacent_duplicates(word: str) -> str:
    """Repeatedly drop pairs of equal neighbouring characters."""
    kept: list[str] = []
    for char in word:
        if kept and kept[-1] == char:
            kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def score_operations(ops: str) -> int:
    """Score a string of digits and the operations '+', 'D' and 'C'.

    A digit records itself, '+' records the sum of the last two records,
    'D' doubles the last record and 'C' cancels it. Operations without
    enough records, and other characters, are ignored. Returns the total.
    """
    records: list[int] = []
    for char in ops:
        if char == "+":
            if len(records) >= 2:
                records.append(records[-1] + records[-2])
        elif char == "D":
            if records:
                records.append(records[-1] * 2)
        elif char == "C":
            if records:
                records.pop()
        elif "0" <= char <= "9":
            records.append(int(char))
    return sum(records)


def is_balanced(text: str) -> bool:
    """Return True if every bracket in text is closed in the right order.

    Any character that is not a closing bracket matching the last open one
    stays unmatched, so text must consist of brackets only to be balanced.
    """
    pending: list[str] = []
    for char in text:
        if pending and _PAIRS.get(char) == pending[-1]:
            pending.pop()
        else:
            pending.append(char)
    return not pending