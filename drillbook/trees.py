"""Binary trees read in level order, with traversals and simple measures."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY = -1
"""Marker for a missing child in level-order input."""


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


def build_level_order(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from level-order values where -1 marks a missing node.

    The first value is the root; every real node then takes two values,
    its left and its right child. Raises ValueError if the values run out.
    """
    items = iter(values)

    def take() -> int:
        try:
            return int(next(items))
        except StopIteration:
            raise ValueError("level-order input ended early") from None

    first = take()
    if first == EMPTY:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left_value, right_value = take(), take()
        if left_value != EMPTY:
            node.left = TreeNode(left_value)
            queue.append(node.left)
        if right_value != EMPTY:
            node.right = TreeNode(right_value)
            queue.append(node.right)
    return root


def parse_level_order(text: str) -> TreeNode | None:
    """Build a tree from whitespace-separated level-order integers."""
    return build_level_order(int(token) for token in text.split())


def level_order(root: TreeNode | None) -> list[int]:
    """Return node values breadth first, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def preorder(root: TreeNode | None) -> list[int]:
    """Return values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[int]:
    """Return values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Return values in left, right, root order."""
    return list(_postorder(root))


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def count_leaves(root: TreeNode | None) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.is_leaf():
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def sum_left_children(root: TreeNode | None) -> int:
    """Return the sum of the values of every node that is a left child."""
    if root is None:
        return 0
    own = root.left.val if root.left is not None else 0
    return own + sum_left_children(root.left) + sum_left_children(root.right)


def _tilt(node: TreeNode | None) -> tuple[int, int]:
    """Return (subtree value sum, subtree tilt)."""
    if node is None:
        return 0, 0
    left_sum, left_tilt = _tilt(node.left)
    right_sum, right_tilt = _tilt(node.right)
    return (
        left_sum + right_sum + node.val,
        left_tilt + right_tilt + abs(left_sum - right_sum),
    )


def tilt(root: TreeNode | None) -> int:
    """Return the sum over all nodes of |left subtree sum - right subtree sum|."""
    return _tilt(root)[1]


def deepest_leaves_sum(root: TreeNode | None) -> int:
    """Return the sum of the values on the deepest level."""
    level = [root] if root is not None else []
    total = 0
    while level:
        total = sum(node.val for node in level)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return total


def _diameter(node: TreeNode | None) -> tuple[int, int]:
    """Return (height, longest path in edges) for a subtree."""
    if node is None:
        return 0, 0
    left_height, left_best = _diameter(node.left)
    right_height, right_best = _diameter(node.right)
    best = max(left_best, right_best, left_height + right_height)
    return max(left_height, right_height) + 1, best


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    return _diameter(root)[1]