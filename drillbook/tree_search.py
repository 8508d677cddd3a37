"""Searching a binary search tree and finding the last leaf on each side."""

from __future__ import annotations

from drillbook.tree_outline import leaf_values
from drillbook.trees import TreeNode


def bst_contains(root: TreeNode | None, value: int) -> bool:
    """Return True if value is found by descending the tree as a binary search tree."""
    node = root
    while node is not None:
        if node.val == value:
            return True
        node = node.left if value < node.val else node.right
    return False


def _last_leaf(node: TreeNode | None) -> int | None:
    leaves = leaf_values(node)
    return leaves[-1] if leaves else None


def deepest_leaves_by_side(root: TreeNode | None) -> tuple[int | None, int | None]:
    """Return the last leaf, read left to right, of the left and of the right subtree.

    A missing subtree, or an empty tree, gives None for that side.
    """
    if root is None:
        return None, None
    return _last_leaf(root.left), _last_leaf(root.right)