"""Outer boundary, leaf and shape comparisons for binary trees."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from drillbook.trees import TreeNode, build_level_order

NO_SUBTREE_MESSAGE = "The Binary Tree does not have left or right subtree"


def _edge_chain(node: TreeNode | None) -> Iterator[int]:
    """Yield values walking down, preferring the left child over the right."""
    while node is not None:
        yield node.val
        node = node.left if node.left is not None else node.right


def outer_boundary(root: TreeNode | None) -> list[int]:
    """Return the outer edge of the tree read from the bottom left to the bottom right.

    The left edge is read upwards, then the root, then the right edge downwards.
    Both edges descend into the left child when there is one, else the right.
    """
    if root is None:
        return []
    left_edge = list(_edge_chain(root.left))
    left_edge.reverse()
    return [*left_edge, root.val, *_edge_chain(root.right)]


def right_spine_echo(root: TreeNode | None) -> list[int]:
    """Return the right spine going down followed by the same spine coming back up."""
    spine: list[int] = []
    node = root
    while node is not None:
        spine.append(node.val)
        node = node.right
    return spine + spine[::-1]


def same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    return (
        first.val == second.val
        and same_tree(first.left, second.left)
        and same_tree(first.right, second.right)
    )


def leaf_values(root: TreeNode | None) -> list[int]:
    """Return the values of the leaves from left to right."""
    if root is None:
        return []
    if root.is_leaf():
        return [root.val]
    return leaf_values(root.left) + leaf_values(root.right)


def _outer_leaf(node: TreeNode | None, prefer_left: bool) -> int | None:
    while node is not None:
        if node.is_leaf():
            return node.val
        first, second = (
            (node.left, node.right) if prefer_left else (node.right, node.left)
        )
        node = first if first is not None else second
    return None


def outermost_leaves(root: TreeNode | None) -> tuple[int | None, int | None]:
    """Return the leaf reached hugging the left side and the one hugging the right.

    The left leaf is searched in the left subtree and the right leaf in the
    right subtree; a missing subtree gives None for that side.
    """
    if root is None:
        return None, None
    return _outer_leaf(root.left, True), _outer_leaf(root.right, False)


def main(argv: Sequence[str] | None = None) -> int:
    """Read level-order trees from standard input and report on them."""
    parser = argparse.ArgumentParser(prog="drillbook-tree-outline")
    parser.add_argument(
        "command",
        choices=("outer", "same", "outermost"),
        help="outer: print the outer boundary; same: compare two trees; "
        "outermost: print the outermost left and right leaves",
    )
    args = parser.parse_args(argv)

    tokens = iter([int(token) for token in sys.stdin.read().split()])
    try:
        if args.command == "outer":
            root = build_level_order(tokens)
            print("".join(f"{value} " for value in outer_boundary(root)))
        elif args.command == "same":
            first = build_level_order(tokens)
            second = build_level_order(tokens)
            print("YES" if same_tree(first, second) else "NO")
        else:
            root = build_level_order(tokens)
            left, right = outermost_leaves(root)
            if left is not None and right is not None:
                print(f"{left} {right}")
            else:
                print(NO_SUBTREE_MESSAGE)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0