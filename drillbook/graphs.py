"""Breadth-first routing and path existence on undirected graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a shortest path of nodes from 1 to n, or None if n is unreachable."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)

    parent: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for child in adjacency[node]:
            if child not in parent:
                parent[child] = node
                queue.append(child)

    if n not in parent:
        return None
    path: list[int] = []
    node: int | None = n
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def valid_path(
    n: int, edges: Iterable[tuple[int, int]], source: int, destination: int
) -> bool:
    """Return True if destination can be reached from source.

    Nodes are numbered 0 to n-1; an edge outside that range raises ValueError.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) is outside 0..{n - 1}")
        adjacency[a].append(b)
        adjacency[b].append(a)

    if source == destination:
        return True
    visited = {source}
    stack = [source]
    while stack:
        node = stack.pop()
        for child in adjacency[node]:
            if child == destination:
                return True
            if child not in visited:
                visited.add(child)
                stack.append(child)
    return False