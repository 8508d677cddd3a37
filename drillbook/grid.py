"""Searches over character and integer grids: paths, islands and parents."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from itertools import pairwise
from typing import Any

Cell = tuple[int, int]

_STEPS: tuple[Cell, ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))
_DIRECTION_NAMES = {(0, 1): "R", (0, -1): "L", (-1, 0): "U", (1, 0): "D"}


def _inside(grid: Sequence[Sequence[Any]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _neighbours(grid: Sequence[Sequence[Any]], cell: Cell) -> Iterator[Cell]:
    row, col = cell
    for d_row, d_col in _STEPS:
        child = (row + d_row, col + d_col)
        if _inside(grid, *child):
            yield child


def _locate(grid: Sequence[Sequence[str]], mark: str) -> Cell:
    """Return the last cell, in reading order, holding mark."""
    found: Cell | None = None
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == mark:
                found = (r, c)
    if found is None:
        raise ValueError(f"grid has no {mark!r} cell")
    return found


def _bfs(grid: Sequence[Sequence[str]], start: Cell, wall: str) -> dict[Cell, Cell | None]:
    """Return the breadth-first parent of every cell reachable from start."""
    parents: dict[Cell, Cell | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for child in _neighbours(grid, cell):
            if child not in parents and grid[child[0]][child[1]] != wall:
                parents[child] = cell
                queue.append(child)
    return parents


def _trace(parents: dict[Cell, Cell | None], end: Cell) -> list[Cell]:
    path: list[Cell] = []
    cell: Cell | None = end
    while cell is not None:
        path.append(cell)
        cell = parents[cell]
    path.reverse()
    return path


def _shortest_path(
    grid: Sequence[Sequence[str]], start_mark: str, end_mark: str, wall: str
) -> list[Cell] | None:
    start = _locate(grid, start_mark)
    end = _locate(grid, end_mark)
    parents = _bfs(grid, start, wall)
    if end not in parents:
        return None
    return _trace(parents, end)


def _components(
    grid: Sequence[Sequence[Any]], is_land: Callable[[Any], bool]
) -> Iterator[list[Cell]]:
    """Yield the cells of each four-connected group of land, in reading order."""
    seen: set[Cell] = set()
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if (r, c) in seen or not is_land(value):
                continue
            seen.add((r, c))
            stack = [(r, c)]
            component: list[Cell] = []
            while stack:
                cell = stack.pop()
                component.append(cell)
                for child in _neighbours(grid, cell):
                    if child not in seen and is_land(grid[child[0]][child[1]]):
                        seen.add(child)
                        stack.append(child)
            yield component


def mark_path(grid: Sequence[Sequence[str]]) -> list[str]:
    """Mark with 'X' the cells of a shortest path from 'R' to 'D' avoiding '#'.

    'R' and 'D' keep their letters. When 'D' cannot be reached the grid is
    returned unchanged. Raises ValueError if either letter is missing.
    """
    path = _shortest_path(grid, "R", "D", "#")
    rows = [list(row) for row in grid]
    for r, c in (path or [])[1:-1]:
        rows[r][c] = "X"
    return ["".join(row) for row in rows]


def max_island_area(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of cells in the largest four-connected group of 1s."""
    return max((len(c) for c in _components(grid, lambda v: v == 1)), default=0)


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Return the number of four-connected groups of '1' cells."""
    return sum(1 for _ in _components(grid, lambda v: v == "1"))


def dfs_parents(rows: int, cols: int, source: Cell) -> dict[Cell, Cell | None]:
    """Return each cell's parent in a depth-first walk of an open rows x cols grid.

    Neighbours are tried right, left, up, down. The source maps to None and
    the cells are listed in reading order.
    """
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    row, col = source
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError(f"source {source} is outside a {rows}x{cols} grid")

    parents: dict[Cell, Cell | None] = {source: None}
    stack: list[tuple[Cell, Iterator[Cell]]] = [(source, iter(_STEPS))]
    while stack:
        cell, steps = stack[-1]
        for d_row, d_col in steps:
            child = (cell[0] + d_row, cell[1] + d_col)
            if 0 <= child[0] < rows and 0 <= child[1] < cols and child not in parents:
                parents[child] = cell
                stack.append((child, iter(_STEPS)))
                break
        else:
            stack.pop()
    return {cell: parents[cell] for cell in sorted(parents)}


def count_sub_islands(
    grid1: Sequence[Sequence[int]], grid2: Sequence[Sequence[int]]
) -> int:
    """Return how many islands of grid2 lie entirely on land in grid1."""
    if len(grid1) != len(grid2) or any(
        len(a) != len(b) for a, b in zip(grid1, grid2)
    ):
        raise ValueError("both grids must have the same shape")
    return sum(
        1
        for component in _components(grid2, lambda v: v == 1)
        if all(grid1[r][c] != 0 for r, c in component)
    )


def shortest_distance(grid: Sequence[Sequence[str]]) -> int | None:
    """Return the fewest moves from 'S' to 'E' avoiding 'T', or None if unreachable."""
    path = _shortest_path(grid, "S", "E", "T")
    return None if path is None else len(path) - 1


def path_directions(grid: Sequence[Sequence[str]]) -> str | None:
    """Return the moves (R, L, U, D) of a shortest path from 'A' to 'B' avoiding '#'.

    Returns None when 'B' cannot be reached.
    """
    path = _shortest_path(grid, "A", "B", "#")
    if path is None:
        return None
    return "".join(
        _DIRECTION_NAMES[(b[0] - a[0], b[1] - a[1])] for a, b in pairwise(path)
    )