"""Text patterns drawn on a grid of characters."""

from __future__ import annotations


def center_pattern(rows: int, cols: int, distance: int) -> list[str]:
    """Return rows of '#' with a '*' square of the given reach around an 'X' centre."""
    mid_row, mid_col = rows // 2, cols // 2

    def cell(i: int, j: int) -> str:
        if i == mid_row and j == mid_col:
            return "X"
        if abs(i - mid_row) <= distance and abs(j - mid_col) <= distance:
            return "*"
        return "#"

    return ["".join(cell(i, j) for j in range(cols)) for i in range(rows)]


def diagonal_pattern(rows: int, cols: int) -> list[str]:
    """Return rows with '\\' on the main diagonal, '/' on the anti-diagonal and 'X' at the centre."""
    mid_row, mid_col = rows // 2, cols // 2

    def cell(i: int, j: int) -> str:
        if i == mid_row and j == mid_col:
            return "X"
        if i == j:
            return "\\"
        if i + j == rows - 1:
            return "/"
        return " "

    return ["".join(cell(i, j) for j in range(cols)) for i in range(rows)]


def stairs_down(n: int) -> list[str]:
    """Return n steps of '***', each indented two spaces more than the last."""
    return [" " * (2 * step) + "***" for step in range(n)]


def stairs_up(n: int) -> list[str]:
    """Return n rising steps, each drawn as a '__' line over a '|' line."""
    lines: list[str] = []
    for step in range(n):
        indent = "  " * (n - step - 1)
        lines.append(indent + "__")
        lines.append(indent + "|")
    return lines