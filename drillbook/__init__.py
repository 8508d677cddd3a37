"""Classic algorithm drills: trees, graphs, grids, dynamic programming, stacks, strings and sequences."""

__version__ = "0.1.0"

__all__ = [
    "dp",
    "graphs",
    "grid",
    "patterns",
    "sequences",
    "stacks",
    "students",
    "text",
    "tree_outline",
    "tree_search",
    "trees",
]