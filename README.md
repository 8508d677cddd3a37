# drillbook

A small library of classic algorithm drills, each written as a plain,
reusable Python function: binary trees, graph and grid searches, dynamic
programming, stack tricks, string processing and sequence manipulation.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `drillbook.trees`: the `TreeNode` dataclass (`val`, `left`, `right`,
  `is_leaf()`), building trees from level-order input
  (`build_level_order`, `parse_level_order`, with `-1` marking a missing
  child), traversals returning lists (`level_order`, `preorder`,
  `inorder`, `postorder`) and measures (`height`, `count_leaves`,
  `sum_left_children`, `tilt`, `deepest_leaves_sum`, `diameter`).
- `drillbook.tree_outline`: `outer_boundary`, `right_spine_echo`,
  `same_tree`, `leaf_values`, `outermost_leaves`, and the `main` function
  behind the command below.
- `drillbook.tree_search`: `bst_contains` and `deepest_leaves_by_side`.
- `drillbook.graphs`: `message_route` finds a shortest route from node 1
  to node n, or returns `None`. `valid_path` checks whether two nodes
  are connected.
- `drillbook.grid`: island counting and area (`count_islands`,
  `max_island_area`, `count_sub_islands`), shortest paths on character
  grids (`shortest_distance`, `path_directions`, `mark_path`) and
  `dfs_parents`.
- `drillbook.dp`: `knapsack`, `subset_sum_table`, `has_subset_sum`,
  `min_subset_sum_difference` and `target_sum_ways`.
- `drillbook.stacks`: the `MinStack` class (`push`, `pop`, `top`,
  `minimum`), `run_min_stack`, `remove_adjacent_duplicates`,
  `score_operations` and `is_balanced`.
- `drillbook.students`: the `Student` dataclass, `parse_students`,
  `sort_by_marks` and `swap_sections`.
- `drillbook.text`: `replace_all`, `replace_char`,
  `palindrome_arrangement`, `special_char_counts`, `char_counts`,
  `sorted_letters`, `frequency_sorted`, `reverse_string`,
  `is_subsequence` and `word_counts`.
- `drillbook.patterns`: text patterns returned as lists of lines
  (`center_pattern`, `diagonal_pattern`, `stairs_down`, `stairs_up`).
- `drillbook.sequences`: list, stack, queue and set exercises such as
  `max_with_position`, `max_even_sum`, `merge_between_zeros`, `min_max`,
  `range_sums`, `remove_nth_from_end`, `swap_nth_from_ends`,
  `stack_matches_queue` and `distinct_suffix_counts`.

Functions raise `ValueError` or `IndexError` on input they cannot handle,
for example an empty sequence, a position out of range or level-order
input that ends early.

## Example

```python
from drillbook.trees import build_level_order, height, level_order
from drillbook.dp import knapsack

root = build_level_order([10, 20, 30, 40, -1, -1, 50, -1, -1, -1, -1])
print(level_order(root))   # [10, 20, 30, 40, 50]
print(height(root))        # 3

print(knapsack([2, 3, 4], [3, 4, 5], 5))   # 7
```

## Command line

The `drillbook-tree-outline` command reads binary trees in level order
from standard input (`-1` for a missing child). It takes one of three
subcommands:

- `outer` prints the outer boundary of one tree.
- `same` reads two trees and prints `YES` or `NO`.
- `outermost` prints the outermost left and right leaves. If the tree
  lacks a left or a right subtree, it prints a message saying so.

```
echo "10 20 30 40 -1 -1 50 -1 -1 -1 -1" | drillbook-tree-outline outer
```

This prints `40 20 10 30 50`.

## What it does not do

Only the tree-outline functions have a command. Every other drill is a
library function that takes Python values. None of them reads standard
input or prints results.