# dsakit

A small collection of classic algorithms, each written as a plain Python
function that takes ordinary lists, strings or tree nodes and returns a value.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

### `dsakit.arrays`

- `longest_run_of_ones(values)`: length of the longest run of 1s.
- `single_element(values)`: the value that appears once when all others appear twice (XOR of all values).
- `rotate_left_by_one(values)`, `rotate_left(values, k)`: new rotated lists; `rotate_left` raises `ValueError` unless `0 <= k <= len(values)`.
- `missing_number(values, n)`: the number from 1..n missing among the first `n - 1` values.
- `move_zeros(values)`: zeros moved to the end, other values in order.
- `remove_duplicates(values)`: removes repeats from a sorted list in place and returns the new length.
- `second_order_elements(values)`: `[second largest, second smallest]`; `-1` and `2**31 - 1` stand in where no such element exists. Raises `ValueError` for an empty sequence.
- `zero_matrix(matrix)`: a copy with every row and column containing a zero set to zero.
- `sorted_union(a, b)`: the sorted union, without repeats, of two sorted sequences.
- `alternate_numbers(values)`: positives and non-positives interleaved, starting with a positive; raises `ValueError` if the two groups differ in size.
- `count_subarrays_with_sum(values, k)`: number of contiguous subarrays summing to `k`.
- `majority_element(values)`: the Boyer-Moore voting candidate; raises `ValueError` for no values.
- `sort_012(values)`: a sorted copy of a sequence of 0s, 1s and 2s.
- `has_pair_with_sum(values, target)`: whether two distinct elements sum to `target`.

```python
from dsakit.arrays import sorted_union, count_subarrays_with_sum

sorted_union([1, 2, 2, 5], [2, 3, 5])      # [1, 2, 3, 5]
count_subarrays_with_sum([1, 2, 3], 3)     # 2
```

### `dsakit.knapsack`

- `knapsack(weights, values, max_weight)`: 0/1 knapsack.
- `unbounded_knapsack(profits, weights, capacity)`: each item usable any number of times; weights must be positive.
- `cut_rod(prices, length)`: best price for a rod, `prices[i]` being the price of a piece of length `i + 1`.
- `count_ways_to_make_change(denominations, value)`: number of coin combinations.
- `count_subsets_with_sum(numbers, target)`: number of subsets summing to `target`, modulo 10^9 + 7; zeros double the count.
- `count_partitions(numbers, difference)`: number of splits into two groups whose sums differ by `difference`.

Invalid input (mismatched lengths, negative capacities or weights, non-positive coins) raises `ValueError`.

```python
from dsakit.knapsack import knapsack, count_ways_to_make_change

knapsack([1, 2, 4, 5], [5, 4, 8, 6], 5)    # 13
count_ways_to_make_change([1, 2, 3], 4)    # 4
```

### `dsakit.paths`

- `unique_paths(rows, cols)`: right/down paths across a grid.
- `minimum_triangle_path_sum(triangle)`: smallest top-to-bottom sum, moving down or down-right.
- `ninja_training(points)`: most merit points over the days when the same one of three activities may not be done two days running.

```python
from dsakit.paths import unique_paths

unique_paths(3, 7)                         # 28
```

### `dsakit.strings`

- `edit_distance(s, t)`
- `lcs_length(s, t)`: longest common subsequence length.
- `longest_common_substring(s, t)`: length of the longest common contiguous substring.
- `longest_palindrome_subsequence(s)`
- `min_insertions_deletions(s, t)`
- `shortest_supersequence(s, t)`: returns the string itself.
- `count_distinct_subsequences(text, pattern)`: modulo 10^9 + 7.

```python
from dsakit.strings import edit_distance, lcs_length

edit_distance("horse", "ros")              # 3
lcs_length("abcde", "ace")                 # 3
```

### Binary trees

`dsakit.tree` provides the `Node` dataclass (`data`, `left`, `right`) and
`build_tree(values)`, which builds a tree from a level-order listing where
`None` marks a missing child. Children of missing nodes take no places in
the listing.

```python
from dsakit.tree import build_tree
from dsakit.traversal import inorder, zigzag_levels
from dsakit.views import top_view
from dsakit.properties import height, diameter

root = build_tree([1, 2, 3, 4, 5, None, 6])
inorder(root)          # [4, 2, 5, 1, 3, 6]
zigzag_levels(root)    # [[1], [3, 2], [4, 5, 6]]
top_view(root)         # [4, 2, 1, 3, 6]
height(root)           # 3
diameter(root)         # 4
```

- `dsakit.traversal`: recursive, iterative and Morris traversals
  (`preorder`, `inorder`, `postorder`, `iterative_preorder`,
  `iterative_inorder`, `postorder_two_stacks`, `postorder_one_stack`,
  `morris_inorder`, `morris_preorder`; the Morris versions restore the tree
  when they finish), level-order and zigzag orders (`level_order`,
  `level_order_flat`, `zigzag_levels`, `zigzag_order`), and
  `all_traversals`, which returns `[inorder, preorder, postorder]`, or `[]`
  for an empty tree.
- `dsakit.views`: `top_view`, `bottom_view`, `left_view`, `right_view`,
  `boundary_traversal`.
- `dsakit.properties`: `height` (in nodes), `diameter` (in edges),
  `is_balanced`, `identical`, `is_symmetric`, `max_path_sum` (raises
  `ValueError` for an empty tree), `max_width`.

## What it does not do

dsakit is a library only: it has no command-line interface, reads no
files and keeps no state between calls.