# algobook

Classic algorithms over arrays, strings, linked lists and binary trees,
written as small, plain Python functions with no dependencies outside the
standard library. Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algobook.dedup`

In-place compaction. Each function shortens the list it is given and returns
the new length.

- `remove_duplicates(nums)` keeps one value of each run of equal values.
- `remove_duplicates_keep_two(nums)` keeps at most two of each value of a
  sorted list.
- `remove_element(nums, val)` drops every occurrence of `val`, keeping the
  order of the rest.

### `algobook.search`

- `search_rotated(nums, target)` returns the index of `target` in a rotated
  sorted list of distinct values, or `-1`.
- `search_rotated_with_duplicates(nums, target)` returns `True` or `False`
  for a rotated sorted list that may repeat values.
- `nth_of_sorted(a, b, n)` returns the `n`-th (0-based) smallest value of two
  sorted sequences taken together; raises `IndexError` when `n` is out of
  range.
- `median_of_sorted(nums1, nums2)` returns the median as a `float`; raises
  `ValueError` when both are empty.

### `algobook.sums`

- `longest_consecutive(nums)` is the length of the longest run of
  consecutive integers.
- `two_sum(nums, target)` returns 1-based positions `(i, j)` with `i < j`, or
  `None`.
- `three_sum(nums)` returns every distinct ascending triple summing to zero.
- `three_sum_closest(nums, target)` returns the triple sum closest to
  `target`; raises `ValueError` for fewer than three values.
- `four_sum(nums, target)` returns every distinct ascending quadruple summing
  to `target`.

### `algobook.permutations`

- `next_permutation(nums)` steps the list in place to its next lexicographic
  permutation and returns `True`; on the last permutation it resets the list
  to ascending order and returns `False`.
- `permutation_sequence(n, k)` returns the `k`-th (1-based) permutation of the
  digits `1..n` as a string, for `n` from 0 to 9; other arguments raise
  `ValueError`.

### `algobook.grid`

- `is_valid_sudoku(board)` checks that no row, column or 3x3 box of a 9x9
  board (empty cells `"."`) repeats a digit; other board sizes raise
  `ValueError`.
- `rotate_image(matrix)` turns a square matrix a quarter turn clockwise in
  place; a non-square matrix raises `ValueError`.
- `set_zeroes(matrix)` zeroes, in place, every row and column holding a zero.

### `algobook.numeric`

- `trap(height)` – rain water held between bars.
- `plus_one(digits)` – a new list of digits for the number plus one.
- `climb_stairs(n)` – ways to climb `n` steps, one or two at a time.
- `gray_code(n)` – the `n`-bit reflected Gray code sequence.
- `can_complete_circuit(gas, cost)` – the starting station for a full
  circuit, or `-1`.
- `candy(ratings)` – fewest candies where higher-rated neighbours get more.
- `single_number(nums)` – the value seen once when others are seen twice.
- `single_number_ii(nums)` – the value seen once when others are seen three
  times.

### `algobook.strings`

- `is_palindrome(s)` looks only at ASCII letters and digits, ignoring case.
- `str_str(haystack, needle)` – index of the first match, or `-1`.
- `add_binary(a, b)` – sum of two binary numerals; other characters raise
  `ValueError`.
- `longest_palindrome(s)` – longest palindromic substring, earliest on ties.

### `algobook.tree`

- `TreeNode(val, left=None, right=None)`.
- `build_tree(values)` builds a tree from level-order values, `None` marking
  a missing child.
- `zigzag_level_order(root)` lists values level by level, alternating
  direction.

### `algobook.linked_list`

`ListNode(val, next=None)` nodes compare by identity, iterate over their
values from that node on, and have `to_list()`. `build_list(values)` links
values into a list. The operations are `add_two_numbers`, `reverse_list`,
`reverse_between`, `partition`, `delete_duplicates`, `delete_all_duplicates`,
`rotate_right`, `remove_nth_from_end`, `swap_pairs`, `reverse_k_group`,
`has_cycle`, `detect_cycle` and `reorder_list`. Positions that do not fit the
list, or a negative rotation, raise `ValueError`.

### `algobook.random_list`

`RandomListNode(label, next=None, random=None)` and `copy_random_list(head)`,
which returns a deep copy with both pointers mapped onto the copies.

### `algobook.lru_cache`

`LRUCache(capacity)` maps integer keys to integer values. `get(key)` returns
the value and marks it as used, or `-1` when absent; `set(key, value)` stores
a value, evicting the least recently used entry when full. It supports `len()`
and `in`. A capacity below 1 raises `ValueError`.

## Examples

```python
from algobook.sums import three_sum
from algobook.strings import add_binary
from algobook.linked_list import build_list, reverse_k_group
from algobook.lru_cache import LRUCache

three_sum([-1, 0, 1, 2, -1, -4])      # [[-1, -1, 2], [-1, 0, 1]]
add_binary("11", "1")                 # "100"

head = reverse_k_group(build_list([1, 2, 3, 4, 5]), 2)
head.to_list()                        # [2, 1, 4, 3, 5]

cache = LRUCache(2)
cache.set(1, 1)
cache.set(2, 2)
cache.get(1)                          # 1
cache.set(3, 3)                       # evicts key 2
cache.get(2)                          # -1
```

Functions that work in place, such as `remove_duplicates`,
`next_permutation`, `rotate_image` and `set_zeroes`, change the list they are
given, the way `list.sort` does.