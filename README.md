# dailydsa

A small collection of well-known algorithms on lists and strings, each one
a plain function with no dependencies beyond the standard library.

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

### `dailydsa.arrays`

| Function | What it does |
| --- | --- |
| `second_largest(values)` | Largest value strictly below the maximum, or `-1` if there is none; `ValueError` on an empty sequence |
| `push_zeros_to_end(values)` | Moves zeros to the end in place and keeps the order of the other values |
| `reverse_in_place(values)` | Reverses a list in place |
| `rotate_left(values, d)` | Rotates a list left by `d` steps in place, treating it as circular; `ValueError` if `d` is negative |
| `next_permutation(values)` | Rearranges a list into its next lexicographic permutation in place, or into ascending order after the last one |
| `find_majority(values)` | Values that occur more than `n // 3` times, sorted |
| `smallest_missing_positive(values)` | Smallest positive integer not present |

### `dailydsa.profits`

| Function | What it does |
| --- | --- |
| `max_profit_multiple(prices)` | Best stock profit when any number of transactions is allowed |
| `max_profit_single(prices)` | Best stock profit from at most one buy and one sell (0 if no profit is possible) |
| `min_height_difference(heights, k)` | Smallest possible spread after raising or lowering every tower by `k`, skipping choices that would make a tower negative; the input is not modified |
| `max_product_subarray(values)` | Largest product of a non-empty contiguous subarray |
| `max_circular_subarray_sum(values)` | Largest sum of a non-empty contiguous subarray of a circular list |

`min_height_difference`, `max_product_subarray` and
`max_circular_subarray_sum` raise `ValueError` when given an empty sequence.

### `dailydsa.text`

| Function | What it does |
| --- | --- |
| `are_anagrams(s1, s2)` | Whether two strings contain the same characters with the same counts |
| `prefix_function(pattern)` | KMP longest-proper-prefix-suffix table |
| `kmp_search(pattern, text)` | Start indices of every occurrence of `pattern` in `text`, overlaps included; `ValueError` on an empty pattern |
| `first_non_repeating(s)` | First character that occurs exactly once, or `"$"` |
| `atoi(s)` | Skips leading spaces, reads one optional sign and the following digits, and clamps the result to the signed 32-bit range; 0 if there are no digits |
| `add_binary(a, b)` | Sum of two binary strings without leading zeros; `""` when the sum is zero, `ValueError` on characters other than `0` and `1` |

### `dailydsa.scheduling`

| Function | What it does |
| --- | --- |
| `job_sequencing(deadlines, profits)` | `(jobs_done, total_profit)` for unit-time jobs with deadlines |
| `knapsack(capacity, values, weights)` | Best total value for the 0/1 knapsack problem |

Both raise `ValueError` when their two sequences differ in length;
`knapsack` also rejects a negative capacity.

## Examples

```python
from dailydsa.arrays import second_largest, rotate_left, next_permutation
from dailydsa.profits import max_profit_multiple
from dailydsa.text import kmp_search, atoi, add_binary
from dailydsa.scheduling import job_sequencing, knapsack

second_largest([12, 35, 1, 10, 34, 1])        # 34

values = [1, 2, 3, 4, 5]
rotate_left(values, 2)
values                                        # [3, 4, 5, 1, 2]

perm = [2, 4, 1, 7, 5, 0]
next_permutation(perm)
perm                                          # [2, 4, 5, 0, 1, 7]

max_profit_multiple([100, 180, 260, 310, 40, 535, 695])   # 865

kmp_search("aaba", "aabaacaadaabaaba")        # [0, 9, 12]
atoi("  -0012gfg4")                           # -12
add_binary("1101", "111")                     # "10100"

job_sequencing([4, 1, 1, 1], [20, 10, 40, 30])            # (2, 60)
knapsack(5, [10, 40, 30, 50], [5, 4, 2, 3])               # 80
```

The functions that work in place change the list they are given and return
`None`, in the same way as `list.sort`.

## Scope

This is a library of functions only. It has no command-line interface and
does not read or write files.