# arrayalgos

A small collection of classic array algorithms, written as plain functions
over Python iterables of integers. Functions that rearrange values return a
new list and leave their input alone; `reverse_range` is the one exception
and works in place.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `arrayalgos.search`

- `largest(values)` – the largest value; `ValueError` for an empty input.
- `second_largest(values)` – the largest value strictly smaller than the
  maximum; `ValueError` when there are fewer than two distinct values.
- `linear_search(values, target)` – index of the first occurrence of
  `target`, or `None`.
- `is_sorted(values)` – whether the values are in non-decreasing order.
- `find_missing(values)` – the missing number in an ascending run starting at
  1; if there is no gap, the number after the run.
- `find_single(values)` – the value that appears once where every other value
  appears twice; `ValueError` if every value is paired.
- `majority_element(values)` – the value occurring more than half the time
  (Moore's voting algorithm with a check), or `None`.

### `arrayalgos.rearrange`

- `sort_colors(values)` – sort 0s, 1s and 2s in one Dutch-flag pass;
  `ValueError` for any other value.
- `reverse_range(values, start, end)` – reverse `values[start..end]`
  (inclusive) in place; `IndexError` if the range is outside the sequence.
- `rotate_left(values, places)` – rotate left by `places` (taken modulo the
  length) using three reversals.
- `move_zeros_to_end(values)` – zeros moved to the end, other values in their
  original order.
- `next_permutation(values)` – the next lexicographic permutation; the last
  one wraps round to ascending order.
- `remove_duplicates(values)` – runs of equal adjacent values collapsed to one.
- `sorted_union(first, second)` – the distinct values of two ascending
  sequences, ascending.

### `arrayalgos.subarray`

- `max_subarray_sum(values)` – largest sum of a non-empty contiguous run
  (Kadane); `ValueError` for an empty input.
- `longest_subarray_with_sum(values, k)` – length of the longest run summing
  to `k` using prefix sums; works with negative numbers; 0 if none.
- `longest_nonnegative_subarray_with_sum(values, k)` – the same with a sliding
  window; exact for non-negative values.
- `max_consecutive_ones(values)` – length of the longest run of 1s.
- `max_profit(prices)` – best profit from one buy followed by a later sale.
- `two_sum_pairs(values, target)` – `(smaller, larger)` pairs summing to
  `target`, found with two pointers over the sorted values; each position is
  used at most once.
- `leaders(values)` – values greater than everything to their right, listed
  from the right end towards the left.

## Example

```python
from arrayalgos.search import largest, is_sorted
from arrayalgos.rearrange import rotate_left
from arrayalgos.subarray import max_subarray_sum, max_profit

largest([8, 10, 5, 7, 9])                             # 10
is_sorted([1, 2, 3, 4, 5])                            # True
rotate_left([1, 2, 3, 4, 5, 6, 7], 3)                 # [4, 5, 6, 7, 1, 2, 3]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])     # 6
max_profit([7, 1, 5, 3, 6, 4])                        # 5
```

## Command line

The package installs an `arrayalgos` command. It takes a subcommand and one
or more integers, and prints the result:

```
arrayalgos sort-colors 2 0 2 1 1 0          # 0 0 1 1 2 2
arrayalgos two-sum --target 13 2 6 5 8 11   # 2 and 11 / 5 and 8, one per line
arrayalgos max-profit 7 1 5 3 6 4           # 5
arrayalgos max-subarray -2 1 -3 4 -1 2 1 -5 4   # 6
arrayalgos leaders 10 22 12 3 0 6           # 6 12 22
```

If an algorithm rejects its input (for example `sort-colors` given a 3), the
command prints `error: ...` to standard error and exits with status 1.

## Limits

Only the five subcommands above are available from the command line; the
other functions are used from Python. Input is given as command-line
arguments only; the command does not read files or standard input.