"""Subarray, pair and running-extreme problems over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane).

    Raises ValueError for an empty input.
    """
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def longest_subarray_with_sum(values: Iterable[int], k: int) -> int:
    """Return the length of the longest contiguous run summing to k.

    Works for any integers, negative ones included. Returns 0 if none.
    """
    first_seen = {0: -1}
    total = 0
    best = 0
    for index, value in enumerate(values):
        total += value
        start = first_seen.get(total - k)
        if start is not None:
            best = max(best, index - start)
        first_seen.setdefault(total, index)
    return best


def longest_nonnegative_subarray_with_sum(values: Iterable[int], k: int) -> int:
    """Return the longest run summing to k using a sliding window.

    The answer is exact for non-negative values. Returns 0 if none.
    """
    items = list(values)
    if not items:
        return 0
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(items):
        total += value
        while left <= right and total > k:
            total -= items[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def max_consecutive_ones(values: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(values) if key == 1),
        default=0,
    )


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    stream = iter(prices)
    lowest = next(stream, None)
    if lowest is None:
        return 0
    best = 0
    for price in stream:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def two_sum_pairs(values: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Return pairs (smaller, larger) of distinct positions summing to target.

    The values are sorted and scanned with two pointers; each position is
    used at most once.
    """
    items = sorted(values)
    pairs: list[tuple[int, int]] = []
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total == target:
            pairs.append((items[left], items[right]))
            left += 1
            right -= 1
        elif total < target:
            left += 1
        else:
            right -= 1
    return pairs


def leaders(values: Iterable[int]) -> list[int]:
    """Return the values greater than everything to their right.

    They are listed from the right end of the input towards the left.
    """
    found: list[int] = []
    for value in reversed(list(values)):
        if not found or value > found[-1]:
            found.append(value)
    return found