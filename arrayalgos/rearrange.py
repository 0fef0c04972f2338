"""Reordering, rotation and de-duplication of integer sequences."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence
from itertools import groupby


def sort_colors(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s with a single Dutch-flag pass.

    Raises ValueError if any value is not 0, 1 or 2.
    """
    items = list(values)
    invalid = sorted({v for v in items if v not in (0, 1, 2)})
    if invalid:
        raise ValueError(f"values must be 0, 1 or 2, got {invalid}")
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        value = items[mid]
        if value == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def reverse_range(values: MutableSequence[int], start: int, end: int) -> None:
    """Reverse values[start..end] (both inclusive) in place.

    An empty range (start == end + 1) is allowed. Raises IndexError when the
    range does not lie inside the sequence.
    """
    if not 0 <= start <= end + 1 <= len(values):
        raise IndexError(f"range {start}..{end} outside sequence of {len(values)}")
    values[start : end + 1] = values[start : end + 1][::-1]


def rotate_left(values: Iterable[int], places: int) -> list[int]:
    """Return the values rotated left by the given number of places."""
    items = list(values)
    if not items:
        return items
    size = len(items)
    places %= size
    reverse_range(items, 0, places - 1)
    reverse_range(items, places, size - 1)
    reverse_range(items, 0, size - 1)
    return items


def move_zeros_to_end(values: Iterable[int]) -> list[int]:
    """Return the values with zeros moved to the end, other order kept."""
    items = list(values)
    slot = 0
    for index, value in enumerate(items):
        if value != 0:
            items[index], items[slot] = items[slot], value
            slot += 1
    return items


def next_permutation(values: Iterable[int]) -> list[int]:
    """Return the next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    items = list(values)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return items
    successor = next(
        j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = items[pivot + 1 :][::-1]
    return items


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Collapse runs of equal adjacent values into a single value."""
    return [key for key, _ in groupby(values)]


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of two ascending sequences, ascending."""
    return [key for key, _ in groupby(heapq.merge(first, second))]