"""Searching and inspection of integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MISSING = object()


def largest(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def second_largest(values: Iterable[int]) -> int:
    """Return the largest value strictly smaller than the maximum.

    Raises ValueError when the input has fewer than two distinct values.
    """
    first: int | None = None
    second: int | None = None
    for value in values:
        if first is None or value > first:
            second, first = first, value
        elif value != first and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("no second largest distinct value")
    return second


def linear_search(values: Iterable[int], target: int) -> int | None:
    """Return the index of the first occurrence of target, or None."""
    return next(
        (index for index, value in enumerate(values) if value == target), None
    )


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values are in non-decreasing order."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))


def find_missing(values: Iterable[int]) -> int:
    """Return the missing number from an ascending run that starts at 1.

    When no gap is found the next number after the run is missing.
    """
    count = 0
    for expected, value in enumerate(values, start=1):
        if value != expected:
            return expected
        count = expected
    return count + 1


def find_single(values: Iterable[int]) -> int:
    """Return the value that appears once where every other value appears twice.

    Raises ValueError when every value is paired.
    """
    ordered = iter(sorted(values))
    for value in ordered:
        partner = next(ordered, _MISSING)
        if partner is _MISSING or partner != value:
            return value
    raise ValueError("every value appears in a pair")


def majority_element(values: Sequence[int] | Iterable[int]) -> int | None:
    """Return the value occurring more than half the time, or None."""
    items = list(values)
    candidate: int | None = None
    count = 0
    for value in items:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None