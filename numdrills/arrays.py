"""Small exercises on integer sequences: extremes, search, rotation and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _non_empty(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{what} of an empty sequence")
    return items


def find_min(values: Iterable[int]) -> int:
    """Return the smallest value."""
    return min(_non_empty(values, "find_min()"))


def find_max(values: Iterable[int]) -> int:
    """Return the largest value."""
    return max(_non_empty(values, "find_max()"))


def search_element(values: Sequence[int], key: int) -> int | None:
    """Return the index of the first occurrence of ``key``, or None if absent."""
    return next((index for index, value in enumerate(values) if value == key), None)


def reverse_array(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def has_unique_occurrences(values: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(values).values()
    return len(set(counts)) == len(counts)


def fibonacci_element(n: int) -> int:
    """Return the n-th element (1-based) of the Fibonacci sequence 0, 1, 1, 2, ..."""
    if n < 1:
        raise ValueError(f"position must be at least 1, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def missing_number(values: Sequence[int]) -> int:
    """Return the number of 0..len(values) that does not appear in ``values``."""
    size = len(values)
    return size * (size + 1) // 2 - sum(values)


def rotate_by_one(values: Iterable[int]) -> list[int]:
    """Return the values rotated one place to the right."""
    items = list(values)
    return items[-1:] + items[:-1]


def second_largest(values: Iterable[int]) -> int:
    """Return the largest value that is strictly below the maximum."""
    items = _non_empty(values, "second_largest()")
    largest = max(items)
    rest = [value for value in items if value != largest]
    if not rest:
        raise ValueError("second largest element does not exist")
    return max(rest)