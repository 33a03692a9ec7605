"""Searching and divide-and-conquer extrema."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def _max_min(values: Sequence[Any], low: int, high: int) -> tuple[Any, Any]:
    if high - low <= 1:
        a, b = values[low], values[high]
        return max(a, b), min(a, b)
    mid = (low + high) // 2
    left_max, left_min = _max_min(values, low, mid)
    right_max, right_min = _max_min(values, mid + 1, high)
    return max(left_max, right_max), min(left_min, right_min)


def max_min(values: Sequence[Any]) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` by divide and conquer."""
    if not values:
        raise ValueError("max_min() of an empty sequence")
    return _max_min(values, 0, len(values) - 1)