"""Searching for a value in a list: linear, binary and interpolation search.

Every search returns the index of the value, or -1 when it is absent.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "binary_search",
    "iter_binary_search",
    "interpolation_search",
    "linear_search",
]


def binary_search(array: Sequence[int], target: int, low_index: int, high_index: int) -> int:
    """Recursively search the sorted range ``array[low_index:high_index + 1]``."""
    if high_index < low_index or not array:
        return -1
    mid = (high_index + low_index) // 2
    if array[mid] > target:
        return binary_search(array, target, low_index, mid - 1)
    if array[mid] < target:
        return binary_search(array, target, mid + 1, high_index)
    return mid


def iter_binary_search(
    array: Sequence[int], target: int, low_index: int, high_index: int
) -> int:
    """Iteratively search the sorted range ``array[low_index:high_index + 1]``."""
    if not array or high_index > len(array) or low_index < 0:
        return -1
    start, end = low_index, high_index
    while start <= end:
        mid = (start + end) // 2
        if array[mid] > target:
            end = mid - 1
        elif array[mid] < target:
            start = mid + 1
        else:
            return mid
    return -1


def interpolation_search(sorted_data: Sequence[int], guess: int) -> int:
    """Search ``sorted_data`` by interpolating the probe position.

    With duplicate values the index of the first occurrence is returned.
    """
    low, high = 0, len(sorted_data) - 1
    while low <= high:
        low_val, high_val = sorted_data[low], sorted_data[high]
        if not low_val <= guess <= high_val:
            return -1
        if low_val == high_val:
            return low
        mid = low + (guess - low_val) * (high - low) // (high_val - low_val)
        if sorted_data[mid] == guess:
            while mid > 0 and sorted_data[mid - 1] == guess:
                mid -= 1
            return mid
        if sorted_data[mid] > guess:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def linear_search(array: Sequence[int], query: int) -> int:
    """Return the index of the first element equal to ``query``."""
    for index, item in enumerate(array):
        if item == query:
            return index
    return -1