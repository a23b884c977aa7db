"""Classic comparison and distribution sorts over lists of integers.

Functions that sort in place return the same list they were given, so they
can be used either for their side effect or their return value.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "shell_sort",
]


def bubble_sort(arr: list[int]) -> list[int]:
    """Sort ``arr`` in place by repeatedly swapping adjacent pairs."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(arr) - 1):
            if arr[i + 1] < arr[i]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
    return arr


def _sift_down(arr: list[int], i: int, size: int) -> None:
    """Restore the max-heap property below index ``i`` within ``arr[:size]``."""
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        largest = i
        if left < size and arr[left] > arr[largest]:
            largest = left
        if right < size and arr[right] > arr[largest]:
            largest = right
        if largest == i:
            return
        arr[i], arr[largest] = arr[largest], arr[i]
        i = largest


def heap_sort(arr: list[int]) -> list[int]:
    """Sort ``arr`` in place using a binary max-heap."""
    size = len(arr)
    for i in range(size // 2, -1, -1):
        _sift_down(arr, i, size)
    for end in range(size - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, 0, end)
    return arr


def insertion_sort(arr: list[int]) -> list[int]:
    """Sort ``arr`` in place by inserting each element into the sorted prefix."""
    for current in range(1, len(arr)):
        value = arr[current]
        pos = current
        while pos > 0 and arr[pos - 1] >= value:
            arr[pos] = arr[pos - 1]
            pos -= 1
        arr[pos] = value
    return arr


def _merge(a: list[int], b: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def merge_sort(items: list[int]) -> list[int]:
    """Return a sorted list built by recursive merging; ``items`` is not modified."""
    if len(items) < 2:
        return items
    middle = len(items) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(arr: list[int], lo: int, hi: int) -> int:
    """Lomuto partition of ``arr[lo:hi + 1]`` around its last element."""
    pivot = arr[hi]
    i = lo - 1
    for j in range(lo, hi):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[hi] = arr[hi], arr[i + 1]
    return i + 1


def quick_sort(arr: list[int]) -> list[int]:
    """Sort ``arr`` in place with quicksort using the last element as pivot."""
    pending = [(0, len(arr) - 1)]
    while pending:
        lo, hi = pending.pop()
        if hi - lo < 1:
            continue
        q = _partition(arr, lo, hi)
        pending.append((lo, q - 1))
        pending.append((q + 1, hi))
    return arr


def _count_sort(arr: list[int], exp: int) -> list[int]:
    """Stable counting sort of non-negative ``arr`` by the digit at ``exp``."""
    counts = [0] * 10
    for item in arr:
        counts[(item // exp) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(arr)
    for item in reversed(arr):
        digit = (item // exp) % 10
        counts[digit] -= 1
        output[counts[digit]] = item
    return output


def _unsigned_radix_sort(arr: list[int]) -> list[int]:
    if not arr:
        return arr
    largest = max(arr)
    exp = 1
    while largest // exp > 0:
        arr = _count_sort(arr, exp)
        exp *= 10
    return arr


def radix_sort(arr: Iterable[int]) -> list[int]:
    """Return a new sorted list using LSD radix sort; negatives are handled."""
    negatives: list[int] = []
    non_negatives: list[int] = []
    for item in arr:
        if item < 0:
            negatives.append(-item)
        else:
            non_negatives.append(item)
    sorted_negatives = [-item for item in reversed(_unsigned_radix_sort(negatives))]
    return sorted_negatives + _unsigned_radix_sort(non_negatives)


def selection_sort(arr: list[int]) -> list[int]:
    """Sort ``arr`` in place by repeatedly selecting the smallest remaining item."""
    for i in range(len(arr)):
        smallest = min(range(i, len(arr)), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]
    return arr


def shell_sort(arr: list[int]) -> list[int]:
    """Sort ``arr`` in place with Shell sort using halving gaps."""
    gap = len(arr) // 2
    while gap > 0:
        for i in range(gap, len(arr)):
            j = i
            while j >= gap and arr[j - gap] > arr[j]:
                arr[j], arr[j - gap] = arr[j - gap], arr[j]
                j -= gap
        gap //= 2
    return arr