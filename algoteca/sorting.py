"""Searching and sorting: binary search, counting sort, quickselect, merge sort and quicksort."""

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of target in the sorted sequence items, or -1 if it is absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        middle = left + (right - left) // 2
        value = items[middle]
        if value == target:
            return middle
        if value < target:
            left = middle + 1
        else:
            right = middle - 1
    return -1


def counting_sort(items: Iterable[int]) -> list[int]:
    """Return the non-negative integers of items in increasing order, sorted by counting."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort only accepts non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    result: list[int] = []
    for value, count in enumerate(counts):
        result.extend([value] * count)
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition values[low:high + 1] around its last element; return the pivot's index."""
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def quickselect(items: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest element of items, counting from 0."""
    values = list(items)
    if not 0 <= k < len(values):
        raise IndexError(f"k={k} is out of range for {len(values)} items")
    low, high = 0, len(values) - 1
    while low <= high:
        pivot_index = _partition(values, low, high)
        if pivot_index == k:
            return values[pivot_index]
        if pivot_index > k:
            high = pivot_index - 1
        else:
            low = pivot_index + 1
    raise IndexError(f"k={k} is out of range for {len(values)} items")


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the elements of items in stable increasing order."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def quicksort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the elements of items in increasing order."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = values[high]
        store = low
        for j in range(low, high):
            if values[j] < pivot:
                values[store], values[j] = values[j], values[store]
                store += 1
        values[store], values[high] = values[high], values[store]
        pending.append((low, store - 1))
        pending.append((store + 1, high))
    return values