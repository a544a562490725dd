"""Classic comparison sorts, merging of sorted lists and k-th smallest selection."""

from __future__ import annotations

from typing import Iterable, List, Sequence


def bubble_sort(values: Iterable[int]) -> List[int]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> List[int]:
    """Return a sorted copy of ``values`` using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[int]) -> List[int]:
    """Return a sorted copy of ``values`` using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_down(items: List[int], size: int, index: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[int]) -> List[int]:
    """Return a sorted copy of ``values`` using heap sort on a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _partition(items: List[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[int]) -> List[int]:
    """Return a sorted copy of ``values`` using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def merge_sorted(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``left`` comes first.
    """
    result: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) by partial selection sort."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    for i in range(k):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items[k - 1]