"""Array-backed binary max-heap and min-heap."""

from __future__ import annotations

import operator
from typing import Callable, List

_Outranks = Callable[[int, int], bool]


def _bubble_up(heap: List[int], value: int, outranks: _Outranks) -> None:
    heap.append(value)
    current = len(heap) - 1
    while current > 0:
        parent = (current - 1) // 2
        if not outranks(heap[current], heap[parent]):
            break
        heap[current], heap[parent] = heap[parent], heap[current]
        current = parent


def _sink_down(heap: List[int], index: int, outranks: _Outranks) -> None:
    if index < 0:
        raise IndexError("heap index must not be negative")
    size = len(heap)
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and outranks(heap[child], heap[best]):
                best = child
        if best == index:
            return
        heap[index], heap[best] = heap[best], heap[index]
        index = best


def _pop_root(heap: List[int], outranks: _Outranks) -> int:
    if not heap:
        raise IndexError("remove from an empty heap")
    top = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        _sink_down(heap, 0, outranks)
    return top


class MaxHeap:
    """Binary heap whose root is the largest value."""

    def __init__(self) -> None:
        self._heap: List[int] = []

    def __len__(self) -> int:
        return len(self._heap)

    def items(self) -> List[int]:
        """A copy of the heap's array, root first."""
        return list(self._heap)

    def insert(self, value: int) -> None:
        """Add ``value`` and bubble it up to its place."""
        _bubble_up(self._heap, value, operator.gt)

    def remove(self) -> int:
        """Remove and return the largest value; raises IndexError when empty."""
        return _pop_root(self._heap, operator.gt)

    def sink_down(self, index: int) -> None:
        """Move the value at ``index`` down until no child is larger."""
        _sink_down(self._heap, index, operator.gt)


class MinHeap:
    """Binary heap whose root is the smallest value."""

    def __init__(self) -> None:
        self._heap: List[int] = []

    def __len__(self) -> int:
        return len(self._heap)

    def items(self) -> List[int]:
        """A copy of the heap's array, root first."""
        return list(self._heap)

    def insert(self, value: int) -> None:
        """Add ``value`` and bubble it up to its place."""
        _bubble_up(self._heap, value, operator.lt)

    def remove(self) -> int:
        """Remove and return the smallest value; raises IndexError when empty."""
        return _pop_root(self._heap, operator.lt)

    def sink_down(self, index: int) -> None:
        """Move the value at ``index`` down until no child is smaller."""
        _sink_down(self._heap, index, operator.lt)