"""In-place sorting algorithms measured by the benchmark."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import MutableSequence
from enum import IntEnum
from typing import Any


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's final index."""
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort, using an explicit stack of ranges."""
    stack = [(0, len(items) - 1)]
    while stack:
        low, high = stack.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            stack.append((low, pivot_index - 1))
            stack.append((pivot_index + 1, high))


def _sift_down(items: MutableSequence[Any], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within the first ``size`` items."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with heapsort."""
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with straight insertion sort."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def binary_insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with insertion sort that finds positions by binary search."""
    for i in range(1, len(items)):
        key = items[i]
        position = bisect_left(items, key, 0, i)
        items[position + 1 : i + 1] = items[position:i]
        items[position] = key


class Algorithm(IntEnum):
    """The sorting algorithms, numbered as in the configuration file."""

    HEAP_SORT = 0
    INSERTION_SORT = 1
    QUICK_SORT = 2
    BINARY_INSERTION_SORT = 3

    @property
    def title(self) -> str:
        """Human-readable name used in reports."""
        return _TITLES[self]

    def sort(self, items: MutableSequence[Any]) -> None:
        """Sort ``items`` in place with this algorithm."""
        _IMPLEMENTATIONS[self](items)


_TITLES = {
    Algorithm.HEAP_SORT: "Heapsort",
    Algorithm.INSERTION_SORT: "Insertionsort",
    Algorithm.QUICK_SORT: "Quicksort",
    Algorithm.BINARY_INSERTION_SORT: "Binary Insertionsort",
}

_IMPLEMENTATIONS = {
    Algorithm.HEAP_SORT: heap_sort,
    Algorithm.INSERTION_SORT: insertion_sort,
    Algorithm.QUICK_SORT: quick_sort,
    Algorithm.BINARY_INSERTION_SORT: binary_insertion_sort,
}