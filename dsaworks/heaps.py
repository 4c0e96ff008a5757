"""Binary heaps stored in flat lists: a bounded max-heap, heap sort and heap building."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator

DEFAULT_CAPACITY = 100


def _sift_down(
    items: list[int], size: int, index: int, above: Callable[[int, int], bool]
) -> None:
    """Move ``items[index]`` down until neither child within ``size`` belongs above it."""
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and above(items[child], items[best]):
                best = child
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _heapify(items: list[int], above: Callable[[int, int], bool]) -> None:
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index, above)


class MaxHeap:
    """A max-heap holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add a value, moving it up past every smaller parent.

        Raises IndexError if the heap is full.
        """
        if len(self._items) >= self.capacity:
            raise IndexError("heap is full")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if not self._items:
            raise IndexError("heap is empty")
        items = self._items
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            _sift_down(items, len(items), 0, operator.gt)
        return root

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values in their stored (level) order."""
        return iter(list(self._items))


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a max-heap."""
    items = list(values)
    _heapify(items, operator.gt)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0, operator.gt)
    return items


def build_min_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a min-heap in level order."""
    items = list(values)
    _heapify(items, operator.lt)
    return items


def merge_max_heaps(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Concatenate two heaps and rearrange the result into a single max-heap."""
    items = [*a, *b]
    _heapify(items, operator.gt)
    return items