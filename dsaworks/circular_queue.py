"""A bounded first-in, first-out queue that reuses its slots in a ring."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class CircularQueue:
    """A FIFO queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Add a value at the rear. Raises IndexError if the queue is full."""
        if len(self._items) >= self.capacity:
            raise IndexError("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value. Raises IndexError if the queue is empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values from front to rear."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self._items)!r})"