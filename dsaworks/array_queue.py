"""A bounded FIFO queue whose slots are reclaimed only once it empties."""

from __future__ import annotations

DEFAULT_CAPACITY = 100001


class ArrayQueue:
    """A queue of at most ``capacity`` slots.

    Slots freed by dequeuing are reused only after the queue becomes empty.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []
        self._front = 0

    def enqueue(self, value: int) -> None:
        """Add a value at the back. Raises IndexError if no slot is free."""
        if len(self._items) >= self.capacity:
            raise IndexError("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value. Raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._items[self._front]
        self._front += 1
        if self._front == len(self._items):
            self._items.clear()
            self._front = 0
        return value

    def peek(self) -> int:
        """Return the front value without removing it. Raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._items[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def __len__(self) -> int:
        return len(self._items) - self._front