"""A bounded double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class ArrayDeque:
    """A double-ended queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def push_front(self, value: int) -> None:
        """Insert a value at the front. Raises IndexError if the deque is full."""
        if self.is_full():
            raise IndexError("deque is full")
        self._items.appendleft(value)

    def push_rear(self, value: int) -> None:
        """Insert a value at the rear. Raises IndexError if the deque is full."""
        if self.is_full():
            raise IndexError("deque is full")
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the front value. Raises IndexError if the deque is empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items.popleft()

    def pop_rear(self) -> int:
        """Remove and return the rear value. Raises IndexError if the deque is empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items.pop()

    def peek_front(self) -> int:
        """Return the front value without removing it. Raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[0]

    def peek_rear(self) -> int:
        """Return the rear value without removing it. Raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values from front to rear."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ArrayDeque(capacity={self.capacity}, items={list(self._items)!r})"