"""A doubly linked list with 1-based positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    val: int
    prev: _Node | None = field(default=None, repr=False)
    next: _Node | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A list of values linked in both directions, keeping head and tail references."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert a value before the current head."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append a value after the current tail."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at(self, position: int, value: int) -> None:
        """Insert a value so that it ends up at the 1-based ``position``.

        Raises IndexError unless ``position`` is within ``1..len(self) + 1``.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} is outside 1..{self._size + 1}")
        if position == 1:
            self.push_front(value)
            return
        if position == self._size + 1:
            self.push_back(value)
            return
        before = self._node_at(position - 1)
        after = before.next
        assert after is not None
        node = _Node(value, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def delete_at(self, position: int) -> int:
        """Remove the node at the 1-based ``position`` and return its value.

        Raises IndexError unless ``position`` is within ``1..len(self)``.
        """
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.val

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.val
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"