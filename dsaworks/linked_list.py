"""Singly linked list nodes and a list that keeps head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: ListNode | None = field(default=None, repr=False)


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a chain of nodes holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[int]:
    """Collect the values of a chain of nodes, starting at ``head``."""
    values: list[int] = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


class SinglyLinkedList:
    """A singly linked list with 1-based positional insertion and deletion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert a value before the current head."""
        node = ListNode(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append a value after the current tail."""
        node = ListNode(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def _node_at(self, position: int) -> ListNode:
        node = self.head
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
        before.next = ListNode(value, before.next)
        self._size += 1

    def delete_at(self, position: int) -> int:
        """Remove the node at the 1-based ``position`` and return its value.

        Raises IndexError unless ``position`` is within ``1..len(self)``.
        """
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        if position == 1:
            assert self.head is not None
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            before = self._node_at(position - 1)
            removed = before.next
            assert removed is not None
            before.next = removed.next
            if before.next is None:
                self.tail = before
        removed.next = None
        self._size -= 1
        return removed.val

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"