"""A singly linked circular list and checks for circular and looping chains."""

from __future__ import annotations

from collections.abc import Iterator

from dsaworks.linked_list import ListNode


class CircularLinkedList:
    """A circular list referenced by its tail; iteration starts at the tail."""

    def __init__(self) -> None:
        self.tail: ListNode | None = None
        self._size = 0

    def insert_after(self, element: int, value: int) -> None:
        """Insert ``value`` after the first node holding ``element``, starting at the tail.

        On an empty list ``element`` is ignored and ``value`` becomes the only node.
        Raises ValueError if a non-empty list holds no ``element``.
        """
        if self.tail is None:
            node = ListNode(value)
            node.next = node
            self.tail = node
            self._size = 1
            return
        current = self.tail
        while current.val != element:
            assert current.next is not None
            current = current.next
            if current is self.tail:
                raise ValueError(f"{element} is not in the list")
        current.next = ListNode(value, current.next)
        self._size += 1

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``, searching from the node after the tail.

        Raises ValueError if the list is empty or holds no ``value``.
        """
        if self.tail is None:
            raise ValueError("list is empty")
        previous = self.tail
        current = previous.next
        assert current is not None
        while current.val != value:
            if current is self.tail:
                raise ValueError(f"{value} is not in the list")
            previous = current
            current = current.next
            assert current is not None
        previous.next = current.next
        if current is previous:
            self.tail = None
        elif current is self.tail:
            self.tail = previous
        current.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node.val
            assert node.next is not None
            node = node.next
            if node is self.tail:
                return

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"


def is_circular(head: ListNode | None) -> bool:
    """True if following ``next`` from ``head`` leads back to ``head``.

    An empty chain counts as circular; a chain that loops without
    returning to ``head`` does not.
    """
    if head is None:
        return True
    seen: set[int] = set()
    node = head.next
    while node is not None and node is not head:
        if id(node) in seen:
            return False
        seen.add(id(node))
        node = node.next
    return node is head


def has_loop(head: ListNode | None) -> bool:
    """True if following ``next`` from ``head`` ever revisits a node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False