"""Algorithms that relink chains of singly linked nodes."""

from __future__ import annotations

from dsaworks.linked_list import ListNode


def insertion_sort(head: ListNode | None) -> ListNode | None:
    """Sort a chain in ascending order by relinking its nodes; return the new head."""
    sorted_head: ListNode | None = None
    current = head
    while current is not None:
        following = current.next
        if sorted_head is None or current.val < sorted_head.val:
            current.next = sorted_head
            sorted_head = current
        else:
            spot = sorted_head
            while spot.next is not None and spot.next.val < current.val:
                spot = spot.next
            current.next = spot.next
            spot.next = current
        current = following
    return sorted_head


def intersection(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """Return the first node shared by both chains, or None if they share none."""
    first, second = a, b
    while first is not second:
        first = first.next if first is not None else b
        second = second.next if second is not None else a
    return first


def merge_sorted(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """Splice two ascending chains into one ascending chain; ties take from ``a`` first."""
    dummy = ListNode(0)
    tail = dummy
    while a is not None and b is not None:
        if a.val <= b.val:
            tail.next = a
            a = a.next
        else:
            tail.next = b
            b = b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def partition(head: ListNode | None, pivot: int) -> ListNode | None:
    """Relink so values below ``pivot`` precede the rest, keeping relative order."""
    less = ListNode(0)
    rest = ListNode(0)
    less_tail, rest_tail = less, rest
    node = head
    while node is not None:
        if node.val < pivot:
            less_tail.next = node
            less_tail = node
        else:
            rest_tail.next = node
            rest_tail = node
        node = node.next
    rest_tail.next = None
    less_tail.next = rest.next
    return less.next


def remove_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop nodes whose value equals the previous node's; return the same head."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            duplicate = current.next
            current.next = duplicate.next
            duplicate.next = None
        else:
            current = current.next
    return head


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse a chain in place and return its new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous