"""Sorting a linked list of zeros and ones by relinking its nodes."""

from __future__ import annotations

from dsaworks.linked_list import ListNode


def sort_binary_list(head: ListNode | None) -> ListNode | None:
    """Relink so every node holding 0 precedes the others, keeping relative order."""
    zeros = ListNode(0)
    others = ListNode(0)
    zeros_tail, others_tail = zeros, others
    node = head
    while node is not None:
        if node.val == 0:
            zeros_tail.next = node
            zeros_tail = node
        else:
            others_tail.next = node
            others_tail = node
        node = node.next
    others_tail.next = None
    zeros_tail.next = others.next
    return zeros.next