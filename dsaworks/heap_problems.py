"""Heap-based problems: k-th smallest value, rope joining cost and max-heap checking."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the k-th smallest value (1-based, duplicates counted).

    Raises ValueError if ``k`` is not within ``1..len(values)``.
    """
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    # Keep the k smallest seen so far in a max-heap (negated values).
    largest_kept = [-value for value in values[:k]]
    heapq.heapify(largest_kept)
    for value in values[k:]:
        if value < -largest_kept[0]:
            heapq.heapreplace(largest_kept, -value)
    return -largest_kept[0]


def min_rope_cost(lengths: Iterable[int]) -> int:
    """Minimum total cost of joining all ropes, where each join costs the joined length."""
    ropes = list(lengths)
    heapq.heapify(ropes)
    cost = 0
    while len(ropes) > 1:
        joined = heapq.heappop(ropes) + heapq.heappop(ropes)
        cost += joined
        heapq.heappush(ropes, joined)
    return cost


def is_max_heap(root: TreeNode | None) -> bool:
    """True if the tree is complete and every parent is strictly greater than its children.

    An empty tree counts as a heap.
    """
    if root is None:
        return True

    nodes: list[tuple[TreeNode, int]] = []
    stack = [(root, 0)]
    while stack:
        node, index = stack.pop()
        nodes.append((node, index))
        if node.left is not None:
            stack.append((node.left, 2 * index + 1))
        if node.right is not None:
            stack.append((node.right, 2 * index + 2))

    count = len(nodes)
    if any(index >= count for _, index in nodes):
        return False

    return all(
        child is None or node.data > child.data
        for node, _ in nodes
        for child in (node.left, node.right)
    )