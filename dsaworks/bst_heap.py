"""Rewriting a binary search tree's values into min-heap order."""

from __future__ import annotations

from collections.abc import Iterator

from dsaworks.heap_problems import TreeNode
from dsaworks.heaps import build_min_heap


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(root: TreeNode | None) -> list[int]:
    """Values of the tree in in-order (left, node, right)."""
    return [node.data for node in _inorder_nodes(root)]


def bst_to_min_heap(root: TreeNode | None) -> None:
    """Rearrange the in-order values into a min-heap and write them back in in-order."""
    values = build_min_heap(inorder(root))
    for node, value in zip(list(_inorder_nodes(root)), values):
        node.data = value