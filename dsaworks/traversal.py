"""Breadth-first and depth-first traversal of undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def bfs_traversal(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Breadth-first order over all nodes, starting from each unvisited node in ``0..n-1``.

    Neighbours are visited in ascending order.
    """
    adj: dict[int, set[int]] = {}
    for u, v in edges:
        adj.setdefault(u, set()).add(v)
        adj.setdefault(v, set()).add(u)

    visited: set[int] = set()
    order: list[int] = []
    for start in range(n):
        if start in visited:
            continue
        visited.add(start)
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in sorted(adj.get(node, ())):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
    return order


def dfs_components(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Connected components in depth-first preorder, one per unvisited node in ``0..n-1``."""
    adj: dict[int, list[int]] = {}
    for u, v in edges:
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, []).append(u)

    visited: set[int] = set()
    components: list[list[int]] = []
    for start in range(n):
        if start in visited:
            continue
        component = [start]
        visited.add(start)
        stack = [iter(adj.get(start, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    component.append(neighbour)
                    stack.append(iter(adj.get(neighbour, ())))
                    break
            else:
                stack.pop()
        components.append(component)
    return components