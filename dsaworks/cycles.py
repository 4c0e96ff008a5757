"""Cycle detection in directed and undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _undirected_adjacency(edges: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    adj: dict[int, list[int]] = {}
    for u, v in edges:
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, []).append(u)
    return adj


def has_directed_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return True if a cycle is reachable from any of the nodes ``1..n``.

    Edges are directed from the first node of each pair to the second.
    """
    adj: dict[int, list[int]] = {}
    for u, v in edges:
        adj.setdefault(u, []).append(v)

    visited: set[int] = set()
    on_path: set[int] = set()
    for start in range(1, n + 1):
        if start in visited:
            continue
        visited.add(start)
        on_path.add(start)
        stack = [(start, iter(adj.get(start, ())))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_path.add(neighbour)
                    stack.append((neighbour, iter(adj.get(neighbour, ()))))
                    break
                if neighbour in on_path:
                    return True
            else:
                stack.pop()
                on_path.discard(node)
    return False


def has_undirected_cycle_bfs(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Breadth-first check for a cycle reachable from any of the nodes ``0..n-1``.

    Self-loops and repeated edges count as cycles.
    """
    adj = _undirected_adjacency(edges)
    visited: set[int] = set()
    for start in range(n):
        if start in visited:
            continue
        visited.add(start)
        parent: dict[int, int | None] = {start: None}
        queue = deque([start])
        while queue:
            front = queue.popleft()
            for neighbour in adj.get(front, ()):
                if neighbour in visited:
                    if neighbour != parent[front]:
                        return True
                else:
                    visited.add(neighbour)
                    parent[neighbour] = front
                    queue.append(neighbour)
    return False


def has_undirected_cycle_dfs(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Depth-first check for a cycle reachable from any of the nodes ``0..n-1``.

    Self-loops and repeated edges count as cycles.
    """
    adj = _undirected_adjacency(edges)
    visited: set[int] = set()
    for start in range(n):
        if start in visited:
            continue
        visited.add(start)
        stack: list[tuple[int, int | None, Iterable[int]]] = [
            (start, None, iter(adj.get(start, ())))
        ]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, node, iter(adj.get(neighbour, ()))))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False