"""Topological ordering of directed graphs over nodes ``0..n-1``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(edges: Iterable[Sequence[int]], n: int) -> dict[int, list[int]]:
    adj: dict[int, list[int]] = {}
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < n:
                raise ValueError(f"node {node} is outside the range 0..{n - 1}")
        adj.setdefault(u, []).append(v)
    return adj


def topological_sort_dfs(edges: Iterable[Sequence[int]], n: int) -> list[int]:
    """Order nodes by reversed depth-first finishing time.

    Raises ValueError if an edge names a node outside ``0..n-1``.
    """
    adj = _adjacency(edges, n)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj.get(start, ())))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj.get(neighbour, ()))))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def topological_sort_kahn(edges: Iterable[Sequence[int]], n: int) -> list[int]:
    """Order nodes by repeatedly taking those with no remaining incoming edges.

    Nodes on a cycle are left out of the result. Raises ValueError if an edge
    names a node outside ``0..n-1``.
    """
    adj = _adjacency(edges, n)
    indegree = [0] * n
    for neighbours in adj.values():
        for neighbour in neighbours:
            indegree[neighbour] += 1

    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj.get(node, ()):
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order