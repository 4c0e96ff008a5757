"""Adjacency-list graphs built from edge lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """A graph stored as a mapping from each node to the list of its neighbours."""

    def __init__(self) -> None:
        self.adj: dict[T, list[T]] = {}

    def add_edge(self, u: T, v: T, directed: bool) -> None:
        """Add an edge from ``u`` to ``v``; undirected edges are stored both ways."""
        self.adj.setdefault(u, []).append(v)
        if not directed:
            self.adj.setdefault(v, []).append(u)

    def format_adjacency(self) -> str:
        """Render one line per node: ``node->`` followed by each neighbour."""
        return "".join(
            f"{node}->" + "".join(f"{neighbour} ,  " for neighbour in neighbours) + "\n"
            for node, neighbours in self.adj.items()
        )


def adjacency_with_self(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Undirected adjacency lists for nodes ``0..n-1``, each list led by the node itself.

    Edges with an endpoint outside ``0..n-1`` are ignored.
    """
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if 0 <= u < n and 0 <= v < n:
            neighbours[u].append(v)
            neighbours[v].append(u)
    return [[node, *adjacent] for node, adjacent in enumerate(neighbours)]


def main(argv: list[str] | None = None) -> int:
    """Read a node count, an edge count and edges from stdin; print the adjacency list."""
    parser = argparse.ArgumentParser(
        prog="dsaworks-graph",
        description="Read an undirected graph from standard input and print its adjacency list.",
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    print("Enter the number of nodes : ")
    print("Enter the number of edges : ")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        print(f"error: invalid integer in input: {exc}", file=sys.stderr)
        return 1
    if len(numbers) < 2:
        print("error: expected the number of nodes and edges", file=sys.stderr)
        return 1
    edge_count = numbers[1]
    endpoints = numbers[2:]
    if edge_count < 0 or len(endpoints) < 2 * edge_count:
        print(f"error: expected {edge_count} edges", file=sys.stderr)
        return 1

    graph: Graph[int] = Graph()
    pairs = iter(endpoints[: 2 * edge_count])
    for u, v in zip(pairs, pairs):
        graph.add_edge(u, v, False)
    sys.stdout.write(graph.format_adjacency())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())