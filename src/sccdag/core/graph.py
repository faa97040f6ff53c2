"""Adjacency-list container for weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .errors import InvalidArgument, OutOfRange, UnsupportedOperation


@dataclass(frozen=True)
class Edge:
    """Outgoing edge record stored in a vertex's adjacency list."""

    target: int
    weight: int

    def __str__(self) -> str:
        return f"({self.target}, w={self.weight})"


class WeightedGraph:
    """Graph over vertices ``0..n-1`` with integer edge weights.

    Adjacency lists keep insertion order; parallel edges and self-loops are
    kept as-is. Undirected edges are stored in both endpoint lists but count
    once in :meth:`edge_count`. Algorithms treat the graph as read-only, so
    all edges must be added before analysis starts.
    """

    def __init__(self, vertex_count: int, directed: bool = True) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidArgument(f"vertex count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise InvalidArgument(f"vertex count must be non-negative, got {vertex_count}")
        self._n = vertex_count
        self._directed = bool(directed)
        self._adj: List[List[Edge]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def directed(self) -> bool:
        return self._directed

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise OutOfRange(f"vertex {v} out of range [0, {self._n})")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        self._adj[u].append(Edge(v, weight))
        if not self._directed:
            self._adj[v].append(Edge(u, weight))

    def adjacent(self, v: int) -> Sequence[Edge]:
        """Return the outgoing edges of ``v`` in insertion order."""

        self._check_vertex(v)
        return tuple(self._adj[v])

    def _out_edges(self, v: int) -> Sequence[Edge]:
        """Uncopied adjacency list for the core algorithms; callers must not mutate it."""

        return self._adj[v]

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(u, v, weight)`` for every stored record, source-major.

        Undirected edges appear once per direction.
        """

        for u, targets in enumerate(self._adj):
            for edge in targets:
                yield u, edge.target, edge.weight

    def edge_count(self) -> int:
        records = sum(len(targets) for targets in self._adj)
        return records if self._directed else records // 2

    def reverse(self) -> "WeightedGraph":
        if not self._directed:
            raise UnsupportedOperation("cannot reverse an undirected graph")
        reversed_graph = WeightedGraph(self._n, directed=True)
        for u, v, weight in self.edges():
            reversed_graph.add_edge(v, u, weight)
        return reversed_graph

    def describe(self) -> str:
        kind = "directed" if self._directed else "undirected"
        lines = [f"Graph ({kind}, n={self._n}, edges={self.edge_count()})"]
        for v, targets in enumerate(self._adj):
            rendered = " ".join(str(edge) for edge in targets)
            lines.append(f"{v}: {rendered}".rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"WeightedGraph(n={self._n}, {kind}, edges={self.edge_count()})"


def build_graph(vertex_count: int, edges, directed: bool = True) -> WeightedGraph:
    """Convenience helper to build a graph from ``(u, v, weight)`` triples."""

    graph = WeightedGraph(vertex_count, directed=directed)
    for u, v, weight in edges:
        graph.add_edge(u, v, weight)
    return graph
