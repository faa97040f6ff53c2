"""Strongly connected component utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Sequence, Set, Tuple

import numpy as np

from ..metrics import Metrics, ensure_metrics
from .errors import InvalidArgument
from .graph import Edge, WeightedGraph

LOGGER = logging.getLogger(__name__)

Component = Tuple[int, ...]


@dataclass(frozen=True)
class SCCResult:
    """Partition of a directed graph into strongly connected components.

    Components are listed in reverse topological order of the condensation:
    a component is appended when its DFS root finishes, so every component
    appears before any component that can reach it.
    """

    kind: ClassVar[str] = "scc"

    components: Tuple[Component, ...]
    component_of: np.ndarray = field(compare=False, repr=False)
    metrics: Metrics = field(default_factory=Metrics, compare=False, repr=False)

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def vertex_count(self) -> int:
        return int(self.component_of.shape[0])

    @property
    def is_acyclic_partition(self) -> bool:
        """True when every vertex is its own component."""

        return self.component_count == self.vertex_count

    def component(self, v: int) -> int:
        return int(self.component_of[v])


@dataclass(frozen=True)
class Condensation:
    """Acyclic quotient graph over component indices."""

    kind: ClassVar[str] = "condensation"

    graph: WeightedGraph = field(compare=False)
    components: Tuple[Component, ...]
    component_of: np.ndarray = field(compare=False, repr=False)

    @property
    def component_count(self) -> int:
        return len(self.components)

    def edge_count(self) -> int:
        return self.graph.edge_count()


def tarjan_scc(graph: WeightedGraph, metrics: Optional[Metrics] = None) -> SCCResult:
    """Tarjan's SCC algorithm.

    The depth-first traversal runs on an explicit work stack of
    ``(vertex, adjacency, next edge index)`` frames so the depth of the
    search is bounded by memory rather than by the interpreter's recursion
    limit.
    """

    if not graph.directed:
        raise InvalidArgument("SCC algorithm requires a directed graph")
    metrics = ensure_metrics(metrics)
    n = graph.vertex_count

    disc = np.full(n, -1, dtype=np.int64)
    low = np.full(n, -1, dtype=np.int64)
    on_stack = np.zeros(n, dtype=bool)
    stack: List[int] = []
    sccs: List[Component] = []
    clock = 0

    with metrics.timed():
        for root in range(n):
            if disc[root] != -1:
                continue
            work: List[Tuple[int, Sequence[Edge], int]] = []

            disc[root] = low[root] = clock
            clock += 1
            stack.append(root)
            on_stack[root] = True
            metrics.increment("dfs_visits")
            work.append((root, graph._out_edges(root), 0))

            while work:
                u, adjacency, idx = work[-1]
                if idx < len(adjacency):
                    work[-1] = (u, adjacency, idx + 1)
                    v = adjacency[idx].target
                    metrics.increment("edges_explored")
                    if disc[v] == -1:
                        # tree edge: descend, low[u] is folded in when v finishes
                        disc[v] = low[v] = clock
                        clock += 1
                        stack.append(v)
                        on_stack[v] = True
                        metrics.increment("dfs_visits")
                        work.append((v, graph._out_edges(v), 0))
                    elif on_stack[v]:
                        low[u] = min(low[u], disc[v])
                    continue

                work.pop()
                if low[u] == disc[u]:
                    members: List[int] = []
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        members.append(w)
                        metrics.increment("stack_pops")
                        if w == u:
                            break
                    sccs.append(tuple(members))
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])

    component_of = np.full(n, -1, dtype=np.int64)
    for idx, members in enumerate(sccs):
        for v in members:
            component_of[v] = idx

    LOGGER.debug(
        "tarjan_scc vertices=%s edges=%s components=%s dfs_visits=%s",
        n,
        graph.edge_count(),
        len(sccs),
        metrics.counter("dfs_visits"),
    )
    return SCCResult(components=tuple(sccs), component_of=component_of, metrics=metrics)


def condense(graph: WeightedGraph, scc_result: SCCResult) -> Condensation:
    """Contract each component of ``scc_result`` to a single vertex.

    Each original edge is scanned once in source-major order. The first edge
    seen between an ordered pair of distinct components supplies the weight
    of the condensation edge; later parallel crossings are dropped.
    """

    if scc_result.vertex_count != graph.vertex_count:
        raise InvalidArgument(
            f"SCC result covers {scc_result.vertex_count} vertices, graph has {graph.vertex_count}"
        )
    component_of = scc_result.component_of
    dag = WeightedGraph(scc_result.component_count, directed=True)
    seen: Set[Tuple[int, int]] = set()
    for u, v, weight in graph.edges():
        cu, cv = int(component_of[u]), int(component_of[v])
        if cu == cv or (cu, cv) in seen:
            continue
        seen.add((cu, cv))
        dag.add_edge(cu, cv, weight)

    LOGGER.debug(
        "condense components=%s condensation_edges=%s dropped=%s",
        scc_result.component_count,
        dag.edge_count(),
        graph.edge_count() - dag.edge_count(),
    )
    return Condensation(graph=dag, components=scc_result.components, component_of=component_of)


def condensation_dag(graph: WeightedGraph, metrics: Optional[Metrics] = None) -> Tuple[SCCResult, Condensation]:
    """Return SCCs and the condensation DAG."""

    result = tarjan_scc(graph, metrics)
    return result, condense(graph, result)
