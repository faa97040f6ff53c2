"""Single-source and critical path analysis over DAGs.

All solvers order the graph with :func:`~sccdag.core.topo.kahn_sort` first
and raise :class:`InvalidArgument` on a cycle before any distance array is
built, so a caller can retry on the condensation without cleanup.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..metrics import Metrics, ensure_metrics
from .errors import InvalidArgument, OutOfRange
from .graph import WeightedGraph
from .topo import kahn_sort

LOGGER = logging.getLogger(__name__)

NO_PARENT = -1

Distance = Union[int, float]


def _trace_back(parents: Sequence[int], end: int) -> List[int]:
    path: List[int] = []
    current = end
    while current != NO_PARENT:
        path.append(current)
        current = parents[current]
    path.reverse()
    return path


@dataclass(frozen=True)
class ShortestPathResult:
    """Minimum-weight distances from ``source``; ``math.inf`` marks unreachable."""

    kind: ClassVar[str] = "shortest"

    source: int
    distances: Tuple[Distance, ...]
    parents: Tuple[int, ...]
    metrics: Metrics = field(default_factory=Metrics, compare=False, repr=False)

    def distance(self, v: int) -> Distance:
        return self.distances[v]

    def is_reachable(self, v: int) -> bool:
        return self.distances[v] != math.inf

    def path_to(self, v: int) -> List[int]:
        if not self.is_reachable(v):
            return []
        return _trace_back(self.parents, v)


@dataclass(frozen=True)
class LongestPathResult:
    """Maximum-weight distances from ``source``; ``-math.inf`` marks unreachable."""

    kind: ClassVar[str] = "longest"

    source: int
    distances: Tuple[Distance, ...]
    parents: Tuple[int, ...]
    metrics: Metrics = field(default_factory=Metrics, compare=False, repr=False)

    def distance(self, v: int) -> Distance:
        return self.distances[v]

    def is_reachable(self, v: int) -> bool:
        return self.distances[v] != -math.inf

    def path_to(self, v: int) -> List[int]:
        if not self.is_reachable(v):
            return []
        return _trace_back(self.parents, v)


@dataclass(frozen=True)
class CriticalPathResult:
    """Heaviest directed path anywhere in the DAG."""

    kind: ClassVar[str] = "critical"

    path: Tuple[int, ...]
    length: int
    end: Optional[int]
    metrics: Metrics = field(default_factory=Metrics, compare=False, repr=False)

    @property
    def start(self) -> Optional[int]:
        return self.path[0] if self.path else None


def _topological_order(graph: WeightedGraph, source: Optional[int] = None) -> Tuple[int, ...]:
    if not graph.directed:
        raise InvalidArgument("DAG path analysis requires a directed graph")
    if source is not None and not 0 <= source < graph.vertex_count:
        raise OutOfRange(f"source {source} out of range [0, {graph.vertex_count})")
    topo = kahn_sort(graph)
    if topo.has_cycle:
        raise InvalidArgument("graph contains a cycle - not a DAG")
    return topo.order


def shortest_paths(graph: WeightedGraph, source: int, metrics: Optional[Metrics] = None) -> ShortestPathResult:
    """Single-source shortest paths by relaxing edges in topological order."""

    metrics = ensure_metrics(metrics)
    with metrics.timed():
        order = _topological_order(graph, source)
        n = graph.vertex_count
        dist: List[Distance] = [math.inf] * n
        parent = np.full(n, NO_PARENT, dtype=np.int64)
        dist[source] = 0
        for u in order:
            if dist[u] == math.inf:
                continue
            for edge in graph._out_edges(u):
                candidate = dist[u] + edge.weight
                metrics.increment("relaxations")
                if candidate < dist[edge.target]:
                    dist[edge.target] = candidate
                    parent[edge.target] = u
                    metrics.increment("distance_updates")

    LOGGER.debug(
        "shortest_paths source=%s reachable=%s relaxations=%s",
        source,
        sum(1 for d in dist if d != math.inf),
        metrics.counter("relaxations"),
    )
    return ShortestPathResult(
        source=source, distances=tuple(dist), parents=tuple(parent.tolist()), metrics=metrics
    )


def longest_paths(graph: WeightedGraph, source: int, metrics: Optional[Metrics] = None) -> LongestPathResult:
    """Single-source longest paths, restricted to vertices reachable from ``source``."""

    metrics = ensure_metrics(metrics)
    with metrics.timed():
        order = _topological_order(graph, source)
        n = graph.vertex_count
        dist: List[Distance] = [-math.inf] * n
        parent = np.full(n, NO_PARENT, dtype=np.int64)
        dist[source] = 0
        for u in order:
            if dist[u] == -math.inf:
                continue
            for edge in graph._out_edges(u):
                candidate = dist[u] + edge.weight
                metrics.increment("relaxations")
                if candidate > dist[edge.target]:
                    dist[edge.target] = candidate
                    parent[edge.target] = u
                    metrics.increment("distance_updates")

    LOGGER.debug(
        "longest_paths source=%s reachable=%s relaxations=%s",
        source,
        sum(1 for d in dist if d != -math.inf),
        metrics.counter("relaxations"),
    )
    return LongestPathResult(
        source=source, distances=tuple(dist), parents=tuple(parent.tolist()), metrics=metrics
    )


def critical_path(graph: WeightedGraph, metrics: Optional[Metrics] = None) -> CriticalPathResult:
    """Heaviest path over all start vertices.

    Every vertex starts at distance 0, so any vertex may open the path. The
    end is the first vertex (lowest index) holding the maximum distance and
    the path is recovered from parent pointers.
    """

    metrics = ensure_metrics(metrics)
    with metrics.timed():
        order = _topological_order(graph)
        n = graph.vertex_count
        if n == 0:
            return CriticalPathResult(path=(), length=0, end=None, metrics=metrics)
        dist: List[int] = [0] * n
        parent = np.full(n, NO_PARENT, dtype=np.int64)
        for u in order:
            for edge in graph._out_edges(u):
                candidate = dist[u] + edge.weight
                metrics.increment("relaxations")
                if candidate > dist[edge.target]:
                    dist[edge.target] = candidate
                    parent[edge.target] = u
                    metrics.increment("distance_updates")

        end = 0
        for v in range(1, n):
            if dist[v] > dist[end]:
                end = v
        path = _trace_back(parent.tolist(), end)

    LOGGER.debug("critical_path end=%s length=%s hops=%s", end, dist[end], len(path) - 1)
    return CriticalPathResult(path=tuple(path), length=dist[end], end=end, metrics=metrics)
