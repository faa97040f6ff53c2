"""Kahn topological ordering with cycle detection."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import ClassVar, Deque, List, Optional, Tuple

import numpy as np

from ..metrics import Metrics, ensure_metrics
from .errors import InvalidArgument
from .graph import WeightedGraph

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopoResult:
    """Topological order, or the prefix reached before a cycle stalled it."""

    kind: ClassVar[str] = "topo"

    order: Tuple[int, ...]
    has_cycle: bool
    metrics: Metrics = field(default_factory=Metrics, compare=False, repr=False)

    @property
    def is_valid(self) -> bool:
        return not self.has_cycle

    def position(self, v: int) -> int:
        return self.order.index(v)


def kahn_sort(graph: WeightedGraph, metrics: Optional[Metrics] = None) -> TopoResult:
    """Order vertices so every edge points forward.

    Zero in-degree vertices seed a FIFO queue in ascending index order and
    neighbours are released in adjacency order, so the result is fully
    determined by the graph. When fewer than ``n`` vertices come out, the
    remaining ones sit on or behind a cycle and ``has_cycle`` is set.
    """

    if not graph.directed:
        raise InvalidArgument("topological sort requires a directed graph")
    metrics = ensure_metrics(metrics)
    n = graph.vertex_count
    in_degree = np.zeros(n, dtype=np.int64)
    order: List[int] = []

    with metrics.timed():
        for _u, v, _weight in graph.edges():
            in_degree[v] += 1
            metrics.increment("edges_scanned")

        queue: Deque[int] = deque()
        for v in range(n):
            if in_degree[v] == 0:
                queue.append(v)
                metrics.increment("queue_pushes")

        while queue:
            u = queue.popleft()
            metrics.increment("queue_pops")
            order.append(u)
            for edge in graph._out_edges(u):
                v = edge.target
                in_degree[v] -= 1
                metrics.increment("in_degree_updates")
                if in_degree[v] == 0:
                    queue.append(v)
                    metrics.increment("queue_pushes")

    has_cycle = len(order) != n
    LOGGER.debug("kahn_sort vertices=%s ordered=%s has_cycle=%s", n, len(order), has_cycle)
    return TopoResult(order=tuple(order), has_cycle=has_cycle, metrics=metrics)
