"""Analysis pipeline: SCC → condensation → topological order → DAG paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .core.errors import GraphError, InvalidArgument, OutOfRange
from .core.graph import WeightedGraph
from .core.paths import (
    CriticalPathResult,
    LongestPathResult,
    ShortestPathResult,
    critical_path,
    longest_paths,
    shortest_paths,
)
from .core.scc import Condensation, SCCResult, condense, tarjan_scc
from .core.topo import TopoResult, kahn_sort
from .io import DATASET_SUFFIXES, GraphData, GraphFormatError, load_graph

LOGGER = logging.getLogger(__name__)

ORIGINAL = "original"
CONDENSATION = "condensation"


@dataclass(frozen=True)
class AnalysisReport:
    """Everything computed for one dataset."""

    data: GraphData
    scc: SCCResult
    condensation: Condensation
    topo: TopoResult
    task_order: Tuple[Tuple[int, ...], ...]
    path_graph: str
    path_source: Optional[int]
    shortest: Optional[ShortestPathResult] = None
    longest: Optional[LongestPathResult] = None
    critical: Optional[CriticalPathResult] = None
    error: Optional[str] = None


@dataclass
class BatchSummary:
    reports: List[AnalysisReport] = field(default_factory=list)
    failures: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.reports) + len(self.failures)


def _solve_paths(
    graph: WeightedGraph, source: int
) -> Tuple[ShortestPathResult, LongestPathResult, CriticalPathResult]:
    return shortest_paths(graph, source), longest_paths(graph, source), critical_path(graph)


def analyze_graph(data: GraphData) -> AnalysisReport:
    """Run the full pipeline on a loaded dataset.

    Paths are computed on the original graph when every component is a
    singleton, otherwise (or when a self-loop still makes the original
    cyclic) on the condensation, starting from the component that holds
    ``data.source``.
    """

    graph = data.graph
    LOGGER.info("analyze %s vertices=%s edges=%s", data.name or "<inline>", graph.vertex_count, graph.edge_count())
    scc = tarjan_scc(graph)
    condensation = condense(graph, scc)
    topo = kahn_sort(condensation.graph)
    task_order = tuple(scc.components[idx] for idx in topo.order)

    path_graph = ORIGINAL
    path_source: Optional[int] = data.source
    results: Optional[Tuple[ShortestPathResult, LongestPathResult, CriticalPathResult]] = None
    error: Optional[str] = None

    try:
        if scc.is_acyclic_partition:
            try:
                results = _solve_paths(graph, data.source)
            except InvalidArgument as exc:
                LOGGER.warning("original graph is not a DAG (%s); retrying on the condensation", exc)
                path_graph = CONDENSATION
        else:
            path_graph = CONDENSATION

        if path_graph == CONDENSATION:
            if not 0 <= data.source < graph.vertex_count:
                raise OutOfRange(f"source {data.source} out of range [0, {graph.vertex_count})")
            path_source = scc.component(data.source)
            results = _solve_paths(condensation.graph, path_source)
    except OutOfRange as exc:
        LOGGER.warning("path analysis skipped: %s", exc)
        error = str(exc)

    shortest, longest, critical = results if results is not None else (None, None, None)
    LOGGER.info(
        "analyzed %s components=%s path_graph=%s critical_length=%s",
        data.name or "<inline>",
        scc.component_count,
        path_graph,
        critical.length if critical is not None else None,
    )
    return AnalysisReport(
        data=data,
        scc=scc,
        condensation=condensation,
        topo=topo,
        task_order=task_order,
        path_graph=path_graph,
        path_source=path_source,
        shortest=shortest,
        longest=longest,
        critical=critical,
        error=error,
    )


def analyze_file(path: str | Path) -> AnalysisReport:
    return analyze_graph(load_graph(path))


def discover_datasets(directory: str | Path) -> List[Path]:
    """Return the dataset files of ``directory`` in name order."""

    root = Path(directory)
    if not root.is_dir():
        return []
    return sorted(p for p in root.iterdir() if p.is_file() and p.suffix.lower() in DATASET_SUFFIXES)


def analyze_directory(directory: str | Path) -> BatchSummary:
    """Analyse every dataset in ``directory``; failures are recorded, not raised."""

    summary = BatchSummary()
    for path in discover_datasets(directory):
        try:
            summary.reports.append(analyze_file(path))
        except (GraphError, GraphFormatError) as exc:
            LOGGER.error("failed to analyse %s: %s", path, exc)
            summary.failures.append((path, str(exc)))
    return summary
