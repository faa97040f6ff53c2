"""Text and JSON rendering for analysis results."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Sequence

from .core.paths import CriticalPathResult, LongestPathResult, ShortestPathResult
from .core.scc import Condensation, SCCResult
from .core.topo import TopoResult
from .metrics import Metrics
from .pipeline import CONDENSATION, ORIGINAL, AnalysisReport

RULE_WIDTH = 80


def _fmt_list(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def _with_metrics(lines: List[str], metrics: Optional[Metrics]) -> str:
    if metrics is not None:
        lines.append("")
        lines.append(metrics.report())
    return "\n".join(lines)


def render_scc(result: SCCResult) -> str:
    lines = [f"Strongly Connected Components: {result.component_count}"]
    for idx, members in enumerate(result.components):
        lines.append(f"SCC {idx} (size {len(members)}): {_fmt_list(members)}")
    return _with_metrics(lines, result.metrics)


def render_condensation(condensation: Condensation) -> str:
    lines = [
        "Condensation Graph:",
        f"Number of components: {condensation.component_count}",
        f"Edges in condensation: {condensation.edge_count()}",
        "",
        condensation.graph.describe(),
    ]
    return "\n".join(lines)


def render_topo(result: TopoResult) -> str:
    if result.has_cycle:
        lines = [
            "Graph contains a cycle - no valid topological order",
            f"Partial order: {_fmt_list(result.order)}",
        ]
    else:
        lines = [f"Topological Order: {_fmt_list(result.order)}"]
    return _with_metrics(lines, result.metrics)


def _render_single_source(title: str, result) -> str:
    lines = [f"{title} from source {result.source}:"]
    for v in range(len(result.distances)):
        if result.is_reachable(v):
            lines.append(f"  To {v}: distance = {result.distance(v)}, path = {_fmt_list(result.path_to(v))}")
        else:
            lines.append(f"  To {v}: unreachable")
    return _with_metrics(lines, result.metrics)


def render_shortest(result: ShortestPathResult) -> str:
    return _render_single_source("Shortest Paths", result)


def render_longest(result: LongestPathResult) -> str:
    return _render_single_source("Longest Paths", result)


def render_critical(result: CriticalPathResult) -> str:
    lines = [
        "Critical Path:",
        f"  Path: {_fmt_list(result.path)}",
        f"  Length: {result.length}",
    ]
    return _with_metrics(lines, result.metrics)


def _section(title: str) -> List[str]:
    return ["", title, "-" * RULE_WIDTH]


def render_analysis(report: AnalysisReport) -> str:
    """Render the full pipeline report with numbered sections."""

    data = report.data
    graph = data.graph
    lines: List[str] = [
        "-" * RULE_WIDTH,
        f"Processing: {data.name or '<inline>'}",
        "-" * RULE_WIDTH,
        "Graph loaded successfully:",
        f"  Vertices: {graph.vertex_count}",
        f"  Edges: {graph.edge_count()}",
        f"  Source vertex: {data.source}",
        f"  Weight model: {data.weight_model}",
    ]
    lines += _section("1. STRONGLY CONNECTED COMPONENTS (Tarjan's Algorithm)")
    lines.append(render_scc(report.scc))
    lines += _section("2. CONDENSATION GRAPH")
    lines.append(render_condensation(report.condensation))
    lines += _section("3. TOPOLOGICAL SORT (Kahn's Algorithm)")
    lines.append(render_topo(report.topo))
    lines.append("")
    lines.append("Original task order (by SCC):")
    for idx, members in zip(report.topo.order, report.task_order):
        lines.append(f"  SCC {idx}: {_fmt_list(members)}")

    target = "in DAG" if report.path_graph == ORIGINAL else "(on Condensation DAG)"
    lines += _section(f"4. SHORTEST PATHS {target}")
    if report.path_graph == CONDENSATION:
        lines.append(
            f"Original graph has cycles. Computing paths on condensation DAG from component {report.path_source}..."
        )
        lines.append("")
    if report.shortest is not None:
        lines.append(render_shortest(report.shortest))
    lines += _section(f"5. LONGEST PATHS {target} (Critical Path)")
    if report.critical is not None:
        lines.append(render_critical(report.critical))
    if report.longest is not None:
        lines.append("")
        lines.append(render_longest(report.longest))
    if report.error:
        lines.append(f"Path analysis failed: {report.error}")
    return "\n".join(lines)


def _json_distance(value) -> Optional[int]:
    if isinstance(value, float) and math.isinf(value):
        return None
    return value


def metrics_payload(metrics: Optional[Metrics]) -> Optional[Dict[str, Any]]:
    if metrics is None:
        return None
    return {"elapsed_ms": metrics.elapsed_ms, "counters": dict(metrics.counters)}


def result_payload(result: Any) -> Dict[str, Any]:
    """Convert a result record (or a full analysis report) to JSON-ready data."""

    if isinstance(result, SCCResult):
        return {
            "kind": result.kind,
            "component_count": result.component_count,
            "components": [list(members) for members in result.components],
            "component_of": [int(c) for c in result.component_of],
            "metrics": metrics_payload(result.metrics),
        }
    if isinstance(result, Condensation):
        return {
            "kind": result.kind,
            "component_count": result.component_count,
            "edges": [{"u": u, "v": v, "w": w} for u, v, w in result.graph.edges()],
        }
    if isinstance(result, TopoResult):
        return {
            "kind": result.kind,
            "order": list(result.order),
            "has_cycle": result.has_cycle,
            "metrics": metrics_payload(result.metrics),
        }
    if isinstance(result, (ShortestPathResult, LongestPathResult)):
        return {
            "kind": result.kind,
            "source": result.source,
            "distances": [_json_distance(d) for d in result.distances],
            "paths": {str(v): result.path_to(v) for v in range(len(result.distances)) if result.is_reachable(v)},
            "metrics": metrics_payload(result.metrics),
        }
    if isinstance(result, CriticalPathResult):
        return {
            "kind": result.kind,
            "path": list(result.path),
            "length": result.length,
            "metrics": metrics_payload(result.metrics),
        }

    if isinstance(result, AnalysisReport):
        return {
            "name": result.data.name,
            "vertex_count": result.data.graph.vertex_count,
            "edge_count": result.data.graph.edge_count(),
            "source": result.data.source,
            "weight_model": result.data.weight_model,
            "scc": result_payload(result.scc),
            "condensation": result_payload(result.condensation),
            "topo": result_payload(result.topo),
            "task_order": [list(members) for members in result.task_order],
            "path_graph": result.path_graph,
            "path_source": result.path_source,
            "shortest": result_payload(result.shortest) if result.shortest is not None else None,
            "longest": result_payload(result.longest) if result.longest is not None else None,
            "critical": result_payload(result.critical) if result.critical is not None else None,
            "error": result.error,
        }
    raise TypeError(f"cannot render {type(result).__name__}")
