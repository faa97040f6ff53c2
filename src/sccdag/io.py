"""
Dataset loading helpers (JSON with ``//`` comments or YAML → WeightedGraph).
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .core.errors import GraphError
from .core.graph import WeightedGraph

YAML_SUFFIXES = {".yaml", ".yml"}
DATASET_SUFFIXES = {".json"} | YAML_SUFFIXES


class GraphFormatError(ValueError):
    """Raised when a dataset file cannot be turned into a graph."""


@dataclass(frozen=True)
class GraphData:
    graph: WeightedGraph
    source: int
    weight_model: str
    name: Optional[str] = None


def strip_comment_lines(text: str) -> str:
    """Drop lines whose first non-blank characters are ``//``."""

    return "\n".join(line for line in text.splitlines() if not line.strip().startswith("//"))


def _int_field(data: Mapping[str, Any], key: str, *, default: Optional[int] = None, where: str = "") -> int:
    if key not in data or data[key] is None:
        if default is None:
            raise GraphFormatError(f"{where}missing required integer field '{key}'")
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"{where}field '{key}' must be an integer, got {value!r}")
    return value


def graph_from_mapping(data: Any, *, name: Optional[str] = None) -> GraphData:
    """Build :class:`GraphData` from an already decoded mapping."""

    if not isinstance(data, dict):
        raise GraphFormatError("dataset must be a mapping")
    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise GraphFormatError(f"field 'directed' must be a boolean, got {directed!r}")
    n = _int_field(data, "n")
    source = _int_field(data, "source", default=0)
    weight_model = str(data.get("weight_model") or "")

    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise GraphFormatError("field 'edges' must be a list")
    try:
        graph = WeightedGraph(n, directed=directed)
        for idx, edge in enumerate(edges):
            if not isinstance(edge, dict):
                raise GraphFormatError(f"edge #{idx} must be a mapping with 'u', 'v', 'w'")
            where = f"edge #{idx}: "
            graph.add_edge(
                _int_field(edge, "u", where=where),
                _int_field(edge, "v", where=where),
                _int_field(edge, "w", where=where),
            )
    except GraphError as exc:
        raise GraphFormatError(str(exc)) from exc
    return GraphData(graph=graph, source=source, weight_model=weight_model, name=name)


def parse_graph_text(text: str, *, name: Optional[str] = None) -> GraphData:
    """Parse the JSON dataset format, ignoring ``//`` comment lines."""

    try:
        data: Dict[str, Any] = json.loads(strip_comment_lines(text))
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"invalid JSON: {exc}") from exc
    return graph_from_mapping(data, name=name)


def load_graph(path: str | Path) -> GraphData:
    dataset = Path(path)
    if not dataset.exists():
        raise GraphFormatError(f"dataset '{dataset}' not found")
    try:
        text = dataset.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphFormatError(f"{dataset}: cannot read: {exc}") from exc
    try:
        if dataset.suffix.lower() in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise GraphFormatError(f"invalid YAML: {exc}") from exc
            return graph_from_mapping(data, name=dataset.name)
        return parse_graph_text(text, name=dataset.name)
    except GraphFormatError as exc:
        raise GraphFormatError(f"{dataset}: {exc}") from exc


def dump_graph(data: GraphData, path: str | Path) -> None:
    """Write ``data`` back out as JSON or YAML depending on the suffix."""

    payload = {
        "directed": data.graph.directed,
        "n": data.graph.vertex_count,
        "source": data.source,
        "weight_model": data.weight_model,
        "edges": [{"u": u, "v": v, "w": w} for u, v, w in _logical_edges(data.graph)],
    }
    out = Path(path)
    if out.suffix.lower() in YAML_SUFFIXES:
        out.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    else:
        out.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def _logical_edges(graph: WeightedGraph):
    if graph.directed:
        yield from graph.edges()
        return
    # each undirected edge is stored twice; emit the copy found at the smaller endpoint
    pending: Dict[tuple, int] = {}
    for u, v, w in graph.edges():
        if u == v:
            key = (u, v, w)
            pending[key] = pending.get(key, 0) + 1
            if pending[key] % 2 == 1:
                yield u, v, w
        elif u < v:
            yield u, v, w
