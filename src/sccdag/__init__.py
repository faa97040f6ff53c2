"""sccdag package."""

from importlib import metadata

from . import core, metrics, io, report, pipeline
from .core import (
    Condensation,
    CriticalPathResult,
    Edge,
    GraphError,
    InvalidArgument,
    LongestPathResult,
    OutOfRange,
    SCCResult,
    ShortestPathResult,
    TopoResult,
    UnsupportedOperation,
    WeightedGraph,
    build_graph,
    condense,
    critical_path,
    kahn_sort,
    longest_paths,
    shortest_paths,
    tarjan_scc,
)
from .io import GraphData, GraphFormatError, load_graph
from .metrics import Metrics
from .pipeline import AnalysisReport, analyze_file, analyze_graph

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("sccdag")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "core",
    "metrics",
    "io",
    "report",
    "pipeline",
    "WeightedGraph",
    "Edge",
    "build_graph",
    "GraphError",
    "InvalidArgument",
    "OutOfRange",
    "UnsupportedOperation",
    "SCCResult",
    "Condensation",
    "TopoResult",
    "ShortestPathResult",
    "LongestPathResult",
    "CriticalPathResult",
    "tarjan_scc",
    "condense",
    "kahn_sort",
    "shortest_paths",
    "longest_paths",
    "critical_path",
    "Metrics",
    "GraphData",
    "GraphFormatError",
    "load_graph",
    "AnalysisReport",
    "analyze_graph",
    "analyze_file",
    "__version__",
]
