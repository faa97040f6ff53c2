"""
Core graph analysis for sccdag.

The core package includes the weighted graph container, Tarjan SCC
decomposition and condensation, Kahn topological ordering, and the DAG
path solvers (shortest, source-rooted longest, critical path).
"""

from . import errors, graph, scc, topo, paths  # noqa: F401
from .errors import GraphError, InvalidArgument, OutOfRange, UnsupportedOperation
from .graph import Edge, WeightedGraph, build_graph
from .paths import (
    CriticalPathResult,
    LongestPathResult,
    ShortestPathResult,
    critical_path,
    longest_paths,
    shortest_paths,
)
from .scc import Condensation, SCCResult, condensation_dag, condense, tarjan_scc
from .topo import TopoResult, kahn_sort

__all__ = [
    "errors",
    "graph",
    "scc",
    "topo",
    "paths",
    "GraphError",
    "InvalidArgument",
    "OutOfRange",
    "UnsupportedOperation",
    "Edge",
    "WeightedGraph",
    "build_graph",
    "SCCResult",
    "Condensation",
    "tarjan_scc",
    "condense",
    "condensation_dag",
    "TopoResult",
    "kahn_sort",
    "ShortestPathResult",
    "LongestPathResult",
    "CriticalPathResult",
    "shortest_paths",
    "longest_paths",
    "critical_path",
]
