"""Error taxonomy shared by the graph algorithms."""

from __future__ import annotations


class GraphError(Exception):
    """Base error for graph construction and analysis failures."""


class InvalidArgument(GraphError, ValueError):
    """Raised when an algorithm is handed a graph it cannot process.

    Covers undirected input to a directed-only algorithm and cyclic input to
    a DAG-only path solver.
    """


class OutOfRange(GraphError, IndexError):
    """Raised when a vertex index falls outside ``[0, n)``."""


class UnsupportedOperation(GraphError, NotImplementedError):
    """Raised when an operation is undefined for the graph kind."""


__all__ = ["GraphError", "InvalidArgument", "OutOfRange", "UnsupportedOperation"]
