import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sccdag.core.graph import WeightedGraph, build_graph  # noqa: E402


@pytest.fixture
def diamond() -> WeightedGraph:
    return build_graph(4, [(0, 1, 5), (0, 2, 3), (1, 3, 2), (2, 3, 6)])


@pytest.fixture
def weighted_dag() -> WeightedGraph:
    return build_graph(
        6,
        [(0, 1, 3), (0, 2, 2), (1, 3, 4), (2, 3, 1), (2, 4, 5), (3, 5, 2), (4, 5, 3)],
    )


@pytest.fixture
def two_cycles() -> WeightedGraph:
    """{0,1,2} and {3,4} linked in sequence, then singletons 5, 6, 7."""

    return build_graph(
        8,
        [(0, 1, 1), (1, 2, 1), (2, 0, 1), (3, 4, 1), (4, 3, 1), (2, 3, 1), (4, 5, 1), (5, 6, 1), (6, 7, 1)],
    )


def random_digraph(seed: int, n: int, edge_prob: float, max_weight: int = 9) -> WeightedGraph:
    rng = random.Random(seed)
    graph = WeightedGraph(n, directed=True)
    for u in range(n):
        for v in range(n):
            if rng.random() < edge_prob:
                graph.add_edge(u, v, rng.randint(0, max_weight))
    return graph


def random_dag(seed: int, n: int, edge_prob: float, max_weight: int = 9, min_weight: int = 0) -> WeightedGraph:
    """Random DAG with vertex labels shuffled so index order is not topological."""

    rng = random.Random(seed)
    labels = list(range(n))
    rng.shuffle(labels)
    graph = WeightedGraph(n, directed=True)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < edge_prob:
                graph.add_edge(labels[i], labels[j], rng.randint(min_weight, max_weight))
    return graph
