"""Randomised checks of the core invariants against brute force."""

import math
from typing import Dict, List, Set

import pytest

from conftest import random_dag, random_digraph
from sccdag.core.graph import WeightedGraph
from sccdag.core.paths import critical_path, longest_paths, shortest_paths
from sccdag.core.scc import condense, tarjan_scc
from sccdag.core.topo import kahn_sort

SEEDS = range(12)


def reachable_from(graph: WeightedGraph, start: int) -> Set[int]:
    seen = {start}
    frontier = [start]
    while frontier:
        u = frontier.pop()
        for edge in graph.adjacent(u):
            if edge.target not in seen:
                seen.add(edge.target)
                frontier.append(edge.target)
    return seen


def all_path_weights(graph: WeightedGraph, start: int) -> Dict[int, List[int]]:
    """Weights of every directed path from ``start`` in a DAG, keyed by end vertex."""

    weights: Dict[int, List[int]] = {start: [0]}
    stack = [(start, 0)]
    while stack:
        u, total = stack.pop()
        for edge in graph.adjacent(u):
            weights.setdefault(edge.target, []).append(total + edge.weight)
            stack.append((edge.target, total + edge.weight))
    return weights


def path_weight(graph: WeightedGraph, path) -> int:
    total = 0
    for u, v in zip(path, path[1:]):
        total += max(edge.weight for edge in graph.adjacent(u) if edge.target == v)
    return total


@pytest.mark.parametrize("seed", SEEDS)
def test_scc_partition_matches_mutual_reachability(seed):
    graph = random_digraph(seed, n=9, edge_prob=0.18)
    result = tarjan_scc(graph)
    covered = sorted(v for comp in result.components for v in comp)
    assert covered == list(range(graph.vertex_count))

    reach = [reachable_from(graph, v) for v in range(graph.vertex_count)]
    for u in range(graph.vertex_count):
        for v in range(graph.vertex_count):
            mutual = v in reach[u] and u in reach[v]
            assert (result.component(u) == result.component(v)) == mutual


@pytest.mark.parametrize("seed", SEEDS)
def test_condensation_is_acyclic(seed):
    graph = random_digraph(seed, n=10, edge_prob=0.2)
    result = tarjan_scc(graph)
    condensation = condense(graph, result)
    topo = kahn_sort(condensation.graph)
    assert not topo.has_cycle
    pairs = [(u, v) for u, v, _ in condensation.graph.edges()]
    assert len(pairs) == len(set(pairs))
    assert all(u != v for u, v in pairs)


@pytest.mark.parametrize("seed", SEEDS)
def test_kahn_order_respects_edges(seed):
    graph = random_dag(seed, n=10, edge_prob=0.3)
    result = kahn_sort(graph)
    assert not result.has_cycle
    assert sorted(result.order) == list(range(graph.vertex_count))
    index = {v: i for i, v in enumerate(result.order)}
    for u, v, _ in graph.edges():
        assert index[u] < index[v]


@pytest.mark.parametrize("seed", SEEDS)
def test_kahn_detects_cycles(seed):
    graph = random_digraph(seed, n=8, edge_prob=0.25)
    result = kahn_sort(graph)
    has_nontrivial_scc = any(len(comp) > 1 for comp in tarjan_scc(graph).components)
    has_self_loop = any(u == v for u, v, _ in graph.edges())
    assert result.has_cycle == (has_nontrivial_scc or has_self_loop)
    if result.has_cycle:
        assert len(result.order) < graph.vertex_count


@pytest.mark.parametrize("seed", SEEDS)
def test_single_source_paths_match_brute_force(seed):
    graph = random_dag(seed, n=8, edge_prob=0.35, min_weight=-3)
    source = seed % graph.vertex_count
    shortest = shortest_paths(graph, source)
    longest = longest_paths(graph, source)
    weights = all_path_weights(graph, source)
    for v in range(graph.vertex_count):
        if v in weights:
            assert shortest.distance(v) == min(weights[v])
            assert longest.distance(v) == max(weights[v])
            s_path = shortest.path_to(v)
            assert s_path[0] == source and s_path[-1] == v
        else:
            assert shortest.distance(v) == math.inf
            assert longest.distance(v) == -math.inf
            assert shortest.path_to(v) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_critical_path_is_global_maximum(seed):
    graph = random_dag(seed, n=8, edge_prob=0.35)
    result = critical_path(graph)
    best = max(max(ws) for start in range(graph.vertex_count) for ws in all_path_weights(graph, start).values())
    assert result.length == best
    assert path_weight(graph, result.path) == result.length
    for u, v in zip(result.path, result.path[1:]):
        assert any(edge.target == v for edge in graph.adjacent(u))


@pytest.mark.parametrize("seed", SEEDS[:4])
def test_runs_are_deterministic(seed):
    graph = random_digraph(seed, n=10, edge_prob=0.2)
    assert tarjan_scc(graph) == tarjan_scc(graph)
    assert kahn_sort(graph) == kahn_sort(graph)
    dag = random_dag(seed, n=10, edge_prob=0.3)
    assert shortest_paths(dag, 0) == shortest_paths(dag, 0)
    assert critical_path(dag) == critical_path(dag)
