import json

from sccdag.core.graph import build_graph
from sccdag.core.paths import critical_path, longest_paths, shortest_paths
from sccdag.core.scc import condense, tarjan_scc
from sccdag.core.topo import kahn_sort
from sccdag.io import GraphData
from sccdag.pipeline import analyze_graph
from sccdag.report import (
    render_analysis,
    render_condensation,
    render_critical,
    render_scc,
    render_shortest,
    render_topo,
    result_payload,
)


def test_render_scc_lists_components(two_cycles):
    text = render_scc(tarjan_scc(two_cycles))
    assert text.startswith("Strongly Connected Components: 5")
    assert "SCC 4 (size 3): [2, 1, 0]" in text
    assert "Execution Time:" in text


def test_render_condensation(two_cycles):
    text = render_condensation(condense(two_cycles, tarjan_scc(two_cycles)))
    assert "Number of components: 5" in text
    assert "Edges in condensation: 4" in text


def test_render_topo_cycle_and_order():
    cyclic = render_topo(kahn_sort(build_graph(2, [(0, 1, 1), (1, 0, 1)])))
    assert "Graph contains a cycle" in cyclic
    assert "Partial order: []" in cyclic
    acyclic = render_topo(kahn_sort(build_graph(2, [(0, 1, 1)])))
    assert "Topological Order: [0, 1]" in acyclic


def test_render_shortest_marks_unreachable():
    text = render_shortest(shortest_paths(build_graph(3, [(0, 1, 4)]), 0))
    assert "Shortest Paths from source 0:" in text
    assert "  To 1: distance = 4, path = [0, 1]" in text
    assert "  To 2: unreachable" in text


def test_render_critical(diamond):
    text = render_critical(critical_path(diamond))
    assert "  Path: [0, 2, 3]" in text
    assert "  Length: 9" in text


def test_payload_replaces_infinity_with_null():
    payload = result_payload(longest_paths(build_graph(3, [(0, 1, 4)]), 0))
    assert payload["kind"] == "longest"
    assert payload["distances"] == [0, 4, None]
    assert payload["paths"] == {"0": [0], "1": [0, 1]}
    json.dumps(payload)


def test_analysis_report_renders_and_serialises(two_cycles):
    report = analyze_graph(GraphData(graph=two_cycles, source=0, weight_model="edge", name="two_cycles"))
    text = render_analysis(report)
    assert "Processing: two_cycles" in text
    assert "1. STRONGLY CONNECTED COMPONENTS" in text
    assert "SHORTEST PATHS (on Condensation DAG)" in text
    assert "  SCC 4: [2, 1, 0]" in text
    payload = json.loads(json.dumps(result_payload(report)))
    assert payload["path_graph"] == "condensation"
    assert payload["critical"]["length"] == 4
    assert payload["scc"]["component_count"] == 5


def test_analysis_headings_follow_path_graph(two_cycles, weighted_dag):
    condensed = render_analysis(analyze_graph(GraphData(graph=two_cycles, source=0, weight_model="edge")))
    assert "5. LONGEST PATHS (on Condensation DAG) (Critical Path)" in condensed
    assert "LONGEST PATHS in DAG" not in condensed
    original = render_analysis(analyze_graph(GraphData(graph=weighted_dag, source=0, weight_model="edge")))
    assert "5. LONGEST PATHS in DAG (Critical Path)" in original
