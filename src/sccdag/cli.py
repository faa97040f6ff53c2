"""sccdag CLI: SCC decomposition, condensation, topological order and DAG paths."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from . import config
from .core.errors import GraphError
from .core.paths import critical_path, longest_paths, shortest_paths
from .core.scc import condense, tarjan_scc
from .core.topo import kahn_sort
from .io import GraphData, GraphFormatError, dump_graph, load_graph
from .pipeline import analyze_directory, analyze_file, discover_datasets
from .report import (
    RULE_WIDTH,
    render_analysis,
    render_condensation,
    render_critical,
    render_longest,
    render_scc,
    render_shortest,
    render_topo,
    result_payload,
)


def _write_json_output(payload: Any, output_path: Optional[Path]) -> None:
    text = json.dumps(payload, indent=2)
    if output_path:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        print(f"JSON report saved to {out_path}")
    else:
        print(text)


def _banner() -> None:
    print("=" * RULE_WIDTH)
    print("Strongly Connected Components & Shortest Paths in DAGs")
    print("=" * RULE_WIDTH)


def command_analyze(args: argparse.Namespace) -> None:
    path = config.resolve_default_input(args.input)
    report = analyze_file(path)
    _banner()
    print(render_analysis(report))
    if args.json:
        _write_json_output(result_payload(report), args.json)


def command_batch(args: argparse.Namespace) -> None:
    directory = config.resolve_data_dir(args.directory)
    if not directory.is_dir():
        print(f"Data directory '{directory}' not found. Skipping batch processing.")
        return
    if not discover_datasets(directory):
        print(f"No dataset files found in '{directory}'.")
        return
    summary = analyze_directory(directory)
    _banner()
    for report in summary.reports:
        print(render_analysis(report))
        print()
    for path, message in summary.failures:
        print(f"Error processing file {path}: {message}", file=sys.stderr)
    print("=" * RULE_WIDTH)
    print(f"Batch processing complete. Processed {summary.processed} datasets ({len(summary.failures)} failed).")
    print("=" * RULE_WIDTH)
    if args.json:
        payload: Dict[str, Any] = {
            "reports": [result_payload(report) for report in summary.reports],
            "failures": [{"path": str(path), "error": message} for path, message in summary.failures],
        }
        _write_json_output(payload, args.json)


def command_scc(args: argparse.Namespace) -> None:
    data = load_graph(args.input)
    result = tarjan_scc(data.graph)
    print(render_scc(result))
    if args.json:
        _write_json_output(result_payload(result), args.json)


def command_condense(args: argparse.Namespace) -> None:
    data = load_graph(args.input)
    condensation = condense(data.graph, tarjan_scc(data.graph))
    print(render_condensation(condensation))
    if args.output:
        source = condensation.component_of[data.source] if 0 <= data.source < data.graph.vertex_count else 0
        dump_graph(
            GraphData(graph=condensation.graph, source=int(source), weight_model=data.weight_model),
            args.output,
        )
        print(f"Condensation saved to {args.output}")


def command_topo(args: argparse.Namespace) -> None:
    data = load_graph(args.input)
    graph = data.graph
    if args.condensed:
        graph = condense(graph, tarjan_scc(graph)).graph
    result = kahn_sort(graph)
    print(render_topo(result))
    if args.json:
        _write_json_output(result_payload(result), args.json)


def command_paths(args: argparse.Namespace) -> None:
    data = load_graph(args.input)
    source = data.source if args.source is None else args.source
    if args.mode == "shortest":
        result = shortest_paths(data.graph, source)
        print(render_shortest(result))
    elif args.mode == "longest":
        result = longest_paths(data.graph, source)
        print(render_longest(result))
    else:
        result = critical_path(data.graph)
        print(render_critical(result))
    if args.json:
        _write_json_output(result_payload(result), args.json)


def build_parser() -> argparse.ArgumentParser:
    description = (
        "sccdag: strongly connected components, condensation, topological order and\n"
        "shortest/longest/critical paths over weighted directed graphs."
    )
    parser = argparse.ArgumentParser(
        prog="sccdag",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        help=f"Logging level (default: ${config._LOG_LEVEL_ENV} or {config.DEFAULT_LOG_LEVEL}).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Run the full pipeline on one dataset.")
    analyze.add_argument(
        "input",
        nargs="?",
        type=Path,
        help=f"Dataset path (default: ${config._DEFAULT_INPUT_ENV} or {config.DEFAULT_INPUT}).",
    )
    analyze.add_argument("--json", type=Path, help="Write the JSON report to this path.")
    analyze.set_defaults(func=command_analyze)

    batch = subparsers.add_parser("batch", help="Run the full pipeline on every dataset in a directory.")
    batch.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help=f"Dataset directory (default: ${config._DATA_DIR_ENV} or {config.DEFAULT_DATA_DIR}).",
    )
    batch.add_argument("--json", type=Path, help="Write the combined JSON report to this path.")
    batch.set_defaults(func=command_batch)

    scc = subparsers.add_parser("scc", help="List strongly connected components.")
    scc.add_argument("input", type=Path, help="Dataset path.")
    scc.add_argument("--json", type=Path, help="Write the JSON result to this path.")
    scc.set_defaults(func=command_scc)

    condense_cmd = subparsers.add_parser("condense", help="Build the condensation DAG.")
    condense_cmd.add_argument("input", type=Path, help="Dataset path.")
    condense_cmd.add_argument("--output", type=Path, help="Save the condensation as a dataset (.json/.yaml).")
    condense_cmd.set_defaults(func=command_condense)

    topo = subparsers.add_parser("topo", help="Topological order (Kahn).")
    topo.add_argument("input", type=Path, help="Dataset path.")
    topo.add_argument("--condensed", action="store_true", help="Sort the condensation instead of the graph.")
    topo.add_argument("--json", type=Path, help="Write the JSON result to this path.")
    topo.set_defaults(func=command_topo)

    paths = subparsers.add_parser("paths", help="Shortest, longest or critical paths on a DAG.")
    paths.add_argument("input", type=Path, help="Dataset path.")
    paths.add_argument("--source", type=int, help="Source vertex (default: the dataset's source).")
    paths.add_argument(
        "--mode",
        choices=("shortest", "longest", "critical"),
        default="shortest",
        help="Path analysis to run (default: shortest).",
    )
    paths.add_argument("--json", type=Path, help="Write the JSON result to this path.")
    paths.set_defaults(func=command_paths)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging(args.log_level)
    try:
        args.func(args)
    except (GraphError, GraphFormatError) as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":  # pragma: no cover - manual invocation path
    main()
