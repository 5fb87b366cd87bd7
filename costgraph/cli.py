"""Command-line interface for costgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import networkx as nx

from costgraph.config import GRAPH_CONFIG
from costgraph.diagnostics import DiagnosticSink
from costgraph.graph.cost_graph import CostGraph
from costgraph.io import load_graph
from costgraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 4) -> str:
    """Format rows as a simple ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows, one string per column.
        min_width: Minimum column width.

    Returns:
        The table, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(min_width, max(len(row[i]) for row in all_data))
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost with up to three decimals and trailing zeros trimmed.

    Examples:
        2 -> "2"; 2.50 -> "2.5"; 1234.5678 -> "1,234.568".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _load_or_exit(graph_path: Path, **kwargs: Any) -> CostGraph:
    try:
        return load_graph(graph_path, **kwargs)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"❌ ERROR: Graph file not found: {graph_path}", file=sys.stderr)
        raise SystemExit(1) from None
    except Exception as e:
        logger.error(f"Failed to load graph: {e}")
        print("❌ ERROR: Failed to load graph", file=sys.stderr)
        print(f"  {type(e).__name__}: {e}", file=sys.stderr)
        raise SystemExit(1) from None


def _find_path(
    graph_path: Path, start: str, end: str, multi_path: bool, as_json: bool
) -> None:
    graph = _load_or_exit(graph_path)
    try:
        cost, paths = graph.shortest_path(start, end, multi_path=multi_path)
    except (nx.NodeNotFound, nx.NetworkXNoPath) as exc:
        logger.error(str(exc))
        print(f"❌ {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    if as_json:
        print(json.dumps({"cost": cost, "paths": paths}, indent=2, default=str))
        return

    label = "path" if len(paths) == 1 else "paths"
    print(f"✅ {start} -> {end}: cost {_format_cost(cost)}, {len(paths)} {label}")
    rows = [
        [str(i), " -> ".join(str(node) for node in path)]
        for i, path in enumerate(paths, start=1)
    ]
    print(_format_table(["#", "Path"], rows))


def _inspect_graph(graph_path: Path, declared_only: bool = False) -> None:
    diagnostics = DiagnosticSink(log=False)
    graph = _load_or_exit(
        graph_path, diagnostics=diagnostics, declared_only=declared_only
    )

    print(f"Graph: {graph_path}")
    print(f"   Nodes: {graph.number_of_nodes():,}")
    print(f"   Links: {graph.number_of_edges():,}")

    if len(diagnostics) == 0:
        print("   Diagnostics: none")
        return
    print(f"   Diagnostics: {len(diagnostics)}")
    rows = [[d.kind.name, str(d.node), d.message] for d in diagnostics]
    print(_format_table(["Kind", "Node", "Message"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``costgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="costgraph",
        description="Find least-cost paths in weighted directed graphs.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,inspect}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser("path", help="Find the cheapest path(s)")
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    path_parser.add_argument("start", help="Start node")
    path_parser.add_argument("end", help="End node")
    path_parser.add_argument(
        "--multi-path",
        "-m",
        action="store_true",
        default=GRAPH_CONFIG.multi_path,
        help="Report every path tied for the minimum cost",
    )
    path_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize a graph file and report load diagnostics"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    inspect_parser.add_argument(
        "--declared-only",
        action="store_true",
        help="Do not auto-create link targets missing from the top level; report them",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "path":
        _find_path(args.graph, args.start, args.end, args.multi_path, args.json)
    elif args.command == "inspect":
        _inspect_graph(args.graph, args.declared_only)


if __name__ == "__main__":
    main()
