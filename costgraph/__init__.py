"""costgraph: least-cost paths over weighted directed graphs.

A graph is a mapping from node identifiers to ``{neighbor: cost}`` maps.
`CostGraph` stores it and answers adjacency queries; `shortest_path` runs a
Dijkstra-style search that can report one cheapest path or every path tied for
the minimum cost.

Example:
    from costgraph import CostGraph

    graph = CostGraph({"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}})
    cost, paths = graph.shortest_path("A", "C")
    # cost == 2, paths == [["A", "B", "C"]]
"""

from __future__ import annotations

from costgraph import cli, logging
from costgraph._version import __version__
from costgraph.algorithms import (
    SearchState,
    TableEntry,
    path_cost,
    reconstruct_paths,
    relax,
    shortest_path,
)
from costgraph.config import GRAPH_CONFIG, GraphConfig
from costgraph.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink
from costgraph.graph import CostGraph
from costgraph.graph.convert import from_networkx, to_networkx
from costgraph.io import dump_graph_yaml, load_graph, load_graph_yaml

__all__ = [
    # Version
    "__version__",
    # Graph store
    "CostGraph",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    # Search
    "shortest_path",
    "relax",
    "reconstruct_paths",
    "path_cost",
    "SearchState",
    "TableEntry",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # I/O and conversion
    "load_graph",
    "load_graph_yaml",
    "dump_graph_yaml",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
