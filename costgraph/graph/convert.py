"""Conversion between CostGraph and plain NetworkX graphs.

``from_networkx`` accepts any NetworkX graph type. Undirected links become a
pair of opposite directed links and parallel links of multigraphs collapse to
the cheapest one.
"""

from typing import Any, Optional

import networkx as nx

from costgraph.algorithms.base import Cost
from costgraph.config import GraphConfig
from costgraph.diagnostics import DiagnosticSink
from costgraph.graph.cost_graph import COST_ATTR, CostGraph


def from_networkx(
    nx_graph: Any,
    weight: str = COST_ATTR,
    default: Cost = 1,
    diagnostics: Optional[DiagnosticSink] = None,
    config: Optional[GraphConfig] = None,
) -> CostGraph:
    """Build a CostGraph from a NetworkX graph.

    Args:
        nx_graph: ``nx.Graph``, ``nx.DiGraph`` or their multigraph variants.
        weight: Edge attribute read as the link cost.
        default: Cost used for edges without ``weight``.
        diagnostics: Sink passed to the new graph.
        config: Config passed to the new graph.

    Returns:
        A new CostGraph holding every node and link of ``nx_graph``.
    """
    graph = CostGraph(diagnostics=diagnostics, config=config)
    for node_id in nx_graph.nodes:
        graph.add_node(node_id)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        cost = data.get(weight, default)
        pairs = [(u, v)] if directed or u == v else [(u, v), (v, u)]
        for src, dst in pairs:
            if graph.has_edge(src, dst) and graph.edge_cost(src, dst) <= cost:
                continue
            graph.add_links(src, {dst: cost}, create_if_missing=False)
    return graph


def to_networkx(graph: CostGraph) -> nx.DiGraph:
    """Return a plain ``nx.DiGraph`` copy with ``cost`` edge attributes."""
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.nodes(data=True))
    for u, nbrs in graph.adjacency():
        for v, attrs in nbrs.items():
            nx_graph.add_edge(u, v, **{COST_ATTR: attrs[COST_ATTR]})
    return nx_graph
