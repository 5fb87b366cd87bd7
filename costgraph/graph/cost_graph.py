"""Directed graph with one non-negative cost per ordered node pair.

`CostGraph` extends `networkx.DiGraph`. The adjacency it inherits is exactly
the exchange format of the package, ``{node: {neighbor: {"cost": c}}}``, and
the class adds the mutation rules used by the shortest-path engine:

  - ``add_node`` on an existing node is a reported conflict, not an error.
  - ``add_links`` only auto-creates missing endpoints when asked to; otherwise
    the offending entry is reported and skipped.
  - Re-linking an existing pair overwrites its cost (last write wins).
  - The inherited ``add_edge`` / ``add_edges_from`` go through ``add_links``
    and require a ``cost`` attribute.

Conflicts go to a ``DiagnosticSink``. With ``GraphConfig(strict=True)`` they
raise ``ValueError`` instead.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

import networkx as nx

from costgraph.algorithms.base import Cost
from costgraph.algorithms.spf import shortest_path
from costgraph.config import GRAPH_CONFIG, GraphConfig
from costgraph.diagnostics import DiagnosticKind, DiagnosticSink

NodeID = Hashable
LinkMap = Mapping[NodeID, Cost]
GraphMapping = Mapping[NodeID, Optional[LinkMap]]

#: Edge attribute holding the cost of a link.
COST_ATTR = "cost"


def _check_cost(node_id: NodeID, neighbor: NodeID, cost: Any) -> None:
    if isinstance(cost, bool) or not isinstance(cost, Real):
        raise ValueError(
            f"Cost of link '{node_id}' -> '{neighbor}' must be a number, got {cost!r}."
        )
    if math.isnan(cost) or cost < 0:
        raise ValueError(
            f"Cost of link '{node_id}' -> '{neighbor}' must be non-negative, got {cost!r}."
        )


class CostGraph(nx.DiGraph):
    """A directed graph whose edges each carry a single ``cost``.

    Attributes:
        diagnostics: Sink receiving non-fatal topology conflicts.
        config: Defaults for auto-creation and strictness.
    """

    def __init__(
        self,
        graph_data: Optional[GraphMapping] = None,
        diagnostics: Optional[DiagnosticSink] = None,
        config: Optional[GraphConfig] = None,
    ) -> None:
        """Create an empty graph, or bulk-load one from a nested mapping.

        Args:
            graph_data: Optional ``{node: {neighbor: cost}}`` mapping.
            diagnostics: Sink for conflicts; a private one is created if omitted.
            config: Behaviour defaults; ``GRAPH_CONFIG`` if omitted.
        """
        super().__init__()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticSink()
        self.config = config if config is not None else GRAPH_CONFIG
        if graph_data is not None:
            self.build_from_mapping(graph_data)

    def _conflict(self, kind: DiagnosticKind, node_id: NodeID, message: str) -> None:
        if self.config.strict:
            raise ValueError(message)
        self.diagnostics.report(kind, node_id, message)

    #
    # Mutation
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a node with no outgoing links.

        An existing node is left untouched and a ``NODE_EXISTS`` conflict is
        reported.

        Args:
            node_for_adding: The node identifier.
            **attr: Node attributes, passed to networkx.
        """
        if node_for_adding in self._adj:
            self._conflict(
                DiagnosticKind.NODE_EXISTS,
                node_for_adding,
                f"Node '{node_for_adding}' already exists in this graph.",
            )
            return
        super().add_node(node_for_adding, **attr)

    def add_links(
        self,
        node_id: NodeID,
        links: Optional[LinkMap],
        create_if_missing: Optional[bool] = None,
    ) -> None:
        """Add or overwrite directed links ``node_id -> neighbor``.

        Missing endpoints are created when ``create_if_missing`` is true.
        Otherwise a ``NODE_NOT_FOUND`` conflict is reported and the link is
        skipped; a missing ``node_id`` skips every link of the call. No
        reverse link is ever created.

        Args:
            node_id: Source node of every link.
            links: ``{neighbor: cost}``; ``None`` is treated as empty.
            create_if_missing: Auto-create missing nodes. ``None`` uses
                ``config.create_if_missing``.

        Raises:
            ValueError: If a cost is negative or not a number. Nothing is
                mutated in that case.
        """
        links = links or {}
        for neighbor, cost in links.items():
            _check_cost(node_id, neighbor, cost)

        create = self.config.resolve_create(create_if_missing)

        if node_id not in self._adj:
            if not create:
                self._conflict(
                    DiagnosticKind.NODE_NOT_FOUND,
                    node_id,
                    f"Source node '{node_id}' does not exist.",
                )
                return
            self.add_node(node_id)

        for neighbor, cost in links.items():
            if neighbor not in self._adj:
                if not create:
                    self._conflict(
                        DiagnosticKind.NODE_NOT_FOUND,
                        neighbor,
                        f"Target node '{neighbor}' does not exist.",
                    )
                    continue
                self.add_node(neighbor)
            super().add_edge(node_id, neighbor, **{COST_ATTR: cost})

    def add_edge(self, u_of_edge: NodeID, v_of_edge: NodeID, **attr: Any) -> None:
        """Add a single link ``u_of_edge -> v_of_edge`` through ``add_links``.

        The same create-if-missing rule and conflict reporting apply, so a
        missing endpoint is only created when ``config.create_if_missing`` is
        set.

        Args:
            u_of_edge: Source node.
            v_of_edge: Target node.
            **attr: Must be exactly ``cost=<number>``.

        Raises:
            ValueError: If ``cost`` is missing or invalid, or other attributes
                are given.
        """
        if set(attr) != {COST_ATTR}:
            raise ValueError(
                f"Link '{u_of_edge}' -> '{v_of_edge}' takes exactly one "
                f"'{COST_ATTR}' attribute, got {sorted(attr)}."
            )
        self.add_links(u_of_edge, {v_of_edge: attr[COST_ATTR]})

    def add_edges_from(self, ebunch_to_add: Iterable[tuple], **attr: Any) -> None:
        """Add links from ``(u, v)`` or ``(u, v, data)`` tuples via ``add_edge``."""
        for edge in ebunch_to_add:
            if len(edge) == 3:
                u, v, data = edge
            elif len(edge) == 2:
                u, v = edge
                data = {}
            else:
                raise nx.NetworkXError(f"Edge tuple {edge} must be a 2-tuple or 3-tuple.")
            self.add_edge(u, v, **{**attr, **data})

    def build_from_mapping(self, graph_data: GraphMapping) -> None:
        """Bulk-load ``{node: {neighbor: cost}}``, creating endpoints as needed."""
        create = self.config.bulk_create_if_missing
        for node_id, links in graph_data.items():
            self.add_links(node_id, links, create_if_missing=create)

    #
    # Queries
    #
    def edges_of(self, node_id: NodeID) -> Iterator[NodeID]:
        """Yield the neighbors of ``node_id`` in insertion order.

        An unknown node reports ``NODE_NOT_FOUND`` and yields nothing.
        """
        if node_id not in self._adj:
            self._conflict(
                DiagnosticKind.NODE_NOT_FOUND,
                node_id,
                f"Node '{node_id}' does not exist.",
            )
            return
        yield from self._adj[node_id]

    def edge_cost(self, node_id: NodeID, neighbor: NodeID) -> Cost:
        """Return the cost of ``node_id -> neighbor``.

        Raises:
            KeyError: If the graph has no such link.
        """
        try:
            return self._adj[node_id][neighbor][COST_ATTR]
        except KeyError:
            raise KeyError(f"No link '{node_id}' -> '{neighbor}' in this graph.") from None

    def to_mapping(self) -> Dict[NodeID, Dict[NodeID, Cost]]:
        """Export the graph as ``{node: {neighbor: cost}}``."""
        return {
            node_id: {nbr: attrs[COST_ATTR] for nbr, attrs in nbrs.items()}
            for node_id, nbrs in self._adj.items()
        }

    #
    # Search
    #
    def shortest_path(
        self, start: NodeID, end: NodeID, multi_path: bool = False
    ) -> Tuple[Cost, List[List[NodeID]]]:
        """Return ``(cost, paths)`` of the cheapest route(s) ``start -> end``.

        See ``costgraph.algorithms.spf.shortest_path``.
        """
        return shortest_path(self, start, end, multi_path=multi_path)
