"""Shortest-path-first (SPF) search over a ``CostGraph``.

Implements the Dijkstra-style relaxation loop with tie accumulation: every
predecessor that reaches a node at its minimal cost is kept, so the search can
report one cheapest path or all of them.

Notes:
    The next node to settle is the unsettled node with the smallest known
    cost. Among equal costs the node that entered the relaxation table first
    wins. A heap keyed by ``(cost, first-insertion index)`` gives exactly that
    order without scanning the table.

    The target node is never expanded. Once it is settled the loop stops, and
    its origin list already holds every equal-cost predecessor because all
    cheaper nodes were settled before it.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

import networkx as nx

from costgraph.algorithms.base import (
    Cost,
    NodeID,
    RelaxationTable,
    SearchState,
    TableEntry,
)
from costgraph.algorithms.paths import reconstruct_paths
from costgraph.logging import get_logger

if TYPE_CHECKING:
    from costgraph.graph.cost_graph import CostGraph

logger = get_logger(__name__)

HeapItem = Tuple[Cost, int, NodeID]


def _record(
    table: RelaxationTable,
    node_id: NodeID,
    origin: NodeID,
    cost: Cost,
    step: int,
) -> bool:
    """Apply the tie rule for reaching ``node_id`` from ``origin`` at ``cost``.

    Returns:
        True if ``cost`` became the node's new best cost.
    """
    entry = table.get(node_id)
    if entry is None or entry.cost > cost:
        # Replacing keeps the key's position, so first-insertion order holds.
        table[node_id] = TableEntry(cost=cost, origins=[origin], steps=[step])
        return True
    if entry.cost == cost:
        entry.origins.append(origin)
        entry.steps.append(step)
    return False


def _pop_min(
    min_pq: List[HeapItem], table: RelaxationTable, visited: Set[NodeID]
) -> Optional[Tuple[NodeID, Cost]]:
    """Pop the cheapest unsettled node, skipping stale heap items."""
    while min_pq:
        cost, _seq, node_id = heappop(min_pq)
        if node_id in visited or cost > table[node_id].cost:
            continue
        return node_id, cost
    return None


def relax(
    graph: CostGraph,
    start: NodeID,
    end: Optional[NodeID] = None,
) -> SearchState:
    """Run the relaxation loop from ``start``.

    Args:
        graph: Graph to search. It is only read, through ``edges_of`` and
            ``edge_cost``.
        start: Start node.
        end: Target node. The loop stops as soon as it is settled. With
            ``None`` the loop runs until every reachable node is settled.

    Returns:
        SearchState with the relaxation table and settle order.

    Raises:
        networkx.NodeNotFound: If ``start`` or ``end`` is not in the graph.
        networkx.NetworkXNoPath: If ``end`` is not reachable from ``start``.
    """
    if start not in graph:
        raise nx.NodeNotFound(f"Start node '{start}' is not in the graph.")
    if end is not None and end not in graph:
        raise nx.NodeNotFound(f"End node '{end}' is not in the graph.")

    table: RelaxationTable = {}
    first_seen: Dict[NodeID, int] = {}
    min_pq: List[HeapItem] = []
    visited: Set[NodeID] = set()
    settled: List[NodeID] = []

    node_current: NodeID = start
    current_cost: Cost = 0
    step = 0

    while True:
        visited.add(node_current)
        settled.append(node_current)
        if node_current == end:
            break

        for node_id in graph.edges_of(node_current):
            if node_id in visited:
                continue
            new_cost = current_cost + graph.edge_cost(node_current, node_id)
            if _record(table, node_id, node_current, new_cost, step):
                seq = first_seen.setdefault(node_id, len(first_seen))
                heappush(min_pq, (new_cost, seq, node_id))
        step += 1

        selected = _pop_min(min_pq, table, visited)
        if selected is None:
            if end is None:
                break
            raise nx.NetworkXNoPath(f"No path from '{start}' to '{end}'.")
        node_current, current_cost = selected

    logger.debug(
        "SPF from %r settled %d node(s) in %d step(s)", start, len(settled), step
    )
    return SearchState(
        start=start,
        end=end,
        table=table,
        settled=settled,
        end_cost=current_cost if end is not None else None,
    )


def shortest_path(
    graph: CostGraph,
    start: NodeID,
    end: NodeID,
    multi_path: bool = False,
) -> Tuple[Cost, List[List[NodeID]]]:
    """Compute the minimum cost from ``start`` to ``end`` and the path(s) achieving it.

    Args:
        graph: Graph to search.
        start: Start node.
        end: End node.
        multi_path: If True, return every path tied for the minimum cost.
            If False, return only the first one found.

    Returns:
        ``(cost, paths)``. ``cost`` is 0 when ``start == end``. ``paths`` is a
        non-empty list of node lists, each running from ``start`` to ``end``.

    Raises:
        networkx.NodeNotFound: If ``start`` or ``end`` is not in the graph.
        networkx.NetworkXNoPath: If ``end`` is not reachable from ``start``.
    """
    logger.debug("Shortest path %r -> %r (multi_path=%s)", start, end, multi_path)
    state = relax(graph, start, end)
    paths = reconstruct_paths(state.table, start, end, multi_path)
    return state.costs()[end], paths
