"""Path reconstruction from a relaxation table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Sequence, Tuple

import networkx as nx

from costgraph.algorithms.base import Cost, NodeID, RelaxationTable

if TYPE_CHECKING:
    from costgraph.graph.cost_graph import CostGraph


def iter_paths(
    table: RelaxationTable,
    start: NodeID,
    end: NodeID,
    multi_path: bool = False,
) -> Iterator[List[NodeID]]:
    """Enumerate minimum-cost paths recorded in ``table``, start to end.

    Walks origins backwards from ``end`` with an explicit stack. Origins are
    explored in the order they were recorded, so paths come out in the same
    order as a depth-first walk over the origin lists.

    Args:
        table: Relaxation table produced by ``relax``.
        start: Start node of the search.
        end: Node to reconstruct paths to.
        multi_path: If False, only the first origin at each node is followed
            and exactly one path is yielded.

    Yields:
        Lists of node IDs from ``start`` to ``end``.

    Raises:
        networkx.NetworkXNoPath: If ``end`` was never reached.
    """
    if end != start and end not in table:
        raise nx.NetworkXNoPath(f"No path from '{start}' to '{end}'.")

    # Each frame: (node to expand, path so far from end back to that node)
    stack: List[Tuple[NodeID, List[NodeID]]] = [(end, [end])]
    while stack:
        node_id, reversed_path = stack.pop()
        if node_id == start:
            yield reversed_path[::-1]
            continue

        origins = table[node_id].origins
        if not multi_path:
            origins = origins[:1]
        # Push in reverse so the first origin is expanded first
        for origin in reversed(origins):
            stack.append((origin, reversed_path + [origin]))


def reconstruct_paths(
    table: RelaxationTable,
    start: NodeID,
    end: NodeID,
    multi_path: bool = False,
) -> List[List[NodeID]]:
    """Return the list form of ``iter_paths``."""
    return list(iter_paths(table, start, end, multi_path))


def path_cost(graph: CostGraph, path: Sequence[NodeID]) -> Cost:
    """Return the total link cost along ``path``.

    Raises:
        KeyError: If two consecutive nodes are not linked.
    """
    return sum(graph.edge_cost(u, v) for u, v in zip(path, path[1:]))
