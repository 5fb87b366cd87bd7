"""Shortest-path algorithms over ``CostGraph``.

``spf`` runs the tie-aware relaxation loop; ``paths`` turns its relaxation
table into concrete start-to-end node sequences.
"""

from costgraph.algorithms.base import Cost, SearchState, TableEntry
from costgraph.algorithms.paths import iter_paths, path_cost, reconstruct_paths
from costgraph.algorithms.spf import relax, shortest_path

__all__ = [
    "Cost",
    "SearchState",
    "TableEntry",
    "iter_paths",
    "path_cost",
    "reconstruct_paths",
    "relax",
    "shortest_path",
]
