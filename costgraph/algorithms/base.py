"""Types shared by the shortest-path algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Union

#: Represents numeric cost of a link or a path.
Cost = Union[int, float]

NodeID = Hashable


@dataclass
class TableEntry:
    """Best known way to reach one node during a search.

    Attributes:
        cost: Lowest total cost found so far from the start node.
        origins: Every predecessor reaching the node at ``cost``, in the order
            they were found.
        steps: Relaxation round at which each origin was recorded, parallel
            to ``origins``.
    """

    cost: Cost
    origins: List[NodeID] = field(default_factory=list)
    steps: List[int] = field(default_factory=list)


#: Node -> best known entry. Insertion order is the order nodes were reached.
RelaxationTable = Dict[NodeID, TableEntry]


@dataclass
class SearchState:
    """Outcome of running the relaxation loop from ``start``.

    Attributes:
        start: Node the search started from.
        end: Target node, or None for an exhaustive single-source search.
        table: Relaxation table; the start node has no entry.
        settled: Nodes in the order their cost became final, start first.
        end_cost: Final cost of ``end``; None when no target was given.
    """

    start: NodeID
    end: Optional[NodeID]
    table: RelaxationTable
    settled: List[NodeID]
    end_cost: Optional[Cost] = None

    def costs(self) -> Dict[NodeID, Cost]:
        """Return final costs of every settled node."""
        result: Dict[NodeID, Cost] = {}
        for node in self.settled:
            result[node] = 0 if node == self.start else self.table[node].cost
        return result
