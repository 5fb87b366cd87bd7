"""Graph store and helpers.

This package provides the cost-carrying directed graph `CostGraph` and a
conversion module (`convert`) for moving graphs to and from NetworkX types.
"""

from costgraph.graph.cost_graph import COST_ATTR, CostGraph

__all__ = ["COST_ATTR", "CostGraph"]
