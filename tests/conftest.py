"""Shared sample graphs.

Fixtures return fresh ``CostGraph`` instances so tests may mutate them.
"""

from __future__ import annotations

import pytest

from costgraph.graph.cost_graph import CostGraph


@pytest.fixture
def shortcut1() -> CostGraph:
    #      [1]      [1]
    #  A───────►B───────►C
    #  │                 ▲
    #  └─────────────────┘
    #          [4]
    return CostGraph({"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}})


@pytest.fixture
def square1() -> CostGraph:
    #      [1]      [1]
    #  A───────►B───────►D
    #  │                 ▲
    #  │  [1]       [1]  │
    #  └───────►C────────┘
    return CostGraph(
        {"A": {"B": 1, "C": 1}, "B": {"D": 1}, "C": {"D": 1}, "D": {}}
    )


@pytest.fixture
def rhombus1() -> CostGraph:
    # Square with a cross link between the middle nodes
    #        [1]
    #     ┌──────►B──────┐[1]
    #  A──┤       ▲│     ├──►D
    #     └──────►C◄─────┘[1]
    #        [1]
    return CostGraph(
        {
            "A": {"B": 1, "C": 1},
            "B": {"D": 1, "C": 1},
            "C": {"D": 1, "B": 1},
            "D": {},
        }
    )


@pytest.fixture
def ladder1() -> CostGraph:
    # Two stacked squares, every link costs 1:
    #  A -> {B, C} -> D -> {E, F} -> G
    return CostGraph(
        {
            "A": {"B": 1, "C": 1},
            "B": {"D": 1},
            "C": {"D": 1},
            "D": {"E": 1, "F": 1},
            "E": {"G": 1},
            "F": {"G": 1},
        }
    )


@pytest.fixture
def classic1() -> CostGraph:
    # Integer node IDs, directed version of the textbook Dijkstra example
    return CostGraph(
        {
            1: {2: 7, 3: 9, 6: 14},
            2: {3: 10, 4: 15},
            3: {4: 11, 6: 2},
            4: {5: 6},
            6: {5: 9},
        }
    )


@pytest.fixture
def disconnected1() -> CostGraph:
    return CostGraph({"A": {}, "B": {}})
