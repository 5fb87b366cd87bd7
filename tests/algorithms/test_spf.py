import networkx as nx
import pytest

from costgraph.algorithms.base import TableEntry
from costgraph.algorithms.spf import relax, shortest_path
from costgraph.graph.cost_graph import CostGraph


class TestShortestPath:
    def test_shortcut_is_cheaper_than_direct_link(self, shortcut1):
        assert shortest_path(shortcut1, "A", "C") == (2, [["A", "B", "C"]])

    def test_method_delegates_to_engine(self, shortcut1):
        assert shortcut1.shortest_path("A", "C") == shortest_path(shortcut1, "A", "C")

    def test_tie_single_path(self, square1):
        cost, paths = shortest_path(square1, "A", "D")
        assert cost == 2
        assert paths == [["A", "B", "D"]]

    def test_tie_multi_path(self, square1):
        cost, paths = shortest_path(square1, "A", "D", multi_path=True)
        assert cost == 2
        assert paths == [["A", "B", "D"], ["A", "C", "D"]]

    def test_cross_link_does_not_add_paths(self, rhombus1):
        cost, paths = shortest_path(rhombus1, "A", "D", multi_path=True)
        assert cost == 2
        assert paths == [["A", "B", "D"], ["A", "C", "D"]]

    def test_ties_multiply_across_levels(self, ladder1):
        cost, paths = shortest_path(ladder1, "A", "G", multi_path=True)
        assert cost == 4
        assert paths == [
            ["A", "B", "D", "E", "G"],
            ["A", "C", "D", "E", "G"],
            ["A", "B", "D", "F", "G"],
            ["A", "C", "D", "F", "G"],
        ]

    def test_ties_single_path_follows_first_origins(self, ladder1):
        assert shortest_path(ladder1, "A", "G") == (4, [["A", "B", "D", "E", "G"]])

    def test_integer_node_ids(self, classic1):
        assert shortest_path(classic1, 1, 5) == (20, [[1, 3, 6, 5]])
        assert shortest_path(classic1, 1, 4) == (20, [[1, 3, 4]])

    def test_float_costs(self):
        graph = CostGraph({"A": {"B": 0.5}, "B": {"C": 0.25}})
        assert shortest_path(graph, "A", "C") == (0.75, [["A", "B", "C"]])

    def test_start_equals_end(self, shortcut1):
        assert shortest_path(shortcut1, "A", "A") == (0, [["A"]])
        assert shortest_path(shortcut1, "C", "C", multi_path=True) == (0, [["C"]])

    def test_disconnected_raises_no_path(self, disconnected1):
        with pytest.raises(nx.NetworkXNoPath):
            shortest_path(disconnected1, "A", "B")

    def test_wrong_direction_raises_no_path(self, shortcut1):
        with pytest.raises(nx.NetworkXNoPath):
            shortest_path(shortcut1, "C", "A")

    def test_unknown_nodes(self, shortcut1):
        with pytest.raises(nx.NodeNotFound):
            shortest_path(shortcut1, "X", "A")
        with pytest.raises(nx.NodeNotFound):
            shortest_path(shortcut1, "A", "X")

    def test_self_loops_are_ignored(self):
        graph = CostGraph({"A": {"A": 0, "B": 1}, "B": {"B": 0, "C": 1}, "C": {}})
        assert shortest_path(graph, "A", "C", multi_path=True) == (2, [["A", "B", "C"]])

    def test_zero_cost_links(self):
        graph = CostGraph({"A": {"B": 0}, "B": {"C": 0}, "C": {}})
        assert shortest_path(graph, "A", "C") == (0, [["A", "B", "C"]])

    def test_graph_not_mutated(self, square1):
        before = square1.to_mapping()
        shortest_path(square1, "A", "D", multi_path=True)
        assert square1.to_mapping() == before
        assert len(square1.diagnostics) == 0

    def test_repeated_calls_are_identical(self, ladder1):
        first = shortest_path(ladder1, "A", "G", multi_path=True)
        second = shortest_path(ladder1, "A", "G", multi_path=True)
        assert first == second


class TestRelax:
    def test_table_records_origins_and_steps(self, square1):
        state = relax(square1, "A", "D")
        assert state.end_cost == 2
        assert state.table == {
            "B": TableEntry(cost=1, origins=["A"], steps=[0]),
            "C": TableEntry(cost=1, origins=["A"], steps=[0]),
            "D": TableEntry(cost=2, origins=["B", "C"], steps=[1, 2]),
        }
        assert state.settled == ["A", "B", "C", "D"]

    def test_cheaper_route_replaces_entry(self, shortcut1):
        state = relax(shortcut1, "A", "C")
        assert state.table["C"] == TableEntry(cost=2, origins=["B"], steps=[1])

    def test_start_has_no_table_entry(self, shortcut1):
        state = relax(shortcut1, "A", "C")
        assert "A" not in state.table

    def test_end_is_not_expanded(self):
        graph = CostGraph({"A": {"B": 1}, "B": {"C": 1}, "C": {}})
        state = relax(graph, "A", "B")
        assert "C" not in state.table
        assert state.settled == ["A", "B"]

    def test_single_source_mode(self, shortcut1):
        state = relax(shortcut1, "A")
        assert state.end is None
        assert state.end_cost is None
        assert state.costs() == {"A": 0, "B": 1, "C": 2}

    def test_single_source_stops_at_reachable_set(self, disconnected1):
        state = relax(disconnected1, "A")
        assert state.settled == ["A"]
        assert state.table == {}

    def test_equal_costs_settle_in_table_order(self):
        # X enters the table first at cost 3 and is lowered to 2 through Y.
        # Z has cost 2 too, but X was seen first so it settles first.
        graph = CostGraph({"S": {"X": 3, "Y": 1, "Z": 2}, "Y": {"X": 1}})
        state = relax(graph, "S")
        assert list(state.table) == ["X", "Y", "Z"]
        assert state.settled == ["S", "Y", "X", "Z"]
