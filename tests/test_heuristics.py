"""Unit tests for A* heuristic helpers."""

import math

import pytest

from graph import Graph, Node
from graph.heuristics import HEURISTICS, assign_heuristics, euclidean, manhattan, octile, zero


@pytest.fixture
def a() -> Node:
    return Node("a", x=0.0, y=0.0)


@pytest.fixture
def b() -> Node:
    return Node("b", x=3.0, y=4.0)


class TestEstimates:

    def test_manhattan(self, a, b):
        assert manhattan(a, b) == 7.0

    def test_euclidean(self, a, b):
        assert euclidean(a, b) == 5.0

    def test_octile(self, a, b):
        assert octile(a, b) == pytest.approx(4 + (math.sqrt(2) - 1) * 3)

    def test_zero(self, a, b):
        assert zero(a, b) == 0.0

    def test_registry_names(self):
        assert set(HEURISTICS) == {"manhattan", "euclidean", "octile", "zero"}


class TestAssign:

    def test_assign_fills_every_node(self):
        g = Graph()
        g.create_node("a", x=0, y=0)
        g.create_node("b", x=3, y=4)
        assert assign_heuristics(g, "b", "euclidean") is True
        assert g.find_node("a").heuristic == 5.0
        assert g.find_node("b").heuristic == 0.0

    def test_missing_goal_leaves_graph_untouched(self, four_cycle):
        assert assign_heuristics(four_cycle, "nope") is False
        assert all(n.heuristic is None for n in four_cycle.nodes.values())

    def test_unknown_name_raises(self, four_cycle):
        with pytest.raises(KeyError):
            assign_heuristics(four_cycle, "n0", "chebyshev")
