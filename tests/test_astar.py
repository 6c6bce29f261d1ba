"""Unit tests for A* traces."""

import pytest

from algorithms.astar import astar, MissingEndNodeError
from algorithms.step import StepType


class TestContract:

    def test_end_node_required(self, four_cycle):
        with pytest.raises(MissingEndNodeError):
            list(astar(four_cycle, "n0"))

    def test_missing_end_is_a_value_error(self):
        assert issubclass(MissingEndNodeError, ValueError)


class TestSearch:

    def test_heuristic_steers_expansion(self, diamond, summarise):
        diamond.find_node("n1").heuristic = 5
        steps = list(astar(diamond, "n0", "n3"))
        assert summarise(steps) == [
            ("visit-node", "n0"),
            ("explore-edge", "e0-1"),
            ("visit-node", "n1"),
            ("explore-edge", "e0-2"),
            ("visit-node", "n2"),
            ("complete-node", "n0"),
            ("visit-node", "n2"),
            ("explore-edge", "e0-2"),
            ("explore-edge", "e2-3"),
            ("visit-node", "n3"),
            ("complete-node", "n2"),
            ("visit-node", "n3"),
            ("complete-node", "n3"),
        ]
        assert steps[0].description == "Expanding node n0 (f=0.00)"
        assert steps[2].description == "Update n1: g=1.00, f=6.00"
        assert steps[-1].description == "Goal n3 reached! A* complete."

    def test_ties_go_to_first_inserted(self, diamond):
        steps = list(astar(diamond, "n0", "n3"))
        assert steps[6].type is StepType.VISIT_NODE
        assert steps[6].node_id == "n1"

    def test_start_is_goal(self, four_cycle, summarise):
        assert summarise(astar(four_cycle, "n0", "n0")) == [
            ("visit-node", "n0"),
            ("complete-node", "n0"),
        ]

    def test_unreachable_goal_drains_open_set(self, isolated, summarise):
        assert summarise(astar(isolated, "n0", "n2")) == [
            ("visit-node", "n0"),
            ("complete-node", "n0"),
        ]
