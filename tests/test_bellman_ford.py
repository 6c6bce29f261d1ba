"""Unit tests for Bellman-Ford traces."""

from algorithms.bellman_ford import bellman_ford, NEGATIVE_CYCLE
from algorithms.step import StepType
from graph import Graph


class TestRelaxation:

    def test_directed_path(self, directed_path, summarise):
        steps = list(bellman_ford(directed_path, "n0"))
        assert summarise(steps) == [
            ("explore-edge", "e0-1"),
            ("visit-node", "n1"),
            ("explore-edge", "e1-2"),
            ("visit-node", "n2"),
        ]
        assert steps[0].description == "Relaxing edge n0 -> n1 (weight 2) in pass 1"
        assert steps[3].description == "Update distance of n2 to 5 (predecessor n1)"

    def test_edges_scanned_in_list_order_across_passes(self):
        # stored backwards, so each pass only gets one edge further
        g = Graph.from_edge_list(3, [(1, 2, 1), (0, 1, 1)], directed=True)
        steps = list(bellman_ford(g, "n0"))
        assert [s.description for s in steps if s.type is StepType.EXPLORE_EDGE] == [
            "Relaxing edge n0 -> n1 (weight 1) in pass 1",
            "Relaxing edge n1 -> n2 (weight 1) in pass 2",
        ]

    def test_no_reachable_edges_gives_empty_trace(self, isolated):
        assert list(bellman_ford(isolated, "n0")) == []

    def test_negative_edge_without_cycle(self):
        g = Graph.from_edge_list(3, [(0, 1, 4), (0, 2, 1), (2, 1, -2)], directed=True)
        steps = list(bellman_ford(g, "n0"))
        assert steps[-1].description == "Update distance of n1 to -1 (predecessor n2)"
        assert all(s.description != NEGATIVE_CYCLE for s in steps)


class TestNegativeCycle:

    def test_cycle_reported_as_final_step(self, negative_cycle, summarise):
        steps = list(bellman_ford(negative_cycle, "n0"))
        assert summarise(steps) == [
            ("explore-edge", "e0-1"),
            ("visit-node", "n1"),
            ("explore-edge", "e1-0"),
            ("visit-node", "n0"),
            ("explore-edge", "e0-1"),
        ]
        assert steps[-1].description == "negative weight cycle detected"

    def test_only_one_detection_step(self, negative_cycle):
        steps = list(bellman_ford(negative_cycle, "n0"))
        assert sum(s.description == NEGATIVE_CYCLE for s in steps) == 1
