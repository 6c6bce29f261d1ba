"""
Pytest configuration and shared fixtures.

Graph fixtures are small enough that every expected trace in the suite
can be worked out by hand.
"""

import pytest

from graph import Graph


@pytest.fixture
def four_cycle() -> Graph:
    """Undirected unit-weight cycle n0-n1-n2-n3-n0."""
    return Graph.from_edge_list(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def directed_path() -> Graph:
    """n0 -> n1 (w=2), n1 -> n2 (w=3)."""
    return Graph.from_edge_list(3, [(0, 1, 2), (1, 2, 3)], directed=True)


@pytest.fixture
def undirected_path() -> Graph:
    """n0 - n1 (w=2), n1 - n2 (w=3)."""
    return Graph.from_edge_list(3, [(0, 1, 2), (1, 2, 3)])


@pytest.fixture
def diamond() -> Graph:
    """n0 fans out to n1 and n2, both lead to n3.  Unit weights."""
    return Graph.from_edge_list(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def negative_cycle() -> Graph:
    """n0 -> n1 (w=-1), n1 -> n0 (w=-1)."""
    return Graph.from_edge_list(2, [(0, 1, -1), (1, 0, -1)], directed=True)


@pytest.fixture
def isolated() -> Graph:
    """Three nodes, no edges."""
    return Graph.with_nodes(3)


@pytest.fixture
def summarise():
    """Turn a trace into (type, id) pairs for compact comparisons."""

    def _summarise(steps):
        return [(s.type.value, s.node_id or s.edge_id) for s in steps]

    return _summarise


@pytest.fixture
def dangling() -> Graph:
    """n0 - n1 plus an edge from n0 to a node that does not exist."""
    g = Graph.from_edge_list(2, [(0, 1)])
    g.create_edge("e0-ghost", "n0", "ghost", weight=1)
    return g
