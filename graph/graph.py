"""
graph.py — Graph Container & Builders
======================================
Single source of truth for the graph.  Algorithms only ever read it.

Responsibilities:
  1. Construction                           (add / create nodes & edges)
  2. Lookups & adjacency queries            (find_*, edge_between, neighbours)
  3. Builders                               (adjacency matrix, edge list, random)
  4. Serialisation round-trip               (to_dict / from_dict)
  5. Reset helper                           (wipe host status, keep structure)

Design decisions:
  - Nodes live in an insertion-ordered dict keyed by id.  That order is the
    canonical node order every algorithm iterates in.
  - Edges live in a plain list (insertion order matters, duplicates are
    kept) plus a first-wins id index for O(1) lookup.
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge)]` is
    maintained incrementally so neighbour queries are O(degree), not O(E).
  - `directed` is decided when the graph is built.  Undirected graphs see
    every edge from both ends; directed graphs only from the source.
  - Lookups never raise.  A missing id gives None and a dangling edge is
    simply not reported as a neighbour.
"""

import logging
import math
import numbers
import random
from typing import (
    Dict, List, Tuple, Optional, Sequence, Any, Union
)

import config
from graph.node import Node, node_id
from graph.edge import Edge, edge_id

logger = logging.getLogger(__name__)

EdgeSpec = Union[Tuple[int, int], Tuple[int, int, Optional[float]]]


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}, insertion ordered
        edges      : [Edge], insertion ordered
        directed   : bool – graph-level directedness
        _edge_idx  : {edge_id: Edge}  (first edge wins on duplicate ids)
        _adj       : {node_id: [(neighbour_id, Edge), …]}
    """

    def __init__(self, directed: bool = False):
        self.nodes:     Dict[str, Node] = {}
        self.edges:     List[Edge]      = []
        self.directed:  bool            = directed
        self._edge_idx: Dict[str, Edge] = {}
        self._adj:      Dict[str, List[Tuple[str, Edge]]] = {}

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        heuristic: Optional[float] = None,
    ) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id, x=x, y=y, label=label, heuristic=heuristic))

    def add_edge(self, edge: Edge) -> Edge:
        self.edges.append(edge)
        self._edge_idx.setdefault(edge.id, edge)
        # maintain adjacency
        self._adj.setdefault(edge.source, []).append((edge.target, edge))
        if not self.directed and edge.target != edge.source:
            self._adj.setdefault(edge.target, []).append((edge.source, edge))
        return edge

    def create_edge(
        self,
        eid: str,
        source: str,
        target: str,
        weight: Optional[float] = None,
    ) -> Edge:
        """Create + add an edge under an explicit id (see edge_id / connect)."""
        return self.add_edge(Edge(eid, source, target, weight=weight))

    # ==================================================================
    # LOOKUPS
    # ==================================================================
    def find_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def find_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edge_idx.get(edge_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def edge_between(self, a: str, b: str) -> Optional[Edge]:
        """
        First edge (insertion order) whose unordered endpoint pair is {a, b}.
        With parallel edges the answer is whichever was added first.
        """
        for edge in self.edges:
            if edge.joins(a, b):
                return edge
        return None

    def directed_edge(self, source: str, target: str) -> Optional[Edge]:
        """First edge running exactly source → target."""
        for edge in self.edges:
            if edge.source == source and edge.target == target:
                return edge
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def adjacent_node_ids(self, node_id: str) -> List[str]:
        """Neighbour ids in edge insertion order (may repeat on parallel edges)."""
        return [nbr for nbr, _ in self._adj.get(node_id, [])]

    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """
        Return [(neighbour_id, edge)] for every edge leaving node_id.
        Edges whose far end is not a known node are skipped.
        """
        result = []
        for nbr_id, edge in self._adj.get(node_id, []):
            if nbr_id not in self.nodes:
                logger.debug("edge %s points at unknown node %s, skipped", edge.id, nbr_id)
                continue
            result.append((nbr_id, edge))
        return result

    # ==================================================================
    # RESET (keep structure, wipe host status)
    # ==================================================================
    def reset_status(self) -> None:
        for node in self.nodes.values():
            node.reset()
        for edge in self.edges:
            edge.reset()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "directed": self.directed,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        g = cls(directed=data.get("directed", False))
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # BUILDERS — Factory class-methods
    # ==================================================================
    @classmethod
    def with_nodes(cls, count: int, directed: bool = False) -> "Graph":
        """`count` canonically named nodes laid out on a circle, no edges."""
        g = cls(directed=directed)
        for i in range(count):
            angle = 2 * math.pi * i / count
            x = config.LAYOUT_CENTER_X + config.LAYOUT_RADIUS * math.cos(angle)
            y = config.LAYOUT_CENTER_Y + config.LAYOUT_RADIUS * math.sin(angle)
            g.create_node(node_id(i), x=x, y=y, label=str(i))
        return g

    def connect(self, i: int, j: int, weight: Optional[float] = None) -> Edge:
        """Add an edge between node indices i and j with its canonical id."""
        return self.add_edge(
            Edge(edge_id(i, j, self.directed), node_id(i), node_id(j), weight=weight)
        )

    # ---------- Adjacency Matrix ----------
    @classmethod
    def from_adjacency_matrix(
        cls,
        matrix: Sequence[Sequence[float]],
        directed: bool = False,
    ) -> "Graph":
        """
        Any entry > 0 is an edge with that weight.

        Undirected graphs only read the upper triangle (i <= j) so each
        pair yields a single edge.
        """
        size = len(matrix)
        g = cls.with_nodes(size, directed=directed)
        for i in range(size):
            for j in range(len(matrix[i])):
                if j >= size or matrix[i][j] <= 0:
                    continue
                if directed or i <= j:
                    g.connect(i, j, weight=matrix[i][j])
        return g

    # ---------- Edge List ----------
    @classmethod
    def from_edge_list(
        cls,
        node_count: int,
        edges: Sequence[EdgeSpec],
        directed: bool = False,
    ) -> "Graph":
        """
        Build from (i, j) or (i, j, weight) index tuples.

        Example:
            Graph.from_edge_list(3, [(0, 1, 2), (1, 2, 3)])

        Raises:
            TypeError: a weight is present but not a number.
        """
        g = cls.with_nodes(node_count, directed=directed)
        for spec in edges:
            i, j = int(spec[0]), int(spec[1])
            weight = spec[2] if len(spec) > 2 else None
            if weight is not None and not isinstance(weight, numbers.Real):
                raise TypeError(f"edge weight must be a number, got {weight!r}")
            g.connect(i, j, weight=weight)
        return g

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = config.DEFAULT_NODE_COUNT,
        edge_probability: float = config.DEFAULT_EDGE_PROBABILITY,
        weighted: bool = True,
        weight_range: Tuple[int, int] = config.DEFAULT_WEIGHT_RANGE,
        seed: Optional[int] = None,
        directed: bool = False,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph.
        Each possible edge is included with probability `edge_probability`.
        The same seed always gives the same graph.
        """
        rng = random.Random(seed)
        g = cls.with_nodes(num_nodes, directed=directed)

        for i in range(num_nodes):
            for j in range(num_nodes) if directed else range(i + 1, num_nodes):
                if i == j:
                    continue
                if rng.random() < edge_probability:
                    w = rng.randint(*weight_range) if weighted else None
                    g.connect(i, j, weight=w)

        logger.debug("generated random graph: %d nodes, %d edges", num_nodes, len(g.edges))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.cost < 0 for e in self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, directed={self.directed})"
