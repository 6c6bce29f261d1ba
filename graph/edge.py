"""
edge.py — Graph Edge
====================
Connects two nodes by id.  Carries an optional weight and a presentational
status the host flips while replaying a trace.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    Ownership is by lookup, which keeps edges serialisable.
  - `weight=None` means unit weight.  Algorithms read `cost`, never
    `weight` directly.
  - Directedness is a property of the Graph, decided at construction time,
    not of the individual edge.
  - Builders take ids from `edge_id()`, so every construction path agrees
    with every lookup.  `Graph.create_edge` needs the id spelled out.
"""

from enum import Enum
from typing import Optional, Dict, Any


# ---------------------------------------------------------------------------
# Edge Status Enum — presentational, host-owned
# ---------------------------------------------------------------------------
class EdgeStatus(Enum):
    DEFAULT  = "default"
    ACTIVE   = "active"    # the edge being examined right now
    VISITED  = "visited"


def edge_id(i: int, j: int, directed: bool = False) -> str:
    """
    Canonical edge id from endpoint indices.

    Undirected edges sort their endpoints so (2, 0) and (0, 2) both give
    "e0-2".  Directed edges keep their orientation.
    """
    if directed:
        return f"e{i}-{j}"
    return f"e{min(i, j)}-{max(i, j)}"


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id       : Unique identifier (see edge_id).
        source   : ID of the tail node.
        target   : ID of the head node.
        weight   : Numeric cost or None (unit).  May be negative.
        status   : EdgeStatus for visual encoding.
    """

    __slots__ = ("id", "source", "target", "weight", "status")

    def __init__(
        self,
        edge_id: str,
        source: str,
        target: str,
        weight: Optional[float] = None,
    ):
        self.id:     str              = edge_id
        self.source: str              = source
        self.target: str              = target
        self.weight: Optional[float]  = weight
        self.status: EdgeStatus       = EdgeStatus.DEFAULT

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def cost(self) -> float:
        return self.weight if self.weight is not None else 1

    def reset(self) -> None:
        self.status = EdgeStatus.DEFAULT

    def joins(self, node_a: str, node_b: str) -> bool:
        """True if {source, target} == {node_a, node_b}, ignoring orientation."""
        return (
            (self.source == node_a and self.target == node_b)
            or (self.source == node_b and self.target == node_a)
        )

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other.  None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        edge = cls(
            edge_id=data["id"],
            source=data["source"],
            target=data["target"],
            weight=data.get("weight"),
        )
        edge.status = EdgeStatus(data.get("status", "default"))
        return edge

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.id}: {self.source}-{self.target}, w={self.weight}, status={self.status.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
