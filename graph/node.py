from enum import Enum
from typing import Optional, Dict, Any


# ---------------------------------------------------------------------------
# Node Status Enum — presentational only, the host owns every change
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    DEFAULT  = "default"   # untouched
    ACTIVE   = "active"    # the trace is looking at this node right now
    VISITED  = "visited"   # fully processed
    START    = "start"     # run origin
    END      = "end"       # run goal


def node_id(index: int) -> str:
    """Canonical node id for the node at position `index`."""
    return f"n{index}"


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Stable identity (id, label), layout position and host-owned status.

    Attributes:
        id        : Unique identifier, stable for the graph's lifetime.
        label     : Display text (defaults to the id).
        x, y      : Layout coordinates.  Only heuristics read them.
        status    : Current NodeStatus.  Algorithms never write it.
        heuristic : Estimated remaining cost to a goal, read by A*.
                    None means 0.
    """

    __slots__ = ("id", "label", "x", "y", "status", "heuristic")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        heuristic: Optional[float] = None,
    ):
        self.id: str                    = node_id
        self.label: str                 = label if label is not None else node_id
        self.x: float                   = x
        self.y: float                   = y
        self.status: NodeStatus         = NodeStatus.DEFAULT
        self.heuristic: Optional[float] = heuristic

    def reset(self) -> None:
        """Back to DEFAULT status.  Called by the host between runs."""
        self.status = NodeStatus.DEFAULT

    @property
    def h(self) -> float:
        return self.heuristic if self.heuristic is not None else 0.0

    def distance_to(self, other: "Node") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation  (for the JSON API)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":        self.id,
            "label":     self.label,
            "x":         self.x,
            "y":         self.y,
            "status":    self.status.value,
            "heuristic": self.heuristic,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        node = cls(
            node_id=data["id"],
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
            heuristic=data.get("heuristic"),
        )
        node.status = NodeStatus(data.get("status", "default"))
        return node

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, status={self.status.value}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
