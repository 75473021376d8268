"""Building graph contract shared by routing, sampling and narration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np


class NodeKind(str, Enum):
    ROOM = "room"
    HALLWAY = "hallway"
    STAIR = "stair"
    LIFT = "lift"

    @classmethod
    def parse(cls, value: Any) -> "NodeKind":
        """Resolve a kind string, accepting the short `hall` spelling."""
        if isinstance(value, NodeKind):
            return value
        text = str(value).strip().lower()
        if text == "hall":
            return cls.HALLWAY
        try:
            return cls(text)
        except ValueError:
            allowed = ", ".join(k.value for k in cls)
            raise ValueError(f"Unsupported node kind: {value!r}. Allowed values: {allowed}.") from None


VERTICAL_KINDS = frozenset({NodeKind.STAIR, NodeKind.LIFT})


@dataclass(frozen=True)
class Node:
    """Point in the building graph: room, hallway junction, stair or lift landing."""

    node_id: str
    floor: int
    x: float
    y: float
    kind: NodeKind = NodeKind.ROOM
    label: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", NodeKind.parse(self.kind))

    @property
    def xy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @property
    def display_name(self) -> str:
        return self.label if self.label else self.node_id

    @property
    def is_vertical_link(self) -> bool:
        return self.kind in VERTICAL_KINDS


@dataclass(frozen=True, eq=False)
class Building:
    """
    Immutable multi-floor building graph.

    Edges are unordered node-id pairs. An edge naming a node id that does not
    exist is kept as supplied; consumers skip it.
    """

    floors: tuple[int, ...]
    nodes: tuple[Node, ...]
    edges: tuple[tuple[str, str], ...] = ()
    _nodes_by_id: dict[str, Node] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "floors", tuple(int(f) for f in self.floors))
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple((str(u), str(v)) for u, v in self.edges))
        object.__setattr__(self, "_nodes_by_id", {n.node_id: n for n in self.nodes})

    @property
    def nodes_by_id(self) -> dict[str, Node]:
        return self._nodes_by_id

    def node(self, node_id: str) -> Node:
        try:
            return self._nodes_by_id[node_id]
        except KeyError:
            raise KeyError(f"Unknown node_id: {node_id}") from None

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes_by_id

    def rooms(self) -> list[Node]:
        return [n for n in self.nodes if n.kind is NodeKind.ROOM]

    def nodes_on_floor(self, floor: int) -> list[Node]:
        return [n for n in self.nodes if n.floor == floor]

    def dangling_edges(self) -> list[tuple[str, str]]:
        """Edges with at least one endpoint missing from the node set."""
        return [
            (u, v)
            for u, v in self.edges
            if u not in self._nodes_by_id or v not in self._nodes_by_id
        ]

    def to_dict(self) -> dict[str, Any]:
        nodes_payload: list[dict[str, Any]] = []
        for n in self.nodes:
            item: dict[str, Any] = {
                "id": n.node_id,
                "floor": n.floor,
                "x": float(n.x),
                "y": float(n.y),
                "type": n.kind.value,
            }
            if n.label is not None:
                item["label"] = n.label
            nodes_payload.append(item)
        return {
            "floors": list(self.floors),
            "nodes": nodes_payload,
            "edges": [[u, v] for u, v in self.edges],
        }
