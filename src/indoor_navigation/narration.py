"""Turn-by-turn text for routed paths."""

from __future__ import annotations

from dataclasses import dataclass
from math import floor
from typing import Mapping, Optional, Sequence

from .building import Node, NodeKind
from .config import RoutingConfig
from .weights import planar_distance


_DEFAULT_ROUTING = RoutingConfig()


@dataclass(frozen=True)
class Step:
    """One instruction, tied to the 1-based path segment it describes."""

    segment_index: int
    text: str

    def to_dict(self) -> dict[str, int | str]:
        return {"segment_index": self.segment_index, "text": self.text}


def is_vertical_segment(a: Node, b: Node) -> bool:
    return (a.is_vertical_link or b.is_vertical_link) and a.floor != b.floor


def walking_steps(distance: float, step_length: float) -> int:
    # Half-up rounding; round() would send 2.5 to 2.
    return max(1, int(floor(distance / step_length + 0.5)))


def describe_segment(a: Node, b: Node, config: Optional[RoutingConfig] = None) -> str:
    cfg = config or _DEFAULT_ROUTING
    if is_vertical_segment(a, b):
        via = "lift" if NodeKind.LIFT in (a.kind, b.kind) else "stairs"
        direction = "up" if b.floor > a.floor else "down"
        return f"Take the {via} {direction} to Floor {b.floor}"
    count = walking_steps(planar_distance(a, b), cfg.step_length)
    return f"Go {count} steps straight"


def build_steps(
    path: Sequence[str],
    nodes_by_id: Mapping[str, Node],
    config: Optional[RoutingConfig] = None,
) -> list[Step]:
    """Return one step per traversed segment of `path`."""
    steps: list[Step] = []
    for i in range(1, len(path)):
        a = nodes_by_id[path[i - 1]]
        b = nodes_by_id[path[i]]
        steps.append(Step(segment_index=i, text=describe_segment(a, b, config)))
    return steps
