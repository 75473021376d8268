"""Traversal cost model for building graph segments."""

from __future__ import annotations

from math import hypot
from typing import Optional

from .building import Node, NodeKind
from .config import RoutingConfig


_DEFAULT_ROUTING = RoutingConfig()


def planar_distance(a: Node, b: Node) -> float:
    return hypot(float(b.x) - float(a.x), float(b.y) - float(a.y))


def segment_length(a: Node, b: Node, config: Optional[RoutingConfig] = None) -> float:
    """Planar distance plus the floor change penalty when floors differ."""
    cfg = config or _DEFAULT_ROUTING
    length = planar_distance(a, b)
    if a.floor != b.floor:
        length += cfg.floor_change_penalty
    return length


def edge_weight(
    a: Node,
    b: Node,
    accessible: bool = False,
    config: Optional[RoutingConfig] = None,
) -> float:
    """
    Routing cost of the segment between two adjacent nodes.

    With `accessible` set, segments touching a stair node carry a large finite
    penalty. Stairs remain usable when no other route exists.
    """
    cfg = config or _DEFAULT_ROUTING
    weight = segment_length(a, b, cfg)
    if accessible and (a.kind is NodeKind.STAIR or b.kind is NodeKind.STAIR):
        weight += cfg.accessibility_penalty
    return weight
