"""Route post-planning validation helpers."""

from __future__ import annotations

from typing import Sequence

from .building import Building, NodeKind
from .graph import build_adjacency


def validate_route(
    building: Building,
    path: Sequence[str],
    accessible: bool = False,
) -> list[str]:
    """
    Check a path against the building graph and return warning strings.

    The function is non-throwing and intended for debug/QA hardening.
    """
    warnings: list[str] = []
    if not path:
        return warnings

    nodes = building.nodes_by_id
    unknown = [node_id for node_id in path if node_id not in nodes]
    if unknown:
        warnings.append(f"{len(unknown)} path node id(s) not found in building: {unknown}.")
        return warnings

    adjacency = build_adjacency(building)
    disconnected = 0
    stair_segments = 0
    for a_id, b_id in zip(path[:-1], path[1:]):
        if b_id not in adjacency.get(a_id, []):
            disconnected += 1
        if NodeKind.STAIR in (nodes[a_id].kind, nodes[b_id].kind):
            stair_segments += 1

    if disconnected:
        warnings.append(f"{disconnected} path segment(s) have no connecting edge.")
    if accessible and stair_segments:
        warnings.append(
            f"Accessible route uses stairs on {stair_segments} segment(s): no step-free alternative exists."
        )
    return warnings
