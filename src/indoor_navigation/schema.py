"""Building JSON payload parsing."""

from __future__ import annotations

import json
import logging
from math import isfinite
from pathlib import Path
from typing import Any

from .building import Building, Node, NodeKind


logger = logging.getLogger(__name__)


def _expect_type(value: Any, expected: type, path: str) -> None:
    if not isinstance(value, expected):
        raise ValueError(f"Invalid `{path}`: expected {expected.__name__}, got {type(value).__name__}.")


def _parse_int_index(value: Any, path: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid `{path}`: expected integer, got bool.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and float(value).is_integer():
        return int(value)
    raise ValueError(f"Invalid `{path}`: expected integer value.")


def _parse_coord(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid `{path}`: expected number.")
    coord = float(value)
    if not isfinite(coord):
        raise ValueError(f"Invalid `{path}`: values must be finite (no NaN/Inf).")
    return coord


def _parse_node(raw: Any, path: str) -> Node:
    _expect_type(raw, dict, path)
    for key in ("id", "floor", "x", "y"):
        if key not in raw:
            raise ValueError(f"Missing required field `{path}.{key}`.")
    node_id = raw["id"]
    _expect_type(node_id, str, f"{path}.id")
    if not node_id.strip():
        raise ValueError(f"Invalid `{path}.id`: must be non-empty.")
    label = raw.get("label")
    if label is not None:
        _expect_type(label, str, f"{path}.label")
    try:
        kind = NodeKind.parse(raw.get("type", raw.get("kind", NodeKind.ROOM.value)))
    except ValueError as exc:
        raise ValueError(f"Invalid `{path}.type`: {exc}") from exc
    return Node(
        node_id=node_id,
        floor=_parse_int_index(raw["floor"], f"{path}.floor"),
        x=_parse_coord(raw["x"], f"{path}.x"),
        y=_parse_coord(raw["y"], f"{path}.y"),
        kind=kind,
        label=label,
    )


def _parse_edge(raw: Any, path: str) -> tuple[str, str]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"Invalid `{path}`: expected [u, v] node id pair.")
    u, v = raw
    _expect_type(u, str, f"{path}[0]")
    _expect_type(v, str, f"{path}[1]")
    return (u, v)


def parse_building_payload(payload: dict[str, Any]) -> Building:
    """
    Parse a building description of the form
    `{"floors": [...], "nodes": [...], "edges": [[u, v], ...]}`.

    Edges naming unknown node ids are kept and logged; routing skips them.
    """
    _expect_type(payload, dict, "building")
    if "nodes" not in payload:
        raise ValueError("Missing required field `nodes`.")

    raw_nodes = payload["nodes"]
    _expect_type(raw_nodes, list, "nodes")
    nodes: list[Node] = []
    seen_ids: set[str] = set()
    for i, raw in enumerate(raw_nodes):
        node = _parse_node(raw, f"nodes[{i}]")
        if node.node_id in seen_ids:
            raise ValueError(f"Duplicate node id: {node.node_id!r} (nodes[{i}]).")
        seen_ids.add(node.node_id)
        nodes.append(node)

    raw_edges = payload.get("edges", [])
    _expect_type(raw_edges, list, "edges")
    edges = [_parse_edge(raw, f"edges[{i}]") for i, raw in enumerate(raw_edges)]

    raw_floors = payload.get("floors")
    if raw_floors is None:
        floors = sorted({n.floor for n in nodes})
    else:
        _expect_type(raw_floors, list, "floors")
        floors = [_parse_int_index(f, f"floors[{i}]") for i, f in enumerate(raw_floors)]
        if len(set(floors)) != len(floors):
            raise ValueError("Invalid `floors`: floor numbers must be distinct.")

    building = Building(floors=tuple(floors), nodes=tuple(nodes), edges=tuple(edges))
    dangling = building.dangling_edges()
    if dangling:
        logger.warning(
            "%d edge(s) reference unknown node ids and will be ignored: %s",
            len(dangling),
            dangling[:5],
        )
    return building


def parse_building_file(path: Path) -> Building:
    if not path.exists():
        raise FileNotFoundError(f"Building file not found: {path}")
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid building JSON in {path}: {exc}") from exc
    return parse_building_payload(payload)
