"""Shortest-path routing over multi-floor building graphs."""

from __future__ import annotations

import heapq
from itertools import count
import logging
from typing import Optional, Sequence

from .building import Building
from .config import RoutingConfig
from .graph import build_adjacency
from .weights import edge_weight


logger = logging.getLogger(__name__)

INF = float("inf")


def find_path(
    building: Building,
    start: str,
    goal: str,
    accessible: bool = False,
    config: Optional[RoutingConfig] = None,
    adjacency: Optional[dict[str, list[str]]] = None,
) -> list[str]:
    """
    Return a minimum-cost node-id sequence from `start` to `goal`.

    Unknown ids and unreachable goals yield an empty list; `start == goal`
    yields `[start]`. A prebuilt `adjacency` (for example from an
    `AdjacencyCache`) skips rebuilding it from the edge list.
    """
    nodes = building.nodes_by_id
    if start not in nodes or goal not in nodes:
        logger.warning(
            "Unknown route endpoint(s) start=%r goal=%r; returning empty path.",
            start,
            goal,
        )
        return []
    if start == goal:
        return [start]

    adj = adjacency if adjacency is not None else build_adjacency(building)

    dist: dict[str, float] = {node_id: INF for node_id in nodes}
    prev: dict[str, str] = {}
    finalized: set[str] = set()
    dist[start] = 0.0

    # The counter keeps heap ordering deterministic for equal distances.
    tie = count()
    pq: list[tuple[float, int, str]] = [(0.0, next(tie), start)]

    while pq:
        d, _, u = heapq.heappop(pq)
        if u in finalized or d > dist[u]:
            continue
        finalized.add(u)
        if u == goal:
            break
        a = nodes[u]
        for v in adj.get(u, []):
            if v in finalized or v not in nodes:
                continue
            alt = d + edge_weight(a, nodes[v], accessible, config)
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(pq, (alt, next(tie), v))

    if goal not in finalized:
        logger.info("No route from %s to %s.", start, goal)
        return []
    return _reconstruct(prev, start, goal)


def _reconstruct(prev: dict[str, str], start: str, goal: str) -> list[str]:
    path: list[str] = []
    seen: set[str] = set()
    cur: Optional[str] = goal
    while cur is not None and cur not in seen:
        seen.add(cur)
        path.append(cur)
        if cur == start:
            path.reverse()
            return path
        cur = prev.get(cur)
    logger.warning(
        "Predecessor chain from %s did not reach %s; returning empty path.", goal, start
    )
    return []


def path_cost(
    building: Building,
    path: Sequence[str],
    accessible: bool = False,
    config: Optional[RoutingConfig] = None,
) -> float:
    """Sum of edge weights along `path`; infinite if a node id is unknown."""
    nodes = building.nodes_by_id
    total = 0.0
    for a_id, b_id in zip(path[:-1], path[1:]):
        a = nodes.get(a_id)
        b = nodes.get(b_id)
        if a is None or b is None:
            return INF
        total += edge_weight(a, b, accessible, config)
    return total
