"""Adjacency construction for building graphs."""

from __future__ import annotations

import logging
import weakref

from .building import Building


logger = logging.getLogger(__name__)


def build_adjacency(building: Building) -> dict[str, list[str]]:
    """
    Build an undirected adjacency mapping from the building's edge list.

    Every node id is present, isolated nodes map to an empty list. Edges with a
    missing endpoint and self-loops are skipped.
    """
    adjacency: dict[str, list[str]] = {n.node_id: [] for n in building.nodes}
    seen: set[frozenset[str]] = set()
    skipped = 0
    for u, v in building.edges:
        if u not in adjacency or v not in adjacency:
            skipped += 1
            logger.debug("Skipping edge (%s, %s): endpoint not found.", u, v)
            continue
        if u == v:
            continue
        pair = frozenset((u, v))
        if pair in seen:
            continue
        seen.add(pair)
        adjacency[u].append(v)
        adjacency[v].append(u)
    if skipped:
        logger.debug("Skipped %d edge(s) with unknown endpoints.", skipped)
    return adjacency


class AdjacencyCache:
    """Per-building adjacency cache keyed on Building identity."""

    def __init__(self) -> None:
        self._cache: "weakref.WeakKeyDictionary[Building, dict[str, list[str]]]" = (
            weakref.WeakKeyDictionary()
        )

    def get(self, building: Building) -> dict[str, list[str]]:
        cached = self._cache.get(building)
        if cached is None:
            cached = build_adjacency(building)
            self._cache[building] = cached
        return cached

    def invalidate(self, building: Building | None = None) -> None:
        if building is None:
            self._cache.clear()
            return
        self._cache.pop(building, None)

    def __len__(self) -> int:
        return len(self._cache)


def connected_components(adjacency: dict[str, list[str]]) -> list[set[str]]:
    unseen = set(adjacency.keys())
    components: list[set[str]] = []
    while unseen:
        root = min(unseen)
        stack = [root]
        comp: set[str] = set()
        while stack:
            node = stack.pop()
            if node in comp:
                continue
            comp.add(node)
            for nxt in adjacency.get(node, []):
                if nxt not in comp:
                    stack.append(nxt)
        components.append(comp)
        unseen -= comp
    return components
