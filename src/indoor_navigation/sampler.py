"""Distance-parameterized sampling along a routed path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

import numpy as np

from .building import Node
from .config import RoutingConfig
from .weights import segment_length


@dataclass(frozen=True)
class PathSample:
    """Marker state at a traveled distance along a path."""

    x: float
    y: float
    floor: int
    segment_index: int

    def to_dict(self) -> dict[str, float | int]:
        return {
            "x": self.x,
            "y": self.y,
            "floor": self.floor,
            "segment_index": self.segment_index,
        }


class PathSampler:
    """
    Cumulative-length lookup for one path.

    Segment indices are 1-based: segment `i` joins `path[i - 1]` and
    `path[i]`. Same-floor segments interpolate linearly; a floor change keeps
    the marker at the destination landing while its length is consumed.
    """

    def __init__(
        self,
        path: Sequence[str],
        nodes_by_id: Mapping[str, Node],
        config: Optional[RoutingConfig] = None,
    ):
        self.path = list(path)
        self.nodes = [nodes_by_id[node_id] for node_id in self.path]
        self.points = np.array([[n.x, n.y] for n in self.nodes], dtype=float).reshape(-1, 2)
        self.floors = [int(n.floor) for n in self.nodes]
        self.segment_lengths = np.array(
            [segment_length(a, b, config) for a, b in zip(self.nodes[:-1], self.nodes[1:])],
            dtype=float,
        )
        self.cumulative = np.cumsum(self.segment_lengths)

    @property
    def total_length(self) -> float:
        if self.cumulative.size == 0:
            return 0.0
        return float(self.cumulative[-1])

    @property
    def num_segments(self) -> int:
        return max(0, len(self.nodes) - 1)

    def sample(self, distance: float) -> Optional[PathSample]:
        if not self.nodes:
            return None
        if len(self.nodes) == 1:
            return self._node_sample(0, segment_index=0)

        seg = int(np.searchsorted(self.cumulative, float(distance), side="left"))
        if seg >= self.num_segments or distance >= self.total_length:
            return self._node_sample(len(self.nodes) - 1, segment_index=self.num_segments)

        a_floor = self.floors[seg]
        b_floor = self.floors[seg + 1]
        if a_floor != b_floor:
            return self._node_sample(seg + 1, segment_index=seg + 1)

        length = float(self.segment_lengths[seg])
        seg_start = float(self.cumulative[seg]) - length
        if length > 0:
            frac = float(np.clip((float(distance) - seg_start) / length, 0.0, 1.0))
        else:
            frac = 0.0
        p = self.points[seg] + (self.points[seg + 1] - self.points[seg]) * frac
        return PathSample(
            x=float(p[0]),
            y=float(p[1]),
            floor=a_floor,
            segment_index=seg + 1,
        )

    def sample_many(self, distances: Iterable[float]) -> list[Optional[PathSample]]:
        return [self.sample(d) for d in distances]

    def _node_sample(self, idx: int, segment_index: int) -> PathSample:
        return PathSample(
            x=float(self.points[idx][0]),
            y=float(self.points[idx][1]),
            floor=self.floors[idx],
            segment_index=segment_index,
        )


def path_length(
    path: Sequence[str],
    nodes_by_id: Mapping[str, Node],
    config: Optional[RoutingConfig] = None,
) -> float:
    """Total length of `path`; zero for fewer than two nodes."""
    return PathSampler(path, nodes_by_id, config).total_length


def position_along(
    path: Sequence[str],
    nodes_by_id: Mapping[str, Node],
    distance: float,
    config: Optional[RoutingConfig] = None,
) -> Optional[PathSample]:
    """Sample `path` at `distance`; `None` for an empty path."""
    return PathSampler(path, nodes_by_id, config).sample(distance)
