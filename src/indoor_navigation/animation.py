"""Playback state for a marker walking along the selected route."""

from __future__ import annotations

import logging
from typing import Optional

from .building import Building
from .config import NavigationConfig
from .graph import AdjacencyCache
from .narration import Step, build_steps
from .routing import find_path
from .sampler import PathSample, PathSampler


logger = logging.getLogger(__name__)


class RouteAnimator:
    """
    Route selection plus a distance clock advanced by `tick`.

    Changing the start, goal or accessibility flag replaces the path, steps and
    sampler together, pauses playback and rewinds the clock to zero.
    """

    def __init__(
        self,
        building: Building,
        config: Optional[NavigationConfig] = None,
        adjacency_cache: Optional[AdjacencyCache] = None,
    ):
        self.building = building
        self.config = config or NavigationConfig()
        self._adjacency_cache = adjacency_cache or AdjacencyCache()
        self.start: Optional[str] = None
        self.goal: Optional[str] = None
        self.accessible: bool = self.config.accessible
        self.playing = False
        self.distance = 0.0
        self.active_segment = 0
        self.current_floor = building.floors[0] if building.floors else 0
        self._path: list[str] = []
        self._steps: list[Step] = []
        self._sampler = PathSampler([], building.nodes_by_id, self.config.routing)

    @property
    def path(self) -> list[str]:
        return list(self._path)

    @property
    def steps(self) -> list[Step]:
        return list(self._steps)

    @property
    def total_length(self) -> float:
        return self._sampler.total_length

    @property
    def finished(self) -> bool:
        return len(self._path) >= 2 and self.distance >= self.total_length

    @property
    def current_sample(self) -> Optional[PathSample]:
        return self._sampler.sample(self.distance)

    def select(
        self,
        start: Optional[str] = None,
        goal: Optional[str] = None,
        accessible: Optional[bool] = None,
    ) -> list[str]:
        if start is not None:
            self.start = start
        if goal is not None:
            self.goal = goal
        if accessible is not None:
            self.accessible = bool(accessible)
        if self.start and self.goal:
            self._replace_route()
        return self.path

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def reset(self) -> None:
        self.playing = False
        self.distance = 0.0
        self.active_segment = 0

    def tick(self, dt: float) -> Optional[PathSample]:
        """Advance the clock by `dt` seconds when playing."""
        if not self.playing or len(self._path) < 2:
            return self.current_sample
        total = self.total_length
        self.distance = min(total, self.distance + self.config.animation.speed * max(0.0, dt))
        sample = self._sampler.sample(self.distance)
        if sample is not None:
            if self.config.animation.follow_floor and sample.floor != self.current_floor:
                logger.debug("Marker changed floor: %s -> %s", self.current_floor, sample.floor)
                self.current_floor = sample.floor
            self.active_segment = sample.segment_index
        if self.distance >= total:
            self.playing = False
        return sample

    def advance_frame(self) -> Optional[PathSample]:
        return self.tick(1.0 / self.config.animation.frame_rate)

    def _replace_route(self) -> None:
        routing = self.config.routing
        path = find_path(
            self.building,
            self.start or "",
            self.goal or "",
            accessible=self.accessible,
            config=routing,
            adjacency=self._adjacency_cache.get(self.building),
        )
        nodes = self.building.nodes_by_id
        sampler = PathSampler(path, nodes, routing)
        steps = build_steps(path, nodes, routing)
        self._path, self._sampler, self._steps = path, sampler, steps
        self.reset()
        logger.debug(
            "Route %s -> %s (accessible=%s): %d node(s), length %.1f",
            self.start,
            self.goal,
            self.accessible,
            len(path),
            sampler.total_length,
        )
