"""Public programmatic API for indoor route planning."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .artifacts import RouteFrame, RoutePlan
from .building import Building
from .config import NavigationConfig, RoutingConfig
from .narration import build_steps
from .routing import find_path
from .sampler import PathSampler
from .schema import parse_building_file
from .validation import validate_route


logger = logging.getLogger(__name__)


def load_building(path: Path) -> Building:
    """Load a building description from a local JSON file."""
    return parse_building_file(path)


def default_endpoints(building: Building) -> tuple[str, str]:
    """First and second room ids, or empty strings when missing."""
    rooms = building.rooms()
    start = rooms[0].node_id if rooms else ""
    goal = rooms[1].node_id if len(rooms) > 1 else ""
    return start, goal


def plan_route(
    building: Building,
    start: str,
    goal: str,
    accessible: bool = False,
    config: Optional[RoutingConfig] = None,
) -> RoutePlan:
    """Compute path, length and turn-by-turn steps between two node ids."""
    path = find_path(building, start, goal, accessible=accessible, config=config)
    nodes = building.nodes_by_id
    sampler = PathSampler(path, nodes, config)
    floors: list[int] = []
    for node_id in path:
        floor = nodes[node_id].floor
        if not floors or floors[-1] != floor:
            floors.append(floor)
    warnings = validate_route(building, path, accessible=accessible)
    if not path:
        warnings.append(f"No route found from {start!r} to {goal!r}.")
    return RoutePlan(
        start=start,
        goal=goal,
        accessible=accessible,
        path=path,
        total_length=sampler.total_length,
        steps=build_steps(path, nodes, config),
        floors_visited=floors,
        warnings=warnings,
    )


def simulate_route(
    building: Building,
    plan: RoutePlan,
    config: Optional[NavigationConfig] = None,
) -> list[RouteFrame]:
    """
    Sample the marker at every animation tick from distance 0 to the end.

    The timeline always contains the frame at distance 0; an empty plan yields
    that single frame with no sample.
    """
    cfg = config or NavigationConfig()
    sampler = PathSampler(plan.path, building.nodes_by_id, cfg.routing)
    total = sampler.total_length
    step = cfg.animation.speed / cfg.animation.frame_rate
    frames: list[RouteFrame] = []
    frame = 0
    distance = 0.0
    while True:
        frames.append(
            RouteFrame(
                frame=frame,
                time=frame / cfg.animation.frame_rate,
                distance=distance,
                sample=sampler.sample(distance),
            )
        )
        if distance >= total:
            break
        frame += 1
        distance = min(total, frame * step)
    logger.debug("Simulated %d frame(s) over length %.1f", len(frames), total)
    return frames
