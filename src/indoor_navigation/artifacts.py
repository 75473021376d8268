"""Route plan outputs and serialization helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any, Optional

from .narration import Step
from .sampler import PathSample


@dataclass
class RouteFrame:
    """Sampled marker state at one animation tick."""

    frame: int
    time: float
    distance: float
    sample: Optional[PathSample]

    def to_dict(self) -> dict[str, Any]:
        return {
            "frame": self.frame,
            "time": self.time,
            "distance": self.distance,
            "sample": None if self.sample is None else self.sample.to_dict(),
        }


@dataclass
class RoutePlan:
    """Computed route between two building nodes."""

    start: str
    goal: str
    accessible: bool
    path: list[str] = field(default_factory=list)
    total_length: float = 0.0
    steps: list[Step] = field(default_factory=list)
    floors_visited: list[int] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "goal": self.goal,
            "accessible": self.accessible,
            "found": self.found,
            "path": list(self.path),
            "total_length": self.total_length,
            "floors_visited": list(self.floors_visited),
            "steps": [s.to_dict() for s in self.steps],
            "warnings": list(self.warnings),
        }


def write_route_plan(plan: RoutePlan, output_path: Path) -> Path:
    """Serialize a route plan into JSON."""
    output_path = output_path.with_suffix(".json")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(plan.to_dict(), indent=2))
    return output_path


def write_route_frames(frames: list[RouteFrame], output_path: Path) -> Path:
    """Serialize an animation timeline into JSON."""
    output_path = output_path.with_suffix(".json")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps([f.to_dict() for f in frames], indent=2))
    return output_path
