"""Configuration models for indoor route planning and animation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json
from pathlib import Path
from typing import Any


DEFAULT_FLOOR_CHANGE_PENALTY = 200.0
DEFAULT_ACCESSIBILITY_PENALTY = 1_000_000.0
DEFAULT_STEP_LENGTH = 3.5
DEFAULT_ANIMATION_SPEED = 95.0
DEFAULT_FRAME_RATE = 60


@dataclass
class RoutingConfig:
    """Cost model shared by the path finder, sampler and narrator."""

    floor_change_penalty: float = DEFAULT_FLOOR_CHANGE_PENALTY  # [units] added per floor transition.
    accessibility_penalty: float = DEFAULT_ACCESSIBILITY_PENALTY  # [units] added to stair segments when accessible.
    step_length: float = DEFAULT_STEP_LENGTH  # [units] planar distance of one walking step.

    def __post_init__(self) -> None:
        if self.floor_change_penalty < 0:
            raise ValueError("`floor_change_penalty` must be >= 0.")
        if self.accessibility_penalty < 0:
            raise ValueError("`accessibility_penalty` must be >= 0.")
        if self.step_length <= 0:
            raise ValueError("`step_length` must be > 0.")


@dataclass
class AnimationConfig:
    """Playback knobs for the route marker."""

    speed: float = DEFAULT_ANIMATION_SPEED  # [units/s] marker speed along the path.
    frame_rate: int = DEFAULT_FRAME_RATE  # [ticks/s] cadence used by advance_frame.
    follow_floor: bool = True  # switch the displayed floor with the marker.

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError("`speed` must be > 0.")
        if self.frame_rate <= 0:
            raise ValueError("`frame_rate` must be > 0.")


@dataclass
class NavigationConfig:
    """Top-level config for route planning sessions."""

    routing: RoutingConfig = field(default_factory=RoutingConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    accessible: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "NavigationConfig":
        routing_raw = dict(payload.get("routing", {}))
        animation_raw = dict(payload.get("animation", {}))
        return cls(
            routing=RoutingConfig(**routing_raw),
            animation=AnimationConfig(**animation_raw),
            accessible=bool(payload.get("accessible", False)),
        )

    @classmethod
    def from_json(cls, input_path: Path) -> "NavigationConfig":
        payload = json.loads(input_path.read_text())
        return cls.from_dict(payload)
