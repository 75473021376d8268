#!/usr/bin/env python3
"""Minimal end-to-end demo: pick a route and play the marker to the goal."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys


def _resolve_src_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "src"


SRC_DIR = _resolve_src_dir()
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from indoor_navigation.animation import RouteAnimator  # noqa: E402
from indoor_navigation.api import default_endpoints, load_building  # noqa: E402
from indoor_navigation.config import NavigationConfig  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Play a route on the demo building and print step changes."
    )
    parser.add_argument(
        "--building",
        type=Path,
        default=Path(__file__).resolve().parents[1] / "data" / "buildings" / "demo.json",
        help="Input building JSON.",
    )
    parser.add_argument("--from", dest="start", type=str, default=None, help="Start node id.")
    parser.add_argument("--to", dest="goal", type=str, default=None, help="Destination node id.")
    parser.add_argument(
        "--accessible",
        action="store_true",
        help="Avoid stairs whenever a step-free route exists.",
    )
    args = parser.parse_args()

    building = load_building(args.building)
    default_start, default_goal = default_endpoints(building)
    animator = RouteAnimator(building, NavigationConfig(accessible=args.accessible))
    path = animator.select(args.start or default_start, args.goal or default_goal)
    if len(path) < 2:
        raise SystemExit(f"No route found from {animator.start!r} to {animator.goal!r}.")

    steps = {s.segment_index: s.text for s in animator.steps}
    print(f"Path: {' -> '.join(path)} ({animator.total_length:.1f} units)")
    animator.play()
    frame = 0
    last_segment = 0
    while animator.playing:
        sample = animator.advance_frame()
        frame += 1
        if sample is not None and sample.segment_index != last_segment:
            last_segment = sample.segment_index
            print(
                f"[{frame / animator.config.animation.frame_rate:6.2f}s] "
                f"Floor {animator.current_floor}: {steps[last_segment]}"
            )
    print(f"Arrived after {frame} frames.")


if __name__ == "__main__":
    main()
