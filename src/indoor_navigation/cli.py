"""Command-line entrypoints for indoor_navigation."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from importlib import metadata

from .api import default_endpoints, load_building, plan_route, simulate_route
from .artifacts import write_route_frames, write_route_plan
from .building import NodeKind
from .config import NavigationConfig


def _package_version() -> str:
    try:
        return metadata.version("indoor-navigation")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _configure_logging(log_level: str) -> None:
    level_name = (log_level or "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid --log-level: {log_level!r}. "
            "Allowed values: DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    logging.basicConfig(level=level, format="%(message)s", force=True)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--version",
        action="version",
        version=f"indoornav {_package_version()}",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Python logging level.",
    )
    parser.add_argument(
        "--building",
        type=Path,
        required=True,
        help="Building JSON with floors, nodes and edges.",
    )


def _build_route_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indoornav",
        description=(
            "Compute a walking route between two nodes of a multi-floor building "
            "and print turn-by-turn steps. "
            "To list selectable rooms use: `indoornav rooms ...`."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--from",
        dest="start",
        type=str,
        default=None,
        help="Start node id (defaults to the first room).",
    )
    parser.add_argument(
        "--to",
        dest="goal",
        type=str,
        default=None,
        help="Destination node id (defaults to the second room).",
    )
    parser.add_argument(
        "--accessible",
        action="store_true",
        help="Avoid stairs whenever a step-free route exists.",
    )
    parser.add_argument(
        "--config-json",
        type=Path,
        default=None,
        help="Optional JSON file serialized from NavigationConfig.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output path for the route plan JSON.",
    )
    parser.add_argument(
        "--frames-output",
        type=Path,
        default=None,
        help="Optional output path for the sampled animation timeline JSON.",
    )
    return parser


def _build_rooms_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indoornav rooms",
        description="List the rooms of a building grouped by floor.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_common_arguments(parser)
    return parser


def _parse_cli_args(argv: list[str] | None = None) -> tuple[str, argparse.Namespace]:
    tokens = list(sys.argv[1:] if argv is None else argv)
    command = "route"
    if tokens and tokens[0] in {"route", "rooms"}:
        command = tokens[0]
        tokens = tokens[1:]

    if command == "rooms":
        return command, _build_rooms_parser().parse_args(tokens)
    return command, _build_route_parser().parse_args(tokens)


def build_config(args: argparse.Namespace) -> NavigationConfig:
    if args.config_json is not None:
        config = NavigationConfig.from_json(args.config_json)
    else:
        config = NavigationConfig()
    if args.accessible:
        config.accessible = True
    return config


def _run_route(args: argparse.Namespace) -> None:
    config = build_config(args)
    building = load_building(args.building)
    default_start, default_goal = default_endpoints(building)
    start = args.start or default_start
    goal = args.goal or default_goal
    if not start or not goal:
        raise ValueError("Provide --from and --to; the building has fewer than two rooms.")

    plan = plan_route(
        building,
        start,
        goal,
        accessible=config.accessible,
        config=config.routing,
    )

    print(f"Route: {start} -> {goal} (accessible={'on' if plan.accessible else 'off'})")
    if plan.found:
        print(f"Path: {' -> '.join(plan.path)}")
        print(f"Total length: {plan.total_length:.1f}")
        print(f"Floors: {', '.join(str(f) for f in plan.floors_visited)}")
        print("Steps:")
        for step in plan.steps:
            print(f"  {step.segment_index}. {step.text}")
    if plan.warnings:
        print("Warnings:")
        for warning in plan.warnings:
            print(f"  - {warning}")

    if args.output is not None:
        print(f"Wrote route plan: {write_route_plan(plan, args.output)}")
    if args.frames_output is not None:
        frames = simulate_route(building, plan, config=config)
        print(f"Wrote {len(frames)} frames: {write_route_frames(frames, args.frames_output)}")


def _run_rooms(args: argparse.Namespace) -> None:
    building = load_building(args.building)
    for floor in building.floors:
        rooms = [n for n in building.nodes_on_floor(floor) if n.kind is NodeKind.ROOM]
        print(f"Floor {floor}: {len(rooms)} room(s)")
        for room in rooms:
            print(f"  {room.node_id}: {room.display_name}")


def main() -> None:
    command, args = _parse_cli_args()
    try:
        _configure_logging(getattr(args, "log_level", "INFO"))
        if command == "rooms":
            _run_rooms(args)
            return
        _run_route(args)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        raise SystemExit(130) from None
    except Exception as exc:  # noqa: BLE001
        logger = logging.getLogger(__name__)
        if logging.getLogger().handlers:
            logger.error("Error: %s", exc)
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed traceback")
        else:
            print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from None


if __name__ == "__main__":
    main()
