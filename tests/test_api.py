from __future__ import annotations

import json
import math
from pathlib import Path
import tempfile
import unittest
import sys


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from indoor_navigation.api import (  # noqa: E402
    default_endpoints,
    load_building,
    plan_route,
    simulate_route,
)
from indoor_navigation.artifacts import write_route_frames, write_route_plan  # noqa: E402
from indoor_navigation.building import Building, Node  # noqa: E402


DEMO_BUILDING = Path(__file__).resolve().parents[1] / "data" / "buildings" / "demo.json"


class PlanRouteTest(unittest.TestCase):
    def setUp(self) -> None:
        self.building = load_building(DEMO_BUILDING)

    def test_default_endpoints_are_first_two_rooms(self) -> None:
        self.assertEqual(default_endpoints(self.building), ("R0A", "R0B"))

    def test_default_endpoints_with_too_few_rooms(self) -> None:
        building = Building(floors=(0,), nodes=(Node("only", 0, 0.0, 0.0),))
        self.assertEqual(default_endpoints(building), ("only", ""))

    def test_stairs_are_shortest_between_floors(self) -> None:
        plan = plan_route(self.building, "R0A", "R1B")
        self.assertTrue(plan.found)
        self.assertEqual(plan.path, ["R0A", "H0W", "H0C", "S0", "S1", "H1C", "H1E", "R1B"])
        self.assertAlmostEqual(plan.total_length, 1120.0)
        self.assertEqual(plan.floors_visited, [0, 1])
        self.assertEqual(len(plan.steps), len(plan.path) - 1)
        self.assertEqual(plan.steps[3].text, "Take the stairs up to Floor 1")
        self.assertEqual(plan.warnings, [])

    def test_accessible_route_uses_lift(self) -> None:
        plan = plan_route(self.building, "R0A", "R1B", accessible=True)
        self.assertIn("L0", plan.path)
        self.assertNotIn("S0", plan.path)
        self.assertNotIn("S1", plan.path)
        self.assertIn("Take the lift up to Floor 1", [s.text for s in plan.steps])
        self.assertAlmostEqual(plan.total_length, 880.0 + 200.0 + 2 * math.hypot(50.0, 20.0))

    def test_missing_route_is_reported_in_warnings(self) -> None:
        plan = plan_route(self.building, "R0A", "nowhere")
        self.assertFalse(plan.found)
        self.assertEqual(plan.total_length, 0.0)
        self.assertEqual(plan.steps, [])
        self.assertTrue(any("No route found" in w for w in plan.warnings))

    def test_plan_serializes(self) -> None:
        plan = plan_route(self.building, "R0A", "R0B")
        with tempfile.TemporaryDirectory() as tmp_dir:
            out = write_route_plan(plan, Path(tmp_dir) / "plans" / "route")
            payload = json.loads(out.read_text())
        self.assertEqual(out.suffix, ".json")
        self.assertEqual(payload["path"][0], "R0A")
        self.assertEqual(payload["steps"][0]["segment_index"], 1)
        self.assertTrue(payload["found"])


class SimulateRouteTest(unittest.TestCase):
    def setUp(self) -> None:
        self.building = load_building(DEMO_BUILDING)

    def test_timeline_runs_from_start_to_goal(self) -> None:
        plan = plan_route(self.building, "R0A", "R1B")
        frames = simulate_route(self.building, plan)
        step = 95.0 / 60.0
        self.assertEqual(len(frames), math.ceil(plan.total_length / step) + 1)
        self.assertEqual(frames[0].distance, 0.0)
        self.assertAlmostEqual(frames[-1].distance, plan.total_length)
        self.assertEqual((frames[-1].sample.x, frames[-1].sample.y), (760.0, 400.0))
        self.assertEqual(frames[-1].sample.floor, 1)
        distances = [f.distance for f in frames]
        self.assertEqual(distances, sorted(distances))
        indices = [f.sample.segment_index for f in frames]
        self.assertEqual(indices, sorted(indices))

    def test_empty_plan_yields_single_frame(self) -> None:
        plan = plan_route(self.building, "R0A", "nowhere")
        frames = simulate_route(self.building, plan)
        self.assertEqual(len(frames), 1)
        self.assertIsNone(frames[0].sample)

    def test_frames_serialize(self) -> None:
        plan = plan_route(self.building, "R0A", "R0C")
        frames = simulate_route(self.building, plan)
        with tempfile.TemporaryDirectory() as tmp_dir:
            out = write_route_frames(frames, Path(tmp_dir) / "frames.json")
            payload = json.loads(out.read_text())
        self.assertEqual(len(payload), len(frames))
        self.assertEqual(payload[0]["sample"]["segment_index"], 1)


if __name__ == "__main__":
    unittest.main()
