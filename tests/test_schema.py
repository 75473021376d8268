from __future__ import annotations

import json
from pathlib import Path
import tempfile
import unittest
import sys


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from indoor_navigation.building import NodeKind  # noqa: E402
from indoor_navigation.schema import (  # noqa: E402
    parse_building_file,
    parse_building_payload,
)


def _payload() -> dict:
    return {
        "floors": [0, 1],
        "nodes": [
            {"id": "A", "floor": 0, "x": 0, "y": 0, "type": "room", "label": "Lobby"},
            {"id": "H", "floor": 0, "x": 5, "y": 0, "type": "hall"},
            {"id": "S0", "floor": 0, "x": 10, "y": 0, "type": "stair"},
            {"id": "S1", "floor": 1.0, "x": 10, "y": 0, "type": "stair"},
        ],
        "edges": [["A", "H"], ["H", "S0"], ["S0", "S1"]],
    }


class ParseBuildingPayloadTest(unittest.TestCase):
    def test_parses_nodes_edges_and_floors(self) -> None:
        building = parse_building_payload(_payload())
        self.assertEqual(building.floors, (0, 1))
        self.assertEqual(len(building.nodes), 4)
        self.assertIs(building.node("H").kind, NodeKind.HALLWAY)
        self.assertEqual(building.node("S1").floor, 1)
        self.assertEqual(building.node("A").label, "Lobby")
        self.assertEqual(building.edges[0], ("A", "H"))

    def test_missing_floors_are_derived_from_nodes(self) -> None:
        payload = _payload()
        del payload["floors"]
        self.assertEqual(parse_building_payload(payload).floors, (0, 1))

    def test_missing_kind_defaults_to_room(self) -> None:
        payload = _payload()
        del payload["nodes"][0]["type"]
        self.assertIs(parse_building_payload(payload).node("A").kind, NodeKind.ROOM)

    def test_dangling_edge_is_kept_and_logged(self) -> None:
        payload = _payload()
        payload["edges"].append(["A", "GHOST"])
        with self.assertLogs("indoor_navigation.schema", level="WARNING") as cap:
            building = parse_building_payload(payload)
        self.assertEqual(building.dangling_edges(), [("A", "GHOST")])
        self.assertIn("unknown node ids", " ".join(cap.output))

    def test_rejects_malformed_payloads(self) -> None:
        cases = []
        missing_nodes = _payload()
        del missing_nodes["nodes"]
        cases.append(missing_nodes)

        bool_floor = _payload()
        bool_floor["nodes"][0]["floor"] = True
        cases.append(bool_floor)

        fractional_floor = _payload()
        fractional_floor["nodes"][0]["floor"] = 0.5
        cases.append(fractional_floor)

        text_coord = _payload()
        text_coord["nodes"][0]["x"] = "1"
        cases.append(text_coord)

        nan_coord = _payload()
        nan_coord["nodes"][0]["y"] = float("nan")
        cases.append(nan_coord)

        duplicate_id = _payload()
        duplicate_id["nodes"][1]["id"] = "A"
        cases.append(duplicate_id)

        bad_kind = _payload()
        bad_kind["nodes"][0]["type"] = "escalator"
        cases.append(bad_kind)

        bad_edge = _payload()
        bad_edge["edges"].append(["A"])
        cases.append(bad_edge)

        duplicate_floor = _payload()
        duplicate_floor["floors"] = [0, 0]
        cases.append(duplicate_floor)

        for payload in cases:
            with self.assertRaises(ValueError):
                parse_building_payload(payload)

    def test_error_message_names_field(self) -> None:
        payload = _payload()
        payload["nodes"][2]["floor"] = "two"
        with self.assertRaisesRegex(ValueError, r"nodes\[2\]\.floor"):
            parse_building_payload(payload)


class ParseBuildingFileTest(unittest.TestCase):
    def test_reads_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "building.json"
            path.write_text(json.dumps(_payload()))
            building = parse_building_file(path)
        self.assertEqual(len(building.edges), 3)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            parse_building_file(Path("/nonexistent/building.json"))

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "building.json"
            path.write_text("{not json")
            with self.assertRaises(ValueError):
                parse_building_file(path)

    def test_demo_building_parses(self) -> None:
        demo = Path(__file__).resolve().parents[1] / "data" / "buildings" / "demo.json"
        building = parse_building_file(demo)
        self.assertEqual(building.floors, (0, 1))
        self.assertEqual(building.dangling_edges(), [])


if __name__ == "__main__":
    unittest.main()
