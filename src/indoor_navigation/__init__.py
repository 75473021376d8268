"""Multi-floor indoor route planning, marker animation and step narration."""

from .animation import RouteAnimator
from .api import default_endpoints, load_building, plan_route, simulate_route
from .artifacts import RouteFrame, RoutePlan, write_route_frames, write_route_plan
from .building import Building, Node, NodeKind
from .config import AnimationConfig, NavigationConfig, RoutingConfig
from .graph import AdjacencyCache, build_adjacency, connected_components
from .narration import Step, build_steps
from .routing import find_path, path_cost
from .sampler import PathSample, PathSampler, path_length, position_along
from .schema import parse_building_file, parse_building_payload
from .validation import validate_route
from .weights import edge_weight, segment_length

__all__ = [
    "AdjacencyCache",
    "AnimationConfig",
    "Building",
    "build_adjacency",
    "build_steps",
    "connected_components",
    "default_endpoints",
    "edge_weight",
    "find_path",
    "load_building",
    "NavigationConfig",
    "Node",
    "NodeKind",
    "parse_building_file",
    "parse_building_payload",
    "path_cost",
    "path_length",
    "PathSample",
    "PathSampler",
    "plan_route",
    "position_along",
    "RouteAnimator",
    "RouteFrame",
    "RoutePlan",
    "RoutingConfig",
    "segment_length",
    "simulate_route",
    "Step",
    "validate_route",
    "write_route_frames",
    "write_route_plan",
]
