import logging
from typing import Any, Dict, List, Optional

from langgraph.graph import StateGraph, START, END

from clients.campus_data_client import CampusDataClient
from models.models import PathNode, RouteResult, RouteState
from utils.constants import NO_ROUTE_MESSAGE, PERSONA_TIPS, Persona
from utils.geo_utils import bearing, direction_label, distance, round_half_up
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


def find_path(
    campus_data: CampusDataClient, start_name: str, end_name: str
) -> Optional[List[PathNode]]:
    """
    Build a three-point path (start, midpoint, end) between two named locations.

    This is a placeholder route: no road network is consulted, the midpoint is
    the arithmetic mean of both endpoints.

    Args:
        campus_data: Registry to look both names up in (exact, case-sensitive).
        start_name: Name of the starting location.
        end_name: Name of the destination.

    Returns:
        Optional[List[PathNode]]: The three nodes, or None if either name is unknown.
    """
    logger.info("Finding path from %s to %s", start_name, end_name)
    start = campus_data.get(start_name)
    end = campus_data.get(end_name)
    if start is None or end is None:
        logger.info("Could not find locations %r / %r", start_name, end_name)
        return None

    path = [
        PathNode(id="start", lat=start.lat, lng=start.lng, name=start_name, type="location"),
        PathNode(
            id="mid",
            lat=(start.lat + end.lat) / 2,
            lng=(start.lng + end.lng) / 2,
            name="Midpoint",
            type="waypoint",
        ),
        PathNode(id="end", lat=end.lat, lng=end.lng, name=end_name, type="location"),
    ]
    logger.info("Created path with %d points", len(path))
    return path


def _persona_tip(persona: str, segment: int, path_length: int) -> Optional[str]:
    if persona in (Persona.NEW_STUDENT.value, Persona.CAT_FEARFUL.value):
        at = 0
    elif persona == Persona.CAT_LOVER.value:
        at = path_length // 2
    else:
        return None
    return PERSONA_TIPS[persona] if segment == at else None


def generate_directions(path: List[PathNode], persona: str) -> List[str]:
    """Narrate a path as turn-by-turn lines. Persona only adds flavour text."""
    if len(path) < 2:
        return []

    directions = [f"Start at {path[0].name}"]
    total = 0.0
    last_segment = len(path) - 2
    for i, (current, nxt) in enumerate(zip(path, path[1:])):
        meters = distance(current, nxt)
        total += meters
        heading = direction_label(bearing(current, nxt))
        rounded = round_half_up(meters)

        if i == 0:
            directions.append(f"Head {heading} for {rounded}m")
        elif i == last_segment:
            directions.append(f"Continue {heading} for {rounded}m to reach {nxt.name}")
        else:
            directions.append(f"Continue {heading} for {rounded}m")

        tip = _persona_tip(persona, i, len(path))
        if tip:
            directions.append(tip)

    directions.append(f"Arrive at {path[-1].name}")
    directions.append(f"📍 Total distance: {round_half_up(total)}m")
    return directions


class PathWorkflow(Workflow):
    """Route request -> placeholder path -> directions."""

    def __init__(self, campus_data: CampusDataClient):
        self.campus_data = campus_data
        self.graph = self._build_graph()

    def _build_graph(self):
        graph = StateGraph(RouteState)
        graph.add_node("find_path", self._find_path)
        graph.add_node("generate_directions", self._generate_directions)
        graph.add_edge(START, "find_path")
        graph.add_edge("find_path", "generate_directions")
        graph.add_edge("generate_directions", END)
        return graph.compile()

    def _coerce_state(self, payload: Dict[str, Any]) -> RouteState:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        from_location = payload.get("from_location")
        to_location = payload.get("to_location")
        if not from_location:
            raise ValueError("from_location is required")
        if not to_location:
            raise ValueError("to_location is required")
        persona = payload.get("persona", Persona.NEW_STUDENT.value)
        if persona not in {p.value for p in Persona}:
            raise ValueError(f"Unknown persona: {persona}")
        return RouteState(
            from_location=from_location, to_location=to_location, persona=persona
        )

    def _find_path(self, state: RouteState) -> Dict[str, Any]:
        return {"path": find_path(self.campus_data, state.from_location, state.to_location)}

    def _generate_directions(self, state: RouteState) -> Dict[str, Any]:
        if not state.path:
            return {"directions": [NO_ROUTE_MESSAGE]}
        return {"directions": generate_directions(state.path, state.persona)}

    def run(self, input: Dict[str, Any]) -> RouteResult:
        output = self.graph.invoke(input=self._coerce_state(input))
        return RouteResult(path=output.get("path"), directions=output.get("directions", []))
