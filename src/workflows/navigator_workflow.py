import logging
from typing import Any, Dict

from langchain_core.messages import AIMessage, HumanMessage
from langgraph.graph import StateGraph, START, END

from clients.campus_data_client import CampusDataClient
from models.models import NavigatorState, RouteRequest
from utils.constants import FALLBACK_MESSAGE
from utils.geo_utils import nearest_location
from utils.match_utils import best_match
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class NavigatorWorkflow(Workflow):
    """
    Chat navigator: keyword-match the latest question to a campus location and,
    when the device position is known, route there from the nearest location.
    """

    def __init__(self, campus_data: CampusDataClient):
        self.campus_data = campus_data
        self.graph = self._build_graph()
        self.graph_compiled = self.graph.compile()

    def _build_graph(self):
        graph = StateGraph(NavigatorState)
        graph.add_node("match", self.match_node)
        graph.add_node("locate", self.locate_node)
        graph.add_node("respond", self.respond_node)
        graph.add_node("respond_fallback", self.respond_fallback_node)
        graph.add_edge(START, "match")
        graph.add_conditional_edges(
            "match",
            self._route_after_match,
            ["locate", "respond_fallback"],
        )
        graph.add_edge("locate", "respond")
        graph.add_edge("respond", END)
        graph.add_edge("respond_fallback", END)
        return graph

    @staticmethod
    def _last_question(state: NavigatorState) -> str:
        for message in reversed(state["messages"]):
            if isinstance(message, HumanMessage):
                return str(message.content)
        return ""

    @staticmethod
    def _route_after_match(state: NavigatorState) -> str:
        match = state.get("match")
        return "locate" if match and match.location else "respond_fallback"

    def match_node(self, state: NavigatorState):
        query = self._last_question(state)
        return {"match": best_match(self.campus_data.all(), query), "route_request": None}

    def locate_node(self, state: NavigatorState):
        user_location = state.get("user_location")
        if user_location is None:
            return {"origin": None}
        return {"origin": nearest_location(user_location, self.campus_data.all())}

    def respond_node(self, state: NavigatorState):
        found = state["match"].location
        origin = state.get("origin")
        if state.get("user_location") is None:
            text = (
                f"I'd recommend {found.name}. {found.description} "
                "(Enable location access to get directions from your current position!)"
            )
            return {"messages": [AIMessage(content=text)]}

        if origin is None:
            text = f"You can try the {found.name}! {found.description}"
            return {"messages": [AIMessage(content=text)]}

        text = (
            f"Perfect! I found {found.name} for you. {found.description} "
            f"I'm showing you the route from {origin.name} "
            "(nearest to your current location)."
        )
        return {
            "messages": [AIMessage(content=text)],
            "route_request": RouteRequest(
                from_location=origin.name, to_location=found.name
            ),
        }

    def respond_fallback_node(self, state: NavigatorState):
        return {"messages": [AIMessage(content=FALLBACK_MESSAGE)]}

    def _coerce_input(self, input: Any) -> NavigatorState:
        """
        Validate and coerce the input to NavigatorState.

        Args:
            input (Any): Dict with the chat ``messages`` and an optional
                ``user_location`` (GeoPoint).

        Returns:
            NavigatorState: The validated navigator state.

        Raises:
            ValueError: If input is invalid.
        """
        if not isinstance(input, dict):
            raise ValueError("Input must be a dict")
        messages = input.get("messages")
        if not isinstance(messages, list) or not messages:
            raise ValueError("Input must contain a non-empty 'messages' list")
        return NavigatorState(
            messages=messages,
            user_location=input.get("user_location"),
            match=None,
            origin=None,
            route_request=None,
        )

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        state = self._coerce_input(input)
        return self.graph_compiled.invoke(state)
