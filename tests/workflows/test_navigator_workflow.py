import pytest
from langchain_core.messages import AIMessage, HumanMessage

from models.models import GeoPoint
from utils.constants import FALLBACK_MESSAGE, GREETING_MESSAGE
from workflows.navigator_workflow import NavigatorWorkflow


@pytest.fixture
def workflow(campus_data):
    return NavigatorWorkflow(campus_data=campus_data)


def _ask(question):
    return [AIMessage(content=GREETING_MESSAGE), HumanMessage(content=question)]


def test_match_without_position_recommends(workflow):
    result = workflow.run({"messages": _ask("Show me a quiet place to study")})
    reply = result["messages"][-1]
    assert isinstance(reply, AIMessage)
    assert reply.content.startswith("I'd recommend Central Library.")
    assert "Enable location access" in reply.content
    assert result["match"].location.name == "Central Library"
    assert result.get("route_request") is None


def test_match_with_position_requests_route(workflow):
    result = workflow.run(
        {
            "messages": _ask("Where can I grab a snack?"),
            "user_location": GeoPoint(lat=18.62321, lng=73.91061),
        }
    )
    reply = result["messages"][-1].content
    assert reply.startswith("Perfect! I found Food Court for you.")
    assert "route from Cricket Ground (nearest to your current location)" in reply
    route_request = result["route_request"]
    assert route_request.from_location == "Cricket Ground"
    assert route_request.to_location == "Food Court"


def test_no_match_returns_fallback(workflow):
    result = workflow.run(
        {
            "messages": _ask("xyzzy plugh"),
            "user_location": GeoPoint(lat=18.62, lng=73.91),
        }
    )
    assert result["messages"][-1].content == FALLBACK_MESSAGE
    assert result.get("route_request") is None
    assert result["match"].location is None


def test_history_is_kept(workflow):
    result = workflow.run({"messages": _ask("cricket")})
    assert len(result["messages"]) == 3
    assert result["messages"][1].content == "cricket"


def test_uses_latest_question(workflow):
    messages = _ask("quiet study") + [
        AIMessage(content="I'd recommend Central Library."),
        HumanMessage(content="cricket"),
    ]
    result = workflow.run({"messages": messages})
    assert result["match"].location.name == "Cricket Ground"


def test_invalid_input(workflow):
    with pytest.raises(ValueError):
        workflow.run("hello")
    with pytest.raises(ValueError):
        workflow.run({"messages": []})
