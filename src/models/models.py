from typing import List, Literal, Optional, Tuple, TypedDict, Annotated
from pydantic import BaseModel, ConfigDict, Field, field_validator
from langchain_core.messages import BaseMessage
from langgraph.graph.message import add_messages


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)
    lat: float
    lng: float


class Location(BaseModel):
    """A point of interest from the static campus registry."""

    model_config = ConfigDict(frozen=True)
    name: str
    lat: float
    lng: float
    type: str
    description: str
    landmarks: Optional[str] = None
    tags: Tuple[str, ...] = ()
    icon: str = "📍"

    @field_validator("tags", mode="before")
    @classmethod
    def _lowercase_tags(cls, tags):
        return tuple(str(tag).lower() for tag in tags)


class PathNode(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    lat: float
    lng: float
    name: str
    type: Literal["intersection", "location", "waypoint"]


class RouteRequest(BaseModel):
    from_location: str
    to_location: str


class RouteState(BaseModel):
    from_location: str
    to_location: str
    persona: str
    path: Optional[List[PathNode]] = None
    directions: List[str] = Field(default_factory=list)


class RouteResult(BaseModel):
    path: Optional[List[PathNode]] = None
    directions: List[str] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)


class MatchResult(BaseModel):
    location: Optional[Location] = None
    score: int = 0


class NavigatorState(TypedDict, total=False):
    messages: Annotated[List[BaseMessage], add_messages]
    user_location: Optional[GeoPoint]
    match: Optional[MatchResult]
    origin: Optional[Location]
    route_request: Optional[RouteRequest]
