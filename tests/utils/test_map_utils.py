import folium

from models.models import PathNode
from utils.constants import MARKER_COLORS, PERSONA_COLORS, Persona
from utils.map_utils import build_campus_map, marker_color, step_marker_indices
from workflows.path_workflow import find_path

TILES = "https://tiles.example.com/{z}/{x}/{y}.png"


def _children(fmap, kind):
    return [c for c in fmap._children.values() if isinstance(c, kind)]


def test_marker_color_falls_back_to_default(campus_data):
    assert marker_color(campus_data.get("Food Court")) == MARKER_COLORS["food"]
    assert marker_color(campus_data.get("A")) == MARKER_COLORS["default"]


def test_step_markers_on_ends_and_intersections():
    path = [
        PathNode(id="a", lat=0, lng=0, name="A", type="location"),
        PathNode(id="b", lat=0, lng=1, name="B", type="waypoint"),
        PathNode(id="c", lat=0, lng=2, name="C", type="intersection"),
        PathNode(id="d", lat=0, lng=3, name="D", type="location"),
    ]
    assert step_marker_indices(path) == [0, 2, 3]


def test_map_has_one_marker_per_location(locations):
    fmap = build_campus_map(locations, tiles_url=TILES, zoom=17)
    assert len(_children(fmap, folium.Marker)) == len(locations)
    assert not _children(fmap, folium.PolyLine)


def test_route_is_drawn_in_persona_color(campus_data, locations):
    path = find_path(campus_data, "A", "B")
    fmap = build_campus_map(
        locations, tiles_url=TILES, zoom=17, path=path, persona=Persona.CAT_LOVER.value
    )
    lines = _children(fmap, folium.PolyLine)
    assert len(lines) == 1
    assert lines[0].options["color"] == PERSONA_COLORS[Persona.CAT_LOVER.value]
    # start and end get numbered markers, the midpoint waypoint does not
    assert len(_children(fmap, folium.Marker)) == len(locations) + 2


def test_highlight_centers_map(campus_data, locations):
    library = campus_data.get("Central Library")
    fmap = build_campus_map(locations, tiles_url=TILES, zoom=17, highlight=library)
    assert fmap.location == [library.lat, library.lng]
    assert "Central Library" in fmap.get_root().render()
