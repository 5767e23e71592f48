import html
from typing import List, Optional, Sequence

import folium

from models.models import Location, PathNode
from utils.constants import MARKER_COLORS, PERSONA_COLORS, MapConstants


def marker_color(location: Location) -> str:
    return MARKER_COLORS.get(location.type, MARKER_COLORS["default"])


def _location_icon(location: Location, size: int) -> folium.DivIcon:
    color = marker_color(location)
    font_size = size // 2
    return folium.DivIcon(
        html=(
            f'<div style="background-color: {color}; width: {size}px; height: {size}px; '
            "border-radius: 50%; border: 3px solid white; "
            "box-shadow: 0 2px 8px rgba(0,0,0,0.3); display: flex; "
            "align-items: center; justify-content: center;\">"
            f'<span style="font-size: {font_size}px;">{location.icon}</span></div>'
        ),
        icon_size=(size, size),
        icon_anchor=(size // 2, size // 2),
    )


def _step_icon(step: int, color: str) -> folium.DivIcon:
    return folium.DivIcon(
        class_name="direction-marker",
        html=(
            "<div style=\"background-color: white; padding: 4px 8px; border-radius: 50%; "
            f"border: 2px solid {color}; font-size: 12px; font-weight: 600; "
            "box-shadow: 0 2px 4px rgba(0,0,0,0.2); min-width: 24px; "
            f'text-align: center;">{step}</div>'
        ),
        icon_size=(0, 0),
        icon_anchor=(12, 12),
    )


def _popup_html(location: Location) -> str:
    landmarks = (
        f'<p style="font-size: 12px; color: #888;"><strong>Landmarks:</strong> '
        f"{html.escape(location.landmarks)}</p>"
        if location.landmarks
        else ""
    )
    return (
        '<div style="min-width: 200px;">'
        f'<h3 style="font-weight: bold; margin-bottom: 4px;">{location.icon} '
        f"{html.escape(location.name)}</h3>"
        f'<p style="margin-bottom: 8px; color: #666;">{html.escape(location.description)}</p>'
        f"{landmarks}</div>"
    )


def step_marker_indices(path: Sequence[PathNode]) -> List[int]:
    """Indices of path nodes that get a numbered marker: ends and intersections."""
    last = len(path) - 1
    return [
        i
        for i, node in enumerate(path)
        if i == 0 or i == last or node.type == "intersection"
    ]


def build_campus_map(
    locations: Sequence[Location],
    tiles_url: str,
    zoom: int,
    highlight: Optional[Location] = None,
    path: Optional[Sequence[PathNode]] = None,
    persona: Optional[str] = None,
) -> folium.Map:
    """
    Render the campus map with one marker per location, an optional highlighted
    location and an optional route drawn in the persona's colour.
    """
    center = list(MapConstants.CENTER.value)
    if highlight is not None:
        center, zoom = [highlight.lat, highlight.lng], MapConstants.HIGHLIGHT_ZOOM.value

    fmap = folium.Map(
        location=center,
        zoom_start=zoom,
        min_zoom=MapConstants.MIN_ZOOM.value,
        max_zoom=MapConstants.MAX_ZOOM.value,
        tiles=tiles_url,
        attr=MapConstants.TILES_ATTRIBUTION.value,
    )

    for location in locations:
        is_highlighted = highlight is not None and location.name == highlight.name
        folium.Marker(
            [location.lat, location.lng],
            icon=_location_icon(location, 48 if is_highlighted else 36),
            tooltip=location.name,
            popup=folium.Popup(_popup_html(location), max_width=300, show=is_highlighted),
        ).add_to(fmap)

    if path:
        color = PERSONA_COLORS.get(persona, MARKER_COLORS["default"])
        coordinates = [[node.lat, node.lng] for node in path]
        folium.PolyLine(
            coordinates, color=color, weight=4, opacity=0.8, smooth_factor=1
        ).add_to(fmap)
        for i in step_marker_indices(path):
            node = path[i]
            folium.Marker(
                [node.lat, node.lng], icon=_step_icon(i + 1, color), tooltip=node.name
            ).add_to(fmap)
        if highlight is None:
            fmap.fit_bounds(coordinates, padding=(50, 50))

    return fmap
