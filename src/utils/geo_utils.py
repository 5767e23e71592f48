import logging
import math
from typing import Iterable, Optional, Sequence, Tuple, Union

from models.models import GeoPoint, Location, PathNode
from utils.constants import COMPASS_DIRECTIONS, EARTH_RADIUS_M

logger = logging.getLogger(__name__)

Coordinate = Union[Tuple[float, float], Sequence[float], GeoPoint, Location, PathNode]


def _lat_lng(point: Coordinate) -> Tuple[float, float]:
    if hasattr(point, "lat") and hasattr(point, "lng"):
        return point.lat, point.lng
    lat, lng = point
    return lat, lng


def round_half_up(value: float) -> Union[int, float]:
    """Round .5 upwards, matching how distances are shown to users. NaN and inf pass through."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def distance(p1: Coordinate, p2: Coordinate) -> float:
    """
    Great-circle distance between two points using the Haversine formula.

    Args:
        p1: (lat, lng) in degrees, or any object with ``lat``/``lng``.
        p2: (lat, lng) in degrees, or any object with ``lat``/``lng``.

    Returns:
        float: Distance in meters on a sphere of radius 6,371 km.
    """
    lat1, lng1 = _lat_lng(p1)
    lat2, lng2 = _lat_lng(p2)
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def bearing(p1: Coordinate, p2: Coordinate) -> float:
    """Initial bearing from ``p1`` to ``p2`` in degrees, within [0, 360)."""
    lat1, lng1 = _lat_lng(p1)
    lat2, lng2 = _lat_lng(p2)
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_lambda = math.radians(lng2 - lng1)

    y = math.sin(d_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        d_lambda
    )
    theta = math.atan2(y, x)
    return (math.degrees(theta) + 360) % 360


def direction_label(bearing_deg: float) -> Optional[str]:
    if not math.isfinite(bearing_deg):
        return None
    index = round_half_up(bearing_deg / 45) % len(COMPASS_DIRECTIONS)
    return COMPASS_DIRECTIONS[index]


def nearest_location(
    point: Coordinate, locations: Iterable[Location]
) -> Optional[Location]:
    nearest = None
    min_distance = math.inf
    for location in locations:
        d = distance(point, location)
        if d < min_distance:
            min_distance = d
            nearest = location

    if nearest is not None:
        logger.info("Nearest location: %s (%.0f m)", nearest.name, min_distance)
    return nearest
