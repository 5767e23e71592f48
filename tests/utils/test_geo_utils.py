import math

import pytest

from models.models import GeoPoint
from utils.constants import COMPASS_DIRECTIONS
from utils.geo_utils import (
    bearing,
    direction_label,
    distance,
    nearest_location,
    round_half_up,
)

A = (18.6200, 73.9100)
B = (18.6220, 73.9120)
POINTS = [A, B, (0.0, 0.0), (-33.8688, 151.2093), (51.5074, -0.1278), (89.9, 179.9)]


def test_distance_between_reference_points():
    assert distance(A, B) == pytest.approx(305, abs=5)


def test_distance_is_symmetric():
    for p in POINTS:
        for q in POINTS:
            assert distance(p, q) == pytest.approx(distance(q, p))


def test_distance_to_self_is_zero():
    for p in POINTS:
        assert distance(p, p) == 0


def test_distance_accepts_objects_with_lat_lng():
    assert distance(GeoPoint(lat=A[0], lng=A[1]), B) == pytest.approx(distance(A, B))


def test_distance_propagates_nan():
    assert math.isnan(distance((float("nan"), 0.0), (0.0, 0.0)))


def test_bearing_cardinal_directions():
    assert bearing((0.0, 0.0), (1.0, 0.0)) == pytest.approx(0.0)
    assert bearing((0.0, 0.0), (0.0, 1.0)) == pytest.approx(90.0)
    assert bearing((1.0, 0.0), (0.0, 0.0)) == pytest.approx(180.0)
    assert bearing((0.0, 1.0), (0.0, 0.0)) == pytest.approx(270.0)


def test_bearing_is_in_range():
    for p in POINTS:
        for q in POINTS:
            assert 0 <= bearing(p, q) < 360


def test_bearing_between_reference_points_is_northeast():
    assert direction_label(bearing(A, B)) == "northeast"


def test_direction_label_octants():
    assert direction_label(0) == "north"
    assert direction_label(45) == "northeast"
    assert direction_label(90) == "east"
    assert direction_label(135) == "southeast"
    assert direction_label(180) == "south"
    assert direction_label(225) == "southwest"
    assert direction_label(270) == "west"
    assert direction_label(315) == "northwest"
    assert direction_label(359) == "north"


def test_direction_label_ties_round_up():
    assert direction_label(22.5) == "northeast"
    assert direction_label(22.4) == "north"
    assert direction_label(337.5) == "north"


def test_direction_label_always_one_of_eight():
    for deg in [-720.0, -45.0, -0.1, 0.0, 10.0, 123.4, 359.99, 360.0, 1000.0]:
        assert direction_label(deg) in COMPASS_DIRECTIONS


def test_direction_label_nan_is_unlabelled():
    assert direction_label(float("nan")) is None
    assert direction_label(bearing((float("nan"), 0.0), (0.0, 0.0))) is None


def test_round_half_up_passes_non_finite_through():
    assert math.isnan(round_half_up(float("nan")))
    assert round_half_up(float("inf")) == float("inf")


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_nearest_location(locations):
    nearest = nearest_location((18.62321, 73.91061), locations)
    assert nearest.name == "Cricket Ground"


def test_nearest_location_first_wins_on_exact_position(locations):
    assert nearest_location(A, locations).name == "A"


def test_nearest_location_empty_registry():
    assert nearest_location(A, []) is None
