import math

import pytest

from nearby_places.core import geo
from nearby_places.core.models import Coordinate, Viewbox


def test_haversine_identical_points_is_zero():
    assert geo.haversine_m(28.6139, 77.2090, 28.6139, 77.2090) == 0


def test_haversine_is_symmetric():
    a = (28.6139, 77.2090)
    b = (40.7128, -74.0060)
    assert geo.haversine_m(*a, *b) == pytest.approx(geo.haversine_m(*b, *a))


def test_haversine_one_degree_on_equator():
    assert geo.haversine_m(0, 0, 0, 1) == pytest.approx(111_195, abs=1)


def test_haversine_antipodal_is_half_circumference():
    assert geo.haversine_m(0, 0, 0, 180) == pytest.approx(math.pi * geo.EARTH_RADIUS_M)


def test_haversine_triangle_inequality():
    a, b, c = (0, 0), (10, 10), (20, -5)
    ab = geo.haversine_m(*a, *b)
    bc = geo.haversine_m(*b, *c)
    ac = geo.haversine_m(*a, *c)
    assert ac <= ab + bc


def test_haversine_propagates_nan():
    assert math.isnan(geo.haversine_m(float("nan"), 0, 0, 0))


def test_distance_between_uses_coordinates():
    assert geo.distance_between(Coordinate(0, 0), Coordinate(0, 1)) == pytest.approx(111_195, abs=1)


def test_build_viewbox_order_and_delta():
    box = geo.build_viewbox(Coordinate(28.6, 77.2), delta=0.05)

    assert isinstance(box, Viewbox)
    assert box.min_lng == pytest.approx(77.15)
    assert box.max_lat == pytest.approx(28.65)
    assert box.max_lng == pytest.approx(77.25)
    assert box.min_lat == pytest.approx(28.55)


def test_format_viewbox_joins_with_commas():
    assert geo.format_viewbox(Viewbox(1.0, 2.0, 3.0, 4.0)) == "1.0,2.0,3.0,4.0"


def test_haversine_non_finite_yields_nan():
    assert math.isnan(geo.haversine_m(float("inf"), 0, 0, 0))
    assert math.isnan(geo.haversine_m(0, 0, 0, float("-inf")))
