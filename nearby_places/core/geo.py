"""Spherical geometry helpers."""

from math import atan2, cos, isfinite, nan, radians, sin, sqrt

from nearby_places.core.models import Coordinate, Viewbox

EARTH_RADIUS_M = 6_371_000.0
DEFAULT_VIEWBOX_DELTA = 0.05


def haversine_m(lat1: float, lng1: float, lat2: float, lng2: float, radius_m: float = EARTH_RADIUS_M) -> float:
    """Great-circle distance in meters on a spherical earth.

    Non-finite inputs yield NaN; nothing is raised.
    """
    if not all(isfinite(value) for value in (lat1, lng1, lat2, lng2)):
        return nan

    d_lat = radians(lat2 - lat1)
    d_lng = radians(lng2 - lng1)

    value = (
        sin(d_lat / 2) ** 2
        + cos(radians(lat1)) * cos(radians(lat2)) * sin(d_lng / 2) ** 2
    )

    return 2 * radius_m * atan2(sqrt(value), sqrt(1 - value))


def distance_between(a: Coordinate, b: Coordinate, radius_m: float = EARTH_RADIUS_M) -> float:
    return haversine_m(a.lat, a.lng, b.lat, b.lng, radius_m=radius_m)


def build_viewbox(center: Coordinate, delta: float = DEFAULT_VIEWBOX_DELTA) -> Viewbox:
    """Square box of +/- delta degrees around center.

    Only a provider-side pre-filter; it is not geodesically exact and shrinks
    in east-west extent toward the poles.
    """
    return Viewbox(
        min_lng=center.lng - delta,
        max_lat=center.lat + delta,
        max_lng=center.lng + delta,
        min_lat=center.lat - delta,
    )


def format_viewbox(viewbox: Viewbox) -> str:
    return ",".join(str(value) for value in viewbox)
