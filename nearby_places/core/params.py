"""Parsing of user-supplied search parameters (query string or CLI)."""

import math
from typing import Any, Optional

from nearby_places.core.errors import InvalidInputError
from nearby_places.core.models import Coordinate


def _parse_degrees(name: str, raw: Any, default: float, bound: float) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be numeric") from None
    if not math.isfinite(value) or not -bound <= value <= bound:
        raise InvalidInputError(f"{name} must be between -{bound:g} and {bound:g}")
    return value


def parse_coordinate(lat_raw: Any, lng_raw: Any, default: Coordinate) -> Coordinate:
    return Coordinate(
        lat=_parse_degrees("lat", lat_raw, default.lat, 90),
        lng=_parse_degrees("lng", lng_raw, default.lng, 180),
    )


def parse_limit(raw: Any, default: int) -> int:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    if isinstance(raw, bool):
        raise InvalidInputError("limit must be an integer")
    try:
        number = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError("limit must be an integer") from None
    # "5.0" is accepted; "2.5" and "inf" are not.
    if not math.isfinite(number) or not number.is_integer():
        raise InvalidInputError("limit must be an integer")
    limit = int(number)
    if limit < 0:
        raise InvalidInputError("limit must not be negative")
    return limit


def parse_name(raw: Optional[str]) -> str:
    name = (raw or "").strip()
    if not name:
        raise InvalidInputError("name is required")
    return name
