"""Core data models shared by the nearby places pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional


class Coordinate(NamedTuple):
    lat: float
    lng: float


class Viewbox(NamedTuple):
    """Bounding rectangle in the order Nominatim expects."""

    min_lng: float
    max_lat: float
    max_lng: float
    min_lat: float


@dataclass(slots=True)
class CandidateRecord:
    """Normalized snapshot of a place returned by the search provider."""

    place_id: Any
    display_name: str
    lat: float
    lng: float
    raw_snapshot: Optional[Dict[str, Any]] = field(default=None, repr=False)


@dataclass(slots=True)
class RankedResult:
    id: Any
    name: str
    lat: float
    lng: float
    distance: float


@dataclass(slots=True)
class PlaceSummary:
    """Encyclopedia summary used to enrich a selected place."""

    title: str
    extract: Optional[str] = None
    thumbnail: Optional[str] = None
    page_url: Optional[str] = None
