"""Distance filter and ranking for provider candidates."""

import logging
from typing import Iterable, List, Optional

from nearby_places.core.geo import haversine_m
from nearby_places.core.models import CandidateRecord, Coordinate, RankedResult

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 5000.0
DEFAULT_LIMIT = 20


def rank_candidates(
    center: Coordinate,
    candidates: Iterable[CandidateRecord],
    limit: Optional[int] = DEFAULT_LIMIT,
    radius_m: float = DEFAULT_RADIUS_M,
) -> List[RankedResult]:
    """Keep candidates within radius_m of center, nearest first, at most limit of them.

    The sort is stable so equidistant candidates keep provider order. A NaN
    distance never satisfies ``<= radius_m`` and is dropped.
    """
    if limit is None:
        limit = DEFAULT_LIMIT

    ranked: List[RankedResult] = []
    for candidate in candidates:
        dist = haversine_m(center.lat, center.lng, candidate.lat, candidate.lng)
        if not dist <= radius_m:
            logger.debug("Dropping %s at %.1fm", candidate.place_id, dist)
            continue
        ranked.append(
            RankedResult(
                id=candidate.place_id,
                name=candidate.display_name,
                lat=candidate.lat,
                lng=candidate.lng,
                distance=dist,
            )
        )

    ranked.sort(key=lambda result: result.distance)
    return ranked[: max(limit, 0)]
