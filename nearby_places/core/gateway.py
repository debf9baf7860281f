"""Query gateway: provider lookup followed by distance ranking."""

import logging
from typing import Dict, List, Optional

from nearby_places.core.config import Settings, get_settings
from nearby_places.core.errors import InvalidInputError
from nearby_places.core.geo import build_viewbox
from nearby_places.core.models import Coordinate, PlaceSummary, RankedResult
from nearby_places.core.ranking import rank_candidates
from nearby_places.etl import transform
from nearby_places.vendors import nominatim, wikipedia

logger = logging.getLogger(__name__)

CATEGORY_QUERIES: Dict[str, str] = {
    "date": "cafe",
    "restaurant": "restaurant",
    "quick": "fast_food",
}


def resolve_query(query: Optional[str], category: Optional[str], settings: Settings) -> str:
    """An explicit query wins; otherwise a category preset; otherwise the default term."""
    if query and query.strip():
        return query.strip()
    if category:
        try:
            return CATEGORY_QUERIES[category.strip().lower()]
        except KeyError:
            raise InvalidInputError(
                f"unknown category {category!r}; expected one of {', '.join(sorted(CATEGORY_QUERIES))}"
            ) from None
    return settings.default_query


def find_nearby(
    query: str,
    center: Coordinate,
    limit: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> List[RankedResult]:
    """Search the provider around center and return ranked results within the radius.

    Provider errors propagate unchanged: no partial results, no retry.
    """
    settings = settings or get_settings()
    if limit is None:
        limit = settings.default_limit

    viewbox = build_viewbox(center, delta=settings.viewbox_delta)
    raw = nominatim.search(
        query,
        viewbox,
        base_url=settings.nominatim_base_url,
        user_agent=settings.user_agent,
        limit=settings.upstream_limit,
        timeout=settings.upstream_timeout,
    )
    candidates = transform.to_candidates(raw)
    results = rank_candidates(center, candidates, limit=limit, radius_m=settings.radius_m)

    logger.info(
        "query=%s center=%s,%s candidates=%d returned=%d",
        query,
        center.lat,
        center.lng,
        len(candidates),
        len(results),
    )
    return results


def fetch_summary(name: str, settings: Optional[Settings] = None) -> Optional[PlaceSummary]:
    settings = settings or get_settings()
    title = transform.summary_title(name)
    if not title:
        raise InvalidInputError("name must contain a place title")

    payload = wikipedia.page_summary(
        title,
        base_url=settings.wikipedia_base_url,
        user_agent=settings.user_agent,
        timeout=settings.upstream_timeout,
    )
    if payload is None:
        return None
    return transform.to_summary(payload, fallback_title=title, max_chars=settings.summary_extract_chars)
