"""Utilities for transforming provider responses into response rows."""

import logging
import math
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional

from nearby_places.core.errors import ParseError
from nearby_places.core.models import CandidateRecord, PlaceSummary, RankedResult

logger = logging.getLogger(__name__)


def _coerce_float(value: Any) -> float:
    # Unparseable or non-finite coordinates become NaN so the distance filter drops them.
    try:
        number = float(value)
    except (TypeError, ValueError):
        return math.nan
    return number if math.isfinite(number) else math.nan


def to_candidate(result: Dict[str, Any]) -> CandidateRecord:
    return CandidateRecord(
        place_id=result.get("place_id"),
        display_name=result.get("display_name") or "",
        lat=_coerce_float(result.get("lat")),
        lng=_coerce_float(result.get("lon")),
        raw_snapshot=result,
    )


def to_candidates(payload: Any) -> List[CandidateRecord]:
    if not isinstance(payload, list):
        raise ParseError(f"expected a list of places, got {type(payload).__name__}", provider="nominatim")

    candidates: List[CandidateRecord] = []
    for item in payload:
        if not isinstance(item, dict):
            logger.debug("Skipping non-object search result: %r", item)
            continue
        candidates.append(to_candidate(item))
    return candidates


def to_result_row(result: RankedResult) -> Dict[str, Any]:
    return asdict(result)


def to_result_rows(results: Iterable[RankedResult]) -> List[Dict[str, Any]]:
    return [to_result_row(result) for result in results]


def summary_title(display_name: str) -> str:
    """Nominatim display names read "Name, Street, City, ..."; the first part is the title."""
    return (display_name or "").split(",")[0].strip()


def _truncate(text: Optional[str], max_chars: Optional[int]) -> Optional[str]:
    if text is None or max_chars is None or len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def _object_field(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key) or {}
    if not isinstance(value, dict):
        raise ParseError(f"summary field {key!r} should be an object, got {type(value).__name__}", provider="wikipedia")
    return value


def to_summary(payload: Dict[str, Any], fallback_title: str, max_chars: Optional[int] = None) -> PlaceSummary:
    thumbnail = _object_field(payload, "thumbnail")
    desktop = _object_field(_object_field(payload, "content_urls"), "desktop")

    return PlaceSummary(
        title=payload.get("title") or fallback_title,
        extract=_truncate(payload.get("extract"), max_chars),
        thumbnail=thumbnail.get("source"),
        page_url=desktop.get("page"),
    )


def to_summary_row(summary: PlaceSummary) -> Dict[str, Any]:
    return asdict(summary)
