"""CLI job to run a single nearby place search and print the ranked results."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from nearby_places.core.config import get_settings
from nearby_places.core.errors import InvalidInputError, ProviderError
from nearby_places.core.gateway import CATEGORY_QUERIES, find_nearby, resolve_query
from nearby_places.core.models import Coordinate
from nearby_places.core.params import parse_coordinate, parse_limit
from nearby_places.etl.transform import to_result_rows

logger = logging.getLogger(__name__)


def run_search(
    *,
    query: Optional[str],
    category: Optional[str],
    lat: Optional[str],
    lng: Optional[str],
    limit: Optional[str],
) -> dict:
    settings = get_settings()

    resolved = resolve_query(query, category, settings)
    center = parse_coordinate(lat, lng, default=Coordinate(settings.default_lat, settings.default_lng))
    max_results = parse_limit(limit, default=settings.default_limit)

    logger.info("Running nearby search for query=%s around %s,%s", resolved, center.lat, center.lng)
    results = find_nearby(resolved, center, limit=max_results, settings=settings)
    return {"results": to_result_rows(results)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search for places near a coordinate")
    parser.add_argument("query", nargs="?", help="Free-text search term, e.g. 'cafe'")
    parser.add_argument("--category", choices=sorted(CATEGORY_QUERIES), help="Preset used when no query is given")
    parser.add_argument("--lat", help="Center latitude in degrees")
    parser.add_argument("--lng", help="Center longitude in degrees")
    parser.add_argument(
        "--limit",
        default=str(get_settings().default_limit),
        help="Maximum number of results to print",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        payload = run_search(
            query=args.query,
            category=args.category,
            lat=args.lat,
            lng=args.lng,
            limit=args.limit,
        )
    except InvalidInputError as exc:
        logger.error("Invalid input: %s", exc)
        raise SystemExit(2) from exc
    except ProviderError as exc:
        logger.error("Search failed (%s): %s", exc.kind, exc)
        raise SystemExit(1) from exc

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
