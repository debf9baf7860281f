"""HTTP entrypoint serving nearby place searches."""

from __future__ import annotations

import logging
import os
from typing import Any

from flask import Flask, jsonify, request

from nearby_places.core.config import get_settings
from nearby_places.core.errors import InvalidInputError, ProviderError
from nearby_places.core.gateway import fetch_summary, find_nearby, resolve_query
from nearby_places.core.models import Coordinate
from nearby_places.core.params import parse_coordinate, parse_limit, parse_name
from nearby_places.etl.transform import to_result_rows, to_summary_row

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)


@app.after_request
def add_cors_headers(response: Any) -> Any:
    response.headers["Access-Control-Allow-Origin"] = get_settings().cors_allow_origin
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    """Simple root to avoid 404 on GET /"""
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; does not call any upstream provider."""
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "port": settings.port,
                "revision": os.getenv("K_REVISION", "unknown"),
            }
        ),
        200,
    )


@app.get("/places")
def places() -> Any:
    """
    Nearby places within the search radius, nearest first.
    Query params: query | category, lat, lng, limit (all optional)
    """
    settings = get_settings()
    args = request.args

    try:
        query = resolve_query(args.get("query"), args.get("category"), settings)
        center = parse_coordinate(
            args.get("lat"),
            args.get("lng"),
            default=Coordinate(settings.default_lat, settings.default_lng),
        )
        limit = parse_limit(args.get("limit"), default=settings.default_limit)
    except InvalidInputError as exc:
        return jsonify({"error": str(exc)}), 400

    try:
        results = find_nearby(query, center, limit=limit, settings=settings)
    except ProviderError as exc:
        logger.exception("Place search failed for query=%s: %s", query, exc)
        return jsonify({"error": "Failed to fetch places", "kind": exc.kind}), 500
    except Exception as exc:  # noqa: BLE001
        logger.exception("Place search crashed for query=%s: %s", query, exc)
        return jsonify({"error": "Failed to fetch places", "kind": "internal"}), 500

    return jsonify({"results": to_result_rows(results)}), 200


@app.get("/summary")
def summary() -> Any:
    """Encyclopedia summary for a place display name."""
    try:
        name = parse_name(request.args.get("name"))
        place_summary = fetch_summary(name)
    except InvalidInputError as exc:
        return jsonify({"error": str(exc)}), 400
    except ProviderError as exc:
        logger.exception("Summary lookup failed for name=%s: %s", request.args.get("name"), exc)
        return jsonify({"error": "Failed to fetch summary", "kind": exc.kind}), 500
    except Exception as exc:  # noqa: BLE001
        logger.exception("Summary lookup crashed for name=%s: %s", request.args.get("name"), exc)
        return jsonify({"error": "Failed to fetch summary", "kind": "internal"}), 500

    if place_summary is None:
        return jsonify({"error": "summary not found"}), 404

    return jsonify({"data": to_summary_row(place_summary)}), 200


def main() -> None:
    settings = get_settings()
    env_port = os.getenv("PORT")
    logger.info("[BOOT] ENV PORT=%s", env_port)

    port = settings.port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
