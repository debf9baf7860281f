"""Client utilities for the Nominatim search API."""

import logging
from typing import Any, List

import requests

from nearby_places.core.geo import format_viewbox
from nearby_places.core.models import Viewbox
from nearby_places.vendors.http import get_json

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_PROVIDER = "nominatim"


def search(
    query: str,
    viewbox: Viewbox,
    *,
    base_url: str,
    user_agent: str,
    limit: int = 50,
    timeout: float = 10.0,
    bounded: bool = True,
) -> List[Any]:
    """Run a free-text search restricted to viewbox and return the raw result list."""
    params = {
        "format": "json",
        "q": query,
        "viewbox": format_viewbox(viewbox),
        "bounded": 1 if bounded else 0,
        "limit": limit,
    }
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    url = f"{base_url}/search"

    logger.info("Nominatim search url=%s params=%s", url, params)
    return get_json(_SESSION, url, provider=_PROVIDER, timeout=timeout, params=params, headers=headers)
