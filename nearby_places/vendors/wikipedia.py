"""Client utilities for the Wikipedia REST summary API."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from nearby_places.core.errors import ParseError, UpstreamError
from nearby_places.vendors.http import get_json

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_PROVIDER = "wikipedia"


def page_summary(
    title: str,
    *,
    base_url: str,
    user_agent: str,
    timeout: float = 10.0,
) -> Optional[Dict[str, Any]]:
    """Fetch the summary object for title, or None when no such article exists."""
    url = f"{base_url}/page/summary/{quote(title, safe='')}"
    headers = {"User-Agent": user_agent, "Accept": "application/json"}

    logger.info("Wikipedia summary url=%s", url)
    try:
        payload = get_json(_SESSION, url, provider=_PROVIDER, timeout=timeout, headers=headers)
    except UpstreamError as exc:
        if exc.status_code == 404:
            logger.info("No Wikipedia article for title=%s", title)
            return None
        raise

    if not isinstance(payload, dict):
        raise ParseError(f"expected a summary object, got {type(payload).__name__}", provider=_PROVIDER)
    return payload
