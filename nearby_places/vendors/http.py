"""Shared GET-and-decode helper that maps requests failures onto provider errors."""

import logging
from typing import Any, Dict, Optional

import requests

from nearby_places.core.errors import NetworkError, ParseError, UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)


def get_json(
    session: requests.Session,
    url: str,
    *,
    provider: str,
    timeout: float,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    try:
        response = session.get(url, params=params, headers=headers, timeout=timeout)
    except requests.Timeout as exc:
        logger.error("%s request timed out after %ss: %s", provider, timeout, url)
        raise UpstreamTimeoutError(f"{provider} did not respond within {timeout}s", provider=provider) from exc
    except requests.RequestException as exc:
        logger.error("%s request failed: %s", provider, exc)
        raise NetworkError(f"{provider} is unreachable: {exc}", provider=provider) from exc

    if not 200 <= response.status_code < 300:
        logger.error("%s returned status=%s for %s", provider, response.status_code, url)
        raise UpstreamError(
            f"{provider} returned HTTP {response.status_code}",
            status_code=response.status_code,
            provider=provider,
        )

    try:
        return response.json()
    except ValueError as exc:
        logger.error("%s returned a non-JSON body for %s", provider, url)
        raise ParseError(f"{provider} returned a non-JSON body", provider=provider) from exc
