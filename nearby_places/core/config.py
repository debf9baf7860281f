"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    port: int = 3001
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    wikipedia_base_url: str = "https://en.wikipedia.org/api/rest_v1"
    user_agent: str = "Smart-Places-App/1.0 (education)"
    default_query: str = "cafe"
    default_lat: float = 28.6139
    default_lng: float = 77.2090
    default_limit: int = 20
    radius_m: float = 5000.0
    viewbox_delta: float = 0.05
    upstream_limit: int = 50
    upstream_timeout: float = 10.0
    summary_extract_chars: int = 200
    cors_allow_origin: str = "*"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s.", name, raw, default)
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number; using %s.", name, raw, default)
        return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    defaults = Settings()
    user_agent = os.getenv("USER_AGENT", "").strip() or defaults.user_agent
    upstream_timeout = _env_float("UPSTREAM_TIMEOUT_SECONDS", defaults.upstream_timeout)

    if upstream_timeout <= 0:
        logger.warning("UPSTREAM_TIMEOUT_SECONDS must be positive; using %s.", defaults.upstream_timeout)
        upstream_timeout = defaults.upstream_timeout
    if not os.getenv("USER_AGENT"):
        logger.info("USER_AGENT is not set; identifying to Nominatim as %r.", user_agent)

    return Settings(
        port=_env_int("PORT", defaults.port),
        nominatim_base_url=os.getenv("NOMINATIM_BASE_URL", defaults.nominatim_base_url).rstrip("/"),
        wikipedia_base_url=os.getenv("WIKIPEDIA_BASE_URL", defaults.wikipedia_base_url).rstrip("/"),
        user_agent=user_agent,
        default_query=os.getenv("DEFAULT_QUERY", "").strip() or defaults.default_query,
        default_lat=_env_float("DEFAULT_LAT", defaults.default_lat),
        default_lng=_env_float("DEFAULT_LNG", defaults.default_lng),
        default_limit=_env_int("DEFAULT_LIMIT", defaults.default_limit),
        radius_m=_env_float("SEARCH_RADIUS_METERS", defaults.radius_m),
        viewbox_delta=_env_float("VIEWBOX_DELTA_DEGREES", defaults.viewbox_delta),
        upstream_limit=_env_int("UPSTREAM_LIMIT", defaults.upstream_limit),
        upstream_timeout=upstream_timeout,
        summary_extract_chars=_env_int("SUMMARY_EXTRACT_CHARS", defaults.summary_extract_chars),
        cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", defaults.cors_allow_origin),
    )
