import pytest

from nearby_places.core import gateway
from nearby_places.core.config import Settings
from nearby_places.core.errors import InvalidInputError, NetworkError
from nearby_places.core.models import Coordinate

NEW_DELHI = Coordinate(28.6139, 77.2090)

DELHI_PAYLOAD = [
    {"place_id": 1, "display_name": "Cafe One, New Delhi", "lat": "28.62", "lon": "77.21"},
    {"place_id": 2, "display_name": "Cafe Two, Delhi", "lat": "28.70", "lon": "77.30"},
    {"place_id": 3, "display_name": "Cafe Three, New Delhi", "lat": "28.615", "lon": "77.205"},
]


@pytest.fixture
def settings():
    return Settings(nominatim_base_url="https://nominatim.example", upstream_timeout=3.0)


def test_find_nearby_filters_and_orders(monkeypatch, settings):
    seen = {}

    def fake_search(query, viewbox, **kwargs):
        seen.update(query=query, viewbox=viewbox, **kwargs)
        return DELHI_PAYLOAD

    monkeypatch.setattr(gateway.nominatim, "search", fake_search)

    results = gateway.find_nearby("cafe", NEW_DELHI, limit=20, settings=settings)

    assert [r.id for r in results] == [3, 1]
    assert results[0].distance <= results[1].distance
    assert seen["query"] == "cafe"
    assert seen["viewbox"].min_lng == pytest.approx(77.159)
    assert seen["viewbox"].max_lat == pytest.approx(28.6639)
    assert seen["limit"] == 50
    assert seen["timeout"] == 3.0
    assert seen["base_url"] == "https://nominatim.example"


def test_find_nearby_defaults_limit_from_settings(monkeypatch):
    monkeypatch.setattr(gateway.nominatim, "search", lambda *a, **k: DELHI_PAYLOAD)

    results = gateway.find_nearby("cafe", NEW_DELHI, settings=Settings(default_limit=1))

    assert [r.id for r in results] == [3]


def test_find_nearby_propagates_provider_errors(monkeypatch, settings):
    def boom(*args, **kwargs):
        raise NetworkError("down", provider="nominatim")

    monkeypatch.setattr(gateway.nominatim, "search", boom)

    with pytest.raises(NetworkError):
        gateway.find_nearby("cafe", NEW_DELHI, settings=settings)


def test_resolve_query(settings):
    assert gateway.resolve_query(" pizza ", "date", settings) == "pizza"
    assert gateway.resolve_query(None, "quick", settings) == "fast_food"
    assert gateway.resolve_query("", None, settings) == "cafe"
    with pytest.raises(InvalidInputError):
        gateway.resolve_query(None, "brunch", settings)


def test_fetch_summary(monkeypatch, settings):
    titles = []

    def fake_summary(title, **kwargs):
        titles.append(title)
        return {"title": title, "extract": "A war memorial."}

    monkeypatch.setattr(gateway.wikipedia, "page_summary", fake_summary)

    summary = gateway.fetch_summary("India Gate, Rajpath, New Delhi", settings=settings)

    assert titles == ["India Gate"]
    assert summary.title == "India Gate"
    assert summary.extract == "A war memorial."


def test_fetch_summary_not_found(monkeypatch, settings):
    monkeypatch.setattr(gateway.wikipedia, "page_summary", lambda title, **kwargs: None)
    assert gateway.fetch_summary("Nowhere Cafe", settings=settings) is None


def test_fetch_summary_requires_title(settings):
    with pytest.raises(InvalidInputError):
        gateway.fetch_summary(", Delhi", settings=settings)
