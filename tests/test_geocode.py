# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_geocode.py — Unit tests for geocode.py.

All tests stub request_json — no real network calls.
"""

from unittest.mock import MagicMock

import pytest

from temperature_chart.errors import InvalidInput, NotFound, PermissionDenied, Unsupported, UpstreamError
from temperature_chart.geocode import geocode, resolve, resolve_current_position
from temperature_chart.models import Coordinates


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _feature(lat: float, lon: float, formatted: str = "Lagos, Nigeria") -> dict:
    return {
        "type": "Feature",
        "properties": {"formatted": formatted},
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
    }


def _collection(*features) -> dict:
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture()
def stub_geocoder(monkeypatch):
    """Install a fake request_json that answers from a place → coordinates table."""
    known = {
        "Lagos": (6.45, 3.39),
        "Tokyo": (35.6895, 139.6917),
    }
    calls = []

    def fake_request_json(url, params, **kw):
        calls.append(params)
        match = known.get(params["text"])
        return _collection(_feature(*match)) if match else _collection()

    monkeypatch.setattr("temperature_chart.geocode.request_json", fake_request_json)
    return calls


# ---------------------------------------------------------------------------
# geocode — successful cases
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("place, expected", [
    ("Lagos", Coordinates(6.45, 3.39)),
    ("Tokyo", Coordinates(35.6895, 139.6917)),
])
def test_geocode_returns_stub_coordinates(stub_geocoder, place, expected):
    assert geocode(place, "key") == expected


def test_geocode_swaps_geojson_lon_lat_order(monkeypatch):
    monkeypatch.setattr(
        "temperature_chart.geocode.request_json",
        lambda url, params, **kw: _collection(_feature(lat=48.8566, lon=2.3522)),
    )
    coords = geocode("Paris", "key")
    assert coords.latitude == pytest.approx(48.8566)
    assert coords.longitude == pytest.approx(2.3522)


def test_geocode_uses_first_feature_only(monkeypatch):
    payload = _collection(
        _feature(48.8566, 2.3522, "Paris, France"),
        _feature(33.6609, -95.5555, "Paris, Texas"),
    )
    monkeypatch.setattr("temperature_chart.geocode.request_json", lambda url, params, **kw: payload)

    assert geocode("Paris", "key").latitude == pytest.approx(48.8566)


def test_geocode_sends_text_and_api_key(stub_geocoder):
    geocode("  Lagos  ", "secret")
    assert stub_geocoder[0]["text"] == "Lagos"
    assert stub_geocoder[0]["apiKey"] == "secret"


# ---------------------------------------------------------------------------
# geocode — failures
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("place", ["", "   ", None])
def test_geocode_blank_place_raises_invalid_input_without_request(monkeypatch, place):
    fake = MagicMock()
    monkeypatch.setattr("temperature_chart.geocode.request_json", fake)

    with pytest.raises(InvalidInput, match="enter a city"):
        geocode(place, "key")
    fake.assert_not_called()


def test_geocode_raises_not_found_on_empty_features(stub_geocoder):
    with pytest.raises(NotFound, match="not found"):
        geocode("Nowhere123", "key")


def test_geocode_raises_not_found_when_features_key_missing(monkeypatch):
    monkeypatch.setattr("temperature_chart.geocode.request_json", lambda url, params, **kw: {})
    with pytest.raises(NotFound):
        geocode("Nowhere123", "key")


def test_geocode_raises_upstream_error_on_missing_geometry(monkeypatch):
    monkeypatch.setattr(
        "temperature_chart.geocode.request_json",
        lambda url, params, **kw: _collection({"properties": {}}),
    )
    with pytest.raises(UpstreamError):
        geocode("Lagos", "key")


def test_not_found_is_lookup_error():
    assert issubclass(NotFound, LookupError)


# ---------------------------------------------------------------------------
# resolve_current_position
# ---------------------------------------------------------------------------

def test_current_position_returns_coords():
    payload = {"coords": {"latitude": 6.45, "longitude": 3.39, "accuracy": 20}}
    assert resolve_current_position(lambda: payload) == Coordinates(6.45, 3.39)


def test_current_position_permission_denied():
    payload = {"error": {"code": 1, "message": "User denied Geolocation"}}
    with pytest.raises(PermissionDenied, match="permission denied"):
        resolve_current_position(lambda: payload)


def test_current_position_unavailable_is_unsupported():
    payload = {"error": {"code": 2, "message": "Position unavailable"}}
    with pytest.raises(Unsupported, match="Position unavailable"):
        resolve_current_position(lambda: payload)


@pytest.mark.parametrize("locate", [None, lambda: None, lambda: {"coords": {}}])
def test_current_position_without_capability_is_unsupported(locate):
    with pytest.raises(Unsupported):
        resolve_current_position(locate)


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------

def test_resolve_uses_geocoder_for_non_blank_place(stub_geocoder):
    locate = MagicMock()
    assert resolve("Lagos", "key", locate) == Coordinates(6.45, 3.39)
    locate.assert_not_called()


def test_resolve_uses_position_for_blank_place(stub_geocoder):
    coords = resolve("  ", "key", lambda: {"coords": {"latitude": 1.0, "longitude": 2.0}})
    assert coords == Coordinates(1.0, 2.0)
    assert stub_geocoder == []
