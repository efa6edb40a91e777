# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_weather.py — Unit tests for weather.py.

All tests use in-memory fake API payloads — no network calls.
"""

from datetime import date, timedelta

import pytest

from temperature_chart.errors import InvalidInput, UpstreamError
from temperature_chart.models import Coordinates, DateRange
from temperature_chart.weather import _parse_daily, fetch_series

LAGOS = Coordinates(6.45, 3.39)
WEEK = DateRange(date(2024, 1, 1), date(2024, 1, 7))


def _make_daily_payload(temps: list, base: date = date(2024, 1, 1)) -> dict:
    """Build a minimal Meteostat daily response, one record per temperature."""
    return {
        "meta": {"generated": "2024-01-08 10:00:00"},
        "data": [
            {
                "date": (base + timedelta(days=i)).isoformat(),
                "tavg": t,
                "tmin": None,
                "tmax": None,
            }
            for i, t in enumerate(temps)
        ],
    }


# ---------------------------------------------------------------------------
# _parse_daily
# ---------------------------------------------------------------------------

def test_parse_daily_keeps_length_and_order():
    temps = [26.1, 26.4, 27.0, 26.8, 26.2, 26.0, 25.9]
    series = _parse_daily(_make_daily_payload(temps))
    assert len(series.labels) == len(series.values) == 7
    assert list(series.values) == temps
    assert series.labels[0] == "2024-01-01"
    assert series.labels[-1] == "2024-01-07"


def test_parse_daily_preserves_null_tavg():
    series = _parse_daily(_make_daily_payload([20.0, None, 22.0]))
    assert series.values == (20.0, None, 22.0)
    assert len(series.labels) == 3


def test_parse_daily_missing_tavg_key_is_null():
    payload = {"data": [{"date": "2024-01-01"}]}
    assert _parse_daily(payload).values == (None,)


def test_parse_daily_trims_time_of_day():
    payload = {"data": [{"date": "2024-01-01 00:00:00", "tavg": 1.5}]}
    assert _parse_daily(payload).labels == ("2024-01-01",)


def test_parse_daily_empty_data_is_empty_series():
    assert _parse_daily({"data": []}).is_empty


@pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": "nope"}, None])
def test_parse_daily_raises_on_missing_data(payload):
    with pytest.raises(UpstreamError, match="unexpected API response structure"):
        _parse_daily(payload)


def test_parse_daily_raises_on_record_without_date():
    with pytest.raises(UpstreamError, match="without a date"):
        _parse_daily({"data": [{"tavg": 3.0}]})


@pytest.mark.parametrize("tavg", ["n/a", "", [1.0], {"v": 1}])
def test_parse_daily_raises_on_non_numeric_tavg(tavg):
    payload = {"data": [{"date": "2024-01-01", "tavg": 20.0}, {"date": "2024-01-02", "tavg": tavg}]}
    with pytest.raises(UpstreamError, match="invalid tavg"):
        _parse_daily(payload)


def test_parse_daily_accepts_numeric_string_tavg():
    assert _parse_daily({"data": [{"date": "2024-01-01", "tavg": "21.5"}]}).values == (21.5,)


# ---------------------------------------------------------------------------
# fetch_series
# ---------------------------------------------------------------------------

def test_fetch_series_sends_range_and_rapidapi_headers(monkeypatch):
    seen = {}

    def fake_request_json(url, params, headers=None, **kw):
        seen.update(url=url, params=params, headers=headers)
        return _make_daily_payload([25.0] * 7)

    monkeypatch.setattr("temperature_chart.weather.request_json", fake_request_json)
    series = fetch_series(LAGOS, WEEK, api_key="rapid-key")

    assert len(series) == 7
    assert seen["url"] == "https://meteostat.p.rapidapi.com/point/daily"
    assert seen["params"] == {"lat": 6.45, "lon": 3.39, "start": "2024-01-01", "end": "2024-01-07"}
    assert seen["headers"]["X-RapidAPI-Key"] == "rapid-key"
    assert seen["headers"]["X-RapidAPI-Host"] == "meteostat.p.rapidapi.com"


def test_fetch_series_propagates_upstream_error(monkeypatch):
    def failing(url, params, **kw):
        raise UpstreamError("Weather API failed with HTTP 500")

    monkeypatch.setattr("temperature_chart.weather.request_json", failing)
    with pytest.raises(UpstreamError, match="HTTP 500"):
        fetch_series(LAGOS, WEEK, api_key="k")


def test_fetch_series_rejects_non_range(monkeypatch):
    monkeypatch.setattr(
        "temperature_chart.weather.request_json",
        lambda *a, **kw: pytest.fail("no request expected"),
    )
    with pytest.raises(InvalidInput):
        fetch_series(LAGOS, ("2024-01-07", "2024-01-01"), api_key="k")
