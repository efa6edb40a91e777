# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
weather.py — Fetch a daily average temperature series from Meteostat.

Meteostat is reached through RapidAPI, which authenticates with the
X-RapidAPI-Key / X-RapidAPI-Host header pair.

API docs: https://dev.meteostat.net/api/point/daily.html
"""

import logging

from temperature_chart.errors import InvalidInput, UpstreamError
from temperature_chart.models import Coordinates, DateRange, TemperatureSeries
from temperature_chart.utils import DEFAULT_TIMEOUT_SECONDS, request_json

logger = logging.getLogger(__name__)

DEFAULT_HOST = "meteostat.p.rapidapi.com"
DAILY_PATH = "/point/daily"


def fetch_series(
    coords: Coordinates,
    date_range: DateRange,
    api_key: str,
    host: str = DEFAULT_HOST,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> TemperatureSeries:
    """Fetch daily average temperature for a location and date range.

    Args:
        coords: Location to query.
        date_range: Inclusive calendar-date range.
        api_key: RapidAPI key.
        host: RapidAPI host for the Meteostat API.
        timeout: Request timeout in seconds.

    Returns:
        TemperatureSeries with one point per daily record, in provider order.

    Raises:
        InvalidInput: If date_range is not a valid DateRange.
        UpstreamError: If the request fails or the payload is malformed.
    """
    if not isinstance(date_range, DateRange) or date_range.start > date_range.end:
        raise InvalidInput("Please select a valid date range")

    start, end = date_range.to_iso()
    params = {
        "lat": coords.latitude,
        "lon": coords.longitude,
        "start": start,
        "end": end,
    }
    headers = {
        "X-RapidAPI-Key": api_key,
        "X-RapidAPI-Host": host,
    }
    data = request_json(
        f"https://{host}{DAILY_PATH}",
        params,
        headers=headers,
        label="Weather API",
        timeout=timeout,
    )

    series = _parse_daily(data)
    logger.info("Fetched %d daily readings for %s (%s to %s)", len(series), coords, start, end)
    return series


def _parse_daily(data: dict) -> TemperatureSeries:
    """Map Meteostat daily records to an index-aligned series.

    A record without tavg becomes a None value instead of being dropped.

    Raises:
        UpstreamError: If 'data' is missing or a record has no date.
    """
    try:
        records = data["data"]
    except (KeyError, TypeError) as e:
        raise UpstreamError("Failed to fetch temperature data: unexpected API response structure") from e
    if not isinstance(records, list):
        raise UpstreamError("Failed to fetch temperature data: unexpected API response structure")

    labels = []
    values = []
    for record in records:
        try:
            raw_date = record["date"]
        except (KeyError, TypeError) as e:
            raise UpstreamError("Failed to fetch temperature data: record without a date") from e
        tavg = record.get("tavg")
        try:
            value = None if tavg is None else float(tavg)
        except (TypeError, ValueError) as e:
            raise UpstreamError("Failed to fetch temperature data: invalid tavg") from e
        # Meteostat may return '2024-01-01 00:00:00'
        labels.append(str(raw_date)[:10])
        values.append(value)

    return TemperatureSeries(labels=tuple(labels), values=tuple(values))
