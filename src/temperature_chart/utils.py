# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared helpers: one-shot JSON GET and date label formatting.

Provider calls are never retried. A failed call raises UpstreamError and the
page shows the message for that trigger.
"""

import logging
from datetime import date, datetime
from typing import Any

import requests

from temperature_chart.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10


def fmt_day(date_str: str) -> str:
    """Format a date string as a short human-readable label.

    Args:
        date_str: Date in 'YYYY-MM-DD' format.

    Returns:
        Formatted string like 'Mon 24 Feb'.
    """
    dt = datetime.strptime(date_str, "%Y-%m-%d")
    return dt.strftime("%a %d %b")


def parse_iso_date(value: date | str) -> date:
    """Return *value* as a date, parsing 'YYYY-MM-DD' strings.

    Raises:
        ValueError: If the string is not an ISO calendar date.
        TypeError: If value is neither a date nor a string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected a date or ISO string, got {type(value).__name__}")
    return date.fromisoformat(value.strip())


def request_json(
    url: str,
    params: dict[str, Any],
    *,
    headers: dict[str, str] | None = None,
    label: str = "API call",
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Any:
    """Issue a single GET request and decode the JSON body.

    Args:
        url: Endpoint URL.
        params: Query parameters.
        headers: Optional extra request headers.
        label: Human-readable name for the call, used in messages.
        timeout: Seconds before the request is abandoned.

    Returns:
        The decoded JSON payload.

    Raises:
        UpstreamError: On transport failure, non-success status or invalid JSON.
    """
    logger.debug("GET %s (%s)", url, label)
    try:
        r = requests.get(url, params=params, headers=headers, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        logger.warning("%s returned HTTP %s", label, status)
        raise UpstreamError(f"{label} failed with HTTP {status}") from e
    except requests.RequestException as e:
        logger.warning("%s failed: %s", label, e)
        raise UpstreamError(f"{label} is unreachable. Check your internet connection.") from e

    try:
        return r.json()
    except ValueError as e:
        logger.warning("%s returned a non-JSON body", label)
        raise UpstreamError(f"{label} returned an invalid response") from e
