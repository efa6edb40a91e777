# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
geocode.py — Turn a place name, or the device position, into Coordinates.

Place names go through the Geoapify geocoding API.
API docs: https://apidocs.geoapify.com/docs/geocoding/forward-geocoding/

The device position comes from a host "locate" callable that returns a
browser-style Geolocation payload (see resolve_current_position).
"""

import logging
from collections.abc import Callable

from temperature_chart.errors import InvalidInput, NotFound, PermissionDenied, Unsupported, UpstreamError
from temperature_chart.models import Coordinates
from temperature_chart.utils import DEFAULT_TIMEOUT_SECONDS, request_json

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://api.geoapify.com/v1/geocode/search"

# GeolocationPositionError codes
PERMISSION_DENIED = 1
POSITION_UNAVAILABLE = 2
TIMEOUT = 3

Locate = Callable[[], dict | None]


def geocode(place: str, api_key: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Coordinates:
    """Look up coordinates for a place name.

    Args:
        place: Human-readable place name, e.g. 'Lagos' or 'London, UK'.
        api_key: Geoapify API key.
        timeout: Request timeout in seconds.

    Returns:
        Coordinates of the first match. Later matches are ignored.

    Raises:
        InvalidInput: If place is blank. No request is made.
        NotFound: If the provider returns no features.
        UpstreamError: If the request fails or the payload is malformed.
    """
    place = (place or "").strip()
    if not place:
        raise InvalidInput("Please enter a city")

    params = {
        "text": place,
        "apiKey": api_key,
        "format": "geojson",
        "limit": 1,
    }
    data = request_json(GEOCODING_URL, params, label="Geocoding API", timeout=timeout)

    if not isinstance(data, dict):
        raise UpstreamError("Geocoding API returned an unexpected response")
    features = data.get("features") or []
    if not features:
        raise NotFound(f'City not found: "{place}". Try a more specific name.')

    # GeoJSON order is [longitude, latitude]
    try:
        lon, lat = features[0]["geometry"]["coordinates"][:2]
        coords = Coordinates(latitude=float(lat), longitude=float(lon))
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamError("Geocoding API response is missing coordinates") from e

    logger.info("Resolved %r to %s", place, coords)
    return coords


def resolve_current_position(locate: Locate | None) -> Coordinates:
    """Ask the host for the device position.

    The payload mirrors the browser Geolocation API::

        {"coords": {"latitude": 6.45, "longitude": 3.39}}         # success
        {"error": {"code": 1, "message": "User denied ..."}}      # failure

    A None payload, or no locate callable at all, means the host has no
    position capability.

    Raises:
        PermissionDenied: If the user refused to share the position.
        Unsupported: If the capability is absent or could not produce a fix.
    """
    if locate is None:
        raise Unsupported("Location is not supported here. Please enter a city.")

    payload = locate()
    if not payload:
        raise Unsupported("Location is not supported here. Please enter a city.")

    error = payload.get("error")
    if error:
        code = error.get("code") if isinstance(error, dict) else None
        message = error.get("message", "") if isinstance(error, dict) else str(error)
        if code == PERMISSION_DENIED:
            raise PermissionDenied("Location permission denied. Please enter a city.")
        raise Unsupported(f"Could not determine your location: {message or 'unknown error'}")

    coords = payload.get("coords") or {}
    try:
        position = Coordinates(
            latitude=float(coords["latitude"]),
            longitude=float(coords["longitude"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise Unsupported("Could not determine your location. Please enter a city.") from e

    logger.info("Using device position %s", position)
    return position


def resolve(
    place: str,
    api_key: str,
    locate: Locate | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Coordinates:
    """Geocode *place*, or fall back to the device position when it is blank."""
    if place and place.strip():
        return geocode(place, api_key, timeout=timeout)
    return resolve_current_position(locate)
