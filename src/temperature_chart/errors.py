# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
errors.py — Error kinds raised along the location → temperature pipeline.

Every kind is terminal for the trigger that raised it. The page layer only
shows str(error), so messages are written for humans.
"""


class ChartError(Exception):
    """Base class for every failure the chart pipeline surfaces."""


class InvalidInput(ChartError, ValueError):
    """Empty city, bad date range or malformed series."""


class NotFound(ChartError, LookupError):
    """The geocoding provider returned no match."""


class PermissionDenied(ChartError):
    """The host refused access to the device position."""


class Unsupported(ChartError):
    """The host has no position capability, or could not provide a fix."""


class UpstreamError(ChartError, RuntimeError):
    """A provider answered with a non-success status or a malformed payload."""
