# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""temperature_chart — resolve a place, fetch its daily average temperature, chart it."""

__version__ = "0.1.0"
