# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing.
"""

import tomllib
from pathlib import Path

from temperature_chart.utils import DEFAULT_TIMEOUT_SECONDS
from temperature_chart.weather import DEFAULT_HOST

DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_CACHE_PATH = ".cache/series.json"


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Optional keys are filled with their defaults, so callers can index
    config["cache"]["path"] etc. without checking.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing, or a value is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your API keys."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return _with_defaults(config)


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [geocoding]
        api_key = <str>        # Geoapify API key

        [weather]
        api_key = <str>        # RapidAPI key for Meteostat
        host    = <str>        # optional, defaults to meteostat.p.rapidapi.com

        [cache]                # optional
        path         = <str>   # JSON file backing the series cache
        max_age_days = <int>   # >= 1

        [location]             # optional, the CLI's "current position"
        latitude  = <float>
        longitude = <float>

        [http]                 # optional
        timeout = <float>      # seconds

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent or invalid.
    """
    for section in ("geocoding", "weather"):
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")
        api_key = config[section].get("api_key")
        if not api_key:
            raise ValueError(f"Missing required config key: [{section}].api_key")
        if not isinstance(api_key, str):
            raise ValueError(f"[{section}].api_key must be a string")

    max_age = config.get("cache", {}).get("max_age_days", 1)
    if isinstance(max_age, bool) or not isinstance(max_age, int) or max_age < 1:
        raise ValueError("[cache].max_age_days must be an integer >= 1")

    if "location" in config:
        location = config["location"]
        for key in ("latitude", "longitude"):
            if key not in location:
                raise ValueError(f"Missing required config key: [location].{key}")
            if isinstance(location[key], bool) or not isinstance(location[key], (int, float)):
                raise ValueError(f"[location].{key} must be a number")

    timeout = config.get("http", {}).get("timeout", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("[http].timeout must be a positive number of seconds")


def _with_defaults(config: dict) -> dict:
    config["weather"].setdefault("host", DEFAULT_HOST)
    cache = config.setdefault("cache", {})
    cache.setdefault("path", DEFAULT_CACHE_PATH)
    cache.setdefault("max_age_days", 1)
    config.setdefault("http", {}).setdefault("timeout", DEFAULT_TIMEOUT_SECONDS)
    return config


def position_from_config(config: dict) -> dict | None:
    """Return the [location] table as a Geolocation-style payload, or None.

    This is the CLI's stand-in for the browser position capability.
    """
    location = config.get("location")
    if not location:
        return None
    return {
        "coords": {
            "latitude": float(location["latitude"]),
            "longitude": float(location["longitude"]),
        }
    }
