# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
pipeline.py — Resolver → Cache → Fetcher orchestration behind the Chart Page.

ChartPipeline runs one request end to end. ChartPage wraps it with the
token-tagged state machine from state.py.
"""

import logging
from collections.abc import Callable
from datetime import date
from functools import partial

from temperature_chart.cache import SeriesCache, cache_key
from temperature_chart.dates import DEFAULT_DAY_COUNT, resolve_effective_range
from temperature_chart.errors import ChartError
from temperature_chart.geocode import Locate, resolve
from temperature_chart.models import Coordinates, DateRange, TemperatureSeries
from temperature_chart.state import Failed, Succeeded, Triggered, UIState, reduce
from temperature_chart.weather import fetch_series

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Coordinates]
Fetcher = Callable[[Coordinates, DateRange], TemperatureSeries]


class ChartPipeline:
    """Resolve a place, then serve its series from cache or the weather provider.

    Args:
        resolver: place text → Coordinates. Blank text means "current position".
        fetcher: (Coordinates, DateRange) → TemperatureSeries.
        cache: Series cache; None disables caching.
    """

    def __init__(self, resolver: Resolver, fetcher: Fetcher, cache: SeriesCache | None = None) -> None:
        self.resolver = resolver
        self.fetcher = fetcher
        self.cache = cache

    @classmethod
    def from_config(
        cls,
        config: dict,
        locate: Locate | None = None,
        cache: SeriesCache | None = None,
    ) -> "ChartPipeline":
        """Wire the Geoapify resolver and Meteostat fetcher from a loaded config."""
        timeout = config["http"]["timeout"]
        resolver = partial(
            resolve,
            api_key=config["geocoding"]["api_key"],
            locate=locate,
            timeout=timeout,
        )
        fetcher = partial(
            fetch_series,
            api_key=config["weather"]["api_key"],
            host=config["weather"]["host"],
            timeout=timeout,
        )
        return cls(resolver, fetcher, cache)

    def run(
        self,
        city: str,
        day_count: int = DEFAULT_DAY_COUNT,
        start: date | str | None = None,
        end: date | str | None = None,
        today: date | None = None,
    ) -> tuple[TemperatureSeries, DateRange, bool]:
        """Return (series, effective range, served_from_cache).

        Raises:
            ChartError: Any resolver, range or fetcher failure.
        """
        # Range first: a bad range must not cost a geocoding call
        date_range = resolve_effective_range(day_count, start, end, today=today)
        coords = self.resolver(city)

        key = cache_key(coords, date_range.day_count, date_range.end)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return cached, date_range, True

        series = self.fetcher(coords, date_range)
        if self.cache is not None:
            try:
                self.cache.put(key, series)
            except OSError as e:
                logger.warning("Could not store %s in the cache: %s", key, e)
        return series, date_range, False


class ChartPage:
    """Owns the Chart Page UIState and applies pipeline results to it."""

    def __init__(self, pipeline: ChartPipeline, state: UIState | None = None) -> None:
        self.pipeline = pipeline
        self.state = state or UIState()
        self._last_token = self.state.token

    def dispatch(self, event) -> UIState:
        self.state = reduce(self.state, event)
        return self.state

    def begin(
        self,
        city: str,
        day_count: int = DEFAULT_DAY_COUNT,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> int:
        """Enter Loading for a new trigger and return its token."""
        self._last_token += 1
        self.dispatch(Triggered(
            token=self._last_token,
            city=city,
            day_count=day_count,
            start_date=start if isinstance(start, date) else None,
            end_date=end if isinstance(end, date) else None,
        ))
        return self._last_token

    def complete(
        self,
        token: int,
        city: str,
        day_count: int = DEFAULT_DAY_COUNT,
        start: date | str | None = None,
        end: date | str | None = None,
        today: date | None = None,
    ) -> UIState:
        """Run the pipeline for trigger *token* and apply its outcome."""
        try:
            series, date_range, from_cache = self.pipeline.run(city, day_count, start, end, today=today)
        except ChartError as e:
            logger.info("Trigger %d failed: %s", token, e)
            return self.dispatch(Failed(token=token, message=str(e)))
        return self.dispatch(Succeeded(
            token=token,
            series=series,
            from_cache=from_cache,
            start_date=date_range.start,
            end_date=date_range.end,
        ))

    def trigger(
        self,
        city: str,
        day_count: int = DEFAULT_DAY_COUNT,
        start: date | str | None = None,
        end: date | str | None = None,
        today: date | None = None,
    ) -> UIState:
        """Start and finish one pipeline run (mount, city edit, day-count change, refresh)."""
        token = self.begin(city, day_count, start, end)
        return self.complete(token, city, day_count, start, end, today=today)
