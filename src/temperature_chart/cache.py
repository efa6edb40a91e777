# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cache.py — Local key-value cache for fetched temperature series.

Entries are keyed by coordinates, day-count and the range end date, so a
new calendar day naturally produces a new key. On top of that every entry
records the day it was fetched and is ignored once it is older than max_age.
"""

import json
import logging
import os
import tempfile
import threading
from collections.abc import Callable, Iterator, MutableMapping
from datetime import date, timedelta
from pathlib import Path

from temperature_chart.errors import InvalidInput
from temperature_chart.models import Coordinates, TemperatureSeries

logger = logging.getLogger(__name__)

KEY_PREFIX = "tavg_"
DEFAULT_MAX_AGE = timedelta(days=1)


def cache_key(coords: Coordinates, day_count: int, end: date) -> str:
    """Build the cache key for a (coordinates, day-count) request ending on *end*.

    Coordinates are rounded to 4 decimal places (about 11 m).
    """
    return f"{KEY_PREFIX}{coords.latitude:.4f}_{coords.longitude:.4f}_{day_count}_{end.isoformat()}"


class JsonFileStore(MutableMapping):
    """A str → str mapping persisted to a single JSON file.

    Every write rewrites the file through a temp file + os.replace, so a
    crash never leaves a half-written cache behind. Writes are serialized
    with a lock; one store may be shared by every Streamlit session thread.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._data: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring cache file %s: not a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        # Caller holds self._lock
        snapshot = dict(self._data)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".series-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(snapshot, f)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self._flush()

    def __delitem__(self, key: str) -> None:
        with self._lock:
            del self._data[key]
            self._flush()

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            keys = list(self._data)
        return iter(keys)

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data = {}
            self._flush()


class SeriesCache:
    """Cache of TemperatureSeries over a str → JSON-text store.

    Args:
        store: Backing mapping. Defaults to a fresh in-memory dict.
        max_age: Entries fetched longer ago than this are treated as absent.
        clock: Returns today's date; injectable for tests.
    """

    def __init__(
        self,
        store: MutableMapping[str, str] | None = None,
        max_age: timedelta = DEFAULT_MAX_AGE,
        clock: Callable[[], date] = date.today,
    ) -> None:
        if max_age < timedelta(days=1):
            raise ValueError("max_age must be at least one day")
        self.store = {} if store is None else store
        self.max_age = max_age
        self.clock = clock

    def get(self, key: str) -> TemperatureSeries | None:
        """Return the cached series for *key*, or None if absent or stale.

        Never touches the network.
        """
        raw = self.store.get(key)
        if raw is None:
            logger.info("Cache miss for %s", key)
            return None

        try:
            entry = json.loads(raw)
            fetched_on = date.fromisoformat(entry["fetched_on"])
            series = TemperatureSeries.from_dict(entry["series"])
        except (ValueError, KeyError, TypeError, InvalidInput) as e:
            logger.warning("Discarding corrupt cache entry %s: %s", key, e)
            return None

        if self.clock() - fetched_on >= self.max_age:
            logger.info("Cache entry %s from %s is stale", key, fetched_on)
            return None

        logger.info("Cache hit for %s", key)
        return series

    def put(self, key: str, series: TemperatureSeries) -> None:
        """Store *series* under *key*, replacing any previous entry."""
        entry = {
            "fetched_on": self.clock().isoformat(),
            "series": series.to_dict(),
        }
        self.store[key] = json.dumps(entry)

    def clear(self) -> None:
        self.store.clear()

    def __len__(self) -> int:
        return len(self.store)
