# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
models.py — Value objects shared by the resolver, fetcher, cache and pages.

All of them are frozen dataclasses: once a request has produced coordinates
or a series, nothing downstream may change them.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

from temperature_chart.errors import InvalidInput


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude:.4f}°, {self.longitude:.4f}°"


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range with start <= end."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidInput(
                f"Please select a valid date range ({self.start} is after {self.end})"
            )

    @property
    def day_count(self) -> int:
        return (self.end - self.start).days

    def to_iso(self) -> tuple[str, str]:
        return self.start.isoformat(), self.end.isoformat()


@dataclass(frozen=True)
class TemperatureSeries:
    """Index-aligned date labels and daily average temperatures in °C.

    A missing reading is kept as None so labels[i] always matches values[i].
    """

    labels: tuple[str, ...]
    values: tuple[float | None, ...]

    def __post_init__(self) -> None:
        # Accept lists from callers and JSON, store tuples
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.labels) != len(self.values):
            raise InvalidInput(
                f"Series is misaligned: {len(self.labels)} labels "
                f"for {len(self.values)} values"
            )

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def rows(self) -> Iterator[tuple[str, float | None]]:
        return zip(self.labels, self.values)

    def to_dict(self) -> dict:
        """Return the {labels, values} shape used for the cache and page navigation."""
        return {"labels": list(self.labels), "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: dict) -> "TemperatureSeries":
        """Build a series from a {labels, values} mapping.

        Raises:
            InvalidInput: If either key is missing or the lengths differ.
        """
        try:
            labels = data["labels"]
            values = data["values"]
        except (KeyError, TypeError) as exc:
            raise InvalidInput(f"Series data is missing {exc}") from exc
        return cls(
            labels=tuple(str(label) for label in labels),
            values=tuple(None if v is None else float(v) for v in values),
        )

    @classmethod
    def empty(cls) -> "TemperatureSeries":
        return cls(labels=(), values=())
