# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
state.py — Chart Page state and the pure reducer that drives it.

    idle ──Triggered──▶ loading ──Succeeded──▶ success
                           │
                           └────Failed──────▶ error

Every trigger carries a token. A completion is applied only when its token
matches the latest Triggered token; older in-flight results are dropped.
"""

from dataclasses import dataclass, replace
from datetime import date

from temperature_chart.dates import DEFAULT_DAY_COUNT
from temperature_chart.models import TemperatureSeries

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class UIState:
    city: str = ""
    day_count: int = DEFAULT_DAY_COUNT
    start_date: date | None = None
    end_date: date | None = None
    series: TemperatureSeries | None = None
    error: str | None = None
    is_loading: bool = False
    status: str = IDLE
    from_cache: bool = False
    token: int = 0


@dataclass(frozen=True)
class Triggered:
    token: int
    city: str
    day_count: int = DEFAULT_DAY_COUNT
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class Succeeded:
    token: int
    series: TemperatureSeries
    from_cache: bool = False
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class Failed:
    token: int
    message: str


Event = Triggered | Succeeded | Failed


def reduce(state: UIState, event: Event) -> UIState:
    """Return the state that results from applying *event* to *state*."""
    if isinstance(event, Triggered):
        return replace(
            state,
            city=event.city,
            day_count=event.day_count,
            start_date=event.start_date,
            end_date=event.end_date,
            error=None,
            is_loading=True,
            status=LOADING,
            token=event.token,
        )

    if not isinstance(event, (Succeeded, Failed)):
        raise TypeError(f"Unknown event: {event!r}")

    if event.token != state.token:
        # stale completion from an earlier trigger
        return state

    if isinstance(event, Succeeded):
        return replace(
            state,
            series=event.series,
            from_cache=event.from_cache,
            start_date=event.start_date or state.start_date,
            end_date=event.end_date or state.end_date,
            error=None,
            is_loading=False,
            status=SUCCESS,
        )

    return replace(
        state,
        series=None,
        from_cache=False,
        error=event.message,
        is_loading=False,
        status=ERROR,
    )


def navigation_state(state: UIState) -> dict:
    """Return the {labels, values} payload handed to the History Page."""
    if state.series is None:
        return TemperatureSeries.empty().to_dict()
    return state.series.to_dict()
