# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
dates.py — Work out the effective date range for a request.

Either explicit start/end bounds chosen by the user, or "today minus N days"
to "today" when only a day-count is given.
"""

from datetime import date, timedelta

from temperature_chart.errors import InvalidInput
from temperature_chart.models import DateRange
from temperature_chart.utils import parse_iso_date

DAY_COUNT_OPTIONS = (7, 14, 30)
DEFAULT_DAY_COUNT = 7


def resolve_effective_range(
    day_count: int | None = None,
    start: date | str | None = None,
    end: date | str | None = None,
    today: date | None = None,
) -> DateRange:
    """Return the DateRange a request should cover.

    Explicit bounds win when either one is given; both must then be valid.

    Args:
        day_count: Number of days back from today. Defaults to DEFAULT_DAY_COUNT.
        start: Explicit first day (date or 'YYYY-MM-DD').
        end: Explicit last day (date or 'YYYY-MM-DD').
        today: Reference date; defaults to date.today().

    Raises:
        InvalidInput: If a bound is missing or unparsable, start > end, or
            day_count is not a positive integer.
    """
    if _given(start) or _given(end):
        if not (_given(start) and _given(end)):
            raise InvalidInput("Please select a valid date range")
        try:
            return DateRange(parse_iso_date(start), parse_iso_date(end))
        except InvalidInput:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidInput("Please select a valid date range") from e

    if day_count is None:
        day_count = DEFAULT_DAY_COUNT
    if isinstance(day_count, bool) or not isinstance(day_count, int) or day_count < 1:
        raise InvalidInput(f"Day count must be a positive number of days, got {day_count!r}")

    today = today or date.today()
    return DateRange(today - timedelta(days=day_count), today)


def _given(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
