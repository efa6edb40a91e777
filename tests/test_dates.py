"""
test_dates.py — Tests for resolve_effective_range.
"""

from datetime import date

import pytest

from temperature_chart.dates import DEFAULT_DAY_COUNT, resolve_effective_range
from temperature_chart.errors import InvalidInput
from temperature_chart.models import DateRange

TODAY = date(2024, 1, 8)


def test_day_count_counts_back_from_today():
    assert resolve_effective_range(7, today=TODAY) == DateRange(date(2024, 1, 1), TODAY)


def test_thirty_days_crosses_month_boundary():
    rng = resolve_effective_range(30, today=TODAY)
    assert rng.start == date(2023, 12, 9)
    assert rng.day_count == 30


def test_default_day_count():
    assert resolve_effective_range(today=TODAY).day_count == DEFAULT_DAY_COUNT


def test_explicit_bounds_win_over_day_count():
    rng = resolve_effective_range(30, start="2024-01-02", end="2024-01-05", today=TODAY)
    assert rng == DateRange(date(2024, 1, 2), date(2024, 1, 5))


def test_explicit_date_objects_accepted():
    rng = resolve_effective_range(start=date(2024, 1, 2), end=date(2024, 1, 2))
    assert rng.day_count == 0


def test_inverted_range_raises():
    with pytest.raises(InvalidInput, match="valid date range"):
        resolve_effective_range(start="2024-01-05", end="2024-01-02")


@pytest.mark.parametrize("start, end", [
    ("2024-01-02", None),
    (None, "2024-01-02"),
    ("2024-01-02", "   "),
    ("not-a-date", "2024-01-02"),
])
def test_incomplete_or_bad_bounds_raise(start, end):
    with pytest.raises(InvalidInput, match="valid date range"):
        resolve_effective_range(start=start, end=end)


@pytest.mark.parametrize("day_count", [0, -7, True, "7"])
def test_bad_day_count_raises(day_count):
    with pytest.raises(InvalidInput):
        resolve_effective_range(day_count, today=TODAY)
