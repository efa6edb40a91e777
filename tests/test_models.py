"""Tests for models.py value objects."""

from datetime import date

import pytest

from temperature_chart.errors import InvalidInput
from temperature_chart.models import Coordinates, DateRange, TemperatureSeries


def test_coordinates_are_immutable():
    coords = Coordinates(6.45, 3.39)
    with pytest.raises(AttributeError):
        coords.latitude = 0.0


def test_date_range_rejects_start_after_end():
    with pytest.raises(InvalidInput):
        DateRange(date(2024, 1, 8), date(2024, 1, 1))


def test_date_range_iso_and_day_count():
    rng = DateRange(date(2024, 1, 1), date(2024, 1, 8))
    assert rng.to_iso() == ("2024-01-01", "2024-01-08")
    assert rng.day_count == 7


def test_series_rejects_misaligned_lengths():
    with pytest.raises(InvalidInput, match="misaligned"):
        TemperatureSeries(labels=("2024-01-01", "2024-01-02"), values=(1.0,))


def test_series_accepts_lists_and_stores_tuples():
    series = TemperatureSeries(labels=["2024-01-01"], values=[None])
    assert series.labels == ("2024-01-01",)
    assert series.values == (None,)
    assert isinstance(hash(series), int)


def test_series_from_dict_coerces_numbers():
    series = TemperatureSeries.from_dict({"labels": ["2024-01-01", "2024-01-02"], "values": [25, None]})
    assert series.values == (25.0, None)
    assert list(series.rows()) == [("2024-01-01", 25.0), ("2024-01-02", None)]


def test_empty_series():
    assert TemperatureSeries.empty().is_empty
    assert TemperatureSeries.empty().to_dict() == {"labels": [], "values": []}
