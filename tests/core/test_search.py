"""Unit tests for search criteria construction."""

from datetime import date

import pytest

from quake_locator.core.search import (
    QuickSearchDefaults,
    SearchCriteria,
    SearchForm,
    quick_search_criteria,
    subtract_months,
    to_criteria,
)


class TestToCriteria:
    """Tests for to_criteria()."""

    def test_converts_fields(self):
        """Text fields become typed values."""
        form = SearchForm(
            location="  Warsaw ",
            start_date="01-01-2024",
            end_date="31-03-2024",
            min_magnitude="2.5",
            radius_km="300",
        )

        assert to_criteria(form) == SearchCriteria(
            location="Warsaw",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 3, 31),
            min_magnitude=2.5,
            radius_km=300.0,
        )

    def test_unvalidated_form_raises(self):
        """Conversion refuses forms that would not validate."""
        with pytest.raises(ValueError):
            to_criteria(SearchForm(location="Warsaw", start_date="31-02-2024"))


class TestSubtractMonths:
    """Tests for subtract_months()."""

    def test_simple(self):
        assert subtract_months(date(2024, 10, 15), 6) == date(2024, 4, 15)

    def test_crosses_year(self):
        assert subtract_months(date(2024, 3, 10), 6) == date(2023, 9, 10)

    def test_clamps_to_month_end(self):
        """31 August minus 6 months lands on the last day of February."""
        assert subtract_months(date(2024, 8, 31), 6) == date(2024, 2, 29)
        assert subtract_months(date(2023, 8, 31), 6) == date(2023, 2, 28)

    def test_zero_months(self):
        assert subtract_months(date(2024, 1, 31), 0) == date(2024, 1, 31)


class TestQuickSearchCriteria:
    """Tests for quick_search_criteria()."""

    def test_defaults(self):
        """Six months back, magnitude 1.0, 500 km."""
        criteria = quick_search_criteria("Reykjavik", date(2024, 10, 19))

        assert criteria == SearchCriteria(
            location="Reykjavik",
            start_date=date(2024, 4, 19),
            end_date=date(2024, 10, 19),
            min_magnitude=1.0,
            radius_km=500.0,
        )

    def test_custom_defaults(self):
        """Configured defaults are used."""
        defaults = QuickSearchDefaults(min_magnitude=3.0, radius_km=100.0, lookback_months=1)
        criteria = quick_search_criteria("Lima", date(2024, 3, 31), defaults)

        assert criteria.start_date == date(2024, 2, 29)
        assert criteria.min_magnitude == 3.0
        assert criteria.radius_km == 100.0
