"""
Unit tests for Swedish public holidays.
"""

from datetime import date

import pytest

from sweid.swedish.helgdagar import (
    HolidayType,
    easter,
    holidays,
    is_business_day,
    is_holiday,
)


class TestEaster:
    """Tests for Easter Sunday calculation."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
            (2026, date(2026, 4, 5)),
            (2027, date(2027, 3, 28)),
            (2028, date(2028, 4, 16)),
        ],
    )
    def test_known_dates(self, year, expected):
        assert easter(year) == expected


class TestHolidays:
    """Tests for the yearly holiday list."""

    def test_count(self):
        """Test 16 holidays (13 röda dagar + 3 aftnar)."""
        result = holidays(2026)
        assert len(result) == 16
        assert len([h for h in result if h.type == HolidayType.ROD_DAG]) == 13
        assert len([h for h in result if h.type == HolidayType.AFTON]) == 3

    def test_easter_dependent_2026(self):
        """Test Easter-dependent holidays for 2026 (Easter = April 5)."""
        by_name = {h.name: h.date for h in holidays(2026)}
        assert by_name["Långfredagen"] == date(2026, 4, 3)
        assert by_name["Påskdagen"] == date(2026, 4, 5)
        assert by_name["Annandag påsk"] == date(2026, 4, 6)
        assert by_name["Kristi himmelsfärdsdag"] == date(2026, 5, 14)
        assert by_name["Pingstdagen"] == date(2026, 5, 24)

    def test_midsommar_2026(self):
        """Test midsommar for 2026 (June 20 is a Saturday)."""
        by_name = {h.name: h.date for h in holidays(2026)}
        assert by_name["Midsommardagen"] == date(2026, 6, 20)
        assert by_name["Midsommarafton"] == date(2026, 6, 19)

    def test_alla_helgons_dag(self):
        """Test alla helgons dag, including a year where it falls in November."""
        assert {h.name: h.date for h in holidays(2026)}["Alla helgons dag"] == date(2026, 10, 31)
        assert {h.name: h.date for h in holidays(2024)}["Alla helgons dag"] == date(2024, 11, 2)

    def test_sorted(self):
        """Test holidays are sorted by date."""
        dates = [h.date for h in holidays(2026)]
        assert dates == sorted(dates)


class TestIsHoliday:
    """Tests for single-date holiday lookup."""

    def test_juldagen(self):
        result = is_holiday(date(2026, 12, 25))
        assert result.name == "Juldagen"
        assert result.type == HolidayType.ROD_DAG

    def test_julafton(self):
        result = is_holiday(date(2026, 12, 24))
        assert result.name == "Julafton"
        assert result.type == HolidayType.AFTON

    def test_regular_day(self):
        assert is_holiday(date(2026, 2, 16)) is None


class TestIsBusinessDay:
    """Tests for business day detection."""

    def test_weekend(self):
        assert not is_business_day(date(2026, 2, 14))
        assert not is_business_day(date(2026, 2, 15))

    def test_rod_dag(self):
        assert not is_business_day(date(2026, 1, 1))

    def test_afton(self):
        assert not is_business_day(date(2026, 12, 24))

    def test_normal_weekday(self):
        assert is_business_day(date(2026, 2, 16))
