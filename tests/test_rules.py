"""
Tests for the England and Wales bank holiday rules.

Covers:
- Each rule against published bank holiday dates
- Weekend substitution for New Year's Day, Christmas Day and Boxing Day
- Properties that hold for every supported year
- Year validation
"""
import pytest
from datetime import date, timedelta

from ewbank.calendars.rules import (
    MAX_YEAR,
    MIN_YEAR,
    boxing_day,
    christmas_day,
    early_may_bank_holiday,
    easter_monday,
    easter_sunday,
    good_friday,
    last_weekday_of_month,
    new_years_day,
    next_weekday,
    nth_weekday_of_month,
    spring_bank_holiday,
    summer_bank_holiday,
)
from ewbank.exceptions import InvalidYearError


RULES_IN_ORDER = [
    new_years_day,
    good_friday,
    easter_monday,
    early_may_bank_holiday,
    spring_bank_holiday,
    summer_bank_holiday,
    christmas_day,
    boxing_day,
]

PROPERTY_YEARS = range(1900, 2101)


# =============================================================================
# Helpers
# =============================================================================

class TestDateHelpers:
    """Tests for weekday helpers."""

    def test_next_weekday_keeps_weekday(self):
        assert next_weekday(date(2024, 3, 5)) == date(2024, 3, 5)

    def test_next_weekday_from_saturday(self):
        assert next_weekday(date(2024, 3, 9)) == date(2024, 3, 11)

    def test_next_weekday_from_sunday(self):
        assert next_weekday(date(2024, 3, 10)) == date(2024, 3, 11)

    def test_nth_weekday_of_month(self):
        """First Monday of May 2011 is May 2; third Monday is May 16."""
        assert nth_weekday_of_month(2011, 5, 0, 1) == date(2011, 5, 2)
        assert nth_weekday_of_month(2011, 5, 0, 3) == date(2011, 5, 16)

    def test_last_weekday_of_month(self):
        assert last_weekday_of_month(2011, 8, 0) == date(2011, 8, 29)
        assert last_weekday_of_month(2024, 12, 4) == date(2024, 12, 27)

    def test_easter_sunday_known_years(self):
        known = {
            2008: date(2008, 3, 23),
            2011: date(2011, 4, 24),
            2020: date(2020, 4, 12),
            2024: date(2024, 3, 31),
            2025: date(2025, 4, 20),
            2026: date(2026, 4, 5),
        }
        for year, expected in known.items():
            assert easter_sunday(year) == expected, f"Easter {year}"


# =============================================================================
# Published Dates
# =============================================================================

class TestPublishedDates:
    """Each rule against published bank holidays."""

    def test_all_rules_match_published_dates(self, bank_holidays_by_year):
        for year, expected in bank_holidays_by_year.items():
            actual = [rule(year) for rule in RULES_IN_ORDER]
            assert actual == expected, f"Bank holidays {year}"

    def test_2011(self):
        """2011: New Year on a Saturday, Christmas on a Sunday."""
        assert new_years_day(2011) == date(2011, 1, 3)
        assert good_friday(2011) == date(2011, 4, 22)
        assert easter_monday(2011) == date(2011, 4, 25)
        assert early_may_bank_holiday(2011) == date(2011, 5, 2)
        assert summer_bank_holiday(2011) == date(2011, 8, 29)
        assert christmas_day(2011) == date(2011, 12, 27)
        assert boxing_day(2011) == date(2011, 12, 26)

    def test_spring_bank_holiday_is_last_monday_of_may(self):
        assert spring_bank_holiday(2011) == date(2011, 5, 30)
        assert spring_bank_holiday(2024) == date(2024, 5, 27)


# =============================================================================
# Weekend Substitution
# =============================================================================

class TestNewYearsDay:
    """Tests for New Year's Day substitution."""

    def test_weekday_unchanged(self):
        assert new_years_day(2024) == date(2024, 1, 1)

    def test_saturday_moves_to_monday(self):
        assert new_years_day(2022) == date(2022, 1, 3)

    def test_sunday_moves_to_monday(self):
        assert new_years_day(2023) == date(2023, 1, 2)

    def test_always_a_weekday(self):
        for year in PROPERTY_YEARS:
            observed = new_years_day(year)
            assert observed.weekday() < 5, f"New Year {year}"
            if date(year, 1, 1).weekday() >= 5:
                assert observed > date(year, 1, 1)


class TestChristmasAndBoxingDay:
    """Tests for Christmas Day and Boxing Day substitution."""

    def test_christmas_on_thursday(self):
        assert christmas_day(2025) == date(2025, 12, 25)
        assert boxing_day(2025) == date(2025, 12, 26)

    def test_christmas_on_friday(self):
        """Boxing Day on Saturday moves to Monday."""
        assert christmas_day(2026) == date(2026, 12, 25)
        assert boxing_day(2026) == date(2026, 12, 28)

    def test_christmas_on_saturday(self):
        """Christmas takes Monday, Boxing Day (a Sunday) takes Tuesday."""
        assert christmas_day(2010) == date(2010, 12, 27)
        assert boxing_day(2010) == date(2010, 12, 28)

    def test_christmas_on_sunday(self):
        """Boxing Day keeps Monday, Christmas takes Tuesday."""
        assert christmas_day(2022) == date(2022, 12, 27)
        assert boxing_day(2022) == date(2022, 12, 26)

    def test_never_collide(self):
        """The pair resolves to two distinct, consecutive working days."""
        for year in PROPERTY_YEARS:
            first, second = sorted([christmas_day(year), boxing_day(year)])
            assert first != second, f"Christmas {year}"
            assert first.weekday() < 5 and second.weekday() < 5
            assert next_weekday(first + timedelta(days=1)) == second
            assert date(year, 12, 25) <= first and second <= date(year, 12, 28)


# =============================================================================
# Properties
# =============================================================================

class TestRuleProperties:
    """Properties that hold for every year."""

    def test_easter_monday_three_days_after_good_friday(self):
        for year in PROPERTY_YEARS:
            assert easter_monday(year) - good_friday(year) == timedelta(days=3)

    def test_good_friday_is_friday(self):
        for year in PROPERTY_YEARS:
            assert good_friday(year).weekday() == 4

    def test_monday_holidays(self):
        for year in PROPERTY_YEARS:
            assert easter_monday(year).weekday() == 0
            assert early_may_bank_holiday(year).weekday() == 0
            assert early_may_bank_holiday(year).day <= 7
            assert spring_bank_holiday(year).weekday() == 0
            assert spring_bank_holiday(year).day >= 25
            assert summer_bank_holiday(year).weekday() == 0
            assert summer_bank_holiday(year).month == 8
            assert summer_bank_holiday(year).day >= 25

    def test_eight_distinct_dates_in_year(self):
        for year in PROPERTY_YEARS:
            dates = [rule(year) for rule in RULES_IN_ORDER]
            assert len(set(dates)) == 8
            assert all(d.year == year for d in dates)


# =============================================================================
# Year Validation
# =============================================================================

class TestYearValidation:
    """Tests for rejected years."""

    @pytest.mark.parametrize("rule", RULES_IN_ORDER)
    def test_year_below_range(self, rule):
        with pytest.raises(InvalidYearError) as exc_info:
            rule(MIN_YEAR - 1)
        assert exc_info.value.code == "EW_INVALID_YEAR"

    def test_year_above_range(self):
        with pytest.raises(InvalidYearError):
            christmas_day(MAX_YEAR + 1)

    def test_range_bounds_accepted(self):
        assert new_years_day(MIN_YEAR).year == MIN_YEAR
        assert boxing_day(MAX_YEAR).year == MAX_YEAR

    def test_non_integer_year(self):
        with pytest.raises(InvalidYearError):
            good_friday("2011")

    def test_bool_year(self):
        with pytest.raises(InvalidYearError):
            new_years_day(True)
