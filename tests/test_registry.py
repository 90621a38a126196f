"""
Tests for the bank holiday registry.
"""
from datetime import date

from ewbank.calendars import rules
from ewbank.calendars.registry import (
    ALL_BANK_HOLIDAYS,
    HOLIDAY_RULES,
    BankHoliday,
    BankHolidayDate,
    holiday_dates,
    holidays_for_year,
)


class TestBankHoliday:
    """Tests for the BankHoliday enum."""

    def test_registry_order(self):
        assert [h.value for h in ALL_BANK_HOLIDAYS] == [
            "new_years_day",
            "good_friday",
            "easter_monday",
            "early_may_bank_holiday",
            "spring_bank_holiday",
            "summer_bank_holiday",
            "christmas_day",
            "boxing_day",
        ]

    def test_every_holiday_has_a_rule(self):
        assert set(HOLIDAY_RULES) == set(BankHoliday)

    def test_rule_lookup(self):
        assert BankHoliday.SUMMER_BANK_HOLIDAY.rule is rules.summer_bank_holiday
        assert BankHoliday.BOXING_DAY.for_year(2010) == date(2010, 12, 28)

    def test_compares_to_identifier(self):
        assert BankHoliday.BOXING_DAY == "boxing_day"
        assert str(BankHoliday.GOOD_FRIDAY) == "good_friday"
        assert BankHoliday("christmas_day") is BankHoliday.CHRISTMAS_DAY

    def test_display_name(self):
        assert BankHoliday.NEW_YEARS_DAY.display_name == "New Year's Day"


class TestHolidaysForYear:
    """Tests for evaluating the registry for a year."""

    def test_returns_registry_order(self, bank_holidays_by_year):
        result = holidays_for_year(2011)
        assert [h.holiday for h in result] == list(ALL_BANK_HOLIDAYS)
        assert [h.date for h in result] == bank_holidays_by_year[2011]

    def test_instances(self):
        first = holidays_for_year(2024)[0]
        assert first == BankHolidayDate(BankHoliday.NEW_YEARS_DAY, date(2024, 1, 1))
        assert first.name == "New Year's Day"

    def test_subset(self):
        result = holidays_for_year(2024, (BankHoliday.CHRISTMAS_DAY,))
        assert result == [BankHolidayDate(BankHoliday.CHRISTMAS_DAY, date(2024, 12, 25))]

    def test_holiday_dates(self, bank_holidays_by_year):
        assert holiday_dates(2025) == frozenset(bank_holidays_by_year[2025])
