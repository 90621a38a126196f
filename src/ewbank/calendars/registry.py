"""
England and Wales Bank Holiday Registry

The fixed, ordered set of named bank holidays and the rule that computes
each one. Iterating the registry gives "all bank holidays in year Y".
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable

from . import rules


class BankHoliday(str, Enum):
    """Named England and Wales bank holidays, in registry order."""
    NEW_YEARS_DAY = "new_years_day"
    GOOD_FRIDAY = "good_friday"
    EASTER_MONDAY = "easter_monday"
    EARLY_MAY_BANK_HOLIDAY = "early_may_bank_holiday"
    SPRING_BANK_HOLIDAY = "spring_bank_holiday"
    SUMMER_BANK_HOLIDAY = "summer_bank_holiday"
    CHRISTMAS_DAY = "christmas_day"
    BOXING_DAY = "boxing_day"

    def __str__(self) -> str:
        return self.value

    @property
    def rule(self) -> Callable[[int], date]:
        """The function computing this holiday for a year."""
        return HOLIDAY_RULES[self]

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    def for_year(self, year: int) -> date:
        """Get the date this holiday is observed in a year."""
        return HOLIDAY_RULES[self](year)


HOLIDAY_RULES: dict[BankHoliday, Callable[[int], date]] = {
    BankHoliday.NEW_YEARS_DAY: rules.new_years_day,
    BankHoliday.GOOD_FRIDAY: rules.good_friday,
    BankHoliday.EASTER_MONDAY: rules.easter_monday,
    BankHoliday.EARLY_MAY_BANK_HOLIDAY: rules.early_may_bank_holiday,
    BankHoliday.SPRING_BANK_HOLIDAY: rules.spring_bank_holiday,
    BankHoliday.SUMMER_BANK_HOLIDAY: rules.summer_bank_holiday,
    BankHoliday.CHRISTMAS_DAY: rules.christmas_day,
    BankHoliday.BOXING_DAY: rules.boxing_day,
}

DISPLAY_NAMES: dict[BankHoliday, str] = {
    BankHoliday.NEW_YEARS_DAY: "New Year's Day",
    BankHoliday.GOOD_FRIDAY: "Good Friday",
    BankHoliday.EASTER_MONDAY: "Easter Monday",
    BankHoliday.EARLY_MAY_BANK_HOLIDAY: "Early May bank holiday",
    BankHoliday.SPRING_BANK_HOLIDAY: "Spring bank holiday",
    BankHoliday.SUMMER_BANK_HOLIDAY: "Summer bank holiday",
    BankHoliday.CHRISTMAS_DAY: "Christmas Day",
    BankHoliday.BOXING_DAY: "Boxing Day",
}

ALL_BANK_HOLIDAYS: tuple[BankHoliday, ...] = tuple(BankHoliday)


@dataclass(frozen=True)
class BankHolidayDate:
    """A bank holiday evaluated for a specific year."""
    holiday: BankHoliday
    date: date

    @property
    def name(self) -> str:
        return self.holiday.display_name


def holidays_for_year(
    year: int,
    holidays: tuple[BankHoliday, ...] = ALL_BANK_HOLIDAYS,
) -> list[BankHolidayDate]:
    """
    Evaluate every registered holiday for a year.

    Args:
        year: Year to evaluate
        holidays: Which holidays to evaluate (default all, registry order)

    Returns:
        One BankHolidayDate per holiday, in the order given
    """
    return [BankHolidayDate(holiday, HOLIDAY_RULES[holiday](year)) for holiday in holidays]


def holiday_dates(
    year: int,
    holidays: tuple[BankHoliday, ...] = ALL_BANK_HOLIDAYS,
) -> frozenset[date]:
    """Get the set of bank holiday dates for a year."""
    return frozenset(h.date for h in holidays_for_year(year, holidays))
