"""
ewbank Calendars

Holiday calendars for England and Wales bank holiday and working day
calculations.

Provides:
- Holiday rules, one pure function per named bank holiday
- BankHoliday registry of the eight named holidays
- HolidayCalendar protocol and BaseCalendar with common business day logic
- EnglandAndWalesCalendar and BankHolidayCalculator for range queries
- Utility functions for quick checks

Usage:
    from ewbank.calendars import (
        BankHolidayCalculator,
        is_bank_holiday,
        working_days_between,
    )

    calc = BankHolidayCalculator(year=2011)
    calc.new_years_day()                 # date(2011, 1, 3)

    # Count working days between dates (inclusive)
    days = working_days_between(date(2008, 10, 3), date(2008, 10, 10))
"""
from __future__ import annotations

from .base import (
    BaseCalendar,
    HolidayCalendar,
    as_date,
    require_range,
)
from .england_wales import (
    ENGLAND_WALES_CALENDAR,
    BankHolidayCalculator,
    EnglandAndWalesCalendar,
    add_england_wales_business_days,
    bank_holidays_between,
    get_bank_holidays,
    is_bank_holiday,
    is_england_wales_business_day,
    next_england_wales_business_day,
    working_days_between,
)
from .registry import (
    ALL_BANK_HOLIDAYS,
    HOLIDAY_RULES,
    BankHoliday,
    BankHolidayDate,
    holiday_dates,
    holidays_for_year,
)
from .rules import (
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
    validate_year,
)

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    "as_date",
    "require_range",
    # Rules
    "MIN_YEAR",
    "MAX_YEAR",
    "validate_year",
    "next_weekday",
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "easter_sunday",
    "new_years_day",
    "good_friday",
    "easter_monday",
    "early_may_bank_holiday",
    "spring_bank_holiday",
    "summer_bank_holiday",
    "christmas_day",
    "boxing_day",
    # Registry
    "BankHoliday",
    "BankHolidayDate",
    "ALL_BANK_HOLIDAYS",
    "HOLIDAY_RULES",
    "holidays_for_year",
    "holiday_dates",
    # England and Wales
    "EnglandAndWalesCalendar",
    "BankHolidayCalculator",
    "ENGLAND_WALES_CALENDAR",
    "get_bank_holidays",
    "is_bank_holiday",
    "is_england_wales_business_day",
    "add_england_wales_business_days",
    "next_england_wales_business_day",
    "bank_holidays_between",
    "working_days_between",
]
