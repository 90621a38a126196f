"""
ewbank - England and Wales Bank Holiday Calendar

Computes the England and Wales bank holidays for any year and answers
date arithmetic questions relative to them.

Key Features:
- The eight named bank holidays, with weekend substitution days
- Bank holiday lookup for any date
- Bank holiday and working day counts over inclusive date ranges
- Business day arithmetic (add, next, previous)
- Calendar settings loaded from YAML or JSON

Quick Start:
    from datetime import date
    from ewbank import BankHolidayCalculator

    calc = BankHolidayCalculator(year=2011)
    calc.christmas_day()                        # date(2011, 12, 27)
    calc.is_a_bank_holiday(date(2010, 12, 28))  # BankHoliday.BOXING_DAY
    calc.bank_holidays_between(date(2008, 10, 3), date(2008, 10, 10))  # 0
    calc.working_days_between(date(2008, 10, 3), date(2008, 10, 10))   # 6

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import (
    ALL_BANK_HOLIDAYS,
    ENGLAND_WALES_CALENDAR,
    BankHoliday,
    BankHolidayCalculator,
    BankHolidayDate,
    BaseCalendar,
    EnglandAndWalesCalendar,
    HolidayCalendar,
    add_england_wales_business_days,
    bank_holidays_between,
    get_bank_holidays,
    holidays_for_year,
    is_bank_holiday,
    is_england_wales_business_day,
    next_england_wales_business_day,
    working_days_between,
)
from .config import (
    CalendarSettingsSchema,
    load_calendar_settings,
    load_calendar_settings_from_string,
)
from .exceptions import (
    BankHolidayError,
    ConfigLoadError,
    ConfigValidationError,
    InvalidCalendarError,
    InvalidDateRangeError,
    InvalidYearError,
    MissingDateError,
)

__all__ = [
    "__version__",
    # Calendars
    "BankHoliday",
    "BankHolidayDate",
    "ALL_BANK_HOLIDAYS",
    "holidays_for_year",
    "HolidayCalendar",
    "BaseCalendar",
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
    # Settings
    "CalendarSettingsSchema",
    "load_calendar_settings",
    "load_calendar_settings_from_string",
    # Exceptions
    "BankHolidayError",
    "InvalidDateRangeError",
    "MissingDateError",
    "InvalidYearError",
    "InvalidCalendarError",
    "ConfigLoadError",
    "ConfigValidationError",
]
