"""
England and Wales Bank Holiday Calendar

Implements England and Wales bank holidays for business day calculations
and the range queries built on them:

- which bank holiday (if any) a date is
- how many bank holidays fall in an inclusive date range
- how many working days (weekdays that are not bank holidays) fall in an
  inclusive date range

Range queries evaluate every holiday rule once per year spanned by the
range and keep only the dates inside it, so partial years at either end
are handled by containment rather than by year.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from functools import lru_cache
from typing import Optional, Union

from ..exceptions import InvalidCalendarError
from .base import BaseCalendar, as_date, require_range
from .registry import (
    ALL_BANK_HOLIDAYS,
    BankHoliday,
    BankHolidayDate,
    holidays_for_year,
)
from .rules import validate_year

logger = logging.getLogger(__name__)

YearOrDate = Union[int, date, None]


@dataclass
class EnglandAndWalesCalendar(BaseCalendar):
    """
    England and Wales bank holiday calendar.

    Holidays are evaluated in registry order; `holidays` may restrict the
    calendar to a subset of the named bank holidays.
    """

    holidays: tuple[BankHoliday, ...] = ALL_BANK_HOLIDAYS

    # Cache for computed holidays, keyed by year and the holidays observed
    _holiday_cache: dict[
        tuple[int, tuple[BankHoliday, ...]], dict[date, BankHoliday]
    ] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        try:
            self.holidays = tuple(BankHoliday(h) for h in self.holidays)
        except ValueError as e:
            raise InvalidCalendarError(
                message=f"Unknown bank holiday: {e}",
                details={"holidays": [str(h) for h in self.holidays]},
            )
        if len(set(self.holidays)) != len(self.holidays):
            raise InvalidCalendarError(
                message="Bank holidays must not be repeated",
                details={"holidays": [str(h) for h in self.holidays]},
            )

        self.weekend_days = frozenset(self.weekend_days)
        invalid = sorted(d for d in self.weekend_days if not 0 <= d <= 6)
        if invalid:
            raise InvalidCalendarError(
                message=f"Weekend days must be 0 (Monday) to 6 (Sunday), got {invalid}",
                details={"weekend_days": sorted(self.weekend_days)},
            )
        if len(self.weekend_days) == 7:
            raise InvalidCalendarError(
                message="Weekend days must leave at least one working day",
                details={"weekend_days": sorted(self.weekend_days)},
            )

    def _get_holidays_for_year(self, year: int) -> dict[date, BankHoliday]:
        """Get holidays for a year keyed by date, using cache."""
        key = (year, tuple(self.holidays))
        if key not in self._holiday_cache:
            by_date: dict[date, BankHoliday] = {}
            for instance in holidays_for_year(year, self.holidays):
                # First rule in registry order wins a shared date
                by_date.setdefault(instance.date, instance.holiday)
            self._holiday_cache[key] = by_date
        return self._holiday_cache[key]

    def holidays_for(self, year: int) -> list[BankHolidayDate]:
        """Evaluate this calendar's bank holidays for a year, in registry order."""
        return holidays_for_year(validate_year(year), self.holidays)

    def is_a_bank_holiday(self, d: date) -> Optional[BankHoliday]:
        """
        Identify the bank holiday falling on a date.

        The year evaluated is the year of `d`.

        Args:
            d: Date to check

        Returns:
            The matching BankHoliday, or None if d is not a bank holiday
        """
        d = as_date(d)
        return self._get_holidays_for_year(d.year).get(d)

    def is_holiday(self, d: date) -> bool:
        """Check if a date is an England and Wales bank holiday."""
        return self.is_a_bank_holiday(d) is not None

    def get_holiday_name(self, d: date) -> Optional[str]:
        """
        Get the name of a bank holiday on a given date.

        Args:
            d: Date to check

        Returns:
            Holiday name if it's a bank holiday, None otherwise
        """
        holiday = self.is_a_bank_holiday(d)
        return holiday.display_name if holiday is not None else None

    def get_holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """
        Get all bank holidays for a year with names.

        Returns list of (date, name) tuples sorted by date.
        """
        return sorted(
            ((h.date, h.name) for h in self.holidays_for(year)),
            key=lambda x: x[0],
        )

    def _holidays_in_span(self, start: date, end: date) -> list[BankHolidayDate]:
        found = []
        for year in range(start.year, end.year + 1):
            for instance in self.holidays_for(year):
                if start <= instance.date <= end:
                    found.append(instance)
        return sorted(found, key=lambda h: h.date)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """
        Get all bank holiday dates within a date range (inclusive).

        Evaluates the holiday rules for each spanned year. A range with
        start after end is empty.
        """
        start, end = as_date(start, "span start"), as_date(end, "span end")
        if start > end:
            return []
        return [h.date for h in self._holidays_in_span(start, end)]

    def bank_holidays_in_range(self, start: date, end: date) -> list[BankHolidayDate]:
        """
        Get the bank holidays falling in an inclusive date range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive, must be after start)

        Returns:
            Matching bank holidays sorted by date

        Raises:
            MissingDateError: If either date is missing
            InvalidDateRangeError: If start is not before end
        """
        start, end = require_range(start, end)

        found = self._holidays_in_span(start, end)

        logger.debug(
            "Bank holidays %s..%s: scanned %d year(s), found %d",
            start.isoformat(), end.isoformat(), end.year - start.year + 1, len(found),
        )
        return found

    def bank_holidays_between(self, start: date, end: date) -> int:
        """
        Count bank holidays in an inclusive date range.

        Raises:
            MissingDateError: If either date is missing
            InvalidDateRangeError: If start is not before end
        """
        return len(self.bank_holidays_in_range(start, end))

    def working_days_between(self, start: date, end: date) -> int:
        """
        Count working days in an inclusive date range.

        Working days are calendar days minus weekend days minus bank
        holidays. A bank holiday on a configured weekend day is only
        subtracted once.

        Raises:
            MissingDateError: If either date is missing
            InvalidDateRangeError: If start is not before end
        """
        start, end = require_range(start, end)

        total_days = (end - start).days + 1
        weekend_days = self.weekend_days_between(start, end)
        holidays = sum(
            1 for h in self.bank_holidays_in_range(start, end) if not self.is_weekend(h.date)
        )

        working_days = total_days - weekend_days - holidays
        logger.debug(
            "Working days %s..%s: %d days, %d weekend, %d bank holiday -> %d",
            start.isoformat(), end.isoformat(), total_days, weekend_days, holidays, working_days,
        )
        return working_days


class BankHolidayCalculator:
    """
    Bank holiday calculator anchored on a default year.

    The anchor (January 1 of `year`, or of the current year) is only used
    when a holiday method is called without a date. It never changes, and
    range queries do not depend on it.

    Usage:
        calc = BankHolidayCalculator(year=2011)
        calc.christmas_day()                       # date(2011, 12, 27)
        calc.boxing_day(date(2010, 6, 1))          # date(2010, 12, 28)
        calc.is_a_bank_holiday(date(2010, 12, 28)) # BankHoliday.BOXING_DAY
        calc.working_days_between(date(2008, 10, 3), date(2008, 10, 10))
    """

    def __init__(
        self,
        year: Optional[int] = None,
        calendar: Optional[EnglandAndWalesCalendar] = None,
    ) -> None:
        if year is None:
            year = date.today().year
        self._anchor = date(validate_year(year), 1, 1)
        self.calendar = calendar if calendar is not None else EnglandAndWalesCalendar()

    def __repr__(self) -> str:
        return f"BankHolidayCalculator(year={self.year})"

    @property
    def anchor(self) -> date:
        return self._anchor

    @property
    def year(self) -> int:
        return self._anchor.year

    def _resolve_year(self, when: YearOrDate) -> int:
        if when is None:
            return self.year
        if isinstance(when, date):
            return when.year
        return validate_year(when)

    def holiday(self, holiday: Union[BankHoliday, str], when: YearOrDate = None) -> date:
        """Get the date of a named bank holiday for a year or a date's year."""
        return BankHoliday(holiday).for_year(self._resolve_year(when))

    def holidays(self, when: YearOrDate = None) -> list[BankHolidayDate]:
        """Get every bank holiday for a year or a date's year, in registry order."""
        return self.calendar.holidays_for(self._resolve_year(when))

    def new_years_day(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.NEW_YEARS_DAY, when)

    def good_friday(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.GOOD_FRIDAY, when)

    def easter_monday(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.EASTER_MONDAY, when)

    def early_may_bank_holiday(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.EARLY_MAY_BANK_HOLIDAY, when)

    def spring_bank_holiday(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.SPRING_BANK_HOLIDAY, when)

    def summer_bank_holiday(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.SUMMER_BANK_HOLIDAY, when)

    def christmas_day(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.CHRISTMAS_DAY, when)

    def boxing_day(self, when: YearOrDate = None) -> date:
        return self.holiday(BankHoliday.BOXING_DAY, when)

    def is_a_bank_holiday(self, d: date) -> Optional[BankHoliday]:
        """Return the bank holiday falling on d, or None."""
        return self.calendar.is_a_bank_holiday(d)

    def bank_holidays_between(self, start: date, end: date) -> int:
        """Count bank holidays in an inclusive date range."""
        return self.calendar.bank_holidays_between(start, end)

    def working_days_between(self, start: date, end: date) -> int:
        """Count working days in an inclusive date range."""
        return self.calendar.working_days_between(start, end)


# Pre-configured calendar instance
ENGLAND_WALES_CALENDAR = EnglandAndWalesCalendar()


@lru_cache(maxsize=128)
def get_bank_holidays(year: int) -> frozenset[date]:
    """
    Get England and Wales bank holidays for a year (cached).

    Args:
        year: Year to get holidays for

    Returns:
        Frozenset of holiday dates
    """
    return frozenset(h.date for h in ENGLAND_WALES_CALENDAR.holidays_for(year))


def is_bank_holiday(d: date) -> bool:
    """
    Check if a date is an England and Wales bank holiday.

    Uses the default calendar.
    """
    return ENGLAND_WALES_CALENDAR.is_holiday(as_date(d))


def is_england_wales_business_day(d: date) -> bool:
    """
    Check if a date is a working day in England and Wales.

    A working day is a weekday that is not a bank holiday.
    """
    return ENGLAND_WALES_CALENDAR.is_business_day(as_date(d))


def add_england_wales_business_days(start: date, days: int) -> date:
    """
    Add working days using the England and Wales calendar.

    Args:
        start: Starting date
        days: Number of working days to add (can be negative)

    Returns:
        The resulting date
    """
    return ENGLAND_WALES_CALENDAR.add_business_days(as_date(start), days)


def bank_holidays_between(start: date, end: date) -> int:
    """Count bank holidays in an inclusive range using the default calendar."""
    return ENGLAND_WALES_CALENDAR.bank_holidays_between(start, end)


def working_days_between(start: date, end: date) -> int:
    """Count working days in an inclusive range using the default calendar."""
    return ENGLAND_WALES_CALENDAR.working_days_between(start, end)


def next_england_wales_business_day(d: date) -> date:
    """Get the next working day on or after a date."""
    return ENGLAND_WALES_CALENDAR.next_business_day(as_date(d))
