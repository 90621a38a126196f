"""
ewbank Holiday Calendar Base

Provides the protocol and base implementation for holiday calendars
used in business day calculations.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Protocol, runtime_checkable

from ..exceptions import InvalidDateRangeError, MissingDateError


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for holiday calendars.

    Implementations must provide methods to check if a date is a holiday
    or business day.
    """

    def is_holiday(self, d: date) -> bool:
        ...

    def is_business_day(self, d: date) -> bool:
        ...

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        ...


def as_date(value: Optional[date], label: str = "date") -> date:
    """
    Normalise a date argument.

    datetime values are reduced to their calendar date so they compare
    cleanly with plain dates.

    Raises:
        MissingDateError: If value is None
    """
    if value is None:
        raise MissingDateError(
            message=f"A date is required for {label}",
            details={"argument": label},
        )
    if isinstance(value, datetime):
        return value.date()
    return value


def require_range(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    """
    Validate an inclusive date range for range queries.

    Returns:
        (start, end) as plain dates

    Raises:
        MissingDateError: If either bound is missing
        InvalidDateRangeError: If start is not strictly before end
    """
    start = as_date(start, "span start")
    end = as_date(end, "span end")
    if start >= end:
        raise InvalidDateRangeError(
            message=f"End date {end.isoformat()} must be after start date {start.isoformat()}",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
    return start, end


@dataclass
class BaseCalendar(ABC):
    """
    Abstract base class for holiday calendars.

    Provides common functionality for business day calculations.
    Subclasses must implement `is_holiday()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))

    @abstractmethod
    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday."""
        ...

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_business_day(self, d: date) -> bool:
        """A business day is a weekday that is not a holiday."""
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Get all holidays within a date range (inclusive)."""
        holidays = []
        current = start
        while current <= end:
            if self.is_holiday(current):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays

    def weekend_days_between(self, start: date, end: date) -> int:
        """
        Count weekend days in an inclusive date range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive, must be after start)

        Returns:
            Number of weekend days in the range
        """
        start, end = require_range(start, end)

        count = 0
        current = start
        while current <= end:
            if self.is_weekend(current):
                count += 1
            current += timedelta(days=1)
        return count

    def add_business_days(self, start: date, days: int) -> date:
        """
        Move a date forward (or back) by a number of working days.

        Weekend days and holidays are skipped and not counted. The start
        date itself is never counted, so adding one working day to a
        Thursday before Good Friday lands on the Tuesday after Easter.

        Args:
            start: Starting date
            days: Number of working days to add (can be negative)

        Returns:
            The working day reached, or start unchanged when days is 0
        """
        if days == 0:
            return start

        direction = 1 if days > 0 else -1
        remaining = abs(days)
        current = start

        while remaining > 0:
            current += timedelta(days=direction)
            if self.is_business_day(current):
                remaining -= 1

        return current

    def subtract_business_days(self, start: date, days: int) -> date:
        """
        Move a date back by a number of working days.

        Args:
            start: Starting date
            days: Number of working days to subtract

        Returns:
            The working day reached
        """
        return self.add_business_days(start, -days)

    def business_days_between(self, start: date, end: date) -> int:
        """
        Count working days after start, up to and including end.

        Unlike the inclusive range counts, the start date is excluded and
        an empty or reversed range counts as 0 instead of failing.

        Args:
            start: Start date (exclusive)
            end: End date (inclusive)

        Returns:
            Number of working days in (start, end]
        """
        if start >= end:
            return 0

        count = 0
        current = start + timedelta(days=1)

        while current <= end:
            if self.is_business_day(current):
                count += 1
            current += timedelta(days=1)

        return count

    def next_business_day(self, d: date) -> date:
        """
        Get the first working day on or after a date.

        Unlike the holiday rules' weekend shift, holidays are skipped too:
        from Christmas Day 2026 (a Friday) this returns Tuesday December 29.

        Args:
            d: Starting date

        Returns:
            d itself if it is a working day, otherwise the next one
        """
        current = d
        while not self.is_business_day(current):
            current += timedelta(days=1)
        return current

    def previous_business_day(self, d: date) -> date:
        """
        Get the last working day on or before a date.

        Args:
            d: Starting date

        Returns:
            d itself if it is a working day, otherwise the previous one
        """
        current = d
        while not self.is_business_day(current):
            current -= timedelta(days=1)
        return current
