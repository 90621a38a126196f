"""
England and Wales Bank Holiday Rules

One pure function per bank holiday, each mapping a year to the date the
holiday is observed in that year.

Bank holidays:
- New Year's Day (January 1, next weekday if on a weekend)
- Good Friday (Friday before Easter Sunday)
- Easter Monday (Monday after Easter Sunday)
- Early May bank holiday (1st Monday in May)
- Spring bank holiday (last Monday in May)
- Summer bank holiday (last Monday in August)
- Christmas Day (December 25, substitute day if on a weekend)
- Boxing Day (December 26, substitute day if on a weekend)

Substitution: when Christmas Day or Boxing Day falls on a weekend the
substitute days are arranged so the two holidays never share a date.
Christmas keeps the Monday when only it falls on the weekend; when both
do, Boxing Day is pushed to the Tuesday.

Easter Sunday is taken from dateutil's Western computus.
"""
from __future__ import annotations

from datetime import date, timedelta

from dateutil.easter import EASTER_WESTERN, easter

from ..exceptions import InvalidYearError

# Western computus is defined for these years only
MIN_YEAR = 1583
MAX_YEAR = 4099

MONDAY = 0
FRIDAY = 4
SATURDAY = 5
SUNDAY = 6


def validate_year(year: int) -> int:
    """
    Check that a year can be used by the holiday rules.

    Raises:
        InvalidYearError: If year is not an int or outside MIN_YEAR..MAX_YEAR
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(
            message=f"Year must be an integer, got {type(year).__name__}",
            details={"year": repr(year)},
        )
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(
            message=f"Year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}",
            details={"year": year, "min_year": MIN_YEAR, "max_year": MAX_YEAR},
        )
    return year


# =============================================================================
# Date Helpers
# =============================================================================

def next_weekday(d: date) -> date:
    """
    Get the first Monday-Friday date on or after d.

    Only Saturdays and Sundays are skipped; other holidays are not.
    """
    if d.weekday() == SATURDAY:
        return d + timedelta(days=2)
    elif d.weekday() == SUNDAY:
        return d + timedelta(days=1)
    return d


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        n: Which occurrence (1=first, 2=second, etc.)

    Returns:
        The date of the nth weekday
    """
    first_day = date(year, month, 1)
    days_until_weekday = (weekday - first_day.weekday()) % 7
    first_occurrence = first_day + timedelta(days=days_until_weekday)
    return first_occurrence + timedelta(weeks=n - 1)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Get the last occurrence of a weekday in a month."""
    if month == 12:
        last_day = date(year, 12, 31)
    else:
        last_day = date(year, month + 1, 1) - timedelta(days=1)
    days_back = (last_day.weekday() - weekday) % 7
    return last_day - timedelta(days=days_back)


def easter_sunday(year: int) -> date:
    """Get Easter Sunday for a year (Gregorian calendar)."""
    return easter(validate_year(year), EASTER_WESTERN)


# =============================================================================
# Holiday Rules
# =============================================================================

def new_years_day(year: int) -> date:
    """New Year's Day, moved to the following Monday when on a weekend."""
    return next_weekday(date(validate_year(year), 1, 1))


def good_friday(year: int) -> date:
    """Good Friday: 2 days before Easter Sunday."""
    return easter_sunday(year) - timedelta(days=2)


def easter_monday(year: int) -> date:
    """Easter Monday: 1 day after Easter Sunday."""
    return easter_sunday(year) + timedelta(days=1)


def early_may_bank_holiday(year: int) -> date:
    """Early May bank holiday: 1st Monday in May."""
    return nth_weekday_of_month(validate_year(year), 5, MONDAY, 1)


def spring_bank_holiday(year: int) -> date:
    """Spring bank holiday: last Monday in May."""
    return last_weekday_of_month(validate_year(year), 5, MONDAY)


def summer_bank_holiday(year: int) -> date:
    """Summer (August) bank holiday: last Monday in August."""
    return last_weekday_of_month(validate_year(year), 8, MONDAY)


def christmas_day(year: int) -> date:
    """
    Christmas Day bank holiday.

    On a Sunday the holiday is carried to Tuesday December 27, because
    Boxing Day keeps Monday the 26th. On a Saturday it moves to Monday
    December 27.
    """
    christmas = date(validate_year(year), 12, 25)
    if christmas.weekday() == SUNDAY:
        return christmas + timedelta(days=2)
    return next_weekday(christmas)


def boxing_day(year: int) -> date:
    """
    Boxing Day bank holiday.

    On a Sunday (Christmas on Saturday, observed Monday) the holiday is
    carried to Tuesday December 28. On a Saturday it moves to Monday
    December 28.
    """
    boxing = date(validate_year(year), 12, 26)
    if boxing.weekday() == SUNDAY:
        return boxing + timedelta(days=2)
    return next_weekday(boxing)
