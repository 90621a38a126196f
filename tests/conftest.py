"""
Pytest configuration and fixtures for ewbank tests.

Provides calendars, calculators and published bank holiday dates shared
across test modules.
"""
import pytest
from datetime import date

from ewbank.calendars import BankHolidayCalculator, EnglandAndWalesCalendar


# =============================================================================
# Published Bank Holidays
# =============================================================================

# Dates in registry order: new year, good friday, easter monday, early may,
# spring, summer, christmas, boxing day.
BANK_HOLIDAYS_BY_YEAR = {
    2008: [
        date(2008, 1, 1), date(2008, 3, 21), date(2008, 3, 24), date(2008, 5, 5),
        date(2008, 5, 26), date(2008, 8, 25), date(2008, 12, 25), date(2008, 12, 26),
    ],
    2010: [
        date(2010, 1, 1), date(2010, 4, 2), date(2010, 4, 5), date(2010, 5, 3),
        date(2010, 5, 31), date(2010, 8, 30), date(2010, 12, 27), date(2010, 12, 28),
    ],
    2011: [
        date(2011, 1, 3), date(2011, 4, 22), date(2011, 4, 25), date(2011, 5, 2),
        date(2011, 5, 30), date(2011, 8, 29), date(2011, 12, 27), date(2011, 12, 26),
    ],
    2015: [
        date(2015, 1, 1), date(2015, 4, 3), date(2015, 4, 6), date(2015, 5, 4),
        date(2015, 5, 25), date(2015, 8, 31), date(2015, 12, 25), date(2015, 12, 28),
    ],
    2024: [
        date(2024, 1, 1), date(2024, 3, 29), date(2024, 4, 1), date(2024, 5, 6),
        date(2024, 5, 27), date(2024, 8, 26), date(2024, 12, 25), date(2024, 12, 26),
    ],
    2025: [
        date(2025, 1, 1), date(2025, 4, 18), date(2025, 4, 21), date(2025, 5, 5),
        date(2025, 5, 26), date(2025, 8, 25), date(2025, 12, 25), date(2025, 12, 26),
    ],
    2026: [
        date(2026, 1, 1), date(2026, 4, 3), date(2026, 4, 6), date(2026, 5, 4),
        date(2026, 5, 25), date(2026, 8, 31), date(2026, 12, 25), date(2026, 12, 28),
    ],
}


@pytest.fixture
def bank_holidays_by_year():
    """Published England and Wales bank holidays, keyed by year."""
    return BANK_HOLIDAYS_BY_YEAR


@pytest.fixture
def calendar():
    """A default England and Wales calendar."""
    return EnglandAndWalesCalendar()


@pytest.fixture
def calc_2011():
    """A calculator anchored on 2011."""
    return BankHolidayCalculator(year=2011)
