"""
ewbank Exception Hierarchy

Domain-specific exceptions for bank holiday and working day calculations.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: EW_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BankHolidayError(Exception):
    """
    Base exception for all ewbank errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (EW_*)
        details: Additional context about the error
    """
    message: str
    code: str = "EW_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Date Input Errors
# =============================================================================

@dataclass
class InvalidDateRangeError(BankHolidayError):
    """Range start does not fall strictly before range end."""
    code: str = "EW_INVALID_DATE_RANGE"


@dataclass
class MissingDateError(BankHolidayError):
    """A required date argument was not supplied."""
    code: str = "EW_MISSING_DATE"


@dataclass
class InvalidYearError(BankHolidayError):
    """Year is not an integer or lies outside the supported window."""
    code: str = "EW_INVALID_YEAR"


@dataclass
class InvalidCalendarError(BankHolidayError):
    """Holiday calendar configuration is invalid."""
    code: str = "EW_INVALID_CALENDAR"


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigLoadError(BankHolidayError):
    """Failed to read calendar settings from file."""
    code: str = "EW_CONFIG_LOAD_ERROR"


@dataclass
class ConfigValidationError(BankHolidayError):
    """Calendar settings failed schema validation."""
    code: str = "EW_CONFIG_VALIDATION_ERROR"
