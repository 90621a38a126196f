"""
ewbank Calendar Settings

Loads and validates calendar settings from YAML or JSON files and builds
the configured EnglandAndWalesCalendar.

Example settings file:

    schema_version: "1.0.0"
    weekend_days: [5, 6]          # 0=Monday, 6=Sunday
    holidays:                     # subset of the named bank holidays
      - new_years_day
      - good_friday
      - easter_monday
      - christmas_day
      - boxing_day

Every key is optional; an empty file gives the default calendar.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .calendars.england_wales import EnglandAndWalesCalendar
from .calendars.registry import ALL_BANK_HOLIDAYS
from .exceptions import ConfigLoadError, ConfigValidationError

logger = logging.getLogger(__name__)


SCHEMA_VERSION = "1.0.0"

BankHolidayValue = Literal[
    "new_years_day", "good_friday", "easter_monday",
    "early_may_bank_holiday", "spring_bank_holiday", "summer_bank_holiday",
    "christmas_day", "boxing_day",
]


class CalendarSettingsSchema(BaseModel):
    """Schema for a calendar settings file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Settings schema version")
    weekend_days: list[int] = Field(
        default_factory=lambda: [5, 6],
        description="Non-working days of the week (0=Monday, 6=Sunday)",
    )
    holidays: list[BankHolidayValue] = Field(
        default_factory=lambda: [h.value for h in ALL_BANK_HOLIDAYS],
        description="Bank holidays observed by the calendar",
    )

    @field_validator("weekend_days")
    @classmethod
    def validate_weekend_days(cls, v: list[int]) -> list[int]:
        """Weekday numbers must be 0-6 and unique."""
        invalid = [d for d in v if not 0 <= d <= 6]
        if invalid:
            raise ValueError(f"weekend days must be between 0 and 6, got {invalid}")
        if len(set(v)) != len(v):
            raise ValueError("weekend days must not be repeated")
        if len(v) == 7:
            raise ValueError("weekend days must leave at least one working day")
        return v

    @field_validator("holidays")
    @classmethod
    def validate_holidays(cls, v: list[str]) -> list[str]:
        """Holidays must not be repeated."""
        if len(set(v)) != len(v):
            raise ValueError("holidays must not be repeated")
        return v

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }

    def to_calendar(self) -> EnglandAndWalesCalendar:
        """Build the calendar these settings describe, keeping registry order."""
        selected = set(self.holidays)
        return EnglandAndWalesCalendar(
            weekend_days=frozenset(self.weekend_days),
            holidays=tuple(h for h in ALL_BANK_HOLIDAYS if h.value in selected),
        )


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a settings file's schema version is compatible.

    Only the major version has to match.
    """
    settings_version = str(data.get("schema_version", SCHEMA_VERSION))
    return settings_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]


def validate_calendar_settings(
    data: Any,
    source: str = "<string>",
    strict_version: bool = True,
) -> CalendarSettingsSchema:
    """
    Validate a settings dictionary against the schema.

    Args:
        data: Dictionary loaded from YAML/JSON (None is treated as empty)
        source: Where the data came from, for error messages
        strict_version: Reject incompatible schema versions instead of warning

    Raises:
        ConfigValidationError: If validation fails
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError(
            message=f"Calendar settings must be a mapping, got {type(data).__name__}",
            details={"source": source},
        )

    if not check_schema_version(data):
        settings_version = data.get("schema_version", "unknown")
        if strict_version:
            raise ConfigValidationError(
                message=(
                    f"Schema version mismatch: settings have {settings_version}, "
                    f"expected {SCHEMA_VERSION}"
                ),
                details={
                    "source": source,
                    "settings_version": settings_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )
        logger.warning(
            "Calendar settings %s use schema version %s, expected %s",
            source, settings_version, SCHEMA_VERSION,
        )

    try:
        return CalendarSettingsSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            message=f"Calendar settings validation failed: {e.error_count()} errors",
            details={"errors": e.errors(), "source": source},
        )


def _load_file(path: Path) -> Any:
    """Load data from YAML or JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(f)
        elif path.suffix.lower() == ".json":
            return json.load(f)
        else:
            # Try YAML first, then JSON
            content = f.read()
            try:
                return yaml.safe_load(content)
            except yaml.YAMLError:
                return json.loads(content)


def load_calendar_settings(
    path: Union[str, Path],
    strict_version: bool = True,
) -> EnglandAndWalesCalendar:
    """
    Load a calendar from a settings file.

    Args:
        path: Path to YAML or JSON file
        strict_version: Reject incompatible schema versions instead of warning

    Returns:
        The configured EnglandAndWalesCalendar

    Raises:
        ConfigLoadError: If file cannot be read or parsed
        ConfigValidationError: If validation fails
    """
    path = Path(path)

    try:
        data = _load_file(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigLoadError(
            message=f"Failed to load calendar settings: {e}",
            details={"path": str(path), "error": str(e)},
        )

    settings = validate_calendar_settings(data, str(path), strict_version)
    logger.debug("Loaded calendar settings from %s: %s", path, settings.holidays)
    return settings.to_calendar()


def load_calendar_settings_from_string(
    content: str,
    format: str = "yaml",
    strict_version: bool = True,
) -> EnglandAndWalesCalendar:
    """
    Load a calendar from a settings string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
        strict_version: Reject incompatible schema versions instead of warning

    Returns:
        The configured EnglandAndWalesCalendar
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigLoadError(
            message=f"Failed to parse calendar settings: {e}",
            details={"format": format, "error": str(e)},
        )

    return validate_calendar_settings(data, strict_version=strict_version).to_calendar()
