"""Environment-driven settings.

``CHRONOMETRY_LOG_LEVEL``
    Level name passed to ``configure_logging`` (default ``WARNING``).
``CHRONOMETRY_GREGORIAN_ACTIVATION_YEAR``
    First year the Gregorian leap rule applies in ``gregorian_calendar``
    (default 1582). The module-level ``GREGORIAN`` calendar ignores it.
"""

import os
from dataclasses import dataclass, replace

from chronometry.calendar import GREGORIAN, CalendarReferenceSystem, GregorianLeapRule
from chronometry.errors import ConfigurationError

LOG_LEVEL_ENV = "CHRONOMETRY_LOG_LEVEL"
ACTIVATION_YEAR_ENV = "CHRONOMETRY_GREGORIAN_ACTIVATION_YEAR"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ACTIVATION_YEAR = 1582

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    gregorian_activation_year: int = DEFAULT_ACTIVATION_YEAR


def load_settings() -> Settings:
    """Read settings from the environment, validating every value."""

    level = (os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in _LEVELS:
        raise ConfigurationError(
            f"Invalid {LOG_LEVEL_ENV}: {level!r}. Expected one of: {', '.join(_LEVELS)}"
        )

    raw_year = os.getenv(ACTIVATION_YEAR_ENV)
    if raw_year is None or not raw_year.strip():
        year = DEFAULT_ACTIVATION_YEAR
    else:
        try:
            year = int(raw_year)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid {ACTIVATION_YEAR_ENV}: {raw_year!r} is not an integer"
            ) from exc

    return Settings(log_level=level, gregorian_activation_year=year)


def gregorian_calendar(settings: Settings | None = None) -> CalendarReferenceSystem:
    """Gregorian calendar whose leap rule starts at the configured year."""
    settings = settings or load_settings()
    if settings.gregorian_activation_year == DEFAULT_ACTIVATION_YEAR:
        return GREGORIAN
    return replace(
        GREGORIAN,
        leap_year_rule=GregorianLeapRule(activation_year=settings.gregorian_activation_year),
    )
