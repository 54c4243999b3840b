"""Calendar reference systems: the metrics used to interpret coordinates.

A calendar fixes how many seconds make a minute, minutes an hour and hours a
day, plus an ordered table of month lengths. An optional leap-year rule maps a
year to that year's month table, which lets Gregorian-style calendars coexist
with fictional or non-Earth ones under the same conversion engine.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from typing_extensions import override

from chronometry.errors import CalendarMetricsError, MissingReferenceError
from chronometry.units import UnitKind
from chronometry.util import (
    COMMON_MONTHS,
    HOURS_PER_DAY,
    LEAP_MONTHS,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class LeapYearRule(ABC):
    """Maps a year to the month-length table in force for that year."""

    @abstractmethod
    def month_lengths(self, year: float) -> Sequence[int]:
        pass


@dataclass(frozen=True)
class GregorianLeapRule(LeapYearRule):
    """Divisible by 4 and not by 100 unless by 400, from ``activation_year`` on."""

    activation_year: int = 1582

    def is_leap(self, year: float) -> bool:
        if year < self.activation_year:
            return False
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

    @override
    def month_lengths(self, year: float) -> Sequence[int]:
        return LEAP_MONTHS if self.is_leap(year) else COMMON_MONTHS


@dataclass(frozen=True)
class JulianLeapRule(LeapYearRule):
    """Every fourth year, no century exception and no activation floor."""

    def is_leap(self, year: float) -> bool:
        return year % 4 == 0

    @override
    def month_lengths(self, year: float) -> Sequence[int]:
        return LEAP_MONTHS if self.is_leap(year) else COMMON_MONTHS


@dataclass(frozen=True)
class FunctionLeapRule(LeapYearRule):
    """Adapts a plain ``year -> month lengths`` callable."""

    function: Callable[[float], Sequence[int]]

    @override
    def month_lengths(self, year: float) -> Sequence[int]:
        return self.function(year)


@dataclass(frozen=True, kw_only=True)
class CalendarReferenceSystem:
    """Metrics of a calendar.

    Attributes:
        iri: Identifier of the calendar (used as coordinate/extent metadata)
        months: Ordered day counts of the months of a common year
        seconds_per_minute: Seconds in a minute
        minutes_per_hour: Minutes in an hour
        hours_per_day: Hours in a day
        leap_year_rule: Optional rule resolving the month table of a given year;
            plain callables are wrapped in a FunctionLeapRule
    """

    iri: str
    months: tuple[int, ...]
    seconds_per_minute: int = SECONDS_PER_MINUTE
    minutes_per_hour: int = MINUTES_PER_HOUR
    hours_per_day: int = HOURS_PER_DAY
    leap_year_rule: LeapYearRule | None = None

    def __post_init__(self) -> None:
        if not self.iri:
            raise MissingReferenceError(
                f"CalendarReferenceSystem requires a non-empty iri.\n"
                f"Got: iri={self.iri!r}"
            )
        for name in ("seconds_per_minute", "minutes_per_hour", "hours_per_day"):
            value = getattr(self, name)
            if value is None or value <= 0:
                raise CalendarMetricsError(
                    f"Cannot build calendar metrics: '{name}' must be greater than zero.\n"
                    f"Got: {name}={value!r}"
                )
        if self.months is None:
            raise MissingReferenceError(
                "Cannot build calendar metrics: 'months' is required.\n"
                "Example: months=(30,) * 12 for twelve 30-day months"
            )
        months = tuple(self.months)
        _check_months(months, "months")
        object.__setattr__(self, "months", months)

        rule = self.leap_year_rule
        if rule is not None and not isinstance(rule, LeapYearRule):
            if not callable(rule):
                raise TypeError(
                    f"leap_year_rule must be a LeapYearRule or a callable, "
                    f"got {type(rule).__name__!r}"
                )
            object.__setattr__(self, "leap_year_rule", FunctionLeapRule(rule))

    @property
    def days_per_year(self) -> int:
        return sum(self.months)

    @property
    def months_per_year(self) -> int:
        return len(self.months)

    @property
    def has_exact_metric(self) -> bool:
        """True when every month has the same length.

        Only then can a day count be attributed exactly to months and years.
        """
        return len(set(self.months)) == 1

    @property
    def average_month_days(self) -> float:
        return self.days_per_year / self.months_per_year

    @property
    def seconds_per_hour(self) -> int:
        return self.seconds_per_minute * self.minutes_per_hour

    @property
    def seconds_per_day(self) -> int:
        return self.seconds_per_hour * self.hours_per_day

    @property
    def seconds_per_month(self) -> float:
        """Seconds in an average month (``days_per_year / months_per_year`` days)."""
        return self.seconds_per_day * self.average_month_days

    @property
    def seconds_per_year(self) -> int:
        return self.seconds_per_day * self.days_per_year

    def seconds_in(self, kind: UnitKind) -> float:
        """Seconds in one unit of ``kind`` (months and years use the common-year table)."""
        match kind:
            case UnitKind.SECOND:
                return 1
            case UnitKind.MINUTE:
                return self.seconds_per_minute
            case UnitKind.HOUR:
                return self.seconds_per_hour
            case UnitKind.DAY:
                return self.seconds_per_day
            case UnitKind.MONTH:
                return self.seconds_per_month
            case UnitKind.YEAR:
                return self.seconds_per_year
        raise ValueError(f"Unknown unit kind: {kind!r}")

    def month_lengths(self, year: float) -> tuple[int, ...]:
        """Month table in force for ``year``, resolving the leap rule if any."""
        if self.leap_year_rule is None:
            return self.months
        resolved = tuple(self.leap_year_rule.month_lengths(year))
        if len(resolved) != self.months_per_year:
            raise CalendarMetricsError(
                f"Leap-year rule returned {len(resolved)} months for year {year:g}, "
                f"expected {self.months_per_year}.\n"
                f"Got: {resolved}"
            )
        _check_months(resolved, f"leap-year rule result for year {year:g}")
        return resolved

    def days_in_year(self, year: float) -> int:
        return sum(self.month_lengths(year))

    def without_leap_rule(self) -> "CalendarReferenceSystem":
        """Same metrics, with the common-year month table applied to every year."""
        return replace(self, leap_year_rule=None)


def _check_months(months: tuple[int, ...], name: str) -> None:
    if not months:
        raise CalendarMetricsError(
            f"Cannot build calendar metrics: '{name}' must contain at least one month."
        )
    if any(length is None or length <= 0 for length in months):
        raise CalendarMetricsError(
            f"Cannot build calendar metrics: '{name}' must contain only lengths "
            f"greater than zero.\n"
            f"Got: {months}"
        )


GREGORIAN = CalendarReferenceSystem(
    iri="https://en.wikipedia.org/wiki/Gregorian_calendar",
    months=COMMON_MONTHS,
    leap_year_rule=GregorianLeapRule(),
)

JULIAN = CalendarReferenceSystem(
    iri="https://en.wikipedia.org/wiki/Julian_calendar",
    months=COMMON_MONTHS,
    leap_year_rule=JulianLeapRule(),
)
