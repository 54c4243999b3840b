"""Conversion engine between positions, coordinates and extents.

Every function takes an optional calendar defaulting to ``GREGORIAN`` and is
pure: arguments are never mutated and no state is shared between calls, so
the functions are safe to call concurrently without locking.

Unit kinds are chained through the calendar metrics (seconds, minutes, hours,
days, average months, years). Months and years counted as units always use
the common-year table (``days_per_year / months_per_year`` days per month);
only the coordinate routines resolve the leap-year rule year by year.
"""

import logging

from chronometry.calendar import GREGORIAN, CalendarReferenceSystem
from chronometry.coordinate import CoordinateMetadata, TemporalCoordinate
from chronometry.errors import NegativeComponentError, TemporalError, require
from chronometry.extent import ExtentMetadata, TemporalExtent
from chronometry.position import PositionReferenceSystem
from chronometry.units import SECOND, TemporalUnit, UnitKind
from chronometry.util import DAYS_PER_WEEK, truncate

logger = logging.getLogger(__name__)


def position_to_coordinate(
    position: float,
    position_trs: PositionReferenceSystem,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalCoordinate:
    """Convert a scalar position in ``position_trs`` to a calendar coordinate.

    Large-scale systems only move the year (truncated toward zero) and leave
    the other fields absent. Little-scale systems run the clock emulator from
    the normalized origin.

    Example:
        >>> position_to_coordinate(0, UNIX_TIME)
        TemporalCoordinate(year=1970.0, month=1.0, day=1.0, ...)
    """
    require(position, "position", "convert position to coordinate")
    require(position_trs, "position_trs", "convert position to coordinate")
    calendar = calendar or GREGORIAN

    origin = normalize_coordinate(position_trs.origin, calendar)
    unit = position_trs.unit
    scaled = position * unit.scale_factor

    if position_trs.large_scale:
        years = scaled * calendar.seconds_in(unit.kind) / calendar.seconds_per_year
        logger.debug(
            "position %s in %s -> %s years from origin year %s",
            position, position_trs.iri, years, origin.year,
        )
        return TemporalCoordinate(
            truncate(origin.year + years),
            metadata=CoordinateMetadata(trs=calendar.iri, unit_kind=UnitKind.YEAR),
        )

    seconds = scaled * calendar.seconds_in(unit.kind)
    logger.debug("position %s in %s -> %s seconds from origin", position, position_trs.iri, seconds)
    clock = _Clock(origin, calendar)
    if seconds > 0:
        clock.tick_forward(seconds)
    elif seconds < 0:
        clock.tick_backward(-seconds)
    return clock.coordinate()


def coordinate_to_position(
    coordinate: TemporalCoordinate,
    position_trs: PositionReferenceSystem,
    calendar: CalendarReferenceSystem | None = None,
) -> float:
    """Convert a calendar coordinate to a scalar position in ``position_trs``.

    Inverse of ``position_to_coordinate``: large-scale systems compare years
    only, little-scale systems compare exact second counts since year 0.
    """
    require(coordinate, "coordinate", "convert coordinate to position")
    require(position_trs, "position_trs", "convert coordinate to position")
    calendar = calendar or GREGORIAN

    origin = normalize_coordinate(position_trs.origin, calendar)
    target = normalize_coordinate(coordinate, calendar)
    unit = position_trs.unit

    if position_trs.large_scale:
        seconds = (target.year - origin.year) * calendar.seconds_per_year
    else:
        seconds = _absolute_seconds(target, calendar) - _absolute_seconds(origin, calendar)

    position = seconds / calendar.seconds_in(unit.kind) / _scale_factor(unit)
    logger.debug("%s -> position %s in %s", target, position, position_trs.iri)
    return position


def normalize_coordinate(
    coordinate: TemporalCoordinate,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalCoordinate:
    """Resolve an out-of-range coordinate into canonical calendar form.

    Carries propagate upward: seconds into minutes, minutes into hours, hours
    into days. Month is brought into ``[1, months_per_year]`` first (carrying
    into the year; absent or zero months read as 1), then the day is walked
    through the month table of the carried year, re-resolving the leap rule
    each time the year changes. Absent fields read as zero, except month and
    day which read as 1. Every field is truncated toward zero except
    ``second``, which keeps its fraction.

    Example:
        >>> normalize_coordinate(TemporalCoordinate(2023, 13, 1, 0, 0, 0))
        TemporalCoordinate(year=2024.0, month=1.0, day=1.0, ...)
    """
    require(coordinate, "coordinate", "normalize coordinate")
    calendar = calendar or GREGORIAN

    second = coordinate.second or 0
    minute = (coordinate.minute or 0) + truncate(second / calendar.seconds_per_minute)
    second %= calendar.seconds_per_minute
    hour = (coordinate.hour or 0) + truncate(minute / calendar.minutes_per_hour)
    minute %= calendar.minutes_per_hour
    day_carry = truncate(hour / calendar.hours_per_day)
    hour %= calendar.hours_per_day

    month = max(truncate(coordinate.month or 0), 1)
    year_carry, month_index = divmod(month - 1, calendar.months_per_year)
    month = month_index + 1
    year = truncate((coordinate.year or 0) + year_carry)

    day = max(truncate(coordinate.day or 0), 1) + day_carry
    months = calendar.month_lengths(year)
    while day > months[int(month) - 1]:
        # Skip whole years when starting from January
        if month == 1 and day > sum(months):
            day -= sum(months)
            year += 1
            months = calendar.month_lengths(year)
            continue
        day -= months[int(month) - 1]
        month += 1
        if month > calendar.months_per_year:
            month = 1
            year += 1
            months = calendar.month_lengths(year)

    return TemporalCoordinate(
        year,
        month,
        day,
        truncate(hour),
        truncate(minute),
        second,
        metadata=CoordinateMetadata(trs=calendar.iri, unit_kind=UnitKind.SECOND),
    )


def duration_to_extent(
    duration: float,
    unit: TemporalUnit,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalExtent:
    """Decompose a non-negative duration expressed in ``unit`` into an extent.

    Seconds, minutes, hours and days are always populated. Months and years
    are populated only when the calendar has an exact metric (all months of
    equal length); otherwise a day count cannot be attributed to months and
    they stay zero, along with weeks.

    Raises:
        NegativeComponentError: If duration is negative (or turns negative
            through a negative unit scale factor)
    """
    require(duration, "duration", "convert duration to extent")
    require(unit, "unit", "convert duration to extent")
    if duration < 0:
        raise NegativeComponentError(
            f"Cannot convert duration to extent: 'duration' must be greater or equal than zero.\n"
            f"Got: duration={duration!r}"
        )
    calendar = calendar or GREGORIAN

    seconds = duration * unit.scale_factor * calendar.seconds_in(unit.kind)
    if seconds < 0:
        raise NegativeComponentError(
            f"Cannot convert duration to extent: unit {unit.iri!r} has a negative "
            f"scale factor ({unit.scale_factor:g}), which yields a negative extent.\n"
            f"Hint: express durations in a unit with a positive scale factor"
        )
    return _decompose(seconds, calendar)


def extent_to_duration(
    extent: TemporalExtent,
    unit: TemporalUnit,
    calendar: CalendarReferenceSystem | None = None,
) -> float:
    """Sum an extent into a scalar duration expressed in ``unit``.

    Weeks count as seven days, months as the average month
    (``days_per_year / months_per_year`` days) and years as ``days_per_year``
    days.
    """
    require(extent, "extent", "convert extent to duration")
    require(unit, "unit", "convert extent to duration")
    calendar = calendar or GREGORIAN

    seconds = _extent_seconds(extent, calendar)
    return seconds / calendar.seconds_in(unit.kind) / _scale_factor(unit)


def normalize_extent(
    extent: TemporalExtent,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalExtent:
    """Canonical form of an extent.

    The extent is summed to seconds and re-expanded without the leap rule.
    Weeks always fold into days; years and months survive only on an
    exact-metric calendar.
    """
    require(extent, "extent", "normalize extent")
    calendar = calendar or GREGORIAN

    seconds = _extent_seconds(extent, calendar)
    return _decompose(seconds, calendar.without_leap_rule())


def extent_between_coordinates(
    start: TemporalCoordinate,
    end: TemporalCoordinate,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalExtent:
    """Non-negative extent separating two coordinates.

    Both coordinates are normalized and swapped if needed; direction is not
    encoded. Each field is weighted by its full calendar value (months by the
    average month, years by ``days_per_year``), so the result ignores leap days.
    """
    require(start, "start", "get extent between coordinates")
    require(end, "end", "get extent between coordinates")
    calendar = calendar or GREGORIAN

    start = normalize_coordinate(start, calendar)
    end = normalize_coordinate(end, calendar)
    if start >= end:
        start, end = end, start

    difference = abs(_weighted_seconds(end, calendar) - _weighted_seconds(start, calendar))
    return duration_to_extent(difference, SECOND, calendar)


def tick_forward(
    seconds: float,
    coordinate: TemporalCoordinate,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalCoordinate:
    """Return ``coordinate`` advanced by ``seconds`` of clock time.

    Example:
        >>> tick_forward(120, TemporalCoordinate(2024, 2, 28, 23, 59, 0))
        TemporalCoordinate(year=2024.0, month=2.0, day=29.0, hour=0.0, minute=1.0, ...)
    """
    require(coordinate, "coordinate", "tick forward")
    calendar = calendar or GREGORIAN
    clock = _Clock(normalize_coordinate(coordinate, calendar), calendar)
    clock.tick_forward(abs(seconds))
    return clock.coordinate()


def tick_backward(
    seconds: float,
    coordinate: TemporalCoordinate,
    calendar: CalendarReferenceSystem | None = None,
) -> TemporalCoordinate:
    """Return ``coordinate`` moved back by ``abs(seconds)`` of clock time.

    The sign is ignored, so the negative offsets produced by
    ``position_to_coordinate`` and plain counts both work.
    """
    require(coordinate, "coordinate", "tick backward")
    calendar = calendar or GREGORIAN
    clock = _Clock(normalize_coordinate(coordinate, calendar), calendar)
    clock.tick_backward(abs(seconds))
    return clock.coordinate()


class _Clock:
    """Mutable working copy of a normalized coordinate.

    Whole minutes and hours are carried by division; days are then walked
    through the month table, which is re-resolved whenever the year changes.
    Nothing outside this module sees the intermediate state.
    """

    def __init__(self, origin: TemporalCoordinate, calendar: CalendarReferenceSystem):
        self.calendar = calendar
        self.year: float = origin.year
        self.month: float = origin.month
        self.day: float = origin.day
        self.hour: float = origin.hour
        self.minute: float = origin.minute
        self.second: float = origin.second
        self.months = calendar.month_lengths(self.year)

    def tick_forward(self, seconds: float) -> None:
        days = self._carry(seconds)
        if days > 0:
            self._advance_days(days)

    def tick_backward(self, seconds: float) -> None:
        days = self._carry(-seconds)
        if days < 0:
            self._rewind_days(-days)

    def coordinate(self) -> TemporalCoordinate:
        return TemporalCoordinate(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            metadata=CoordinateMetadata(trs=self.calendar.iri, unit_kind=UnitKind.SECOND),
        )

    def _carry(self, seconds: float) -> float:
        """Apply a signed second count to second/minute/hour; return the day carry."""
        minutes, self.second = _floor_divmod(self.second + seconds, self.calendar.seconds_per_minute)
        hours, self.minute = _floor_divmod(self.minute + minutes, self.calendar.minutes_per_hour)
        days, self.hour = _floor_divmod(self.hour + hours, self.calendar.hours_per_day)
        return days

    def _resolve_year(self, year: float) -> None:
        self.year = year
        self.months = self.calendar.month_lengths(year)

    def _advance_days(self, days: float) -> None:
        while days > 0:
            if self.month == 1 and self.day == 1 and days >= sum(self.months):
                days -= sum(self.months)
                self._resolve_year(self.year + 1)
                continue
            remaining = self.months[int(self.month) - 1] - self.day + 1
            if days < remaining:
                self.day += days
                return
            days -= remaining
            self.day = 1
            self.month += 1
            if self.month > self.calendar.months_per_year:
                self.month = 1
                self._resolve_year(self.year + 1)

    def _rewind_days(self, days: float) -> None:
        last_month = self.calendar.months_per_year
        while days > 0:
            if (
                self.month == last_month
                and self.day == self.months[-1]
                and days >= sum(self.months)
            ):
                days -= sum(self.months)
                self._resolve_year(self.year - 1)
                self.day = self.months[-1]
                continue
            if days < self.day:
                self.day -= days
                return
            days -= self.day
            self.month -= 1
            if self.month < 1:
                self.month = last_month
                self._resolve_year(self.year - 1)
            # Land on the last valid day of the previous month
            self.day = self.months[int(self.month) - 1]


def _scale_factor(unit: TemporalUnit) -> float:
    if unit.scale_factor == 0:
        raise TemporalError(
            f"Cannot convert to unit {unit.iri!r}: its scale factor is zero."
        )
    return unit.scale_factor


def _floor_divmod(value: float, modulus: int) -> tuple[float, float]:
    """``divmod`` whose remainder stays strictly below ``modulus``.

    Float ``%`` rounds tiny negative values up to the modulus itself
    (``-5.5e-17 % 60 == 60.0``); that remainder is carried instead.
    """
    quotient, remainder = divmod(value, modulus)
    if remainder >= modulus:
        return quotient + 1, 0.0
    return quotient, remainder


def _days_in_years(years: range, calendar: CalendarReferenceSystem) -> int:
    """Total days of ``years``; each distinct month table is validated once."""
    rule = calendar.leap_year_rule
    totals: dict[tuple[int, ...], int] = {}
    days = 0
    for year in years:
        lengths = tuple(rule.month_lengths(year))
        total = totals.get(lengths)
        if total is None:
            total = totals[lengths] = sum(calendar.month_lengths(year))
        days += total
    return days


def _absolute_seconds(coordinate: TemporalCoordinate, calendar: CalendarReferenceSystem) -> float:
    """Exact seconds elapsed since 0-01-01T00:00:00 (plus one day, as days are 1-based)."""
    year = int(coordinate.year)
    if calendar.leap_year_rule is None:
        days = year * calendar.days_per_year
    elif year >= 0:
        days = _days_in_years(range(year), calendar)
    else:
        days = -_days_in_years(range(year, 0), calendar)

    months = calendar.month_lengths(year)
    days += sum(months[: int(coordinate.month) - 1])
    days += coordinate.day
    return (
        days * calendar.seconds_per_day
        + coordinate.hour * calendar.seconds_per_hour
        + coordinate.minute * calendar.seconds_per_minute
        + coordinate.second
    )


def _weighted_seconds(coordinate: TemporalCoordinate, calendar: CalendarReferenceSystem) -> float:
    return (
        coordinate.second
        + coordinate.minute * calendar.seconds_per_minute
        + coordinate.hour * calendar.seconds_per_hour
        + coordinate.day * calendar.seconds_per_day
        + coordinate.month * calendar.seconds_per_month
        + coordinate.year * calendar.seconds_per_year
    )


def _extent_seconds(extent: TemporalExtent, calendar: CalendarReferenceSystem) -> float:
    return (
        (extent.seconds or 0)
        + (extent.minutes or 0) * calendar.seconds_per_minute
        + (extent.hours or 0) * calendar.seconds_per_hour
        + (extent.days or 0) * calendar.seconds_per_day
        + (extent.weeks or 0) * calendar.seconds_per_day * DAYS_PER_WEEK
        + (extent.months or 0) * calendar.seconds_per_month
        + (extent.years or 0) * calendar.seconds_per_year
    )


def _decompose(seconds: float, calendar: CalendarReferenceSystem) -> TemporalExtent:
    minutes = truncate(seconds / calendar.seconds_per_minute % calendar.minutes_per_hour)
    hours = truncate(seconds / calendar.seconds_per_hour % calendar.hours_per_day)
    total_days = seconds / calendar.seconds_per_day
    days = truncate(total_days)
    months = years = 0.0
    # Calendarization needs months of equal length
    if calendar.has_exact_metric:
        days = truncate(total_days % calendar.average_month_days)
        months = truncate(total_days / calendar.average_month_days % calendar.months_per_year)
        years = truncate(total_days / calendar.days_per_year)

    return TemporalExtent(
        years,
        months,
        0.0,
        days,
        hours,
        minutes,
        seconds % calendar.seconds_per_minute,
        metadata=ExtentMetadata(trs=calendar.iri),
    )
