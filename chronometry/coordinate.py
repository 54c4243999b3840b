"""Temporal coordinates: a decomposed point in time (year…second)."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from functools import total_ordering
from typing import Any

from dateutil import tz
from dateutil.parser import isoparse

from chronometry.calendar import GREGORIAN
from chronometry.errors import NegativeComponentError
from chronometry.units import UnitKind

_FIELDS = ("year", "month", "day", "hour", "minute", "second")


@dataclass(frozen=True)
class CoordinateMetadata:
    """Provenance of a coordinate.

    Attributes:
        trs: IRI of the calendar the coordinate was produced under
        unit_kind: Granularity of the producing conversion (year or second)
        month_of_year: Month number, when known from a source datetime
        day_of_week: ISO weekday (Monday=1), when known from a source datetime
        day_of_year: Ordinal day in the year, when known from a source datetime
    """

    trs: str | None = None
    unit_kind: UnitKind | None = None
    month_of_year: int | None = None
    day_of_week: int | None = None
    day_of_year: int | None = None


@total_ordering
@dataclass(frozen=True, eq=False)
class TemporalCoordinate:
    """A point in time decomposed into six independently optional fields.

    Absent fields stay ``None`` on inspection but compare as zero, so
    ``TemporalCoordinate(2020)`` equals ``TemporalCoordinate(2020, 0, 0, 0, 0, 0)``.
    Month through second must not be negative; the year may be (geologic and
    BCE positions). Out-of-range values such as ``day=45`` are accepted and
    resolved by ``normalize_coordinate``.
    """

    year: float | None = None
    month: float | None = None
    day: float | None = None
    hour: float | None = None
    minute: float | None = None
    second: float | None = None
    metadata: CoordinateMetadata | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        for name in _FIELDS[1:]:
            value = getattr(self, name)
            if value is not None and value < 0:
                raise NegativeComponentError(
                    f"Cannot create temporal coordinate: '{name}' must not be negative.\n"
                    f"Got: {name}={value!r}"
                )

    def key(self) -> tuple[float, ...]:
        """Comparison key: the six fields with zero substituted for absent ones."""
        return tuple(
            0 if value is None else value
            for value in (self.year, self.month, self.day, self.hour, self.minute, self.second)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemporalCoordinate):
            return NotImplemented
        return self.key() == other.key()

    def __lt__(self, other: "TemporalCoordinate") -> bool:
        if not isinstance(other, TemporalCoordinate):
            return NotImplemented
        return self.key() < other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        year, month, day, hour, minute, second = (
            _format(getattr(self, name)) for name in _FIELDS
        )
        return f"TemporalCoordinate({year}-{month}-{day} {hour}:{minute}:{second})"

    def replace(self, **changes: Any) -> "TemporalCoordinate":
        return replace(self, **changes)

    @classmethod
    def from_datetime(cls, value: datetime | str) -> "TemporalCoordinate":
        """Build a Gregorian coordinate from an aware datetime or ISO-8601 string.

        The value is normalized to UTC; microseconds become the fractional part
        of ``second``. Month-of-year, ISO day-of-week and day-of-year are kept
        as metadata.

        Raises:
            TypeError: If value is not a datetime/string, or is a naive datetime
        """
        if isinstance(value, str):
            value = isoparse(value)
        if not isinstance(value, datetime):
            raise TypeError(
                f"Coordinate source must be a datetime or an ISO-8601 string.\n"
                f"Got {type(value).__name__!r}: {value!r}"
            )
        if value.tzinfo is None:
            raise TypeError(
                f"Coordinate source must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from dateutil import tz\n"
                f"  dt = datetime(..., tzinfo=tz.UTC)\n"
                f"  # Or include an offset in ISO strings: '2025-01-01T00:00:00Z'"
            )
        utc = value.astimezone(tz.UTC)
        return cls(
            utc.year,
            utc.month,
            utc.day,
            utc.hour,
            utc.minute,
            utc.second + utc.microsecond / 1_000_000,
            metadata=CoordinateMetadata(
                trs=GREGORIAN.iri,
                unit_kind=UnitKind.SECOND,
                month_of_year=utc.month,
                day_of_week=utc.isoweekday(),
                day_of_year=utc.timetuple().tm_yday,
            ),
        )

    def to_datetime(self) -> datetime:
        """Return the coordinate as an aware UTC datetime.

        Absent month/day default to 1 and absent clock fields to 0. The
        coordinate must already be in range (see ``normalize_coordinate``) and
        within the years ``datetime`` supports.
        """
        second = self.second or 0
        whole = int(second)
        microsecond = min(round((second - whole) * 1_000_000), 999_999)
        return datetime(
            int(self.year or 0),
            int(self.month or 1),
            int(self.day or 1),
            int(self.hour or 0),
            int(self.minute or 0),
            whole,
            microsecond,
            tzinfo=tz.UTC,
        )


def _format(value: float | None) -> str:
    if value is None:
        return "?"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


ZERO = TemporalCoordinate(0, 0, 0, 0, 0, 0)
UNIX_EPOCH = TemporalCoordinate(1970, 1, 1, 0, 0, 0)
GEOLOGIC_EPOCH = TemporalCoordinate(1950, 1, 1, 0, 0, 0)
