"""Temporal extents: a decomposed duration (years…seconds)."""

from dataclasses import dataclass, field, replace
from datetime import timedelta
from functools import total_ordering
from typing import Any

from dateutil.relativedelta import relativedelta

from chronometry.calendar import GREGORIAN
from chronometry.errors import NegativeComponentError, TemporalError
from chronometry.util import DAYS_PER_WEEK, MINUTES_PER_HOUR, SECONDS_PER_MINUTE

_FIELDS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")

# relativedelta fields that pin an absolute date rather than add a duration
_ABSOLUTE_FIELDS = ("year", "month", "day", "weekday", "hour", "minute", "second", "microsecond")


@dataclass(frozen=True)
class ExtentMetadata:
    trs: str | None = None


@total_ordering
@dataclass(frozen=True, eq=False)
class TemporalExtent:
    """A duration decomposed into seven independently optional fields.

    Ordering and equality are lexicographic from years down to seconds, with
    absent fields read as zero. Raw extents are not canonical: compare the
    results of ``normalize_extent`` when values come from different sources.
    """

    years: float | None = None
    months: float | None = None
    weeks: float | None = None
    days: float | None = None
    hours: float | None = None
    minutes: float | None = None
    seconds: float | None = None
    metadata: ExtentMetadata | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        for name in _FIELDS:
            value = getattr(self, name)
            if value is not None and value < 0:
                raise NegativeComponentError(
                    f"Cannot create temporal extent: '{name}' must not be negative.\n"
                    f"Got: {name}={value!r}"
                )

    def key(self) -> tuple[float, ...]:
        return tuple(0 if getattr(self, name) is None else getattr(self, name) for name in _FIELDS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemporalExtent):
            return NotImplemented
        return self.key() == other.key()

    def __lt__(self, other: "TemporalExtent") -> bool:
        if not isinstance(other, TemporalExtent):
            return NotImplemented
        return self.key() < other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        parts = [
            f"{_format(getattr(self, name))}{name[0] if name != 'months' else 'mo'}"
            for name in _FIELDS
            if getattr(self, name)
        ]
        return f"TemporalExtent({' '.join(parts) or '0s'})"

    def replace(self, **changes: Any) -> "TemporalExtent":
        return replace(self, **changes)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "TemporalExtent":
        """Decompose a non-negative timedelta into days, hours, minutes and seconds."""
        if value < timedelta(0):
            raise NegativeComponentError(
                f"Cannot create temporal extent from a negative timedelta.\n"
                f"Got: {value!r}"
            )
        hours, remainder = divmod(value.seconds, SECONDS_PER_MINUTE * MINUTES_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
        return cls(
            days=value.days,
            hours=hours,
            minutes=minutes,
            seconds=seconds + value.microseconds / 1_000_000,
            metadata=ExtentMetadata(trs=GREGORIAN.iri),
        )

    @classmethod
    def from_relativedelta(cls, value: relativedelta) -> "TemporalExtent":
        """Map a relative (not absolute) relativedelta onto an extent.

        ``relativedelta`` folds weeks into days, so ``weeks`` stays absent.
        """
        pinned = [name for name in _ABSOLUTE_FIELDS if getattr(value, name) is not None]
        if pinned:
            raise TemporalError(
                f"Cannot create temporal extent from a relativedelta with absolute fields.\n"
                f"Got: {', '.join(f'{name}={getattr(value, name)!r}' for name in pinned)}\n"
                f"Hint: use plural (relative) arguments, e.g. relativedelta(months=+1)"
            )
        return cls(
            years=value.years,
            months=value.months,
            days=value.days,
            hours=value.hours,
            minutes=value.minutes,
            seconds=value.seconds + value.microseconds / 1_000_000,
            metadata=ExtentMetadata(trs=GREGORIAN.iri),
        )

    def to_relativedelta(self) -> relativedelta:
        """Return an equivalent relativedelta, folding weeks into days."""
        seconds = self.seconds or 0
        whole = int(seconds)
        return relativedelta(
            years=int(self.years or 0),
            months=int(self.months or 0),
            days=_whole((self.days or 0) + DAYS_PER_WEEK * (self.weeks or 0)),
            hours=_whole(self.hours or 0),
            minutes=_whole(self.minutes or 0),
            seconds=whole,
            microseconds=round((seconds - whole) * 1_000_000),
        )


def _whole(value: float) -> float:
    return int(value) if float(value).is_integer() else value


def _format(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


ZERO = TemporalExtent(0, 0, 0, 0, 0, 0, 0)
