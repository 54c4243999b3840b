"""Temporal units: a named scale applied to one of six base unit kinds."""

from dataclasses import dataclass
from enum import StrEnum

from chronometry.errors import MissingReferenceError


class UnitKind(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


@dataclass(frozen=True, kw_only=True)
class TemporalUnit:
    """A unit worth ``scale_factor`` times one ``kind``.

    The scale factor may be negative (epoch-relative "ago" units, e.g. million
    years ago) or fractional (a Mars sol is 1.02749125 days).
    """

    iri: str
    kind: UnitKind
    scale_factor: float = 1.0

    def __post_init__(self) -> None:
        if not self.iri:
            raise MissingReferenceError(
                f"TemporalUnit requires a non-empty iri.\n"
                f"Got: iri={self.iri!r}"
            )
        # Accept plain strings ("day") as well as UnitKind members
        object.__setattr__(self, "kind", UnitKind(self.kind))

    def __str__(self) -> str:
        return f"TemporalUnit({self.scale_factor:g} {self.kind})"


_TIME = "http://www.w3.org/2006/time#"

MILLENNIUM = TemporalUnit(iri=f"{_TIME}unitMillenium", kind=UnitKind.YEAR, scale_factor=1000)
CENTURY = TemporalUnit(iri=f"{_TIME}unitCentury", kind=UnitKind.YEAR, scale_factor=100)
DECADE = TemporalUnit(iri=f"{_TIME}unitDecade", kind=UnitKind.YEAR, scale_factor=10)
YEAR = TemporalUnit(iri=f"{_TIME}unitYear", kind=UnitKind.YEAR)
MONTH = TemporalUnit(iri=f"{_TIME}unitMonth", kind=UnitKind.MONTH)
WEEK = TemporalUnit(iri=f"{_TIME}unitWeek", kind=UnitKind.DAY, scale_factor=7)
DAY = TemporalUnit(iri=f"{_TIME}unitDay", kind=UnitKind.DAY)
HOUR = TemporalUnit(iri=f"{_TIME}unitHour", kind=UnitKind.HOUR)
MINUTE = TemporalUnit(iri=f"{_TIME}unitMinute", kind=UnitKind.MINUTE)
SECOND = TemporalUnit(iri=f"{_TIME}unitSecond", kind=UnitKind.SECOND)

# Derived
BILLION_YEARS_AGO = TemporalUnit(
    iri="https://en.wikipedia.org/wiki/Bya", kind=UnitKind.YEAR, scale_factor=-1e9
)
MILLION_YEARS_AGO = TemporalUnit(
    iri="https://en.wikipedia.org/wiki/Million_years_ago",
    kind=UnitKind.YEAR,
    scale_factor=-1e6,
)
MARS_SOL = TemporalUnit(
    iri="https://en.wikipedia.org/wiki/Mars_sol",
    kind=UnitKind.DAY,
    scale_factor=1.02749125,
)

BUILTIN_UNITS: tuple[TemporalUnit, ...] = (
    MILLENNIUM,
    CENTURY,
    DECADE,
    YEAR,
    MONTH,
    WEEK,
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    BILLION_YEARS_AGO,
    MILLION_YEARS_AGO,
    MARS_SOL,
)
