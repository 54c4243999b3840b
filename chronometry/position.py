"""Position reference systems: scalar time measured from an epoch."""

from dataclasses import dataclass

from chronometry.coordinate import GEOLOGIC_EPOCH, UNIX_EPOCH, TemporalCoordinate
from chronometry.errors import require
from chronometry.units import MILLION_YEARS_AGO, SECOND, TemporalUnit


@dataclass(frozen=True, kw_only=True)
class PositionReferenceSystem:
    """An epoch plus the unit positions are counted in.

    Attributes:
        iri: Identifier of the reference system
        origin: Coordinate that position 0 maps to
        unit: Unit a position of 1 is worth
        large_scale: True when only the year is meaningful (geologic or
            astronomic time); False for full clock semantics
    """

    iri: str
    origin: TemporalCoordinate
    unit: TemporalUnit
    large_scale: bool = False

    def __post_init__(self) -> None:
        require(self.origin, "origin", "create PositionReferenceSystem")
        require(self.unit, "unit", "create PositionReferenceSystem")
        if not isinstance(self.origin, TemporalCoordinate):
            raise TypeError(
                f"PositionReferenceSystem origin must be a TemporalCoordinate, "
                f"got {type(self.origin).__name__!r}"
            )
        if not isinstance(self.unit, TemporalUnit):
            raise TypeError(
                f"PositionReferenceSystem unit must be a TemporalUnit, "
                f"got {type(self.unit).__name__!r}"
            )


UNIX_TIME = PositionReferenceSystem(
    iri="https://en.wikipedia.org/wiki/Unix_time",
    origin=UNIX_EPOCH,
    unit=SECOND,
)

GEOLOGIC_TIME = PositionReferenceSystem(
    iri="http://www.opengis.net/def/crs/OGC/0/ChronometricGeologicTime",
    origin=GEOLOGIC_EPOCH,
    unit=MILLION_YEARS_AGO,
    large_scale=True,
)
