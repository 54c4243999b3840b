"""Lookup of units and temporal reference systems by IRI.

A registry starts out with the built-in units and reference systems and only
ever grows. Writers serialize on a lock and publish a fresh mapping, so
readers always see a complete snapshot without taking the lock.
"""

import logging
import threading
from collections.abc import Iterator
from types import MappingProxyType

from chronometry.calendar import GREGORIAN, JULIAN, CalendarReferenceSystem
from chronometry.eras import OrdinalReferenceSystem
from chronometry.errors import require
from chronometry.position import GEOLOGIC_TIME, UNIX_TIME, PositionReferenceSystem
from chronometry.units import BUILTIN_UNITS, TemporalUnit

logger = logging.getLogger(__name__)

ReferenceSystem = CalendarReferenceSystem | PositionReferenceSystem | OrdinalReferenceSystem

BUILTIN_REFERENCE_SYSTEMS: tuple[ReferenceSystem, ...] = (
    GREGORIAN,
    JULIAN,
    UNIX_TIME,
    GEOLOGIC_TIME,
)


class ReferenceSystemRegistry:
    """Add-only registry of units and reference systems keyed by IRI."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._units: MappingProxyType[str, TemporalUnit] = MappingProxyType(
            {unit.iri: unit for unit in BUILTIN_UNITS}
        )
        self._systems: MappingProxyType[str, ReferenceSystem] = MappingProxyType(
            {trs.iri: trs for trs in BUILTIN_REFERENCE_SYSTEMS}
        )

    def __repr__(self) -> str:
        return f"ReferenceSystemRegistry(units={len(self._units)}, reference_systems={len(self._systems)})"

    def add_unit(self, unit: TemporalUnit) -> "ReferenceSystemRegistry":
        """Register ``unit``; a unit already registered under its IRI is kept."""
        require(unit, "unit", "add unit to registry")
        with self._lock:
            if unit.iri in self._units:
                return self
            self._units = MappingProxyType({**self._units, unit.iri: unit})
        logger.info("registered unit %s", unit.iri)
        return self

    def add_reference_system(self, trs: ReferenceSystem) -> "ReferenceSystemRegistry":
        """Register ``trs``; a system already registered under its IRI is kept."""
        require(trs, "trs", "add reference system to registry")
        with self._lock:
            if trs.iri in self._systems:
                return self
            self._systems = MappingProxyType({**self._systems, trs.iri: trs})
        logger.info("registered reference system %s (%s)", trs.iri, type(trs).__name__)
        return self

    def get_unit(self, iri: str) -> TemporalUnit | None:
        return self._units.get(iri)

    def get_reference_system(self, iri: str) -> ReferenceSystem | None:
        return self._systems.get(iri)

    def contains_unit(self, iri: str) -> bool:
        return iri in self._units

    def contains_reference_system(self, iri: str) -> bool:
        return iri in self._systems

    def units(self) -> Iterator[TemporalUnit]:
        return iter(tuple(self._units.values()))

    def reference_systems(self) -> Iterator[ReferenceSystem]:
        return iter(tuple(self._systems.values()))


default_registry = ReferenceSystemRegistry()
