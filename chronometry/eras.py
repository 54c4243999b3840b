"""Ordinal reference systems: named eras anchored by boundary instants.

An ordinal TRS orders time by named eras (geologic eons, dynasties, ...)
rather than by numbers. Eras nest through the "member" relation (a super-era
has its sub-eras as members) and are anchored to calendar time through
boundaries carrying a coordinate.

Example:
    >>> trs = OrdinalReferenceSystem("urn:chronostratigraphy")
    >>> trs.declare_era("urn:cenozoic", EraBoundary(...), EraBoundary(...))
    >>> trs.declare_sub_era("urn:quaternary", "urn:cenozoic")
    >>> trs.super_eras_of("urn:quaternary")
    ['urn:cenozoic']
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from chronometry.calendar import CalendarReferenceSystem
from chronometry.closure import successors_from_pairs, transitive_closure
from chronometry.converter import extent_between_coordinates, normalize_coordinate
from chronometry.coordinate import TemporalCoordinate
from chronometry.errors import MissingReferenceError, TemporalError, UnknownEraError, require
from chronometry.extent import TemporalExtent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class EraBoundary:
    """A named instant delimiting eras, located by its calendar coordinate."""

    iri: str
    coordinate: TemporalCoordinate

    def __post_init__(self) -> None:
        if not self.iri:
            raise MissingReferenceError(
                f"EraBoundary requires a non-empty iri.\n"
                f"Got: iri={self.iri!r}"
            )
        require(self.coordinate, "coordinate", "create EraBoundary")
        if not isinstance(self.coordinate, TemporalCoordinate):
            raise TypeError(
                f"EraBoundary coordinate must be a TemporalCoordinate, "
                f"got {type(self.coordinate).__name__!r}"
            )


class OrdinalReferenceSystem:
    """Mutable set of era declarations; declarers return ``self`` for chaining."""

    def __init__(self, iri: str):
        if not iri:
            raise MissingReferenceError(
                f"OrdinalReferenceSystem requires a non-empty iri.\n"
                f"Got: iri={iri!r}"
            )
        self.iri = iri
        self._eras: set[str] = set()
        self._begins: dict[str, EraBoundary] = {}
        self._ends: dict[str, EraBoundary] = {}
        self._boundaries: dict[str, EraBoundary] = {}
        self._reference_points: dict[str, EraBoundary] = {}
        # (super_era, sub_era) pairs
        self._members: list[tuple[str, str]] = []

    def __repr__(self) -> str:
        return f"OrdinalReferenceSystem({self.iri!r}, eras={len(self._eras)})"

    def declare_era(
        self, era: str, begin: EraBoundary, end: EraBoundary
    ) -> "OrdinalReferenceSystem":
        """Declare ``era`` delimited by the ``begin`` and ``end`` boundaries."""
        require(era, "era", "declare era")
        require(begin, "begin", "declare era")
        require(end, "end", "declare era")

        self._eras.add(era)
        self._begins[era] = begin
        self._ends[era] = end
        self._boundaries[begin.iri] = begin
        self._boundaries[end.iri] = end
        logger.debug("declared era %s [%s, %s] in %s", era, begin.iri, end.iri, self.iri)
        return self

    def declare_sub_era(self, sub_era: str, super_era: str) -> "OrdinalReferenceSystem":
        """Declare ``sub_era`` as a member of ``super_era`` (both become eras).

        Raises:
            TemporalError: If ``super_era`` is already a sub-era of ``sub_era``
        """
        require(sub_era, "sub_era", "declare sub-era")
        require(super_era, "super_era", "declare sub-era")
        if sub_era == super_era or self.is_sub_era_of(super_era, sub_era):
            raise TemporalError(
                f"Cannot declare sub-era: {super_era!r} is already a sub-era of {sub_era!r}.\n"
                f"Hint: declaring it would close a cycle in the era hierarchy"
            )

        self._eras.update((sub_era, super_era))
        self._members.append((super_era, sub_era))
        logger.debug("declared %s as sub-era of %s in %s", sub_era, super_era, self.iri)
        return self

    def declare_reference_points(self, points: Sequence[EraBoundary]) -> "OrdinalReferenceSystem":
        """Anchor the system to calendar time through at least two boundaries."""
        require(points, "points", "declare reference points")
        if any(point is None for point in points):
            raise MissingReferenceError(
                "Cannot declare reference points: 'points' contains missing elements."
            )
        if len(points) < 2:
            raise TemporalError(
                f"Cannot declare reference points: at least 2 are required.\n"
                f"Got: {len(points)}"
            )
        for point in points:
            self._reference_points[point.iri] = point
            self._boundaries[point.iri] = point
        return self

    def has_era(self, era: str) -> bool:
        require(era, "era", "check era")
        return era in self._eras

    def has_era_boundary(self, boundary: str) -> bool:
        require(boundary, "boundary", "check era boundary")
        return boundary in self._boundaries

    def has_reference_point(self, point: str) -> bool:
        require(point, "point", "check reference point")
        return point in self._reference_points

    def sub_eras_of(self, era: str, transitive: bool = True) -> list[str]:
        """Eras nested inside ``era``, directly or (by default) at any depth."""
        require(era, "era", "get sub-eras")
        return transitive_closure(era, successors_from_pairs(self._members), transitive=transitive)

    def super_eras_of(self, era: str, transitive: bool = True) -> list[str]:
        """Eras enclosing ``era``, directly or (by default) at any depth."""
        require(era, "era", "get super-eras")
        return transitive_closure(
            era, successors_from_pairs(self._members, inverse=True), transitive=transitive
        )

    def is_sub_era_of(self, sub_era: str, super_era: str, transitive: bool = True) -> bool:
        return super_era in self.super_eras_of(sub_era, transitive=transitive)

    def is_super_era_of(self, super_era: str, sub_era: str, transitive: bool = True) -> bool:
        return sub_era in self.sub_eras_of(super_era, transitive=transitive)

    def era_coordinates(
        self, era: str, calendar: CalendarReferenceSystem | None = None
    ) -> tuple[TemporalCoordinate | None, TemporalCoordinate | None]:
        """Normalized begin and end coordinates of ``era``.

        Eras declared only through ``declare_sub_era`` have no boundaries, so
        either side may be None.

        Raises:
            UnknownEraError: If ``era`` was never declared
        """
        self._check_declared(era, "get coordinates of era")
        begin = self._begins.get(era)
        end = self._ends.get(era)
        return (
            normalize_coordinate(begin.coordinate, calendar) if begin else None,
            normalize_coordinate(end.coordinate, calendar) if end else None,
        )

    def era_extent(
        self, era: str, calendar: CalendarReferenceSystem | None = None
    ) -> TemporalExtent | None:
        """Extent between the boundaries of ``era``, or None if one is missing."""
        self._check_declared(era, "get extent of era")
        begin, end = self.era_coordinates(era, calendar)
        if begin is None or end is None:
            return None
        return extent_between_coordinates(begin, end, calendar)

    def _check_declared(self, era: str, action: str) -> None:
        require(era, "era", action)
        if era not in self._eras:
            raise UnknownEraError(
                f"Cannot {action}: {era!r} is not declared in {self.iri!r}.\n"
                f"Hint: declare it first with declare_era(era, begin, end)"
            )
