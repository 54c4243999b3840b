"""Tests for position reference systems."""

import pytest

from chronometry import (
    GEOLOGIC_TIME,
    UNIX_TIME,
    MissingReferenceError,
    PositionReferenceSystem,
    TemporalCoordinate,
)
from chronometry.units import MILLION_YEARS_AGO, SECOND


def test_builtin_position_systems():
    """Test the Unix and geologic time systems."""
    assert UNIX_TIME.origin == TemporalCoordinate(1970, 1, 1, 0, 0, 0)
    assert UNIX_TIME.unit is SECOND
    assert not UNIX_TIME.large_scale

    assert GEOLOGIC_TIME.origin == TemporalCoordinate(1950, 1, 1, 0, 0, 0)
    assert GEOLOGIC_TIME.unit is MILLION_YEARS_AGO
    assert GEOLOGIC_TIME.large_scale


def test_position_system_requires_origin_and_unit():
    """Test that origin and unit are mandatory."""
    with pytest.raises(MissingReferenceError, match="'origin' is required"):
        PositionReferenceSystem(iri="urn:test", origin=None, unit=SECOND)
    with pytest.raises(MissingReferenceError, match="'unit' is required"):
        PositionReferenceSystem(iri="urn:test", origin=TemporalCoordinate(2000), unit=None)


def test_position_system_checks_types():
    """Test that wrong argument types raise TypeError."""
    with pytest.raises(TypeError, match="TemporalCoordinate"):
        PositionReferenceSystem(iri="urn:test", origin="2000-01-01", unit=SECOND)
    with pytest.raises(TypeError, match="TemporalUnit"):
        PositionReferenceSystem(iri="urn:test", origin=TemporalCoordinate(2000), unit="second")
