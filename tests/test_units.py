"""Tests for temporal units."""

import pytest

from chronometry import MissingReferenceError, TemporalUnit, UnitKind
from chronometry.units import (
    BUILTIN_UNITS,
    CENTURY,
    DAY,
    MARS_SOL,
    MILLION_YEARS_AGO,
    SECOND,
    WEEK,
)


def test_builtin_units_scale_their_kind():
    """Test that derived built-in units are scaled base kinds."""
    assert CENTURY.kind is UnitKind.YEAR
    assert CENTURY.scale_factor == 100
    assert WEEK.kind is UnitKind.DAY
    assert WEEK.scale_factor == 7
    assert MILLION_YEARS_AGO.scale_factor == -1e6
    assert MARS_SOL.scale_factor == pytest.approx(1.02749125)


def test_builtin_units_use_w3c_time_iris():
    """Test that the base units carry OWL-Time identifiers."""
    assert SECOND.iri == "http://www.w3.org/2006/time#unitSecond"
    assert DAY.iri == "http://www.w3.org/2006/time#unitDay"
    assert len({unit.iri for unit in BUILTIN_UNITS}) == len(BUILTIN_UNITS)


def test_unit_kind_accepts_plain_strings():
    """Test that kind names are coerced to UnitKind."""
    unit = TemporalUnit(iri="urn:test:fortnight", kind="day", scale_factor=14)

    assert unit.kind is UnitKind.DAY
    assert str(unit) == "TemporalUnit(14 day)"


def test_unit_rejects_unknown_kind():
    """Test that an unknown kind name fails loudly."""
    with pytest.raises(ValueError):
        TemporalUnit(iri="urn:test:bogus", kind="fortnight")


def test_unit_requires_iri():
    """Test that units need an identifier."""
    with pytest.raises(MissingReferenceError, match="non-empty iri"):
        TemporalUnit(iri="", kind=UnitKind.SECOND)


def test_unit_is_immutable():
    """Test that units are frozen value objects."""
    with pytest.raises(AttributeError):
        SECOND.scale_factor = 2  # type: ignore[misc]
