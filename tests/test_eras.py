"""Tests for ordinal reference systems."""

import pytest

from chronometry import (
    EraBoundary,
    MissingReferenceError,
    OrdinalReferenceSystem,
    TemporalCoordinate,
    TemporalError,
    TemporalExtent,
    UnknownEraError,
)


def boundary(name, *fields):
    return EraBoundary(iri=f"urn:test:{name}", coordinate=TemporalCoordinate(*fields))


@pytest.fixture
def trs():
    return (
        OrdinalReferenceSystem("urn:test:ordinal")
        .declare_era("urn:test:a", boundary("a-begin", 2000, 1, 1), boundary("a-end", 2000, 1, 11))
        .declare_sub_era("urn:test:b", "urn:test:a")
        .declare_sub_era("urn:test:c", "urn:test:b")
    )


def test_declared_eras_and_boundaries(trs):
    """Test lookups after declaration."""
    assert trs.has_era("urn:test:a")
    assert trs.has_era("urn:test:c")  # sub-era declarations declare eras too
    assert not trs.has_era("urn:test:z")
    assert trs.has_era_boundary("urn:test:a-begin")
    assert not trs.has_reference_point("urn:test:a-begin")


def test_sub_and_super_eras_are_transitive(trs):
    """Test hierarchy queries through the member relation."""
    assert trs.sub_eras_of("urn:test:a") == ["urn:test:b", "urn:test:c"]
    assert trs.sub_eras_of("urn:test:a", transitive=False) == ["urn:test:b"]
    assert trs.super_eras_of("urn:test:c") == ["urn:test:b", "urn:test:a"]
    assert trs.is_sub_era_of("urn:test:c", "urn:test:a")
    assert trs.is_super_era_of("urn:test:a", "urn:test:c")
    assert not trs.is_sub_era_of("urn:test:c", "urn:test:a", transitive=False)


def test_sub_era_cycle_is_rejected(trs):
    """Test that declaring an ancestor as a sub-era fails."""
    with pytest.raises(TemporalError, match="close a cycle"):
        trs.declare_sub_era("urn:test:a", "urn:test:c")


def test_era_cannot_be_its_own_sub_era(trs):
    """Test that self-membership is rejected as a cycle."""
    with pytest.raises(TemporalError, match="close a cycle"):
        trs.declare_sub_era("urn:test:a", "urn:test:a")

    assert "urn:test:a" not in trs.sub_eras_of("urn:test:a")


def test_era_coordinates_are_normalized(trs):
    """Test that boundaries are returned in canonical form."""
    begin, end = trs.era_coordinates("urn:test:a")

    assert begin == TemporalCoordinate(2000, 1, 1, 0, 0, 0)
    assert end.key() == (2000, 1, 11, 0, 0, 0)


def test_era_extent(trs):
    """Test the extent between era boundaries."""
    assert trs.era_extent("urn:test:a") == TemporalExtent(days=10)


def test_era_without_boundaries(trs):
    """Test eras known only from the hierarchy."""
    assert trs.era_coordinates("urn:test:b") == (None, None)
    assert trs.era_extent("urn:test:b") is None


def test_unknown_era_is_rejected(trs):
    """Test that undeclared eras raise on coordinate queries."""
    with pytest.raises(UnknownEraError, match="not declared"):
        trs.era_coordinates("urn:test:z")
    with pytest.raises(UnknownEraError, match="not declared"):
        trs.era_extent("urn:test:z")


def test_reference_points():
    """Test reference point declaration and validation."""
    trs = OrdinalReferenceSystem("urn:test:ordinal")

    trs.declare_reference_points([boundary("p1", 1000), boundary("p2", 2000)])

    assert trs.has_reference_point("urn:test:p1")
    assert trs.has_era_boundary("urn:test:p2")
    with pytest.raises(TemporalError, match="at least 2"):
        trs.declare_reference_points([boundary("p3", 3000)])
    with pytest.raises(MissingReferenceError, match="missing elements"):
        trs.declare_reference_points([boundary("p3", 3000), None])


def test_declarations_require_arguments():
    """Test that missing declaration arguments are reported."""
    trs = OrdinalReferenceSystem("urn:test:ordinal")

    with pytest.raises(MissingReferenceError, match="'end' is required"):
        trs.declare_era("urn:test:a", boundary("a-begin", 2000), None)
    with pytest.raises(MissingReferenceError, match="'super_era' is required"):
        trs.declare_sub_era("urn:test:b", None)


def test_era_boundary_validation():
    """Test that boundaries need an iri and a coordinate."""
    with pytest.raises(MissingReferenceError, match="non-empty iri"):
        EraBoundary(iri="", coordinate=TemporalCoordinate(2000))
    with pytest.raises(TypeError, match="TemporalCoordinate"):
        EraBoundary(iri="urn:test:x", coordinate="2000-01-01")
