"""Tests for temporal coordinates."""

from datetime import datetime, timezone

import pytest
from dateutil import tz

from chronometry import GREGORIAN, NegativeComponentError, TemporalCoordinate, UnitKind


def test_absent_fields_compare_as_zero():
    """Test that None fields equal explicit zeros but stay None."""
    partial = TemporalCoordinate(2020)

    assert partial == TemporalCoordinate(2020, 0, 0, 0, 0, 0)
    assert partial.month is None
    assert hash(partial) == hash(TemporalCoordinate(2020, 0, 0, 0, 0, 0))


def test_ordering_is_lexicographic():
    """Test that coordinates order from year down to second."""
    earlier = TemporalCoordinate(2024, 1, 31, 23, 59, 59)
    later = TemporalCoordinate(2024, 2, 1, 0, 0, 0)

    assert earlier < later
    assert later >= earlier
    assert sorted([later, earlier]) == [earlier, later]


@pytest.mark.parametrize("field", ["month", "day", "hour", "minute", "second"])
def test_negative_components_are_rejected(field):
    """Test that month through second must be non-negative."""
    with pytest.raises(NegativeComponentError, match=field):
        TemporalCoordinate(2024, **{field: -1})


def test_negative_year_is_allowed():
    """Test that BCE and geologic years are representable."""
    coordinate = TemporalCoordinate(-65_998_050)

    assert coordinate.year == -65_998_050


def test_out_of_range_values_are_accepted():
    """Test that construction does not normalize."""
    coordinate = TemporalCoordinate(2024, 14, 45, 30, 90, 100)

    assert coordinate.day == 45


def test_str_marks_absent_fields():
    """Test the compact string form."""
    assert str(TemporalCoordinate(2024, 2, 29)) == "TemporalCoordinate(2024-2-29 ?:?:?)"
    assert str(TemporalCoordinate(1970, 1, 1, 0, 0, 1.5)) == "TemporalCoordinate(1970-1-1 0:0:1.5)"


def test_replace_returns_new_coordinate():
    """Test that replace leaves the original untouched."""
    original = TemporalCoordinate(2024, 1, 1, 0, 0, 0)
    changed = original.replace(day=2)

    assert changed == TemporalCoordinate(2024, 1, 2, 0, 0, 0)
    assert original.day == 1


def test_from_datetime_normalizes_to_utc():
    """Test that aware datetimes are converted to UTC with metadata."""
    berlin = datetime(2024, 2, 29, 12, 30, 15, 500_000, tzinfo=tz.gettz("Europe/Berlin"))

    coordinate = TemporalCoordinate.from_datetime(berlin)

    assert coordinate == TemporalCoordinate(2024, 2, 29, 11, 30, 15.5)
    assert coordinate.metadata.trs == GREGORIAN.iri
    assert coordinate.metadata.unit_kind is UnitKind.SECOND
    assert coordinate.metadata.month_of_year == 2
    assert coordinate.metadata.day_of_week == 4  # Thursday
    assert coordinate.metadata.day_of_year == 60


def test_from_datetime_accepts_iso_strings():
    """Test that ISO-8601 strings with an offset are parsed."""
    coordinate = TemporalCoordinate.from_datetime("2025-01-01T02:00:00+02:00")

    assert coordinate == TemporalCoordinate(2025, 1, 1, 0, 0, 0)


def test_from_datetime_rejects_naive_datetime():
    """Test that naive datetimes raise with a hint."""
    with pytest.raises(TypeError, match="timezone-aware"):
        TemporalCoordinate.from_datetime(datetime(2025, 1, 1))


def test_from_datetime_rejects_other_types():
    """Test that unsupported sources raise TypeError."""
    with pytest.raises(TypeError, match="datetime or an ISO-8601 string"):
        TemporalCoordinate.from_datetime(1_700_000_000)


def test_to_datetime_round_trip():
    """Test conversion back to an aware UTC datetime."""
    moment = datetime(2023, 11, 14, 22, 13, 20, 250_000, tzinfo=timezone.utc)

    result = TemporalCoordinate.from_datetime(moment).to_datetime()

    assert result == moment
    assert result.utcoffset().total_seconds() == 0


def test_to_datetime_defaults_absent_fields():
    """Test that absent month/day default to the first."""
    assert TemporalCoordinate(2024).to_datetime() == datetime(2024, 1, 1, tzinfo=timezone.utc)
