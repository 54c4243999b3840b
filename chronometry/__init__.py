from logging import NullHandler, getLogger

from .calendar import (
    GREGORIAN,
    JULIAN,
    CalendarReferenceSystem,
    FunctionLeapRule,
    GregorianLeapRule,
    JulianLeapRule,
    LeapYearRule,
)
from .closure import successors_from_pairs, transitive_closure
from .concepts import ConceptGraph, ConceptRelation
from .config import Settings, gregorian_calendar, load_settings
from .converter import (
    coordinate_to_position,
    duration_to_extent,
    extent_between_coordinates,
    extent_to_duration,
    normalize_coordinate,
    normalize_extent,
    position_to_coordinate,
    tick_backward,
    tick_forward,
)
from .coordinate import CoordinateMetadata, TemporalCoordinate
from .eras import EraBoundary, OrdinalReferenceSystem
from .errors import (
    CalendarMetricsError,
    ConfigurationError,
    MissingReferenceError,
    NegativeComponentError,
    TemporalError,
    UnknownEraError,
)
from .extent import ExtentMetadata, TemporalExtent
from .logging import configure_logging
from .position import GEOLOGIC_TIME, UNIX_TIME, PositionReferenceSystem
from .registry import ReferenceSystemRegistry, default_registry
from .units import TemporalUnit, UnitKind

getLogger(__name__).addHandler(NullHandler())

__all__ = [
    "TemporalUnit",
    "UnitKind",
    "CalendarReferenceSystem",
    "LeapYearRule",
    "GregorianLeapRule",
    "JulianLeapRule",
    "FunctionLeapRule",
    "GREGORIAN",
    "JULIAN",
    "TemporalCoordinate",
    "CoordinateMetadata",
    "TemporalExtent",
    "ExtentMetadata",
    "PositionReferenceSystem",
    "UNIX_TIME",
    "GEOLOGIC_TIME",
    "position_to_coordinate",
    "coordinate_to_position",
    "normalize_coordinate",
    "duration_to_extent",
    "extent_to_duration",
    "normalize_extent",
    "extent_between_coordinates",
    "tick_forward",
    "tick_backward",
    "transitive_closure",
    "successors_from_pairs",
    "EraBoundary",
    "OrdinalReferenceSystem",
    "ConceptGraph",
    "ConceptRelation",
    "ReferenceSystemRegistry",
    "default_registry",
    "TemporalError",
    "CalendarMetricsError",
    "NegativeComponentError",
    "MissingReferenceError",
    "UnknownEraError",
    "ConfigurationError",
    "Settings",
    "load_settings",
    "gregorian_calendar",
    "configure_logging",
]
