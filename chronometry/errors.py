"""Exception types raised by chronometry."""


class TemporalError(ValueError):
    """Base class for invalid temporal values and descriptors."""


class CalendarMetricsError(TemporalError):
    """A calendar metric, month table or leap-rule result is invalid."""


class NegativeComponentError(TemporalError):
    """A coordinate/extent component or a duration is negative."""


class MissingReferenceError(TemporalError):
    """A required reference (TRS, unit, coordinate, extent, era) is missing."""


class UnknownEraError(TemporalError):
    """The era was never declared to the ordinal reference system."""


class ConfigurationError(RuntimeError):
    """Raised when environment configuration values are invalid."""


def require(value, name: str, action: str):
    """Return ``value`` or raise MissingReferenceError naming ``name``."""
    if value is None:
        raise MissingReferenceError(
            f"Cannot {action}: '{name}' is required.\n"
            f"Got: {name}=None"
        )
    return value
