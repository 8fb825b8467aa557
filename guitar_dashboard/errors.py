"""Exception types raised by the Guitar Dashboard core."""


class GuitarDashboardError(Exception):
    """Base class for all Guitar Dashboard errors."""


class ParseError(GuitarDashboardError, ValueError):
    """Raised when text (a key, note, scale or tuning name) cannot be parsed."""


class DomainError(GuitarDashboardError, IndexError):
    """Raised when a value is outside the range an operation is defined for.

    Typical causes are a string index outside the configured tuning or a
    negative fret number.
    """
