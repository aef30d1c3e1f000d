"""Exceptions raised by the geometry layer."""


class GeometryError(ValueError):
    """Base class for invalid geometric input."""
    pass


class DegenerateConstraintError(GeometryError):
    """Raised when a half-plane or line has a zero normal vector (a = b = 0)."""
    pass


class CoincidentPointsError(GeometryError):
    """Raised when a line is requested through two identical points."""
    pass


class InvalidDomainError(GeometryError):
    """Raised when a domain rectangle has non-positive width or height."""
    pass
