"""
Exception types raised by geometry operations.

Degenerate input that simply has no answer (parallel lines, disjoint
circles, ...) is reported by returning None. The exceptions below are
reserved for misuse: asking a question that is undefined for the given
geometry.
"""


class GeometryError(ValueError):
    """Base exception for geometry operations."""


class DegenerateGeometryError(GeometryError):
    """Operation is undefined for the input (zero-length line, zero vector)."""


class InsufficientPointsError(GeometryError):
    """Not enough points for the requested operation."""


class InvalidPointsError(GeometryError):
    """Point data has the wrong shape or non-finite coordinates."""
