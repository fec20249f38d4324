"""
Core value types, tolerance helpers and error types.
"""

from .errors import (
    GeometryError,
    DegenerateGeometryError,
    InsufficientPointsError,
    InvalidPointsError,
)
from .tolerance import (
    EPS,
    eq_float,
    sign,
    compare_points,
    point_sort_key,
    sort_points,
)
from .point import Point, PointLike, orient, as_points

__all__ = [
    'EPS',
    'eq_float',
    'sign',
    'compare_points',
    'point_sort_key',
    'sort_points',
    'Point',
    'PointLike',
    'orient',
    'as_points',
    'GeometryError',
    'DegenerateGeometryError',
    'InsufficientPointsError',
    'InvalidPointsError',
]
