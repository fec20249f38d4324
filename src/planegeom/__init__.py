"""
planegeom - Planar geometry kernel.

This package provides floating-point 2D primitives with a single, shared
tolerance model:
- Immutable point / vector algebra with explicit approximate equality
- Lines: projection and line-line intersection
- Circles: line/circle and circle/circle intersection, tangents,
  triangle incentre and circumcentre
- Convex hulls via the monotone chain algorithm

Main Types
----------
Point : 2D point / vector value type
Line : Line through two points
Circle : Circle with centre and radius
ConvexHull : Convex hull as upper and lower monotone chains

Example
-------
>>> from planegeom import Point, get_convex_hull

>>> square = [(0, 0), (1, 0), (0, 1), (1, 1), (0.5, 0.5)]
>>> hull = get_convex_hull(square)
>>> hull.area()
1.0
>>> [tuple(p) for p in hull.get_points()]
[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
"""

import logging

from .core.errors import (
    GeometryError,
    DegenerateGeometryError,
    InsufficientPointsError,
    InvalidPointsError,
)
from .core.tolerance import EPS, eq_float, sign, compare_points, point_sort_key, sort_points
from .core.point import Point, orient, as_points
from .primitives.line import Line
from .primitives.circle import Circle, incentre, circumcentre
from .hull.monotone_chain import ConvexHull, get_convex_hull
from .hull.polygon import contains, hull_stats

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    # Tolerance
    'EPS',
    'eq_float',
    'sign',
    'compare_points',
    'point_sort_key',
    'sort_points',
    # Point algebra
    'Point',
    'orient',
    'as_points',
    # Primitives
    'Line',
    'Circle',
    'incentre',
    'circumcentre',
    # Convex hull
    'ConvexHull',
    'get_convex_hull',
    'contains',
    'hull_stats',
    # Errors
    'GeometryError',
    'DegenerateGeometryError',
    'InsufficientPointsError',
    'InvalidPointsError',
]
