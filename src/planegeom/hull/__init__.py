"""
Convex hull construction and polygon helpers.
"""

from .monotone_chain import ConvexHull, get_convex_hull
from .polygon import (
    contains,
    on_segment,
    to_shapely,
    hull_stats,
)

__all__ = [
    'ConvexHull',
    'get_convex_hull',
    'contains',
    'on_segment',
    'to_shapely',
    'hull_stats',
]
