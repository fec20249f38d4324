"""
Array-based polygon helpers.

Contains utility functions for:
- Point-in-convex-polygon testing
- Point-on-segment testing
- Shapely conversion
- Hull diagnostics
"""

from typing import TYPE_CHECKING

import numpy as np
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon

from ..core.tolerance import EPS

if TYPE_CHECKING:
    from .monotone_chain import ConvexHull


def _as_query_points(points) -> np.ndarray:
    points = np.atleast_2d(np.asarray(points, dtype=np.float64))
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {points.shape}")
    return points


def contains(poly: np.ndarray, points: np.ndarray, eps: float = EPS) -> np.ndarray:
    """
    Test if points are inside or on a convex polygon.

    Uses the cross-product / half-plane test: a point is inside iff it is
    on the left of (or on) every edge of the CCW polygon.

    Parameters
    ----------
    poly : np.ndarray, shape (M, 2)
        Convex polygon vertices in CCW order.
    points : np.ndarray, shape (K, 2) or (2,)
        Points to test.
    eps : float
        Tolerance for points on the boundary.

    Returns
    -------
    np.ndarray, shape (K,), dtype=bool
        True if the point is inside or on the polygon boundary.
    """
    points = _as_query_points(points)
    poly = np.asarray(poly, dtype=np.float64)

    n_vertices = len(poly)
    n_points = len(points)

    if n_vertices < 3:
        return np.zeros(n_points, dtype=bool)

    inside = np.ones(n_points, dtype=bool)

    for i in range(n_vertices):
        v1 = poly[i]
        v2 = poly[(i + 1) % n_vertices]

        edge = v2 - v1
        to_points = points - v1

        cross = edge[0] * to_points[:, 1] - edge[1] * to_points[:, 0]

        inside &= (cross >= -eps)

    return inside


def on_segment(a: np.ndarray, b: np.ndarray, points: np.ndarray, eps: float = EPS) -> np.ndarray:
    """
    Test if points lie on the closed segment ``ab``.

    Parameters
    ----------
    a, b : np.ndarray, shape (2,)
        Segment endpoints.
    points : np.ndarray, shape (K, 2) or (2,)
        Points to test.
    eps : float
        Tolerance on collinearity and on the segment's extent.

    Returns
    -------
    np.ndarray, shape (K,), dtype=bool
    """
    points = _as_query_points(points)
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    edge = b - a
    to_points = points - a
    cross = edge[0] * to_points[:, 1] - edge[1] * to_points[:, 0]
    # Projection parameter scaled by |edge|^2
    along = to_points @ edge
    length_sq = float(edge @ edge)

    return (np.abs(cross) < eps) & (along >= -eps) & (along <= length_sq + eps)


def to_shapely(poly: np.ndarray):
    """
    Convert a vertex array to the matching Shapely geometry.

    Returns a ``Point`` for one vertex, a ``LineString`` for two and a
    ``Polygon`` otherwise.
    """
    poly = np.asarray(poly, dtype=np.float64)
    if len(poly) == 0:
        raise ValueError("Cannot convert an empty vertex array")
    if len(poly) == 1:
        return ShapelyPoint(poly[0])
    if len(poly) == 2:
        return LineString(poly)
    return Polygon(poly)


def hull_stats(hull: "ConvexHull", points: np.ndarray) -> dict:
    """
    Compute diagnostic statistics for a hull against a point set.

    Parameters
    ----------
    hull : ConvexHull
        Hull to describe.
    points : np.ndarray
        Points of shape (N, 2), typically the hull's input.

    Returns
    -------
    dict
        Statistics including:
        - fraction_contained: Fraction of points inside or on the hull
        - num_vertices: Number of hull vertices
        - area: Unsigned hull area
        - centroid: Mean of the hull vertices
        - points_inside: Count of points inside
        - points_outside: Count of points outside
    """
    points = _as_query_points(points)
    poly = hull.to_array()
    inside_mask = hull.contains_points(points)

    return {
        'fraction_contained': float(np.mean(inside_mask)) if len(points) else 1.0,
        'num_vertices': len(poly),
        'area': abs(hull.area()),
        'centroid': np.mean(poly, axis=0),
        'points_inside': int(np.sum(inside_mask)),
        'points_outside': int(np.sum(~inside_mask)),
    }
