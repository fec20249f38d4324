"""
Floating-point tolerance and the epsilon-aware point ordering.

Every sort and every equality-adjacent decision in the package goes through
the helpers here, so that hull construction and the intersection routines
agree on when two numbers are "the same".
"""

from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from .point import Point


# Numerical tolerance for floating point comparisons
EPS = 1e-9


def eq_float(a: float, b: float, eps: float = EPS) -> bool:
    """Return True if ``|a - b| < eps``."""
    return abs(a - b) < eps


def sign(value: float, eps: float = EPS) -> int:
    """Sign of ``value`` with everything inside ``(-eps, eps)`` mapped to 0."""
    if abs(value) < eps:
        return 0
    return 1 if value > 0 else -1


def compare_points(a: "Point", b: "Point", eps: float = EPS) -> int:
    """
    Lexicographic three-way comparison of two points.

    Compares ``x`` first and falls back to ``y``. Differences below ``eps``
    on an axis count as equal on that axis.

    Parameters
    ----------
    a, b : Point
        Points to compare.
    eps : float
        Per-axis tolerance.

    Returns
    -------
    int
        -1 if ``a`` orders before ``b``, 1 if after, 0 if equal.
    """
    if not eq_float(a.x, b.x, eps):
        return -1 if a.x < b.x else 1
    if not eq_float(a.y, b.y, eps):
        return -1 if a.y < b.y else 1
    return 0


point_sort_key = cmp_to_key(compare_points)


def sort_points(points: Iterable["Point"], eps: float = EPS) -> List["Point"]:
    """Stable sort of ``points`` using :func:`compare_points`."""
    if eps == EPS:
        key = point_sort_key
    else:
        key = cmp_to_key(lambda a, b: compare_points(a, b, eps))
    return sorted(points, key=key)
