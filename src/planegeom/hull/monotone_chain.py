"""
Convex Hull Module (Monotone Chain)

Builds the convex hull of a planar point set with Andrew's monotone chain:
- Points are sorted with the epsilon-aware lexicographic comparator
- Points equal under that comparator are collapsed to the first occurrence
- A single sweep grows an upper (clockwise) and a lower (counter-clockwise)
  chain, popping any vertex that fails a strict turn beyond EPS

Both chains start at the lexicographically smallest point and end at the
largest, so together they describe the whole boundary.
"""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from ..core.errors import InsufficientPointsError
from ..core.point import Point, PointLike, as_points, orient
from ..core.tolerance import EPS, compare_points, sign, sort_points
from .polygon import contains, on_segment, to_shapely

logger = logging.getLogger(__name__)


class ConvexHull:
    """
    Immutable convex hull stored as two monotone chains.

    Attributes
    ----------
    upper : tuple of Point
        Upper chain, lexicographic order, clockwise turns.
    lower : tuple of Point
        Lower chain, lexicographic order, counter-clockwise turns.

    Notes
    -----
    The constructor accepts arbitrary chains so hand-built hulls can be
    checked with :meth:`valid`. Hulls returned by :meth:`from_points` satisfy
    the invariants by construction and are not re-validated.
    """

    __slots__ = ('_upper', '_lower')

    def __init__(self, upper: Sequence[Point], lower: Sequence[Point]):
        self._upper: Tuple[Point, ...] = tuple(upper)
        self._lower: Tuple[Point, ...] = tuple(lower)

    @property
    def upper(self) -> Tuple[Point, ...]:
        return self._upper

    @property
    def lower(self) -> Tuple[Point, ...]:
        return self._lower

    def __repr__(self) -> str:
        return f"ConvexHull(upper={list(self._upper)!r}, lower={list(self._lower)!r})"

    def __str__(self) -> str:
        upper = ", ".join(str(p) for p in self._upper)
        lower = ", ".join(str(p) for p in self._lower)
        return f"u [{upper}] d [{lower}]"

    def __len__(self) -> int:
        return len(self.get_points())

    @classmethod
    def from_points(
        cls,
        points: Union[np.ndarray, Iterable[PointLike]],
        eps: float = EPS
    ) -> "ConvexHull":
        """
        Compute the convex hull of a point set.

        Parameters
        ----------
        points : np.ndarray or iterable
            Array of shape (N, 2), or an iterable of Points / ``(x, y)`` pairs.
        eps : float
            Tolerance used by the comparator and the turn test.

        Returns
        -------
        ConvexHull
            A single distinct input point gives a one-point hull; collinear
            input gives chains holding only the two extreme points.

        Raises
        ------
        InsufficientPointsError
            If ``points`` is empty.
        InvalidPointsError
            If the data has the wrong shape or non-finite coordinates.
        """
        pts = as_points(points)
        if not pts:
            raise InsufficientPointsError("Need at least 1 point, got 0")

        distinct: List[Point] = []
        for p in sort_points(pts, eps):
            if distinct and compare_points(distinct[-1], p, eps) == 0:
                continue
            distinct.append(p)

        upper: List[Point] = []
        lower: List[Point] = []
        for p in distinct:
            while len(upper) >= 2 and sign(orient(upper[-2], upper[-1], p), eps) >= 0:
                upper.pop()
            while len(lower) >= 2 and sign(orient(lower[-2], lower[-1], p), eps) <= 0:
                lower.pop()
            upper.append(p)
            lower.append(p)

        logger.debug(
            "convex hull: %d input points, %d distinct, %d upper, %d lower",
            len(pts), len(distinct), len(upper), len(lower)
        )
        return cls(upper, lower)

    def valid(self, eps: float = EPS) -> bool:
        """
        Check the chain invariants.

        Both chains must be non-empty and share their endpoints; every
        consecutive triple in ``upper`` must turn clockwise and every triple in
        ``lower`` counter-clockwise, both by more than ``eps``.
        """
        if not self._upper or not self._lower:
            return False

        if not self._upper[0].approx_eq(self._lower[0], eps):
            return False
        if not self._upper[-1].approx_eq(self._lower[-1], eps):
            return False

        u = self._upper
        for i in range(len(u) - 2):
            if sign(orient(u[i], u[i + 1], u[i + 2]), eps) >= 0:
                return False

        d = self._lower
        for i in range(len(d) - 2):
            if sign(orient(d[i], d[i + 1], d[i + 2]), eps) <= 0:
                return False

        return True

    def area(self) -> float:
        """
        Signed area, positive for hulls built by :meth:`from_points`.

        Fan triangulation from the shared first vertex over each chain; the
        two sums are the shoelace formula split at the horizontal extremes.
        Take ``abs()`` for the unsigned area.
        """
        total = 0.0

        u = self._upper
        for i in range(1, len(u) - 1):
            total += u[i + 1].sub(u[0]).cross(u[i].sub(u[0]))

        d = self._lower
        for i in range(1, len(d) - 1):
            total -= d[i + 1].sub(d[0]).cross(d[i].sub(d[0]))

        return total / 2.0

    def get_points(self) -> List[Point]:
        """
        Hull vertices in counter-clockwise order, each extreme point once.

        The lower chain without its last point, followed by the reversed upper
        chain without the shared first point.
        """
        if len(self._upper) <= 1 and len(self._lower) <= 1:
            return list(self._lower or self._upper)

        lower = list(self._lower[:-1])
        upper = list(reversed(self._upper))[:-1]
        return lower + upper

    def to_array(self) -> np.ndarray:
        """Vertices from :meth:`get_points` as a float array of shape (M, 2)."""
        pts = self.get_points()
        if not pts:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([[p.x, p.y] for p in pts], dtype=np.float64)

    def to_polygon(self):
        """Shapely geometry of the hull: Point, LineString or Polygon."""
        return to_shapely(self.to_array())

    def contains_points(self, points: np.ndarray, eps: float = EPS) -> np.ndarray:
        """
        Test if points are inside or on the hull boundary.

        Parameters
        ----------
        points : np.ndarray
            Points of shape (K, 2) or (2,).
        eps : float
            Boundary tolerance.

        Returns
        -------
        np.ndarray, shape (K,), dtype=bool
        """
        poly = self.to_array()
        points = np.atleast_2d(np.asarray(points, dtype=np.float64))

        if len(poly) == 0:
            return np.zeros(len(points), dtype=bool)
        if len(poly) == 1:
            return np.all(np.abs(points - poly[0]) < eps, axis=1)
        if len(poly) == 2:
            return on_segment(poly[0], poly[1], points, eps)
        return contains(poly, points, eps)

    def contains(self, point: PointLike, eps: float = EPS) -> bool:
        """True if ``point`` is inside or on the hull boundary."""
        return bool(self.contains_points(np.asarray(tuple(point), dtype=np.float64), eps)[0])


def get_convex_hull(
    points: Union[np.ndarray, Iterable[PointLike]],
    eps: float = EPS
) -> ConvexHull:
    """Compute the convex hull of ``points``. See :meth:`ConvexHull.from_points`."""
    return ConvexHull.from_points(points, eps)
