"""
Lines through two points.

A :class:`Line` is a directed pair of endpoints. :meth:`Line.valid` treats it
as a segment (its length must exceed EPS); projection and intersection treat
it as the infinite line through both endpoints. There is no separate ray or
infinite-line type.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.errors import DegenerateGeometryError
from ..core.point import Point
from ..core.tolerance import EPS, eq_float


@dataclass(frozen=True)
class Line:
    """
    Directed line from ``a`` to ``b``.

    Attributes
    ----------
    a : Point
        Start point.
    b : Point
        End point.
    """
    a: Point
    b: Point

    def __str__(self) -> str:
        return f"{self.a}-{self.b}"

    def vec(self) -> Point:
        """Direction vector ``b - a``."""
        return self.b.sub(self.a)

    def length(self) -> float:
        return self.vec().magnitude()

    def squared_length(self) -> float:
        return self.vec().squared_magnitude()

    def valid(self, eps: float = EPS) -> bool:
        """True if the segment is longer than ``eps``."""
        return not eq_float(self.length(), 0.0, eps)

    def _require_valid(self) -> None:
        if not self.valid():
            raise DegenerateGeometryError(f"Degenerate line {self}: endpoints coincide")

    def proj(self, p: Point) -> Point:
        """
        Orthogonal projection of ``p`` onto the infinite line.

        Parameters
        ----------
        p : Point
            Point to project.

        Returns
        -------
        Point
            Closest point to ``p`` on the line.

        Raises
        ------
        DegenerateGeometryError
            If the line is not :meth:`valid`.
        """
        self._require_valid()
        v = self.vec()
        t = p.sub(self.a).dot(v) / v.squared_magnitude()
        return self.a.add(v.scale(t))

    def distance_to(self, p: Point) -> float:
        """Distance from ``p`` to the infinite line."""
        return p.distance_to(self.proj(p))

    def inter(self, other: "Line") -> Optional[Point]:
        """
        Intersection point of two infinite lines.

        Uses the ratio of the signed areas that ``other``'s endpoints span
        with each endpoint of ``self``.

        Parallel lines and coincident lines both return None: the direction
        test cannot tell them apart, so callers needing that distinction must
        check collinearity of the endpoints themselves.

        Parameters
        ----------
        other : Line
            Second line.

        Returns
        -------
        Point or None
            The intersection point, or None if the lines are parallel or
            coincident within EPS.

        Raises
        ------
        DegenerateGeometryError
            If either line is not :meth:`valid`.
        """
        self._require_valid()
        other._require_valid()

        if eq_float(self.vec().cross(other.vec()), 0.0):
            return None

        s1 = other.a.sub(self.a).cross(other.b.sub(self.a))
        s2 = other.b.sub(self.b).cross(other.a.sub(self.b))
        return self.a.add(self.vec().scale(s1 / (s1 + s2)))
