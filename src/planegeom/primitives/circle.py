"""
Circles: intersections, tangents, and triangle centres.

Queries that have no geometric answer (disjoint circles, a point inside the
circle, a collinear triangle) return None. Tangent configurations return a
pair holding the same point twice so callers always unpack two values.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.point import Point
from ..core.tolerance import EPS, eq_float
from .line import Line


PointPair = Tuple[Point, Point]
LinePair = Tuple[Line, Line]


def _acos(value: float) -> float:
    """acos with the argument clamped to [-1, 1]."""
    return math.acos(max(-1.0, min(1.0, value)))


@dataclass(frozen=True)
class Circle:
    """
    Circle with centre ``o`` and radius ``r``.

    The radius is assumed non-negative and is not validated.
    """
    o: Point
    r: float

    def __str__(self) -> str:
        return f"[{self.o} {self.r}]"

    @classmethod
    def circumscribed(cls, a: Point, b: Point, c: Point) -> Optional["Circle"]:
        """Circle through ``a``, ``b`` and ``c``; None for a collinear triple."""
        centre = circumcentre(a, b, c)
        if centre is None:
            return None
        return cls(centre, centre.distance_to(a))

    @classmethod
    def inscribed(cls, a: Point, b: Point, c: Point) -> Optional["Circle"]:
        """Incircle of triangle ``abc``; None for a collinear triple."""
        perimeter = b.distance_to(c) + a.distance_to(c) + a.distance_to(b)
        doubled_area = abs(b.sub(a).cross(c.sub(a)))
        if eq_float(doubled_area, 0.0):
            return None
        return cls(incentre(a, b, c), doubled_area / perimeter)

    def inter_line(self, line: Line) -> Optional[PointPair]:
        """
        Intersection of the circle with an infinite line.

        Parameters
        ----------
        line : Line
            A valid line.

        Returns
        -------
        tuple of Point or None
            Two intersection points, the tangent point twice, or None if the
            line misses the circle.

        Raises
        ------
        DegenerateGeometryError
            If ``line`` is not valid.
        """
        proj = line.proj(self.o)
        dist = self.o.distance_to(proj)
        if eq_float(dist, self.r):
            return proj, proj
        if dist > self.r:
            return None

        half_chord = math.sqrt(self.r * self.r - dist * dist)
        offset = line.vec().normalize().scale(half_chord)
        return proj.add(offset), proj.sub(offset)

    def inter_round(self, other: "Circle") -> Optional[PointPair]:
        """
        Intersection points of two circles.

        Concentric circles return None whether or not they coincide.
        Internally or externally tangent circles return the touching point
        twice.

        Returns
        -------
        tuple of Point or None
            None when one circle contains the other or they are apart.
        """
        if self.o.approx_eq(other.o):
            return None

        dist = self.o.distance_to(other.o)

        if eq_float(dist, abs(self.r - other.r)):
            if self.r > other.r:
                touch = self.o.add(other.o.sub(self.o).normalize().scale(self.r))
            else:
                touch = other.o.add(self.o.sub(other.o).normalize().scale(other.r))
            return touch, touch

        if eq_float(dist, self.r + other.r):
            touch = self.o.add(other.o.sub(self.o).normalize().scale(self.r))
            return touch, touch

        if dist < abs(self.r - other.r) or dist > self.r + other.r:
            return None

        theta = _acos(
            (self.r * self.r + dist * dist - other.r * other.r) / (2.0 * self.r * dist)
        )
        radial = other.o.sub(self.o).normalize().scale(self.r)
        return self.o.add(radial.rotate(theta)), self.o.add(radial.rotate(-theta))

    def tangent_point(self, p: Point) -> Optional[PointPair]:
        """
        Points where the tangents from ``p`` touch the circle.

        Returns ``(p, p)`` when ``p`` lies on the circle and None when it is
        strictly inside.
        """
        dist = self.o.distance_to(p)
        if eq_float(dist, self.r):
            return p, p
        if dist < self.r:
            return None

        theta = _acos(self.r / dist)
        radial = p.sub(self.o).normalize().scale(self.r)
        return self.o.add(radial.rotate(theta)), self.o.add(radial.rotate(-theta))

    def tangent_round_exterior(self, other: "Circle") -> Optional[LinePair]:
        """
        The two common tangents that keep both circles on the same side.

        Each returned line runs from its touching point on ``self`` to its
        touching point on ``other``.

        Returns
        -------
        tuple of Line or None
            None when one circle lies inside the other or they are
            internally tangent.
        """
        dist = self.o.distance_to(other.o)
        if dist < abs(self.r - other.r) + EPS:
            return None

        theta = _acos((self.r - other.r) / dist)
        alpha = other.o.sub(self.o).normalize()
        first = alpha.rotate(theta)
        second = alpha.rotate(-theta)
        return (
            Line(self.o.add(first.scale(self.r)), other.o.add(first.scale(other.r))),
            Line(self.o.add(second.scale(self.r)), other.o.add(second.scale(other.r))),
        )

    def tangent_round_interior(self, other: "Circle") -> Optional[LinePair]:
        """
        The two common tangents that pass between the circles.

        Returns
        -------
        tuple of Line or None
            None when the circles overlap, touch, or one contains the other.
        """
        dist = self.o.distance_to(other.o)
        if dist < self.r + other.r + EPS:
            return None

        theta = _acos((self.r + other.r) / dist)
        alpha = other.o.sub(self.o).normalize()
        beta = alpha.negate()
        return (
            Line(self.o.add(alpha.rotate(theta).scale(self.r)),
                 other.o.add(beta.rotate(theta).scale(other.r))),
            Line(self.o.add(alpha.rotate(-theta).scale(self.r)),
                 other.o.add(beta.rotate(-theta).scale(other.r))),
        )


def incentre(a: Point, b: Point, c: Point) -> Point:
    """
    Incentre of triangle ``abc``.

    Vertex average weighted by the length of the opposite side. Three
    coincident vertices return that vertex.
    """
    if a.approx_eq(b) and b.approx_eq(c):
        return a
    la = b.distance_to(c)
    lb = a.distance_to(c)
    lc = a.distance_to(b)
    weighted = a.scale(la).add(b.scale(lb)).add(c.scale(lc))
    return weighted.divide(la + lb + lc)


def circumcentre(a: Point, b: Point, c: Point) -> Optional[Point]:
    """
    Circumcentre of triangle ``abc``.

    Solves the perpendicular-bisector system built from the doubled edge
    vectors ``b - a`` and ``c - b``.

    Parameters
    ----------
    a, b, c : Point
        Triangle vertices.

    Returns
    -------
    Point or None
        The circumcentre; ``a`` itself if all three vertices coincide; None
        if the vertices are otherwise collinear.
    """
    if a.approx_eq(b) and b.approx_eq(c):
        return a
    if eq_float(b.sub(a).cross(c.sub(a)), 0.0):
        return None

    v1 = b.sub(a).scale(2.0)
    v2 = c.sub(b).scale(2.0)
    c1 = b.squared_magnitude() - a.squared_magnitude()
    c2 = c.squared_magnitude() - b.squared_magnitude()
    det = v1.cross(v2)

    return Point((c1 * v2.y - c2 * v1.y) / det, (c2 * v1.x - c1 * v2.x) / det)
