"""
Point / vector algebra in the plane.

A single immutable value type, :class:`Point`, doubles as position and
displacement vector. Arithmetic is exposed as named methods; the Python
operators are thin aliases with identical semantics.

Equality
--------
``==`` and ``hash`` are the exact dataclass comparison, so points are safe
as dict keys and set members. Tolerance-aware equality is only available
through :meth:`Point.approx_eq`, which is reflexive and symmetric but NOT
transitive: ``p0 ≈ p1`` and ``p1 ≈ p2`` does not imply ``p0 ≈ p2``.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Union

import numpy as np

from .errors import DegenerateGeometryError, InvalidPointsError
from .tolerance import EPS, eq_float


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point / vector.

    Attributes
    ----------
    x : float
        Horizontal coordinate.
    y : float
        Vertical coordinate.
    """
    x: float
    y: float

    @classmethod
    def from_array(cls, arr) -> "Point":
        """Build a point from any length-2 array-like."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (2,):
            raise InvalidPointsError(f"Expected a point of shape (2,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x:.5f},{self.y:.5f})"

    # Algebra

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def negate(self) -> "Point":
        return Point(-self.x, -self.y)

    def scale(self, k: float) -> "Point":
        if not isinstance(k, numbers.Real):
            raise TypeError(f"Cannot scale a point by {type(k).__name__}")
        return Point(self.x * k, self.y * k)

    def divide(self, k: float) -> "Point":
        """
        Divide both coordinates by ``k``.

        Raises
        ------
        DegenerateGeometryError
            If ``|k| <= EPS``.
        """
        if abs(k) <= EPS:
            raise DegenerateGeometryError(f"Division by near-zero scalar {k!r}")
        return Point(self.x / k, self.y / k)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """
        Signed 2D cross product ``x1*y2 - y1*x2``.

        Positive when ``other`` lies counter-clockwise of ``self``. The
        magnitude is twice the area of the triangle spanned by both vectors.
        """
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def squared_magnitude(self) -> float:
        return self.dot(self)

    def distance_to(self, other: "Point") -> float:
        return self.sub(other).magnitude()

    def rotate(self, theta: float) -> "Point":
        """Rotate counter-clockwise by ``theta`` radians about the origin."""
        c = math.cos(theta)
        s = math.sin(theta)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def signed_angle_to(self, other: "Point") -> float:
        """
        Angle to rotate ``self`` counter-clockwise onto ``other``.

        Returns
        -------
        float
            Radians in ``(-pi, pi]``.
        """
        angle = math.atan2(self.cross(other), self.dot(other))
        # atan2(-0.0, x<0) gives -pi
        return math.pi if angle == -math.pi else angle

    def normalize(self) -> "Point":
        """
        Unit vector with the same direction.

        Raises
        ------
        DegenerateGeometryError
            If the magnitude is ``<= EPS``.
        """
        length = self.magnitude()
        if length <= EPS:
            raise DegenerateGeometryError(f"Cannot normalize near-zero vector {self}")
        return Point(self.x / length, self.y / length)

    def approx_eq(self, other: "Point", eps: float = EPS) -> bool:
        """True if both coordinates differ by less than ``eps``."""
        return eq_float(self.x, other.x, eps) and eq_float(self.y, other.y, eps)

    # Operator aliases

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.sub(other)

    def __neg__(self) -> "Point":
        return self.negate()

    def __mul__(self, k: float) -> "Point":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Point":
        return self.divide(k)


def orient(a: Point, b: Point, c: Point) -> float:
    """
    Turn predicate ``(b - a) x (c - a)``.

    Positive for a counter-clockwise (left) turn ``a -> b -> c``, negative for
    a clockwise turn, near zero for collinear points.
    """
    return b.sub(a).cross(c.sub(a))


PointLike = Union[Point, Sequence[float]]


def as_points(points: Union[np.ndarray, Iterable[PointLike]]) -> List[Point]:
    """
    Coerce point data to a list of :class:`Point`.

    Parameters
    ----------
    points : np.ndarray or iterable
        Array of shape (N, 2), or an iterable of Points / ``(x, y)`` pairs.

    Returns
    -------
    list of Point

    Raises
    ------
    InvalidPointsError
        If the data is not (N, 2) shaped or holds NaN / infinite values.
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64)
    else:
        try:
            rows = [tuple(p) for p in points]
            arr = np.asarray(rows, dtype=np.float64) if rows else np.empty((0, 2))
        except (TypeError, ValueError) as exc:
            raise InvalidPointsError(f"Cannot interpret points as (N, 2) data: {exc}") from exc

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPointsError(f"Expected points of shape (N, 2), got {arr.shape}")

    if not np.all(np.isfinite(arr)):
        raise InvalidPointsError("Point coordinates must be finite")

    return [Point(float(x), float(y)) for x, y in arr]
