"""
Edge case and reference tests for hull construction.

Tests cover:
1. Agreement with scipy's Qhull-based ConvexHull on random point sets
2. Containment agreement with shapely away from the boundary
3. Near-collinear and near-duplicate input
4. Large coordinate offsets
"""

import numpy as np
import pytest
from scipy.spatial import ConvexHull as QhullConvexHull
from shapely.geometry import Point as ShapelyPoint

from planegeom import EPS, Point, get_convex_hull


class TestAgainstScipy:
    """Vertex sets and areas match scipy.spatial.ConvexHull."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_gaussian_cloud(self, seed):
        np.random.seed(seed)
        points = np.random.randn(300, 2)

        hull = get_convex_hull(points)
        reference = QhullConvexHull(points)

        ours = {(p.x, p.y) for p in hull.get_points()}
        theirs = {tuple(points[i]) for i in reference.vertices}

        assert ours == theirs
        assert abs(hull.area() - reference.volume) < 1e-9

    def test_ccw_order_matches(self):
        """scipy lists 2D hull vertices counter-clockwise too."""
        np.random.seed(11)
        points = np.random.uniform(-5, 5, size=(100, 2))

        ours = [(p.x, p.y) for p in get_convex_hull(points).get_points()]
        theirs = [tuple(points[i]) for i in QhullConvexHull(points).vertices]

        start = theirs.index(ours[0])
        assert ours == theirs[start:] + theirs[:start]

    def test_uniform_square_valid(self):
        np.random.seed(5)
        points = np.random.uniform(0, 1, size=(1000, 2))
        hull = get_convex_hull(points)
        assert hull.valid()
        assert hull.area() <= 1.0


class TestAgainstShapely:
    """Containment agrees with shapely for queries clear of the boundary."""

    def test_random_queries(self):
        np.random.seed(3)
        points = np.random.randn(80, 2)
        queries = np.random.uniform(-4, 4, size=(500, 2))

        hull = get_convex_hull(points)
        polygon = hull.to_polygon()
        ours = hull.contains_points(queries)

        for query, inside in zip(queries, ours):
            shapely_point = ShapelyPoint(query)
            if polygon.exterior.distance(shapely_point) < 1e-6:
                continue
            assert inside == polygon.contains(shapely_point)


class TestNearDegenerate:
    """Near-collinear and near-duplicate configurations."""

    def test_near_collinear_point_evicted(self):
        """A point within EPS of an edge is not a hull vertex."""
        pts = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 0.1 * EPS)]
        hull = get_convex_hull(pts)

        assert len(hull.get_points()) == 4
        assert Point(1, 0.1 * EPS) not in hull.get_points()

    def test_points_on_edges_evicted(self):
        """Exactly collinear boundary points never become vertices."""
        edge_points = [(x, 0.0) for x in np.linspace(0, 1, 11)]
        edge_points += [(1.0, y) for y in np.linspace(0, 1, 11)]
        edge_points += [(0.0, 1.0)]
        hull = get_convex_hull(edge_points)

        assert hull.get_points() == [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]

    def test_near_vertical_edge(self):
        """x values within EPS sort by y, so a near-vertical edge stays clean."""
        pts = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(1 + 0.1 * EPS, 0.5)]
        hull = get_convex_hull(pts)

        assert len(hull.get_points()) == 4
        assert hull.valid()
        assert abs(hull.area() - 1.0) < EPS

    def test_non_transitive_chain(self):
        """Comparator-adjacent points collapse pairwise, not transitively."""
        chain = [Point(i * 0.6 * EPS, 0.0) for i in range(3)]
        hull = get_convex_hull(chain)

        # p0 ~ p1 collapses; p2 differs from p0 by more than EPS and survives
        assert hull.get_points() == [chain[0], chain[2]]


class TestLargeCoordinates:
    """Translation far from the origin."""

    def test_offset_square(self):
        offset = 1e4
        pts = [(offset + x, offset + y) for x, y in [(0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5)]]
        hull = get_convex_hull(pts)

        assert len(hull.get_points()) == 4
        assert abs(hull.area() - 1.0) < 1e-6


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
