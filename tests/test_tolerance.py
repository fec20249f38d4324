"""
Unit tests for the tolerance helpers and the epsilon comparator.
"""

import pytest

from planegeom import EPS, Point, eq_float, sign, compare_points, sort_points


class TestEqFloat:
    """Tests for eq_float()."""

    def test_within_eps(self):
        assert eq_float(1.0, 1.0 + 0.5 * EPS)

    def test_outside_eps(self):
        assert not eq_float(1.0, 1.0 + 2 * EPS)

    def test_custom_eps(self):
        assert eq_float(1.0, 1.05, eps=0.1)
        assert not eq_float(1.0, 1.05, eps=0.01)


class TestSign:
    """Tests for sign()."""

    @pytest.mark.parametrize("value, expected", [
        (1.0, 1),
        (-1.0, -1),
        (0.0, 0),
        (0.5 * EPS, 0),
        (-0.5 * EPS, 0),
        (2 * EPS, 1),
    ])
    def test_sign(self, value, expected):
        assert sign(value) == expected


class TestComparePoints:
    """Tests for compare_points()."""

    def test_orders_by_x_first(self):
        assert compare_points(Point(0, 5), Point(1, 0)) == -1
        assert compare_points(Point(1, 0), Point(0, 5)) == 1

    def test_falls_back_to_y(self):
        assert compare_points(Point(1, 0), Point(1, 1)) == -1
        assert compare_points(Point(1, 1), Point(1, 0)) == 1

    def test_equal_within_eps(self):
        assert compare_points(Point(1, 1), Point(1 + 0.5 * EPS, 1 - 0.5 * EPS)) == 0

    def test_near_equal_x_decided_by_y(self):
        """x values inside EPS tie, so y decides, unlike an exact comparison."""
        a = Point(0.0, 1.0)
        b = Point(0.5 * EPS, 0.0)
        assert compare_points(a, b) == 1
        assert compare_points(b, a) == -1

    def test_custom_eps(self):
        assert compare_points(Point(0, 0), Point(0.01, 0.01), eps=0.1) == 0


class TestSortPoints:
    """Tests for sort_points()."""

    def test_lexicographic(self):
        pts = [Point(1, 0), Point(0, 1), Point(0, 0), Point(1, -1)]
        assert sort_points(pts) == [Point(0, 0), Point(0, 1), Point(1, -1), Point(1, 0)]

    def test_uses_tolerant_comparison(self):
        """A point with x just above another's but smaller y sorts first."""
        a = Point(0.0, 1.0)
        b = Point(0.5 * EPS, 0.0)
        assert sort_points([a, b]) == [b, a]

    def test_stable_for_equal_points(self):
        """Points equal under the comparator keep their input order."""
        a = Point(0.0, 0.0)
        b = Point(0.1 * EPS, 0.0)
        assert sort_points([b, a]) == [b, a]
        assert sort_points([a, b]) == [a, b]

    def test_custom_eps(self):
        a = Point(0.0, 1.0)
        b = Point(0.01, 0.0)
        assert sort_points([a, b]) == [a, b]
        assert sort_points([a, b], eps=0.1) == [b, a]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
