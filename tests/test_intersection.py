import math
from types import SimpleNamespace

import pytest

from intersect2d.geometry.intersection import intersect, lerp, parametric_coefficients
from intersect2d.geometry.primitives import Point, Segment


def seg(a, b):
    return Segment.from_xy(a, b)


class TestLerp:

    def test_midpoint(self):
        assert lerp(0, 10, 0.5) == 5

    def test_endpoints(self):
        assert lerp(0, 10, 0) == 0
        assert lerp(0, 10, 1) == 10

    def test_extrapolates_outside_unit_range(self):
        assert lerp(0, 10, 2) == 20
        assert lerp(0, 10, -1) == -10

    def test_reversed_bounds(self):
        assert lerp(10, 0, 0.25) == 7.5


class TestIntersect:

    def test_crossing_diagonals(self):
        p = intersect(seg((0, 0), (10, 10)), seg((0, 10), (10, 0)))
        assert p == Point(5, 5)

    def test_parallel_segments(self):
        AB, CD = seg((0, 0), (10, 0)), seg((0, 5), (10, 5))
        _, _, t_div = parametric_coefficients(AB, CD)
        assert t_div == 0
        assert intersect(AB, CD) is None

    def test_collinear_overlapping_segments(self):
        assert intersect(seg((0, 0), (10, 0)), seg((5, 0), (15, 0))) is None

    def test_lines_cross_outside_segments(self):
        AB, CD = seg((0, 0), (1, 1)), seg((5, 0), (5, -1))
        t, u, _ = parametric_coefficients(AB, CD)
        assert t == 5
        assert intersect(AB, CD) is None

    def test_u_out_of_range(self):
        # t is inside [0,1] but the crossing is beyond D
        AB, CD = seg((0, 0), (10, 0)), seg((5, 5), (5, 1))
        t, u, _ = parametric_coefficients(AB, CD)
        assert 0 <= t <= 1
        assert u > 1
        assert intersect(AB, CD) is None

    def test_shared_endpoint(self):
        AB, CD = seg((0, 0), (10, 10)), seg((10, 10), (20, 0))
        t, u, _ = parametric_coefficients(AB, CD)
        assert t == 1
        assert u == 0
        assert intersect(AB, CD) == Point(10, 10)

    def test_t_shaped_touch(self):
        # C lies exactly on AB
        p = intersect(seg((0, 0), (10, 0)), seg((4, 0), (4, 8)))
        assert p == Point(4, 0)

    def test_point_comes_from_ab(self):
        AB, CD = seg((0, 0), (4, 2)), seg((0, 2), (4, 0))
        t, _, _ = parametric_coefficients(AB, CD)
        p = intersect(AB, CD)
        assert p.x == lerp(0, 4, t)
        assert p.y == lerp(0, 2, t)
        assert p.label is None

    def test_argument_order_gives_same_point(self):
        AB, CD = seg((1, 7), (9, -3)), seg((-2, 0), (12, 4))
        p, q = intersect(AB, CD), intersect(CD, AB)
        assert p is not None and q is not None
        assert p.x == pytest.approx(q.x)
        assert p.y == pytest.approx(q.y)

    def test_degenerate_segment(self):
        # A == B makes every term of t_divider cancel, whatever CD is
        AB = seg((3, 3), (3, 3))
        for CD in (seg((0, 0), (10, 10)), seg((0, 10), (10, 0)), seg((3, 0), (3, 9))):
            _, _, t_div = parametric_coefficients(AB, CD)
            assert t_div == 0
            assert intersect(AB, CD) is None

    def test_nan_input_gives_none(self):
        AB = Segment(Point(math.nan, 0), Point(10, 10))
        assert intersect(AB, seg((0, 10), (10, 0))) is None

    def test_zero_divider_does_not_raise(self):
        t, u, t_div = parametric_coefficients(seg((0, 0), (10, 0)), seg((0, 5), (10, 5)))
        assert t_div == 0
        assert math.isinf(t) or math.isnan(t)
        assert math.isinf(u) or math.isnan(u)

    def test_accepts_plain_point_pairs(self):
        a, b = SimpleNamespace(x=0, y=0), SimpleNamespace(x=10, y=10)
        c, d = SimpleNamespace(x=0, y=10), SimpleNamespace(x=10, y=0)
        assert intersect([a, b], (c, d)) == Point(5, 5)
