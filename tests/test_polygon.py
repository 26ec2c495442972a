from math import pi

import pytest

from cg2d.errors import InvalidInputError
from cg2d.geom import Pt
from cg2d.polygon import BoundingBox, Polygon
from cg2d.predicates import Orientation


class TestConstruction:

    def test_too_few_vertices(self):
        with pytest.raises(InvalidInputError):
            Polygon.from_coords([(0, 0), (1, 1)])

    def test_consecutive_duplicate(self):
        with pytest.raises(InvalidInputError):
            Polygon.from_coords([(0, 0), (1, 0), (1, 0), (0, 1)])

    def test_wraparound_duplicate(self):
        with pytest.raises(InvalidInputError):
            Polygon.from_coords([(0, 0), (1, 0), (0, 1), (0, 0)])

    def test_non_adjacent_duplicate_allowed(self):
        poly = Polygon.from_coords([(0, 0), (2, 0), (1, 1), (2, 2), (0, 2), (1, 1)])
        assert len(poly) == 6

    def test_immutable(self, square):
        poly = Polygon.from_coords(square)
        with pytest.raises(AttributeError):
            poly.vertices = ()


class TestDerived:

    def test_edges(self, square):
        poly = Polygon.from_coords(square)
        assert poly.edges() == [(0, 1), (1, 2), (2, 3), (3, 0)]
        assert poly.edge_points()[3] == (Pt(0, 4), Pt(0, 0))

    def test_prev_next(self, square):
        poly = Polygon.from_coords(square)
        assert poly.prev_index(0) == 3
        assert poly.next_index(3) == 0

    def test_area_and_winding(self, square):
        poly = Polygon.from_coords(square)
        assert poly.signed_area() == 16
        assert poly.winding() is Orientation.COUNTER_CLOCKWISE
        rev = poly.reversed()
        assert rev.signed_area() == -16
        assert rev.area() == 16
        assert rev.winding() is Orientation.CLOCKWISE
        assert rev.ccw() == poly
        assert poly.ccw() is poly

    def test_collinear_polygon_winding(self):
        poly = Polygon.from_coords([(0, 0), (1, 0), (2, 0)])
        assert poly.winding() is Orientation.COLLINEAR

    def test_bounding_box(self, arrow):
        bb = arrow.bounding_box()
        assert bb == BoundingBox(0, 4, 0, 4)
        assert (bb.width, bb.height) == (4, 4)
        assert bb.center() == Pt(2, 2)

    def test_bounding_box_center(self):
        assert BoundingBox(0.0, 10.0, 0.0, 6.0).center() == Pt(5.0, 3.0)

    def test_contains(self, arrow):
        assert arrow.contains(Pt(1, 1))
        assert arrow.contains(Pt(2, 0))
        assert not arrow.contains(Pt(2, 3))


class TestTransforms:

    def test_rotated_about_origin(self):
        poly = Polygon.from_coords([(1, 0), (0, 1), (-1, 0)]).rotated(pi/2)
        assert poly[0].x == pytest.approx(0, abs=1e-12)
        assert poly[0].y == pytest.approx(1)
        assert poly.signed_area() == pytest.approx(1)

    def test_translated(self, square):
        poly = Polygon.from_coords(square).translated(1, -1)
        assert poly[0] == Pt(1, -1)
        assert poly.signed_area() == 16

    def test_rounded(self):
        poly = Polygon.from_coords([(0.4, 0.6), (2.2, 0.1), (1.0, 1.9)]).rounded()
        assert list(poly) == [Pt(0, 1), Pt(2, 0), Pt(1, 2)]

    def test_recentered_rotation_keeps_square_in_place(self, square):
        poly = Polygon.from_coords(square)
        turned = poly.recentered_rotation(pi)
        assert set(turned) == set(poly)
        assert turned[0] == Pt(4, 4)
        assert turned.bounding_box().center() == Pt(2, 2)

    def test_input_not_mutated(self, square):
        poly = Polygon.from_coords(square)
        poly.rotated(1.0).translated(3, 3)
        assert poly == Polygon.from_coords(square)


class TestDiagonals:

    def test_in_cone(self, arrow):
        assert arrow.in_cone(3, 1)
        assert not arrow.in_cone(2, 4)

    @pytest.mark.parametrize("i,j,expected", [
        (1, 3, True),
        (0, 3, True),
        (0, 2, False),   # проходить над виїмкою, поза многокутником
        (2, 4, False),
        (0, 1, False),   # сусідні вершини
        (2, 2, False),
    ])
    def test_is_diagonal(self, arrow, i, j, expected):
        assert arrow.is_diagonal(i, j) is expected

    def test_is_diagonal_clockwise(self, arrow):
        rev = arrow.reversed()
        n = len(arrow)
        assert rev.is_diagonal(n - 1 - 1, n - 1 - 3)
        assert not rev.is_diagonal(n - 1 - 0, n - 1 - 2)


class TestSimplicity:

    def test_simple(self, square, arrow, comb):
        assert Polygon.from_coords(square).is_simple()
        assert arrow.is_simple()
        assert comb.is_simple()

    def test_bowtie(self):
        assert not Polygon.from_coords([(0, 0), (2, 2), (2, 0), (0, 2)]).is_simple()

    def test_spike(self):
        assert not Polygon.from_coords([(0, 0), (4, 0), (2, 0), (2, 3)]).is_simple()
