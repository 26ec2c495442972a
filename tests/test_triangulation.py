import pytest

from cg2d.errors import DegenerateGeometryError, InvalidInputError, NonSimplePolygonError
from cg2d.polygon import Polygon
from cg2d.triangulation import Triangulation, triangulate


def assert_valid(tri: Triangulation):
    report = tri.validate()
    assert report["triangles"] == report["expected_triangles"]
    assert report["area_ok"], report["area_error"]
    assert report["bad_triangles"] == []
    assert report["overlapping_pairs"] == []


class TestScenarios:

    def test_square(self, square):
        poly = Polygon.from_coords(square)
        tri = triangulate(poly)
        assert len(tri) == 2
        assert tri.triangles == ((3, 0, 1), (1, 2, 3))
        assert tri.area() == 16
        assert tri.diagonals() == [(1, 3)]

    def test_accepts_raw_coordinates(self, square):
        assert len(triangulate(square)) == 2

    def test_hexagon(self, hexagon):
        tri = triangulate(hexagon)
        assert len(tri) == 4
        assert tri.area() == pytest.approx(hexagon.signed_area())
        assert_valid(tri)

    def test_clockwise_square(self, square):
        poly = Polygon.from_coords(square).reversed()
        tri = triangulate(poly)
        assert len(tri) == 2
        assert tri.area() == -16
        assert_valid(tri)

    def test_arrow(self, arrow):
        tri = triangulate(arrow)
        assert len(tri) == 3
        assert tri.area() == arrow.signed_area()
        assert_valid(tri)

    def test_comb(self, comb):
        tri = triangulate(comb)
        assert len(tri) == len(comb) - 2
        assert len(tri.diagonals()) == len(comb) - 3
        assert_valid(tri)

    def test_collinear_vertex_on_edge(self):
        poly = Polygon.from_coords([(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)])
        tri = triangulate(poly)
        assert len(tri) == 3
        assert tri.area() == 16
        assert_valid(tri)

    def test_every_vertex_used(self, comb):
        used = {i for t in triangulate(comb) for i in t}
        assert used == set(range(len(comb)))

    def test_polygon_not_mutated(self, comb):
        before = comb.vertices
        triangulate(comb)
        assert comb.vertices == before

    def test_deterministic(self, comb):
        assert triangulate(comb).triangles == triangulate(comb).triangles


class TestRandomPolygons:

    @pytest.mark.parametrize("seed", range(10))
    def test_star_polygon(self, random_star_polygon, seed):
        poly = random_star_polygon(seed, n=25)
        tri = triangulate(poly)
        assert len(tri) == 23
        assert tri.area() == pytest.approx(poly.signed_area())
        assert_valid(tri)

    @pytest.mark.parametrize("seed", range(3))
    def test_star_polygon_clockwise(self, random_star_polygon, seed):
        poly = random_star_polygon(seed, n=15).reversed()
        tri = triangulate(poly)
        assert tri.area() == pytest.approx(poly.signed_area())
        assert_valid(tri)


class TestFailures:

    def test_too_few_vertices(self):
        with pytest.raises(InvalidInputError):
            triangulate([(0, 0), (1, 0)])

    def test_zero_area(self):
        with pytest.raises(DegenerateGeometryError):
            triangulate([(0, 0), (1, 0), (2, 0)])

    def test_symmetric_bowtie_has_zero_area(self):
        with pytest.raises(DegenerateGeometryError):
            triangulate([(0, 0), (2, 2), (2, 0), (0, 2)])

    def test_self_intersecting(self):
        # «вісімка» з нерівними петлями: площа ненульова, але многокутник не простий
        with pytest.raises(NonSimplePolygonError):
            triangulate([(0, 0), (2, 2), (2, 0), (0, 4)])
