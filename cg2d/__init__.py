"""
cg2d: мінімальне ядро 2D обчислювальної геометрії.
Предикати, модель многокутника, п'ять алгоритмів опуклої оболонки,
brute-force оракул крайніх/внутрішніх точок і триангуляція ear clipping.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, as_points, centroid
from cg2d.errors import (
    GeometryError, InvalidInputError, DegenerateGeometryError, NonSimplePolygonError,
)
from cg2d.predicates import (
    Orientation, orientation, signed_area, point_in_triangle, point_in_polygon,
    segments_intersect,
)
from cg2d.polygon import Polygon, BoundingBox
from cg2d.extreme import (
    extreme_edges, extreme_points, interior_points,
    extreme_points_from_interior_points, interior_points_from_extreme_edges,
)
from cg2d.hull import (
    HullAlgorithm, HullResult, convex_hull,
    gift_wrapping, quickhull, graham_scan, incremental, divide_and_conquer,
)
from cg2d.triangulation import Triangulation, triangulate
from cg2d.pipeline import cross_validate

__all__ = [
    "Pt", "EPS", "as_points", "centroid",
    "GeometryError", "InvalidInputError", "DegenerateGeometryError", "NonSimplePolygonError",
    "Orientation", "orientation", "signed_area", "point_in_triangle", "point_in_polygon",
    "segments_intersect",
    "Polygon", "BoundingBox",
    "extreme_edges", "extreme_points", "interior_points",
    "extreme_points_from_interior_points", "interior_points_from_extreme_edges",
    "HullAlgorithm", "HullResult", "convex_hull",
    "gift_wrapping", "quickhull", "graham_scan", "incremental", "divide_and_conquer",
    "Triangulation", "triangulate",
    "cross_validate", "__version__",
]
