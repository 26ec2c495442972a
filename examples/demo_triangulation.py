# examples/demo_triangulation.py
import logging
from math import cos, pi, sin

from cg2d.polygon import Polygon
from cg2d.triangulation import triangulate

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    # «гребінка»: невипуклий простий многокутник
    comb = Polygon.from_coords([
        (0, 0), (6, 0), (6, 4), (5, 4), (5, 1), (4, 1), (4, 4),
        (3, 4), (3, 1), (2, 1), (2, 4), (1, 4), (1, 1), (0, 1),
    ])
    tri = triangulate(comb)
    print("Triangles:", len(tri), "area:", tri.area(), "polygon area:", comb.signed_area())
    print("Diagonals:", tri.diagonals())
    print("VALIDATION:", tri.validate())

    hexagon = Polygon.from_coords([(cos(k*pi/3), sin(k*pi/3)) for k in range(6)])
    print("Hexagon triangles:", list(triangulate(hexagon)))
