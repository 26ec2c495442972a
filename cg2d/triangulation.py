# cg2d/triangulation.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

from .errors import DegenerateGeometryError, NonSimplePolygonError
from .geom import Pt, EPS, centroid
from .polygon import Polygon
from .predicates import (
    Orientation, orientation, point_in_triangle, point_strictly_in_triangle,
    proper_intersection, segments_intersect, signed_area,
)

logger = logging.getLogger(__name__)

Tri = Tuple[int, int, int]


@dataclass(frozen=True)
class Triangulation:
    """
    Розбиття многокутника на n-2 трикутники.
    triangles: трійки індексів вершин (prev, v, next) у порядку «відрізання»,
               з тим самим обходом, що й сам многокутник.
    """
    polygon: Polygon
    triangles: Tuple[Tri, ...]

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Tri]:
        return iter(self.triangles)

    def to_points(self) -> List[Tuple[Pt, Pt, Pt]]:
        V = self.polygon.vertices
        return [(V[a], V[b], V[c]) for a, b, c in self.triangles]

    def area(self) -> float:
        """Сума знакових площ трикутників; має дорівнювати signed_area многокутника."""
        return sum(signed_area(t) for t in self.to_points())

    def diagonals(self) -> List[Tuple[int, int]]:
        """n-3 діагоналі: кожне відрізане вухо, крім останнього трикутника, додає (prev, next)."""
        return [(min(a, c), max(a, c)) for a, _, c in self.triangles[:-1]]

    def validate(self, eps: float = EPS) -> dict:
        """
        Перевірка:
          - кількість трикутників n-2;
          - сума площ = площа многокутника (з точністю eps·n);
          - кожен трикутник невироджений і з обходом многокутника;
          - жодні два трикутники не мають спільної внутрішньої області.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        n = len(self.polygon)
        winding = self.polygon.winding(eps)
        pts = self.to_points()
        bad_tris = [k for k, (a, b, c) in enumerate(pts) if orientation(a, b, c, eps) is not winding]
        overlaps: List[Tuple[int, int]] = []
        for k in range(len(pts)):
            for m in range(k + 1, len(pts)):
                if _interiors_overlap(pts[k], pts[m], eps):
                    overlaps.append((k, m))
        area_error = abs(self.area() - self.polygon.signed_area())
        return {
            "triangles": len(self.triangles),
            "expected_triangles": n - 2,
            "area_error": area_error,
            "area_ok": area_error <= max(eps, 1e-9) * max(1.0, self.polygon.area()),
            "bad_triangles": bad_tris,
            "overlapping_pairs": overlaps,
        }


def _interiors_overlap(t1: Tuple[Pt, Pt, Pt], t2: Tuple[Pt, Pt, Pt], eps: float) -> bool:
    for i in range(3):
        for j in range(3):
            if proper_intersection(t1[i], t1[(i + 1) % 3], t2[j], t2[(j + 1) % 3], eps):
                return True
    # вкладеність або збіг: центроїд чи вершина одного строго всередині іншого
    for a, b in ((t1, t2), (t2, t1)):
        if point_strictly_in_triangle(centroid(a), *b, eps=eps):
            return True
        if any(point_strictly_in_triangle(p, *b, eps=eps) for p in a):
            return True
    return False


def _is_ear(P: Tuple[Pt, ...], W: List[int], k: int, winding: Orientation, eps: float) -> bool:
    """
    Вухо при позиції k робочого списку W:
      1) (prev, v, next) повертає так само, як увесь многокутник (не рефлексна вершина);
      2) жодна інша залишена вершина не лежить у трикутнику (замкнений тест);
      3) діагональ (prev, next) не перетинає ребер, не інцидентних prev/next.
    """
    m = len(W)
    prev, v, nxt = W[k - 1], W[k], W[(k + 1) % m]
    a, b, c = P[prev], P[v], P[nxt]
    if orientation(a, b, c, eps) is not winding:
        return False
    for idx in W:
        if idx != prev and idx != v and idx != nxt and point_in_triangle(P[idx], a, b, c, eps):
            return False
    for t in range(m):
        u, w = W[t], W[(t + 1) % m]
        if u in (prev, nxt) or w in (prev, nxt):
            continue
        if segments_intersect(a, c, P[u], P[w], eps):
            return False
    return True


def triangulate(polygon: Union[Polygon, Iterable], eps: float = EPS) -> Triangulation:
    """
    Ear clipping простого многокутника (без дірок), O(n^2):
    прапорці «вухо» рахуються один раз, після відрізання перераховуються лише два сусіди.
    Відрізаємо перше вухо в порядку робочого списку.

    Передумова: многокутник простий. Якщо вухо не знайдено при > 3 вершинах -
    NonSimplePolygonError (часткового результату немає).
    """
    if not isinstance(polygon, Polygon):
        polygon = Polygon.from_coords(polygon)
    winding = polygon.winding(eps)
    if winding is Orientation.COLLINEAR:
        raise DegenerateGeometryError("cannot triangulate a zero-area polygon")

    P = polygon.vertices
    W = list(range(len(P)))
    ears = [_is_ear(P, W, k, winding, eps) for k in range(len(W))]
    triangles: List[Tri] = []

    while len(W) > 3:
        k = next((pos for pos, ok in enumerate(ears) if ok), None)
        if k is None:
            raise NonSimplePolygonError(
                f"no ear found with {len(W)} vertices remaining: polygon is not simple")
        m = len(W)
        tri = (W[k - 1], W[k], W[(k + 1) % m])
        triangles.append(tri)
        logger.debug("clip ear %s (%d vertices left)", tri, m - 1)
        del W[k]
        del ears[k]
        m -= 1
        # змінюється лише статус сусідів відрізаної вершини
        for pos in ((k - 1) % m, k % m):
            ears[pos] = _is_ear(P, W, pos, winding, eps)

    a, b, c = W
    if orientation(P[a], P[b], P[c], eps) is not winding:
        raise NonSimplePolygonError("last triangle does not follow polygon winding: polygon is not simple")
    triangles.append((a, b, c))
    return Triangulation(polygon, tuple(triangles))
