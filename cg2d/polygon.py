# cg2d/polygon.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidInputError
from .geom import Pt, EPS, as_points, rotate, translate
from .predicates import (
    Orientation, between, collinear, left, left_on,
    point_in_polygon, segments_intersect, signed_area,
)

Edge = Tuple[int, int]  # (i, (i+1) % n): ребро лише виводиться, не зберігається


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def center(self) -> Pt:
        return Pt(0.5*(self.max_x - self.min_x) + self.min_x,
                  0.5*(self.max_y - self.min_y) + self.min_y)


@dataclass(frozen=True)
class Polygon:
    """
    Замкнений цикл вершин (остання з'єднується з першою), незмінний.
    Інваріанти, що перевіряються: >= 3 вершин, сусідні вершини не збігаються.
    Простота (ребра без самоперетинів): передумова для триангуляції, не перевіряється
    автоматично; для цього є is_simple().
    Орієнтацію модель не нав'язує: winding() повертає фактичну.
    """
    vertices: Tuple[Pt, ...]

    def __post_init__(self):
        n = len(self.vertices)
        if n < 3:
            raise InvalidInputError(f"Polygon needs at least 3 vertices, got {n}")
        for i in range(n):
            if self.vertices[i] == self.vertices[(i + 1) % n]:
                raise InvalidInputError(
                    f"consecutive vertices {i} and {(i + 1) % n} coincide: {self.vertices[i]}")

    @classmethod
    def from_coords(cls, coords: Iterable) -> "Polygon":
        """З масиву пар [x, y] (формат JSON-завантажувача) або з Pt."""
        return cls(tuple(as_points(coords)))

    # ---------------- Доступ ----------------
    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Pt]:
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Pt:
        return self.vertices[i]

    def prev_index(self, i: int) -> int:
        return (i - 1) % len(self.vertices)

    def next_index(self, i: int) -> int:
        return (i + 1) % len(self.vertices)

    def edges(self) -> List[Edge]:
        n = len(self.vertices)
        return [(i, (i + 1) % n) for i in range(n)]

    def edge_points(self) -> List[Tuple[Pt, Pt]]:
        return [(self.vertices[i], self.vertices[j]) for i, j in self.edges()]

    # ---------------- Міри ----------------
    def signed_area(self) -> float:
        return signed_area(self.vertices)

    def area(self) -> float:
        return abs(self.signed_area())

    def winding(self, eps: float = EPS) -> Orientation:
        """Обхід за знаком площі; |2·area| <= eps: COLLINEAR (вироджений)."""
        a2 = 2.0*self.signed_area()
        if a2 > eps:
            return Orientation.COUNTER_CLOCKWISE
        if a2 < -eps:
            return Orientation.CLOCKWISE
        return Orientation.COLLINEAR

    def is_ccw(self, eps: float = EPS) -> bool:
        return self.winding(eps) is Orientation.COUNTER_CLOCKWISE

    def bounding_box(self) -> BoundingBox:
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return BoundingBox(min(xs), max(xs), min(ys), max(ys))

    def contains(self, p: Pt, eps: float = EPS) -> bool:
        return point_in_polygon(p, self.vertices, eps)

    # ---------------- Перетворення (повертають новий многокутник) ----------------
    def rotated(self, radians: float, about: Optional[Pt] = None) -> "Polygon":
        about = about if about is not None else Pt(0.0, 0.0)
        return Polygon(tuple(rotate(p, radians, about) for p in self.vertices))

    def translated(self, dx: float, dy: float) -> "Polygon":
        return Polygon(tuple(translate(p, dx, dy) for p in self.vertices))

    def rounded(self, ndigits: int = 0) -> "Polygon":
        return Polygon(tuple(Pt(float(round(p.x, ndigits)), float(round(p.y, ndigits)))
                             for p in self.vertices))

    def reversed(self) -> "Polygon":
        return Polygon(tuple(reversed(self.vertices)))

    def ccw(self) -> "Polygon":
        """Копія з обходом проти годинникової (CW розвертаємо, інакше без змін)."""
        if self.winding() is Orientation.CLOCKWISE:
            return self.reversed()
        return self

    def recentered_rotation(self, radians: float, ndigits: int = 0) -> "Polygon":
        """
        Повернути навколо початку координат, округлити і зсунути так, щоб
        (округлений) центр bbox збігся з центром bbox до повороту.
        """
        c0 = self.bounding_box().center()
        c0 = Pt(round(c0.x, ndigits), round(c0.y, ndigits))
        rot = self.rotated(radians).rounded(ndigits)
        c1 = rot.bounding_box().center()
        c1 = Pt(round(c1.x, ndigits), round(c1.y, ndigits))
        return rot.translated(c0.x - c1.x, c0.y - c1.y)

    # ---------------- Діагоналі ----------------
    def in_cone(self, i: int, j: int, eps: float = EPS) -> bool:
        """
        Чи лежить відрізок (v_i, v_j) у внутрішньому куті многокутника при вершині v_i.
        Для CW-многокутника міняємо ролі сусідів, щоб працювати як з CCW.
        """
        a = self.vertices[i]
        b = self.vertices[j]
        a0 = self.vertices[self.prev_index(i)]
        a1 = self.vertices[self.next_index(i)]
        if self.winding(eps) is Orientation.CLOCKWISE:
            a0, a1 = a1, a0
        if left_on(a, a1, a0, eps):
            # опукла вершина
            return left(a, b, a0, eps) and left(b, a, a1, eps)
        # рефлексна вершина
        return not (left_on(a, b, a1, eps) and left_on(b, a, a0, eps))

    def is_diagonal(self, i: int, j: int, eps: float = EPS) -> bool:
        """
        Відрізок (v_i, v_j): внутрішня діагональ: не сусідні вершини, лежить у конусах
        обох кінців і не перетинає жодного ребра, не інцидентного i або j.
        """
        n = len(self.vertices)
        if i == j or self.next_index(i) == j or self.prev_index(i) == j:
            return False
        if not (self.in_cone(i, j, eps) and self.in_cone(j, i, eps)):
            return False
        a, b = self.vertices[i], self.vertices[j]
        for k in range(n):
            k1 = (k + 1) % n
            if k in (i, j) or k1 in (i, j):
                continue
            if segments_intersect(a, b, self.vertices[k], self.vertices[k1], eps):
                return False
        return True

    def is_simple(self, eps: float = EPS) -> bool:
        """
        O(n^2): несусідні ребра не мають спільних точок, сусідні: не утворюють «шпильку»
        (колінеарне накладання).
        """
        n = len(self.vertices)
        V = self.vertices
        for i in range(n):
            a, b, c = V[i - 1], V[i], V[(i + 1) % n]
            if collinear(a, b, c, eps) and (between(a, b, c, eps) or between(b, c, a, eps)):
                return False
        for i in range(n):
            a1, a2 = V[i], V[(i + 1) % n]
            for j in range(i + 2, n):
                if i == 0 and j == n - 1:
                    continue  # сусідні через замикання
                if segments_intersect(a1, a2, V[j], V[(j + 1) % n], eps):
                    return False
        return True
