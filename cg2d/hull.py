# cg2d/hull.py
"""
П'ять незалежних алгоритмів 2D опуклої оболонки з одним контрактом:
  вхід : >= 3 точок (дублікати та колінеарні підмножини дозволені);
  вихід: HullResult: індекси вхідних точок у CCW-порядку, починаючи з найнижчої
          (потім найлівішої) вершини; колінеарні проміжні точки не входять.
Єдиний геометричний примітив, що кодує «правильний поворот»,: orientation().
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Dict, FrozenSet, Iterable, List, Sequence, Tuple

from .errors import DegenerateGeometryError, InvalidInputError
from .geom import Pt, EPS, as_points, dist2, dot, first_occurrences, sub
from .polygon import Polygon
from .predicates import Orientation, between, left_on, orient2d, orientation, signed_area

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]
CCW = Orientation.COUNTER_CLOCKWISE
CW = Orientation.CLOCKWISE
COLLINEAR = Orientation.COLLINEAR


class HullAlgorithm(str, Enum):
    """Замкнена множина алгоритмів; значення: ім'я для вибору з CLI/бенчмарку."""
    GIFT_WRAPPING = "gift_wrapping"
    QUICKHULL = "quickhull"
    GRAHAM_SCAN = "graham_scan"
    INCREMENTAL = "incremental"
    DIVIDE_AND_CONQUER = "divide_and_conquer"


@dataclass(frozen=True)
class HullResult:
    """
    indices: вершини оболонки (індекси у points) у CCW-порядку від найнижчої-найлівішої.
    points:  усі вхідні точки (лише для читання).
    1 вершина: усі точки збігаються; 2: усі колінеарні (вироджена «оболонка»).
    """
    indices: Tuple[int, ...]
    points: Tuple[Pt, ...]
    algorithm: HullAlgorithm

    @property
    def vertices(self) -> Tuple[Pt, ...]:
        return tuple(self.points[i] for i in self.indices)

    @property
    def vertex_set(self) -> FrozenSet[int]:
        return frozenset(self.indices)

    @property
    def is_degenerate(self) -> bool:
        return len(self.indices) < 3

    @property
    def signed_area(self) -> float:
        if self.is_degenerate:
            return 0.0
        return signed_area(self.vertices)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    def __len__(self) -> int:
        return len(self.indices)

    def edges(self) -> List[Edge]:
        h = len(self.indices)
        if h < 2:
            return []
        return [(self.indices[k], self.indices[(k + 1) % h]) for k in range(h)]

    def contains(self, p: Pt, eps: float = EPS) -> bool:
        """Замкнений тест: точка всередині або на межі оболонки."""
        V = self.vertices
        if len(V) == 1:
            return p == V[0]
        if len(V) == 2:
            return between(V[0], V[1], p, eps)
        return all(left_on(V[k], V[(k + 1) % len(V)], p, eps) for k in range(len(V)))

    def to_polygon(self) -> Polygon:
        if self.is_degenerate:
            raise DegenerateGeometryError(f"hull has only {len(self.indices)} vertices")
        return Polygon(self.vertices)

    def validate(self, eps: float = EPS) -> dict:
        """
        Перевірка коректності:
          - кожна вхідна точка всередині або на межі;
          - кожна вершина (для h >= 3): строгий лівий поворот (мінімальність);
          - немає двох вершин з однаковими координатами;
          - старт: найнижча-найлівіша вершина.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        V = self.vertices
        h = len(V)
        outside = [i for i, p in enumerate(self.points) if not self.contains(p, eps)]
        bad_turns: List[int] = []
        if h >= 3:
            for k in range(h):
                if orientation(V[k - 1], V[k], V[(k + 1) % h], eps) is not CCW:
                    bad_turns.append(self.indices[k])
        seen: Dict[Tuple[float, float], int] = {}
        duplicates: List[int] = []
        for i in self.indices:
            key = (self.points[i].x, self.points[i].y)
            if key in seen:
                duplicates.append(i)
            seen[key] = i
        bad_start = bool(V) and min(V, key=lambda p: (p.y, p.x)) != V[0]
        return {
            "vertices": h,
            "area": self.area,
            "outside_points": outside,
            "non_convex_vertices": bad_turns,
            "duplicate_vertices": duplicates,
            "bad_start": bad_start,
        }


# ---------------- Спільна обв'язка ----------------
HullBody = Callable[[List[Pt], List[int], float], List[int]]


def _prepare(points: Iterable) -> Tuple[List[Pt], List[int]]:
    P = as_points(points)
    if len(P) < 3:
        raise InvalidInputError(f"Need at least 3 points, got {len(P)}")
    return P, first_occurrences(P)


def _lowest(P: Sequence[Pt], idx: Iterable[int]) -> int:
    return min(idx, key=lambda i: (P[i].y, P[i].x))


def _run(points: Iterable, eps: float, algorithm: HullAlgorithm, body: HullBody) -> HullResult:
    P, U = _prepare(points)
    if len(U) <= 2:
        order = sorted(U, key=lambda i: (P[i].y, P[i].x))
    else:
        order = body(P, U, eps)
    # канонічний старт: найнижча, потім найлівіша вершина
    s = order.index(_lowest(P, order))
    order = order[s:] + order[:s]
    logger.debug("%s: %d points -> %d hull vertices", algorithm.value, len(P), len(order))
    return HullResult(tuple(order), tuple(P), algorithm)


# ---------------- Gift wrapping (Jarvis march), O(n·h) ----------------
def _gift_wrapping(P: List[Pt], U: List[int], eps: float) -> List[int]:
    start = _lowest(P, U)
    order = [start]
    cur = start
    for _ in range(len(U)):
        cand = None
        for q in U:
            if q == cur:
                continue
            if cand is None:
                cand = q
                continue
            o = orientation(P[cur], P[cand], P[q], eps)
            # q правіше за поточного кандидата, або на тій самій прямій, але далі
            if o is CW or (o is COLLINEAR and dist2(P[cur], P[q]) > dist2(P[cur], P[cand])):
                cand = q
        if cand == start:
            return order
        order.append(cand)
        cur = cand
    # недосяжно: кожен крок іде на нову вершину оболонки, їх не більше len(U)
    raise RuntimeError("gift wrapping did not return to the start point")


# ---------------- QuickHull, O(n·h) у середньому, O(n^2) у гіршому ----------------
def _quickhull_chain(P: List[Pt], p: int, q: int, outside: List[int], eps: float) -> List[int]:
    """
    Вершини оболонки строго між p і q (CCW), outside: точки строго праворуч від p->q.
    Глибина рекурсії: від O(log n) до O(n) залежно від розподілу точок.
    """
    if not outside:
        return []
    pq = sub(P[q], P[p])

    def key(i: int) -> Tuple[float, float]:
        # рівновіддалені точки лежать на прямій, паралельній p->q; беремо найближчу до p
        # уздовж p->q, інакше середня точка такої серії стала б зайвою вершиною
        return -orient2d(P[p], P[q], P[i]), -dot(pq, sub(P[i], P[p]))

    far = outside[0]
    best = key(far)
    for i in outside[1:]:
        k = key(i)
        if k > best:  # повний збіг (дублікати): перший знайдений
            far, best = i, k
    # точки всередині трикутника (p, far, q) відкидаються
    out_pf = [i for i in outside if orientation(P[p], P[far], P[i], eps) is CW]
    out_fq = [i for i in outside if orientation(P[far], P[q], P[i], eps) is CW]
    return (_quickhull_chain(P, p, far, out_pf, eps) + [far]
            + _quickhull_chain(P, far, q, out_fq, eps))


def _quickhull(P: List[Pt], U: List[int], eps: float) -> List[int]:
    a = min(U, key=lambda i: (P[i].x, P[i].y))
    b = max(U, key=lambda i: (P[i].x, P[i].y))
    below = [i for i in U if orientation(P[a], P[b], P[i], eps) is CW]
    above = [i for i in U if orientation(P[a], P[b], P[i], eps) is CCW]
    return ([a] + _quickhull_chain(P, a, b, below, eps)
            + [b] + _quickhull_chain(P, b, a, above, eps))


# ---------------- Graham scan, O(n log n) ----------------
def _graham_scan(P: List[Pt], U: List[int], eps: float) -> List[int]:
    pivot = _lowest(P, U)
    pv = P[pivot]

    def by_angle(i: int, j: int) -> int:
        o = orientation(pv, P[i], P[j], eps)
        if o is CCW:
            return -1
        if o is CW:
            return 1
        di, dj = dist2(pv, P[i]), dist2(pv, P[j])
        return (di > dj) - (di < dj)  # ближчі першими

    rest = sorted((i for i in U if i != pivot), key=cmp_to_key(by_angle))

    # на кожному промені з півота лишаємо лише найдальшу точку
    rays: List[int] = []
    for i in rest:
        if rays and orientation(pv, P[rays[-1]], P[i], eps) is COLLINEAR:
            rays[-1] = i
        else:
            rays.append(i)

    stack = [pivot, rays[0]]
    for i in rays[1:]:
        while len(stack) >= 2 and orientation(P[stack[-2]], P[stack[-1]], P[i], eps) is not CCW:
            stack.pop()
        stack.append(i)
    return stack


# ---------------- Incremental (monotone chains), O(n log n) ----------------
def _incremental(P: List[Pt], U: List[int], eps: float) -> List[int]:
    order = sorted(U, key=lambda i: (P[i].x, P[i].y))
    lower: List[int] = []
    upper: List[int] = []
    for i in order:
        while len(lower) >= 2 and orientation(P[lower[-2]], P[lower[-1]], P[i], eps) is not CCW:
            lower.pop()
        lower.append(i)
        while len(upper) >= 2 and orientation(P[upper[-2]], P[upper[-1]], P[i], eps) is not CW:
            upper.pop()
        upper.append(i)
    # нижній ланцюг зліва направо, далі верхній справа наліво без спільних кінців
    return lower + upper[-2:0:-1]


# ---------------- Divide & conquer, O(n log n) ----------------
def _base_hull(P: List[Pt], pts: List[int], eps: float) -> List[int]:
    if len(pts) < 3:
        return list(pts)
    a, b, c = pts
    o = orientation(P[a], P[b], P[c], eps)
    if o is CCW:
        return [a, b, c]
    if o is CW:
        return [a, c, b]
    return [a, c]  # колінеарні: крайні в лексикографічному порядку


def _tangent(
    P: List[Pt], L: List[int], R: List[int], i: int, j: int,
    step_l: int, step_r: int, wrong_side: Orientation, eps: float,
) -> Tuple[int, int]:
    """
    Обертати кінці (L[i], R[j]), доки жодна сусідня вершина не лежить з «хибного» боку.
    Колінеарного кандидата беремо лише якщо він строго далі від протилежного кінця,
    тож кожен крок прогресує і цикл скінченний.
    """
    moved = True
    while moved:
        moved = False
        while len(L) > 1:
            cand = (i + step_l) % len(L)
            a, b, c = P[L[i]], P[R[j]], P[L[cand]]
            o = orientation(a, b, c, eps)
            if o is wrong_side or (o is COLLINEAR and dist2(c, b) > dist2(a, b)):
                i, moved = cand, True
            else:
                break
        while len(R) > 1:
            cand = (j + step_r) % len(R)
            a, b, c = P[L[i]], P[R[j]], P[R[cand]]
            o = orientation(a, b, c, eps)
            if o is wrong_side or (o is COLLINEAR and dist2(a, c) > dist2(a, b)):
                j, moved = cand, True
            else:
                break
    return i, j


def _merge(P: List[Pt], L: List[int], R: List[int], eps: float) -> List[int]:
    i0 = max(range(len(L)), key=lambda k: (P[L[k]].x, P[L[k]].y))
    j0 = min(range(len(R)), key=lambda k: (P[R[k]].x, P[R[k]].y))
    # нижня дотична: L крокує за годинниковою, R: проти
    lo_i, lo_j = _tangent(P, L, R, i0, j0, -1, +1, CW, eps)
    # верхня дотична: навпаки
    up_i, up_j = _tangent(P, L, R, i0, j0, +1, -1, CCW, eps)

    out: List[int] = []
    k = lo_j
    while True:
        out.append(R[k])
        if k == up_j:
            break
        k = (k + 1) % len(R)
    k = up_i
    while True:
        out.append(L[k])
        if k == lo_i:
            break
        k = (k + 1) % len(L)
    return out


def _divide(P: List[Pt], pts: List[int], eps: float) -> List[int]:
    if len(pts) <= 3:
        return _base_hull(P, pts, eps)
    mid = len(pts) // 2
    return _merge(P, _divide(P, pts[:mid], eps), _divide(P, pts[mid:], eps), eps)


def _divide_and_conquer(P: List[Pt], U: List[int], eps: float) -> List[int]:
    return _divide(P, sorted(U, key=lambda i: (P[i].x, P[i].y)), eps)


# ---------------- Публічний API ----------------
def gift_wrapping(points: Iterable, eps: float = EPS) -> HullResult:
    return _run(points, eps, HullAlgorithm.GIFT_WRAPPING, _gift_wrapping)

def quickhull(points: Iterable, eps: float = EPS) -> HullResult:
    return _run(points, eps, HullAlgorithm.QUICKHULL, _quickhull)

def graham_scan(points: Iterable, eps: float = EPS) -> HullResult:
    return _run(points, eps, HullAlgorithm.GRAHAM_SCAN, _graham_scan)

def incremental(points: Iterable, eps: float = EPS) -> HullResult:
    return _run(points, eps, HullAlgorithm.INCREMENTAL, _incremental)

def divide_and_conquer(points: Iterable, eps: float = EPS) -> HullResult:
    return _run(points, eps, HullAlgorithm.DIVIDE_AND_CONQUER, _divide_and_conquer)


ALGORITHMS: Dict[HullAlgorithm, Callable[..., HullResult]] = {
    HullAlgorithm.GIFT_WRAPPING: gift_wrapping,
    HullAlgorithm.QUICKHULL: quickhull,
    HullAlgorithm.GRAHAM_SCAN: graham_scan,
    HullAlgorithm.INCREMENTAL: incremental,
    HullAlgorithm.DIVIDE_AND_CONQUER: divide_and_conquer,
}


def convex_hull(
    points: Iterable,
    algorithm: HullAlgorithm | str = HullAlgorithm.GRAHAM_SCAN,
    eps: float = EPS,
) -> HullResult:
    """Диспетчер за тегом алгоритму; невідоме ім'я: ValueError."""
    return ALGORITHMS[HullAlgorithm(algorithm)](points, eps)
