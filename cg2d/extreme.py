# cg2d/extreme.py
"""
Brute-force оракул для перевірки швидких алгоритмів оболонки.
Навмисно залишається з «підручниковою» складністю: O(n^3) для крайніх ребер і точок,
O(n^4) для внутрішніх точок. Лише для малих/тестових входів.
"""
from __future__ import annotations
from itertools import combinations
from typing import Iterable, List, Set, Tuple

from .errors import InvalidInputError
from .geom import Pt, EPS, as_points, first_occurrences
from .predicates import Orientation, between, orientation, point_in_triangle

Edge = Tuple[int, int]


def _prepare(points: Iterable) -> List[Pt]:
    P = as_points(points)
    if len(P) < 3:
        raise InvalidInputError(f"Need at least 3 points, got {len(P)}")
    return P


def _is_extreme_edge(P: List[Pt], U: List[int], i: int, j: int, eps: float) -> bool:
    a, b = P[i], P[j]
    for k in U:
        if k == i or k == j:
            continue
        o = orientation(a, b, P[k], eps)
        if o is Orientation.CLOCKWISE:
            return False
        # колінеарна точка поза відрізком: ребро не покриває всю межу
        if o is Orientation.COLLINEAR and not between(a, b, P[k], eps):
            return False
    return True


def extreme_edges(points: Iterable, eps: float = EPS) -> List[Edge]:
    """
    Напрямлені ребра оболонки (i, j) у CCW-сенсі: усі інші точки ліворуч або на прямій i->j,
    а колінеарні лежать на замкненому відрізку. Дублікати представлені першим індексом.
    Для повністю колінеарного входу повертає обидва напрями єдиного відрізка.
    """
    P = _prepare(points)
    U = first_occurrences(P)
    edges: List[Edge] = []
    for i in U:
        for j in U:
            if i != j and _is_extreme_edge(P, U, i, j, eps):
                edges.append((i, j))
    return edges


def extreme_points(points: Iterable, eps: float = EPS) -> Set[int]:
    """Невпорядкована множина індексів вершин оболонки (кінці крайніх ребер)."""
    P = _prepare(points)
    edges = extreme_edges(P, eps)
    if not edges:
        # усі точки збігаються
        return {first_occurrences(P)[0]}
    out: Set[int] = set()
    for i, j in edges:
        out.add(i); out.add(j)
    return out


def interior_points(points: Iterable, eps: float = EPS) -> Set[int]:
    """
    Точки строго всередині оболонки.
    Точка внутрішня, якщо її містить (замкнений тест) трикутник з трьох інших точок
    і вона не лежить на межі оболонки. Середини ребер оболонки та копії
    вершин оболонки не є ні крайніми, ні внутрішніми.
    """
    P = _prepare(points)
    boundary = extreme_edges(P, eps)
    if not boundary:
        return set()  # усі точки збігаються
    n = len(P)
    out: Set[int] = set()
    for p in range(n):
        others = [i for i in range(n) if i != p]
        contained = any(
            point_in_triangle(P[p], P[i], P[j], P[k], eps)
            for i, j, k in combinations(others, 3)
        )
        if not contained:
            continue
        if any(between(P[i], P[j], P[p], eps) for i, j in boundary):
            continue
        out.add(p)
    return out


def extreme_points_from_interior_points(points: Iterable, eps: float = EPS) -> Set[int]:
    """
    Те саме, що extreme_points, але без крайніх ребер, O(n^4).
    Представник p не крайній, якщо лежить на відрізку між двома іншими різними точками
    (середина ребра оболонки) або в замкненому трикутнику з трьох інших.
    """
    P = _prepare(points)
    U = first_occurrences(P)
    out: Set[int] = set()
    for p in U:
        others = [i for i in U if i != p]
        if any(between(P[i], P[j], P[p], eps) for i, j in combinations(others, 2)):
            continue
        if any(point_in_triangle(P[p], P[i], P[j], P[k], eps)
               for i, j, k in combinations(others, 3)):
            continue
        out.add(p)
    return out


def interior_points_from_extreme_edges(points: Iterable, eps: float = EPS) -> Set[int]:
    """Те саме, що interior_points, за O(n^3): точки, що не лежать на жодному крайньому ребрі."""
    P = _prepare(points)
    boundary = extreme_edges(P, eps)
    if not boundary:
        return set()
    return {p for p in range(len(P))
            if not any(between(P[i], P[j], P[p], eps) for i, j in boundary)}
