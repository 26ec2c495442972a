# cg2d/predicates.py
from __future__ import annotations
from enum import Enum
from typing import Sequence

from .geom import Pt, EPS

class Orientation(Enum):
    """Напрям повороту трійки (a, b, c)."""
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """Подвоєна площа трикутника abc зі знаком: (b-a) x (c-a)."""
    return (b.x - a.x)*(c.y - a.y) - (b.y - a.y)*(c.x - a.x)

def orientation(a: Pt, b: Pt, c: Pt, eps: float = EPS) -> Orientation:
    """Єдине джерело правди про поворот; |det| <= eps вважаємо колінеарним."""
    det = orient2d(a, b, c)
    if det > eps:
        return Orientation.COUNTER_CLOCKWISE
    if det < -eps:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR

def left(a: Pt, b: Pt, p: Pt, eps: float = EPS) -> bool:
    """p строго ліворуч від напрямленої прямої a->b."""
    return orient2d(a, b, p) > eps

def left_on(a: Pt, b: Pt, p: Pt, eps: float = EPS) -> bool:
    """p ліворуч або на прямій a->b."""
    return orient2d(a, b, p) >= -eps

def collinear(a: Pt, b: Pt, c: Pt, eps: float = EPS) -> bool:
    return orientation(a, b, c, eps) is Orientation.COLLINEAR

def between(a: Pt, b: Pt, p: Pt, eps: float = EPS) -> bool:
    """p лежить на замкненому відрізку ab (кінці включно)."""
    if not collinear(a, b, p, eps):
        return False
    # вертикальний відрізок порівнюємо по y, решту: по x
    if a.x != b.x:
        return min(a.x, b.x) <= p.x <= max(a.x, b.x)
    if a.y != b.y:
        return min(a.y, b.y) <= p.y <= max(a.y, b.y)
    return p == a

def signed_area(points: Sequence[Pt]) -> float:
    """½·Σ(x_i·y_{i+1} − x_{i+1}·y_i): > 0: CCW, < 0: CW, 0: вироджений."""
    n = len(points)
    s = 0.0
    for i in range(n):
        p = points[i]
        q = points[(i + 1) % n]
        s += p.x*q.y - q.x*p.y
    return 0.5*s

def point_in_triangle(p: Pt, a: Pt, b: Pt, c: Pt, eps: float = EPS) -> bool:
    """
    Замкнений тест: точка на ребрі чи у вершині вважається всередині.
    Працює для обох обходів трикутника; для виродженого (колінеарного)
    трикутника зводиться до «лежить на одному з його ребер».
    """
    o1 = orientation(a, b, p, eps)
    o2 = orientation(b, c, p, eps)
    o3 = orientation(c, a, p, eps)
    if collinear(a, b, c, eps):
        return between(a, b, p, eps) or between(b, c, p, eps) or between(c, a, p, eps)
    has_cw = Orientation.CLOCKWISE in (o1, o2, o3)
    has_ccw = Orientation.COUNTER_CLOCKWISE in (o1, o2, o3)
    return not (has_cw and has_ccw)

def point_strictly_in_triangle(p: Pt, a: Pt, b: Pt, c: Pt, eps: float = EPS) -> bool:
    """Відкритий тест: усі три повороти строгі й однакові."""
    o1 = orientation(a, b, p, eps)
    if o1 is Orientation.COLLINEAR:
        return False
    return orientation(b, c, p, eps) is o1 and orientation(c, a, p, eps) is o1

def proper_intersection(p1: Pt, p2: Pt, q1: Pt, q2: Pt, eps: float = EPS) -> bool:
    """Перетин у внутрішній точці обох відрізків; будь-яка колінеарність: False."""
    o1 = orientation(p1, p2, q1, eps)
    o2 = orientation(p1, p2, q2, eps)
    o3 = orientation(q1, q2, p1, eps)
    o4 = orientation(q1, q2, p2, eps)
    if Orientation.COLLINEAR in (o1, o2, o3, o4):
        return False
    return o1 is not o2 and o3 is not o4

def segments_intersect(p1: Pt, p2: Pt, q1: Pt, q2: Pt, eps: float = EPS) -> bool:
    """
    Замкнені відрізки p1p2 та q1q2 мають спільну точку.
    Колінеарне перекриття та дотик кінцем ловить between().
    """
    if proper_intersection(p1, p2, q1, q2, eps):
        return True
    return (between(p1, p2, q1, eps) or between(p1, p2, q2, eps)
            or between(q1, q2, p1, eps) or between(q1, q2, p2, eps))

def point_in_polygon(p: Pt, vertices: Sequence[Pt], eps: float = EPS) -> bool:
    """
    Замкнений тест належності многокутнику (межа: всередині).
    Спершу межа через between, далі парність перетинів горизонтального променя.
    """
    n = len(vertices)
    for i in range(n):
        if between(vertices[i], vertices[(i + 1) % n], p, eps):
            return True
    inside = False
    for i in range(n):
        a = vertices[i]
        b = vertices[(i + 1) % n]
        if (a.y > p.y) != (b.y > p.y):
            x_at = a.x + (p.y - a.y)*(b.x - a.x)/(b.y - a.y)
            if x_at > p.x:
                inside = not inside
    return inside
