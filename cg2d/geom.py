# cg2d/geom.py
from __future__ import annotations
from dataclasses import dataclass
from math import cos, isfinite, sin
from typing import Iterable, List, Sequence, Tuple

from .errors import InvalidInputError

EPS = 1e-10  # обережний епс для перевірок

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def dist2(a: Pt, b: Pt) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx*dx + dy*dy

def rotate(p: Pt, radians: float, about: Pt = Pt(0.0, 0.0)) -> Pt:
    """Поворот точки p на кут radians (проти годинникової) навколо about."""
    c, s = cos(radians), sin(radians)
    dx = p.x - about.x
    dy = p.y - about.y
    return Pt(dx*c - dy*s + about.x, dx*s + dy*c + about.y)

def translate(p: Pt, dx: float, dy: float) -> Pt:
    return Pt(p.x + dx, p.y + dy)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def as_points(raw: Iterable) -> List[Pt]:
    """
    Привести вхід до списку Pt.
    Приймає Pt, пари (x, y), списки [x, y] або numpy-масив форми (n, 2).
    Порядок зберігається: індекс у списку: це «i-та вхідна точка».
    """
    out: List[Pt] = []
    for item in raw:
        if isinstance(item, Pt):
            p = item
        else:
            x, y = item
            p = Pt(float(x), float(y))
        if not (isfinite(p.x) and isfinite(p.y)):
            raise InvalidInputError(f"non-finite coordinate at index {len(out)}: {p}")
        out.append(p)
    return out

def first_occurrences(points: Sequence[Pt]) -> List[int]:
    """
    Індекси перших входжень кожної різної координати (точний збіг, без епсилону).
    Дублікати далі представлені найменшим індексом.
    """
    seen: set[Tuple[float, float]] = set()
    out: List[int] = []
    for i, p in enumerate(points):
        key = (p.x, p.y)
        if key not in seen:
            seen.add(key)
            out.append(i)
    return out
