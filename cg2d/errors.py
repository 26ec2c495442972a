# cg2d/errors.py
"""Таксономія помилок ядра. Усе наслідує ValueError, як і перевірки вхідних даних у hull."""


class GeometryError(ValueError):
    """Корінь ієрархії: некоректні або непридатні геометричні дані."""


class InvalidInputError(GeometryError):
    """Замало точок/вершин, збіг сусідніх вершин, нескінченні координати."""


class DegenerateGeometryError(GeometryError):
    """Вироджена (нульової площі) геометрія там, де алгоритм її не допускає."""


class NonSimplePolygonError(GeometryError):
    """Ear clipping не знайшов вуха: многокутник не простий."""
