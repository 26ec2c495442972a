import random
from math import cos, pi, sin

import pytest

from cg2d.polygon import Polygon


@pytest.fixture
def square():
    return [(0, 0), (4, 0), (4, 4), (0, 4)]


@pytest.fixture
def triangle_with_interior():
    return [(0, 0), (2, 0), (1, 2), (1, 1)]


@pytest.fixture
def collinear_five():
    return [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]


@pytest.fixture
def hexagon():
    return Polygon.from_coords([(cos(k*pi/3), sin(k*pi/3)) for k in range(6)])


@pytest.fixture
def comb():
    return Polygon.from_coords([
        (0, 0), (6, 0), (6, 4), (5, 4), (5, 1), (4, 1), (4, 4),
        (3, 4), (3, 1), (2, 1), (2, 4), (1, 4), (1, 1), (0, 1),
    ])


@pytest.fixture
def arrow():
    # рефлексна вершина (2, 1) з індексом 3
    return Polygon.from_coords([(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)])


@pytest.fixture
def random_cloud():
    """Фабрика випадкових хмар: grid=True дає цілі координати (багато колінеарних і дублікатів)."""
    def make(seed, n=30, grid=False):
        rng = random.Random(seed)
        if grid:
            return [(rng.randint(0, 6), rng.randint(0, 6)) for _ in range(n)]
        return [(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(n)]
    return make


@pytest.fixture
def random_star_polygon():
    """Фабрика зіркоподібних (отже, простих) многокутників навколо початку координат."""
    def make(seed, n=20):
        rng = random.Random(seed)
        angles = sorted(rng.uniform(0, 2*pi) for _ in range(n))
        return Polygon.from_coords(
            [(r*cos(a), r*sin(a)) for a, r in ((a, rng.uniform(1, 10)) for a in angles)]
        )
    return make
