# examples/demo_hull.py
import logging
import random

from cg2d.hull import convex_hull
from cg2d.pipeline import hull_table

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    rng = random.Random(7)
    raw = [(rng.uniform(0, 10), rng.uniform(0, 10)) for _ in range(40)]
    raw += [(0, 0), (10, 0), (10, 10), (0, 10), (5, 0), (0, 0)]  # кути, середина ребра, дублікат

    for name, indices in hull_table(raw).items():
        print(f"{name:>20}: {indices}")

    hull = convex_hull(raw)
    print(f"area={hull.area:.3f}")
    print("VALIDATION:", hull.validate())
