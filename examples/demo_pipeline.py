# examples/demo_pipeline.py
import logging
import random

from cg2d.pipeline import cross_validate

if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)

    rng = random.Random(2024)
    cloud = [(rng.randint(0, 20), rng.randint(0, 20)) for _ in range(60)]

    report = cross_validate(cloud, backend="scipy")  # або "internal"
    print("Points:", report["n"])
    print("Hull (graham_scan):", report["hulls"]["graham_scan"])
    print("All agree:", report["vertex_sets_agree"], report["areas_agree"])
    print("Oracle agrees:", report["oracle_agrees"])
    print("Qhull agrees:", report["reference_agrees"])
