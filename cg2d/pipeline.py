# cg2d/pipeline.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from .geom import EPS, Pt, as_points, first_occurrences
from .extreme import extreme_points
from .hull import ALGORITHMS, HullResult

logger = logging.getLogger(__name__)


def _scipy_hull(pts: List[Pt]) -> tuple[List[int], float]:
    """Еталон Qhull через SciPy: (індекси вершин, площа). Дублікати зводимо до першого входження."""
    try:
        import numpy as np
        from scipy.spatial import ConvexHull
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або використай backend='internal'."
        ) from e

    U = first_occurrences(pts)
    arr = np.array([(pts[i].x, pts[i].y) for i in U], dtype=float)
    qh = ConvexHull(arr)
    # у 2D ConvexHull.volume: це площа
    return sorted(U[int(k)] for k in qh.vertices), float(qh.volume)


def cross_validate(
    points: Iterable,
    eps: float = EPS,
    backend: str = "internal",
    oracle: bool = True,
) -> Dict[str, object]:
    """
    Повна перевірка на одному вході:
      - запускає всі п'ять алгоритмів оболонки;
      - порівнює множини вершин (невпорядковано) і площі;
      - за бажання звіряє з brute-force оракулом extreme_points (O(n^3));
      - backend="scipy" додатково звіряє з Qhull (пропускається для виродженої оболонки).

    Повертає словник-звіт; *_agree == True означає збіг.
    """
    if backend.lower() not in ("internal", "scipy"):
        raise ValueError(f"Невідомий backend: {backend}")

    pts: List[Pt] = as_points(points)
    results: Dict[str, HullResult] = {algo.value: fn(pts, eps) for algo, fn in ALGORITHMS.items()}

    sets = {name: r.vertex_set for name, r in results.items()}
    areas = {name: r.area for name, r in results.items()}
    first = next(iter(results.values()))
    sets_agree = all(s == first.vertex_set for s in sets.values())
    tol = max(eps, 1e-9) * max(1.0, first.area)
    areas_agree = all(abs(a - first.area) <= tol for a in areas.values())

    report: Dict[str, object] = {
        "n": len(pts),
        "hulls": {name: list(r.indices) for name, r in results.items()},
        "areas": areas,
        "vertex_sets_agree": sets_agree,
        "areas_agree": areas_agree,
        "oracle": None,
        "oracle_agrees": None,
        "reference": None,
        "reference_agrees": None,
    }

    if oracle:
        ext = extreme_points(pts, eps)
        report["oracle"] = sorted(ext)
        report["oracle_agrees"] = ext == set(first.vertex_set)

    if backend.lower() == "scipy":
        if not first.is_degenerate:
            ref, ref_area = _scipy_hull(pts)
            report["reference"] = ref
            report["reference_agrees"] = (
                set(ref) == set(first.vertex_set) and abs(ref_area - first.area) <= tol
            )

    for key in ("vertex_sets_agree", "areas_agree", "oracle_agrees", "reference_agrees"):
        if report[key] is False:
            logger.warning("cross-validation mismatch (%s) on %d points", key, len(pts))
    return report


def hull_table(points: Iterable, eps: float = EPS) -> Dict[str, List[int]]:
    """Коротка таблиця «алгоритм -> індекси вершин» для друку в демо."""
    pts = as_points(points)
    return {algo.value: list(fn(pts, eps).indices) for algo, fn in ALGORITHMS.items()}
