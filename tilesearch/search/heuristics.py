# -*- coding: utf-8 -*-
"""
Distance estimates for Best-First and A*.

Both are admissible on a 4-connected grid as long as every tile weight is
at least 1; use `scaled(h, grid.min_weight)` when lighter tiles exist.
"""

from __future__ import annotations
import math
from typing import Callable, Dict

Heuristic = Callable[[object, object], float]


def _rc(t):
    if hasattr(t, "row"):
        return t.row, t.column
    return t[0], t[1]


def manhattan(a, b) -> float:
    (ar, ac), (br, bc) = _rc(a), _rc(b)
    return float(abs(ar - br) + abs(ac - bc))


def euclidean(a, b) -> float:
    (ar, ac), (br, bc) = _rc(a), _rc(b)
    return math.hypot(ar - br, ac - bc)


def scaled(heuristic: Heuristic, factor: float) -> Heuristic:
    def h(a, b) -> float:
        return factor * heuristic(a, b)
    h.__name__ = f"{getattr(heuristic, '__name__', 'heuristic')}_x{factor:g}"
    return h


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
}


def get_heuristic(name: str) -> Heuristic:
    name = name.strip().lower()
    if name not in HEURISTICS:
        raise ValueError(f"Unknown heuristic '{name}'. Available: {sorted(HEURISTICS)}")
    return HEURISTICS[name]
