#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Metrics for comparing search runs, plus reference oracles.

Assumptions
-----------
- Grid: tilesearch.grids.Grid (4-connected, weight = cost of entering a tile)
- Search API: engine.run() -> SearchResult

What's inside
-------------
- path_metrics() for hop count and weighted cost of a route
- hop_distances(): level-by-level breadth enumeration, independent of the
  engine, used to validate BFS
- jaccard() for overlap of explored tile sets
- result_row(): flat dict for CSV output
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import numpy as np

from ..grids.grid import DELTAS_4, Grid
from ..grids.tile import Tile, TileLike
from ..search.events import SearchResult
from ..search.path import path_cost


def path_metrics(path: Optional[Sequence[Tile]]) -> Tuple[int, float]:
    """Compute (hops, weighted cost) from a tile path."""
    if not path or len(path) < 2:
        return 0, 0.0
    return len(path) - 1, path_cost(path)


def is_valid_path(grid: Grid, path: Sequence[Tile]) -> bool:
    """Consecutive tiles are 4-adjacent and every entered tile is passable."""
    if not path:
        return False
    for a, b in zip(path[:-1], path[1:]):
        if abs(a.row - b.row) + abs(a.column - b.column) != 1:
            return False
        if not grid.resolve(b).passable:
            return False
    return True


def hop_distances(grid: Grid, start: TileLike) -> np.ndarray:
    """
    Exhaustive breadth-level enumeration of hop distances from `start`.

    Returns an int array of shape grid.shape with -1 for unreachable tiles.
    The start is always at distance 0, whatever its passability.
    """
    blocked, _ = grid.to_arrays()
    H, W = blocked.shape
    s = grid.resolve(start)
    dist = np.full((H, W), -1, dtype=np.int64)
    dist[s.row, s.column] = 0

    level = [(s.row, s.column)]
    d = 0
    while level:
        d += 1
        nxt = []
        for r, c in level:
            for dr, dc in DELTAS_4:
                nr, nc = r + dr, c + dc
                if 0 <= nr < H and 0 <= nc < W and dist[nr, nc] < 0 and not blocked[nr, nc]:
                    dist[nr, nc] = d
                    nxt.append((nr, nc))
        level = nxt
    return dist


def jaccard(a: Iterable[Tile], b: Iterable[Tile]) -> float:
    A, B = set(a), set(b)
    if not A and not B:
        return 1.0
    return len(A & B) / len(A | B)


def result_row(result: SearchResult, **extra: Any) -> Dict[str, Any]:
    hops, cost = path_metrics(result.path)
    row = {
        "algorithm": result.algorithm,
        "success": int(result.success),
        "hops": hops,
        "cost": cost,
        "expanded": result.expanded,
        "discovered": result.discovered,
        "steps": result.steps,
        "time_s": result.elapsed,
    }
    row.update(extra)
    return row
