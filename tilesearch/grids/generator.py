#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random tile-grid scenarios for exercising the search algorithms.

Key design goals:
- Scattered impassable tiles: by default one fifth of the tiles are blocked,
  sampled without replacement.
- Optional per-tile weights drawn from a range, plus rectangular weighted
  regions stamped on afterwards.
- Controllable outcome: "reachable" re-samples until start and goal share a
  4-connected component; "unreachable" walls the goal in.
- Reproducibility: explicit np.random.Generator (or seed).

Dependencies:
    numpy
    scipy.ndimage   (for connected-component labeling)

Usage (quick smoke test):
    python3 -m tilesearch.grids.generator
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
from scipy.ndimage import label as cc_label

from ..errors import OutOfRangeError
from .grid import Grid
from .tile import Tile

logger = logging.getLogger(__name__)

# 4-connected structuring element for labeling (no diagonal adjacency)
STRUCTURE_4 = np.array([[0, 1, 0],
                        [1, 1, 1],
                        [0, 1, 0]], dtype=np.uint8)


# ------------------------------- Data classes ------------------------------- #

@dataclass
class GridScenario:
    """A grid plus the start/goal pair it was generated for."""
    grid: Grid
    start: Tile
    goal: Tile
    settings: Dict              # record of generator settings used (for provenance)
    rng: np.random.Generator

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape


# ------------------------------ Utility helpers ----------------------------- #

def connected_components(blocked: np.ndarray) -> np.ndarray:
    """Label 4-connected components of free tiles (0 = blocked)."""
    labels, _ = cc_label(~np.asarray(blocked, dtype=bool), structure=STRUCTURE_4)
    return labels


def is_reachable(blocked: np.ndarray, start: Tuple[int, int], goal: Tuple[int, int]) -> bool:
    """True if start and goal are free and lie in the same 4-connected component."""
    labels = connected_components(blocked)
    a = labels[tuple(start)]
    return bool(a) and a == labels[tuple(goal)]


def add_weighted_region(grid: Grid, top_left: Tuple[int, int], shape: Tuple[int, int],
                        weight: float):
    """Stamp a rectangle of `weight` onto the grid (clipped to bounds)."""
    return grid.set_region(top_left, shape, weight=weight)


def _sample_weights(rng: np.random.Generator, H: int, W: int,
                    weight_range: Tuple[float, float]) -> np.ndarray:
    lo, hi = weight_range
    if lo <= 0 or hi < lo:
        raise ValueError(f"Bad weight_range {weight_range}; need 0 < low <= high")
    if lo == hi:
        return np.full((H, W), float(lo))
    if float(lo).is_integer() and float(hi).is_integer():
        return rng.integers(int(lo), int(hi) + 1, size=(H, W)).astype(float)
    return rng.uniform(lo, hi, size=(H, W))


def _sample_blocked(rng: np.random.Generator, H: int, W: int, fraction: float,
                    keep_free) -> np.ndarray:
    blocked = np.zeros(H * W, dtype=bool)
    n_blocked = int(round(float(np.clip(fraction, 0.0, 1.0)) * H * W))
    if n_blocked:
        blocked[rng.choice(H * W, size=n_blocked, replace=False)] = True
    blocked = blocked.reshape(H, W)
    for rc in keep_free:
        blocked[rc] = False
    return blocked


# ------------------------------- Core generator ----------------------------- #

def generate_grid(
    rows: int = 20,
    columns: int = 20,
    *,
    blocked_fraction: float = 0.2,
    start: Tuple[int, int] = (0, 0),
    goal: Optional[Tuple[int, int]] = None,
    weight_range: Tuple[float, float] = (1.0, 1.0),
    ensure_status: str = "any",          # "any" | "reachable" | "unreachable"
    rng=None,
    max_tries: int = 100,
) -> GridScenario:
    """
    Create a random grid scenario.

    ensure_status:
        "any"         : no guarantee about path existence.
        "reachable"   : re-sample the blocked tiles until a path exists.
        "unreachable" : block every neighbor of the goal if a path exists.

    Returns a GridScenario with fully populated fields.
    """
    if ensure_status not in ("any", "reachable", "unreachable"):
        raise ValueError(f"Unknown ensure_status '{ensure_status}'")
    if goal is None:
        goal = (rows - 1, columns - 1)
    start = tuple(int(v) for v in start)
    goal = tuple(int(v) for v in goal)
    for r, c in (start, goal):
        if not (0 <= r < rows and 0 <= c < columns):
            raise OutOfRangeError(r, c, rows, columns)

    rng = np.random.default_rng(rng)
    settings = dict(
        rows=rows, columns=columns, blocked_fraction=blocked_fraction,
        start=start, goal=goal, weight_range=tuple(weight_range),
        ensure_status=ensure_status, max_tries=max_tries,
        seed=int(rng.integers(0, 2**31 - 1)),
    )

    weights = _sample_weights(rng, rows, columns, weight_range)
    blocked = _sample_blocked(rng, rows, columns, blocked_fraction, (start, goal))

    if ensure_status == "reachable":
        tries = 1
        while not is_reachable(blocked, start, goal):
            if tries >= max_tries:
                raise RuntimeError(
                    f"No reachable {rows}x{columns} layout after {max_tries} tries "
                    f"(blocked_fraction={blocked_fraction})"
                )
            blocked = _sample_blocked(rng, rows, columns, blocked_fraction, (start, goal))
            tries += 1
        logger.debug("reachable layout found after %d tries", tries)

    grid = Grid(rows, columns, weights=weights, blocked=blocked)
    start_tile, goal_tile = grid.resolve(start), grid.resolve(goal)

    if ensure_status == "unreachable":
        if start_tile == goal_tile or start_tile in grid.neighbors(goal_tile):
            raise ValueError(f"Cannot wall off goal {goal} from an adjacent start {start}")
        if is_reachable(blocked, start, goal):
            grid.enclose(goal_tile)

    return GridScenario(grid=grid, start=start_tile, goal=goal_tile, settings=settings, rng=rng)


if __name__ == "__main__":
    sc = generate_grid(12, 16, ensure_status="reachable", rng=0)
    blocked, _ = sc.grid.to_arrays()
    for r in range(sc.grid.rows):
        print("".join("#" if blocked[r, c] else "." for c in range(sc.grid.columns)))
    print("start", sc.start, "goal", sc.goal, "blocked", int(blocked.sum()))
