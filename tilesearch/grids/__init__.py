# -*- coding: utf-8 -*-
"""
Grid model and scenario generation.
Exposes:
- Position, Tile
- Grid
- GridScenario, generate_grid(...), add_weighted_region(...), is_reachable(...)
"""

from __future__ import annotations

from .tile import Position, Tile, DEFAULT_WEIGHT
from .grid import Grid, DELTAS_4
from .generator import GridScenario, generate_grid, add_weighted_region, is_reachable

__all__ = [
    "Position",
    "Tile",
    "DEFAULT_WEIGHT",
    "Grid",
    "DELTAS_4",
    "GridScenario",
    "generate_grid",
    "add_weighted_region",
    "is_reachable",
]
