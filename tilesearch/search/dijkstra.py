#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Uniform-Cost Search / Dijkstra on tile weights (A* with h=0).
- Cost of a move is the weight of the tile being entered.
- Optimal for any positive weights; ties leave the frontier in FIFO order.
- goal=None expands the whole component and leaves the full cost map.
"""

from __future__ import annotations

from ..grids.tile import Tile
from .engine import WeightedSearch


class UniformCostSearch(WeightedSearch):
    name = "dijkstra"

    def priority(self, tile: Tile) -> float:
        return self._costs[tile]

