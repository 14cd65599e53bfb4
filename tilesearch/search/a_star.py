#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* search on tile weights.
- f(tile) = cost[tile] + heuristic(tile, goal).
- Heuristic: Manhattan by default, Euclidean or any callable on request.
  Both are admissible while every weight is >= 1; on lighter grids pass
  heuristics.scaled(h, grid.min_weight).

Returns the same optimal cost as Dijkstra with an admissible, consistent
heuristic, usually after far fewer expansions.
"""

from __future__ import annotations

from ..grids.tile import Tile
from .engine import WeightedSearch


class AStarSearch(WeightedSearch):
    name = "a_star"
    requires_goal = True

    def priority(self, tile: Tile) -> float:
        return self._costs[tile] + self.heuristic(tile, self.goal)
