#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy Best-First Search.
- Frontier ordered by heuristic(tile, goal) alone.
- Costs and predecessors are still relaxed (for display and the final path
  cost) but never influence the order, so the route is not guaranteed optimal.
- An expanded tile is never reopened: a cheaper route found to it later is
  ignored, so the reported cost is that of the route it was expanded through.
"""

from __future__ import annotations

from ..grids.tile import Tile
from .engine import WeightedSearch


class GreedyBestFirstSearch(WeightedSearch):
    name = "greedy_best_first"
    requires_goal = True

    def priority(self, tile: Tile) -> float:
        return self.heuristic(tile, self.goal)
