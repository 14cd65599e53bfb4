#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search (not optimal, but useful as a baseline).
- 4-connected grid, LIFO frontier.
- Passable neighbors are Fisher-Yates shuffled before pushing, using the
  caller's numpy Generator (or seed), so runs differ unless the seed is fixed.
- Returns the first path found (often long and twisty).
"""

from __future__ import annotations
from typing import List, Optional

import numpy as np

from ..grids.grid import Grid
from ..grids.tile import Tile, TileLike
from .engine import SearchEngine


def shuffle_tiles(tiles: List[Tile], rng: np.random.Generator) -> List[Tile]:
    """In-place Fisher-Yates shuffle; returns `tiles`."""
    count = len(tiles)
    for index in range(count - 1):
        j = int(rng.integers(index, count))
        tiles[index], tiles[j] = tiles[j], tiles[index]
    return tiles


class DepthFirstSearch(SearchEngine):
    name = "dfs"

    def __init__(self, grid: Grid, start: TileLike, goal: Optional[TileLike] = None, rng=None):
        self.rng = np.random.default_rng(rng)
        super().__init__(grid, start, goal)

    def _make_frontier(self):
        return []

    def _push(self, tile: Tile) -> None:
        self._frontier.append(tile)

    def _pop(self) -> Optional[Tile]:
        return self._frontier.pop() if self._frontier else None

    def _order_neighbors(self, tiles: List[Tile]) -> List[Tile]:
        return shuffle_tiles(tiles, self.rng)
