#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search (unweighted shortest hops).
- 4-connected grid, FIFO frontier.
- A tile is marked visited when discovered, so it is queued at most once.
- With goal=None it is a plain traversal of the start's component.
"""

from __future__ import annotations
from collections import deque
from typing import Optional

from ..grids.tile import Tile
from .engine import SearchEngine


class BreadthFirstSearch(SearchEngine):
    name = "bfs"

    def _make_frontier(self):
        return deque()

    def _push(self, tile: Tile) -> None:
        self._frontier.append(tile)

    def _pop(self) -> Optional[Tile]:
        return self._frontier.popleft() if self._frontier else None
