# -*- coding: utf-8 -*-
"""
Path reconstruction from a predecessor map.

The map stores tile -> predecessor tile, with None marking the root (start).
"""

from __future__ import annotations
from typing import List, Mapping, Optional, Sequence

from ..errors import UnreachableError
from ..grids.tile import Tile


def reconstruct_path(goal: Tile, predecessors: Mapping[Tile, Optional[Tile]]) -> List[Tile]:
    """Walk predecessor links back from `goal`; returns start..goal inclusive."""
    if goal not in predecessors:
        raise UnreachableError(goal)
    path: List[Tile] = []
    current: Optional[Tile] = goal
    while current is not None:
        path.append(current)
        if len(path) > len(predecessors):
            raise ValueError(f"Predecessor map has a cycle through {current}")
        current = predecessors[current]
    path.reverse()
    return path


def path_cost(path: Sequence[Tile]) -> float:
    """Sum of the weights of every tile entered after the first."""
    return float(sum(t.weight for t in path[1:]))


def interior(path: Sequence[Tile]) -> List[Tile]:
    """The path without its endpoints (what gets painted between start and goal)."""
    return list(path[1:-1])
