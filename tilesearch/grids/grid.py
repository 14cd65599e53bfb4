# -*- coding: utf-8 -*-
"""
Fixed-size 2D container of Tiles.

Grid convention (same as the planners' occupancy grids):
  blocked[r, c] == True  means the tile is impassable,
  weights[r, c]          is the cost of entering tile (r, c).

Neighbors are 4-connected and always reported in the order
up, right, down, left; passability is NOT filtered here (callers filter).
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..errors import InvalidConstructionError, OutOfRangeError
from .tile import DEFAULT_WEIGHT, Position, Tile, TileLike

# (dr, dc): up, right, down, left
DELTAS_4 = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Grid:
    def __init__(self, rows: int, columns: int, weights=None, blocked=None):
        if int(rows) <= 0 or int(columns) <= 0:
            raise InvalidConstructionError(f"Grid size must be positive, got {rows}x{columns}")
        self._rows = int(rows)
        self._columns = int(columns)

        W = self._as_array(weights, "weights", float, DEFAULT_WEIGHT)
        B = self._as_array(blocked, "blocked", bool, False)

        self._tiles: List[List[Tile]] = [
            [Tile(r, c, weight=W[r, c], passable=not B[r, c]) for c in range(self._columns)]
            for r in range(self._rows)
        ]

    def _as_array(self, values, name: str, dtype, fill) -> np.ndarray:
        if values is None:
            return np.full((self._rows, self._columns), fill, dtype=dtype)
        arr = np.asarray(values, dtype=dtype)
        if arr.shape != (self._rows, self._columns):
            raise InvalidConstructionError(
                f"'{name}' has shape {arr.shape}, expected {(self._rows, self._columns)}"
            )
        return arr

    @classmethod
    def from_arrays(cls, blocked, weights=None) -> "Grid":
        blocked = np.asarray(blocked, dtype=bool)
        if blocked.ndim != 2:
            raise InvalidConstructionError(f"'blocked' must be 2D, got shape {blocked.shape}")
        H, W = blocked.shape
        return cls(H, W, weights=weights, blocked=blocked)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Snapshot as (blocked bool array, weights float array)."""
        blocked = np.zeros(self.shape, dtype=bool)
        weights = np.ones(self.shape, dtype=float)
        for tile in self:
            blocked[tile.row, tile.column] = not tile.passable
            weights[tile.row, tile.column] = tile.weight
        return blocked, weights

    # ------------------------------- shape ---------------------------------- #

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._columns)

    def __len__(self) -> int:
        return self._rows * self._columns

    def in_bounds(self, row: int, column: int) -> bool:
        return (0 <= row < self._rows) and (0 <= column < self._columns)

    # ------------------------------- lookup --------------------------------- #

    def tile(self, row: int, column: int) -> Tile:
        if not self.in_bounds(row, column):
            raise OutOfRangeError(row, column, self._rows, self._columns)
        return self._tiles[row][column]

    def __getitem__(self, index: Tuple[int, int]) -> Tile:
        row, column = index
        return self.tile(row, column)

    def resolve(self, tile: TileLike) -> Tile:
        """Return this grid's Tile for a Tile, Position or (row, col) pair."""
        if isinstance(tile, Tile):
            row, column = tile.row, tile.column
        else:
            row, column = tile
        return self.tile(int(row), int(column))

    def __iter__(self) -> Iterator[Tile]:
        for row in self._tiles:
            yield from row

    def passable_tiles(self) -> List[Tile]:
        return [t for t in self if t.passable]

    def neighbors(self, tile: TileLike) -> List[Tile]:
        tile = self.resolve(tile)
        out: List[Tile] = []
        for dr, dc in DELTAS_4:
            nr, nc = tile.row + dr, tile.column + dc
            if self.in_bounds(nr, nc):
                out.append(self._tiles[nr][nc])
        return out

    @property
    def min_weight(self) -> float:
        return min(t.weight for t in self)

    # ------------------------------ mutation -------------------------------- #
    # Only between searches; a run in progress must not see these.

    def set_region(self, top_left: Tuple[int, int], shape: Tuple[int, int],
                   weight: Optional[float] = None, passable: Optional[bool] = None) -> List[Tile]:
        """Set weight and/or passability on a rectangle (clipped to the grid)."""
        r0, c0 = top_left
        h, w = shape
        changed: List[Tile] = []
        for r in range(max(0, r0), min(self._rows, r0 + h)):
            for c in range(max(0, c0), min(self._columns, c0 + w)):
                tile = self._tiles[r][c]
                if weight is not None:
                    tile.weight = weight
                if passable is not None:
                    tile.passable = bool(passable)
                changed.append(tile)
        return changed

    def enclose(self, tile: TileLike) -> List[Tile]:
        """Mark every in-bounds neighbor of `tile` impassable."""
        walls = self.neighbors(tile)
        for t in walls:
            t.passable = False
        return walls

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, columns={self._columns})"
