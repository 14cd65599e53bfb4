# -*- coding: utf-8 -*-
"""
Tile value model.

A Tile is identified purely by its Position: two Tile handles at the same
(row, column) are the same node for dict/set purposes, whatever their weight
or passability.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union, Tuple

from ..errors import InvalidConstructionError

DEFAULT_WEIGHT = 1.0


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate (row 0 at the top, column 0 at the left)."""
    row: int
    column: int

    def __post_init__(self):
        if self.row < 0:
            raise InvalidConstructionError(f"The row index cannot be less than zero: {self.row}")
        if self.column < 0:
            raise InvalidConstructionError(f"The column index cannot be less than zero: {self.column}")

    def __iter__(self):
        yield self.row
        yield self.column

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


class Tile:
    __slots__ = ("_position", "_weight", "passable")

    def __init__(self, row: int, column: int, weight: float = DEFAULT_WEIGHT, passable: bool = True):
        self._position = Position(int(row), int(column))
        if not _is_positive(weight):
            raise InvalidConstructionError(f"The tile weight must be a positive number, got {weight!r}")
        self._weight = float(weight)
        self.passable = bool(passable)

    @property
    def position(self) -> Position:
        return self._position

    @property
    def row(self) -> int:
        return self._position.row

    @property
    def column(self) -> int:
        return self._position.column

    @property
    def weight(self) -> float:
        """Cost of entering this tile."""
        return self._weight

    @weight.setter
    def weight(self, value: float):
        if not _is_positive(value):
            raise InvalidConstructionError(f"The tile weight must be a positive number, got {value!r}")
        self._weight = float(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._position == other._position

    def __hash__(self) -> int:
        return hash(self._position)

    def __repr__(self) -> str:
        return str(self._position)


TileLike = Union[Tile, Position, Tuple[int, int]]


def _is_positive(value) -> bool:
    try:
        return float(value) > 0.0
    except (TypeError, ValueError):
        return False
