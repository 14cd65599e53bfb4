# -*- coding: utf-8 -*-
"""
Error kinds shared by the grid model, the containers and the search engine.

- OutOfRangeError          : bad grid index (programmer error)
- EmptyCollectionError     : pop/peek on an empty heap or queue (programmer error)
- UnreachableError         : the goal cannot be reached from the start (expected outcome)
- InvalidConstructionError : bad constructor arguments (negative capacity, missing comparator, ...)
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by tilesearch."""


class OutOfRangeError(SearchError, IndexError):
    def __init__(self, row: int, column: int, rows: int, columns: int):
        self.row = row
        self.column = column
        super().__init__(
            f"Tile ({row}, {column}) is outside a {rows}x{columns} grid"
        )


class EmptyCollectionError(SearchError, IndexError):
    pass


class UnreachableError(SearchError):
    def __init__(self, goal=None, message: str = None):
        self.goal = goal
        if message is None:
            message = "Goal is unreachable" if goal is None else f"Goal {goal} is unreachable"
        super().__init__(message)


class InvalidConstructionError(SearchError, ValueError):
    pass
