# -*- coding: utf-8 -*-
"""
Values the engine hands to its caller: per-step events, step results and the
final search result. The rendering layer only ever sees these.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..errors import UnreachableError
from ..grids.tile import Tile


class EventKind(str, Enum):
    TILE_VISITED = "tile_visited"
    FRONTIER_ENTERED = "tile_frontier_entered"
    COST_UPDATED = "tile_cost_updated"
    SEARCH_SUCCEEDED = "search_succeeded"
    SEARCH_FAILED = "search_failed"
    TRAVERSAL_COMPLETED = "traversal_completed"


class Status(str, Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    COMPLETED = "completed"     # traversal exhausted its frontier


@dataclass(frozen=True)
class SearchEvent:
    kind: EventKind
    tile: Optional[Tile] = None
    cost: Optional[float] = None
    path: Optional[List[Tile]] = None
    error: Optional[UnreachableError] = None

    @classmethod
    def visited(cls, tile: Tile) -> "SearchEvent":
        return cls(EventKind.TILE_VISITED, tile=tile)

    @classmethod
    def frontier_entered(cls, tile: Tile) -> "SearchEvent":
        return cls(EventKind.FRONTIER_ENTERED, tile=tile)

    @classmethod
    def cost_updated(cls, tile: Tile, cost: float) -> "SearchEvent":
        return cls(EventKind.COST_UPDATED, tile=tile, cost=cost)

    @classmethod
    def succeeded(cls, path: List[Tile], cost: Optional[float] = None) -> "SearchEvent":
        return cls(EventKind.SEARCH_SUCCEEDED, tile=path[-1], cost=cost, path=list(path))

    @classmethod
    def failed(cls, error: UnreachableError) -> "SearchEvent":
        return cls(EventKind.SEARCH_FAILED, error=error)

    @classmethod
    def traversal_completed(cls, order: List[Tile]) -> "SearchEvent":
        return cls(EventKind.TRAVERSAL_COMPLETED, path=list(order))


@dataclass
class StepResult:
    status: Status
    events: List[SearchEvent] = field(default_factory=list)
    current: Optional[Tile] = None

    @property
    def done(self) -> bool:
        return self.status is not Status.RUNNING


@dataclass
class SearchResult:
    """Outcome of a run-to-completion search."""
    algorithm: str
    success: bool
    path: Optional[List[Tile]] = None
    cost: Optional[float] = None
    visit_order: List[Tile] = field(default_factory=list)
    expanded: int = 0
    discovered: int = 0
    steps: int = 0
    elapsed: float = 0.0
    error: Optional[UnreachableError] = None

    @property
    def hops(self) -> int:
        return len(self.path) - 1 if self.path else 0

    def unwrap(self) -> List[Tile]:
        """Return the path, raising the recorded UnreachableError on failure."""
        if self.error is not None:
            raise self.error
        if self.path is None:
            raise UnreachableError(message=f"{self.algorithm} produced no path")
        return self.path

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "path": [tuple(t.position) for t in self.path] if self.path else None,
        }
