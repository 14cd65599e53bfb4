#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared expansion loop for every search variant.

A search is a steppable process:
    engine = BreadthFirstSearch(grid, start, goal)
    while not (res := engine.step()).done:
        draw(res.events)
or, run to completion:
    result = engine.run()            # -> SearchResult (never raises Unreachable)

Each step removes exactly one tile from the frontier, tests it against the
goal, and expands its passable neighbors. Subclasses only choose the frontier
(FIFO, LIFO, stable priority queue) and how neighbors are ordered.

Unweighted variants mark a tile visited when it is discovered and never
re-queue it. Weighted variants relax cost[neighbor] for tiles that are not yet
expanded; when an open tile gets cheaper a fresh frontier entry is queued and
the older one is dropped when it surfaces.
"""

from __future__ import annotations

import logging
import math
import time
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Set, Union

from ..errors import InvalidConstructionError, UnreachableError
from ..grids.grid import Grid
from ..grids.tile import Tile, TileLike
from ..structures.priority_queue import StablePriorityQueue
from .events import SearchEvent, SearchResult, Status, StepResult
from .heuristics import Heuristic, get_heuristic
from .path import path_cost, reconstruct_path

logger = logging.getLogger(__name__)

EventCallback = Callable[[SearchEvent], None]


class SearchEngine:
    name: str = "search"
    weighted: bool = False
    requires_goal: bool = False

    def __init__(self, grid: Grid, start: TileLike, goal: Optional[TileLike] = None):
        if grid is None:
            raise InvalidConstructionError("A grid is required")
        self.grid = grid
        self.start: Tile = grid.resolve(start)
        self.goal: Optional[Tile] = grid.resolve(goal) if goal is not None else None
        if self.requires_goal and self.goal is None:
            raise InvalidConstructionError(f"{self.name} needs a goal tile")
        self.reset()

    # ------------------------------ lifecycle ------------------------------- #

    def reset(self) -> None:
        """Drop all search state and seed the frontier with the start tile."""
        self._predecessors: Dict[Tile, Optional[Tile]] = {self.start: None}
        self._costs: Dict[Tile, float] = {}
        self._closed: Set[Tile] = set()
        self._visit_order: List[Tile] = []
        self._status = Status.RUNNING
        self._steps = 0
        self._path: Optional[List[Tile]] = None
        self._error: Optional[UnreachableError] = None
        self._frontier = self._make_frontier()

        self._pending: List[SearchEvent] = [SearchEvent.frontier_entered(self.start)]
        if self.weighted:
            self._costs = {tile: math.inf for tile in self.grid}
            self._costs[self.start] = 0.0
            self._pending.append(SearchEvent.cost_updated(self.start, 0.0))
        self._push(self.start)

    @property
    def status(self) -> Status:
        return self._status

    @property
    def done(self) -> bool:
        return self._status is not Status.RUNNING

    @property
    def predecessors(self) -> Mapping[Tile, Optional[Tile]]:
        return MappingProxyType(self._predecessors)

    @property
    def costs(self) -> Mapping[Tile, float]:
        return MappingProxyType(self._costs)

    @property
    def visit_order(self) -> List[Tile]:
        return list(self._visit_order)

    @property
    def path(self) -> Optional[List[Tile]]:
        return list(self._path) if self._path is not None else None

    # --------------------------- frontier policy ---------------------------- #

    def _make_frontier(self):
        raise NotImplementedError

    def _push(self, tile: Tile) -> None:
        raise NotImplementedError

    def _pop(self) -> Optional[Tile]:
        """Next tile to expand, or None when the frontier is exhausted."""
        raise NotImplementedError

    def frontier_size(self) -> int:
        return len(self._frontier)

    def _order_neighbors(self, tiles: List[Tile]) -> List[Tile]:
        return tiles

    def _discover(self, current: Tile, neighbor: Tile, events: List[SearchEvent]) -> None:
        if neighbor in self._predecessors:
            return
        self._predecessors[neighbor] = current
        self._push(neighbor)
        events.append(SearchEvent.frontier_entered(neighbor))

    # ------------------------------- stepping ------------------------------- #

    def step(self) -> StepResult:
        if self._status is not Status.RUNNING:
            return StepResult(self._status)

        events, self._pending = self._pending, []
        current = self._pop()
        if current is None:
            self._finish_exhausted(events)
            return StepResult(self._status, events)

        self._steps += 1
        self._closed.add(current)
        self._visit_order.append(current)
        events.append(SearchEvent.visited(current))

        if self.goal is not None and current == self.goal:
            self._path = reconstruct_path(current, self._predecessors)
            self._status = Status.SUCCEEDED
            events.append(SearchEvent.succeeded(self._path, path_cost(self._path)))
            logger.debug("%s reached %s after %d expansions", self.name, current, self._steps)
            return StepResult(self._status, events, current)

        neighbors = [t for t in self.grid.neighbors(current) if t.passable]
        for neighbor in self._order_neighbors(neighbors):
            self._discover(current, neighbor, events)

        return StepResult(self._status, events, current)

    def _finish_exhausted(self, events: List[SearchEvent]) -> None:
        if self.goal is None:
            self._status = Status.COMPLETED
            events.append(SearchEvent.traversal_completed(self._visit_order))
            logger.debug("%s traversal from %s visited %d tiles",
                         self.name, self.start, len(self._visit_order))
        else:
            self._status = Status.FAILED
            self._error = UnreachableError(self.goal)
            events.append(SearchEvent.failed(self._error))
            logger.debug("%s: %s unreachable from %s after %d expansions",
                         self.name, self.goal, self.start, self._steps)

    def events(self) -> Iterator[SearchEvent]:
        """
        Lazy event stream of a fresh run; calling again restarts the search.

        All streams share this engine's state, so only the most recent one is
        valid. Resuming an older, partly consumed generator after a restart
        continues the newer run.
        """
        self.reset()
        while True:
            res = self.step()
            yield from res.events
            if res.done:
                return

    def run(self, on_event: Optional[EventCallback] = None) -> SearchResult:
        self.reset()
        t0 = time.perf_counter()
        while True:
            res = self.step()
            if on_event is not None:
                for ev in res.events:
                    on_event(ev)
            if res.done:
                break
        elapsed = time.perf_counter() - t0
        return self.result(elapsed)

    def result(self, elapsed: float = 0.0) -> SearchResult:
        success = self._status in (Status.SUCCEEDED, Status.COMPLETED)
        return SearchResult(
            algorithm=self.name,
            success=success,
            path=self.path,
            cost=path_cost(self._path) if self._path else None,
            visit_order=list(self._visit_order),
            expanded=len(self._closed),
            discovered=len(self._predecessors),
            steps=self._steps,
            elapsed=elapsed,
            error=self._error,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self.start}, goal={self.goal}, status={self._status.value})"


class WeightedSearch(SearchEngine):
    """Priority-queue frontier with cost relaxation (UCS, Best-First, A*)."""
    weighted = True

    def __init__(self, grid: Grid, start: TileLike, goal: Optional[TileLike] = None,
                 heuristic: Union[str, Heuristic] = "manhattan"):
        self.heuristic: Heuristic = get_heuristic(heuristic) if isinstance(heuristic, str) else heuristic
        if self.heuristic is None or not callable(self.heuristic):
            raise InvalidConstructionError("heuristic must be a name or a callable")
        super().__init__(grid, start, goal)

    def priority(self, tile: Tile) -> float:
        raise NotImplementedError

    def _make_frontier(self):
        return StablePriorityQueue(key=self.priority)

    def _push(self, tile: Tile) -> None:
        self._frontier.enqueue(tile)

    def _pop(self) -> Optional[Tile]:
        self._prune()
        return self._frontier.dequeue() if self._frontier else None

    def _prune(self) -> None:
        # entries superseded by a cheaper re-queue of an already expanded tile
        while self._frontier and self._frontier.peek() in self._closed:
            self._frontier.dequeue()

    def frontier_size(self) -> int:
        self._prune()
        return len(self._frontier)

    def _discover(self, current: Tile, neighbor: Tile, events: List[SearchEvent]) -> None:
        if neighbor in self._closed:
            return
        new_cost = self._costs[current] + neighbor.weight
        if new_cost < self._costs[neighbor]:
            seen = neighbor in self._predecessors
            self._costs[neighbor] = new_cost
            self._predecessors[neighbor] = current
            self._push(neighbor)
            if not seen:
                events.append(SearchEvent.frontier_entered(neighbor))
            events.append(SearchEvent.cost_updated(neighbor, new_cost))
