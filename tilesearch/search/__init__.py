# -*- coding: utf-8 -*-
"""
Search variants over a Grid with a unified API:
engine = SEARCHES[name](grid, start, goal, **kwargs)
  engine.step()  -> StepResult(status, events, current)
  engine.run()   -> SearchResult(success, path, cost, ...)
"""

from __future__ import annotations
from typing import Dict, Type

from .engine import SearchEngine, WeightedSearch
from .bfs import BreadthFirstSearch
from .dfs import DepthFirstSearch, shuffle_tiles
from .dijkstra import UniformCostSearch
from .greedy_best_first import GreedyBestFirstSearch
from .a_star import AStarSearch
from .events import EventKind, SearchEvent, SearchResult, Status, StepResult
from .heuristics import HEURISTICS, euclidean, get_heuristic, manhattan, scaled
from .path import interior, path_cost, reconstruct_path

# Mapping used by factories/CLIs
SEARCHES: Dict[str, Type[SearchEngine]] = {
    "bfs": BreadthFirstSearch,
    "dfs": DepthFirstSearch,
    "dijkstra": UniformCostSearch,
    "ucs": UniformCostSearch,
    "greedy_best_first": GreedyBestFirstSearch,
    "a_star": AStarSearch,
}

__all__ = [
    "SearchEngine",
    "WeightedSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "UniformCostSearch",
    "GreedyBestFirstSearch",
    "AStarSearch",
    "SEARCHES",
    "EventKind",
    "SearchEvent",
    "SearchResult",
    "Status",
    "StepResult",
    "HEURISTICS",
    "manhattan",
    "euclidean",
    "scaled",
    "get_heuristic",
    "reconstruct_path",
    "path_cost",
    "interior",
    "shuffle_tiles",
]
