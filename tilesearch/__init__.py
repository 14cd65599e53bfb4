# -*- coding: utf-8 -*-
"""
Top-level package for grid search visualization.
Provides a convenience factory for search engines.
"""

from __future__ import annotations
from typing import Any

__all__ = [
    "__version__",
    "get_search",
]

__version__ = "0.1.0"


def get_search(name: str, grid, start, goal=None, **kwargs) -> Any:
    """
    Factory: instantiate a search engine by name.

    Parameters
    ----------
    name : str
        One of: 'bfs', 'dfs', 'dijkstra' (alias 'ucs'), 'greedy_best_first', 'a_star'
    grid, start, goal :
        Grid to search, start tile and goal tile (None for a traversal).
    kwargs : dict
        Passed to the engine constructor (e.g., heuristic='euclidean', rng=0)

    Returns
    -------
    engine instance
    """
    name = name.strip().lower()
    from .search import SEARCHES  # lazy import
    if name not in SEARCHES:
        raise ValueError(f"Unknown search '{name}'. Available: {sorted(SEARCHES)}")
    return SEARCHES[name](grid, start, goal, **kwargs)
