# -*- coding: utf-8 -*-
"""
Matplotlib rendering of a search, driven only by engine events.

Layers:
  - background (light grey), impassable tiles (dark), heavier tiles shaded
  - frontier / visited colors as events arrive
  - final route (interior only), start and goal on top
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation

from ..grids.grid import Grid
from ..grids.tile import Tile, TileLike
from ..search.engine import SearchEngine
from ..search.events import EventKind, SearchEvent
from ..search.path import interior

RGB = Tuple[float, float, float]

TILE_COLOR: RGB = (0.93, 0.93, 0.93)
BLOCKED_COLOR: RGB = (0.1, 0.1, 0.1)
START_COLOR: RGB = (0.0, 1.0, 0.0)
GOAL_COLOR: RGB = (1.0, 0.0, 0.0)
PATH_COLOR: RGB = (0.73, 0.0, 1.0)
VISITED_COLOR: RGB = (0.8, 0.75, 0.7)
FRONTIER_COLOR: RGB = (0.4, 0.53, 0.8)


class TileColors:
    """RGB image of the grid that follows a stream of search events."""

    def __init__(self, grid: Grid, start: Optional[TileLike] = None, goal: Optional[TileLike] = None):
        self.grid = grid
        self.start = grid.resolve(start) if start is not None else None
        self.goal = grid.resolve(goal) if goal is not None else None
        self.rgb = np.empty(grid.shape + (3,), dtype=float)
        self.reset()

    def reset(self) -> None:
        blocked, weights = self.grid.to_arrays()
        self.rgb[...] = TILE_COLOR
        heavy = weights > weights.min()
        if heavy.any():
            # darker for heavier tiles
            shade = 1.0 - 0.45 * (weights - weights.min()) / (weights.max() - weights.min())
            self.rgb[heavy] = np.asarray(TILE_COLOR) * shade[heavy][:, None]
        self.rgb[blocked] = BLOCKED_COLOR
        self._paint_endpoints()

    def _paint(self, tile: Tile, color: RGB) -> None:
        if tile == self.start or tile == self.goal:
            return
        self.rgb[tile.row, tile.column] = color

    def _paint_endpoints(self) -> None:
        if self.start is not None:
            self.rgb[self.start.row, self.start.column] = START_COLOR
        if self.goal is not None:
            self.rgb[self.goal.row, self.goal.column] = GOAL_COLOR

    def apply(self, event: SearchEvent) -> None:
        if event.kind is EventKind.FRONTIER_ENTERED:
            self._paint(event.tile, FRONTIER_COLOR)
        elif event.kind is EventKind.TILE_VISITED:
            self._paint(event.tile, VISITED_COLOR)
        elif event.kind is EventKind.SEARCH_SUCCEEDED:
            for tile in interior(event.path):
                self._paint(tile, PATH_COLOR)

    def apply_all(self, events: Iterable[SearchEvent]) -> "TileColors":
        for ev in events:
            self.apply(ev)
        return self


def render_search(grid: Grid, events: Iterable[SearchEvent] = (), ax=None,
                  start: Optional[TileLike] = None, goal: Optional[TileLike] = None,
                  title: Optional[str] = None):
    """Draw the grid after applying `events`; returns the Axes."""
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 4), max(3, H / 4)), dpi=120)
    colors = TileColors(grid, start, goal).apply_all(events)
    ax.imshow(colors.rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])
    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_search_figure(engine: SearchEngine, path: str, title: Optional[str] = None,
                       events: Optional[Iterable[SearchEvent]] = None) -> str:
    """Write the final coloring to `path`; runs `engine` from scratch unless `events` is given."""
    if events is None:
        events = list(engine.events())
    ax = render_search(engine.grid, events, start=engine.start, goal=engine.goal, title=title)
    fig = ax.figure
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def animate_search(engine: SearchEngine, interval: int = 50, ax=None) -> animation.FuncAnimation:
    """
    One engine.step() per frame; the frame timer is the only pacing.
    Keep a reference to the returned animation while it plays.
    """
    engine.reset()
    H, W = engine.grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 4), max(3, H / 4)), dpi=120)
    colors = TileColors(engine.grid, engine.start, engine.goal)
    image = ax.imshow(colors.rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    def frames():
        while not engine.done:
            yield engine.step()

    def update(res):
        colors.apply_all(res.events)
        image.set_data(colors.rgb)
        ax.set_title(f"{engine.name}: {res.status.value}", fontsize=10)
        return (image,)

    return animation.FuncAnimation(ax.figure, update, frames=frames, interval=interval,
                                   blit=False, repeat=False, cache_frame_data=False)
