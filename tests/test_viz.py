#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import matplotlib
matplotlib.use("Agg")

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation

from tilesearch.grids import Grid
from tilesearch.search import AStarSearch, BreadthFirstSearch, SearchEvent
from tilesearch.viz import TileColors, animate_search, render_search, save_search_figure
from tilesearch.viz.render import (BLOCKED_COLOR, FRONTIER_COLOR, GOAL_COLOR, PATH_COLOR, START_COLOR,
                                   VISITED_COLOR)
from tests.grid_utils import grid_from_rows


def color_at(colors, r, c):
    return tuple(np.round(colors.rgb[r, c], 6))


def test_events_drive_tile_colors():
    g = grid_from_rows([
        "...",
        ".#.",
        "...",
    ])
    colors = TileColors(g, (0, 0), (2, 2))
    assert color_at(colors, 0, 0) == START_COLOR
    assert color_at(colors, 2, 2) == GOAL_COLOR
    assert color_at(colors, 1, 1) == BLOCKED_COLOR

    colors.apply(SearchEvent.frontier_entered(g[0, 1]))
    assert color_at(colors, 0, 1) == FRONTIER_COLOR
    colors.apply(SearchEvent.visited(g[0, 1]))
    assert color_at(colors, 0, 1) == VISITED_COLOR
    # endpoints keep their colors
    colors.apply(SearchEvent.visited(g[0, 0]))
    assert color_at(colors, 0, 0) == START_COLOR


def test_finished_search_paints_route_between_endpoints():
    g = Grid(3, 3)
    engine = BreadthFirstSearch(g, (0, 0), (2, 2))
    colors = TileColors(g, engine.start, engine.goal).apply_all(engine.events())
    for t in engine.path[1:-1]:
        assert color_at(colors, t.row, t.column) == PATH_COLOR
    assert color_at(colors, 2, 2) == GOAL_COLOR


def test_heavier_tiles_are_darker():
    g = grid_from_rows(["19"])
    colors = TileColors(g)
    assert colors.rgb[0, 1].sum() < colors.rgb[0, 0].sum()


def test_render_and_save(tmp_path):
    g = Grid(6, 6)
    g.enclose((3, 3))
    engine = AStarSearch(g, (0, 0), (5, 5))
    ax = render_search(g, engine.events(), start=engine.start, goal=engine.goal, title="a_star")
    assert ax.get_title() == "a_star"
    plt.close(ax.figure)

    out = save_search_figure(engine, str(tmp_path / "a_star.png"))
    assert (tmp_path / "a_star.png").exists()
    assert out.endswith("a_star.png")


def test_animation_steps_the_engine():
    engine = BreadthFirstSearch(Grid(4, 4), (0, 0), (3, 3))
    anim = animate_search(engine, interval=1)
    assert isinstance(anim, animation.FuncAnimation)
    plt.close("all")
