#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

from tilesearch.errors import InvalidConstructionError, OutOfRangeError
from tilesearch.grids import Grid, Position, Tile, add_weighted_region, generate_grid, is_reachable
from tests.grid_utils import grid_from_rows, positions


# --- Tile ---------------------------------------------------------------------
def test_tile_identity_is_position_only():
    a = Tile(2, 3, weight=1.0, passable=True)
    b = Tile(2, 3, weight=7.5, passable=False)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert {a: "x"}[b] == "x"
    assert a != Tile(3, 2)
    assert repr(a) == "(2, 3)"


def test_tile_rejects_negative_index_and_bad_weight():
    with pytest.raises(InvalidConstructionError):
        Tile(-1, 0)
    with pytest.raises(InvalidConstructionError):
        Position(0, -4)
    with pytest.raises(InvalidConstructionError):
        Tile(0, 0, weight=0)
    with pytest.raises(InvalidConstructionError):
        Tile(0, 0, weight=-2.0)
    t = Tile(0, 0)
    with pytest.raises(InvalidConstructionError):
        t.weight = -1
    with pytest.raises(InvalidConstructionError):
        t.weight = 0
    assert t.weight == 1.0
    t.weight = 4
    assert t.weight == 4.0


# --- Grid ---------------------------------------------------------------------
def test_tile_lookup_is_bounds_checked():
    g = Grid(3, 4)
    assert g.tile(2, 3).position == Position(2, 3)
    assert g[1, 1] is g.tile(1, 1)
    for r, c in [(-1, 0), (0, -1), (3, 0), (0, 4)]:
        with pytest.raises(OutOfRangeError):
            g.tile(r, c)
    # still an IndexError for callers that only know the builtin
    with pytest.raises(IndexError):
        g[5, 5]


def test_grid_rejects_bad_shapes():
    with pytest.raises(InvalidConstructionError):
        Grid(0, 3)
    with pytest.raises(InvalidConstructionError):
        Grid(2, 2, weights=np.ones((3, 2)))


def test_neighbors_are_up_right_down_left_and_in_bounds():
    g = Grid(3, 3)
    assert positions(g.neighbors(g[1, 1])) == [(0, 1), (1, 2), (2, 1), (1, 0)]
    assert positions(g.neighbors(g[0, 0])) == [(0, 1), (1, 0)]
    assert positions(g.neighbors((2, 2))) == [(1, 2), (2, 1)]
    assert positions(Grid(1, 1).neighbors((0, 0))) == []


def test_neighbors_do_not_filter_passability():
    g = grid_from_rows([
        ".#.",
        "#.#",
        ".#.",
    ])
    assert len(g.neighbors((1, 1))) == 4
    assert not any(t.passable for t in g.neighbors((1, 1)))


def test_iteration_is_row_major():
    g = Grid(2, 3)
    assert positions(g) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert len(g) == 6


def test_arrays_seed_weights_and_passability():
    g = grid_from_rows([
        "..3",
        "#9.",
    ])
    blocked, weights = g.to_arrays()
    assert blocked.tolist() == [[False, False, False], [True, False, False]]
    assert weights.tolist() == [[1.0, 1.0, 3.0], [1.0, 9.0, 1.0]]
    assert not g[1, 0].passable
    assert g.min_weight == 1.0
    assert len(g.passable_tiles()) == 5


def test_resolve_accepts_tiles_positions_and_pairs():
    g = Grid(2, 2)
    t = g[1, 0]
    assert g.resolve(Tile(1, 0)) is t
    assert g.resolve(Position(1, 0)) is t
    assert g.resolve((1, 0)) is t


def test_set_region_clips_and_enclose_walls_in():
    g = Grid(4, 4)
    changed = g.set_region((2, 2), (5, 5), weight=6)
    assert sorted(positions(changed)) == [(2, 2), (2, 3), (3, 2), (3, 3)]
    assert g[3, 3].weight == 6.0 and g[1, 1].weight == 1.0

    walls = g.enclose((0, 0))
    assert positions(walls) == [(0, 1), (1, 0)]
    assert not g[0, 1].passable and not g[1, 0].passable
    assert g[0, 0].passable


# --- Generator ----------------------------------------------------------------
def test_generator_is_reproducible_with_a_seed():
    a = generate_grid(15, 15, rng=42)
    b = generate_grid(15, 15, rng=np.random.default_rng(42))
    assert (a.grid.to_arrays()[0] == b.grid.to_arrays()[0]).all()
    assert a.settings["seed"] == b.settings["seed"]


def test_generator_blocks_a_fifth_and_keeps_endpoints_free():
    sc = generate_grid(10, 10, rng=1)
    blocked, _ = sc.grid.to_arrays()
    assert 18 <= int(blocked.sum()) <= 20
    assert sc.start.passable and sc.goal.passable
    assert sc.start.position == Position(0, 0)
    assert sc.goal.position == Position(9, 9)


def test_generator_reachable_and_unreachable():
    for seed in range(5):
        sc = generate_grid(12, 12, blocked_fraction=0.3, ensure_status="reachable", rng=seed)
        assert is_reachable(sc.grid.to_arrays()[0], (0, 0), (11, 11))

        sc = generate_grid(12, 12, blocked_fraction=0.1, ensure_status="unreachable", rng=seed)
        assert not is_reachable(sc.grid.to_arrays()[0], (0, 0), (11, 11))


def test_generator_refuses_to_wall_off_an_adjacent_goal():
    with pytest.raises(ValueError):
        generate_grid(3, 3, start=(0, 0), goal=(0, 1), ensure_status="unreachable", rng=0)


def test_generator_samples_integer_weights_in_range():
    sc = generate_grid(8, 8, blocked_fraction=0.0, weight_range=(1, 5), rng=3)
    _, weights = sc.grid.to_arrays()
    assert weights.min() >= 1 and weights.max() <= 5
    assert np.all(weights == np.round(weights))


def test_add_weighted_region():
    sc = generate_grid(6, 6, blocked_fraction=0.0, rng=0)
    add_weighted_region(sc.grid, (1, 1), (2, 3), 10)
    _, weights = sc.grid.to_arrays()
    assert weights[1:3, 1:4].tolist() == [[10.0] * 3] * 2
    assert weights.sum() == 36 - 6 + 60


def test_generator_rejects_endpoints_outside_the_grid():
    for start, goal in [((9, 9), None), ((0, 0), (5, 2)), ((-1, 0), None), ((0, 0), (4, -1))]:
        with pytest.raises(OutOfRangeError):
            generate_grid(5, 5, start=start, goal=goal, rng=0)
