#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import csv

import pytest

from tilesearch.cli import benchmark, run_search
from tilesearch.config import SearchConfig, parse_pair, parse_range, parse_sizes
from tilesearch.errors import OutOfRangeError


def test_run_search_exit_codes(capsys):
    ok = run_search.main(["--algorithm", "bfs", "--rows", "8", "--columns", "8",
                          "--ensure", "reachable", "--seed", "0"])
    out = capsys.readouterr().out
    assert ok == 0
    assert out.startswith("bfs: success")
    assert "(0, 0) -> " in out and out.rstrip().endswith("(7, 7)")

    bad = run_search.main(["--algorithm", "a_star", "--rows", "8", "--columns", "8",
                           "--blocked", "0.1", "--ensure", "unreachable", "--seed", "0"])
    assert bad == 1
    assert capsys.readouterr().out.startswith("a_star: unreachable")


def test_run_search_saves_figure(tmp_path):
    target = tmp_path / "fig" / "dfs.png"
    code = run_search.main(["--algorithm", "dfs", "--rows", "10", "--columns", "12",
                            "--weights", "1,4", "--ensure", "reachable", "--seed", "3",
                            "--save", str(target)])
    assert code == 0
    assert target.exists() and target.stat().st_size > 0


def test_benchmark_writes_one_row_per_case(tmp_path):
    out = tmp_path / "bench.csv"
    code = benchmark.main(["--sizes", "6x6,8x8", "--seeds", "0,1", "--weights", "1,5",
                           "--algorithms", "bfs,dijkstra,a_star,greedy_best_first",
                           "--out", str(out)])
    assert code == 0
    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 2 * 4
    assert list(rows[0].keys()) == benchmark.FIELDS
    for r in rows:
        if r["success"] == "0":
            assert r["optimal"] == ""
        elif r["algorithm"] in ("bfs", "dijkstra", "a_star"):
            assert r["optimal"] == "1"


def test_benchmark_rejects_unknown_algorithm(tmp_path):
    with pytest.raises(SystemExit):
        benchmark.main(["--algorithms", "bfs,jps", "--out", str(tmp_path / "x.csv")])


def test_config_parsing():
    assert parse_pair(" 3, 4") == (3, 4)
    assert parse_range("2") == (2.0, 2.0)
    assert parse_range("1,5") == (1.0, 5.0)
    assert parse_sizes("10x12, 5X5") == [(10, 12), (5, 5)]
    with pytest.raises(ValueError):
        parse_sizes("10by10")

    args = run_search.build_parser().parse_args(["--algorithm", "dfs", "--seed", "9", "--goal", "4,5"])
    cfg = SearchConfig.from_args(args)
    assert cfg.goal == (4, 5)
    assert cfg.engine_kwargs() == {"rng": 9}
    assert SearchConfig(algorithm="a_star", heuristic="euclidean").engine_kwargs() == {"heuristic": "euclidean"}


def test_run_search_goal_outside_grid_is_out_of_range():
    with pytest.raises(OutOfRangeError):
        run_search.main(["--rows", "5", "--columns", "5", "--goal", "7,7", "--seed", "0"])
