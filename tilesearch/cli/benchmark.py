#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
benchmark.py
------------
Run every selected search variant on the same random scenarios and write one
CSV row per (scenario, algorithm).

Example:
    python -m tilesearch.cli.benchmark \
        --sizes 10x10,20x20,40x40 \
        --seeds 0,1,2 \
        --blocked 0.2 \
        --weights 1,5 \
        --algorithms bfs,dfs,dijkstra,greedy_best_first,a_star \
        --out results/benchmark.csv

The "optimal" column compares each path with a reference: hop distance from
breadth-level enumeration for bfs, Dijkstra's cost for the weighted variants.
"""

from __future__ import annotations

import argparse
import csv
import logging
import os
import sys
from typing import Dict, List, Optional

from tqdm import tqdm

from .. import get_search
from ..config import DEFAULT_BLOCKED, configure_logging, parse_list, parse_range, parse_sizes
from ..eval.metrics import hop_distances, result_row
from ..grids.generator import generate_grid
from ..search import SEARCHES

logger = logging.getLogger(__name__)

FIELDS = [
    "algorithm", "rows", "columns", "seed", "blocked", "success", "optimal",
    "hops", "cost", "expanded", "discovered", "steps", "time_s",
]
ALL_ALGORITHMS = "bfs,dfs,dijkstra,greedy_best_first,a_star"


def _is_optimal(name: str, res, reference_cost: Optional[float], scenario) -> str:
    if not res.success:
        return ""
    if name == "bfs":
        dist = hop_distances(scenario.grid, scenario.start)
        return str(int(res.hops == dist[scenario.goal.row, scenario.goal.column]))
    if reference_cost is None:
        return ""
    return str(int(abs(res.cost - reference_cost) < 1e-9))


def run_case(algorithms: List[str], rows: int, columns: int, seed: int,
             blocked: float, weight_range, heuristic: str) -> List[Dict]:
    scenario = generate_grid(rows, columns, blocked_fraction=blocked, weight_range=weight_range,
                             ensure_status="any", rng=seed)
    reference = get_search("dijkstra", scenario.grid, scenario.start, scenario.goal).run()
    reference_cost = reference.cost if reference.success else None

    out = []
    for name in algorithms:
        kwargs = {}
        if name in ("greedy_best_first", "a_star"):
            kwargs["heuristic"] = heuristic
        elif name == "dfs":
            kwargs["rng"] = seed
        res = get_search(name, scenario.grid, scenario.start, scenario.goal, **kwargs).run()
        out.append(result_row(
            res, rows=rows, columns=columns, seed=seed, blocked=blocked,
            optimal=_is_optimal(name, res, reference_cost, scenario),
        ))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark search variants on random grids.")
    ap.add_argument("--sizes", type=str, default="10x10,20x20,40x40",
                    help="Comma-separated grid sizes like 20x20,30x30")
    ap.add_argument("--seeds", type=str, default="0,1,2,3,4")
    ap.add_argument("--blocked", type=float, default=DEFAULT_BLOCKED)
    ap.add_argument("--weights", type=str, default="1,5",
                    help="Tile weight, or a low,high range to sample from")
    ap.add_argument("--algorithms", type=str, default=ALL_ALGORITHMS)
    ap.add_argument("--heuristic", type=str, default="manhattan")
    ap.add_argument("--out", type=str, default=os.path.join("results", "benchmark.csv"))
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    sizes = parse_sizes(args.sizes)
    seeds = [int(s) for s in parse_list(args.seeds)]
    algorithms = parse_list(args.algorithms)
    unknown = [a for a in algorithms if a not in SEARCHES]
    if unknown:
        ap.error(f"Unknown algorithm(s) {unknown}. Available: {sorted(SEARCHES)}")
    weight_range = parse_range(args.weights)

    rows: List[Dict] = []
    cases = [(H, W, seed) for (H, W) in sizes for seed in seeds]
    for H, W, seed in tqdm(cases, desc="scenarios", disable=None):
        rows.extend(run_case(algorithms, H, W, seed, args.blocked, weight_range, args.heuristic))

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.out, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)
    print(f"Saved: {args.out}")

    print(f"{'algorithm':18} {'size':>7} {'seed':>4} {'succ':>4} {'opt':>3} "
          f"{'hops':>5} {'cost':>8} {'expanded':>8} {'time[s]':>8}")
    for r in rows:
        print(f"{r['algorithm']:18} {str(r['rows']) + 'x' + str(r['columns']):>7} {r['seed']:4d} "
              f"{r['success']:4d} {r['optimal']:>3} {r['hops']:5d} {r['cost']:8.2f} "
              f"{r['expanded']:8d} {r['time_s']:8.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
