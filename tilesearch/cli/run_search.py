#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Generate one random grid scenario, run one search on it, print the outcome.

Example:
    python -m tilesearch.cli.run_search \
        --algorithm a_star \
        --rows 20 --columns 30 \
        --blocked 0.2 \
        --weights 1,5 \
        --heuristic euclidean \
        --ensure reachable \
        --seed 0 \
        --save out/a_star.png

Exit code is 0 when the goal was reached and 1 when it was unreachable.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .. import get_search
from ..config import (DEFAULT_ALGORITHM, DEFAULT_BLOCKED, DEFAULT_COLUMNS, DEFAULT_HEURISTIC,
                      DEFAULT_ROWS, SearchConfig, configure_logging)
from ..grids.generator import generate_grid
from ..search import HEURISTICS, SEARCHES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run one grid search on a random scenario.")
    ap.add_argument("--algorithm", type=str, default=DEFAULT_ALGORITHM, choices=sorted(SEARCHES),
                    help="Search variant to run")
    ap.add_argument("--rows", type=int, default=DEFAULT_ROWS)
    ap.add_argument("--columns", type=int, default=DEFAULT_COLUMNS)
    ap.add_argument("--blocked", type=float, default=DEFAULT_BLOCKED,
                    help="Fraction of tiles made impassable (0-1)")
    ap.add_argument("--weights", type=str, default="1",
                    help="Tile weight, or a low,high range to sample from (e.g., 1,5)")
    ap.add_argument("--start", type=str, default="0,0", help="Start tile as row,col")
    ap.add_argument("--goal", type=str, default=None,
                    help="Goal tile as row,col (default: bottom-right corner)")
    ap.add_argument("--heuristic", type=str, default=DEFAULT_HEURISTIC, choices=sorted(HEURISTICS))
    ap.add_argument("--ensure", type=str, default="any", choices=["any", "reachable", "unreachable"])
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--save", type=str, default=None, help="Write a PNG of the finished search")
    ap.add_argument("--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    cfg = SearchConfig.from_args(args)
    logger.debug("config: %s", cfg.as_dict())

    scenario = generate_grid(
        cfg.rows, cfg.columns,
        blocked_fraction=cfg.blocked_fraction,
        start=cfg.start, goal=cfg.goal,
        weight_range=cfg.weight_range,
        ensure_status=cfg.ensure_status,
        rng=cfg.seed,
    )
    engine = get_search(cfg.algorithm, scenario.grid, scenario.start, scenario.goal,
                        **cfg.engine_kwargs())
    recorded = []
    result = engine.run(on_event=recorded.append)

    status = "success" if result.success else "unreachable"
    print(f"{result.algorithm}: {status} | hops={result.hops} cost={result.cost or 0.0:.2f} "
          f"expanded={result.expanded} discovered={result.discovered} time={result.elapsed:.4f}s")
    if result.path:
        print(" -> ".join(str(t) for t in result.path))

    if args.save:
        from ..viz.render import save_search_figure  # lazy: matplotlib only when needed
        out = save_search_figure(engine, args.save, title=f"{result.algorithm}: {status}",
                                 events=recorded)
        print(f"Saved: {out}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
