# -*- coding: utf-8 -*-
"""
Run configuration shared by the command-line tools.

Defaults live here as module constants; CLIs parse arguments with argparse
and turn them into a SearchConfig, which is also what gets recorded next to
results for provenance.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

LOG_LEVEL_ENV = "TILESEARCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_ALGORITHM = "a_star"
DEFAULT_HEURISTIC = "manhattan"
DEFAULT_ROWS = 20
DEFAULT_COLUMNS = 20
DEFAULT_BLOCKED = 0.2


@dataclass
class SearchConfig:
    algorithm: str = DEFAULT_ALGORITHM
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    blocked_fraction: float = DEFAULT_BLOCKED
    weight_range: Tuple[float, float] = (1.0, 1.0)
    start: Tuple[int, int] = (0, 0)
    goal: Optional[Tuple[int, int]] = None
    heuristic: str = DEFAULT_HEURISTIC
    ensure_status: str = "any"
    seed: Optional[int] = None

    @classmethod
    def from_args(cls, args) -> "SearchConfig":
        return cls(
            algorithm=args.algorithm,
            rows=args.rows,
            columns=args.columns,
            blocked_fraction=args.blocked,
            weight_range=parse_range(args.weights),
            start=parse_pair(args.start),
            goal=parse_pair(args.goal) if args.goal else None,
            heuristic=args.heuristic,
            ensure_status=args.ensure,
            seed=args.seed,
        )

    def engine_kwargs(self) -> Dict[str, Any]:
        """Extra constructor arguments the chosen algorithm understands."""
        if self.algorithm in ("greedy_best_first", "a_star"):
            return {"heuristic": self.heuristic}
        if self.algorithm == "dfs":
            return {"rng": self.seed}
        return {}

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# -------------------- parsing helpers -------------------- #

def parse_pair(s: str) -> Tuple[int, int]:
    parts = [p.strip() for p in str(s).split(",")]
    if len(parts) != 2:
        raise ValueError(f"Bad tile '{s}', expected like 3,4")
    return int(parts[0]), int(parts[1])


def parse_range(s: str) -> Tuple[float, float]:
    parts = [p.strip() for p in str(s).split(",")]
    if len(parts) == 1:
        return float(parts[0]), float(parts[0])
    if len(parts) != 2:
        raise ValueError(f"Bad weight range '{s}', expected like 1,5")
    return float(parts[0]), float(parts[1])


def parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = token.split("x")
        sizes.append((int(h), int(w)))
    return sizes


def parse_list(s: str) -> List[str]:
    return [t.strip() for t in s.split(",") if t.strip()]


# -------------------- logging -------------------- #

def configure_logging(verbose: bool = False) -> None:
    """Set up root logging for a CLI run (library modules never call this)."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
