# -*- coding: utf-8 -*-
"""
Evaluation utilities: path metrics and reference oracles.
"""

from __future__ import annotations

from .metrics import (
    path_metrics,
    is_valid_path,
    hop_distances,
    jaccard,
    result_row,
)

__all__ = [
    "path_metrics", "is_valid_path", "hop_distances", "jaccard", "result_row",
]
