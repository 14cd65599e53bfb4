# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m tilesearch.cli.<name>`):

- run_search : one search on a random scenario, optional PNG
- benchmark  : every variant on the same scenarios, CSV + table
"""
__all__ = [
    "run_search",
    "benchmark",
]
