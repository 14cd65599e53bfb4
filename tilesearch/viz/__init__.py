# -*- coding: utf-8 -*-
"""
Presentation layer: matplotlib rendering fed by search events.
"""

from __future__ import annotations

from .render import TileColors, render_search, save_search_figure, animate_search

__all__ = [
    "TileColors",
    "render_search",
    "save_search_figure",
    "animate_search",
]
