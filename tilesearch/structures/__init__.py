# -*- coding: utf-8 -*-
"""
Frontier containers: a comparator-driven binary heap and a stable priority
queue built on top of it.
"""

from __future__ import annotations

from .heap import BinaryHeap, default_compare, reverse_compare, INITIAL_CAPACITY
from .priority_queue import StablePriorityQueue, FrontierEntry

__all__ = [
    "BinaryHeap",
    "default_compare",
    "reverse_compare",
    "INITIAL_CAPACITY",
    "StablePriorityQueue",
    "FrontierEntry",
]
