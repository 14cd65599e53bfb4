# -*- coding: utf-8 -*-
"""
Stable priority queue: lowest key first, ties broken by insertion order.

The key is computed once, when an element is enqueued. Whether that means
"cheapest first" or "most expensive first" is up to the key function (negate
it to flip the direction); the queue only ever serves the smallest
(key, sequence) pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from ..errors import InvalidConstructionError
from .heap import BinaryHeap, INITIAL_CAPACITY

T = TypeVar("T")


@dataclass(frozen=True)
class FrontierEntry(Generic[T]):
    priority: Any
    sequence: int
    item: T = field(compare=False)


def _entry_compare(a: FrontierEntry, b: FrontierEntry) -> int:
    # min-heap on (priority, sequence): smaller pair belongs on top
    ka, kb = (a.priority, a.sequence), (b.priority, b.sequence)
    return (ka < kb) - (ka > kb)


class StablePriorityQueue(Generic[T]):
    def __init__(self, key: Callable[[T], Any], items: Optional[Iterable[T]] = None,
                 capacity: int = INITIAL_CAPACITY):
        if key is None or not callable(key):
            raise InvalidConstructionError("A key callable is required")
        self._key = key
        self._heap: BinaryHeap[FrontierEntry[T]] = BinaryHeap(capacity, _entry_compare)
        self._sequence = count()
        if items is not None:
            for item in items:
                self.enqueue(item)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def enqueue(self, item: T) -> FrontierEntry[T]:
        entry = FrontierEntry(self._key(item), next(self._sequence), item)
        self._heap.push(entry)
        return entry

    def dequeue(self) -> T:
        return self._heap.pop().item

    def peek(self) -> T:
        return self._heap.peek().item

    def clear(self) -> None:
        self._heap.clear()

    def __repr__(self) -> str:
        entries = sorted(self._heap.to_list(), key=lambda e: (e.priority, e.sequence))
        return f"StablePriorityQueue({[e.item for e in entries]!r})"
