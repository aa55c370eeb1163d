# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Exact median and mode over totally ordered samples.

:class:`Sorted` stores every sample in a binary heap (``O(log n)`` insert) and
materialises a full sort when a statistic is requested. The materialised
order is cached until the next ``add``/``merge``. Time complexity of a query
after a mutation is ``O(n log n)``, space is ``O(n)``.
"""

from __future__ import annotations

import heapq
import math
from itertools import groupby
from typing import Any, Iterable, List, Optional

from .commute import Commute
from .ordering import median_on_sorted, mode_on_sorted

__all__ = ["Sorted", "median", "mode"]


class Sorted(Commute):
    """Mergeable multiset of totally ordered samples.

    Samples must support ``<`` and ``==`` consistently (integers, strings,
    tuples, ``Decimal`` without NaN, ...). Use :class:`mergestats.Unsorted`
    for floats that may be NaN.
    """

    def __init__(self) -> None:
        self._heap: List[Any] = []
        self._sorted: Optional[List[Any]] = []

    @property
    def is_stale(self) -> bool:
        """``True`` while samples added since the last query are unsorted."""
        return self._sorted is None

    def add(self, sample: Any) -> None:
        """Add a new element to the multiset."""
        heapq.heappush(self._heap, sample)
        self._sorted = None

    def extend(self, samples: Iterable[Any]) -> "Sorted":
        self._heap.extend(samples)
        heapq.heapify(self._heap)
        self._sorted = None
        return self

    def _materialise(self) -> List[Any]:
        if self._sorted is None:
            self._sorted = sorted(self._heap)
        return self._sorted

    def sorted_values(self) -> List[Any]:
        """Return the samples in ascending order."""
        return list(self._materialise())

    def median(self) -> float:
        """Return the median as a float; ``nan`` for an empty multiset."""
        result = median_on_sorted(self._materialise())
        return math.nan if result is None else result

    def mode(self) -> Optional[Any]:
        """Return the unique most frequent sample, or ``None``."""
        return mode_on_sorted(self._materialise())

    def cardinality(self) -> int:
        """Return the number of distinct samples."""
        return sum(1 for _ in groupby(self._materialise()))

    def _merge_into(self, other: "Sorted") -> None:
        # Bag union; duplicates from both sides are kept.
        self.extend(other._heap)

    def clear(self) -> None:
        self._heap = []
        self._sorted = []

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"Sorted(len={len(self._heap)})"


def median(samples: Iterable[Any]) -> float:
    """Compute the exact median of a stream of totally ordered numbers.

    (This has time complexity ``O(n log n)`` and space complexity ``O(n)``.)
    """
    return Sorted.from_iterable(samples).median()


def mode(samples: Iterable[Any]) -> Optional[Any]:
    """Compute the exact mode of a stream; ``None`` if there is no unique mode.

    (This has time complexity ``O(n log n)`` and space complexity ``O(n)``.)
    """
    return Sorted.from_iterable(samples).mode()
