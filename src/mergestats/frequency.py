# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Exact frequency counts.

:class:`Frequencies` keeps one counter per distinct sample, so memory grows
with the cardinality of the stream rather than its length. Samples must be
hashable.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, ItemsView, List, Optional, Tuple

from .commute import Commute
from .config import FREQUENCY_SIZE_HINT
from .utils.validation import positive_int_or_none

logger = logging.getLogger("mergestats")

__all__ = ["Frequencies"]


class Frequencies(Commute):
    """Mergeable table of occurrence counts per distinct value.

    Parameters
    ----------
    size_hint : int, optional
        Expected number of distinct values. Advisory only; a DEBUG message is
        logged once the table grows past it. Defaults to
        :data:`mergestats.config.FREQUENCY_SIZE_HINT`.
    """

    def __init__(self, size_hint: Optional[int] = None) -> None:
        hint = positive_int_or_none(size_hint, name="size_hint")
        self.size_hint: int = hint if hint is not None else FREQUENCY_SIZE_HINT.get()
        self._data: Dict[Hashable, int] = {}
        self._total = 0

    def add(self, sample: Hashable) -> None:
        """Increment the count of ``sample``."""
        data = self._data
        if sample in data:
            data[sample] += 1
        else:
            data[sample] = 1
            if len(data) == self.size_hint + 1:
                logger.debug(
                    "Frequency table exceeded size hint of %d distinct values",
                    self.size_hint,
                )
        self._total += 1

    def count(self, value: Hashable) -> int:
        """Return the number of occurrences of ``value`` (0 if never seen)."""
        return self._data.get(value, 0)

    def cardinality(self) -> int:
        """Return the number of distinct values."""
        return len(self._data)

    def most_frequent(self, limit: Optional[int] = None) -> List[Tuple[Hashable, int]]:
        """Return ``(value, count)`` pairs by descending count.

        Values with equal counts keep first-seen order, which callers must not
        rely on: after merges it reflects the merge order.
        """
        ranked = sorted(self._data.items(), key=lambda kv: kv[1], reverse=True)
        return ranked if limit is None else ranked[:limit]

    def least_frequent(self, limit: Optional[int] = None) -> List[Tuple[Hashable, int]]:
        """Return ``(value, count)`` pairs by ascending count."""
        ranked = sorted(self._data.items(), key=lambda kv: kv[1])
        return ranked if limit is None else ranked[:limit]

    def mode(self) -> Optional[Hashable]:
        """Return the value with strictly the highest count.

        ``None`` when the table is empty or the two highest counts are equal.
        """
        top = self.most_frequent(limit=2)
        if not top:
            return None
        if len(top) >= 2 and top[0][1] == top[1][1]:
            return None
        return top[0][0]

    def items(self) -> ItemsView[Hashable, int]:
        return self._data.items()

    def _merge_into(self, other: "Frequencies") -> None:
        data = self._data
        before = len(data)
        for value, count in other._data.items():
            data[value] = data.get(value, 0) + count
        self._total += other._total
        if before <= self.size_hint < len(data):
            logger.debug(
                "Frequency table exceeded size hint of %d distinct values",
                self.size_hint,
            )

    def clear(self) -> None:
        self._data = {}
        self._total = 0

    def __len__(self) -> int:
        return self._total

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frequencies):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Frequencies(cardinality={self.cardinality()}, total={self._total})"
