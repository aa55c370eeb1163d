# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Lazily sorted samples for partially ordered data.

:class:`Unsorted` appends samples to a buffer and only sorts it when a
statistic is requested. The buffer carries an explicit clean/dirty flag:
every ``add``/``merge`` marks it dirty, the next query sorts it and marks it
clean, and further queries reuse that order.

Unlike :class:`mergestats.Sorted` this works on types without a total
ordering such as ``float``: NaN samples are kept, sort after all other
values, and count as one distinct value.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .commute import Commute
from .config import BUFFER_SIZE_HINT
from .ordering import Partial, median_on_sorted, mode_on_sorted
from .utils.validation import positive_int_or_none

logger = logging.getLogger("mergestats")

__all__ = ["Unsorted", "median", "mode"]


class Unsorted(Commute):
    """Mergeable, lazily sorted buffer of partially ordered samples.

    Parameters
    ----------
    size_hint : int, optional
        Expected number of samples. Advisory only; a DEBUG message is logged
        once the buffer grows past it. Defaults to
        :data:`mergestats.config.BUFFER_SIZE_HINT`.
    """

    def __init__(self, size_hint: Optional[int] = None) -> None:
        hint = positive_int_or_none(size_hint, name="size_hint")
        self.size_hint: int = hint if hint is not None else BUFFER_SIZE_HINT.get()
        self._data: List[Partial] = []
        self._dirty = False

    @property
    def is_stale(self) -> bool:
        """``True`` while the buffer holds samples added since the last sort."""
        return self._dirty

    def add(self, sample: Any) -> None:
        """Append a sample; the cached order becomes stale."""
        self._dirtied()
        self._data.append(Partial(sample))
        if len(self._data) == self.size_hint + 1:
            logger.debug("Sample buffer exceeded size hint of %d", self.size_hint)

    def _dirtied(self) -> None:
        self._dirty = True

    def _sort(self) -> None:
        if self._dirty:
            self._data.sort()
            self._dirty = False

    def sorted_values(self) -> List[Any]:
        """Return the samples in adapter order (NaN-like values last)."""
        self._sort()
        return [item.value for item in self._data]

    def cardinality(self) -> int:
        """Return the number of distinct samples; all NaN-like samples count once."""
        self._sort()
        distinct = 0
        previous: Optional[Partial] = None
        for item in self._data:
            if previous is None or item != previous:
                distinct += 1
            previous = item
        return distinct

    def mode(self) -> Optional[Any]:
        """Return the unique most frequent sample, or ``None``."""
        self._sort()
        found = mode_on_sorted(self._data)
        return None if found is None else found.value

    def median(self) -> Optional[float]:
        """Return the median as a float, ``None`` when the buffer is empty."""
        self._sort()
        return median_on_sorted(self._data, key=lambda item: item.value)

    def _merge_into(self, other: "Unsorted") -> None:
        self._dirtied()
        before = len(self._data)
        self._data.extend(other._data)
        if before <= self.size_hint < len(self._data):
            logger.debug("Sample buffer exceeded size hint of %d", self.size_hint)

    def clear(self) -> None:
        self._data = []
        self._dirty = False

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        state = "dirty" if self._dirty else "clean"
        return f"Unsorted(len={len(self._data)}, {state})"


def median(samples: Iterable[Any]) -> Optional[float]:
    """Compute the exact median of a stream; ``None`` for an empty stream.

    (This has time complexity ``O(n log n)`` and space complexity ``O(n)``.)
    """
    return Unsorted.from_iterable(samples).median()


def mode(samples: Iterable[Any]) -> Optional[Any]:
    """Compute the exact mode of a stream; ``None`` if there is no unique mode.

    (This has time complexity ``O(n log n)`` and space complexity ``O(n)``.)
    """
    return Unsorted.from_iterable(samples).mode()
