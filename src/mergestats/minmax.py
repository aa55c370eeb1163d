# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""Running minimum, maximum and sample count."""

from __future__ import annotations

from typing import Any, Optional

from .commute import Commute

__all__ = ["MinMax"]


class MinMax(Commute):
    """Track the smallest and largest sample seen.

    Bounds only move on a strict comparison, so for partially ordered samples
    (for example floats with NaN) an incomparable value never displaces the
    current bound. Both bounds are ``None`` exactly when no sample was added.
    """

    def __init__(self) -> None:
        self._count = 0
        self._min: Optional[Any] = None
        self._max: Optional[Any] = None

    def add(self, sample: Any) -> None:
        self._count += 1
        if self._count == 1:
            self._min = sample
            self._max = sample
            return
        if sample < self._min:
            self._min = sample
        if sample > self._max:
            self._max = sample

    def min(self) -> Optional[Any]:
        """Return the minimum, ``None`` if and only if no samples were added."""
        return self._min

    def max(self) -> Optional[Any]:
        """Return the maximum, ``None`` if and only if no samples were added."""
        return self._max

    def _merge_into(self, other: "MinMax") -> None:
        if other._count == 0:
            return
        if self._count == 0:
            self._min, self._max = other._min, other._max
        else:
            if other._min < self._min:
                self._min = other._min
            if other._max > self._max:
                self._max = other._max
        self._count += other._count

    def clear(self) -> None:
        self._count = 0
        self._min = None
        self._max = None

    def __len__(self) -> int:
        return self._count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MinMax):
            return NotImplemented
        return (self._count, self._min, self._max) == (
            other._count,
            other._min,
            other._max,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MinMax(count={self._count}, min={self._min!r}, max={self._max!r})"

    def __str__(self) -> str:
        if self._count == 0:
            return "N/A"
        return f"[{self._min}, {self._max}]"
