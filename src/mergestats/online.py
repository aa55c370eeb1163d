# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Single-pass mean and variance in constant space.

The update is Welford's recurrence, which avoids the catastrophic
cancellation of the ``E[x^2] - E[x]^2`` formulation. Partial results combine
with the pairwise formula of Chan, Golub and LeVeque, so shards can be
reduced in any order with agreement up to rounding.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

import numpy as np

from .commute import Commute
from .utils.coercion import to_float

__all__ = ["OnlineStats", "Variance", "mean", "variance", "stddev"]


class OnlineStats(Commute):
    """Running population size, mean and population variance."""

    def __init__(self) -> None:
        self._size = 0
        self._mean = 0.0
        self._variance = 0.0

    @classmethod
    def from_slice(cls, samples: Iterable[Any] | np.ndarray) -> "OnlineStats":
        """Initialise from a sequence or array of numeric samples."""
        if isinstance(samples, np.ndarray):
            samples = np.asarray(samples, dtype=np.float64).ravel().tolist()
        return cls.from_iterable(samples)

    def add(self, sample: Any) -> None:
        """Add one sample."""
        x = to_float(sample)
        old_mean = self._mean
        prev_q = self._variance * self._size

        self._size += 1
        self._mean += (x - old_mean) / self._size
        self._variance = (prev_q + (x - old_mean) * (x - self._mean)) / self._size

    def add_null(self) -> None:
        """Count a missing value; mean and variance are left untouched."""
        self._size += 1

    def mean(self) -> float:
        return self._mean

    def variance(self) -> float:
        """Population variance (second central moment over the size)."""
        return self._variance

    def stddev(self) -> float:
        return math.sqrt(self._variance)

    def _merge_into(self, other: "OnlineStats") -> None:
        if other._size == 0:
            return
        if self._size == 0:
            self._size = other._size
            self._mean = other._mean
            self._variance = other._variance
            return
        s1, s2 = float(self._size), float(other._size)
        total = s1 + s2
        mean_diff_sq = (self._mean - other._mean) * (self._mean - other._mean)
        merged_mean = (s1 * self._mean + s2 * other._mean) / total
        merged_var = (s1 * self._variance + s2 * other._variance) / total + (
            s1 * s2 * mean_diff_sq
        ) / (total * total)
        self._size += other._size
        self._mean = merged_mean
        self._variance = merged_var

    def clear(self) -> None:
        self._size = 0
        self._mean = 0.0
        self._variance = 0.0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return (
            f"OnlineStats(size={self._size}, mean={self._mean!r}, "
            f"variance={self._variance!r})"
        )

    def __str__(self) -> str:
        return f"{self._mean:.10g} +/- {self.stddev():.10g}"


# Older name of the accumulator.
Variance = OnlineStats


def mean(samples: Iterable[Any]) -> float:
    """Compute the mean of a stream in constant space."""
    return OnlineStats.from_iterable(samples).mean()


def variance(samples: Iterable[Any]) -> float:
    """Compute the population variance of a stream in constant space."""
    return OnlineStats.from_iterable(samples).variance()


def stddev(samples: Iterable[Any]) -> float:
    """Compute the population standard deviation of a stream in constant space."""
    return OnlineStats.from_iterable(samples).stddev()
