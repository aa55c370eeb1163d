# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Per-column summary statistics built from mergeable parts.

A :class:`Summary` bundles the individual accumulators for one column and is
itself mergeable field by field. :func:`summarize_frame` shows the intended
use: each row chunk of a :class:`pandas.DataFrame` is summarised on its own,
as an independent worker would, and the chunk results are merged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from .aggregate import merge_all
from .commute import Commute
from .frequency import Frequencies
from .minmax import MinMax
from .online import OnlineStats
from .unsorted import Unsorted
from .utils.coercion import is_unorderable, to_float
from .utils.validation import positive_int_or_none

logger = logging.getLogger("mergestats")

__all__ = ["Summary", "summarize_frame", "SUMMARY_FIELDS"]

SUMMARY_FIELDS = (
    "count",
    "nulls",
    "min",
    "max",
    "mean",
    "stddev",
    "variance",
    "median",
    "mode",
    "cardinality",
)


class Summary(Commute):
    """Composite accumulator for one column of numeric samples.

    ``None`` and NaN-like samples are counted as nulls and feed none of the
    parts, so mean and variance cover the present values only. A sample
    without a float conversion is rejected before any part changes.
    """

    def __init__(self, size_hint: Optional[int] = None) -> None:
        self.minmax = MinMax()
        self.moments = OnlineStats()
        self.frequencies = Frequencies(size_hint=size_hint)
        self.order = Unsorted(size_hint=size_hint)
        self._nulls = 0

    @property
    def nulls(self) -> int:
        return self._nulls

    def add(self, sample: Any) -> None:
        if sample is None or is_unorderable(sample):
            self._nulls += 1
            return
        value = to_float(sample)
        self.minmax.add(sample)
        self.moments.add(value)
        self.frequencies.add(sample)
        self.order.add(sample)

    def _merge_into(self, other: "Summary") -> None:
        self.minmax.merge(other.minmax)
        self.moments.merge(other.moments)
        self.frequencies.merge(other.frequencies)
        self.order.merge(other.order)
        self._nulls += other._nulls

    def clear(self) -> None:
        self.minmax.clear()
        self.moments.clear()
        self.frequencies.clear()
        self.order.clear()
        self._nulls = 0

    def __len__(self) -> int:
        return len(self.moments) + self._nulls

    def to_dict(self) -> Dict[str, Any]:
        """Return the statistics as a flat mapping keyed by :data:`SUMMARY_FIELDS`."""
        has_values = len(self.minmax) > 0
        return {
            "count": len(self),
            "nulls": self._nulls,
            "min": self.minmax.min(),
            "max": self.minmax.max(),
            "mean": self.moments.mean() if has_values else None,
            "stddev": self.moments.stddev() if has_values else None,
            "variance": self.moments.variance() if has_values else None,
            "median": self.order.median(),
            "mode": self.frequencies.mode(),
            "cardinality": self.frequencies.cardinality(),
        }


def _summarize_chunk(chunk: pd.DataFrame, size_hint: Optional[int]) -> List[Summary]:
    summaries = []
    for column in chunk.columns:
        summary = Summary(size_hint=size_hint)
        for value in chunk[column].tolist():
            summary.add(value.item() if isinstance(value, np.generic) else value)
        summaries.append(summary)
    return summaries


def summarize_frame(
    frame: pd.DataFrame,
    *,
    chunksize: Optional[int] = None,
    size_hint: Optional[int] = None,
) -> pd.DataFrame:
    """Summarise every column of ``frame``.

    Parameters
    ----------
    frame
        Input data; every column must hold numeric (or missing) values.
    chunksize
        Number of rows summarised per chunk. ``None`` summarises the frame in
        one pass. Chunk results are merged, so the output does not depend on
        this value beyond floating point rounding of mean and variance.
    size_hint
        Forwarded to the frequency table and sample buffer of each column.

    Returns
    -------
    pandas.DataFrame
        One row per input column, indexed by column name, with the columns
        listed in :data:`SUMMARY_FIELDS`.
    """

    step = positive_int_or_none(chunksize, name="chunksize") or max(len(frame), 1)
    per_column: List[List[Summary]] = [[] for _ in frame.columns]
    n_chunks = 0
    for start in range(0, len(frame), step):
        chunk = frame.iloc[start : start + step]
        for bucket, summary in zip(per_column, _summarize_chunk(chunk, size_hint)):
            bucket.append(summary)
        n_chunks += 1
    logger.debug(
        "Summarised %d columns over %d chunks", len(frame.columns), n_chunks
    )

    rows = []
    for bucket in per_column:
        merged = merge_all(bucket)
        if merged is None:
            merged = Summary(size_hint=size_hint)
        rows.append(merged.to_dict())
    return pd.DataFrame(
        rows, index=pd.Index(list(frame.columns), name="column"), columns=list(SUMMARY_FIELDS)
    )
