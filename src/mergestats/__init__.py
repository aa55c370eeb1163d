# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
mergestats: exact, mergeable descriptive statistics.

Every accumulator folds samples one at a time and merges with another
accumulator of the same kind, so statistics over sharded data can be computed
independently per shard and combined in any order.
"""

import logging

from .aggregate import fold, merge_all, merge_pairwise
from .commute import Commute, merge_elementwise, merge_optional
from .frequency import Frequencies
from .minmax import MinMax
from .online import OnlineStats, Variance, mean, stddev, variance
from .ordering import Partial
from .sorted import Sorted
from .unsorted import Unsorted
from .utils.errors import MergeError, MergeShapeError, MergeTypeError

logger = logging.getLogger("mergestats")

__version__ = "0.1.0"

__all__ = [
    "Commute",
    "Frequencies",
    "MinMax",
    "OnlineStats",
    "Variance",
    "Sorted",
    "Unsorted",
    "Partial",
    "MergeError",
    "MergeShapeError",
    "MergeTypeError",
    "merge_all",
    "merge_pairwise",
    "fold",
    "merge_optional",
    "merge_elementwise",
    "mean",
    "variance",
    "stddev",
]
