# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Total-order adapter and the run-walk algorithms over sorted data.

:class:`Partial` lifts a partially ordered value (a float that may be NaN, a
``Decimal`` that may be ``Decimal('NaN')``) into a total order: unorderable
values sort after everything else and compare equal to one another, while
all other pairs keep their natural ordering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from typing import Any, Callable, Iterable, Optional, Sequence

from .utils.coercion import is_unorderable, to_float

__all__ = ["Partial", "mode_on_sorted", "median_on_sorted"]


@dataclass(frozen=True, eq=False)
class Partial:
    """Wrapper giving a partially ordered value a deterministic total order.

    Values that are not equal to themselves are treated as maximal and
    mutually equal. Two ordinary values that are mutually incomparable (neither
    ``<`` nor ``==`` holds either way) still sort in an arbitrary order; that
    case is outside the NaN-style partial orders this adapter targets.
    """

    value: Any
    unorderable: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "unorderable", is_unorderable(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        if self.unorderable or other.unorderable:
            return self.unorderable and other.unorderable
        return bool(self.value == other.value)

    def __lt__(self, other: "Partial") -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        if self.unorderable:
            return False
        if other.unorderable:
            return True
        return bool(self.value < other.value)

    def __le__(self, other: "Partial") -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: "Partial") -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return other < self

    def __ge__(self, other: "Partial") -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return other < self or self == other

    def __hash__(self) -> int:
        if self.unorderable:
            return hash(Partial)
        return hash(self.value)


def mode_on_sorted(values: Iterable[Any]) -> Optional[Any]:
    """Return the value of the strictly longest run in sorted ``values``.

    Runs are walked in order. A run longer than the best so far becomes the
    candidate; a run as long as the best clears the candidate while the best
    length is kept, so only a strictly longer later run can restore a mode.
    Returns ``None`` for empty input or when the longest length is shared.
    """

    best_len = 0
    candidate: Optional[Any] = None
    unique = False
    for value, run in groupby(values):
        run_len = sum(1 for _ in run)
        if run_len > best_len:
            best_len = run_len
            candidate = value
            unique = True
        elif run_len == best_len:
            unique = False
    return candidate if unique else None


def median_on_sorted(
    data: Sequence[Any],
    key: Optional[Callable[[Any], Any]] = None,
) -> Optional[float]:
    """Return the median of sorted ``data`` as a float, ``None`` when empty.

    Even-length input averages the two middle elements. ``key`` maps stored
    elements back to the numeric sample (for example unwrapping
    :class:`Partial`).
    """

    n = len(data)
    if n == 0:
        return None
    unwrap = key if key is not None else (lambda item: item)
    mid = n // 2
    if n % 2 == 0:
        lower = to_float(unwrap(data[mid - 1]))
        upper = to_float(unwrap(data[mid]))
        return (lower + upper) / 2.0
    return to_float(unwrap(data[mid]))
