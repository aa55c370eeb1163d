"""Utilities for converting samples to floating point and testing orderability."""

from __future__ import annotations

from typing import Any

import numpy as np

__all__ = ["to_float", "is_unorderable"]


def to_float(value: Any) -> float:
    """Return ``value`` converted to a 64-bit ``float``.

    Accepts Python numbers, NumPy scalars, ``Decimal`` and ``Fraction``. Raises
    ``TypeError`` for values without a numeric conversion; ``None`` and strings
    are refused rather than parsed.
    """

    if value is None or isinstance(value, (str, bytes)):
        raise TypeError(f"Cannot convert {type(value).__name__} sample to float")
    try:
        return float(np.float64(value))
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Cannot convert {type(value).__name__} sample to float"
        ) from exc


def is_unorderable(value: Any) -> bool:
    """Return ``True`` for values that do not compare equal to themselves.

    This is the NaN-like case (``float('nan')``, ``numpy.nan``,
    ``Decimal('NaN')``) where the ordering relation is undefined.
    """

    try:
        return bool(value != value)
    except (TypeError, ValueError):
        # Array-likes and exotic types with ambiguous truth values.
        return False
