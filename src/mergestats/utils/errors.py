"""Project-specific exception hierarchy for accumulator merges."""

from __future__ import annotations


class MergeError(Exception):
    """Base class for merge contract violations."""


class MergeTypeError(MergeError, TypeError):
    """Accumulators of different concrete kinds were merged."""


class MergeShapeError(MergeError, ValueError):
    """Positional merge of accumulator sequences with mismatched lengths."""
