# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Merge contract shared by every accumulator.

An accumulator folds samples one at a time with ``add`` and combines with
another accumulator of the same kind through :meth:`Commute.merge`. The merge
must be associative, and the freshly constructed accumulator is its identity,
so partial results built on separate shards can be combined in any grouping.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Self, TypeVar

from .utils.errors import MergeError, MergeShapeError, MergeTypeError

logger = logging.getLogger("mergestats")

__all__ = ["Commute", "merge_optional", "merge_elementwise"]

C = TypeVar("C", bound="Commute")


class Commute(ABC):
    """Base class for mergeable accumulators.

    Subclasses implement :meth:`add`, :meth:`_merge_into`, :meth:`clear` and
    ``__len__``. The no-argument constructor must produce the identity element
    of the merge.

    ``merge`` consumes its operand: once ``a.merge(b)`` returns, ``b`` belongs
    to ``a`` and must not be used as an independent accumulator again. Use
    :meth:`clone` first when an operand is needed afterwards.
    """

    @abstractmethod
    def add(self, sample: Any) -> None:
        """Observe one sample."""

    @abstractmethod
    def _merge_into(self, other: Self) -> None:
        """Fold the state of ``other`` (same concrete type) into ``self``."""

    @abstractmethod
    def clear(self) -> None:
        """Reset to the identity element."""

    @abstractmethod
    def __len__(self) -> int: ...

    def merge(self, other: Self) -> Self:
        """Merge ``other`` into ``self`` in place and return ``self``.

        Raises
        ------
        MergeTypeError
            If ``other`` is not exactly the same accumulator type.
        MergeError
            If ``other`` is ``self``.
        """
        if type(other) is not type(self):
            logger.error(
                "Refusing to merge %s into %s",
                type(other).__name__,
                type(self).__name__,
            )
            raise MergeTypeError(
                f"Cannot merge {type(other).__name__} into {type(self).__name__}"
            )
        if other is self:
            raise MergeError("An accumulator cannot be merged into itself")
        self._merge_into(other)
        return self

    def consume(self, others: Iterable[Self]) -> Self:
        """Merge every accumulator of ``others`` into ``self``, left to right."""
        for other in others:
            self.merge(other)
        return self

    def extend(self, samples: Iterable[Any]) -> Self:
        """Add every sample of ``samples``."""
        for sample in samples:
            self.add(sample)
        return self

    def clone(self) -> Self:
        """Return an independent copy carrying the same state."""
        return copy.deepcopy(self)

    @classmethod
    def from_iterable(cls, samples: Iterable[Any], **kwargs: Any) -> Self:
        """Build a fresh accumulator from ``samples``."""
        acc = cls(**kwargs)
        acc.extend(samples)
        return acc


def merge_optional(left: Optional[C], right: Optional[C]) -> Optional[C]:
    """Merge two optional accumulators, treating ``None`` as the identity."""
    if left is None:
        return right
    if right is None:
        return left
    return left.merge(right)


def merge_elementwise(left: List[C], right: List[C]) -> List[C]:
    """Merge ``right[i]`` into ``left[i]`` for every position.

    Both lists describe the same fixed set of positions (for example one
    accumulator per column). A length mismatch means the two sides were built
    against different layouts and is rejected before any element is touched.
    """
    if len(left) != len(right):
        logger.error(
            "Positional merge length mismatch: %d != %d", len(left), len(right)
        )
        raise MergeShapeError(
            f"Cannot merge {len(right)} accumulators into {len(left)} positions"
        )
    for acc, other in zip(left, right):
        acc.merge(other)
    return left
