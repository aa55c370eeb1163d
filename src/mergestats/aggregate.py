"""Reduce collections of same-kind accumulators into one."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from .commute import Commute

logger = logging.getLogger("mergestats")

__all__ = ["merge_all", "fold", "merge_pairwise"]

C = TypeVar("C", bound=Commute)


def merge_all(accumulators: Iterable[C]) -> Optional[C]:
    """Left-fold ``accumulators`` with ``merge``.

    Returns ``None`` when the iterable is empty; no identity is fabricated
    because the element type is unknown. The first accumulator is reused as
    the result and every other one is consumed.
    """

    iterator = iter(accumulators)
    try:
        result = next(iterator)
    except StopIteration:
        logger.debug("merge_all received no accumulators")
        return None
    merged = 1
    for acc in iterator:
        result.merge(acc)
        merged += 1
    logger.debug("Merged %d %s accumulators", merged, type(result).__name__)
    return result


def fold(
    accumulators: Iterable[C],
    identity: Union[C, Callable[[], C]],
) -> C:
    """Left-fold ``accumulators`` into ``identity``.

    Parameters
    ----------
    accumulators
        Accumulators of one concrete type.
    identity
        Either an accumulator to merge into, or a zero-argument factory (such
        as the accumulator class itself) producing the identity element.

    Returns
    -------
    Commute
        The identity merged with every accumulator; the identity itself when
        ``accumulators`` is empty.
    """

    result = identity if isinstance(identity, Commute) else identity()
    count = 0
    for acc in accumulators:
        result.merge(acc)
        count += 1
    logger.debug("Folded %d accumulators into %s", count, type(result).__name__)
    return result


def merge_pairwise(accumulators: Iterable[C]) -> Optional[C]:
    """Reduce ``accumulators`` as a balanced tree of pairwise merges.

    Adjacent accumulators are merged level by level, the shape a parallel
    reduction takes. Associativity of ``merge`` makes the result observably
    equal to :func:`merge_all`.
    """

    level: List[C] = list(accumulators)
    if not level:
        return None
    depth = 0
    while len(level) > 1:
        nxt: List[C] = []
        for idx in range(0, len(level) - 1, 2):
            nxt.append(level[idx].merge(level[idx + 1]))
        if len(level) % 2:
            nxt.append(level[-1])
        level = nxt
        depth += 1
    logger.debug("Pairwise reduction finished after %d levels", depth)
    return level[0]
