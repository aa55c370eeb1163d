"""Common validation helpers shared across mergestats modules."""

from __future__ import annotations

from typing import Any, Optional

__all__ = ["require", "positive_int_or_none"]


def require(condition: bool, message: str) -> None:
    """Raise ``ValueError`` when a required condition is not satisfied."""
    if not condition:
        raise ValueError(message)


def positive_int_or_none(value: Any, *, name: str) -> Optional[int]:
    """Return ``value`` as a positive ``int`` or ``None`` when unset.

    Booleans are rejected explicitly even though they are ``int`` subclasses.
    """

    if value is None:
        return None
    require(
        isinstance(value, int) and not isinstance(value, bool),
        f"{name} must be an integer, got {type(value).__name__}",
    )
    require(value > 0, f"{name} must be positive")
    return int(value)
