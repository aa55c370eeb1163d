"""Tunable defaults for accumulator construction.

Values live in :class:`~contextvars.ContextVar` objects so a caller can
override them for one scope (or one worker task) without touching globals.
Explicit constructor arguments always win over the context value.
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Advisory capacity hints; CPython containers grow on demand.
FREQUENCY_SIZE_HINT: ContextVar[int] = ContextVar("FREQUENCY_SIZE_HINT", default=100_000)
BUFFER_SIZE_HINT: ContextVar[int] = ContextVar("BUFFER_SIZE_HINT", default=1000)


@contextmanager
def override(var: ContextVar, value):
    """Temporarily override a ContextVar within a scope."""
    token = var.set(value)
    try:
        yield
    finally:
        var.reset(token)
