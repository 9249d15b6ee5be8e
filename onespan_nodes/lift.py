"""
Lift — Helpers for lifting values into kungfu results.

Re-exports from combinators.lift with node-specific additions.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from kungfu import LazyCoroResult

# Re-export from combinators.lift
from combinators.lift import catching_async


# ═══════════════════════════════════════════════════════════════════════════════
# Node helpers
# ═══════════════════════════════════════════════════════════════════════════════

def from_awaitable[T, E](
    awaitable_fn: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E],
) -> LazyCoroResult[T, E]:
    """
    Create LazyCoroResult from async function.

    Any exception raised by the awaitable becomes Error(on_error(exc)).
    """
    return catching_async(awaitable_fn, on_error=on_error)


__all__ = (
    # From combinators.lift
    "catching_async",
    # Node additions
    "from_awaitable",
)
