"""
Core types for onespan_nodes.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Mapping

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Session State Values
# ═══════════════════════════════════════════════════════════════════════════════

type StateValue = str | int | float | bool
"""Anything a node may write into shared state."""

type JsonObject = Mapping[str, object]
"""Decoded JSON object from a remote response."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Lazy",
    "StateValue",
    "JsonObject",
)
