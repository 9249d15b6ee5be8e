"""
State — session-scoped key/value state shared along the tree.

    from onespan_nodes import state as S

    shared = S.SharedState(S.MemoryStore.of({"username": "alice"}))
    shared.username          # "alice"
    shared.error_message = "..."
"""

from onespan_nodes.state import _keys as keys
from onespan_nodes.state._store import (
    StateStore,
    FunctionalStore,
    store_from,
    MemoryStore,
)
from onespan_nodes.state._expiry import parse_expiry, has_expired
from onespan_nodes.state._shared import SharedState

__all__ = (
    "keys",
    "StateStore",
    "FunctionalStore",
    "store_from",
    "MemoryStore",
    "parse_expiry",
    "has_expired",
    "SharedState",
)
