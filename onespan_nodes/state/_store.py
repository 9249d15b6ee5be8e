"""
Session state store — host-owned key/value protocol.

StateStore is what the tree engine hands to a node. It lives for one
authentication attempt, so implementations need no locking.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from onespan_nodes._types import StateValue


# ═══════════════════════════════════════════════════════════════════════════════
# Store Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class StateStore(Protocol):
    """
    String-keyed session state.

    Example — wrapping a host session object:

        class HostState(StateStore):
            def __init__(self, session: HostSession):
                self.session = session

            def get(self, key: str) -> StateValue | None:
                return self.session.shared.get(key)

            # ... other methods
    """

    def get(self, key: str) -> StateValue | None:
        """Value under key, None if absent."""
        ...

    def put(self, key: str, value: StateValue) -> None:
        """Set or replace value under key."""
        ...

    def remove(self, key: str) -> StateValue | None:
        """Delete key. Returns the removed value, None if absent."""
        ...

    def snapshot(self) -> dict[str, StateValue]:
        """Ordered copy of the whole state, for logging and host hand-off."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Store Builder
# ═══════════════════════════════════════════════════════════════════════════════

type GetFn = Callable[[str], StateValue | None]
type PutFn = Callable[[str, StateValue], None]
type RemoveFn = Callable[[str], StateValue | None]
type SnapshotFn = Callable[[], Mapping[str, StateValue]]


@dataclass(frozen=True)
class FunctionalStore:
    """
    Store built from functions.

    Example:
        store = store_from(
            get=session.shared.get,
            put=session.shared.__setitem__,
            remove=lambda key: session.shared.pop(key, None),
            snapshot=lambda: session.shared,
        )
    """

    _get: GetFn
    _put: PutFn
    _remove: RemoveFn
    _snapshot: SnapshotFn

    def get(self, key: str) -> StateValue | None:
        return self._get(key)

    def put(self, key: str, value: StateValue) -> None:
        self._put(key, value)

    def remove(self, key: str) -> StateValue | None:
        return self._remove(key)

    def snapshot(self) -> dict[str, StateValue]:
        return dict(self._snapshot())


def store_from(
    get: GetFn,
    put: PutFn,
    remove: RemoveFn,
    snapshot: SnapshotFn,
) -> FunctionalStore:
    """Create StateStore from functions."""
    return FunctionalStore(
        _get=get,
        _put=put,
        _remove=remove,
        _snapshot=snapshot,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Store
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class MemoryStore:
    """
    In-memory session state.

    Insertion order is preserved, like the host's shared state.
    """

    _values: dict[str, StateValue] = field(default_factory=dict[str, StateValue])

    @classmethod
    def of(cls, values: Mapping[str, StateValue] | None = None) -> MemoryStore:
        return cls(dict(values or {}))

    def get(self, key: str) -> StateValue | None:
        return self._values.get(key)

    def put(self, key: str, value: StateValue) -> None:
        self._values[key] = value

    def remove(self, key: str) -> StateValue | None:
        return self._values.pop(key, None)

    def snapshot(self) -> dict[str, StateValue]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "StateStore",
    "FunctionalStore",
    "store_from",
    "MemoryStore",
)
