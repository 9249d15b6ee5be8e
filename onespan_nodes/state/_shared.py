"""
SharedState — typed view over the session store.

Nodes never touch raw keys; every key they read or write has a named
accessor here.
"""

from __future__ import annotations

from datetime import datetime

from onespan_nodes._types import StateValue
from onespan_nodes.state import _keys as K
from onespan_nodes.state._expiry import has_expired
from onespan_nodes.state._store import StateStore, MemoryStore


class SharedState:
    """Named accessors over a StateStore."""

    __slots__ = ("_store",)

    def __init__(self, store: StateStore | None = None) -> None:
        self._store: StateStore = store if store is not None else MemoryStore()

    @classmethod
    def of(cls, **values: StateValue) -> SharedState:
        return cls(MemoryStore.of(values))

    @property
    def store(self) -> StateStore:
        return self._store

    # ── raw access ────────────────────────────────────────────────────────────

    def get(self, key: str) -> StateValue | None:
        return self._store.get(key)

    def text(self, key: str) -> str | None:
        """Value under key when it is a string."""
        value = self._store.get(key)
        return value if isinstance(value, str) else None

    def scalar_text(self, key: str) -> str | None:
        """String or number under key, rendered as text."""
        value = self._store.get(key)
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, int | float):
            return str(value)
        return None

    def snapshot(self) -> dict[str, StateValue]:
        return self._store.snapshot()

    # ── username ──────────────────────────────────────────────────────────────

    @property
    def username_key(self) -> str:
        """Key under which the username lives."""
        name = self.text(K.USERNAME_IN_SHARED_STATE)
        return name if name else K.DEFAULT_USERNAME

    @username_key.setter
    def username_key(self, name: str) -> None:
        self._store.put(K.USERNAME_IN_SHARED_STATE, name)

    @property
    def username(self) -> str | None:
        return self.text(self.username_key)

    # ── event ─────────────────────────────────────────────────────────────────

    @property
    def event_expiry(self) -> StateValue | None:
        return self._store.get(K.EVENT_EXPIRY_DATE)

    def event_expired(self, now: datetime | None = None) -> bool:
        return has_expired(self.event_expiry, now)

    @property
    def request_id(self) -> str | None:
        return self.text(K.REQUEST_ID)

    @property
    def session_id(self) -> str | None:
        return self.text(K.SESSION_ID)

    def take_cronto_status(self) -> str | None:
        """Consume the stashed activation status, if any."""
        status = self.text(K.CRONTO_STATUS)
        if status is not None:
            self._store.remove(K.CRONTO_STATUS)
        return status

    # ── device fingerprint (CDDC) ─────────────────────────────────────────────

    @property
    def cddc_ip(self) -> str | None:
        return self.scalar_text(K.CDDC_IP)

    @property
    def cddc_hash(self) -> str | None:
        return self.scalar_text(K.CDDC_HASH)

    @property
    def cddc_json(self) -> str | None:
        return self.scalar_text(K.CDDC_JSON)

    # ── node outputs ──────────────────────────────────────────────────────────

    @property
    def error_message(self) -> str | None:
        return self.text(K.ERROR_MESSAGE)

    @error_message.setter
    def error_message(self, message: str) -> None:
        self._store.put(K.ERROR_MESSAGE, message)

    @property
    def risk_response_code(self) -> int | None:
        code = self._store.get(K.RISK_RESPONSE_CODE)
        return code if isinstance(code, int) and not isinstance(code, bool) else None

    @risk_response_code.setter
    def risk_response_code(self, code: int) -> None:
        # Both names stay: downstream nodes read either one.
        self._store.put(K.RISK_RESPONSE_CODE, code)
        self._store.put(K.RISK_RESPONSE_CODE2, code)

    def __repr__(self) -> str:
        return f"SharedState({self.snapshot()!r})"


__all__ = ("SharedState",)
