"""
Remote API client types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from onespan_nodes._types import JsonObject, Lazy
from onespan_nodes.errors import TransportError

CORRELATION_ID_HEADER = "log-correlation-id"


# ═══════════════════════════════════════════════════════════════════════════════
# ApiResponse: one decoded reply
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """
    Decoded API reply.

    success is the application-level flag (2xx). Lives for one node
    invocation only.
    """

    success: bool
    status_code: int
    json: JsonObject = field(default_factory=dict[str, object])
    correlation_id: str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# ApiClient Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class ApiClient(Protocol):
    """
    OneSpan REST client.

    Both calls are lazy: nothing is sent until the result is awaited.
    Transport faults come back as Error(TransportError), never raised.
    """

    def post_json(
        self, url: str, body: Mapping[str, object]
    ) -> Lazy[ApiResponse, TransportError]:
        ...

    def get(self, url: str) -> Lazy[ApiResponse, TransportError]:
        ...


__all__ = ("CORRELATION_ID_HEADER", "ApiResponse", "ApiClient")
