"""Test doubles shared by the node tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from kungfu import Result, Ok, Error, LazyCoroResult

from onespan_nodes.client import ApiResponse
from onespan_nodes.errors import TransportError, TransportErrorKind

PAST = "2000-01-01T00:00:00Z"
FUTURE = "2999-01-01T00:00:00Z"


@dataclass(frozen=True, slots=True)
class Call:
    method: str
    url: str
    body: Mapping[str, object] | None = None


def reply(json: Mapping[str, object], status: int = 200, correlation_id: str | None = None) -> ApiResponse:
    return ApiResponse(
        success=200 <= status < 300,
        status_code=status,
        json=dict(json),
        correlation_id=correlation_id,
    )


@dataclass
class FakeApiClient:
    """Records every call; answers with queued results (or raises)."""

    results: list[Result[ApiResponse, TransportError]] = field(default_factory=list)
    raises: Exception | None = None
    calls: list[Call] = field(default_factory=list)

    @classmethod
    def answering(cls, response: ApiResponse) -> FakeApiClient:
        return cls(results=[Ok(response)])

    @classmethod
    def unreachable(cls) -> FakeApiClient:
        return cls(results=[Error(TransportError(TransportErrorKind.CONNECTION, "connection refused"))])

    def _next(self) -> LazyCoroResult[ApiResponse, TransportError]:
        if self.raises is not None:
            exc = self.raises

            async def boom() -> Result[ApiResponse, TransportError]:
                raise exc

            return LazyCoroResult(boom)
        result = self.results.pop(0)

        async def answer() -> Result[ApiResponse, TransportError]:
            return result

        return LazyCoroResult(answer)

    def post_json(self, url: str, body: Mapping[str, object]) -> LazyCoroResult[ApiResponse, TransportError]:
        self.calls.append(Call("POST", url, dict(body)))
        return self._next()

    def get(self, url: str) -> LazyCoroResult[ApiResponse, TransportError]:
        self.calls.append(Call("GET", url))
        return self._next()
