"""
HttpxApiClient — ApiClient over httpx.AsyncClient.
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx
from kungfu import LazyCoroResult

from onespan_nodes import lift as L
from onespan_nodes.client._types import ApiResponse, CORRELATION_ID_HEADER
from onespan_nodes.config import OneSpanSettings
from onespan_nodes.errors import TransportError, TransportErrorKind
from onespan_nodes.log import get_logger

logger = get_logger(__name__)


class ResponseDecodeError(Exception):
    """Reply body is not a JSON object."""


def to_api_response(response: httpx.Response) -> ApiResponse:
    """
    Decode an httpx response.

    Raises ResponseDecodeError if the body is not a JSON object.
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise ResponseDecodeError(f"HTTP {response.status_code}: body is not JSON") from e
    if not isinstance(payload, dict):
        raise ResponseDecodeError(f"HTTP {response.status_code}: body is not a JSON object")
    return ApiResponse(
        success=response.is_success,
        status_code=response.status_code,
        json=payload,
        correlation_id=response.headers.get(CORRELATION_ID_HEADER),
    )


def _transport_error(e: Exception) -> TransportError:
    kind = TransportErrorKind.DECODE if isinstance(e, ResponseDecodeError) else TransportErrorKind.CONNECTION
    logger.debug("OneSpan API call failed: %r", e)
    return TransportError(kind, str(e) or type(e).__name__, e)


class HttpxApiClient:
    """
    OneSpan REST client.

    Owns its httpx.AsyncClient unless one is passed in; call close() when done.
    """

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(cls, settings: OneSpanSettings) -> HttpxApiClient:
        return cls(timeout_seconds=settings.timeout_seconds)

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxApiClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def post_json(
        self, url: str, body: Mapping[str, object]
    ) -> LazyCoroResult[ApiResponse, TransportError]:
        async def send() -> ApiResponse:
            logger.debug("POST %s", url)
            response = await self._ensure_client().post(url, json=dict(body))
            return to_api_response(response)

        return L.from_awaitable(send, on_error=_transport_error)

    def get(self, url: str) -> LazyCoroResult[ApiResponse, TransportError]:
        async def send() -> ApiResponse:
            logger.debug("GET %s", url)
            response = await self._ensure_client().get(url)
            return to_api_response(response)

        return L.from_awaitable(send, on_error=_transport_error)


__all__ = ("ResponseDecodeError", "to_api_response", "HttpxApiClient")
