"""HttpxApiClient against an httpx mock transport."""

import json

import httpx
import pytest
from kungfu import Ok, Error

from onespan_nodes.client import CORRELATION_ID_HEADER, HttpxApiClient
from onespan_nodes.config import OneSpanSettings
from onespan_nodes.errors import TransportErrorKind

URL = "https://acmebank.sdb.tid.onespan.cloud/v1/users/check-activation"


def client_for(handler) -> HttpxApiClient:
    return HttpxApiClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestHttpxApiClient:
    async def test_post_sends_json_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"activationStatus": "pending"})

        match await client_for(handler).post_json(URL, {"username": "alice", "timeout": 60}):
            case Ok(response):
                assert response.success
                assert response.status_code == 200
                assert response.json == {"activationStatus": "pending"}
            case Error(e):
                raise AssertionError(f"unexpected transport error: {e}")

        assert seen[0].method == "POST"
        assert str(seen[0].url) == URL
        assert json.loads(seen[0].content) == {"username": "alice", "timeout": 60}

    async def test_error_status_is_not_a_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={"message": "Invalid request"},
                headers={CORRELATION_ID_HEADER: "cid-1"},
            )

        match await client_for(handler).get(URL):
            case Ok(response):
                assert not response.success
                assert response.status_code == 400
                assert response.correlation_id == "cid-1"
            case Error(e):
                raise AssertionError(f"unexpected transport error: {e}")

    @pytest.mark.parametrize("content", [b"<html>oops</html>", b"[1, 2, 3]"])
    async def test_non_object_body_is_a_decode_error(self, content: bytes) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, content=content)

        match await client_for(handler).get(URL):
            case Error(e):
                assert e.kind is TransportErrorKind.DECODE
            case Ok(response):
                raise AssertionError(f"expected decode error, got {response!r}")

    async def test_connection_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        match await client_for(handler).get(URL):
            case Error(e):
                assert e.kind is TransportErrorKind.CONNECTION
                assert isinstance(e.cause, httpx.ConnectError)
            case Ok(response):
                raise AssertionError(f"expected connection error, got {response!r}")

    async def test_nothing_is_sent_until_awaited(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        api = client_for(handler)
        pending = api.get(URL)
        assert seen == []

        await pending
        assert len(seen) == 1

    async def test_close_leaves_borrowed_client_open(self) -> None:
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))

        async with HttpxApiClient(http_client=http):
            pass

        assert not http.is_closed
        await http.aclose()

    async def test_from_settings_uses_configured_timeout(self) -> None:
        settings = OneSpanSettings.model_validate({"tenant_name": "t", "timeout_seconds": 5})

        async with HttpxApiClient.from_settings(settings) as api:
            assert api._ensure_client().timeout.read == 5
