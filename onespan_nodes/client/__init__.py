"""
Client — the OneSpan REST API as seen by the nodes.

    from onespan_nodes import client as API

    async with API.HttpxApiClient(timeout_seconds=10) as http:
        result = await http.get(service.url(API.endpoints.check_session_status(rid)))
        match result:
            case Ok(response): ...
            case Error(transport_error): ...
"""

from onespan_nodes.client import _endpoints as endpoints
from onespan_nodes.client._types import (
    CORRELATION_ID_HEADER,
    ApiResponse,
    ApiClient,
)
from onespan_nodes.client._httpx import (
    ResponseDecodeError,
    to_api_response,
    HttpxApiClient,
)
from onespan_nodes.client._wire import (
    CheckActivationRequest,
    TransactionRequest,
    ActivationStatusReply,
    SessionStatusReply,
    RiskReply,
    ErrorReply,
    decode,
)

__all__ = (
    "endpoints",
    "CORRELATION_ID_HEADER",
    "ApiResponse",
    "ApiClient",
    "ResponseDecodeError",
    "to_api_response",
    "HttpxApiClient",
    "CheckActivationRequest",
    "TransactionRequest",
    "ActivationStatusReply",
    "SessionStatusReply",
    "RiskReply",
    "ErrorReply",
    "decode",
)
