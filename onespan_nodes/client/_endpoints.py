"""API paths, relative to the tenant endpoint."""

from urllib.parse import quote

CHECK_ACTIVATION = "/v1/users/check-activation"
CHECK_SESSION_STATUS = "/v1/sessions/{request_id}/status"
RISK_SEND_TRANSACTION = "/v1/risk/transactions"

DEFAULT_CHECK_ACTIVATION_TIMEOUT = 60
"""Seconds the activation check may wait server-side."""


def check_session_status(request_id: str) -> str:
    return CHECK_SESSION_STATUS.format(request_id=quote(request_id, safe=""))


__all__ = (
    "CHECK_ACTIVATION",
    "CHECK_SESSION_STATUS",
    "RISK_SEND_TRANSACTION",
    "DEFAULT_CHECK_ACTIVATION_TIMEOUT",
    "check_session_status",
)
