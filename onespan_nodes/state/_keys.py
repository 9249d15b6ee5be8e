"""
Shared state keys.

Namespaced so OneSpan nodes never collide with other tree nodes.
"""

USERNAME_IN_SHARED_STATE = "ostid_username_in_shared_state"
"""Name of the key that holds the username (an indirection, set by the risk node)."""

DEFAULT_USERNAME = "username"

EVENT_EXPIRY_DATE = "ostid_event_expiry_date"
REQUEST_ID = "ostid_request_id"
SESSION_ID = "ostid_sessionid"

CRONTO_STATUS = "ostid_cronto_status"
"""Activation status stashed by the out-of-band callback path."""

CDDC_IP = "ostid_cddc_ip"
CDDC_HASH = "ostid_cddc_hash"
CDDC_JSON = "ostid_cddc_json"

RISK_RESPONSE_CODE = "ostid_risk_response_code"
RISK_RESPONSE_CODE2 = "ostid_irm_response"
"""Older name of the risk code, still read by downstream scripted nodes."""

ERROR_MESSAGE = "ostid_error_message"


__all__ = (
    "USERNAME_IN_SHARED_STATE",
    "DEFAULT_USERNAME",
    "EVENT_EXPIRY_DATE",
    "REQUEST_ID",
    "SESSION_ID",
    "CRONTO_STATUS",
    "CDDC_IP",
    "CDDC_HASH",
    "CDDC_JSON",
    "RISK_RESPONSE_CODE",
    "RISK_RESPONSE_CODE2",
    "ERROR_MESSAGE",
)
