"""
Insert Transaction — submits a transaction to Risk Analytics for scoring.
"""

import json
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import cast

from kungfu import Result, Ok, Error

from onespan_nodes import graph as G
from onespan_nodes.client import ApiClient, ApiResponse, endpoints
from onespan_nodes.client import TransactionRequest, RiskReply, ErrorReply, decode
from onespan_nodes.config import ServiceConfig
from onespan_nodes.errors import NodeFault, ParseError
from onespan_nodes.log import get_logger
from onespan_nodes.nodes._base import (
    NodeOutcome,
    OutcomeEdge,
    edges,
    TreeContext,
    Action,
    Rejected,
    guarded,
)
from onespan_nodes.state import SharedState, keys

logger = get_logger(__name__)

MISSING_DATA = "Oopts, there are missing data for OneSpan Risk Insert Transaction Node!"
DECLINED = "OneSpan Risk Send Transaction: Request has been declined!"
INSERT_FAILED = "Fail to Insert Risk Transaction!"

ACCEPT_CODE = 0
DECLINE_CODE = 1

DEFAULT_ADAPTIVE_ATTRIBUTES: Mapping[str, str] = {
    name: name
    for name in (
        "accountRef",
        "amount",
        "currency",
        "transactionType",
        "creditorBank",
        "creditorIBAN",
        "creditorName",
        "debtorIBAN",
    )
}


class RiskOutcome(NodeOutcome):
    Accept = "Accept"
    Decline = "Decline"
    Challenge = "Challenge"
    Error = "Error"


@dataclass(frozen=True, slots=True)
class InsertTransactionConfig:
    """
    Per-node attributes.

    username_key: shared state key holding the IAA username.
    adaptive_attributes: wire name → shared state key, one per transaction field.
    """

    username_key: str = keys.DEFAULT_USERNAME
    adaptive_attributes: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_ADAPTIVE_ATTRIBUTES)
    )

    def __post_init__(self) -> None:
        if not self.username_key:
            raise ValueError("username_key is required")


# ═══════════════════════════════════════════════════════════════════════════════
# Collecting the transaction from shared state
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TransactionData:
    username: str
    attributes: dict[str, str]
    session_id: str
    ip: str
    fingerprint_hash: str
    fingerprint_raw: str

    def to_request(self, application_ref: str) -> TransactionRequest:
        return TransactionRequest.build(
            attributes=self.attributes,
            username=self.username,
            application_ref=application_ref,
            session_id=self.session_id,
            ip=self.ip,
            fingerprint_hash=self.fingerprint_hash,
            fingerprint_raw=self.fingerprint_raw,
        )


def new_session_id() -> str:
    """Random session id: the text of a uuid4, hex encoded."""
    return str(uuid.uuid4()).encode("utf-8").hex()


def collect(shared: SharedState, config: InsertTransactionConfig) -> TransactionData | None:
    """Gather everything the API needs. None if any piece is missing."""
    username = shared.text(config.username_key)
    missing = username is None

    attributes: dict[str, str] = {}
    for name, key in config.adaptive_attributes.items():
        value = shared.scalar_text(key)
        if value is None:
            missing = True
        else:
            attributes[name] = value

    session_id = shared.session_id or new_session_id()

    fingerprint = (shared.cddc_ip, shared.cddc_hash, shared.cddc_json)
    missing |= None in fingerprint

    if missing:
        return None
    ip, fingerprint_hash, fingerprint_raw = cast(tuple[str, str, str], fingerprint)
    return TransactionData(
        username=cast(str, username),
        attributes=attributes,
        session_id=session_id,
        ip=ip,
        fingerprint_hash=fingerprint_hash,
        fingerprint_raw=fingerprint_raw,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Error messages
# ═══════════════════════════════════════════════════════════════════════════════


def error_with_validation(message: str, correlation_id: str, validation: str, request: str) -> str:
    return f"{message} (log correlation ID: {correlation_id}) - validation error: {validation} - request: {request}"


def error_without_validation(message: str, correlation_id: str, request: str) -> str:
    return f"{message} (log correlation ID: {correlation_id}) - request: {request}"


# ═══════════════════════════════════════════════════════════════════════════════
# Remote step
# ═══════════════════════════════════════════════════════════════════════════════


async def _submit(
    client: ApiClient, service: ServiceConfig, data: TransactionData
) -> Result[int | Rejected, NodeFault]:
    url = service.url(endpoints.RISK_SEND_TRANSACTION)
    body = data.to_request(service.application_ref or "").to_body()
    match await client.post_json(url, body):
        case Ok(response):
            return _interpret(response, f"POST {url} : {json.dumps(body)}")
        case Error(fault):
            return Error(fault)


def _interpret(response: ApiResponse, request: str) -> Result[int | Rejected, NodeFault]:
    if response.success:
        match decode(RiskReply, response.json):
            case Ok(reply):
                return Ok(reply.risk_response_code)
            case Error(e):
                return Error(e)

    correlation_id = response.correlation_id
    if correlation_id is None:
        return Error(ParseError("Fail to parse response: no log correlation id", dict(response.json)))
    match decode(ErrorReply, response.json):
        case Ok(reply):
            validation = reply.validation_message
            if validation is not None:
                return Ok(Rejected(error_with_validation(reply.message, correlation_id, validation, request)))
            return Ok(Rejected(error_without_validation(reply.message, correlation_id, request)))
        case Error(e):
            return Error(e)


def route(code: int) -> RiskOutcome:
    if code == ACCEPT_CODE:
        return RiskOutcome.Accept
    if code == DECLINE_CODE:
        return RiskOutcome.Decline
    return RiskOutcome.Challenge


async def insert_transaction(
    shared: SharedState,
    client: ApiClient,
    service: ServiceConfig,
    config: InsertTransactionConfig,
) -> RiskOutcome:
    """Score the transaction in shared state and pick the edge."""
    # Later nodes find the username through this key, even when data is missing
    shared.username_key = config.username_key

    data = collect(shared, config)
    if data is None:
        logger.debug("InsertTransactionNode exception: %s", MISSING_DATA)
        logger.debug("%s", shared.snapshot())
        shared.error_message = MISSING_DATA
        return RiskOutcome.Error

    match await guarded(lambda: _submit(client, service, data)):
        case Ok(Rejected(message)):
            shared.error_message = message
            return RiskOutcome.Error
        case Ok(code):
            shared.risk_response_code = code
            outcome = route(code)
            if outcome is RiskOutcome.Decline:
                shared.error_message = DECLINED
            return outcome
        case Error(fault):
            logger.debug("InsertTransactionNode exception: %s", fault)
            shared.error_message = INSERT_FAILED
            return RiskOutcome.Error


@G.node
class InsertTransactionNode:
    """
    Risk Analytics Insert Transaction.

    Builds the transaction from the configured attributes, the device
    fingerprint (CDDC) and the session id, and routes on riskResponseCode.
    """

    Config = InsertTransactionConfig
    Outcome = RiskOutcome

    def __init__(self, action: Action[RiskOutcome]) -> None:
        self.action = action

    @classmethod
    async def __compose__(
        cls,
        context: TreeContext,
        client: ApiClient,
        service: ServiceConfig,
        config: InsertTransactionConfig,
    ) -> "InsertTransactionNode":
        logger.debug("InsertTransactionNode started")
        shared = context.shared_state
        outcome = await insert_transaction(shared, client, service, config)
        return cls(Action(outcome, shared))

    @classmethod
    def outcomes(cls) -> tuple[OutcomeEdge, ...]:
        return edges(RiskOutcome)


__all__ = (
    "RiskOutcome",
    "DEFAULT_ADAPTIVE_ATTRIBUTES",
    "InsertTransactionConfig",
    "TransactionData",
    "new_session_id",
    "collect",
    "error_with_validation",
    "error_without_validation",
    "route",
    "insert_transaction",
    "InsertTransactionNode",
)
