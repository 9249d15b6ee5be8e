"""
Check Activation — polls the status of a pending device activation.
"""

from kungfu import Result, Ok, Error

from onespan_nodes import graph as G
from onespan_nodes.client import ApiClient, ApiResponse, endpoints
from onespan_nodes.client import CheckActivationRequest, ActivationStatusReply, ErrorReply, decode
from onespan_nodes.config import ServiceConfig
from onespan_nodes.errors import NodeFault
from onespan_nodes.log import get_logger
from onespan_nodes.nodes._base import (
    NodeOutcome,
    OutcomeEdge,
    edges,
    TreeContext,
    Action,
    Rejected,
    guarded,
    NoConfig,
)
from onespan_nodes.state import SharedState

logger = get_logger(__name__)

USERNAME_MISSING = "OneSpan Auth Check Activation: username is missing!"
TIMED_OUT = "OneSpan Auth Check Activation: Your session has timed out!"
STATUS_UNKNOWN = "OneSpan Auth Check Activation: Status Unknown!"
CHECK_FAILED = "OneSpan Auth Check Activation: Fail to check user's activation status!"


class ActivationStatus(NodeOutcome):
    pending = "pending"
    activated = "activated"
    timeout = "timeout"
    unknown = "unknown"
    error = "error"


async def _query(
    client: ApiClient, service: ServiceConfig, username: str
) -> Result[ActivationStatus | Rejected, NodeFault]:
    request = CheckActivationRequest(
        username=username,
        timeout=endpoints.DEFAULT_CHECK_ACTIVATION_TIMEOUT,
    )
    match await client.post_json(service.url(endpoints.CHECK_ACTIVATION), request.to_body()):
        case Ok(response):
            return _interpret(response)
        case Error(fault):
            return Error(fault)


def _interpret(response: ApiResponse) -> Result[ActivationStatus | Rejected, NodeFault]:
    if response.success:
        match decode(ActivationStatusReply, response.json):
            case Ok(reply):
                return ActivationStatus.parse(reply.activation_status)
            case Error(e):
                return Error(e)
    match decode(ErrorReply, response.json):
        case Ok(reply):
            return Ok(Rejected(reply.message))
        case Error(e):
            return Error(e)


async def check_activation(
    shared: SharedState, client: ApiClient, service: ServiceConfig
) -> ActivationStatus:
    """Decide the activation outcome; error causes are written as they happen."""
    stashed = shared.take_cronto_status()
    if stashed is not None:
        match ActivationStatus.parse(stashed):
            case Ok(status):
                if status is ActivationStatus.error and shared.error_message is None:
                    shared.error_message = CHECK_FAILED
                return status
            case Error(e):
                logger.debug("CheckActivationNode stashed status rejected: %s", e)
                shared.error_message = CHECK_FAILED
                return ActivationStatus.error

    username = shared.username
    if not username:
        shared.error_message = USERNAME_MISSING
        return ActivationStatus.error
    if shared.event_expired():
        return ActivationStatus.timeout

    match await guarded(lambda: _query(client, service, username)):
        case Ok(Rejected(message)):
            shared.error_message = message
            return ActivationStatus.error
        case Ok(ActivationStatus.error):
            shared.error_message = CHECK_FAILED
            return ActivationStatus.error
        case Ok(status):
            return status
        case Error(fault):
            logger.debug("CheckActivationNode exception: %s", fault)
            shared.error_message = CHECK_FAILED
            return ActivationStatus.error


def _settle(shared: SharedState, status: ActivationStatus) -> Action[ActivationStatus]:
    match status:
        case ActivationStatus.timeout:
            shared.error_message = TIMED_OUT
        case ActivationStatus.unknown:
            shared.error_message = STATUS_UNKNOWN
        case _:
            pass
    return Action(status, shared)


@G.node
class CheckActivationNode:
    """
    Check Activation Status.

    A status stashed by the activation callback wins over the API call.
    Otherwise needs the username and an unexpired event, then asks the
    API whether the device has been activated.
    """

    Config = NoConfig
    Outcome = ActivationStatus

    def __init__(self, action: Action[ActivationStatus]) -> None:
        self.action = action

    @classmethod
    async def __compose__(
        cls, context: TreeContext, client: ApiClient, service: ServiceConfig
    ) -> "CheckActivationNode":
        logger.debug("CheckActivationNode started")
        shared = context.shared_state
        status = await check_activation(shared, client, service)
        return cls(_settle(shared, status))

    @classmethod
    def outcomes(cls) -> tuple[OutcomeEdge, ...]:
        return edges(ActivationStatus)


__all__ = ("ActivationStatus", "check_activation", "CheckActivationNode")
