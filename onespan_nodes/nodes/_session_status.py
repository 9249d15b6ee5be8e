"""
Check Session Status — polls the status of a previously created event.
"""

from kungfu import Result, Ok, Error

from onespan_nodes import graph as G
from onespan_nodes.client import ApiClient, ApiResponse, endpoints
from onespan_nodes.client import SessionStatusReply, ErrorReply, decode
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

REQUEST_ID_MISSING = "OneSpan Auth Check Session Status: Request ID is missing!"
CHECK_FAILED = "OneSpan Auth Check Session Status: Fail to check user's session status!"

STATUS_MESSAGES = {
    "refused": "OneSpan Auth Check Session Status: End user refused to validate the event!",
    "failure": "OneSpan Auth Check Session Status: End user failed to validate the event!",
    "timeout": "OneSpan Auth Check Session Status: The session has been expired!",
    "unknown": "OneSpan Auth Check Session Status: The event validation status is unknown!",
}


class SessionStatus(NodeOutcome):
    pending = "pending"
    accepted = "accepted"
    refused = "refused"
    failure = "failure"
    timeout = "timeout"
    unknown = "unknown"
    error = "error"


async def _query(
    client: ApiClient, service: ServiceConfig, request_id: str
) -> Result[SessionStatus | Rejected, NodeFault]:
    url = service.url(endpoints.check_session_status(request_id))
    match await client.get(url):
        case Ok(response):
            return _interpret(response)
        case Error(fault):
            return Error(fault)


def _interpret(response: ApiResponse) -> Result[SessionStatus | Rejected, NodeFault]:
    if response.success:
        match decode(SessionStatusReply, response.json):
            case Ok(reply):
                return SessionStatus.parse(reply.session_status)
            case Error(e):
                return Error(e)
    match decode(ErrorReply, response.json):
        case Ok(reply):
            return Ok(Rejected(reply.message))
        case Error(e):
            return Error(e)


async def check_session_status(
    shared: SharedState, client: ApiClient, service: ServiceConfig
) -> SessionStatus:
    """Decide the session outcome; error causes are written as they happen."""
    request_id = shared.request_id
    if not request_id:
        shared.error_message = REQUEST_ID_MISSING
        return SessionStatus.error
    if shared.event_expired():
        return SessionStatus.timeout

    match await guarded(lambda: _query(client, service, request_id)):
        case Ok(Rejected(message)):
            shared.error_message = message
            return SessionStatus.error
        case Ok(SessionStatus.error):
            shared.error_message = CHECK_FAILED
            return SessionStatus.error
        case Ok(status):
            return status
        case Error(fault):
            logger.debug("CheckSessionStatusNode exception: %s", fault)
            shared.error_message = CHECK_FAILED
            return SessionStatus.error


def _settle(shared: SharedState, status: SessionStatus) -> Action[SessionStatus]:
    message = STATUS_MESSAGES.get(status.value)
    if message is not None:
        shared.error_message = message
    return Action(status, shared)


@G.node
class CheckSessionStatusNode:
    """
    Check Session Status.

    Needs the request id of an earlier event and an unexpired event,
    then asks the API how the end user answered.
    """

    Config = NoConfig
    Outcome = SessionStatus

    def __init__(self, action: Action[SessionStatus]) -> None:
        self.action = action

    @classmethod
    async def __compose__(
        cls, context: TreeContext, client: ApiClient, service: ServiceConfig
    ) -> "CheckSessionStatusNode":
        logger.debug("CheckSessionStatusNode started")
        shared = context.shared_state
        status = await check_session_status(shared, client, service)
        return cls(_settle(shared, status))

    @classmethod
    def outcomes(cls) -> tuple[OutcomeEdge, ...]:
        return edges(SessionStatus)


__all__ = ("SessionStatus", "check_session_status", "CheckSessionStatusNode")
