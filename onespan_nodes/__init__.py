"""
onespan_nodes — OneSpan authentication-tree nodes.

    from onespan_nodes import state as S    # Shared session state
    from onespan_nodes import client as API # OneSpan REST client
    from onespan_nodes import config as C   # Realm settings / registry
    from onespan_nodes import nodes as N    # The tree nodes

    built = await runner("alpha", C.EnvRegistry(), API.HttpxApiClient())
"""

from onespan_nodes import state
from onespan_nodes import client
from onespan_nodes import config
from onespan_nodes import nodes
from onespan_nodes import graph
from onespan_nodes import lift
from onespan_nodes._types import (
    Lazy,
    StateValue,
    JsonObject,
)
from onespan_nodes.errors import (
    TransportError,
    TransportErrorKind,
    ParseError,
    SetupError,
)
from onespan_nodes.log import configure_logging
from onespan_nodes.nodes import (
    TreeContext,
    Action,
    ActivationStatus,
    CheckActivationNode,
    SessionStatus,
    CheckSessionStatusNode,
    RiskOutcome,
    InsertTransactionConfig,
    InsertTransactionNode,
)
from onespan_nodes._runner import Runner, runner, precompile

__version__ = "0.1.0"

__all__ = (
    "state",
    "client",
    "config",
    "nodes",
    "graph",
    "lift",
    "Lazy",
    "StateValue",
    "JsonObject",
    "TransportError",
    "TransportErrorKind",
    "ParseError",
    "SetupError",
    "configure_logging",
    "TreeContext",
    "Action",
    "ActivationStatus",
    "CheckActivationNode",
    "SessionStatus",
    "CheckSessionStatusNode",
    "RiskOutcome",
    "InsertTransactionConfig",
    "InsertTransactionNode",
    "Runner",
    "runner",
    "precompile",
)
