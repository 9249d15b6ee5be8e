"""
Tree nodes — one OneSpan API decision each.

- _activation.py       — CheckActivationNode (device activation polling)
- _session_status.py   — CheckSessionStatusNode (event validation polling)
- _risk_transaction.py — InsertTransactionNode (risk scoring)

Nodes share nothing but the tree context they are handed.
"""

from onespan_nodes.nodes._base import (
    NodeOutcome,
    OutcomeEdge,
    edges,
    TreeContext,
    Action,
    Rejected,
    guarded,
    NoConfig,
    TreeNode,
)
from onespan_nodes.nodes._activation import (
    ActivationStatus,
    check_activation,
    CheckActivationNode,
)
from onespan_nodes.nodes._session_status import (
    SessionStatus,
    check_session_status,
    CheckSessionStatusNode,
)
from onespan_nodes.nodes._risk_transaction import (
    RiskOutcome,
    DEFAULT_ADAPTIVE_ATTRIBUTES,
    InsertTransactionConfig,
    TransactionData,
    new_session_id,
    collect,
    route,
    insert_transaction,
    InsertTransactionNode,
)

__all__ = (
    # Base
    "NodeOutcome",
    "OutcomeEdge",
    "edges",
    "TreeContext",
    "Action",
    "Rejected",
    "guarded",
    "NoConfig",
    "TreeNode",
    # Activation
    "ActivationStatus",
    "check_activation",
    "CheckActivationNode",
    # Session status
    "SessionStatus",
    "check_session_status",
    "CheckSessionStatusNode",
    # Risk
    "RiskOutcome",
    "DEFAULT_ADAPTIVE_ATTRIBUTES",
    "InsertTransactionConfig",
    "TransactionData",
    "new_session_id",
    "collect",
    "route",
    "insert_transaction",
    "InsertTransactionNode",
)
