"""
Base types shared by the tree nodes: outcomes, actions, the tree context.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol, Self

from kungfu import Result, Ok, Error

from onespan_nodes import lift as L
from onespan_nodes._types import StateValue
from onespan_nodes.errors import NodeFault, ParseError, TransportError, TransportErrorKind
from onespan_nodes.state import SharedState, MemoryStore


# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes
# ═══════════════════════════════════════════════════════════════════════════════


class NodeOutcome(Enum):
    """
    Closed outcome set of one node.

    The value is the edge name the host follows and, for statuses the
    API reports, the exact wire string.
    """

    @classmethod
    def parse(cls, value: object) -> Result[Self, ParseError]:
        """Exact match on value. Anything else is a parse error, never a default."""
        for member in cls:
            if member.value == value:
                return Ok(member)
        return Error(ParseError(f"Unknown {cls.__name__}: {value!r}", value))

    @property
    def label(self) -> str:
        return self.value[:1].upper() + self.value[1:]


@dataclass(frozen=True, slots=True)
class OutcomeEdge:
    """An outcome as the host draws it."""

    id: str
    label: str


def edges(outcome_type: type[NodeOutcome]) -> tuple[OutcomeEdge, ...]:
    return tuple(OutcomeEdge(o.value, o.label) for o in outcome_type)


# ═══════════════════════════════════════════════════════════════════════════════
# Tree context and actions
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TreeContext:
    """What the host hands a node for one step."""

    shared_state: SharedState

    @classmethod
    def of(cls, values: dict[str, StateValue] | None = None) -> TreeContext:
        return cls(SharedState(MemoryStore.of(values)))


@dataclass(frozen=True, slots=True)
class Action[O: NodeOutcome]:
    """A node's decision: the edge to follow and the state to carry on."""

    outcome: O
    shared_state: SharedState

    @property
    def edge(self) -> str:
        return self.outcome.value


# ═══════════════════════════════════════════════════════════════════════════════
# Remote step
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Rejected:
    """Application-level error reply that carried a usable message."""

    message: str


def _unexpected(e: Exception) -> TransportError:
    return TransportError(TransportErrorKind.UNEXPECTED, repr(e), e)


async def guarded[T](
    call: Callable[[], Awaitable[Result[T, NodeFault]]],
) -> Result[T, NodeFault]:
    """Run a node's remote step. Whatever it raises comes back as Error."""
    match await L.from_awaitable(call, on_error=_unexpected):
        case Ok(inner):
            return inner
        case Error(fault):
            return Error(fault)


@dataclass(frozen=True, slots=True)
class NoConfig:
    """Per-node attributes of nodes that have none."""


class TreeNode[O: NodeOutcome](Protocol):
    """What the runner needs from a node class."""

    Config: ClassVar[type]
    Outcome: ClassVar[type[NodeOutcome]]

    action: Action[O]


__all__ = (
    "NodeOutcome",
    "OutcomeEdge",
    "edges",
    "TreeContext",
    "Action",
    "Rejected",
    "guarded",
    "NoConfig",
    "TreeNode",
)
