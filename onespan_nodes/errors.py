"""
Error values.

Errors travel inside kungfu.Result; only setup failures ever reach the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


# ═══════════════════════════════════════════════════════════════════════════════
# Transport: the remote call itself failed
# ═══════════════════════════════════════════════════════════════════════════════


class TransportErrorKind(Enum):
    """Kinds of transport errors."""

    CONNECTION = auto()  # Could not reach the API / timed out
    DECODE = auto()  # Body is not a JSON object
    UNEXPECTED = auto()  # Anything else raised while calling


@dataclass(frozen=True, slots=True)
class TransportError:
    """Remote call failure, before any application-level parsing."""

    kind: TransportErrorKind
    message: str
    cause: Exception | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Parse: the response arrived but cannot be interpreted
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ParseError:
    """
    Unparseable remote response.

    Covers unknown enum values and error bodies missing the fields
    needed to build a structured message.
    """

    message: str
    payload: object = None

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Setup: realm configuration could not be resolved
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SetupError:
    """Realm service lookup failed. Fatal for the host."""

    realm: str
    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return f"realm {self.realm!r}: {self.message}"


type NodeFault = TransportError | ParseError
"""Anything that collapses a node to its generic error outcome."""


__all__ = (
    "TransportErrorKind",
    "TransportError",
    "ParseError",
    "SetupError",
    "NodeFault",
)
