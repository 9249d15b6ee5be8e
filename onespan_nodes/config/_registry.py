"""
Service registry — realm-scoped lookup of OneSpan settings.

Lookups return Result. A failed lookup is the one error allowed to reach
the host, and it happens before any node logic runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from kungfu import Result, Ok, Error
from pydantic import ValidationError

from onespan_nodes import lift as L
from onespan_nodes.config._settings import OneSpanSettings, ServiceConfig
from onespan_nodes.errors import SetupError
from onespan_nodes.log import get_logger

logger = get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Registry Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceRegistry(Protocol):
    """Realm-scoped configuration service."""

    async def realm_singleton(self, realm: str) -> Result[OneSpanSettings, SetupError]:
        """Settings for realm. Error if the realm has no OneSpan service."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Implementations
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class StaticRegistry:
    """Registry backed by a realm → settings mapping."""

    _realms: Mapping[str, OneSpanSettings] = field(default_factory=dict[str, OneSpanSettings])

    async def realm_singleton(self, realm: str) -> Result[OneSpanSettings, SetupError]:
        settings = self._realms.get(realm)
        if settings is None:
            return Error(SetupError(realm, "no OneSpan service configured"))
        return Ok(settings)


@dataclass(frozen=True)
class EnvRegistry:
    """Registry that reads ONESPAN_* environment variables for every realm."""

    env_file: str | None = ".env"

    async def realm_singleton(self, realm: str) -> Result[OneSpanSettings, SetupError]:
        try:
            return Ok(OneSpanSettings(_env_file=self.env_file))  # type: ignore[call-arg]
        except ValidationError as e:
            return Error(SetupError(realm, "invalid OneSpan settings", e))


# ═══════════════════════════════════════════════════════════════════════════════
# resolve_service(): Registry → ServiceConfig
# ═══════════════════════════════════════════════════════════════════════════════


async def resolve_service(
    registry: ServiceRegistry,
    realm: str,
) -> Result[ServiceConfig, SetupError]:
    """
    Resolve the realm's ServiceConfig.

    Exceptions raised by the registry become Error(SetupError).
    """
    lookup = await L.from_awaitable(
        lambda: registry.realm_singleton(realm),
        on_error=lambda e: SetupError(realm, "service lookup failed", e),
    )
    match lookup:
        case Ok(Ok(settings)):
            return Ok(settings.to_service_config())
        case Ok(Error(error)) | Error(error):
            logger.error("OneSpan service lookup failed for %s", error)
            return Error(error)


__all__ = (
    "ServiceRegistry",
    "StaticRegistry",
    "EnvRegistry",
    "resolve_service",
)
