"""
Config — realm settings and the registry that resolves them.

    from onespan_nodes import config as C

    registry = C.StaticRegistry({"alpha": C.OneSpanSettings(tenant_name="Acme")})
    service = await C.resolve_service(registry, "alpha")   # Result[ServiceConfig, SetupError]
"""

from onespan_nodes.config._settings import (
    Environment,
    OneSpanSettings,
    ServiceConfig,
)
from onespan_nodes.config._registry import (
    ServiceRegistry,
    StaticRegistry,
    EnvRegistry,
    resolve_service,
)

__all__ = (
    "Environment",
    "OneSpanSettings",
    "ServiceConfig",
    "ServiceRegistry",
    "StaticRegistry",
    "EnvRegistry",
    "resolve_service",
)
