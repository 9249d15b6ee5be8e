"""
Realm service settings — tenant, environment and API endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(Enum):
    """OneSpan cloud environments (the value is the host label)."""

    SANDBOX = "sdb"
    PRODUCTION = "prod"


class OneSpanSettings(BaseSettings):
    """OneSpan service settings loaded from environment variables."""

    tenant_name: str
    environment: Environment = Environment.SANDBOX
    application_ref: str | None = None

    # Overrides the tenant/environment URL, e.g. for a proxy or a test server
    base_url: str | None = None

    timeout_seconds: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ONESPAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def to_service_config(self) -> ServiceConfig:
        return ServiceConfig(
            tenant_name=self.tenant_name,
            environment=self.environment,
            application_ref=self.application_ref,
            base_url=self.base_url,
        )


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """
    Immutable realm configuration nodes consume.

    Resolved once when the runner is built.
    """

    tenant_name: str
    environment: Environment = Environment.SANDBOX
    application_ref: str | None = None
    base_url: str | None = None

    @property
    def tenant_name_lower(self) -> str:
        return self.tenant_name.lower()

    @property
    def api_endpoint(self) -> str:
        """Base API URL for this tenant and environment, no trailing slash."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return f"https://{self.tenant_name_lower}.{self.environment.value}.tid.onespan.cloud"

    def url(self, path: str) -> str:
        return self.api_endpoint + path


__all__ = ("Environment", "OneSpanSettings", "ServiceConfig")
