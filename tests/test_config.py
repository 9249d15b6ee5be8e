"""Realm settings and service registry."""

import pytest
from kungfu import Ok, Error

from onespan_nodes.config import (
    Environment,
    EnvRegistry,
    OneSpanSettings,
    ServiceConfig,
    StaticRegistry,
    resolve_service,
)
from onespan_nodes.errors import SetupError


class TestServiceConfig:
    def test_endpoint_from_tenant_and_environment(self) -> None:
        service = ServiceConfig(tenant_name="AcmeBank", environment=Environment.PRODUCTION)

        assert service.tenant_name_lower == "acmebank"
        assert service.api_endpoint == "https://acmebank.prod.tid.onespan.cloud"
        assert service.url("/v1/x") == "https://acmebank.prod.tid.onespan.cloud/v1/x"

    def test_base_url_override(self) -> None:
        service = ServiceConfig(tenant_name="AcmeBank", base_url="http://localhost:8080/")

        assert service.url("/v1/x") == "http://localhost:8080/v1/x"


class TestSettings:
    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ONESPAN_TENANT_NAME", "Globex")
        monkeypatch.setenv("ONESPAN_ENVIRONMENT", "prod")
        monkeypatch.setenv("ONESPAN_APPLICATION_REF", "tree-app")
        monkeypatch.delenv("ONESPAN_BASE_URL", raising=False)

        settings = OneSpanSettings(_env_file=None)  # type: ignore[call-arg]

        assert settings.environment is Environment.PRODUCTION
        assert settings.to_service_config() == ServiceConfig(
            tenant_name="Globex",
            environment=Environment.PRODUCTION,
            application_ref="tree-app",
        )

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            OneSpanSettings.model_validate({"tenant_name": "t", "timeout_seconds": 0})


class TestRegistry:
    async def test_static_registry_missing_realm(self) -> None:
        result = await resolve_service(StaticRegistry({}), "alpha")

        match result:
            case Error(SetupError(realm="alpha", message=message)):
                assert "no OneSpan service" in message
            case _:
                raise AssertionError(f"expected SetupError, got {result!r}")

    async def test_raising_registry_becomes_setup_error(self) -> None:
        class Broken:
            async def realm_singleton(self, realm: str):
                raise ConnectionError("config service down")

        result = await resolve_service(Broken(), "alpha")

        match result:
            case Error(SetupError(message="service lookup failed", cause=cause)):
                assert isinstance(cause, ConnectionError)
            case _:
                raise AssertionError(f"expected SetupError, got {result!r}")

    async def test_env_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ONESPAN_TENANT_NAME", "Initech")
        for name in ("ONESPAN_ENVIRONMENT", "ONESPAN_APPLICATION_REF", "ONESPAN_BASE_URL"):
            monkeypatch.delenv(name, raising=False)

        match await resolve_service(EnvRegistry(env_file=None), "any-realm"):
            case Ok(service):
                assert service == ServiceConfig(tenant_name="Initech")
            case Error(e):
                raise AssertionError(f"unexpected setup error: {e}")

    async def test_env_registry_without_tenant(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ONESPAN_TENANT_NAME", raising=False)

        result = await resolve_service(EnvRegistry(env_file=None), "alpha")

        match result:
            case Error(SetupError(message="invalid OneSpan settings")):
                pass
            case _:
                raise AssertionError(f"expected SetupError, got {result!r}")
