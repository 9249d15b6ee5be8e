"""Pytest configuration and shared fixtures for the node tests."""

import pytest

from onespan_nodes.config import Environment, ServiceConfig
from onespan_nodes.state import SharedState, MemoryStore


@pytest.fixture
def service() -> ServiceConfig:
    """Sandbox tenant with an application reference."""
    return ServiceConfig(
        tenant_name="AcmeBank",
        environment=Environment.SANDBOX,
        application_ref="forgerock-tree",
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def shared(store: MemoryStore) -> SharedState:
    return SharedState(store)
