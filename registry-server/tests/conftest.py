"""
conftest.py - Shared pytest fixtures for asset registry tests

Provides:
- anyio backend selection (asyncio only)
- in-memory ledger stores and registries, empty and seeded
- settings / container builders for the HTTP and CLI adapters
"""

import pytest

from asset_registry.core.container import ApplicationContainer
from asset_registry.infrastructure.ledger import InMemoryLedgerStore
from asset_registry.modules.assets import AssetRegistry
from tests.helpers import memory_settings


@pytest.fixture
def anyio_backend():
    return "asyncio"


# =============================================================================
# STORES AND REGISTRIES
# =============================================================================

@pytest.fixture
def store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def registry(store: InMemoryLedgerStore) -> AssetRegistry:
    return AssetRegistry(store)


@pytest.fixture
async def seeded_registry(anyio_backend, registry: AssetRegistry) -> AssetRegistry:
    await registry.init_ledger()
    return registry


# =============================================================================
# ADAPTER WIRING
# =============================================================================

@pytest.fixture
def memory_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=memory_settings())
    container.init_infrastructure()
    return container
