"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.exc import SQLAlchemyError

from asset_registry.core.config import Settings, get_settings
from asset_registry.infrastructure.database import dispose_engine, get_engine, init_db, session_scope
from asset_registry.infrastructure.ledger import InMemoryLedgerStore, NamespacedLedgerStore
from asset_registry.modules.assets import AssetRegistry, LedgerStore, LedgerStoreError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    memory_store: InMemoryLedgerStore | None = None

    @property
    def uses_database(self) -> bool:
        return self.settings.ledger_backend == "sql"

    def init_infrastructure(self) -> None:
        """Ensure the configured ledger backend (engine or in-memory map) exists."""
        if self.uses_database:
            get_engine(self.settings)
        elif self.memory_store is None:
            self.memory_store = InMemoryLedgerStore()

    async def startup(self) -> None:
        self.init_infrastructure()
        if self.uses_database:
            await init_db(self.settings)

    async def shutdown(self) -> None:
        if self.uses_database:
            await dispose_engine()

    @asynccontextmanager
    async def registry_scope(self) -> AsyncIterator[AssetRegistry]:
        """Yield a registry bound to one unit of work on the ledger backend."""
        namespace = self.settings.ledger_namespace
        if self.uses_database:
            try:
                async with session_scope() as session:
                    yield AssetRegistry.with_session(session, namespace)
            except SQLAlchemyError as exc:
                # Statement failures are already LedgerStoreError; this is the commit.
                logger.error("failed to commit ledger changes: %s", exc)
                raise LedgerStoreError(f"failed to commit ledger changes: {exc}") from exc
        else:
            self.init_infrastructure()
            assert self.memory_store is not None
            store: LedgerStore = self.memory_store
            if namespace:
                store = NamespacedLedgerStore(store, namespace)
            yield AssetRegistry(store)


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer(settings=get_settings())


__all__ = ["ApplicationContainer", "get_container"]
