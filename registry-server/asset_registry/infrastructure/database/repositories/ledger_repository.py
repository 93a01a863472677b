"""SQLAlchemy implementation of the ledger store."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncResult, AsyncSession

from asset_registry.infrastructure.database.models import LedgerEntry as LedgerEntryModel
from asset_registry.modules.assets.exceptions import LedgerStoreError
from asset_registry.modules.assets.repository import LedgerEntry, LedgerStore

logger = logging.getLogger(__name__)


class SqlLedgerStore(LedgerStore):
    """Ledger store backed by the ``ledger_entries`` table.

    Statements are issued without loading ORM instances, so the session's
    identity map never holds a stale copy of a key.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, key: str) -> bytes | None:
        stmt = select(LedgerEntryModel.value).where(LedgerEntryModel.key == key)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise self._wrap("failed to read from world state", key, exc) from exc
        return result.scalar_one_or_none()

    async def put(self, key: str, value: bytes) -> None:
        if not key:
            raise LedgerStoreError("ledger key must not be empty", key)
        stmt = (
            update(LedgerEntryModel)
            .where(LedgerEntryModel.key == key)
            .values(value=value)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
            if result.rowcount == 0:
                await self._session.execute(insert(LedgerEntryModel).values(key=key, value=value))
        except SQLAlchemyError as exc:
            raise self._wrap("failed to put to world state", key, exc) from exc

    async def delete(self, key: str) -> None:
        stmt = (
            delete(LedgerEntryModel)
            .where(LedgerEntryModel.key == key)
            .execution_options(synchronize_session=False)
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise self._wrap("failed to delete from world state", key, exc) from exc

    @asynccontextmanager
    async def scan(self, start_key: str, end_key: str) -> AsyncIterator[AsyncIterator[LedgerEntry]]:
        stmt = select(LedgerEntryModel.key, LedgerEntryModel.value).order_by(LedgerEntryModel.key)
        if start_key:
            stmt = stmt.where(LedgerEntryModel.key >= start_key)
        if end_key:
            stmt = stmt.where(LedgerEntryModel.key < end_key)

        try:
            result = await self._session.stream(stmt)
        except SQLAlchemyError as exc:
            raise self._wrap("failed to open range query", None, exc) from exc

        entries = self._iterate(result)
        try:
            yield entries
        finally:
            await entries.aclose()
            await result.close()

    async def _iterate(self, result: AsyncResult) -> AsyncIterator[LedgerEntry]:
        try:
            async for key, value in result:
                yield key, value
        except SQLAlchemyError as exc:
            raise self._wrap("failed to iterate range query", None, exc) from exc

    @staticmethod
    def _wrap(message: str, key: str | None, exc: SQLAlchemyError) -> LedgerStoreError:
        logger.error("%s (key=%s): %s", message, key, exc)
        return LedgerStoreError(f"{message}: {exc}", key)
