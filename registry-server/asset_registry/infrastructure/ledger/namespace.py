"""Key-prefixing wrapper for sharing a ledger store between registries."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from asset_registry.modules.assets.exceptions import LedgerStoreError
from asset_registry.modules.assets.repository import LedgerEntry, LedgerStore

SEPARATOR = ":"


class NamespacedLedgerStore(LedgerStore):
    """Confines every operation of ``inner`` to keys under ``namespace``.

    Keys are stored as ``<namespace>:<key>``; scans are clipped to that
    prefix range and return keys with the prefix stripped.
    """

    def __init__(self, inner: LedgerStore, namespace: str) -> None:
        if not namespace or SEPARATOR in namespace:
            raise ValueError(f"namespace must be non-empty and must not contain {SEPARATOR!r}")
        self._inner = inner
        self._prefix = namespace + SEPARATOR
        # Smallest string above every key that starts with the prefix.
        self._prefix_end = namespace + chr(ord(SEPARATOR) + 1)

    @property
    def prefix(self) -> str:
        return self._prefix

    def _key(self, key: str) -> str:
        return self._prefix + key

    async def get(self, key: str) -> bytes | None:
        return await self._inner.get(self._key(key))

    async def put(self, key: str, value: bytes) -> None:
        if not key:
            raise LedgerStoreError("ledger key must not be empty", key)
        await self._inner.put(self._key(key), value)

    async def delete(self, key: str) -> None:
        await self._inner.delete(self._key(key))

    @asynccontextmanager
    async def scan(self, start_key: str, end_key: str) -> AsyncIterator[AsyncIterator[LedgerEntry]]:
        upper = self._key(end_key) if end_key else self._prefix_end
        async with self._inner.scan(self._key(start_key), upper) as entries:
            yield self._strip(entries)

    async def _strip(self, entries: AsyncIterator[LedgerEntry]) -> AsyncIterator[LedgerEntry]:
        offset = len(self._prefix)
        async for key, value in entries:
            yield key[offset:], value
