"""In-process ledger store, used for tests and the ``memory`` backend."""

from __future__ import annotations

import bisect
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from asset_registry.modules.assets.exceptions import LedgerStoreError
from asset_registry.modules.assets.repository import LedgerEntry, LedgerStore


class InMemoryLedgerStore(LedgerStore):
    """Sorted key-value map with range scans.

    ``open_cursors`` counts scans whose context has not exited yet.
    """

    def __init__(self, entries: dict[str, bytes] | None = None) -> None:
        self._values: dict[str, bytes] = {}
        self._keys: list[str] = []
        self.open_cursors = 0
        for key, value in (entries or {}).items():
            self._store(key, value)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    async def get(self, key: str) -> bytes | None:
        return self._values.get(key)

    async def put(self, key: str, value: bytes) -> None:
        if not key:
            raise LedgerStoreError("ledger key must not be empty", key)
        self._store(key, bytes(value))

    async def delete(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            del self._keys[bisect.bisect_left(self._keys, key)]

    @asynccontextmanager
    async def scan(self, start_key: str, end_key: str) -> AsyncIterator[AsyncIterator[LedgerEntry]]:
        lo = bisect.bisect_left(self._keys, start_key) if start_key else 0
        hi = bisect.bisect_left(self._keys, end_key) if end_key else len(self._keys)
        # Snapshot so writes during iteration do not shift the cursor.
        snapshot = [(key, self._values[key]) for key in self._keys[lo:hi]]

        self.open_cursors += 1
        try:
            yield _iterate(snapshot)
        finally:
            self.open_cursors -= 1

    def _store(self, key: str, value: bytes) -> None:
        if key not in self._values:
            bisect.insort(self._keys, key)
        self._values[key] = value


async def _iterate(entries: list[LedgerEntry]) -> AsyncIterator[LedgerEntry]:
    for entry in entries:
        yield entry
