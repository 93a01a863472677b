"""Repository protocol for the ledger key-value store."""

from __future__ import annotations

from typing import AsyncContextManager, AsyncIterator, Protocol

LedgerEntry = tuple[str, bytes]


class LedgerStore(Protocol):
    """Abstract key-value interface the asset registry is built on.

    Every method raises :class:`~.exceptions.LedgerStoreError` when the
    backend fails. ``get`` returns ``None`` for an absent key.
    """

    async def get(self, key: str) -> bytes | None:
        ...

    async def put(self, key: str, value: bytes) -> None:
        ...

    async def delete(self, key: str) -> None:
        ...

    def scan(self, start_key: str, end_key: str) -> AsyncContextManager[AsyncIterator[LedgerEntry]]:
        """Iterate ``[start_key, end_key)`` in key order; empty bounds are open.

        The cursor is released when the context exits, on every exit path.
        """
        ...
