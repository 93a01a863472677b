"""Asset registry service: record lifecycle on top of a ledger store."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .codec import decode_asset, encode_asset
from .exceptions import AssetAlreadyExistsError, AssetNotFoundError
from .models import Asset
from .repository import LedgerStore

logger = logging.getLogger(__name__)

SAMPLE_ASSETS: tuple[Asset, ...] = (
    Asset("DEALER001", "1234567890", "1234", 10000, "Active", 5000, "Credit", "Initial deposit"),
    Asset("DEALER002", "0987654321", "5678", 15000, "Active", 2000, "Debit", "Payment for stock"),
    Asset("DEALER003", "1122334455", "9101", 25000, "Inactive", 3000, "Credit", "Refund from supplier"),
    Asset("DEALER004", "2233445566", "1213", 5000, "Active", 1000, "Debit", "Payment for delivery"),
    Asset("DEALER005", "3344556677", "1415", 20000, "Active", 7000, "Credit", "Monthly sales revenue"),
)


@dataclass(slots=True)
class AssetRegistry:
    store: LedgerStore

    @classmethod
    def with_session(cls, session: AsyncSession, namespace: str = "") -> "AssetRegistry":
        # 延迟导入，避免 infrastructure -> modules 循环依赖
        from asset_registry.infrastructure.database.repositories.ledger_repository import SqlLedgerStore
        from asset_registry.infrastructure.ledger import NamespacedLedgerStore

        store: LedgerStore = SqlLedgerStore(session)
        if namespace:
            store = NamespacedLedgerStore(store, namespace)
        return cls(store)

    async def init_ledger(self) -> None:
        """Write the sample dealers, overwriting any existing records under their keys."""
        for asset in SAMPLE_ASSETS:
            await self.store.put(asset.dealer_id, encode_asset(asset))
        logger.info("Seeded ledger with %d sample assets", len(SAMPLE_ASSETS))

    async def asset_exists(self, dealer_id: str) -> bool:
        return await self.store.get(dealer_id) is not None

    async def create_asset(
        self,
        dealer_id: str,
        mpin: str,
        msisdn: str,
        status: str,
        balance: int,
        trans_amount: int,
        trans_type: str,
        remarks: str,
    ) -> None:
        if await self.asset_exists(dealer_id):
            logger.warning("Rejected create of existing asset %s", dealer_id)
            raise AssetAlreadyExistsError(dealer_id)

        asset = Asset(
            dealer_id=dealer_id,
            msisdn=msisdn,
            mpin=mpin,
            balance=balance,
            status=status,
            trans_amount=trans_amount,
            trans_type=trans_type,
            remarks=remarks,
        )
        await self.store.put(dealer_id, encode_asset(asset))
        logger.info("Created asset %s", dealer_id)

    async def read_asset(self, dealer_id: str) -> Asset:
        data = await self.store.get(dealer_id)
        if data is None:
            raise AssetNotFoundError(dealer_id)
        return decode_asset(dealer_id, data)

    async def update_asset(
        self,
        dealer_id: str,
        msisdn: str,
        status: str,
        balance: int,
        mpin: str,
        trans_amount: int,
        trans_type: str,
        remarks: str,
    ) -> None:
        """Overwrite every field of an existing asset; nothing is merged."""
        await self._require_existing(dealer_id, "update")

        asset = Asset(
            dealer_id=dealer_id,
            msisdn=msisdn,
            mpin=mpin,
            balance=balance,
            status=status,
            trans_amount=trans_amount,
            trans_type=trans_type,
            remarks=remarks,
        )
        await self.store.put(dealer_id, encode_asset(asset))
        logger.info("Updated asset %s", dealer_id)

    async def delete_asset(self, dealer_id: str) -> None:
        await self._require_existing(dealer_id, "delete")
        await self.store.delete(dealer_id)
        logger.info("Deleted asset %s", dealer_id)

    async def transfer_asset(self, dealer_id: str, new_balance: int) -> str:
        """Set the balance of ``dealer_id`` and return the previous one as a decimal string."""
        asset = await self.read_asset(dealer_id)
        old_balance = asset.balance

        await self.store.put(dealer_id, encode_asset(asset.with_balance(new_balance)))
        logger.info("Transferred asset %s balance %d -> %d", dealer_id, old_balance, new_balance)
        return str(old_balance)

    async def get_all_assets(self) -> list[Asset]:
        # Open range on both ends covers the whole namespace.
        async with self.store.scan("", "") as entries:
            return [decode_asset(key, value) async for key, value in entries]

    async def _require_existing(self, dealer_id: str, action: str) -> None:
        if not await self.asset_exists(dealer_id):
            logger.warning("Rejected %s of missing asset %s", action, dealer_id)
            raise AssetNotFoundError(dealer_id)
