"""
Property tests for the registry laws that must hold for any key set.
"""

import anyio
from hypothesis import given, settings
from hypothesis import strategies as st

from asset_registry.infrastructure.ledger import InMemoryLedgerStore
from asset_registry.modules.assets import AssetNotFoundError, AssetRegistry

dealer_ids = st.text(alphabet="ABCDEFGHIJ0123456789", min_size=1, max_size=8)


async def _create(registry: AssetRegistry, dealer_id: str, balance: int) -> None:
    await registry.create_asset(dealer_id, "0000", "5550001111", "Active", balance, 0, "Credit", "")


@given(st.sets(dealer_ids, max_size=25))
@settings(max_examples=40, deadline=None)
def test_enumeration_returns_each_created_key_once(keys):
    """
    PROPERTY: after creating N distinct keys, GetAllAssets returns N records,
    one per key, in key order.
    """

    async def scenario():
        registry = AssetRegistry(InMemoryLedgerStore())
        for key in keys:
            await _create(registry, key, len(key))
        return await registry.get_all_assets()

    listed = anyio.run(scenario)
    assert [a.dealer_id for a in listed] == sorted(keys)
    assert all(a.balance == len(a.dealer_id) for a in listed)


@given(st.sets(dealer_ids, min_size=1, max_size=15), st.data())
@settings(max_examples=40, deadline=None)
def test_deleted_keys_disappear_from_enumeration(keys, data):
    """
    PROPERTY: deleting a subset leaves exactly the complement enumerable,
    and every deleted key reads as NotFound.
    """
    removed = data.draw(st.sets(st.sampled_from(sorted(keys))))

    async def scenario():
        registry = AssetRegistry(InMemoryLedgerStore())
        for key in keys:
            await _create(registry, key, 0)
        for key in removed:
            await registry.delete_asset(key)
        missing = []
        for key in removed:
            try:
                await registry.read_asset(key)
            except AssetNotFoundError:
                missing.append(key)
        return await registry.get_all_assets(), missing

    listed, missing = anyio.run(scenario)
    assert [a.dealer_id for a in listed] == sorted(keys - removed)
    assert sorted(missing) == sorted(removed)


@given(st.integers(), st.integers())
@settings(max_examples=60, deadline=None)
def test_transfer_returns_previous_balance(start, new):
    """
    PROPERTY: TransferAsset(k, B1) on a record with balance B0 returns str(B0)
    and leaves B1 stored.
    """

    async def scenario():
        registry = AssetRegistry(InMemoryLedgerStore())
        await _create(registry, "DEALER001", start)
        old = await registry.transfer_asset("DEALER001", new)
        return old, await registry.read_asset("DEALER001")

    old, asset = anyio.run(scenario)
    assert old == str(start)
    assert asset.balance == new
    assert asset.msisdn == "5550001111"
