"""Command line access to the asset registry.

Examples::

    python -m asset_registry init
    python -m asset_registry create DEALER010 4321 5550001111 Active 800 0 Credit "opening balance"
    python -m asset_registry transfer DEALER010 1200
    python -m asset_registry list
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from asset_registry.core.config import get_settings
from asset_registry.core.container import ApplicationContainer
from asset_registry.core.logging import configure_logging
from asset_registry.modules.assets import Asset, AssetError, AssetRegistry
from asset_registry.modules.assets.codec import asset_to_document


def _dump(document: Any) -> str:
    return json.dumps(document, ensure_ascii=False, sort_keys=True)


def _render(asset: Asset) -> str:
    return _dump(asset_to_document(asset))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asset-registry", description="Manage dealer assets in the ledger")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="seed the ledger with the sample dealers")
    commands.add_parser("list", help="print every asset in key order")

    for name in ("exists", "read", "delete"):
        sub = commands.add_parser(name, help=f"{name} one asset")
        sub.add_argument("dealer_id")

    create = commands.add_parser("create", help="create a new asset")
    create.add_argument("dealer_id")
    create.add_argument("mpin")
    create.add_argument("msisdn")
    create.add_argument("status")
    create.add_argument("balance", type=int)
    create.add_argument("trans_amount", type=int)
    create.add_argument("trans_type")
    create.add_argument("remarks")

    update = commands.add_parser("update", help="overwrite every field of an existing asset")
    update.add_argument("dealer_id")
    update.add_argument("msisdn")
    update.add_argument("status")
    update.add_argument("balance", type=int)
    update.add_argument("mpin")
    update.add_argument("trans_amount", type=int)
    update.add_argument("trans_type")
    update.add_argument("remarks")

    transfer = commands.add_parser("transfer", help="set a new balance and print the old one")
    transfer.add_argument("dealer_id")
    transfer.add_argument("new_balance", type=int)

    return parser


async def run_command(registry: AssetRegistry, args: argparse.Namespace) -> Optional[str]:
    """Execute one parsed command and return what should be printed."""
    command = args.command
    if command == "init":
        await registry.init_ledger()
        return None
    if command == "exists":
        return "true" if await registry.asset_exists(args.dealer_id) else "false"
    if command == "read":
        return _render(await registry.read_asset(args.dealer_id))
    if command == "delete":
        await registry.delete_asset(args.dealer_id)
        return None
    if command == "create":
        await registry.create_asset(
            args.dealer_id,
            args.mpin,
            args.msisdn,
            args.status,
            args.balance,
            args.trans_amount,
            args.trans_type,
            args.remarks,
        )
        return None
    if command == "update":
        await registry.update_asset(
            args.dealer_id,
            args.msisdn,
            args.status,
            args.balance,
            args.mpin,
            args.trans_amount,
            args.trans_type,
            args.remarks,
        )
        return None
    if command == "transfer":
        return await registry.transfer_asset(args.dealer_id, args.new_balance)
    if command == "list":
        assets = await registry.get_all_assets()
        return _dump([asset_to_document(asset) for asset in assets])
    raise ValueError(f"unknown command: {command}")


async def _execute(container: ApplicationContainer, args: argparse.Namespace) -> Optional[str]:
    await container.startup()
    try:
        async with container.registry_scope() as registry:
            return await run_command(registry, args)
    finally:
        await container.shutdown()


def main(argv: Optional[Sequence[str]] = None, container: Optional[ApplicationContainer] = None) -> int:
    args = build_parser().parse_args(argv)
    if container is None:
        try:
            container = ApplicationContainer(settings=get_settings())
        except ValidationError as exc:
            print(f"error: invalid configuration: {exc}", file=sys.stderr)
            return 1
    configure_logging(container.settings)

    try:
        output = asyncio.run(_execute(container, args))
    except AssetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0
