"""Asset registry endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from asset_registry.interfaces.http.deps import get_asset_registry
from asset_registry.interfaces.http.errors import to_http_error
from asset_registry.modules.assets import AssetError, AssetRegistry
from asset_registry.schemas import (
    AssetCreate,
    AssetExistsResponse,
    AssetListResponse,
    AssetResponse,
    AssetUpdate,
    TransferRequest,
    TransferResponse,
)

router = APIRouter()

# Function scope: the unit of work commits before the response goes out.
Registry = Depends(get_asset_registry, scope="function")


@router.post("/ledger/init", status_code=status.HTTP_204_NO_CONTENT, summary="写入示例资产")
async def init_ledger(registry: AssetRegistry = Registry) -> Response:
    try:
        await registry.init_ledger()
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/assets",
    response_model=AssetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="创建资产",
)
async def create_asset(
    payload: AssetCreate,
    registry: AssetRegistry = Registry,
) -> AssetResponse:
    try:
        await registry.create_asset(
            payload.dealer_id,
            payload.mpin,
            payload.msisdn,
            payload.status,
            payload.balance,
            payload.trans_amount,
            payload.trans_type,
            payload.remarks,
        )
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return AssetResponse.model_validate(payload.model_dump())


@router.get("/assets", response_model=AssetListResponse, summary="获取全部资产")
async def list_assets(registry: AssetRegistry = Registry) -> AssetListResponse:
    try:
        assets = await registry.get_all_assets()
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return AssetListResponse(
        total=len(assets),
        assets=[AssetResponse.model_validate(asset) for asset in assets],
    )


@router.get("/assets/{dealer_id}", response_model=AssetResponse, summary="获取资产详情")
async def read_asset(dealer_id: str, registry: AssetRegistry = Registry) -> AssetResponse:
    try:
        asset = await registry.read_asset(dealer_id)
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return AssetResponse.model_validate(asset)


@router.get("/assets/{dealer_id}/exists", response_model=AssetExistsResponse, summary="检查资产是否存在")
async def asset_exists(
    dealer_id: str,
    registry: AssetRegistry = Registry,
) -> AssetExistsResponse:
    try:
        exists = await registry.asset_exists(dealer_id)
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return AssetExistsResponse(dealer_id=dealer_id, exists=exists)


@router.put("/assets/{dealer_id}", response_model=AssetResponse, summary="覆盖更新资产")
async def update_asset(
    dealer_id: str,
    payload: AssetUpdate,
    registry: AssetRegistry = Registry,
) -> AssetResponse:
    try:
        await registry.update_asset(
            dealer_id,
            payload.msisdn,
            payload.status,
            payload.balance,
            payload.mpin,
            payload.trans_amount,
            payload.trans_type,
            payload.remarks,
        )
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return AssetResponse.model_validate({"dealer_id": dealer_id, **payload.model_dump()})


@router.delete("/assets/{dealer_id}", status_code=status.HTTP_204_NO_CONTENT, summary="删除资产")
async def delete_asset(dealer_id: str, registry: AssetRegistry = Registry) -> Response:
    try:
        await registry.delete_asset(dealer_id)
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/assets/{dealer_id}/transfer", response_model=TransferResponse, summary="修改资产余额")
async def transfer_asset(
    dealer_id: str,
    payload: TransferRequest,
    registry: AssetRegistry = Registry,
) -> TransferResponse:
    try:
        old_balance = await registry.transfer_asset(dealer_id, payload.new_balance)
    except AssetError as exc:
        raise to_http_error(exc) from exc
    return TransferResponse(dealer_id=dealer_id, old_balance=old_balance)
