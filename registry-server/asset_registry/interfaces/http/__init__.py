"""HTTP interface for the asset registry."""

from fastapi import APIRouter

from asset_registry.interfaces.http.routers import assets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(assets.router, tags=["资产"])
    return router


__all__ = [
    "create_api_router",
]
