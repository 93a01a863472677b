"""Reusable FastAPI dependencies."""

from .container import get_app_container, get_asset_registry

__all__ = [
    "get_app_container",
    "get_asset_registry",
]
