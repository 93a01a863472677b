"""Container and registry dependency providers."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from asset_registry.core.container import ApplicationContainer
from asset_registry.interfaces.http.errors import to_http_error
from asset_registry.modules.assets import AssetError, AssetRegistry


def get_app_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_asset_registry(
    container: ApplicationContainer = Depends(get_app_container),
) -> AsyncGenerator[AssetRegistry, None]:
    """Registry for one request; the unit of work commits when the endpoint returns.

    Routes depend on this with ``scope="function"`` so the commit (and any
    failure it raises) completes before the response is sent.
    """
    try:
        async with container.registry_scope() as registry:
            yield registry
    except AssetError as exc:
        raise to_http_error(exc) from exc


__all__ = [
    "get_app_container",
    "get_asset_registry",
]
