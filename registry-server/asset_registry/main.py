import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from asset_registry import __version__
from asset_registry.core.config import get_settings
from asset_registry.core.container import ApplicationContainer, get_container
from asset_registry.core.logging import configure_logging
from asset_registry.interfaces.http import create_api_router
from asset_registry.interfaces.http.deps import get_app_container
from asset_registry.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    configure_logging(container.settings)
    await container.startup()
    logger.info(
        "Asset registry started (backend=%s, namespace=%r)",
        container.settings.ledger_backend,
        container.settings.ledger_namespace,
    )
    yield
    await container.shutdown()


def create_app(container: ApplicationContainer | None = None) -> FastAPI:
    container = container or get_container()
    settings = container.settings

    app = FastAPI(
        title=settings.project_name,
        description="经销商资产账本服务",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse)
    async def health(current: ApplicationContainer = Depends(get_app_container)) -> HealthResponse:
        return HealthResponse(
            backend=current.settings.ledger_backend,
            namespace=current.settings.ledger_namespace,
        )

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "asset_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


app = create_app()
