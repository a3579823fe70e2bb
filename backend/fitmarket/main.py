# backend/fitmarket/main.py
from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST

from .core.config import settings
from .core.constants import API_DESCRIPTION, API_TITLE, API_V1_PREFIX, API_VERSION, BRAND_NAME
from .core.exceptions import DomainException
from .database import Base, engine
from .monitoring.prometheus_metrics import prometheus_metrics
from .routes.v1 import images as images_v1, resolve as resolve_v1

# Configure logging
logging.basicConfig(
    level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup/shutdown."""
    logger.info(f"{BRAND_NAME} API starting up...")
    logger.info(f"Environment: {settings.environment}")

    if not settings.is_production:
        # Local SQLite databases start empty
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=engine)

    yield

    logger.info(f"{BRAND_NAME} API shutting down...")
    engine.dispose()


async def _domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainException)
    http_exc = exc.to_http_exception()
    logger.info("Domain error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


def create_app() -> FastAPI:
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=app_lifespan,
    )
    app.add_exception_handler(DomainException, _domain_exception_handler)

    api_v1 = APIRouter(prefix=API_V1_PREFIX)
    api_v1.include_router(resolve_v1.router)
    api_v1.include_router(images_v1.router)
    app.include_router(api_v1)

    @app.get("/health", include_in_schema=False)
    def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": f"{BRAND_NAME.lower()}-api"}

    @app.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        return Response(
            content=prometheus_metrics.get_metrics(),
            media_type=CONTENT_TYPE_LATEST,
            headers={"Cache-Control": "no-store"},
        )

    return app


app = create_app()
