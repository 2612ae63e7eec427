"""
Main entry point for citation-service.

Creates the FastAPI application instance for uvicorn:

    uvicorn citation_service.main:app --port 8090
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from citation_service import __version__
from citation_service.api.error_handlers import register_error_handlers
from citation_service.api.routes.citations import router as citations_router
from citation_service.api.routes.health import router as health_router
from citation_service.api.routes.health import set_service_start_time
from citation_service.core.config import get_settings
from citation_service.core.logging import configure_logging, get_logger


# Configure structured logging on module load
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    On startup: record start time for the health endpoint
    On shutdown: log
    """
    settings = get_settings()
    logger.info(
        "Starting citation-service",
        port=settings.port,
        default_style=settings.default_style.value,
        reject_unparsable_dates=settings.reject_unparsable_dates,
    )

    set_service_start_time()

    yield

    logger.info("Shutting down citation-service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers:
    - citations_router: /v1/citations endpoints
    - health_router: GET /health, /health/ready, /health/live
    """
    app = FastAPI(
        title="Citation Service",
        description="APA, MLA and Chicago citations for books and websites",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(citations_router)
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
