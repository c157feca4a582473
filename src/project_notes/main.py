from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.project_notes.api.functions.router import functions_router
from src.project_notes.api.middlewares import setup_middlewares
from src.project_notes.core.config import get_settings
from src.project_notes.core.db import dispose_engine
from src.project_notes.core.exceptions import setup_exception_handlers
from src.project_notes.core.health import setup_health_endpoint, setup_metrics
from src.project_notes.core.logging import get_logger, setup_logging
from src.project_notes.core.security import close_auth_verifier

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("application_starting", app_name=settings.app_name)

    yield

    logger.info("Closing connections...")
    await close_auth_verifier()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Projects owned by the caller"},
    {"name": "notes", "description": "Notes inside the caller's projects"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Per-user projects and notes behind authenticated functions",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(functions_router, prefix=settings.functions_prefix)

    setup_health_endpoint(app)
    setup_metrics(app)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn (`project-notes-api`)."""
    settings = get_settings()
    uvicorn.run(
        "src.project_notes.main:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
        access_log=False,
    )
