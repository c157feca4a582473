"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.project_notes.core.config import Settings

from .cors import CorsHeadersMiddleware
from .request_logging import request_logging_middleware

__all__ = [
    "setup_middlewares",
    "CorsHeadersMiddleware",
    "request_logging_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Each add_middleware call wraps the previous ones, so they are added
    innermost first.
    """

    # Request logging + unexpected error boundary (innermost)
    @app.middleware("http")
    async def _request_logging(request: Request, call_next: RequestResponseEndpoint) -> Response:
        return await request_logging_middleware(request, call_next)

    # CORS headers on every response, OPTIONS preflight short-circuit
    app.add_middleware(
        CorsHeadersMiddleware,
        allow_origin=settings.cors_allow_origin,
        allow_headers=settings.cors_allow_headers,
    )

    # Correlation ID - generates/propagates X-Request-ID (outermost)
    app.add_middleware(CorrelationIdMiddleware)
