"""Request logging context and the last-resort error boundary."""

import time

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.project_notes.api.responses import respond
from src.project_notes.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)
from src.project_notes.core.result import Err

logger = get_logger(__name__)


async def request_logging_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id to the log context and log each request once.

    Any exception escaping a handler becomes a 500 ``{"error": <message>}``
    here, inside the CORS middleware, so the response keeps its CORS headers.
    """
    clear_request_context()
    bind_request_context(correlation_id.get())
    started = time.perf_counter()
    try:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
            )
            response = respond(Err.unexpected(exc))

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response
    finally:
        clear_request_context()
