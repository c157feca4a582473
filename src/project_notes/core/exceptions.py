"""Exception handlers that answer with the ``{"error": ...}`` envelope."""

from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.project_notes.api.dependencies.auth import authenticate_request
from src.project_notes.api.responses import error_response, respond
from src.project_notes.core.logging import get_logger
from src.project_notes.core.result import Err

logger = get_logger(__name__)

INVALID_BODY = "Invalid request body"

_VALUE_ERROR_PREFIX = "Value error, "


def validation_error_message(error: Mapping[str, Any]) -> str:
    """Reduce one pydantic error to the message shown to clients.

    Validator failures carry the original ValueError in ``ctx``; its text
    ("Project name is required") is the message. Errors about the body as
    a whole (undecodable JSON, missing or non-object body) collapse to a
    generic message.
    """
    loc = tuple(error.get("loc", ()))
    if error.get("type") == "json_invalid" or loc == ("body",):
        return INVALID_BODY

    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        return str(ctx["error"])

    message = str(error.get("msg", INVALID_BODY))
    return message.removeprefix(_VALUE_ERROR_PREFIX)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers for HTTP and validation errors.

    Unexpected exceptions are handled by the request logging middleware so
    their responses still pass through the CORS middleware.
    """

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        # Undecodable bodies are rejected before any dependency has run
        if errors and errors[0].get("type") == "json_invalid":
            if await authenticate_request(request) is None:
                return respond(Err.unauthenticated())

        message = validation_error_message(errors[0]) if errors else INVALID_BODY
        logger.info("request_rejected", path=request.url.path, reason=message)
        return respond(Err.validation(message))
