"""Response shaping - every body is ``{"data": ...}`` or ``{"error": ...}``."""

from collections.abc import Mapping
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from src.project_notes.core.result import Err, Ok, Result
from src.project_notes.schemas import ErrorResponse

# OpenAPI documentation for the error statuses every handler can return
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {
        "model": ErrorResponse,
        "description": "Validation failed or the store rejected the operation",
    },
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer credential"},
    500: {"model": ErrorResponse, "description": "Unexpected failure"},
}

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Record not found or not owned by the caller"},
}


def error_response(
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def respond(result: Result[Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Turn a service result into the handler's JSON response."""
    match result:
        case Ok(value=value):
            return JSONResponse(status_code=status_code, content={"data": jsonable_encoder(value)})
        case Err(message=message):
            return error_response(result.status_code, message)
