"""Tagged success/failure values returned by the service layer.

Expected outcomes travel as ``Err`` values instead of exceptions, so each
handler maps them to exactly one ``{"data": ...}`` or ``{"error": ...}``
response. Failures raised outside the services (bad credentials, invalid
input, crashes) are turned into ``Err`` values at the boundary that catches
them, so every error body comes from the same ``ErrorKind`` table.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

UNAUTHORIZED = "Unauthorized"


class ErrorKind(str, Enum):
    """Failure categories and the HTTP status each one maps to."""

    UNAUTHENTICATED = "unauthenticated"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"
    UNEXPECTED = "unexpected"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE_FAILURE: 400,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    def map[U](self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def map(self, fn: Callable[..., object]) -> "Err":
        return self

    @classmethod
    def not_found(cls, entity: str) -> "Err":
        return cls(ErrorKind.NOT_FOUND, f"{entity} not found")

    @classmethod
    def unauthenticated(cls) -> "Err":
        return cls(ErrorKind.UNAUTHENTICATED, UNAUTHORIZED)

    @classmethod
    def validation(cls, message: str) -> "Err":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def unexpected(cls, exc: Exception) -> "Err":
        return cls(ErrorKind.UNEXPECTED, str(exc) or "Internal server error")

    @classmethod
    def store_failure(cls, exc: SQLAlchemyError) -> "Err":
        return cls(ErrorKind.STORE_FAILURE, store_error_message(exc))


type Result[T] = Ok[T] | Err


def store_error_message(exc: SQLAlchemyError) -> str:
    """Return the driver's own message, without SQLAlchemy's statement dump."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)
