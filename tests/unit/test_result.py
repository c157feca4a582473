"""Tests for service result values."""

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.project_notes.core.result import Err, ErrorKind, Ok, store_error_message

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("kind", "status_code"),
    [
        (ErrorKind.UNAUTHENTICATED, 401),
        (ErrorKind.VALIDATION, 400),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.STORE_FAILURE, 400),
        (ErrorKind.UNEXPECTED, 500),
    ],
)
def test_error_kind_status_codes(kind: ErrorKind, status_code: int):
    assert kind.status_code == status_code
    assert Err(kind, "x").status_code == status_code


def test_ok_map_transforms_value():
    assert Ok(2).map(lambda v: v * 3) == Ok(6)


def test_err_map_is_identity():
    err = Err.not_found("Project")
    assert err.map(lambda v: v * 3) is err
    assert err.message == "Project not found"
    assert err.kind is ErrorKind.NOT_FOUND


def test_store_error_uses_driver_message():
    exc = IntegrityError("INSERT INTO notes ...", {}, Exception("FOREIGN KEY constraint failed"))
    assert store_error_message(exc) == "FOREIGN KEY constraint failed"

    err = Err.store_failure(exc)
    assert err.kind is ErrorKind.STORE_FAILURE
    assert err.message == "FOREIGN KEY constraint failed"


def test_store_error_without_driver_error():
    assert store_error_message(SQLAlchemyError("pool exhausted")) == "pool exhausted"


def test_boundary_errors():
    assert Err.unauthenticated() == Err(ErrorKind.UNAUTHENTICATED, "Unauthorized")
    assert Err.validation("Note content is required").status_code == 400

    crash = Err.unexpected(RuntimeError("boom"))
    assert crash.kind is ErrorKind.UNEXPECTED
    assert crash.message == "boom"
    assert Err.unexpected(RuntimeError()).message == "Internal server error"
