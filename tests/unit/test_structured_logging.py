"""Tests for structured logging context."""

from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.project_notes.core.config import get_settings
from src.project_notes.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "test-request-123"


def test_bind_request_context_with_none(capturing_logger):
    """A missing correlation id binds nothing."""
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_bind_user_context_omits_email_by_default(capturing_logger):
    user_id = uuid4()
    bind_user_context(user_id, "ann@example.com")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == str(user_id)
    assert "user_email" not in kwargs


def test_bind_user_context_logs_email_when_enabled(capturing_logger, monkeypatch):
    monkeypatch.setenv("LOG_USER_EMAILS", "true")
    get_settings.cache_clear()
    try:
        bind_user_context(uuid4(), "ann@example.com")
        structlog.get_logger().info("test message")
    finally:
        get_settings.cache_clear()

    assert capturing_logger.calls[0].kwargs["user_email"] == "ann@example.com"


def test_clear_request_context(capturing_logger):
    bind_request_context("req-1")
    bind_user_context(uuid4())
    clear_request_context()
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs


async def test_request_id_logged_for_http_requests(capturing_logger, client):
    """Handler log events carry the request's correlation id."""
    request_id = uuid4().hex
    response = await client.get("/health", headers={"X-Request-ID": request_id})

    assert response.headers["X-Request-ID"] == request_id
    completed = [c for c in capturing_logger.calls if c.kwargs.get("event") == "request_completed"]
    assert completed
    assert completed[0].kwargs["request_id"] == request_id
    assert completed[0].kwargs["path"] == "/health"
