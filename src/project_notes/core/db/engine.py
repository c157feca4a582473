"""Async engine for the projects and notes store.

One engine per process. Connections are plain until a request session
stamps them with the caller's id (see ``session.py``), so pooled
connections never carry a user between requests.
"""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.project_notes.core.config import get_settings

_engine: AsyncEngine | None = None


def ssl_context_for(mode: str) -> ssl.SSLContext | None:
    """Map a libpq-style ``sslmode`` onto an SSL context for asyncpg.

    ``prefer`` and ``require`` encrypt without checking the certificate;
    ``verify-ca`` checks the chain and ``verify-full`` also the host name.
    """
    if mode == "disable":
        return None

    context = ssl.create_default_context()
    if mode in ("verify-ca", "verify-full"):
        context.check_hostname = mode == "verify-full"
        context.verify_mode = ssl.CERT_REQUIRED
    else:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def _connect_args() -> dict[str, Any]:
    settings = get_settings()
    # Shows up in pg_stat_activity next to the RLS-scoped queries
    connect_args: dict[str, Any] = {"server_settings": {"application_name": settings.app_name}}

    context = ssl_context_for(settings.database_ssl_mode)
    if context is not None:
        connect_args["ssl"] = context
    return connect_args


def get_engine() -> AsyncEngine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
            connect_args=_connect_args(),
        )
    return _engine


async def dispose_engine() -> None:
    """Close pooled connections. Called from the app lifespan on shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
