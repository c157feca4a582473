"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from src.project_notes.core.db.engine import get_engine

# Read by the row-level-security policies created in migration 001
CURRENT_USER_SETTING = "app.current_user_id"


async def _set_current_user(connection: AsyncConnection, user_id: str) -> None:
    await connection.execute(
        text("SELECT set_config(:name, :value, false)"),
        {"name": CURRENT_USER_SETTING, "value": user_id},
    )
    await connection.commit()


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Create an unscoped session (health checks, maintenance)."""
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@asynccontextmanager
async def get_user_session(
    user_id: UUID,
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncSession]:
    """Create a session whose statements run as the given user.

    On PostgreSQL the user id is stored in a connection setting so the
    row-level-security policies filter every statement, even with
    connection pooling. Other dialects (SQLite in tests) rely on the
    owner predicates in the repositories alone.

    Args:
        user_id: The authenticated user.
        engine: Optional engine override for testing.
    """
    if engine is None:
        engine = get_engine()

    async with engine.connect() as connection:
        scoped = connection.dialect.name == "postgresql"
        try:
            if scoped:
                await _set_current_user(connection, str(user_id))

            session_factory = async_sessionmaker(
                bind=connection,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            async with session_factory() as session:
                yield session
        finally:
            # Never hand a connection carrying a user id back to the pool
            if scoped and not connection.closed:
                await connection.rollback()
                await _set_current_user(connection, "")
