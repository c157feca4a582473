"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.project_notes.api.dependencies.auth import CurrentUser
from src.project_notes.core.db import get_session, get_user_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """Get an unscoped database session."""
    async with get_session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_user_db_session(user: CurrentUser) -> AsyncGenerator[AsyncSession]:
    """Get a database session running as the authenticated user.

    Depends on authentication, so an unauthenticated request never opens
    a connection.
    """
    async with get_user_session(user.id) as session:
        yield session


UserDBSession = Annotated[AsyncSession, Depends(get_user_db_session)]
