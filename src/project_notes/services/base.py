"""Helpers shared by the services."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.project_notes.core.logging import get_logger
from src.project_notes.core.result import Err

logger = get_logger(__name__)


async def store_failure(session: AsyncSession, operation: str, exc: SQLAlchemyError) -> Err:
    """Roll back and turn a store rejection into an ``Err``."""
    await session.rollback()
    err = Err.store_failure(exc)
    logger.warning("store_operation_failed", operation=operation, error=err.message)
    return err
