"""Base repository for rows owned by a single user."""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select


class BaseRepository[ModelType: SQLModel]:
    """Owner-scoped data access.

    Every statement carries ``user_id = :owner`` next to its other
    predicates, so a row belonging to someone else behaves exactly like a
    missing row. Each method issues a single statement.

    Repositories handle data access only. Transaction control (commit)
    is done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_owned(self, id: UUID, user_id: UUID) -> ModelType | None:
        """Get a record by primary key if ``user_id`` owns it."""
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == id,  # type: ignore[attr-defined]
                self.model.user_id == user_id,  # type: ignore[attr-defined]
            )
        )
        return result.scalar_one_or_none()

    async def list_owned(self, user_id: UUID, *criteria: Any) -> list[ModelType]:
        """List the owner's records, newest first."""
        query = (
            select(self.model)
            .where(self.model.user_id == user_id, *criteria)  # type: ignore[attr-defined]
            .order_by(self.model.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def update_owned(
        self, id: UUID, user_id: UUID, values: dict[str, Any]
    ) -> ModelType | None:
        """Update an owned record in place and return the new row, or None."""
        result = await self.session.execute(
            update(self.model)
            .where(
                self.model.id == id,  # type: ignore[attr-defined]
                self.model.user_id == user_id,  # type: ignore[attr-defined]
            )
            .values(**values)
            .returning(self.model)
        )
        return result.scalar_one_or_none()

    async def delete_owned(self, id: UUID, user_id: UUID) -> bool:
        """Delete an owned record. Returns False when nothing matched."""
        result = await self.session.execute(
            delete(self.model)
            .where(
                self.model.id == id,  # type: ignore[attr-defined]
                self.model.user_id == user_id,  # type: ignore[attr-defined]
            )
            .returning(self.model.id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none() is not None
