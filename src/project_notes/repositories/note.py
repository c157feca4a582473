"""Repository for Note entity."""

from uuid import UUID

from src.project_notes.models import Note
from src.project_notes.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """Repository for the owner's notes."""

    model = Note

    async def list_for_project(self, project_id: UUID, user_id: UUID) -> list[Note]:
        """List a project's notes, newest first.

        A project that does not exist (or is not the caller's) simply has
        no notes.
        """
        return await self.list_owned(user_id, Note.project_id == project_id)
