"""Note service - CRUD scoped to the authenticated owner."""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.project_notes.core.logging import get_logger
from src.project_notes.core.result import Err, Ok, Result
from src.project_notes.models import Note
from src.project_notes.repositories import NoteRepository, ProjectRepository
from src.project_notes.schemas.note import NoteCreate, NoteUpdate
from src.project_notes.services.base import store_failure

logger = get_logger(__name__)


class NoteService:
    """Note management service."""

    def __init__(
        self,
        note_repo: NoteRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.note_repo = note_repo
        self.project_repo = project_repo
        self.session = session

    async def list_notes(self, user_id: UUID, project_id: UUID) -> Result[list[Note]]:
        try:
            return Ok(await self.note_repo.list_for_project(project_id, user_id))
        except SQLAlchemyError as e:
            return await store_failure(self.session, "list_notes", e)

    async def create_note(self, user_id: UUID, data: NoteCreate) -> Result[Note]:
        """Attach a note to one of the caller's projects.

        The project is looked up with the owner predicate first, so the
        note's ``user_id`` always matches its project's owner.
        """
        try:
            project = await self.project_repo.get_owned(data.project_id, user_id)
            if project is None:
                return Err.not_found("Project")

            note = Note(project_id=project.id, user_id=user_id, content=data.content)
            self.note_repo.add(note)
            await self.session.commit()
        except SQLAlchemyError as e:
            return await store_failure(self.session, "create_note", e)

        logger.info("note_created", note_id=str(note.id), project_id=str(project.id))
        return Ok(note)

    async def update_note(self, user_id: UUID, data: NoteUpdate) -> Result[Note]:
        try:
            note = await self.note_repo.update_owned(data.id, user_id, {"content": data.content})
            if note is None:
                await self.session.rollback()
                return Err.not_found("Note")
            await self.session.commit()
        except SQLAlchemyError as e:
            return await store_failure(self.session, "update_note", e)

        logger.info("note_updated", note_id=str(note.id))
        return Ok(note)

    async def delete_note(self, user_id: UUID, note_id: UUID) -> Result[None]:
        try:
            deleted = await self.note_repo.delete_owned(note_id, user_id)
            if not deleted:
                await self.session.rollback()
                return Err.not_found("Note")
            await self.session.commit()
        except SQLAlchemyError as e:
            return await store_failure(self.session, "delete_note", e)

        logger.info("note_deleted", note_id=str(note_id))
        return Ok(None)
