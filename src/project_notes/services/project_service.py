"""Project service - CRUD scoped to the authenticated owner."""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.project_notes.core.logging import get_logger
from src.project_notes.core.result import Err, Ok, Result
from src.project_notes.models import Project
from src.project_notes.repositories import ProjectRepository
from src.project_notes.schemas.project import ProjectCreate, ProjectUpdate
from src.project_notes.services.base import store_failure

logger = get_logger(__name__)


class ProjectService:
    """Project management service.

    Inputs arrive already validated and trimmed. A project owned by another
    user is reported as "Project not found", the same as a missing one.
    """

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_projects(self, user_id: UUID) -> Result[list[Project]]:
        try:
            return Ok(await self.project_repo.list_owned(user_id))
        except SQLAlchemyError as e:
            return await store_failure(self.session, "list_projects", e)

    async def create_project(self, user_id: UUID, data: ProjectCreate) -> Result[Project]:
        project = Project(user_id=user_id, name=data.name, description=data.description)
        self.project_repo.add(project)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            return await store_failure(self.session, "create_project", e)

        logger.info("project_created", project_id=str(project.id))
        return Ok(project)

    async def get_project(self, user_id: UUID, project_id: UUID) -> Result[Project]:
        try:
            project = await self.project_repo.get_owned(project_id, user_id)
        except SQLAlchemyError as e:
            return await store_failure(self.session, "get_project", e)

        if project is None:
            return Err.not_found("Project")
        return Ok(project)

    async def update_project(self, user_id: UUID, data: ProjectUpdate) -> Result[Project]:
        try:
            project = await self.project_repo.update_owned(
                data.id,
                user_id,
                {"name": data.name, "description": data.description},
            )
            if project is None:
                await self.session.rollback()
                return Err.not_found("Project")
            await self.session.commit()
        except SQLAlchemyError as e:
            return await store_failure(self.session, "update_project", e)

        logger.info("project_updated", project_id=str(project.id))
        return Ok(project)

    async def delete_project(self, user_id: UUID, project_id: UUID) -> Result[None]:
        """Delete a project; its notes go with it (foreign key cascade)."""
        try:
            deleted = await self.project_repo.delete_owned(project_id, user_id)
            if not deleted:
                await self.session.rollback()
                return Err.not_found("Project")
            await self.session.commit()
        except SQLAlchemyError as e:
            return await store_failure(self.session, "delete_project", e)

        logger.info("project_deleted", project_id=str(project_id))
        return Ok(None)
