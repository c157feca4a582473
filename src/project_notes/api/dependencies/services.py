"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.project_notes.api.dependencies.db import UserDBSession
from src.project_notes.api.dependencies.repositories import NoteRepo, ProjectRepo
from src.project_notes.services import NoteService, ProjectService


def get_project_service(project_repo: ProjectRepo, session: UserDBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_note_service(
    note_repo: NoteRepo,
    project_repo: ProjectRepo,
    session: UserDBSession,
) -> NoteService:
    return NoteService(note_repo, project_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
