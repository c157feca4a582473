"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.project_notes.api.dependencies.db import UserDBSession
from src.project_notes.repositories import NoteRepository, ProjectRepository


def get_project_repository(session: UserDBSession) -> ProjectRepository:
    """Get project repository with the user's session."""
    return ProjectRepository(session)


def get_note_repository(session: UserDBSession) -> NoteRepository:
    """Get note repository with the user's session."""
    return NoteRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
NoteRepo = Annotated[NoteRepository, Depends(get_note_repository)]
