"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.project_notes.api.dependencies.auth import (
    AuthVerifierDep,
    CurrentUser,
    get_current_user,
)

# Database
from src.project_notes.api.dependencies.db import (
    DBSession,
    UserDBSession,
    get_db_session,
    get_user_db_session,
)

# Repositories
from src.project_notes.api.dependencies.repositories import (
    NoteRepo,
    ProjectRepo,
    get_note_repository,
    get_project_repository,
)

# Services
from src.project_notes.api.dependencies.services import (
    NoteServiceDep,
    ProjectServiceDep,
    get_note_service,
    get_project_service,
)

__all__ = [
    # Auth
    "AuthVerifierDep",
    "CurrentUser",
    "get_current_user",
    # Database
    "DBSession",
    "UserDBSession",
    "get_db_session",
    "get_user_db_session",
    # Repositories
    "NoteRepo",
    "ProjectRepo",
    "get_note_repository",
    "get_project_repository",
    # Services
    "NoteServiceDep",
    "ProjectServiceDep",
    "get_note_service",
    "get_project_service",
]
