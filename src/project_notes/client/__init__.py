"""Command line client for the project notes functions."""

from src.project_notes.client.api import (
    ApiData,
    ApiError,
    ApiResult,
    FunctionsClient,
    Note,
    NotesApi,
    Project,
    ProjectsApi,
)
from src.project_notes.client.config import ClientSettings, get_client_settings
from src.project_notes.client.session import AccessTokenSource, StaticTokenSession
from src.project_notes.client.views import NotesState, NotesView, ProjectsState, ProjectsView

__all__ = [
    # Wrapper
    "ApiData",
    "ApiError",
    "ApiResult",
    "FunctionsClient",
    "Note",
    "NotesApi",
    "Project",
    "ProjectsApi",
    # Configuration
    "ClientSettings",
    "get_client_settings",
    # Session
    "AccessTokenSource",
    "StaticTokenSession",
    # Views
    "NotesState",
    "NotesView",
    "ProjectsState",
    "ProjectsView",
]
