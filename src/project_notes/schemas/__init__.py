"""Request and response schemas."""

from src.project_notes.schemas.envelope import DataResponse, DeleteResult, ErrorResponse
from src.project_notes.schemas.note import (
    NoteCreate,
    NoteIdQuery,
    NoteRead,
    NotesQuery,
    NoteUpdate,
)
from src.project_notes.schemas.project import (
    ProjectCreate,
    ProjectIdQuery,
    ProjectRead,
    ProjectUpdate,
)

__all__ = [
    # Envelope
    "DataResponse",
    "DeleteResult",
    "ErrorResponse",
    # Projects
    "ProjectCreate",
    "ProjectIdQuery",
    "ProjectRead",
    "ProjectUpdate",
    # Notes
    "NoteCreate",
    "NoteIdQuery",
    "NoteRead",
    "NotesQuery",
    "NoteUpdate",
]
