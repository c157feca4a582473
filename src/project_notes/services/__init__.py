"""Service layer - business logic returning ``Result`` values."""

from src.project_notes.services.note_service import NoteService
from src.project_notes.services.project_service import ProjectService

__all__ = [
    "NoteService",
    "ProjectService",
]
