"""Repository layer - data access abstraction."""

from src.project_notes.repositories.base import BaseRepository
from src.project_notes.repositories.note import NoteRepository
from src.project_notes.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "NoteRepository",
    "ProjectRepository",
]
