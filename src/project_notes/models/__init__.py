"""Model exports.

Import from here: `from src.project_notes.models import Project, Note`
"""

from src.project_notes.models.note import Note
from src.project_notes.models.project import Project

__all__ = [
    "Note",
    "Project",
]
