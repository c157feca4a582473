"""Repository for Project entity."""

from src.project_notes.models import Project
from src.project_notes.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for the owner's projects."""

    model = Project
