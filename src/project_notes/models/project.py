"""Project model - owned by a single user."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.project_notes.core.validators import PROJECT_NAME_MAX_LENGTH
from src.project_notes.models.base import utc_now


class Project(SQLModel, table=True):
    """Project entity.

    Visible and mutable only by ``user_id``. Deleting a project deletes its
    notes through the foreign key cascade on ``notes.project_id``.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(index=True)
    name: str = Field(max_length=PROJECT_NAME_MAX_LENGTH)
    description: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, index=True)
