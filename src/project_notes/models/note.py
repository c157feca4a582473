"""Note model - text attached to a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.project_notes.core.validators import NOTE_CONTENT_MAX_LENGTH
from src.project_notes.models.base import utc_now


class Note(SQLModel, table=True):
    """Note entity.

    ``user_id`` is a copy of the owning project's ``user_id``, written once at
    creation after the project's ownership has been checked.
    """

    __tablename__ = "notes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    user_id: UUID = Field(index=True)
    content: str = Field(max_length=NOTE_CONTENT_MAX_LENGTH)
    created_at: datetime = Field(default_factory=utc_now, index=True)
