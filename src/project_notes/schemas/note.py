"""Note schemas for request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.project_notes.core.validators import parse_identifier, validate_note_content


class NoteIdQuery(BaseModel):
    """Query string for delete-note."""

    id: UUID = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: object) -> UUID:
        return parse_identifier(v, entity="Note")


class NotesQuery(BaseModel):
    """Query string for get-notes."""

    project_id: UUID = Field(default=None, validate_default=True)

    @field_validator("project_id", mode="before")
    @classmethod
    def validate_project_id(cls, v: object) -> UUID:
        return parse_identifier(v, entity="Project")


class NoteCreate(BaseModel):
    """Body of create-note."""

    project_id: UUID = Field(default=None, validate_default=True)
    content: str = Field(default=None, validate_default=True)

    @field_validator("project_id", mode="before")
    @classmethod
    def validate_project_id(cls, v: object) -> UUID:
        return parse_identifier(v, entity="Project")

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: object) -> object:
        return validate_note_content(v) if v is None or isinstance(v, str) else v


class NoteUpdate(BaseModel):
    """Body of update-note. Only the content is mutable."""

    id: UUID = Field(default=None, validate_default=True)
    content: str = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: object) -> UUID:
        return parse_identifier(v, entity="Note")

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: object) -> object:
        return validate_note_content(v) if v is None or isinstance(v, str) else v


class NoteRead(BaseModel):
    """Note as returned to clients."""

    id: UUID
    project_id: UUID
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}
