"""Project schemas for request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.project_notes.core.validators import (
    normalize_optional_text,
    parse_identifier,
    validate_project_name,
)


class ProjectIdQuery(BaseModel):
    """Query string for get-project and delete-project."""

    id: UUID = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: object) -> UUID:
        return parse_identifier(v, entity="Project")


class ProjectCreate(BaseModel):
    """Body of create-project."""

    name: str = Field(default=None, validate_default=True)
    description: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: object) -> object:
        return validate_project_name(v) if v is None or isinstance(v, str) else v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return normalize_optional_text(v)


class ProjectUpdate(BaseModel):
    """Body of update-project. Replaces name and description.

    Field order is validation order: a missing id is reported before a bad name.
    """

    id: UUID = Field(default=None, validate_default=True)
    name: str = Field(default=None, validate_default=True)
    description: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: object) -> UUID:
        return parse_identifier(v, entity="Project")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: object) -> object:
        return validate_project_name(v) if v is None or isinstance(v, str) else v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return normalize_optional_text(v)


class ProjectRead(BaseModel):
    """Project as returned to clients."""

    id: UUID
    name: str
    description: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
