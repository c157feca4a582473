"""Field validators for handler input.

Pure functions with no I/O. Each raises ``ValueError`` carrying the exact
message returned to the caller in ``{"error": ...}``.
"""

from typing import Final
from uuid import UUID

PROJECT_NAME_MAX_LENGTH: Final[int] = 100
NOTE_CONTENT_MAX_LENGTH: Final[int] = 5000


def validate_required_text(value: str | None, *, label: str, max_length: int) -> str:
    """Validate a required text field and return it trimmed.

    The length ceiling applies to the value as submitted, before trimming.

    Examples:
        >>> validate_required_text("  Trip ", label="Project name", max_length=100)
        'Trip'
        >>> validate_required_text("   ", label="Project name", max_length=100)
        Traceback (most recent call last):
        ...
        ValueError: Project name is required
    """
    if value is None or not value.strip():
        raise ValueError(f"{label} is required")
    if len(value) > max_length:
        raise ValueError(f"{label} is too long")
    return value.strip()


def validate_project_name(value: str | None) -> str:
    return validate_required_text(
        value, label="Project name", max_length=PROJECT_NAME_MAX_LENGTH
    )


def validate_note_content(value: str | None) -> str:
    return validate_required_text(
        value, label="Note content", max_length=NOTE_CONTENT_MAX_LENGTH
    )


def normalize_optional_text(value: str | None) -> str | None:
    """Trim an optional field; blank becomes None rather than ''."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_identifier(value: object, *, entity: str) -> UUID:
    """Parse a required record identifier.

    Args:
        value: Raw identifier from the body or query string.
        entity: Display name of the record type, e.g. "Project".

    Raises:
        ValueError: "<Entity> ID is required" when absent or blank,
            "Invalid <entity> ID" when not a UUID.
    """
    if isinstance(value, UUID):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{entity} ID is required")
    try:
        return UUID(str(value).strip())
    except ValueError as e:
        raise ValueError(f"Invalid {entity.lower()} ID") from e
