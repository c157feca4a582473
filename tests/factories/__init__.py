"""Test factories for generating model instances."""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.project import NoteFactory, ProjectFactory

__all__ = [
    "BaseFactory",
    "NoteFactory",
    "ProjectFactory",
    "utc_now",
]
