"""Database utilities - engine, session, migrations."""

from src.project_notes.core.db.engine import dispose_engine, get_engine
from src.project_notes.core.db.migrations import run_migrations_async, run_migrations_sync
from src.project_notes.core.db.session import (
    CURRENT_USER_SETTING,
    get_session,
    get_user_session,
)

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    # Session
    "CURRENT_USER_SETTING",
    "get_session",
    "get_user_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
