"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import dispose_engine, get_engine, init_db, session_scope

__all__ = ["Base", "dispose_engine", "get_engine", "init_db", "session_scope"]
