"""Database infrastructure helpers (engine, sessions, table creation)."""

from .base import Base
from .session import dispose_engine, get_engine, get_session, init_db

__all__ = ["Base", "dispose_engine", "get_engine", "get_session", "init_db"]
