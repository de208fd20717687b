"""Database helpers: engine/session for the SQL entities and schema creation."""

from .session import Base, get_engine, get_session
from .create_tables import create_all, drop_all

__all__ = ["Base", "get_engine", "get_session", "create_all", "drop_all"]
