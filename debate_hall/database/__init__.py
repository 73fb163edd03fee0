"""Database management module."""

from .database import (
    ArgumentData,
    DatabaseManager,
    DebateData,
    get_database_path,
    to_argument,
    to_debate,
)

__all__ = [
    "ArgumentData",
    "DatabaseManager",
    "DebateData",
    "get_database_path",
    "to_argument",
    "to_debate",
]
