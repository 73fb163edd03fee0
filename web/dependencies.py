"""Shared database managers for request handlers."""

from debate_hall.database import DatabaseManager
from web.auth_database import AuthDatabaseManager

_debate_db: DatabaseManager | None = None
_auth_db: AuthDatabaseManager | None = None


def get_debate_db() -> DatabaseManager:
    """FastAPI dependency returning the debate database manager."""
    global _debate_db
    if _debate_db is None:
        _debate_db = DatabaseManager()
    return _debate_db


def get_auth_db() -> AuthDatabaseManager:
    """FastAPI dependency returning the auth database manager."""
    global _auth_db
    if _auth_db is None:
        _auth_db = AuthDatabaseManager()
    return _auth_db
