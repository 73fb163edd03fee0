"""Database operations for authentication system."""

import logging
from typing import TypedDict

from debate_hall.database import DatabaseManager
from debate_hall.database.database import utc_timestamp

logger = logging.getLogger(__name__)


class UserData(TypedDict):
    """Type definition for user data."""
    id: int
    username: str
    password_hash: str
    created_at: str


class AuthDatabaseManager(DatabaseManager):
    """Database manager specifically for authentication operations."""

    def create_user(self, username: str, password_hash: str) -> int:
        """
        Create a new user account.

        Args:
            username: Unique, case-sensitive username
            password_hash: Bcrypt hashed password

        Returns:
            User ID of created user

        Raises:
            sqlite3.IntegrityError: If username already exists
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                """
                INSERT INTO users (username, password_hash, created_at)
                VALUES (?, ?, ?)
            """,
                (username, password_hash, utc_timestamp()),
            )

            user_id = cursor.lastrowid
            if user_id is None:
                raise RuntimeError("Failed to get user ID from database")

            conn.commit()
            logger.info(f"Created user account: {username}")
            return user_id

    def get_user_by_username(self, username: str) -> UserData | None:
        """Get user by username, or None if not found."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                "SELECT * FROM users WHERE username = ?",
                (username,)
            )
            row = cursor.fetchone()

            if not row:
                return None

            return {
                "id": row["id"],
                "username": row["username"],
                "password_hash": row["password_hash"],
                "created_at": row["created_at"],
            }

    def get_user_by_id(self, user_id: int) -> UserData | None:
        """Get user by ID, or None if not found."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                "SELECT * FROM users WHERE id = ?",
                (user_id,)
            )
            row = cursor.fetchone()

            if not row:
                return None

            return {
                "id": row["id"],
                "username": row["username"],
                "password_hash": row["password_hash"],
                "created_at": row["created_at"],
            }

    def username_exists(self, username: str) -> bool:
        """Check if username already exists."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                "SELECT 1 FROM users WHERE username = ?",
                (username,)
            )
            return cursor.fetchone() is not None
