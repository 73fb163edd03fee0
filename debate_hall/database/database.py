"""SQLite database manager for debates and their arguments."""

import logging
import sqlite3
from collections.abc import Iterable
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import TypedDict

from ..models import Argument, Debate
from ..types import Side
from .schema import SchemaManager

logger = logging.getLogger(__name__)


class DebateData(TypedDict):
    """A debate row."""

    id: int
    title: str
    description: str
    created_by: int | None
    created_at: str


class ArgumentData(TypedDict):
    """An argument row."""

    id: int
    debate_id: int
    side: str
    text: str
    author_name: str
    user_id: int | None
    created_at: str


def get_database_path() -> Path:
    """Resolve the database path from the application configuration."""
    from config.settings import get_default_config

    return Path(get_default_config().database.path)


def utc_timestamp() -> str:
    """Current UTC time as a sortable ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def to_debate(data: DebateData) -> Debate:
    """Convert a debate row to the domain model."""
    return Debate(
        id=data["id"],
        title=data["title"],
        description=data["description"],
        created_by=data["created_by"],
        created_at=datetime.fromisoformat(data["created_at"]),
    )


def to_argument(data: ArgumentData) -> Argument:
    """Convert an argument row to the immutable value scored by the engine."""
    return Argument(
        side=Side(data["side"]),
        text=data["text"],
        author_name=data["author_name"],
        created_at=datetime.fromisoformat(data["created_at"]),
    )


class DatabaseManager:
    """Manages SQLite connections and schema for debates and arguments."""

    def __init__(self, db_path: str | Path | None = None):
        self.db_path = get_database_path() if db_path is None else Path(db_path)
        self.schema_manager = SchemaManager()
        self._init_database()

    def _init_database(self):
        """Create all tables, including the auth tables."""
        if not self.schema_manager.validate_schema_files():
            raise RuntimeError("Database schema validation failed - missing schema files")

        with self._get_connection() as conn:
            cursor = conn.cursor()
            self.schema_manager.initialize_database_schema(cursor)
            conn.commit()
            logger.info(f"Database initialized at {self.db_path}")

    @contextmanager
    def _get_connection(self):
        """Get a database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            logger.error(f"Database error: {e}")
            raise
        finally:
            if conn:
                conn.close()

    @staticmethod
    def _debate_row(row: sqlite3.Row) -> DebateData:
        return {
            "id": row["id"],
            "title": row["title"],
            "description": row["description"],
            "created_by": row["created_by"],
            "created_at": row["created_at"],
        }

    @staticmethod
    def _argument_row(row: sqlite3.Row) -> ArgumentData:
        return {
            "id": row["id"],
            "debate_id": row["debate_id"],
            "side": row["side"],
            "text": row["text"],
            "author_name": row["author_name"],
            "user_id": row["user_id"],
            "created_at": row["created_at"],
        }

    def create_debate(
        self, title: str, description: str = "", created_by: int | None = None
    ) -> DebateData:
        """
        Create a new debate.

        Args:
            title: Debate title
            description: Optional longer description
            created_by: ID of the user creating the debate

        Returns:
            The stored debate row
        """
        created_at = utc_timestamp()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO debates (title, description, created_by, created_at)
                VALUES (?, ?, ?, ?)
            """,
                (title, description, created_by, created_at),
            )

            debate_id = cursor.lastrowid
            if debate_id is None:
                raise RuntimeError("Failed to get debate ID from database")

            conn.commit()
            logger.info(f"Created debate {debate_id}: {title}")

        return {
            "id": debate_id,
            "title": title,
            "description": description,
            "created_by": created_by,
            "created_at": created_at,
        }

    def get_debate(self, debate_id: int) -> DebateData | None:
        """Get a debate by ID, or None if it does not exist."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM debates WHERE id = ?", (debate_id,))
            row = cursor.fetchone()

            if not row:
                return None

            return self._debate_row(row)

    def list_debates(self) -> list[DebateData]:
        """List all debates, newest first."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM debates ORDER BY created_at DESC, id DESC")
            return [self._debate_row(row) for row in cursor.fetchall()]

    def add_argument(
        self,
        debate_id: int,
        side: Side,
        text: str,
        author_name: str,
        user_id: int | None = None,
    ) -> ArgumentData:
        """
        Add an argument to a debate.

        Raises:
            sqlite3.IntegrityError: If the debate does not exist
        """
        created_at = utc_timestamp()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO arguments (debate_id, side, text, author_name, user_id, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
            """,
                (debate_id, side.value, text, author_name, user_id, created_at),
            )

            argument_id = cursor.lastrowid
            if argument_id is None:
                raise RuntimeError("Failed to get argument ID from database")

            conn.commit()
            logger.info(f"Added {side.value} argument {argument_id} to debate {debate_id}")

        return {
            "id": argument_id,
            "debate_id": debate_id,
            "side": side.value,
            "text": text,
            "author_name": author_name,
            "user_id": user_id,
            "created_at": created_at,
        }

    def list_arguments(self, debate_id: int) -> list[ArgumentData]:
        """List a debate's arguments, oldest first."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT * FROM arguments WHERE debate_id = ?
                ORDER BY created_at, id
            """,
                (debate_id,),
            )
            return [self._argument_row(row) for row in cursor.fetchall()]

    def list_arguments_for_debates(
        self, debate_ids: Iterable[int]
    ) -> dict[int, list[ArgumentData]]:
        """Fetch the arguments of several debates in one query, grouped by debate."""
        wanted = set(debate_ids)
        if not wanted:
            return {}

        grouped: dict[int, list[ArgumentData]] = {}

        with self._get_connection() as conn:
            cursor = conn.cursor()
            # No IN list: id counts can exceed the SQLite variable limit
            cursor.execute("SELECT * FROM arguments ORDER BY created_at, id")
            for row in cursor.fetchall():
                data = self._argument_row(row)
                if data["debate_id"] in wanted:
                    grouped.setdefault(data["debate_id"], []).append(data)

        return grouped
