"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from debate_hall.database import DatabaseManager
from debate_hall.models import Argument
from debate_hall.types import Side
from web.auth_database import AuthDatabaseManager


# =============================================================================
# SHARED FIXTURES - Available to all test modules
# =============================================================================


@pytest.fixture
def make_argument():
    """Build arguments with increasing timestamps."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(side: Side, text: str, author: str) -> Argument:
        counter["n"] += 1
        return Argument(
            side=side,
            text=text,
            author_name=author,
            created_at=start + timedelta(minutes=counter["n"]),
        )

    return _make


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a fresh SQLite database file."""
    return tmp_path / "debates.db"


@pytest.fixture
def debate_db(db_path: Path) -> DatabaseManager:
    return DatabaseManager(db_path)


@pytest.fixture
def auth_db(db_path: Path) -> AuthDatabaseManager:
    return AuthDatabaseManager(db_path)


@pytest.fixture
def client(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    debate_db: DatabaseManager,
    auth_db: AuthDatabaseManager,
) -> Iterator[TestClient]:
    """API client backed by a temporary database."""
    monkeypatch.setenv("DEBATE_HALL_CONFIG", str(tmp_path / "missing.json"))
    monkeypatch.setenv("JWT_SECRET_KEY", "test-secret")

    from web.api import app
    from web.dependencies import get_auth_db, get_debate_db

    app.dependency_overrides[get_debate_db] = lambda: debate_db
    app.dependency_overrides[get_auth_db] = lambda: auth_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client: TestClient):
    """Register a user and return Authorization headers for them."""

    def _login(username: str = "alice", password: str = "SecurePass123") -> dict[str, str]:
        response = client.post(
            "/api/auth/register", json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text

        response = client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
def auth_headers(register_and_login) -> dict[str, str]:
    return register_and_login()


# =============================================================================
# PYTEST CONFIGURATION HOOKS
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
