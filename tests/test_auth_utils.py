"""Tests for password hashing and bearer tokens."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from config.settings import AuthConfig
from web.auth_utils import AuthenticationError, JWTUtils, PasswordUtils

pytestmark = pytest.mark.unit


@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(jwt_secret_key="unit-test-secret", bcrypt_rounds=4)


def test_password_hash_round_trip():
    hashed = PasswordUtils.hash_password("SecurePass123", rounds=4)

    assert hashed != "SecurePass123"
    assert PasswordUtils.verify_password("SecurePass123", hashed)
    assert not PasswordUtils.verify_password("WrongPass123", hashed)


def test_token_contains_user(auth_config: AuthConfig):
    token = JWTUtils.create_access_token(5, "alice", auth_config)

    payload = JWTUtils.decode_access_token(token, auth_config)

    assert payload["sub"] == "5"
    assert payload["username"] == "alice"


def test_token_signed_with_other_secret_is_rejected(auth_config: AuthConfig):
    token = JWTUtils.create_access_token(5, "alice", AuthConfig(jwt_secret_key="other"))

    with pytest.raises(AuthenticationError) as exc_info:
        JWTUtils.decode_access_token(token, auth_config)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Invalid token"


def test_expired_token_is_rejected(auth_config: AuthConfig):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode(
        {"sub": "5", "username": "alice", "exp": past, "iat": past - timedelta(hours=1)},
        auth_config.jwt_secret_key,
        algorithm=auth_config.jwt_algorithm,
    )

    with pytest.raises(AuthenticationError):
        JWTUtils.decode_access_token(token, auth_config)


def test_token_without_username_is_rejected(auth_config: AuthConfig):
    token = jwt.encode({"sub": "5"}, auth_config.jwt_secret_key, algorithm="HS256")

    with pytest.raises(AuthenticationError):
        JWTUtils.decode_access_token(token, auth_config)
