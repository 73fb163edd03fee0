"""Authentication utilities for JWT bearer tokens and password hashing."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from fastapi import HTTPException, Request
from jose import JWTError, jwt
from starlette.status import HTTP_401_UNAUTHORIZED

from config.settings import AuthConfig, get_default_config

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# bcrypt only accepts passwords up to 72 bytes
BCRYPT_MAX_PASSWORD_BYTES = 72

# Security logger for auth events
security_logger = logging.getLogger("security")


class AuthenticationError(HTTPException):
    """Custom exception for authentication failures."""

    def __init__(self, detail: str = "Authentication failed"):
        super().__init__(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def _auth_config() -> AuthConfig:
    return get_default_config().auth


class PasswordUtils:
    """Utilities for password hashing and verification."""

    @staticmethod
    def hash_password(password: str, rounds: int | None = None) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt(rounds=rounds or _auth_config().bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        if len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )


class JWTUtils:
    """Utilities for JWT token creation and validation."""

    @staticmethod
    def create_access_token(
        user_id: int, username: str, config: AuthConfig | None = None
    ) -> str:
        """
        Create a JWT access token for a user.

        Args:
            user_id: User's database ID
            username: User's username
            config: Auth settings, loaded from the app config when omitted

        Returns:
            JWT token string
        """
        config = config or _auth_config()
        now = datetime.now(timezone.utc)
        expire = now + timedelta(hours=config.jwt_expire_hours)

        payload = {
            "sub": str(user_id),
            "username": username,
            "exp": expire,
            "iat": now,
        }

        return jwt.encode(payload, config.jwt_secret_key, algorithm=config.jwt_algorithm)

    @staticmethod
    def decode_access_token(token: str, config: AuthConfig | None = None) -> dict[str, Any]:
        """
        Decode and validate a JWT access token.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        config = config or _auth_config()
        try:
            payload = jwt.decode(
                token, config.jwt_secret_key, algorithms=[config.jwt_algorithm]
            )
        except JWTError as e:
            security_logger.warning(f"JWT decode error: {e}")
            raise AuthenticationError("Invalid token")

        if "sub" not in payload or "username" not in payload:
            raise AuthenticationError("Invalid token")

        return payload


def get_token_from_header(request: Request) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing or not a bearer credential
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        raise AuthenticationError("No token")

    token = auth_header[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("No token")
    return token


def get_current_user_from_token(request: Request) -> dict[str, Any]:
    """Get current user information from the bearer token."""
    try:
        token = get_token_from_header(request)
        payload = JWTUtils.decode_access_token(token)

        return {
            "id": int(payload["sub"]),
            "username": payload["username"],
        }

    except AuthenticationError:
        security_logger.warning(
            f"Failed authentication attempt from IP: {request.client.host if request.client else 'unknown'}"
        )
        raise


# FastAPI dependency for protecting routes
async def get_current_user(request: Request) -> dict[str, Any]:
    """
    FastAPI dependency to get current authenticated user.

    Usage in route:
        @router.get("/protected")
        async def protected_route(current_user: dict = Depends(get_current_user)):
            return {"user": current_user}
    """
    return get_current_user_from_token(request)


def log_security_event(
    event_type: str, details: dict[str, Any], request: Request | None = None
):
    """
    Log security-related events for monitoring and auditing.

    Args:
        event_type: Type of security event (e.g., "login_attempt", "registration")
        details: Dictionary of event details (avoid sensitive data)
        request: Optional FastAPI request for IP logging
    """
    log_data = {
        "event_type": event_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **details,
    }

    if request and request.client:
        log_data["client_ip"] = request.client.host

    security_logger.info(f"Security event: {log_data}")
