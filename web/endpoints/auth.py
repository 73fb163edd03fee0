"""Authentication endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.status import HTTP_201_CREATED, HTTP_401_UNAUTHORIZED, HTTP_409_CONFLICT

from web.auth_database import AuthDatabaseManager
from web.auth_schemas import (
    AuthErrorResponse, CurrentUserResponse, ErrorResponse, LoginResponse,
    LoginSchema, RegistrationResponse, UserInfoSchema, UserRegistrationSchema
)
from web.auth_utils import (
    AuthenticationError, JWTUtils, PasswordUtils, get_current_user, log_security_event
)
from web.dependencies import get_auth_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth")


@router.post("/register", response_model=RegistrationResponse, status_code=HTTP_201_CREATED,
          responses={409: {"model": ErrorResponse}})
async def register(
    request: Request,
    user_data: UserRegistrationSchema,
    auth_db: AuthDatabaseManager = Depends(get_auth_db),
):
    """Register a new user account."""
    try:
        if auth_db.username_exists(user_data.username):
            log_security_event("registration_failed", {"username": user_data.username, "reason": "username_taken"}, request)
            raise HTTPException(status_code=HTTP_409_CONFLICT, detail="Username already taken")

        password_hash = PasswordUtils.hash_password(user_data.password)
        user_id = auth_db.create_user(user_data.username, password_hash)

        log_security_event("registration_success", {"username": user_data.username, "user_id": user_id}, request)
        return RegistrationResponse(message="User registered", user_id=user_id)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=500, detail="Registration failed")


@router.post("/login", response_model=LoginResponse,
          responses={401: {"model": AuthErrorResponse}})
async def login(
    request: Request,
    login_data: LoginSchema,
    auth_db: AuthDatabaseManager = Depends(get_auth_db),
):
    """Check credentials and issue a bearer token."""
    try:
        user = auth_db.get_user_by_username(login_data.username)
        if not user:
            log_security_event("login_failed", {"username": login_data.username, "reason": "user_not_found"}, request)
            raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        if not PasswordUtils.verify_password(login_data.password, user["password_hash"]):
            log_security_event("login_failed", {"username": login_data.username, "reason": "invalid_password"}, request)
            raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        token = JWTUtils.create_access_token(user["id"], user["username"])

        log_security_event("login_success", {"username": user["username"], "user_id": user["id"]}, request)
        return LoginResponse(
            message="Login successful",
            token=token,
            user=UserInfoSchema(id=user["id"], username=user["username"]),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Login failed")


@router.get("/me", response_model=CurrentUserResponse,
         responses={401: {"model": AuthErrorResponse}})
async def get_current_user_info(
    current_user: dict = Depends(get_current_user),
    auth_db: AuthDatabaseManager = Depends(get_auth_db),
):
    """Get current authenticated user information."""
    try:
        user = auth_db.get_user_by_id(current_user["id"])
        if not user:
            raise AuthenticationError("User not found")

        return CurrentUserResponse(
            id=user["id"],
            username=user["username"],
            created_at=user["created_at"],
        )

    except AuthenticationError:
        raise
    except Exception as e:
        logger.error(f"Get current user error: {e}")
        raise HTTPException(status_code=500, detail="Failed to get user information")
