"""Pydantic schemas for authentication endpoints."""

import re

from pydantic import BaseModel, Field, field_validator

from web.auth_utils import BCRYPT_MAX_PASSWORD_BYTES


class UserRegistrationSchema(BaseModel):
    """Schema for user registration request."""

    username: str = Field(..., min_length=3, max_length=32, description="Desired username")
    password: str = Field(..., min_length=8, max_length=72, description="User's password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, username: str) -> str:
        """Validate username format and content."""
        # Username must be alphanumeric with optional underscores and hyphens
        if not re.match(r'^[a-zA-Z0-9_-]+$', username):
            raise ValueError("Username can only contain letters, numbers, underscores, and hyphens")

        if not username[0].isalnum():
            raise ValueError("Username must start with a letter or number")

        return username

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, password: str) -> str:
        """Reject passwords bcrypt cannot hash."""
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return password

    class Config:
        json_schema_extra = {
            "example": {
                "username": "alice",
                "password": "SecurePass123"
            }
        }


class LoginSchema(BaseModel):
    """Schema for user login request."""

    username: str = Field(..., min_length=1, description="User's username")
    password: str = Field(..., min_length=1, description="User's password")

    class Config:
        json_schema_extra = {
            "example": {
                "username": "alice",
                "password": "SecurePass123"
            }
        }


# Response schemas

class MessageResponse(BaseModel):
    """Generic message response schema."""

    message: str = Field(..., description="Response message")


class RegistrationResponse(MessageResponse):
    """Response schema for successful registration."""

    user_id: int = Field(..., description="Created user's ID")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "User registered",
                "user_id": 1
            }
        }


class UserInfoSchema(BaseModel):
    """Schema for user information in responses."""

    id: int = Field(..., description="User's database ID")
    username: str = Field(..., description="User's username")


class LoginResponse(BaseModel):
    """Response schema for successful login."""

    message: str = Field(..., description="Success message")
    token: str = Field(..., description="Bearer token for the Authorization header")
    token_type: str = Field(default="bearer")
    user: UserInfoSchema = Field(..., description="User information")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Login successful",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "user": {
                    "id": 1,
                    "username": "alice"
                }
            }
        }


class CurrentUserResponse(UserInfoSchema):
    """Response schema for current user information."""

    created_at: str = Field(..., description="Account creation time")


# Error response schemas

class ErrorResponse(BaseModel):
    """Generic error response schema."""

    detail: str = Field(..., description="Error description")


class AuthErrorResponse(BaseModel):
    """Authentication error response schema."""

    detail: str = Field(..., description="Authentication error description")

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Invalid credentials"
            }
        }
