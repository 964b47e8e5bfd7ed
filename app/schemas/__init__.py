"""Pydantic schemas for request/response validation."""

from app.schemas.token import LoginResponse, TokenClaims
from app.schemas.user import (
    LoginRequest,
    SignupRequest,
    SignupResponse,
    UserResponse,
    UserSummary,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "SignupRequest",
    "SignupResponse",
    "TokenClaims",
    "UserResponse",
    "UserSummary",
]
