"""
User schemas for API request/response validation.
Separates internal models from API contracts using Pydantic.
None of the outward-facing schemas carry the password hash.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.user import UserRole
from app.schemas.common import CamelModel


class SignupRequest(CamelModel):
    """Schema for user registration."""

    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)


class LoginRequest(BaseModel):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class UserSummary(CamelModel):
    """User projection returned by signup."""

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class SignupResponse(CamelModel):
    """Schema for the signup response: the new user and a ready-to-use token."""

    user: UserSummary
    token: str


class UserResponse(UserSummary):
    """
    Schema for user data in API responses.
    Excludes sensitive information like hashed_password.
    """

    id: int
    role: UserRole
    created_at: datetime
    updated_at: datetime
