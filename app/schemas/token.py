"""
Token schemas for JWT authentication.
"""

from pydantic import BaseModel, ConfigDict, Field


class LoginResponse(BaseModel):
    """Schema for the login response."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(serialization_alias="accessToken")


class TokenClaims(BaseModel):
    """Schema for decoded JWT claims."""

    sub: int
    email: str
    iat: int | None = None
    exp: int | None = None
