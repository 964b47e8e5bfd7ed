"""
User routes for the authenticated caller's profile.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import guard
from app.models.user import User
from app.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_current_user_profile(
    current_user: Annotated[User, Depends(guard("users:me"))],
) -> UserResponse:
    """
    Get current user's profile.
    Any authenticated identity may call this; no role is required.
    """
    return UserResponse.model_validate(current_user)
