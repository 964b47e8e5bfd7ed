"""
Authentication routes for signup and login.
Provides JWT bearer-token authentication.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, guard
from app.core.errors import ErrorKind, http_error
from app.core.logging import get_logger
from app.schemas.token import LoginResponse
from app.schemas.user import LoginRequest, SignupRequest, SignupResponse
from app.services.auth_service import AuthService

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(guard("auth:signup"))],
)
def signup(
    signup_in: SignupRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> SignupResponse:
    """
    Register a new user with role ``user``.

    Returns:
        The new user (without password) and an access token

    Raises:
        HTTPException: 409 if the email is already registered
    """
    result = auth_service.signup(signup_in)
    if not result.ok:
        logger.warning(f"Signup rejected: {result.message}")
    return result.unwrap()


@router.post(
    "/login",
    response_model=LoginResponse,
    dependencies=[Depends(guard("auth:login"))],
)
def login(
    login_in: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Exchange email and password for an access token.

    The same 401 message is returned whether the email is unknown or the
    password is wrong.
    """
    user = auth_service.validate_user(login_in.email, login_in.password)
    if user is None:
        logger.warning("Failed login attempt")
        raise http_error(ErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)

    logger.info(f"User logged in (ID: {user.id})", extra={"user_id": user.id})
    return auth_service.login(user)
