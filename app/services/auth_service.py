"""
Authentication service: credential validation, token issuance and signup.
Collaborators are passed in by the caller; nothing here knows about HTTP.
"""

from typing import Any, Optional

from app.core.errors import ServiceResult
from app.core.logging import get_logger
from app.core.security import PasswordHasher, TokenIssuer
from app.models.user import User, UserRole
from app.schemas.token import LoginResponse
from app.schemas.user import SignupRequest, SignupResponse, UserSummary
from app.services.user_service import UserService

logger = get_logger(__name__)


class AuthService:
    """
    Turns raw credentials into a validated user or a rejection, and
    signup requests into a persisted user plus an issued token.
    """

    def __init__(self, users: UserService, hasher: PasswordHasher, issuer: TokenIssuer):
        self.users = users
        self.hasher = hasher
        self.issuer = issuer

    def validate_user(self, email: str, password: str) -> Optional[User]:
        """
        Check an email/password pair against the stored hash.

        Returns:
            The full user record (hash included; do not expose it) on a match,
            None when the user is unknown or the password is wrong
        """
        user = self.users.get_by_email(email)
        if user is None:
            return None
        if not self.hasher.verify(password, user.hashed_password):
            return None
        return user

    @staticmethod
    def build_claims(user: User) -> dict[str, Any]:
        """Claims embedded in every access token."""
        return {"sub": user.id, "email": user.email}

    def login(self, user: User) -> LoginResponse:
        """Issue an access token for an already-validated user."""
        return LoginResponse(access_token=self.issuer.issue(self.build_claims(user)))

    def signup(self, request: SignupRequest) -> ServiceResult[SignupResponse]:
        """
        Register a new user with role ``user`` and issue a token for it.

        Returns:
            The user projection (no password hash) and token, or a CONFLICT
            result when the email is already registered. Other store failures
            propagate.
        """
        result = self.users.create(
            email=request.email,
            hashed_password=self.hasher.hash(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
            role=UserRole.USER,
        )
        if not result.ok:
            return ServiceResult.failure(result.error, result.message)  # type: ignore[arg-type]

        user = result.unwrap()
        logger.info(f"New user registered (ID: {user.id})")
        return ServiceResult.success(
            SignupResponse(
                user=UserSummary.model_validate(user),
                token=self.issuer.issue(self.build_claims(user)),
            )
        )
