"""
Access guard chain.

Each request passes two ordered gates unless its route is public:

1. token gate: a present, well-formed, correctly signed, unexpired bearer
   token whose subject is a known user, else UNAUTHORIZED (401);
2. role gate: the route has no role requirement, or the user's role is in
   the required set, else FORBIDDEN (403).

Role evaluation never runs without a valid identity.
"""

from typing import Optional

from jose import JWTError

from app.core.access import AccessRule
from app.core.errors import ErrorKind, ServiceResult
from app.core.logging import get_logger
from app.core.security import TokenIssuer
from app.models.user import User, UserRole
from app.services.user_service import UserService

logger = get_logger(__name__)

NOT_AUTHENTICATED_MESSAGE = "Not authenticated"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class AccessGuard:
    """Evaluates a route's access rule against a request's bearer token."""

    def __init__(self, issuer: TokenIssuer, users: UserService):
        self.issuer = issuer
        self.users = users

    def authenticate(self, token: Optional[str]) -> ServiceResult[User]:
        """Resolve a bearer token to the user it was issued for."""
        if not token:
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, NOT_AUTHENTICATED_MESSAGE)

        try:
            claims = self.issuer.decode(token)
        except (JWTError, ValueError) as e:
            logger.warning(f"JWT validation failed: {e}")
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, INVALID_TOKEN_MESSAGE)

        user = self.users.get_by_id(claims.sub)
        if user is None:
            logger.warning(f"User {claims.sub} from token not found")
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, INVALID_TOKEN_MESSAGE)
        return ServiceResult.success(user)

    @staticmethod
    def authorize(rule: AccessRule, user: Optional[User]) -> ServiceResult[Optional[User]]:
        """
        Apply the role gate.

        A missing user on a role-restricted route is denied, never allowed.
        """
        if not rule.requires_roles:
            return ServiceResult.success(user)

        if user is None:
            return ServiceResult.failure(ErrorKind.FORBIDDEN, "User not authenticated")

        if user.role not in rule.roles:
            required = ", ".join(role.value for role in rule.roles)
            logger.warning(
                f"User {user.id} with role {UserRole(user.role).value} denied; requires {required}",
                extra={"user_id": user.id},
            )
            return ServiceResult.failure(
                ErrorKind.FORBIDDEN, f"Access denied. Required roles: {required}"
            )
        return ServiceResult.success(user)

    def check(self, rule: AccessRule, token: Optional[str]) -> ServiceResult[Optional[User]]:
        """
        Run the full chain for one request.

        Returns:
            The authenticated user (None for public routes) or the rejection
        """
        if rule.is_public:
            return ServiceResult.success(None)

        authenticated = self.authenticate(token)
        if not authenticated.ok:
            return ServiceResult.failure(authenticated.error, authenticated.message)  # type: ignore[arg-type]

        return self.authorize(rule, authenticated.value)
