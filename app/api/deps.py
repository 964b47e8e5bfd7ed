"""
API dependencies for FastAPI dependency injection.
Builds services from their collaborators per request and exposes the
access guard chain as a per-route dependency.
"""

from typing import Annotated, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from app.core.access import rule_for
from app.core.security import PasswordHasher, TokenIssuer, password_hasher, token_issuer
from app.db.session import get_session
from app.models.user import User
from app.services.access_guard import AccessGuard
from app.services.auth_service import AuthService
from app.services.user_service import UserService

SessionDep = Annotated[Session, Depends(get_session)]

# auto_error=False so a missing header yields 401 from the guard, not 403 from FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_token_issuer() -> TokenIssuer:
    return token_issuer


def get_user_service(session: SessionDep) -> UserService:
    return UserService(session)


def get_auth_service(
    users: Annotated[UserService, Depends(get_user_service)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    return AuthService(users=users, hasher=hasher, issuer=issuer)


def get_access_guard(
    users: Annotated[UserService, Depends(get_user_service)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AccessGuard:
    return AccessGuard(issuer=issuer, users=users)


def guard(route_id: str) -> Callable[..., Optional[User]]:
    """
    Build the guard-chain dependency for a route.

    The route's rule is read from the access table on every request.
    The dependency returns the authenticated user, or None on public routes.

    Usage:
        @router.post("", dependencies=[Depends(guard("movies:create"))])
    """
    def check_access(
        access_guard: Annotated[AccessGuard, Depends(get_access_guard)],
        credentials: Annotated[
            Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
        ],
    ) -> Optional[User]:
        token = credentials.credentials if credentials else None
        return access_guard.check(rule_for(route_id), token).unwrap()

    check_access.__name__ = f"guard_{route_id.replace(':', '_')}"
    return check_access
