"""
Route access table.

Every route is registered under an identifier such as ``"movies:create"``.
The table below maps identifiers to the access rule the guard chain applies.
Identifiers that are not listed require an authenticated identity.
"""

from dataclasses import dataclass, field
from enum import Enum

from app.models.user import UserRole


class AccessLevel(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ROLES = "roles"


@dataclass(frozen=True)
class AccessRule:
    """What a route requires of the caller."""

    level: AccessLevel
    roles: tuple[UserRole, ...] = field(default_factory=tuple)

    @property
    def is_public(self) -> bool:
        return self.level is AccessLevel.PUBLIC

    @property
    def requires_roles(self) -> bool:
        return self.level is AccessLevel.ROLES


PUBLIC = AccessRule(AccessLevel.PUBLIC)
AUTHENTICATED = AccessRule(AccessLevel.AUTHENTICATED)


def require_roles(*roles: UserRole) -> AccessRule:
    """Rule allowing only callers whose role is one of ``roles``."""
    if not roles:
        raise ValueError("require_roles needs at least one role")
    return AccessRule(AccessLevel.ROLES, tuple(roles))


ADMIN_ONLY = require_roles(UserRole.ADMIN)

ROUTE_ACCESS: dict[str, AccessRule] = {
    # auth
    "auth:login": PUBLIC,
    "auth:signup": PUBLIC,
    # health
    "health:check": PUBLIC,
    "health:db": PUBLIC,
    # users
    "users:me": AUTHENTICATED,
    # movies
    "movies:list": PUBLIC,
    "movies:get": PUBLIC,
    "movies:search": PUBLIC,
    "movies:create": ADMIN_ONLY,
    "movies:update": ADMIN_ONLY,
    "movies:delete": ADMIN_ONLY,
    # cast
    "cast:list": PUBLIC,
    "cast:create": ADMIN_ONLY,
    "cast:delete": ADMIN_ONLY,
    # actors
    "actors:list": PUBLIC,
    "actors:get": PUBLIC,
    "actors:create": ADMIN_ONLY,
    "actors:update": ADMIN_ONLY,
    "actors:delete": ADMIN_ONLY,
}


def rule_for(route_id: str) -> AccessRule:
    """Look up a route's rule, defaulting to AUTHENTICATED."""
    return ROUTE_ACCESS.get(route_id, AUTHENTICATED)
