"""
Credential store for user records.
Wraps the users table: lookup by email or id, and creation with an
email uniqueness check that also holds under concurrent signups.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.errors import ErrorKind, ServiceResult
from app.core.logging import get_logger
from app.models.user import User, UserRole

logger = get_logger(__name__)

EMAIL_EXISTS_MESSAGE = "Email already exists"


class UserService:
    """Service class for user persistence."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email address.

        Args:
            email: Email address to search for (exact match)

        Returns:
            User if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID."""
        return self.session.get(User, user_id)

    def create(
        self,
        email: str,
        hashed_password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> ServiceResult[User]:
        """
        Persist a new user.

        The existence check covers the common case; the unique index on
        ``email`` covers two signups racing past it.

        Returns:
            The created user, or a CONFLICT result if the email is taken
        """
        if self.get_by_email(email) is not None:
            return ServiceResult.failure(ErrorKind.CONFLICT, EMAIL_EXISTS_MESSAGE)

        db_user = User(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
        self.session.add(db_user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if "unique" not in str(e.orig).lower():
                raise
            logger.warning("Unique constraint hit while creating user")
            return ServiceResult.failure(ErrorKind.CONFLICT, EMAIL_EXISTS_MESSAGE)
        self.session.refresh(db_user)
        return ServiceResult.success(db_user)
