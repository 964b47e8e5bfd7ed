"""
Create a user (e.g. an admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password admin
"""
import argparse
import sys

from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlmodel import Session

from app.core.security import password_hasher
from app.db.session import create_db_and_tables, engine
from app.models.user import UserRole
from app.services.user_service import UserService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user outside the signup flow.")
    parser.add_argument("email", help="Email address used to log in")
    parser.add_argument("password", help="Password (at least 6 characters)")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.USER.value,
        choices=[role.value for role in UserRole],
    )
    args = parser.parse_args(argv)

    try:
        email = TypeAdapter(EmailStr).validate_python(args.email)
    except ValidationError:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if len(args.password) < 6:
        print("Password must be at least 6 characters.", file=sys.stderr)
        return 1

    create_db_and_tables()
    with Session(engine) as session:
        result = UserService(session).create(
            email=email,
            hashed_password=password_hasher.hash(args.password),
            role=UserRole(args.role),
        )
    if not result.ok:
        print(f"{result.message}: {email}", file=sys.stderr)
        return 1

    print(f"Created user '{email}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
