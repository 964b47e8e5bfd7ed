"""
Security primitives for password hashing and JWT token management.

Default hashing uses ``pbkdf2_sha256`` with a fixed round count for stable
cross-platform behavior in tests and local development. ``bcrypt`` verification
is still supported so hashes created by other tooling keep working.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import jwt
from passlib.context import CryptContext

from app.core.config import settings
from app.schemas.token import TokenClaims


class PasswordHasher:
    """One-way salted password hashing with a fixed cost factor."""

    def __init__(self, rounds: int = settings.PASSWORD_HASH_ROUNDS):
        self._context = CryptContext(
            schemes=["pbkdf2_sha256", "bcrypt"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a password using the configured default scheme.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password
            hashed_password: The hashed password to compare against

        Returns:
            True if password matches, False otherwise (including unreadable hashes)
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False


class TokenIssuer:
    """Signs claims into bearer tokens and decodes them back."""

    def __init__(
        self,
        secret: str = settings.JWT_SECRET,
        algorithm: str = settings.JWT_ALGORITHM,
        expire_minutes: int = settings.JWT_EXPIRE_MINUTES,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def issue(self, claims: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed JWT access token.

        Args:
            claims: Payload to sign; ``sub`` is converted to a string as JWT requires
            expires_delta: Optional custom expiration time

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self._expire_minutes))

        to_encode = dict(claims)
        if "sub" in to_encode:
            to_encode["sub"] = str(to_encode["sub"])
        to_encode.update({"iat": now, "exp": expire})
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Raises:
            JWTError: If the token is malformed, badly signed or expired
            ValueError: If the payload lacks a numeric subject or an email
        """
        payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        return TokenClaims.model_validate(payload)


password_hasher = PasswordHasher()
token_issuer = TokenIssuer()
