"""
Application configuration management using Pydantic Settings.
All settings can be overridden via environment variables.
"""

from typing import Any, List

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Placeholders shipped as defaults; startup warns while either is still in use.
DEFAULT_JWT_SECRET = "defaultSecretKey"
DEFAULT_ADMIN_PASSWORD = "changethis"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    PROJECT_NAME: str = "Movie Catalog API"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = ""
    DEBUG: bool = False

    # Security
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60
    PASSWORD_HASH_ROUNDS: int = 29000

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Reject an empty signing secret."""
        if not v or not v.strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_EXPIRE_MINUTES", "PASSWORD_HASH_ROUNDS")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be a positive integer")
        return v

    # Database
    DATABASE_URL: str | None = None  # Use this verbatim if set (e.g., sqlite:///./movies.db)
    DB_HOST: str | None = None
    DB_PORT: int = 5432
    DB_USERNAME: str | None = None
    DB_PASSWORD: str | None = None
    DB_DATABASE: str | None = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Get database URI - supports both SQLite and PostgreSQL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        if self.DB_HOST and self.DB_USERNAME and self.DB_PASSWORD and self.DB_DATABASE:
            return (
                f"postgresql://{self.DB_USERNAME}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}"
            )

        # Default to SQLite for local dev if nothing is configured
        return "sqlite:///./movies.db"

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite database."""
        return self.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> List[str] | str:
        """Parse CORS origins from string or list."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # First admin (created on startup; the only way an admin comes to exist besides create_user)
    DISABLE_BOOTSTRAP_USERS: bool = False
    FIRST_ADMIN_EMAIL: str = "admin@example.com"
    FIRST_ADMIN_PASSWORD: str = DEFAULT_ADMIN_PASSWORD


settings = Settings()
