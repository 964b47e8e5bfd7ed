"""
Database session management using SQLModel.
Provides the engine, table creation and the per-request session dependency.
"""

from typing import Generator

from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings

if settings.is_sqlite:
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URI,
        echo=settings.DEBUG,
        connect_args={"check_same_thread": False},  # Allow multi-threading for SQLite
    )
else:
    # pool_pre_ping ensures connections are alive before using them
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URI,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def create_db_and_tables() -> None:
    """Create all tables registered on the SQLModel metadata."""
    # Imported for their side effect of registering tables
    from app.models import actor, movie, user  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session for FastAPI routes.

    Yields:
        Database session instance
    """
    with Session(engine) as session:
        yield session
