"""
Movie catalog models.
"""
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlmodel import JSON, Column, Field, SQLModel


class Movie(SQLModel, table=True):
    """
    A catalog entry. Titles and TMDB ids are unique.
    """
    __tablename__ = "movies"  # type: ignore

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(unique=True, index=True, max_length=255)
    release_date: date
    genres: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    duration: int = Field(ge=1)  # minutes
    trending: bool = Field(default=False, index=True)
    rating: Optional[float] = Field(default=None, ge=0, le=10)
    image_url: Optional[str] = None
    description: Optional[str] = None
    classification: Optional[str] = Field(default=None, max_length=32)
    tmdb_id: Optional[int] = Field(default=None, unique=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column_kwargs={"onupdate": lambda: datetime.now(timezone.utc)},
    )
