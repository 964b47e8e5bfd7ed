"""
Actor and cast models.

Cast is the many-to-many link between movies and actors, carrying the
billing role and the characters played.
"""
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import JSON, Column, Field, Relationship, SQLModel


class Actor(SQLModel, table=True):
    """A person who can appear in the cast of movies."""
    __tablename__ = "actors"  # type: ignore

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    nick_name: Optional[str] = Field(default=None, max_length=255)
    birthdate: Optional[date] = None
    popularity: Optional[float] = Field(default=0)
    profile_image: Optional[str] = None
    tmdb_id: Optional[int] = Field(default=None, unique=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column_kwargs={"onupdate": lambda: datetime.now(timezone.utc)},
    )

    cast_entries: List["Cast"] = Relationship(
        back_populates="actor",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class Cast(SQLModel, table=True):
    """
    Link between a movie and an actor.
    An actor appears at most once per movie.
    """
    __tablename__ = "cast"  # type: ignore
    __table_args__ = (UniqueConstraint("movie_id", "actor_id", name="uq_cast_movie_actor"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    movie_id: int = Field(foreign_key="movies.id", index=True, ondelete="CASCADE")
    actor_id: int = Field(foreign_key="actors.id", index=True, ondelete="CASCADE")
    role: str = Field(max_length=64)  # e.g. "Lead", "Support"
    characters: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column_kwargs={"onupdate": lambda: datetime.now(timezone.utc)},
    )

    actor: Optional[Actor] = Relationship(back_populates="cast_entries")
