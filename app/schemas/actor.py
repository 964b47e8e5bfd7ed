"""
Actor and cast schemas.
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel


class ActorCreate(CamelModel):
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    nick_name: Optional[str] = Field(default=None, max_length=255)
    birthdate: Optional[date] = None
    popularity: Optional[float] = Field(default=0, ge=0)
    profile_image: Optional[str] = None
    tmdb_id: Optional[int] = None


class ActorUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    nick_name: Optional[str] = Field(default=None, max_length=255)
    birthdate: Optional[date] = None
    popularity: Optional[float] = Field(default=None, ge=0)
    profile_image: Optional[str] = None
    tmdb_id: Optional[int] = None


class ActorResponse(CamelModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nick_name: Optional[str] = None
    birthdate: Optional[date] = None
    popularity: Optional[float] = None
    profile_image: Optional[str] = None
    tmdb_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class CastCreate(CamelModel):
    """Link an existing actor to a movie."""
    actor_id: int
    role: str = Field(min_length=1, max_length=64)
    characters: List[str] = Field(default_factory=list)


class CastResponse(CamelModel):
    id: int
    movie_id: int
    actor_id: int
    role: str
    characters: List[str]
    actor: Optional[ActorResponse] = None
    created_at: datetime
