"""
Movie schemas for catalog endpoints.
"""
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel


class MovieCreate(CamelModel):
    """Request to add a movie to the catalog."""
    title: str = Field(min_length=1, max_length=255)
    release_date: date
    genres: Optional[List[str]] = None
    duration: int = Field(ge=1)
    trending: bool = False
    rating: Optional[float] = Field(default=None, ge=0, le=10)
    image_url: Optional[str] = None
    description: Optional[str] = None
    classification: Optional[str] = Field(default=None, max_length=32)
    tmdb_id: Optional[int] = None


class MovieUpdate(CamelModel):
    """Partial update; only fields present in the request body are applied."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    release_date: Optional[date] = None
    genres: Optional[List[str]] = None
    duration: Optional[int] = Field(default=None, ge=1)
    trending: Optional[bool] = None
    rating: Optional[float] = Field(default=None, ge=0, le=10)
    image_url: Optional[str] = None
    description: Optional[str] = None
    classification: Optional[str] = Field(default=None, max_length=32)
    tmdb_id: Optional[int] = None

    @field_validator("title", "release_date", "duration", "trending")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """These columns may be omitted but not cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v


class MovieResponse(CamelModel):
    """Movie as returned by the API."""
    id: int
    title: str
    release_date: date
    genres: Optional[List[str]] = None
    duration: int
    trending: bool
    rating: Optional[float] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    classification: Optional[str] = None
    tmdb_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class MovieSearchRequest(CamelModel):
    """Search body: free-text query plus pagination."""
    query: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class MovieSearchResponse(CamelModel):
    """One page of search results."""
    data: List[MovieResponse]
    total: int
    page: int
    limit: int
    total_pages: int
