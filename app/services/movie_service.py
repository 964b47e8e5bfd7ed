"""
Movie service for catalog CRUD and search.
"""
import math
from typing import List

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from app.core.errors import ErrorKind, ServiceResult
from app.core.logging import get_logger
from app.models.actor import Cast
from app.models.movie import Movie
from app.schemas.movie import (
    MovieCreate,
    MovieResponse,
    MovieSearchRequest,
    MovieSearchResponse,
    MovieUpdate,
)

logger = get_logger(__name__)

TITLE_NOT_UNIQUE_MESSAGE = "Title must be unique"


def movie_not_found(movie_id: int) -> str:
    return f"Movie with ID {movie_id} not found"


class MovieService:
    """
    Service for managing catalog movies.
    Unique-constraint violations are reported as validation failures.
    """

    def __init__(self, session: Session):
        self.session = session

    def list_movies(self) -> List[Movie]:
        """All movies, newest first."""
        query = select(Movie).order_by(col(Movie.created_at).desc(), col(Movie.id).desc())
        return list(self.session.exec(query))

    def get_movie(self, movie_id: int) -> ServiceResult[Movie]:
        movie = self.session.get(Movie, movie_id)
        if movie is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, movie_not_found(movie_id))
        return ServiceResult.success(movie)

    def create_movie(self, movie_in: MovieCreate) -> ServiceResult[Movie]:
        """
        Add a movie to the catalog.

        Returns:
            The created movie, or a VALIDATION result on a duplicate title or TMDB id
        """
        movie = Movie(**movie_in.model_dump())
        self.session.add(movie)
        if not self._commit():
            return ServiceResult.failure(ErrorKind.VALIDATION, TITLE_NOT_UNIQUE_MESSAGE)
        self.session.refresh(movie)
        logger.info(f"Created movie {movie.id}", extra={"movie_id": movie.id})
        return ServiceResult.success(movie)

    def update_movie(self, movie_id: int, movie_in: MovieUpdate) -> ServiceResult[Movie]:
        """
        Apply the fields present in the request body.

        Returns:
            The updated movie, NOT_FOUND, or VALIDATION for an empty body or a duplicate title
        """
        found = self.get_movie(movie_id)
        if not found.ok:
            return found

        changes = movie_in.model_dump(exclude_unset=True)
        if not changes:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Request body cannot be empty")

        movie = found.unwrap()
        for key, value in changes.items():
            setattr(movie, key, value)
        self.session.add(movie)
        if not self._commit():
            return ServiceResult.failure(ErrorKind.VALIDATION, TITLE_NOT_UNIQUE_MESSAGE)
        self.session.refresh(movie)
        logger.info(f"Updated movie {movie_id}: {sorted(changes)}", extra={"movie_id": movie_id})
        return ServiceResult.success(movie)

    def delete_movie(self, movie_id: int) -> ServiceResult[None]:
        """Remove a movie together with its cast entries."""
        found = self.get_movie(movie_id)
        if not found.ok:
            return ServiceResult.failure(found.error, found.message)  # type: ignore[arg-type]

        for entry in list(self.session.exec(select(Cast).where(Cast.movie_id == movie_id))):
            self.session.delete(entry)
        self.session.delete(found.unwrap())
        self.session.commit()
        logger.info(f"Deleted movie {movie_id}", extra={"movie_id": movie_id})
        return ServiceResult.success(None)

    def search(self, search_in: MovieSearchRequest) -> MovieSearchResponse:
        """
        Case-insensitive search on title or description, one page at a time.
        """
        conditions = []
        if search_in.query:
            pattern = f"%{search_in.query}%"
            conditions.append(
                or_(col(Movie.title).ilike(pattern), col(Movie.description).ilike(pattern))
            )

        count_query = select(func.count()).select_from(Movie).where(*conditions)
        total = self.session.exec(count_query).one()

        query = (
            select(Movie)
            .where(*conditions)
            .order_by(col(Movie.created_at).desc(), col(Movie.id).desc())
            .offset((search_in.page - 1) * search_in.limit)
            .limit(search_in.limit)
        )
        movies = list(self.session.exec(query))

        return MovieSearchResponse(
            data=[MovieResponse.model_validate(m) for m in movies],
            total=total,
            page=search_in.page,
            limit=search_in.limit,
            total_pages=math.ceil(total / search_in.limit),
        )

    def _commit(self) -> bool:
        """Commit, returning False (after rollback) on a unique violation."""
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if "unique" not in str(e.orig).lower():
                raise
            logger.warning(f"Unique constraint hit on movies: {e.orig}")
            return False
        return True
