"""
Movie catalog routes.
Reads and search are public; create, update and delete require the admin role.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import SessionDep, guard
from app.schemas.actor import CastCreate, CastResponse
from app.schemas.movie import (
    MovieCreate,
    MovieResponse,
    MovieSearchRequest,
    MovieSearchResponse,
    MovieUpdate,
)
from app.services.actor_service import CastService
from app.services.movie_service import MovieService

router = APIRouter(prefix="/movies", tags=["movies"])


def get_movie_service(session: SessionDep) -> MovieService:
    return MovieService(session)


def get_cast_service(session: SessionDep) -> CastService:
    return CastService(session)


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
CastServiceDep = Annotated[CastService, Depends(get_cast_service)]


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(guard("movies:create"))],
)
def create_movie(movie_in: MovieCreate, movies: MovieServiceDep) -> MovieResponse:
    """Create a new movie (admin only)."""
    return MovieResponse.model_validate(movies.create_movie(movie_in).unwrap())


@router.get(
    "",
    response_model=List[MovieResponse],
    dependencies=[Depends(guard("movies:list"))],
)
def list_movies(movies: MovieServiceDep) -> List[MovieResponse]:
    """List all movies, newest first."""
    return [MovieResponse.model_validate(m) for m in movies.list_movies()]


@router.post(
    "/search",
    response_model=MovieSearchResponse,
    dependencies=[Depends(guard("movies:search"))],
)
def search_movies(search_in: MovieSearchRequest, movies: MovieServiceDep) -> MovieSearchResponse:
    """Paginated case-insensitive search on title and description."""
    return movies.search(search_in)


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    dependencies=[Depends(guard("movies:get"))],
)
def get_movie(movie_id: int, movies: MovieServiceDep) -> MovieResponse:
    return MovieResponse.model_validate(movies.get_movie(movie_id).unwrap())


@router.patch(
    "/{movie_id}",
    response_model=MovieResponse,
    dependencies=[Depends(guard("movies:update"))],
)
def update_movie(movie_id: int, movie_in: MovieUpdate, movies: MovieServiceDep) -> MovieResponse:
    """Update the fields present in the body (admin only)."""
    return MovieResponse.model_validate(movies.update_movie(movie_id, movie_in).unwrap())


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(guard("movies:delete"))],
)
def delete_movie(movie_id: int, movies: MovieServiceDep) -> Response:
    """Delete a movie and its cast entries (admin only)."""
    movies.delete_movie(movie_id).unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{movie_id}/cast",
    response_model=List[CastResponse],
    dependencies=[Depends(guard("cast:list"))],
)
def list_cast(movie_id: int, cast: CastServiceDep) -> List[CastResponse]:
    return [CastResponse.model_validate(c) for c in cast.list_cast(movie_id).unwrap()]


@router.post(
    "/{movie_id}/cast",
    response_model=CastResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(guard("cast:create"))],
)
def add_to_cast(movie_id: int, cast_in: CastCreate, cast: CastServiceDep) -> CastResponse:
    """Link an existing actor to the movie (admin only)."""
    return CastResponse.model_validate(cast.add_to_cast(movie_id, cast_in).unwrap())


@router.delete(
    "/{movie_id}/cast/{cast_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(guard("cast:delete"))],
)
def remove_from_cast(movie_id: int, cast_id: int, cast: CastServiceDep) -> Response:
    cast.remove_from_cast(movie_id, cast_id).unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
