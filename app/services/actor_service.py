"""
Actor and cast services.
"""
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from app.core.errors import ErrorKind, ServiceResult
from app.core.logging import get_logger
from app.models.actor import Actor, Cast
from app.models.movie import Movie
from app.schemas.actor import ActorCreate, ActorUpdate, CastCreate
from app.services.movie_service import movie_not_found

logger = get_logger(__name__)


def actor_not_found(actor_id: int) -> str:
    return f"Actor with ID {actor_id} not found"


class ActorService:
    """CRUD for actors. Deleting an actor removes its cast entries."""

    def __init__(self, session: Session):
        self.session = session

    def list_actors(self) -> List[Actor]:
        query = select(Actor).order_by(col(Actor.popularity).desc(), col(Actor.id))
        return list(self.session.exec(query))

    def get_actor(self, actor_id: int) -> ServiceResult[Actor]:
        actor = self.session.get(Actor, actor_id)
        if actor is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, actor_not_found(actor_id))
        return ServiceResult.success(actor)

    def create_actor(self, actor_in: ActorCreate) -> ServiceResult[Actor]:
        actor = Actor(**actor_in.model_dump())
        self.session.add(actor)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if "unique" not in str(e.orig).lower():
                raise
            return ServiceResult.failure(ErrorKind.CONFLICT, "TMDB id already exists")
        self.session.refresh(actor)
        logger.info(f"Created actor {actor.id}")
        return ServiceResult.success(actor)

    def update_actor(self, actor_id: int, actor_in: ActorUpdate) -> ServiceResult[Actor]:
        found = self.get_actor(actor_id)
        if not found.ok:
            return found

        changes = actor_in.model_dump(exclude_unset=True)
        if not changes:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Request body cannot be empty")

        actor = found.unwrap()
        for key, value in changes.items():
            setattr(actor, key, value)
        self.session.add(actor)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if "unique" not in str(e.orig).lower():
                raise
            return ServiceResult.failure(ErrorKind.CONFLICT, "TMDB id already exists")
        self.session.refresh(actor)
        return ServiceResult.success(actor)

    def delete_actor(self, actor_id: int) -> ServiceResult[None]:
        found = self.get_actor(actor_id)
        if not found.ok:
            return ServiceResult.failure(found.error, found.message)  # type: ignore[arg-type]

        self.session.delete(found.unwrap())
        self.session.commit()
        logger.info(f"Deleted actor {actor_id}")
        return ServiceResult.success(None)


class CastService:
    """Manages the movie/actor link table."""

    def __init__(self, session: Session):
        self.session = session

    def list_cast(self, movie_id: int) -> ServiceResult[List[Cast]]:
        if self.session.get(Movie, movie_id) is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, movie_not_found(movie_id))
        query = select(Cast).where(Cast.movie_id == movie_id).order_by(col(Cast.id))
        return ServiceResult.success(list(self.session.exec(query)))

    def add_to_cast(self, movie_id: int, cast_in: CastCreate) -> ServiceResult[Cast]:
        """
        Link an existing actor to a movie.

        Returns:
            The cast entry, NOT_FOUND for a missing movie or actor, or
            CONFLICT if the actor is already in this movie's cast
        """
        if self.session.get(Movie, movie_id) is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, movie_not_found(movie_id))
        if self.session.get(Actor, cast_in.actor_id) is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, actor_not_found(cast_in.actor_id))

        entry = Cast(
            movie_id=movie_id,
            actor_id=cast_in.actor_id,
            role=cast_in.role,
            characters=list(cast_in.characters),
        )
        self.session.add(entry)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if "unique" not in str(e.orig).lower():
                raise
            return ServiceResult.failure(
                ErrorKind.CONFLICT, "Actor is already part of this movie's cast"
            )
        self.session.refresh(entry)
        logger.info(f"Added actor {cast_in.actor_id} to movie {movie_id}")
        return ServiceResult.success(entry)

    def remove_from_cast(self, movie_id: int, cast_id: int) -> ServiceResult[None]:
        entry = self.session.get(Cast, cast_id)
        if entry is None or entry.movie_id != movie_id:
            return ServiceResult.failure(
                ErrorKind.NOT_FOUND, f"Cast entry {cast_id} not found for movie {movie_id}"
            )
        self.session.delete(entry)
        self.session.commit()
        return ServiceResult.success(None)
