"""
Actor routes. Reads are public; writes require the admin role.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import SessionDep, guard
from app.schemas.actor import ActorCreate, ActorResponse, ActorUpdate
from app.services.actor_service import ActorService

router = APIRouter(prefix="/actors", tags=["actors"])


def get_actor_service(session: SessionDep) -> ActorService:
    return ActorService(session)


ActorServiceDep = Annotated[ActorService, Depends(get_actor_service)]


@router.get("", response_model=List[ActorResponse], dependencies=[Depends(guard("actors:list"))])
def list_actors(actors: ActorServiceDep) -> List[ActorResponse]:
    """List actors, most popular first."""
    return [ActorResponse.model_validate(a) for a in actors.list_actors()]


@router.get("/{actor_id}", response_model=ActorResponse, dependencies=[Depends(guard("actors:get"))])
def get_actor(actor_id: int, actors: ActorServiceDep) -> ActorResponse:
    return ActorResponse.model_validate(actors.get_actor(actor_id).unwrap())


@router.post(
    "",
    response_model=ActorResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(guard("actors:create"))],
)
def create_actor(actor_in: ActorCreate, actors: ActorServiceDep) -> ActorResponse:
    return ActorResponse.model_validate(actors.create_actor(actor_in).unwrap())


@router.patch(
    "/{actor_id}",
    response_model=ActorResponse,
    dependencies=[Depends(guard("actors:update"))],
)
def update_actor(actor_id: int, actor_in: ActorUpdate, actors: ActorServiceDep) -> ActorResponse:
    return ActorResponse.model_validate(actors.update_actor(actor_id, actor_in).unwrap())


@router.delete(
    "/{actor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(guard("actors:delete"))],
)
def delete_actor(actor_id: int, actors: ActorServiceDep) -> Response:
    """Delete an actor; its cast entries go with it."""
    actors.delete_actor(actor_id).unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
